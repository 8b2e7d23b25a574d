"""Local Matcher - 결정적 부분 문자열 매칭.

분류기를 사용할 수 없을 때의 폴백이자 카테고리 필터의 기준이 됩니다.
모든 함수는 순수 함수이며 I/O가 없습니다.
"""

from collections.abc import Iterable

from ..registry import WorkerRecord
from ..taxonomy import SkillCategory
from .models import FilterMode, SearchFilter


def matches_query(query: str, record: WorkerRecord) -> bool:
    """원문 검색어가 작업자의 스킬 또는 이름에 포함되는지 확인합니다.

    Example:
        >>> matches_query("plumb", record)  # record.skill_category == "Plumber"
        True
    """
    needle = query.lower()
    return needle in record.skill_category.lower() or needle in record.name.lower()


def matches_category(token: str, record: WorkerRecord) -> bool:
    """카테고리 토큰과 작업자 스킬의 양방향 포함 여부를 확인합니다.

    "AC"는 "AC Repair"와, "AC Repair Expert"는 "AC Repair"와 일치합니다.
    """
    token = token.lower()
    skill = record.skill_category.lower()
    return token in skill or skill in token


def filter_by_query(
    query: str, records: Iterable[WorkerRecord]
) -> tuple[WorkerRecord, ...]:
    return tuple(record for record in records if matches_query(query, record))


def filter_by_categories(
    categories: Iterable[SkillCategory | str], records: Iterable[WorkerRecord]
) -> tuple[WorkerRecord, ...]:
    """카테고리 중 하나라도 일치하는 작업자를 레지스트리 순서대로 반환합니다.

    카테고리가 비어 있으면 빈 결과입니다.
    """
    tokens = [
        category.value if isinstance(category, SkillCategory) else category
        for category in categories
    ]
    if not tokens:
        return ()
    return tuple(
        record
        for record in records
        if any(matches_category(token, record) for token in tokens)
    )


def apply_filter(
    search_filter: SearchFilter, records: Iterable[WorkerRecord]
) -> tuple[WorkerRecord, ...]:
    """SearchFilter를 스냅샷에 적용합니다.

    Args:
        search_filter: 해석된 검색 필터
        records: 레지스트리 스냅샷

    Returns:
        스냅샷 순서를 유지하는 결과 튜플
    """
    if search_filter.mode == FilterMode.ALL:
        return tuple(records)
    if search_filter.mode == FilterMode.CATEGORIES:
        return filter_by_categories(search_filter.categories, records)
    return filter_by_query(search_filter.text, records)
