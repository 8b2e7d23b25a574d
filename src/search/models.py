"""검색 상태 데이터 모델.

검색 필터와 표시 계층이 읽는 SearchState를 정의합니다.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..registry import WorkerRecord
from ..taxonomy import SkillCategory


class SearchPhase(str, Enum):
    """검색 상태 머신의 단계."""

    IDLE = "idle"
    SEARCHING = "searching"
    APPLIED = "applied"
    SUPERSEDED = "superseded"  # 더 최신 검색에 밀려 폐기됨 (호출 단위 결과)


class FilterMode(str, Enum):
    """검색 필터 종류."""

    ALL = "all"  # 빈 검색어: 전체 스냅샷
    CATEGORIES = "categories"  # 분류기가 추출한 카테고리
    TEXT = "text"  # 로컬 매처 (원문 부분 문자열)


class SearchFilter(BaseModel):
    """해석이 끝난 검색어.

    검색마다 한 번 만들어지며 refresh() 시 분류기 재호출 없이 재사용됩니다.
    """

    model_config = ConfigDict(frozen=True)

    mode: FilterMode = Field(default=FilterMode.ALL, description="필터 종류")
    categories: tuple[SkillCategory, ...] = Field(
        default=(), description="카테고리 필터 (mode=categories)"
    )
    text: str = Field(default="", description="원문 검색어 (mode=text)")

    @classmethod
    def show_all(cls) -> "SearchFilter":
        return cls(mode=FilterMode.ALL)

    @classmethod
    def by_categories(cls, categories: tuple[SkillCategory, ...]) -> "SearchFilter":
        return cls(mode=FilterMode.CATEGORIES, categories=categories)

    @classmethod
    def by_text(cls, text: str) -> "SearchFilter":
        return cls(mode=FilterMode.TEXT, text=text)


class SearchState(BaseModel):
    """표시 계층에 공개되는 검색 상태.

    SearchOrchestrator만 값을 변경하며, 적용은 await 없이 한 번에 이루어집니다.
    """

    raw_query: str = Field(default="", description="현재 검색어 (빈 문자열 = 전체 보기)")
    generation: int = Field(default=0, description="발행된 검색마다 1씩 증가")
    result_set: tuple[WorkerRecord, ...] = Field(
        default=(), description="검색 결과 (레지스트리 순서)"
    )
    no_results: bool = Field(default=False, description="비어 있지 않은 검색어의 결과가 0건")
    loading: bool = Field(default=False, description="최신 검색이 진행 중")
    phase: SearchPhase = Field(default=SearchPhase.IDLE, description="상태 머신 단계")
    applied_generation: int = Field(default=0, description="마지막으로 적용된 검색의 세대")
    active_filter: SearchFilter = Field(
        default_factory=SearchFilter.show_all, description="마지막으로 적용된 필터"
    )
    fallback_used: bool = Field(
        default=False, description="분류기 대신 로컬 매처가 사용되었는지 여부"
    )
    store_error: str | None = Field(default=None, description="마지막 갱신 실패 메시지")

    @property
    def result_count(self) -> int:
        return len(self.result_set)
