"""스킬 분류 체계.

검색 매칭의 단위가 되는 고정된 스킬 카테고리와 동의어 키워드 힌트를 정의합니다.
프로세스 전역의 정적 설정이며 시작 이후에는 읽기 전용입니다.
"""

from enum import Enum


# 원본 레코드에 스킬이 없을 때 적용되는 기본값 (분류 체계에는 포함되지 않음)
GENERAL_LABOR = "General Labor"


class SkillCategory(str, Enum):
    """작업자 스킬 카테고리."""

    PLUMBER = "Plumber"
    ELECTRICIAN = "Electrician"
    CARPENTER = "Carpenter"
    PAINTER = "Painter"
    MASON = "Mason"
    AC_REPAIR = "AC Repair"
    WELDER = "Welder"


SKILL_KEYWORDS: dict[SkillCategory, tuple[str, ...]] = {
    SkillCategory.PLUMBER: ("water pipes", "taps", "bathroom", "toilet", "drainage"),
    SkillCategory.ELECTRICIAN: ("wiring", "lights", "fans", "switches", "power"),
    SkillCategory.CARPENTER: ("wood", "furniture", "doors", "cabinets"),
    SkillCategory.PAINTER: ("walls", "house painting", "whitewash"),
    SkillCategory.MASON: ("bricks", "cement", "construction", "tiles"),
    SkillCategory.AC_REPAIR: ("air conditioner", "cooling", "AC service"),
    SkillCategory.WELDER: ("metal", "iron", "gates", "grills"),
}

_BY_LOWER_NAME: dict[str, SkillCategory] = {
    category.value.lower(): category for category in SkillCategory
}


def lookup_category(name: str) -> SkillCategory | None:
    """카테고리 이름을 대소문자 구분 없이 정확히 일치하는 SkillCategory로 변환합니다.

    Args:
        name: 카테고리 이름 (예: "plumber", "AC REPAIR")

    Returns:
        일치하는 SkillCategory 또는 None

    Example:
        >>> lookup_category("ac repair")
        <SkillCategory.AC_REPAIR: 'AC Repair'>
    """
    return _BY_LOWER_NAME.get(name.strip().lower())


def category_names() -> list[str]:
    """분류 체계에 정의된 카테고리 이름 목록을 정의 순서대로 반환합니다."""
    return [category.value for category in SkillCategory]


def describe_taxonomy() -> str:
    """분류기 프롬프트에 삽입할 카테고리 목록을 생성합니다.

    Returns:
        "- Plumber (water pipes, taps, ...)" 형식의 여러 줄 문자열
    """
    lines = []
    for category in SkillCategory:
        hints = ", ".join(SKILL_KEYWORDS[category])
        lines.append(f"- {category.value} ({hints})")
    return "\n".join(lines)
