"""스킬 분류 체계 모듈.

작업자 검색에 사용되는 고정 스킬 카테고리를 제공합니다.
"""

from .skills import (
    GENERAL_LABOR,
    SKILL_KEYWORDS,
    SkillCategory,
    category_names,
    describe_taxonomy,
    lookup_category,
)

__all__ = [
    "GENERAL_LABOR",
    "SKILL_KEYWORDS",
    "SkillCategory",
    "category_names",
    "describe_taxonomy",
    "lookup_category",
]
