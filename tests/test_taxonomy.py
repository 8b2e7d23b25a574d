"""스킬 분류 체계 테스트."""

from src.taxonomy import (
    GENERAL_LABOR,
    SKILL_KEYWORDS,
    SkillCategory,
    category_names,
    describe_taxonomy,
    lookup_category,
)


class TestSkillCategory:
    """SkillCategory 정의 테스트."""

    def test_taxonomy_has_seven_categories(self):
        """원본 앱의 7개 카테고리가 모두 정의되어야 합니다."""
        assert category_names() == [
            "Plumber",
            "Electrician",
            "Carpenter",
            "Painter",
            "Mason",
            "AC Repair",
            "Welder",
        ]

    def test_every_category_has_keyword_hints(self):
        """모든 카테고리에 동의어 키워드가 있어야 합니다."""
        for category in SkillCategory:
            assert SKILL_KEYWORDS[category]

    def test_general_labor_is_not_a_category(self):
        """기본값 General Labor는 분류 대상 카테고리가 아닙니다."""
        assert GENERAL_LABOR == "General Labor"
        assert lookup_category(GENERAL_LABOR) is None


class TestLookupCategory:
    """lookup_category 함수 테스트."""

    def test_lookup_is_case_insensitive(self):
        assert lookup_category("plumber") == SkillCategory.PLUMBER
        assert lookup_category("AC REPAIR") == SkillCategory.AC_REPAIR

    def test_lookup_strips_whitespace(self):
        assert lookup_category("  Welder ") == SkillCategory.WELDER

    def test_lookup_requires_exact_name(self):
        """부분 일치는 허용하지 않습니다."""
        assert lookup_category("AC") is None
        assert lookup_category("Plumbers") is None


class TestDescribeTaxonomy:
    """describe_taxonomy 함수 테스트."""

    def test_lists_every_category_with_hints(self):
        description = describe_taxonomy()

        assert "- Plumber (water pipes, taps, bathroom, toilet, drainage)" in description
        assert "- AC Repair (air conditioner, cooling, AC service)" in description
        assert len(description.splitlines()) == len(SkillCategory)
