"""Local Matcher 테스트."""

from src.registry import DEMO_WORKERS, WorkerRecord, build_snapshot
from src.search import (
    SearchFilter,
    apply_filter,
    filter_by_categories,
    filter_by_query,
    matches_category,
    matches_query,
)
from src.taxonomy import SkillCategory

SNAPSHOT = build_snapshot(DEMO_WORKERS)


def worker(skill: str, name: str = "Test Worker") -> WorkerRecord:
    return WorkerRecord(id="t", name=name, skill_category=skill)


class TestMatchesQuery:
    """원문 검색어 매칭 테스트."""

    def test_matches_skill_substring_case_insensitive(self):
        assert matches_query("PLUMB", worker("Plumber"))

    def test_matches_name(self):
        assert matches_query("rajesh", worker("Plumber", name="Rajesh Kumar"))

    def test_sentence_does_not_match_skill(self):
        """원문 매칭은 검색어가 부분 문자열일 때만 성립합니다."""
        assert not matches_query("I need a plumber", worker("Plumber"))


class TestMatchesCategory:
    """양방향 포함 매칭 테스트."""

    def test_partial_token_matches_full_skill(self):
        assert matches_category("AC", worker("AC Repair"))

    def test_full_token_matches_partial_skill(self):
        assert matches_category("AC Repair", worker("AC"))

    def test_case_insensitive(self):
        assert matches_category("plumber", worker("PLUMBER"))

    def test_unrelated(self):
        assert not matches_category("Welder", worker("Painter"))


class TestFilters:
    """스냅샷 필터 테스트."""

    def test_filter_by_query_keeps_snapshot_order(self):
        result = filter_by_query("plumber", SNAPSHOT)

        assert [r.id for r in result] == ["1", "6"]

    def test_filter_by_categories_union(self):
        result = filter_by_categories(
            [SkillCategory.WELDER, SkillCategory.PLUMBER], SNAPSHOT
        )

        # 카테고리 순서가 아니라 스냅샷 순서
        assert [r.id for r in result] == ["1", "6", "9"]

    def test_filter_by_empty_categories_is_empty(self):
        assert filter_by_categories([], SNAPSHOT) == ()

    def test_apply_show_all(self):
        assert apply_filter(SearchFilter.show_all(), SNAPSHOT) == SNAPSHOT

    def test_apply_categories(self):
        result = apply_filter(
            SearchFilter.by_categories((SkillCategory.AC_REPAIR,)), SNAPSHOT
        )

        assert [r.name for r in result] == ["Ravi Deshmukh"]

    def test_apply_text(self):
        result = apply_filter(SearchFilter.by_text("electric"), SNAPSHOT)

        assert [r.id for r in result] == ["2", "7"]
