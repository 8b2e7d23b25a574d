"""작업자 검색 모듈.

로컬 매처, 검색 상태 모델, 세대 기반 Search Orchestrator를 제공합니다.
"""

from .matcher import (
    apply_filter,
    filter_by_categories,
    filter_by_query,
    matches_category,
    matches_query,
)
from .models import FilterMode, SearchFilter, SearchPhase, SearchState
from .orchestrator import SearchOrchestrator

__all__ = [
    "SearchOrchestrator",
    "SearchState",
    "SearchFilter",
    "SearchPhase",
    "FilterMode",
    "apply_filter",
    "filter_by_categories",
    "filter_by_query",
    "matches_category",
    "matches_query",
]
