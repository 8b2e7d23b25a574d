"""작업자 레지스트리 모듈.

외부 저장소 어댑터와 작업자 스냅샷 캐시를 제공합니다.
"""

from .cache import RegistryCache, Snapshot, build_snapshot
from .demo_workers import DEMO_WORKERS
from .models import DEFAULT_LOCATION, GeoPoint, WorkerRecord
from .search_client import SearchClientManager, get_search_client_manager
from .store import AzureSearchRegistryStore, InMemoryRegistryStore, RegistryStore

__all__ = [
    "RegistryCache",
    "Snapshot",
    "build_snapshot",
    "DEMO_WORKERS",
    "DEFAULT_LOCATION",
    "GeoPoint",
    "WorkerRecord",
    "SearchClientManager",
    "get_search_client_manager",
    "AzureSearchRegistryStore",
    "InMemoryRegistryStore",
    "RegistryStore",
]
