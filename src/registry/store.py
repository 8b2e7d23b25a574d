"""작업자 레지스트리 저장소 어댑터

외부 저장소에서 원시 작업자 레코드 전체를 가져오는 어댑터들을 제공합니다.
기본값 적용과 검증은 RegistryCache가 담당합니다.
"""

from __future__ import annotations

import asyncio
from typing import Any, Protocol

from ..utils.errors import SearchError
from ..utils.logger import get_logger
from .search_client import get_search_client_manager

logger = get_logger(__name__)

# 작업자 인덱스에서 조회할 필드
WORKER_FIELDS = ["id", "name", "skill", "phone", "available", "location"]


class RegistryStore(Protocol):
    """작업자 레지스트리 저장소 인터페이스."""

    async def fetch_all(self) -> list[dict[str, Any]]:
        """모든 원시 작업자 레코드를 반환합니다. 실패 시 예외를 발생시킵니다."""
        ...


class InMemoryRegistryStore:
    """메모리에 고정된 원시 레코드를 제공하는 저장소.

    데모 모드와 테스트에서 사용합니다.
    """

    def __init__(self, records: list[dict[str, Any]] | None = None):
        self.records = list(records or [])

    def replace(self, records: list[dict[str, Any]]) -> None:
        """저장된 레코드 전체를 교체합니다."""
        self.records = list(records)

    async def fetch_all(self) -> list[dict[str, Any]]:
        return [dict(record) for record in self.records]


class AzureSearchRegistryStore:
    """Azure AI Search 작업자 인덱스에서 레코드를 가져오는 저장소.

    SearchClient는 동기 API이므로 이벤트 루프를 막지 않도록
    별도 스레드에서 실행합니다.

    Examples:
        >>> manager = get_search_client_manager()
        >>> manager.initialize()
        >>> store = AzureSearchRegistryStore("workers")
        >>> records = await store.fetch_all()
    """

    def __init__(self, index_name: str = "workers"):
        self.index_name = index_name

    async def fetch_all(self) -> list[dict[str, Any]]:
        return await asyncio.to_thread(self._fetch_all_sync)

    def _fetch_all_sync(self) -> list[dict[str, Any]]:
        """전체 문서를 조회합니다.

        top을 지정하지 않으면 SDK 페이지 반복자가 모든 페이지를 순회합니다.

        Raises:
            SearchError: 클라이언트가 초기화되지 않은 경우
        """
        client = get_search_client_manager().get_client(self.index_name)
        if client is None:
            raise SearchError(
                f"Index '{self.index_name}' not initialized. "
                "Call SearchClientManager.initialize() first."
            )

        results = client.search(search_text="*", select=WORKER_FIELDS)

        documents = []
        for result in results:
            documents.append({key: result.get(key) for key in WORKER_FIELDS})

        logger.info(
            f"작업자 인덱스 조회 완료: index='{self.index_name}', records={len(documents)}"
        )
        return documents
