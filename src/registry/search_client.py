"""Azure AI Search 클라이언트 관리

작업자 인덱스에 접근하는 Azure AI Search 클라이언트의 초기화와 생명주기를 관리합니다.
싱글톤 패턴을 사용하여 전역적으로 하나의 클라이언트 저장소를 유지합니다.
"""

from __future__ import annotations

from typing import Any

from azure.core.credentials import AzureKeyCredential
from azure.search.documents import SearchClient

from ..utils.config import get_azure_credential, get_config
from ..utils.errors import ConfigError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class SearchClientManager:
    """Azure AI Search 클라이언트 관리자 (싱글톤)

    클라이언트 초기화 및 접근을 중앙에서 관리합니다.
    """

    _instance: SearchClientManager | None = None
    _clients: dict[str, Any] = {}  # SearchClient 또는 Mock 가능

    def __new__(cls) -> SearchClientManager:
        """싱글톤 인스턴스 생성"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def initialize(
        self, indexes: dict[str, dict[str, str | None]] | None = None
    ) -> None:
        """Azure AI Search 클라이언트 초기화

        indexes 파라미터가 없으면 config.py의 설정을 자동으로 사용합니다.
        api_key가 없는 인덱스는 DefaultAzureCredential로 인증합니다.

        Args:
            indexes: 인덱스별 설정 (선택사항)
                {
                    "workers": {
                        "endpoint": "https://...",
                        "api_key": "...",
                    }
                }

        Raises:
            ConfigError: endpoint가 없는 경우
        """
        if not indexes:
            search_settings = get_config().azure_search
            indexes = {
                search_settings.index_name: {
                    "endpoint": search_settings.endpoint,
                    "api_key": search_settings.api_key,
                }
            }

        for index_name, settings in indexes.items():
            endpoint = settings.get("endpoint")
            api_key = settings.get("api_key")

            if not endpoint:
                raise ConfigError(
                    f"인덱스 '{index_name}'의 endpoint가 필요합니다. "
                    "환경변수 AZURE_SEARCH_ENDPOINT를 설정하세요."
                )

            credential = (
                AzureKeyCredential(api_key) if api_key else get_azure_credential()
            )
            self._clients[index_name] = SearchClient(
                endpoint=endpoint,
                index_name=index_name,
                credential=credential,
            )

        logger.info(f"Azure AI Search 클라이언트 초기화 완료: {list(indexes.keys())}")

    def get_client(self, index_name: str) -> Any:
        """인덱스 이름으로 클라이언트를 가져옵니다.

        Args:
            index_name: 인덱스 이름

        Returns:
            SearchClient 또는 None (초기화되지 않은 경우)
        """
        return self._clients.get(index_name)

    def has_client(self, index_name: str) -> bool:
        """인덱스가 초기화되었는지 확인합니다."""
        return index_name in self._clients

    def clear(self) -> None:
        """모든 클라이언트를 제거합니다. (테스트용)"""
        self._clients.clear()
        logger.info("모든 Search 클라이언트 제거됨")


def get_search_client_manager() -> SearchClientManager:
    """SearchClientManager 싱글톤 인스턴스를 반환합니다.

    Examples:
        >>> manager = get_search_client_manager()
        >>> manager.initialize()
        >>> client = manager.get_client("workers")
    """
    return SearchClientManager()
