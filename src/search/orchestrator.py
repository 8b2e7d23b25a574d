"""Search Orchestrator - 검색 상태 머신."""

import asyncio
import logging
from typing import Any

from ..classifier import ClassifierAdapter
from ..registry import (
    DEMO_WORKERS,
    AzureSearchRegistryStore,
    InMemoryRegistryStore,
    RegistryCache,
    WorkerRecord,
    get_search_client_manager,
)
from ..utils.errors import StoreUnavailableError
from ..utils.logger import get_logger, log_with_context
from .matcher import apply_filter
from .models import FilterMode, SearchFilter, SearchPhase, SearchState

logger = get_logger(__name__)


class SearchOrchestrator:
    """검색어를 스킬 필터로 변환하고 결과를 SearchState에 게시합니다.

    플로우:
        1. search() 호출마다 generation 증가, loading 설정
        2. 빈 검색어는 전체 스냅샷, 그 외에는 분류기 호출
        3. 분류 결과 (또는 로컬 매처 폴백)로 RegistryCache 필터링
        4. 호출 시점의 generation이 여전히 최신일 때만 결과 적용

    분류 호출 중에도 새 search()를 바로 발행할 수 있으며,
    이전 세대의 결과는 적용되지 않고 폐기됩니다.
    """

    def __init__(self, cache: RegistryCache, classifier: ClassifierAdapter):
        """SearchOrchestrator를 초기화합니다.

        Args:
            cache: 작업자 레지스트리 캐시
            classifier: 스킬 분류기 어댑터
        """
        self.cache = cache
        self.classifier = classifier
        self.state = SearchState()
        self._tasks: set[asyncio.Task] = set()

        logger.info("SearchOrchestrator 초기화 완료")

    @property
    def all_workers(self) -> tuple[WorkerRecord, ...]:
        """필터가 적용되지 않은 전체 스냅샷."""
        return self.cache.current()

    async def initialize(self) -> None:
        """레지스트리를 처음 로드하고 마지막으로 적용된 필터를 표시합니다.

        로드 중에 검색이 없었다면 전체 작업자를 표시합니다. 로드 중에 시작된
        검색이 아직 진행 중이면 그 검색이 새 스냅샷으로 결과를 적용합니다.

        Raises:
            StoreUnavailableError: 최초 로드 실패 (표시할 데이터가 없음)
        """
        await self.cache.load()

        if self.state.loading:
            logger.info("진행 중인 검색이 있어 초기 결과 적용 생략")
            return

        self._apply(self.state.applied_generation, self.state.active_filter)

    async def search(self, query: str) -> SearchPhase:
        """검색어로 작업자를 검색합니다.

        Args:
            query: 사용자 검색어 (빈 문자열이면 전체 보기)

        Returns:
            SearchPhase.APPLIED (결과 적용) 또는 SearchPhase.SUPERSEDED (더 최신 검색에 밀림)

        Example:
            >>> orchestrator = SearchOrchestrator.create_default()
            >>> await orchestrator.initialize()
            >>> await orchestrator.search("I need a plumber")
            >>> print(orchestrator.state.result_count)
        """
        self.state.generation += 1
        generation = self.state.generation
        self.state.raw_query = query
        self.state.loading = True
        self.state.phase = SearchPhase.SEARCHING

        try:
            search_filter = await self._resolve_filter(query)
        except asyncio.CancelledError:
            if generation == self.state.generation:
                self.state.loading = False
                self.state.phase = SearchPhase.IDLE
            raise

        if generation != self.state.generation:
            log_with_context(
                logger,
                logging.INFO,
                "이전 검색 결과 폐기",
                generation=generation,
                latest=self.state.generation,
                query=query,
            )
            return SearchPhase.SUPERSEDED

        self._apply(generation, search_filter)
        return SearchPhase.APPLIED

    def submit(self, query: str) -> asyncio.Task:
        """search()를 백그라운드 Task로 예약하고 즉시 반환합니다.

        Returns:
            search() 결과를 담는 asyncio.Task
        """
        task = asyncio.create_task(self.search(query))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_idle(self) -> None:
        """submit()으로 예약된 모든 검색이 끝날 때까지 기다립니다."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def clear(self) -> SearchPhase:
        """검색어를 지우고 전체 작업자를 표시합니다."""
        return await self.search("")

    async def refresh(self) -> bool:
        """레지스트리를 다시 로드하고 마지막 필터를 새 스냅샷에 재적용합니다.

        분류기는 다시 호출하지 않습니다. 더 최신 검색이 진행 중이면 그 검색이
        새 스냅샷으로 필터링하므로 재적용을 생략합니다.

        Returns:
            갱신 성공 여부 (실패 시 이전 스냅샷과 결과 유지)

        Raises:
            StoreUnavailableError: 한 번도 로드에 성공하지 못한 상태에서 실패한 경우
        """
        try:
            await self.cache.refresh()
        except StoreUnavailableError as e:
            if not self.cache.is_loaded:
                raise
            self.state.store_error = str(e)
            logger.warning(f"레지스트리 갱신 실패, 이전 스냅샷 유지: {e}")
            return False

        self.state.store_error = None

        if self.state.loading:
            logger.info("진행 중인 검색이 있어 필터 재적용 생략")
            return True

        self._apply(self.state.applied_generation, self.state.active_filter)
        return True

    async def _resolve_filter(self, query: str) -> SearchFilter:
        """검색어를 SearchFilter로 해석합니다.

        Args:
            query: 사용자 검색어

        Returns:
            전체 보기 / 카테고리 / 원문 필터
        """
        if not query.strip():
            return SearchFilter.show_all()

        result = await self.classifier.extract_categories(query)

        if result.is_unavailable:
            log_with_context(
                logger,
                logging.INFO,
                "분류기 사용 불가, 로컬 매처 사용",
                query=query,
                reason=result.reason,
            )
            return SearchFilter.by_text(query.strip())

        # 카테고리 0개 (NONE)도 그대로 카테고리 필터: 빈 결과로 종료
        return SearchFilter.by_categories(result.categories)

    def _apply(self, generation: int, search_filter: SearchFilter) -> None:
        """필터 결과를 SearchState에 한 번에 적용합니다."""
        results = apply_filter(search_filter, self.cache.current())

        self.state.result_set = results
        self.state.no_results = not results and search_filter.mode != FilterMode.ALL
        self.state.active_filter = search_filter
        self.state.fallback_used = search_filter.mode == FilterMode.TEXT
        self.state.applied_generation = generation
        self.state.loading = False
        self.state.phase = SearchPhase.APPLIED

        log_with_context(
            logger,
            logging.INFO,
            "검색 결과 적용",
            generation=generation,
            mode=search_filter.mode.value,
            results=len(results),
            no_results=self.state.no_results,
        )

    @classmethod
    def create_default(
        cls,
        config: Any = None,
        chat_client: Any = None,
    ) -> "SearchOrchestrator":
        """설정에 따라 저장소, 캐시, 분류기를 구성합니다.

        Args:
            config: AppConfig (기본값: get_config())
            chat_client: 분류기용 ChatClient (기본값: 설정에서 생성)

        Returns:
            SearchOrchestrator 인스턴스 (initialize() 호출 전)

        Example:
            >>> orchestrator = SearchOrchestrator.create_default()
            >>> await orchestrator.initialize()
        """
        from ..utils.config import get_chat_client, get_config

        config = config or get_config()

        if config.registry.use_demo_data:
            store = InMemoryRegistryStore(DEMO_WORKERS)
            logger.info("데모 작업자 데이터 사용")
        else:
            get_search_client_manager().initialize()
            store = AzureSearchRegistryStore(index_name=config.azure_search.index_name)

        if config.classifier.enabled and chat_client is None:
            chat_client = get_chat_client(config)
        elif not config.classifier.enabled:
            chat_client = None

        classifier = ClassifierAdapter(
            chat_client,
            timeout_seconds=config.classifier.timeout_seconds,
        )

        logger.info("기본 SearchOrchestrator 생성 완료")

        return cls(cache=RegistryCache(store), classifier=classifier)
