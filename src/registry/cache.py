"""작업자 레지스트리 캐시.

외부 저장소에서 읽어온 작업자 스냅샷을 메모리에 보관합니다.
스냅샷은 불변 튜플이며 로드할 때마다 통째로 교체됩니다.
"""

from datetime import datetime
from typing import Any

from ..utils.errors import StoreUnavailableError
from ..utils.logger import get_logger
from .models import WorkerRecord
from .store import RegistryStore

logger = get_logger(__name__)

Snapshot = tuple[WorkerRecord, ...]


def build_snapshot(raw_records: list[dict[str, Any]]) -> Snapshot:
    """원시 레코드 목록을 스냅샷으로 변환합니다.

    id 또는 name이 없는 레코드와 중복 id는 경고와 함께 제외합니다.
    중복 id는 먼저 나온 레코드를 유지합니다.

    Args:
        raw_records: 저장소에서 가져온 원시 레코드

    Returns:
        저장소 순서를 유지하는 WorkerRecord 튜플
    """
    records: list[WorkerRecord] = []
    seen_ids: set[str] = set()

    for raw in raw_records:
        if not isinstance(raw, dict):
            logger.warning(f"작업자 레코드 제외: dict가 아닌 항목 ({type(raw).__name__})")
            continue

        try:
            record = WorkerRecord.from_raw(raw)
        except (ValueError, TypeError) as e:
            logger.warning(f"작업자 레코드 제외: {e}")
            continue

        if record.id in seen_ids:
            logger.warning(f"중복된 작업자 id 제외: {record.id}")
            continue

        seen_ids.add(record.id)
        records.append(record)

    return tuple(records)


class RegistryCache:
    """작업자 레지스트리 스냅샷 캐시.

    - load(): 저장소 전체 조회 후 스냅샷을 원자적으로 교체
    - current(): 현재 스냅샷을 즉시 반환 (대기 없음)
    - refresh(): 요청 시 load() 재실행

    저장소 조회가 실패하면 이전 스냅샷을 유지하고 StoreUnavailableError를 발생시킵니다.
    여러 load()가 겹치면 더 나중에 시작한 load()가 이미 설치한 스냅샷을
    먼저 시작한 load()가 덮어쓰지 않습니다.
    """

    def __init__(self, store: RegistryStore):
        """RegistryCache를 초기화합니다.

        Args:
            store: 작업자 레지스트리 저장소
        """
        self.store = store
        self._snapshot: Snapshot = ()
        self._loaded = False
        self._load_seq = 0
        self._installed_seq = 0
        self.loaded_at: datetime | None = None

    @property
    def is_loaded(self) -> bool:
        """한 번이라도 로드에 성공했는지 여부."""
        return self._loaded

    def current(self) -> Snapshot:
        return self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)

    async def load(self) -> Snapshot:
        """저장소에서 전체 레코드를 가져와 스냅샷을 교체합니다.

        Returns:
            로드 후의 현재 스냅샷

        Raises:
            StoreUnavailableError: 저장소 조회 실패 (이전 스냅샷은 유지됨)
        """
        self._load_seq += 1
        seq = self._load_seq

        try:
            raw_records = await self.store.fetch_all()
        except Exception as e:
            logger.error(f"작업자 레지스트리 조회 실패: {e}")
            raise StoreUnavailableError(f"작업자 레지스트리 조회 실패: {e}") from e

        snapshot = build_snapshot(raw_records)

        if seq < self._installed_seq:
            logger.info(f"이후에 시작된 로드가 이미 설치되어 스냅샷 설치 생략 (seq={seq})")
            return self._snapshot

        # 단일 참조 교체로 스냅샷 설치
        self._snapshot = snapshot
        self._installed_seq = seq
        self._loaded = True
        self.loaded_at = datetime.now()

        logger.info(f"작업자 스냅샷 설치 완료: {len(snapshot)}명")
        return snapshot

    async def refresh(self) -> Snapshot:
        """스냅샷을 다시 로드합니다.

        Raises:
            StoreUnavailableError: 저장소 조회 실패
        """
        return await self.load()
