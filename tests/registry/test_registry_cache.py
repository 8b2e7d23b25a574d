"""RegistryCache 테스트."""

import asyncio

import pytest

from src.registry import DEMO_WORKERS, RegistryCache, build_snapshot
from src.utils.errors import StoreUnavailableError
from tests.mocks import MutableStore


class TestBuildSnapshot:
    """build_snapshot 함수 테스트."""

    def test_keeps_store_order(self):
        snapshot = build_snapshot(DEMO_WORKERS)

        assert [record.id for record in snapshot] == [str(i) for i in range(1, 11)]

    def test_drops_invalid_records(self):
        """id 또는 name이 없는 레코드는 제외해야 합니다."""
        snapshot = build_snapshot(
            [{"id": "1", "name": "A"}, {"name": "no id"}, {"id": "3", "name": ""}]
        )

        assert [record.id for record in snapshot] == ["1"]

    def test_drops_non_dict_items(self):
        """dict가 아닌 항목은 예외 없이 제외해야 합니다."""
        snapshot = build_snapshot([None, "worker", {"id": "1", "name": "A"}, 3])

        assert [record.id for record in snapshot] == ["1"]

    def test_first_duplicate_wins(self):
        """중복 id는 먼저 나온 레코드를 유지해야 합니다."""
        snapshot = build_snapshot(
            [{"id": "1", "name": "First"}, {"id": "1", "name": "Second"}]
        )

        assert len(snapshot) == 1
        assert snapshot[0].name == "First"


@pytest.mark.asyncio
class TestRegistryCache:
    """RegistryCache load/refresh 테스트."""

    async def test_starts_empty(self):
        cache = RegistryCache(MutableStore())

        assert cache.current() == ()
        assert cache.is_loaded is False
        assert len(cache) == 0

    async def test_load_installs_snapshot(self):
        cache = RegistryCache(MutableStore())

        snapshot = await cache.load()

        assert len(snapshot) == 10
        assert cache.current() is snapshot
        assert cache.is_loaded is True
        assert cache.loaded_at is not None

    async def test_empty_store_is_valid_snapshot(self):
        """레코드 0건은 오류가 아닌 빈 스냅샷입니다."""
        cache = RegistryCache(MutableStore(records=[]))

        snapshot = await cache.load()

        assert snapshot == ()
        assert cache.is_loaded is True

    async def test_failure_keeps_previous_snapshot(self):
        """저장소 조회 실패 시 이전 스냅샷을 유지해야 합니다."""
        store = MutableStore()
        cache = RegistryCache(store)
        before = await cache.load()

        store.fail = True
        with pytest.raises(StoreUnavailableError):
            await cache.refresh()

        assert cache.current() is before

    async def test_refresh_replaces_snapshot_wholesale(self):
        store = MutableStore()
        cache = RegistryCache(store)
        old = await cache.load()

        store.records = DEMO_WORKERS[:3]
        new = await cache.refresh()

        assert len(new) == 3
        assert cache.current() is new
        # 이전 스냅샷은 변경되지 않음
        assert len(old) == 10

    async def test_late_older_load_is_discarded(self):
        """나중에 시작한 로드가 먼저 끝나면 이전 로드 결과는 설치되지 않아야 합니다."""
        gate = asyncio.Event()

        class SlowFirstStore:
            def __init__(self):
                self.calls = 0

            async def fetch_all(self):
                self.calls += 1
                if self.calls == 1:
                    await gate.wait()
                    return [{"id": "old", "name": "Old"}]
                return [{"id": "new", "name": "New"}]

        cache = RegistryCache(SlowFirstStore())
        first = asyncio.create_task(cache.load())
        await asyncio.sleep(0)

        await cache.load()
        gate.set()
        await first

        assert [record.id for record in cache.current()] == ["new"]

    async def test_older_load_installs_when_newer_load_fails(self):
        """나중에 시작한 로드가 실패하면 먼저 시작한 로드의 결과를 설치해야 합니다."""
        gate = asyncio.Event()

        class SlowFirstFailingSecondStore:
            def __init__(self):
                self.calls = 0

            async def fetch_all(self):
                self.calls += 1
                if self.calls == 1:
                    await gate.wait()
                    return [{"id": "old", "name": "Old"}]
                raise ConnectionError("registry store unreachable")

        cache = RegistryCache(SlowFirstFailingSecondStore())
        first = asyncio.create_task(cache.load())
        await asyncio.sleep(0)

        with pytest.raises(StoreUnavailableError):
            await cache.load()
        gate.set()
        snapshot = await first

        assert [record.id for record in snapshot] == ["old"]
        assert cache.is_loaded is True
