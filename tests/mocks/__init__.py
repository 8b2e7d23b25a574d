"""테스트용 Mock 구현

실제 Azure AI Search, Azure OpenAI 없이 동작할 수 있도록 Mock 구현을 제공합니다.
"""

from __future__ import annotations

import asyncio
from typing import Any

from src.classifier import ClassificationResult
from src.registry import DEMO_WORKERS


def to_index_document(worker: dict[str, Any]) -> dict[str, Any]:
    """데모 작업자를 Azure AI Search 문서 형식으로 변환합니다 (GeoJSON 좌표)."""
    return {
        "id": worker["id"],
        "name": worker["name"],
        "skill": worker["skill"],
        "phone": worker["phone"],
        "available": worker["available"],
        "location": {"type": "Point", "coordinates": [worker["lng"], worker["lat"]]},
        "@search.score": 1.0,
    }


class MockSearchClient:
    """테스트용 Mock Azure AI Search 클라이언트

    실제 SearchClient와 동일한 search() 인터페이스를 제공하며
    데모 작업자 데이터를 반환합니다.
    """

    def __init__(self, index_name: str, documents: list[dict[str, Any]] | None = None):
        self.index_name = index_name
        if documents is None:
            documents = [to_index_document(worker) for worker in DEMO_WORKERS]
        self._documents = documents
        self.calls: list[dict[str, Any]] = []

    def search(
        self,
        search_text: str,
        top: int | None = None,
        select: list[str] | None = None,
        **kwargs: Any,
    ):
        """Mock 검색 실행 ("*"는 전체 문서, top이 없으면 모든 페이지)"""
        self.calls.append({"search_text": search_text, "top": top, "select": select})

        if search_text == "*":
            results = list(self._documents)
        else:
            needle = search_text.lower()
            results = [
                doc for doc in self._documents
                if needle in doc.get("name", "").lower()
                or needle in doc.get("skill", "").lower()
            ]

        if top is not None:
            results = results[:top]

        if select:
            results = [
                {k: doc.get(k) for k in select + ["@search.score"]}
                for doc in results
            ]

        return iter(results)


class MutableStore:
    """내용과 실패 여부를 바꿀 수 있는 테스트용 레지스트리 저장소."""

    def __init__(self, records: list[dict[str, Any]] | None = None):
        self.records = list(records if records is not None else DEMO_WORKERS)
        self.fail = False
        self.fetch_count = 0
        self.gate: asyncio.Event | None = None

    def hold(self) -> asyncio.Event:
        """다음 조회를 Event가 set될 때까지 지연시킵니다."""
        self.gate = asyncio.Event()
        return self.gate

    async def fetch_all(self) -> list[dict[str, Any]]:
        self.fetch_count += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            raise ConnectionError("registry store unreachable")
        return [dict(record) for record in self.records]


class ScriptedClassifier:
    """검색어별 응답이 정해진 분류기.

    hold()로 특정 검색어의 응답을 붙잡아 두었다가 풀어 주어
    분류 응답의 도착 순서를 제어할 수 있습니다.
    """

    def __init__(
        self,
        responses: dict[str, ClassificationResult] | None = None,
        default: ClassificationResult | None = None,
    ):
        self.responses = responses or {}
        self.default = default or ClassificationResult.unavailable("scripted default")
        self.calls: list[str] = []
        self.gates: dict[str, asyncio.Event] = {}

    def hold(self, query: str) -> asyncio.Event:
        """query의 응답을 Event가 set될 때까지 지연시킵니다."""
        gate = asyncio.Event()
        self.gates[query] = gate
        return gate

    async def extract_categories(self, query: str) -> ClassificationResult:
        self.calls.append(query)
        gate = self.gates.get(query)
        if gate is not None:
            await gate.wait()
        return self.responses.get(query, self.default)
