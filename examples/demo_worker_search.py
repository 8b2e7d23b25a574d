#!/usr/bin/env python3
"""작업자 검색 데모 스크립트

SearchOrchestrator의 동작을 시연합니다.
원본 앱의 예시 검색어를 처리하고, 겹쳐서 발행된 검색 중
마지막 검색만 적용되는 것을 보여줍니다.

실행 방법:
    python examples/demo_worker_search.py

환경 변수 (선택):
    - AZURE_OPENAI_ENDPOINT, AZURE_OPENAI_API_KEY (없으면 로컬 매처로 검색)
    - REGISTRY_USE_DEMO_DATA=false (Azure AI Search 작업자 인덱스 사용)
"""

import asyncio
import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# .env 파일 명시적으로 로드
from dotenv import load_dotenv

load_dotenv(project_root / ".env")

from src.search import SearchOrchestrator, SearchState
from src.utils.errors import StoreUnavailableError
from src.utils.logger import get_logger

logger = get_logger(__name__)


DEMO_QUERIES = [
    {"query": "I need a plumber", "description": "자연어 검색"},
    {"query": "fix my AC", "description": "동의어 기반 검색"},
    {"query": "electrician", "description": "카테고리명 검색"},
    {"query": "zzz", "description": "일치 없음"},
]


def print_separator(char: str = "=", length: int = 80) -> None:
    """구분선을 출력합니다."""
    print(char * length)


def print_header(title: str) -> None:
    """헤더를 출력합니다."""
    print_separator()
    print(f"  {title}")
    print_separator()
    print()


def print_state(state: SearchState) -> None:
    """검색 상태를 출력합니다."""
    mode = state.active_filter.mode.value
    print(f"🔎 검색어: '{state.raw_query}' (세대 {state.generation}, 필터: {mode})")
    if state.fallback_used:
        print("⚠️  AI 검색 실패, 기본 검색 사용")
    if state.no_results:
        print("📭 일치하는 작업자가 없습니다")
    print(f"👷 작업자 {state.result_count}명")
    for record in state.result_set:
        status = "🟢 Available" if record.available else "⚫ Busy"
        print(
            f"   - {record.name} ({record.skill_category}) {status} "
            f"[{record.location.lat:.4f}, {record.location.lng:.4f}] {record.phone}"
        )
    print()


async def run_demo() -> None:
    """데모를 실행합니다."""
    print_header("🧪 작업자 검색 데모")

    orchestrator = SearchOrchestrator.create_default()

    try:
        await orchestrator.initialize()
    except StoreUnavailableError as e:
        print(f"❌ 작업자 레지스트리 로드 실패: {e}")
        sys.exit(1)

    print(f"✓ 작업자 {len(orchestrator.all_workers)}명 로드 완료")
    print(f"✓ LLM 분류기: {'사용' if orchestrator.classifier.is_configured else '미설정'}")
    print()

    for i, query_info in enumerate(DEMO_QUERIES, 1):
        print(f"📝 질의 {i}/{len(DEMO_QUERIES)}: {query_info['description']}")
        await orchestrator.search(query_info["query"])
        print_state(orchestrator.state)
        print_separator("-")

    print_header("⚡ 겹친 검색 (마지막 검색만 적용)")
    first = orchestrator.submit("I need a plumber")
    second = orchestrator.submit("welder")
    await orchestrator.wait_idle()
    print(f"   첫 번째 검색: {first.result().value}")
    print(f"   두 번째 검색: {second.result().value}")
    print_state(orchestrator.state)

    print_header("🧹 검색어 지우기")
    await orchestrator.clear()
    print_state(orchestrator.state)


def main() -> None:
    """메인 함수."""
    try:
        asyncio.run(run_demo())
    except KeyboardInterrupt:
        print("\n\n⚠️  사용자가 중단했습니다.")
        sys.exit(0)


if __name__ == "__main__":
    main()
