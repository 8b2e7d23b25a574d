"""ClassifierAdapter 통합 테스트

실제 Azure OpenAI와 연동하여 스킬 분류 동작을 검증합니다.

환경변수 설정 필요:
- AZURE_OPENAI_ENDPOINT
- AZURE_OPENAI_API_KEY
- AZURE_OPENAI_DEPLOYMENT_NAME

주의: 실제 API 비용이 발생합니다.
"""

import os

import pytest

from src.classifier import ClassificationStatus, ClassifierAdapter
from src.registry import DEMO_WORKERS, InMemoryRegistryStore, RegistryCache
from src.search import SearchOrchestrator
from src.taxonomy import SkillCategory
from src.utils.config import AppConfig, get_chat_client


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def chat_client():
    """실제 Azure OpenAI ChatClient 생성."""
    required_vars = [
        "AZURE_OPENAI_ENDPOINT",
        "AZURE_OPENAI_API_KEY",
        "AZURE_OPENAI_DEPLOYMENT_NAME",
    ]

    missing = [var for var in required_vars if not os.getenv(var)]
    if missing:
        pytest.skip(f"환경변수 누락: {', '.join(missing)}")

    return get_chat_client(AppConfig())


@pytest.fixture
def classifier(chat_client):
    """실제 ChatClient를 사용하는 ClassifierAdapter."""
    return ClassifierAdapter(chat_client, timeout_seconds=30)


# ============================================================================
# 분류 테스트
# ============================================================================

@pytest.mark.asyncio
async def test_extracts_plumber(classifier):
    result = await classifier.extract_categories("I need a plumber")

    assert result.status == ClassificationStatus.MATCHED
    assert SkillCategory.PLUMBER in result.categories


@pytest.mark.asyncio
async def test_extracts_ac_repair_from_synonym(classifier):
    result = await classifier.extract_categories("fix my AC, the cooling stopped")

    assert SkillCategory.AC_REPAIR in result.categories


@pytest.mark.asyncio
async def test_unrelated_query_returns_no_match(classifier):
    result = await classifier.extract_categories("zzz")

    assert result.status in (ClassificationStatus.NO_MATCH, ClassificationStatus.UNAVAILABLE)


@pytest.mark.asyncio
async def test_orchestrator_with_real_classifier(classifier):
    """실제 분류기로 데모 작업자를 검색합니다."""
    orchestrator = SearchOrchestrator(
        cache=RegistryCache(InMemoryRegistryStore(DEMO_WORKERS)),
        classifier=classifier,
    )
    await orchestrator.initialize()

    await orchestrator.search("my bathroom tap is leaking")

    skills = {record.skill_category for record in orchestrator.state.result_set}
    assert skills == {"Plumber"}
    assert orchestrator.state.no_results is False
