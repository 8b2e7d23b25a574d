"""
작업자 레지스트리 인덱스 설정 스크립트

Azure AI Search에 작업자 인덱스를 생성하고 데모 작업자 데이터를 업로드합니다.

실행 방법:
    python index/setup_worker_index.py

필요 환경 변수:
    - AZURE_SEARCH_ENDPOINT
    - AZURE_SEARCH_API_KEY
    - AZURE_SEARCH_INDEX_NAME (기본값: workers)
"""

import os
import sys
from pathlib import Path
from typing import Any

from azure.core.credentials import AzureKeyCredential
from azure.core.exceptions import ResourceNotFoundError
from azure.search.documents import SearchClient
from azure.search.documents.indexes import SearchIndexClient
from azure.search.documents.indexes.models import (
    SearchableField,
    SearchFieldDataType,
    SearchIndex,
    SimpleField,
)
from dotenv import load_dotenv

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.registry import DEMO_WORKERS  # noqa: E402
from src.utils.logger import get_logger  # noqa: E402

# .env 파일 로드
load_dotenv()

logger = get_logger("setup_worker_index")


def create_index_schema(index_name: str) -> SearchIndex:
    """작업자 인덱스 스키마를 생성합니다.

    Args:
        index_name: 인덱스 이름

    Returns:
        SearchIndex: 인덱스 스키마 정의
    """
    fields = [
        SimpleField(
            name="id",
            type=SearchFieldDataType.String,
            key=True,
        ),
        SearchableField(
            name="name",
            type=SearchFieldDataType.String,
            sortable=True,
        ),
        SearchableField(
            name="skill",
            type=SearchFieldDataType.String,
            filterable=True,
            facetable=True,
        ),
        SimpleField(
            name="phone",
            type=SearchFieldDataType.String,
        ),
        SimpleField(
            name="available",
            type=SearchFieldDataType.Boolean,
            filterable=True,
        ),
        SimpleField(
            name="location",
            type=SearchFieldDataType.GeographyPoint,
            filterable=True,
            sortable=True,
        ),
    ]

    return SearchIndex(name=index_name, fields=fields)


def to_document(worker: dict[str, Any]) -> dict[str, Any]:
    """데모 작업자를 인덱스 문서로 변환합니다 (GeoJSON 좌표는 [경도, 위도])."""
    return {
        "id": worker["id"],
        "name": worker["name"],
        "skill": worker["skill"],
        "phone": worker["phone"],
        "available": worker["available"],
        "location": {
            "type": "Point",
            "coordinates": [worker["lng"], worker["lat"]],
        },
    }


def create_index(endpoint: str, api_key: str, index_name: str) -> None:
    """인덱스를 (재)생성합니다.

    Args:
        endpoint: Azure AI Search 엔드포인트
        api_key: Azure AI Search API 키
        index_name: 인덱스 이름
    """
    index_client = SearchIndexClient(
        endpoint=endpoint,
        credential=AzureKeyCredential(api_key),
    )

    # 기존 인덱스 삭제 (있는 경우)
    try:
        index_client.delete_index(index_name)
        logger.info(f"기존 인덱스 삭제됨: {index_name}")
    except ResourceNotFoundError:
        logger.info(f"기존 인덱스 없음: {index_name}")

    index_client.create_index(create_index_schema(index_name))
    logger.info(f"인덱스 생성 완료: {index_name}")


def upload_documents(
    endpoint: str,
    api_key: str,
    index_name: str,
    documents: list[dict[str, Any]],
) -> int:
    """문서를 인덱스에 업로드합니다.

    Returns:
        업로드에 성공한 문서 수
    """
    search_client = SearchClient(
        endpoint=endpoint,
        index_name=index_name,
        credential=AzureKeyCredential(api_key),
    )

    result = search_client.upload_documents(documents)
    succeeded = sum(1 for r in result if r.succeeded)

    for r in result:
        if not r.succeeded:
            logger.error(f"업로드 실패 - ID: {r.key}, 오류: {r.error_message}")

    logger.info(f"문서 업로드 완료: {succeeded}/{len(documents)}")
    return succeeded


def main() -> None:
    """메인 실행 함수."""
    logger.info("=" * 60)
    logger.info("작업자 인덱스 설정 시작")
    logger.info("=" * 60)

    endpoint = os.getenv("AZURE_SEARCH_ENDPOINT")
    api_key = os.getenv("AZURE_SEARCH_API_KEY")
    index_name = os.getenv("AZURE_SEARCH_INDEX_NAME", "workers")

    if not endpoint or not api_key:
        raise ValueError(
            "필수 환경변수가 설정되지 않았습니다: "
            "AZURE_SEARCH_ENDPOINT, AZURE_SEARCH_API_KEY"
        )

    logger.info(f"Azure Search 엔드포인트: {endpoint}")

    logger.info("[1/2] 인덱스 생성 중...")
    create_index(endpoint, api_key, index_name)

    logger.info("[2/2] 데모 작업자 업로드 중...")
    documents = [to_document(worker) for worker in DEMO_WORKERS]
    succeeded = upload_documents(endpoint, api_key, index_name, documents)

    logger.info("=" * 60)
    logger.info("인덱스 설정 완료!")
    logger.info(f"인덱스 이름: {index_name}")
    logger.info(f"총 문서 수: {succeeded}")
    logger.info("=" * 60)


if __name__ == "__main__":
    main()
