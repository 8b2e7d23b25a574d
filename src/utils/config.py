"""애플리케이션 설정 관리.

환경 변수를 로드하고 Azure 클라이언트를 초기화합니다.
"""

from typing import Any

from azure.identity import DefaultAzureCredential
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError
from .logger import get_logger

logger = get_logger(__name__)

# .env 파일 로드
load_dotenv()


class AzureOpenAISettings(BaseSettings):
    """Azure OpenAI 설정 (스킬 분류기용)."""

    model_config = SettingsConfigDict(env_prefix="AZURE_OPENAI_")

    endpoint: str = Field(default="", description="Azure OpenAI 엔드포인트")
    api_key: str | None = Field(default=None, description="Azure OpenAI API 키")
    deployment_name: str = Field(
        default="gpt-4o", description="배포된 모델 이름"
    )
    api_version: str = Field(
        default="2024-10-21", description="API 버전"
    )


class AzureSearchSettings(BaseSettings):
    """Azure AI Search 설정 (작업자 레지스트리 저장소)."""

    model_config = SettingsConfigDict(env_prefix="AZURE_SEARCH_")

    endpoint: str = Field(default="", description="Azure AI Search 엔드포인트")
    api_key: str | None = Field(default=None, description="Azure AI Search API 키")
    index_name: str = Field(default="workers", description="작업자 인덱스 이름")


class ClassifierSettings(BaseSettings):
    """스킬 분류기 설정."""

    model_config = SettingsConfigDict(env_prefix="CLASSIFIER_")

    enabled: bool = Field(default=True, description="LLM 분류기 사용 여부")
    timeout_seconds: float = Field(
        default=10.0, gt=0, description="분류 요청 타임아웃 (초)"
    )


class RegistrySettings(BaseSettings):
    """작업자 레지스트리 설정."""

    model_config = SettingsConfigDict(env_prefix="REGISTRY_")

    use_demo_data: bool = Field(
        default=True, description="Azure AI Search 대신 데모 작업자 데이터 사용"
    )

class AppConfig(BaseSettings):
    """애플리케이션 전체 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # 알 수 없는 환경변수 무시
    )

    # 하위 설정
    azure_openai: AzureOpenAISettings = Field(
        default_factory=lambda: AzureOpenAISettings()
    )
    azure_search: AzureSearchSettings = Field(
        default_factory=lambda: AzureSearchSettings()
    )
    classifier: ClassifierSettings = Field(default_factory=lambda: ClassifierSettings())
    registry: RegistrySettings = Field(default_factory=lambda: RegistrySettings())

    # 기타 설정
    debug: bool = Field(default=False, description="디버그 모드")
    log_level: str = Field(default="INFO", description="로그 레벨")


# 전역 설정 인스턴스
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """애플리케이션 설정을 반환합니다.

    싱글톤 패턴으로 설정 인스턴스를 관리합니다.

    Returns:
        AppConfig 인스턴스

    Raises:
        ConfigError: 설정값이 유효하지 않은 경우

    Example:
        >>> config = get_config()
        >>> print(config.classifier.timeout_seconds)
    """
    global _config

    if _config is None:
        try:
            _config = AppConfig()
            logger.info("애플리케이션 설정 로드 완료")
        except Exception as e:
            raise ConfigError(f"설정 로드 실패: {e}") from e

    return _config


def reset_config() -> None:
    """캐시된 설정을 제거합니다. (테스트용)"""
    global _config
    _config = None


def get_azure_credential() -> DefaultAzureCredential:
    """Azure 인증 자격 증명을 반환합니다.

    환경에 따라 적절한 인증 방식을 자동으로 선택합니다:
    - 로컬: Azure CLI 인증
    - Azure: Managed Identity

    Returns:
        DefaultAzureCredential 인스턴스
    """
    return DefaultAzureCredential()


def get_chat_client(config: AppConfig | None = None) -> Any | None:
    """분류기용 Azure OpenAI ChatClient를 반환합니다.

    엔드포인트와 API 키가 모두 설정된 경우에만 클라이언트를 만듭니다.
    인증 정보가 없으면 None을 반환하며, 분류기는 항상 '사용 불가'를 보고합니다.

    Args:
        config: 사용할 설정 (기본값: get_config())

    Returns:
        AzureOpenAIChatClient 인스턴스 또는 None

    Raises:
        ConfigError: 클라이언트 초기화 실패
    """
    config = config or get_config()
    settings = config.azure_openai

    if not settings.endpoint or not settings.api_key:
        logger.warning("Azure OpenAI 인증 정보 없음, LLM 분류기 비활성화")
        return None

    from agent_framework.azure import AzureOpenAIChatClient

    try:
        client = AzureOpenAIChatClient(
            endpoint=settings.endpoint,
            api_key=settings.api_key,
            deployment_name=settings.deployment_name,
            api_version=settings.api_version,
        )
        logger.info(
            f"Azure OpenAI 클라이언트 초기화 완료 (deployment={settings.deployment_name})"
        )
        return client

    except Exception as e:
        raise ConfigError(f"Azure OpenAI 클라이언트 초기화 실패: {e}") from e
