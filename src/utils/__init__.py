"""공통 유틸리티 모듈.

로깅, 설정, 에러 처리 등 공통 기능을 제공합니다.
"""

from .logger import get_logger, log_with_context
from .config import get_config
from .errors import (
    ClassifierUnavailableError,
    ConfigError,
    SearchError,
    StoreUnavailableError,
    WorkerSearchError,
)

__all__ = [
    "get_logger",
    "log_with_context",
    "get_config",
    "WorkerSearchError",
    "ConfigError",
    "StoreUnavailableError",
    "ClassifierUnavailableError",
    "SearchError",
]
