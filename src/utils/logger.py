"""로깅 설정 및 유틸리티.

모든 모듈은 get_logger(__name__)로 stdout 로거를 얻고,
검색 세대나 결과 수 같은 필드는 log_with_context로 남깁니다.
"""

import logging
import os
import sys
from typing import Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _default_level() -> int:
    """LOG_LEVEL 환경변수에서 로그 레벨을 읽습니다 (기본값: INFO)."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """모듈 로거를 반환합니다.

    같은 이름으로 다시 호출하면 핸들러를 추가하지 않고 기존 로거를 돌려줍니다.

    Args:
        name: 로거 이름 (보통 __name__)
        level: 로그 레벨 (생략 시 LOG_LEVEL 환경변수, 없으면 INFO)

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("레지스트리 로드 시작")
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = _default_level() if level is None else level
    logger.setLevel(level)
    logger.addHandler(_console_handler(level))
    # 루트 로거 핸들러와 중복 출력 방지
    logger.propagate = False
    return logger


def log_with_context(
    logger: logging.Logger, level: int, message: str, **context: Any
) -> None:
    """메시지 뒤에 key=value 필드를 ' | '로 이어 붙여 기록합니다.

    Example:
        >>> log_with_context(logger, logging.INFO, "검색 결과 적용", generation=3, results=2)
        # 검색 결과 적용 | generation=3 | results=2
    """
    if context:
        fields = " | ".join(f"{key}={value}" for key, value in context.items())
        message = f"{message} | {fields}"
    logger.log(level, message)
