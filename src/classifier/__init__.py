"""스킬 분류기 모듈.

LLM 기반 검색어 분류와 응답 파싱을 담당합니다.
"""

from .adapter import ClassifierAdapter, parse_classifier_response
from .models import ClassificationResult, ClassificationStatus
from .prompts import CLASSIFIER_INSTRUCTIONS, NONE_TOKEN, build_classification_prompt

__all__ = [
    "ClassifierAdapter",
    "parse_classifier_response",
    "ClassificationResult",
    "ClassificationStatus",
    "CLASSIFIER_INSTRUCTIONS",
    "NONE_TOKEN",
    "build_classification_prompt",
]
