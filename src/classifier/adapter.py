"""Classifier Adapter - 자연어 검색어에서 스킬 카테고리를 추출."""

import asyncio
from typing import Any

from agent_framework import ChatAgent

from ..taxonomy import SkillCategory, lookup_category
from ..utils.errors import ClassifierUnavailableError
from ..utils.logger import get_logger
from .models import ClassificationResult
from .prompts import CLASSIFIER_INSTRUCTIONS, NONE_TOKEN, build_classification_prompt

logger = get_logger(__name__)


def parse_classifier_response(content: str) -> tuple[SkillCategory, ...]:
    """분류기 응답을 카테고리 튜플로 파싱합니다.

    문법: 쉼표로 구분된 카테고리 이름 목록 (대소문자 무시, 정확히 일치)
    또는 NONE (대소문자 무시, 일치 카테고리 없음).

    Args:
        content: 분류기 응답 텍스트

    Returns:
        언급 순서대로 중복 제거된 카테고리 튜플 (NONE이면 빈 튜플)

    Raises:
        ClassifierUnavailableError: 빈 응답 또는 문법에 맞지 않는 응답

    Example:
        >>> parse_classifier_response("Plumber, ac repair")
        (<SkillCategory.PLUMBER: 'Plumber'>, <SkillCategory.AC_REPAIR: 'AC Repair'>)
    """
    text = content.strip()

    # 코드 블록 제거 (``` ... ``` 형식 처리)
    if text.startswith("```"):
        text = text.strip("`").strip()
        first_line, _, rest = text.partition("\n")
        # 언어 태그 (```text) 제거
        if rest and lookup_category(first_line) is None and first_line.upper() != NONE_TOKEN:
            text = rest.strip()

    if not text:
        raise ClassifierUnavailableError("분류기 응답이 비어 있습니다")

    if text.upper() == NONE_TOKEN:
        return ()

    categories: list[SkillCategory] = []
    for token in text.split(","):
        token = token.strip()
        category = lookup_category(token)
        if category is None:
            raise ClassifierUnavailableError(f"알 수 없는 카테고리: '{token}'")
        if category not in categories:
            categories.append(category)

    return tuple(categories)


class ClassifierAdapter:
    """외부 텍스트 분류 서비스를 감싸는 어댑터.

    - 요청당 한 번만 호출 (재시도 없음)
    - 요청 단위 타임아웃 적용
    - 어떤 실패도 예외로 전파하지 않고 ClassificationResult.unavailable()을 반환
    """

    DEFAULT_TIMEOUT_SECONDS = 10.0

    def __init__(
        self,
        chat_client: Any = None,
        *,
        agent: Any = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """ClassifierAdapter를 초기화합니다.

        Args:
            chat_client: Agent Framework의 ChatClient (None이면 인증 정보 없음으로 간주)
            agent: 미리 구성된 Agent (run() 메서드 보유). 지정 시 chat_client보다 우선
            timeout_seconds: 분류 요청 타임아웃 (초)
        """
        self.chat_client = chat_client
        self.timeout_seconds = timeout_seconds

        if agent is not None:
            self.agent = agent
        elif chat_client is not None:
            self.agent = ChatAgent(
                chat_client=chat_client,
                instructions=CLASSIFIER_INSTRUCTIONS,
            )
        else:
            self.agent = None

        logger.info(
            f"ClassifierAdapter 초기화 완료 "
            f"(enabled={self.is_configured}, timeout={timeout_seconds}s)"
        )

    @property
    def is_configured(self) -> bool:
        """분류 서비스 호출이 가능한지 여부."""
        return self.agent is not None

    async def extract_categories(self, query: str) -> ClassificationResult:
        """검색어에서 스킬 카테고리를 추출합니다.

        Args:
            query: 사용자 검색어

        Returns:
            MATCHED / NO_MATCH / UNAVAILABLE 상태의 ClassificationResult

        Example:
            >>> adapter = ClassifierAdapter(chat_client)
            >>> result = await adapter.extract_categories("I need a plumber")
            >>> print(result.categories)  # (SkillCategory.PLUMBER,)
        """
        if self.agent is None:
            return ClassificationResult.unavailable("분류기 인증 정보가 설정되지 않았습니다")

        prompt = build_classification_prompt(query)
        content: str | None = None

        try:
            response = await asyncio.wait_for(
                self.agent.run(prompt),
                timeout=self.timeout_seconds,
            )
            content = self._extract_content_from_response(response)
            categories = parse_classifier_response(content)
        except asyncio.TimeoutError:
            reason = f"분류 응답 시간 초과 ({self.timeout_seconds}초)"
            logger.warning(f"분류기 사용 불가: {reason}")
            return ClassificationResult.unavailable(reason)
        except Exception as e:
            logger.warning(f"분류기 사용 불가: {e}")
            return ClassificationResult.unavailable(str(e), raw_response=content)

        logger.info(
            f"카테고리 추출 완료: query='{query}', "
            f"categories={[c.value for c in categories] or NONE_TOKEN}"
        )
        return ClassificationResult.from_categories(categories, raw_response=content)

    def _extract_content_from_response(self, response: Any) -> str:
        """Agent 응답에서 텍스트를 추출합니다.

        Args:
            response: Agent 응답 객체

        Returns:
            응답 텍스트
        """
        # response.text 속성 우선
        text = getattr(response, "text", None)
        if isinstance(text, str):
            return text

        # response.messages[-1].text 대체
        messages = getattr(response, "messages", None)
        if messages:
            last_text = getattr(messages[-1], "text", None)
            if isinstance(last_text, str):
                return last_text

        return str(response)
