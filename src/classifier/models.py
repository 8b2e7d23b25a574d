"""스킬 분류기 데이터 모델."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..taxonomy import SkillCategory


class ClassificationStatus(str, Enum):
    """분류 결과 상태."""

    MATCHED = "matched"  # 하나 이상의 카테고리 추출
    NO_MATCH = "no_match"  # 분류기가 NONE 응답 (일치 카테고리 없음)
    UNAVAILABLE = "unavailable"  # 분류기 사용 불가 (로컬 매처로 폴백)


class ClassificationResult(BaseModel):
    """분류기 호출 결과.

    UNAVAILABLE은 '카테고리 0개'와 구분됩니다. 전자는 로컬 매처 폴백을,
    후자는 빈 결과로 검색을 종료시킵니다.
    """

    model_config = ConfigDict(frozen=True)

    status: ClassificationStatus = Field(..., description="분류 결과 상태")
    categories: tuple[SkillCategory, ...] = Field(
        default=(), description="추출된 카테고리 (언급 순서)"
    )
    reason: str | None = Field(default=None, description="사용 불가 사유")
    raw_response: str | None = Field(default=None, description="분류기 원본 응답")

    @property
    def is_unavailable(self) -> bool:
        return self.status == ClassificationStatus.UNAVAILABLE

    @classmethod
    def from_categories(
        cls, categories: tuple[SkillCategory, ...], raw_response: str | None = None
    ) -> "ClassificationResult":
        """추출된 카테고리로 결과를 생성합니다. 빈 튜플이면 NO_MATCH입니다."""
        status = ClassificationStatus.MATCHED if categories else ClassificationStatus.NO_MATCH
        return cls(status=status, categories=categories, raw_response=raw_response)

    @classmethod
    def unavailable(
        cls, reason: str, raw_response: str | None = None
    ) -> "ClassificationResult":
        """사용 불가 결과를 생성합니다."""
        return cls(
            status=ClassificationStatus.UNAVAILABLE,
            reason=reason,
            raw_response=raw_response,
        )
