"""스킬 분류기 프롬프트."""

from ..taxonomy import describe_taxonomy

NONE_TOKEN = "NONE"

CLASSIFIER_INSTRUCTIONS = (
    "You are a skill extractor for a labor hiring app in India. "
    "You only answer with skill names from the list you are given, or NONE."
)


def build_classification_prompt(query: str) -> str:
    """분류 요청 프롬프트를 생성합니다.

    Args:
        query: 사용자 검색어

    Returns:
        분류 체계와 검색어가 포함된 프롬프트 문자열
    """
    prompt = f"""
Given this user search query: "{query}"

Extract the matching skill types from this list ONLY:
{describe_taxonomy()}

Rules:
1. Return ONLY the exact skill names that match, separated by commas
2. If user says "I need a plumber", return "Plumber"
3. If user says "fix my AC", return "AC Repair"
4. If user mentions multiple skills, return all matching ones
5. If no skills match, return "{NONE_TOKEN}"

Return only the skill names, nothing else.
"""
    return prompt.strip()
