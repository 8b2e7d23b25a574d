"""작업자 레지스트리 데이터 모델."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..taxonomy import GENERAL_LABOR


class GeoPoint(BaseModel):
    """위도/경도 좌표."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90.0, le=90.0, description="위도")
    lng: float = Field(..., ge=-180.0, le=180.0, description="경도")


# 위치 정보가 없는 작업자에게 적용되는 기본 좌표 (Solapur, Maharashtra)
DEFAULT_LOCATION = GeoPoint(lat=17.6599, lng=75.9064)


class WorkerRecord(BaseModel):
    """작업자 레코드.

    레지스트리 스냅샷의 한 항목입니다. 수집 시점에 기본값이 모두 적용되므로
    어떤 필드도 비어 있지 않습니다.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="작업자 고유 ID")
    name: str = Field(..., min_length=1, description="표시 이름")
    skill_category: str = Field(default=GENERAL_LABOR, description="스킬 카테고리")
    phone: str = Field(default="", description="전화번호 (빈 문자열 허용)")
    available: bool = Field(default=True, description="작업 가능 여부")
    location: GeoPoint = Field(default=DEFAULT_LOCATION, description="작업자 위치")

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> "WorkerRecord":
        """외부 저장소의 원시 레코드를 WorkerRecord로 변환합니다.

        지원하는 형식:
        - 평면 형식: {"skill": ..., "lat": ..., "lng": ...}
        - snake/camel case: "skill_category", "skillCategory"
        - Azure AI Search GeoJSON: {"location": {"type": "Point", "coordinates": [lng, lat]}}

        Args:
            raw: 원시 레코드

        Returns:
            기본값이 적용된 WorkerRecord

        Raises:
            ValueError: id 또는 name이 없어 기본값을 적용할 수 없는 경우
        """
        raw_id = raw.get("id")
        if raw_id is None or str(raw_id).strip() == "":
            raise ValueError("작업자 레코드에 'id'가 없습니다")

        name = str(raw.get("name") or "").strip()
        if not name:
            raise ValueError(f"작업자 레코드 '{raw_id}'에 'name'이 없습니다")

        skill = (
            raw.get("skill_category")
            or raw.get("skillCategory")
            or raw.get("skill")
            or GENERAL_LABOR
        )

        available = raw.get("available")

        return cls(
            id=str(raw_id).strip(),
            name=name,
            skill_category=str(skill).strip() or GENERAL_LABOR,
            phone=str(raw.get("phone") or ""),
            available=True if available is None else bool(available),
            location=_parse_location(raw),
        )


def _parse_location(raw: dict[str, Any]) -> GeoPoint:
    """원시 레코드에서 좌표를 추출합니다. 없거나 잘못된 경우 기본 좌표를 반환합니다."""
    location = raw.get("location")
    lat: Any = None
    lng: Any = None

    if isinstance(location, dict):
        coordinates = location.get("coordinates")
        if isinstance(coordinates, (list, tuple)) and len(coordinates) == 2:
            # GeoJSON 순서는 [경도, 위도]
            lng, lat = coordinates
        else:
            lat = location.get("lat", location.get("latitude"))
            lng = location.get("lng", location.get("longitude"))
    else:
        lat = raw.get("lat", raw.get("latitude"))
        lng = raw.get("lng", raw.get("longitude"))

    if lat is None or lng is None:
        return DEFAULT_LOCATION

    try:
        return GeoPoint(lat=float(lat), lng=float(lng))
    except (TypeError, ValueError):
        return DEFAULT_LOCATION
