"""커스텀 예외 클래스 정의.

작업자 검색 코어 전반에서 사용되는 예외 계층 구조를 제공합니다.
빈 검색 결과는 예외가 아니라 SearchState.no_results 플래그로 표현합니다.
"""


class WorkerSearchError(Exception):
    """작업자 검색 관련 모든 예외의 베이스 클래스."""

    pass


class ConfigError(WorkerSearchError):
    """설정 관련 예외.

    환경 변수 누락, 잘못된 설정값 등의 경우 발생합니다.
    """

    pass


class StoreUnavailableError(WorkerSearchError):
    """레지스트리 저장소 조회 실패.

    캐시는 이전 스냅샷을 유지합니다. 최초 로드에서 발생한 경우에만
    호출자에게 그대로 전파됩니다.
    """

    pass


class ClassifierUnavailableError(WorkerSearchError):
    """분류기 호출 실패.

    타임아웃, 네트워크 오류, 인증 정보 없음, 응답 파싱 실패를 포함합니다.
    ClassifierAdapter 경계 밖으로 전파되지 않고 로컬 매처 폴백으로 이어집니다.
    """

    pass


class SearchError(WorkerSearchError):
    """Azure AI Search 연동 관련 예외.

    클라이언트 미초기화, 쿼리 오류 등의 경우 발생합니다.
    """

    pass
