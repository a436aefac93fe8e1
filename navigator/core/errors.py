# navigator/core/errors.py
# -----------------------------------------------------------------------------
# 예외 계층
# - AnalysisError 계열은 사용자에게 보여줄 고정 메시지만 노출
# - 원본 오류 내용은 detail 에 담아 서버 로그로만 남긴다
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


class ErrorCode:
    ANALYSIS_FETCH_FAILED = "ANALYSIS_FETCH_FAILED"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    ANALYSIS_IN_PROGRESS = "ANALYSIS_IN_PROGRESS"
    UNKNOWN_STORE_TYPE = "UNKNOWN_STORE_TYPE"
    INVALID_COST_FIELD = "INVALID_COST_FIELD"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


ANALYSIS_FAILED_MESSAGE = (
    "AI 분석 데이터를 가져오는 데 실패했습니다. API 키 또는 요청을 확인해주세요."
)


class NavigatorError(Exception):
    """모든 도메인 예외의 베이스. code/message/details 를 가진다."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


class AnalysisError(NavigatorError):
    """분석 요청 실패. message 는 항상 고정 문구."""

    def __init__(self, code: str, detail: str | None = None):
        super().__init__(
            code=code,
            message=ANALYSIS_FAILED_MESSAGE,
            details={"detail": detail} if detail else None,
        )

    @property
    def detail(self) -> str | None:
        return self.details.get("detail")


class AnalysisFetchError(AnalysisError):
    """AI 서비스 호출 자체가 실패 (네트워크/인증/서비스 오류)."""

    def __init__(self, detail: str | None = None):
        super().__init__(ErrorCode.ANALYSIS_FETCH_FAILED, detail)


class MalformedResponseError(AnalysisError):
    """응답이 JSON 이 아니거나 필수 필드가 빠진 경우."""

    def __init__(self, detail: str | None = None):
        super().__init__(ErrorCode.MALFORMED_RESPONSE, detail)


class AnalysisInProgressError(NavigatorError):
    def __init__(self):
        super().__init__(
            code=ErrorCode.ANALYSIS_IN_PROGRESS,
            message="이미 분석이 진행 중입니다. 잠시 후 다시 시도해주세요.",
        )


class UnknownStoreTypeError(NavigatorError):
    def __init__(self, store_type: Any):
        super().__init__(
            code=ErrorCode.UNKNOWN_STORE_TYPE,
            message=f"분석 결과에 없는 점포 유형입니다: {store_type}",
            details={"store_type": str(store_type)},
        )


class InvalidCostFieldError(NavigatorError):
    def __init__(self, field: str):
        super().__init__(
            code=ErrorCode.INVALID_COST_FIELD,
            message=f"수정할 수 없는 비용 항목입니다: {field}",
            details={"field": field},
        )


class SessionNotFoundError(NavigatorError):
    def __init__(self, session_id: str):
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="대시보드 세션을 찾을 수 없습니다.",
            details={"session_id": session_id},
        )


class ConfigurationError(NavigatorError):
    def __init__(self, message: str):
        super().__init__(code=ErrorCode.CONFIGURATION_ERROR, message=message)
