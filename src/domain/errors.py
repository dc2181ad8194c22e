"""
Error definitions for the dashboard.

규칙:
- 외부 API 실패는 재시도 없이 즉시 HTTP 상태로 매핑
- quota 관련 → 429, 나머지 → 500
"""

from typing import Any


class ErrorCodes:
    """에러 코드 상수."""

    # === Upstream (Gemini) ===
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    AUTH_OR_INPUT_ERROR = "AUTH_OR_INPUT_ERROR"
    API_KEY_MISSING = "API_KEY_MISSING"
    GENERATION_FAILED = "GENERATION_FAILED"
    STREAM_INTERRUPTED = "STREAM_INTERRUPTED"

    # === Request ===
    INVALID_REQUEST = "INVALID_REQUEST"


# 코드 → HTTP 상태. 목록에 없으면 500.
STATUS_BY_CODE: dict[str, int] = {
    ErrorCodes.QUOTA_EXCEEDED: 429,
    ErrorCodes.INVALID_REQUEST: 400,
}


def status_for_code(code: str | None) -> int:
    """
    에러 코드 → HTTP 상태 코드.

    Args:
        code: ErrorCodes 값 (None이면 500)

    Returns:
        HTTP 상태 코드
    """
    if code is None:
        return 500
    return STATUS_BY_CODE.get(code, 500)


def is_quota_message(error: Any) -> bool:
    """에러 메시지에 quota가 포함되어 있는지 (대소문자 무시)."""
    return "quota" in str(error).lower()


def status_for_error(error: BaseException) -> int:
    """
    예외 → HTTP 상태 코드.

    code 속성이 있으면 (ProviderError 계열) 코드 기준,
    없으면 메시지에 quota 포함 여부로 429/500.
    """
    code = getattr(error, "code", None)
    if isinstance(code, str):
        return status_for_code(code)
    return 429 if is_quota_message(error) else 500
