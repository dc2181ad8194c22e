"""
Domain Constants: 대시보드 전역 상수.

모델 기본값, 분석 포커스, 사용자 노출 에러 메시지 등.
"""

from enum import Enum

# =============================================================================
# Model
# =============================================================================
# default.yaml의 ai.model이 SSOT, 아래는 config 누락 시 기본값

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_REQUEST_TIMEOUT = 30.0

# API 키 환경변수 (앞쪽 우선)
API_KEY_ENV_VARS = ("GOOGLE_GENERATIVE_AI_API_KEY", "GOOGLE_API_KEY")

# =============================================================================
# Analysis Focus (인사이트 탭)
# =============================================================================


class FocusArea(str, Enum):
    """인사이트 탭 = 프롬프트 템플릿 선택자."""
    OVERVIEW = "overview"
    SECURITY = "security"
    PERFORMANCE = "performance"
    TRAFFIC = "traffic"

    @classmethod
    def parse(cls, value: str | None) -> "FocusArea":
        """알 수 없는 값/None → OVERVIEW."""
        try:
            return cls(value)
        except ValueError:
            return cls.OVERVIEW


# =============================================================================
# Streaming
# =============================================================================

TEXT_STREAM_MEDIA_TYPE = "text/plain; charset=utf-8"

# =============================================================================
# User-facing Messages (엔드포인트별)
# =============================================================================
# 보안: raw 에러는 로그에만, 클라이언트에는 고정 문구

QUOTA_MESSAGE = "API quota exceeded. Please try again in a few moments."
CHAT_QUOTA_MESSAGE = "API quota exceeded. Please try again later."

ANALYZE_STATS_FAILED_MESSAGE = (
    "Failed to analyze stats. Please check your API configuration."
)
STREAM_INSIGHTS_FAILED_MESSAGE = "Failed to generate insights"
ANALYZE_COUNTRY_FAILED_MESSAGE = "Failed to analyze country"
CHAT_FAILED_MESSAGE = "Failed to process chat message"

INVALID_MESSAGE = "Invalid message"
INVALID_REQUEST_MESSAGE = "Invalid request body"

# =============================================================================
# Chat UI
# =============================================================================

SUGGESTED_QUESTIONS = (
    "What's the overall traffic performance?",
    "How effective is the security?",
    "Which regions had the most traffic?",
    "What's the cache hit rate?",
)
