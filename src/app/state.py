"""
app.state 접근자.

lifespan에서 채운 값을 라우트가 읽기 전용으로 사용.
테스트는 app.state에 fake provider/데이터를 직접 넣음.
"""

from fastapi import Request

from src.app.providers.base import TextGenerationProvider
from src.domain.constants import DEFAULT_REQUEST_TIMEOUT
from src.domain.schemas import DashboardData


def get_provider(request: Request) -> TextGenerationProvider:
    """텍스트 생성 Provider."""
    provider: TextGenerationProvider = request.app.state.provider
    return provider


def get_request_timeout(request: Request) -> float:
    """외부 API 호출 타임아웃 (초)."""
    config = getattr(request.app.state, "config", {}) or {}
    return float(config.get("ai", {}).get("request_timeout", DEFAULT_REQUEST_TIMEOUT))


def get_dashboard_data(request: Request) -> DashboardData:
    """번들 대시보드 데이터셋."""
    data: DashboardData = request.app.state.dashboard_data
    return data


def get_chat_context(request: Request) -> str:
    """채팅 시스템 컨텍스트 (시작 시 1회 생성)."""
    context: str = request.app.state.chat_context
    return context
