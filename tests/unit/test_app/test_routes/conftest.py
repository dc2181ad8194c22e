"""
Route 테스트 공용 fixture.

main.app 대신 라우터만 붙인 앱 (lifespan 없음, fake provider).
"""

from collections.abc import Callable

import pytest
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient

from src.app.main import validation_error_handler
from src.app.routes import chat, dashboard, insights
from src.app.services.prompts import build_chat_system_context
from src.domain.schemas import DashboardData


@pytest.fixture
def provider(make_provider: Callable):
    """기본 fake provider (정상 응답)."""
    return make_provider()


@pytest.fixture
def app(provider, dashboard_data: DashboardData) -> FastAPI:
    """테스트용 FastAPI 앱."""
    app = FastAPI()
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(dashboard.router)
    app.include_router(dashboard.api_router, prefix="/api")
    app.include_router(insights.api_router, prefix="/api")
    app.include_router(chat.api_router, prefix="/api")

    # App state 설정
    app.state.config = {"ai": {"request_timeout": 5.0}}
    app.state.provider = provider
    app.state.dashboard_data = dashboard_data
    app.state.chat_context = build_chat_system_context(
        dashboard_data.stats, dashboard_data.top_countries
    )

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """테스트 클라이언트."""
    return TestClient(app)
