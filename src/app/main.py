"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uvicorn src.app.main:app --reload
- 프로덕션: uvicorn src.app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from src.app.providers.gemini import GeminiProvider

# Routes
from src.app.routes import chat, dashboard, insights
from src.app.services.prompts import build_chat_system_context
from src.core.dashboard_data import load_dashboard_data
from src.domain.constants import (
    DEFAULT_MODEL,
    INVALID_MESSAGE,
    INVALID_REQUEST_MESSAGE,
)

PROJECT_ROOT = Path(__file__).parent.parent.parent

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


def configure_logging(config: dict) -> None:
    """루트 로거 설정 (level은 config.logging.level)."""
    level_name = str(config.get("logging", {}).get("level", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: .env + 설정 로드, 데이터셋 로드, Provider 생성
    종료 시: 정리할 리소스 없음
    """
    # Startup
    load_dotenv()
    config = load_config()
    configure_logging(config)

    data_path = PROJECT_ROOT / config.get("dashboard", {}).get(
        "data_path", "dashboard.yaml"
    )
    dashboard_data = load_dashboard_data(data_path)

    app.state.config = config
    app.state.dashboard_data = dashboard_data
    app.state.chat_context = build_chat_system_context(
        dashboard_data.stats, dashboard_data.top_countries
    )
    app.state.provider = GeminiProvider(
        model=config.get("ai", {}).get("model", DEFAULT_MODEL),
    )
    logger.info(f"Dashboard ready (model={app.state.provider.model})")

    yield


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="BFCM Insights Dashboard",
    description="Black Friday / Cyber Monday 트래픽 통계 + Gemini AI 인사이트",
    version="0.1.0",
    lifespan=lifespan,
)

# Static files (CSS, JS)
static_dir = Path(__file__).parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    """
    요청 body 검증 실패 → 400 (FastAPI 기본 422 대신).

    /api/chat: 다른 400과 같은 plain text "Invalid message"
    나머지: JSON {"error": ...}
    """
    logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
    if request.url.path == "/api/chat":
        return PlainTextResponse(INVALID_MESSAGE, status_code=400)
    return JSONResponse({"error": INVALID_REQUEST_MESSAGE}, status_code=400)


# =============================================================================
# Routes
# =============================================================================

# 페이지 라우트 (HTML)
app.include_router(dashboard.router, prefix="", tags=["Dashboard"])

# API 라우트
app.include_router(dashboard.api_router, prefix="/api", tags=["Dashboard API"])
app.include_router(insights.api_router, prefix="/api", tags=["Insights API"])
app.include_router(chat.api_router, prefix="/api", tags=["Chat API"])


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
