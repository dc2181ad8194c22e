"""
Dashboard Routes: 화면 + 데이터셋.

- GET / → 대시보드 (Jinja2)
- GET /api/dashboard → 번들 데이터셋 JSON
"""

from pathlib import Path
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.app.state import get_dashboard_data
from src.core.formatting import format_count, format_percent
from src.domain.constants import SUGGESTED_QUESTIONS, FocusArea

_templates_dir = Path(__file__).parent.parent / "templates"
jinja_templates = Jinja2Templates(directory=_templates_dir)
jinja_templates.env.filters["count"] = format_count

# Routers
router = APIRouter()  # HTML pages
api_router = APIRouter()  # API endpoints


@router.get("/", response_class=HTMLResponse)
async def dashboard_page(request: Request) -> HTMLResponse:
    """대시보드 화면."""
    data = get_dashboard_data(request)
    stats = data.stats

    return jinja_templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "stats": stats,
            "stats_json": stats.to_json_dict(),
            "cache_rate": format_percent(stats.cache_hits, stats.total_requests, 1),
            "countries": data.top_countries,
            "focus_areas": [f.value for f in FocusArea],
            "suggested_questions": SUGGESTED_QUESTIONS,
            "model": request.app.state.provider.model,
        },
    )


@api_router.get("/dashboard")
async def dashboard_data(request: Request) -> dict[str, Any]:
    """번들 데이터셋 (camelCase)."""
    data: dict[str, Any] = get_dashboard_data(request).model_dump(by_alias=True)
    return data
