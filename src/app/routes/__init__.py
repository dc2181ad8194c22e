"""
FastAPI Routes.

페이지 라우트 (HTML) + API 라우트 (JSON + text 스트림)
"""

from . import chat, dashboard, insights

__all__ = ["chat", "dashboard", "insights"]
