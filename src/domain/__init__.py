"""Domain layer: errors, schemas, constants."""

from .constants import FocusArea
from .errors import ErrorCodes, status_for_code, status_for_error
from .schemas import (
    ChatMessage,
    ChatRequest,
    CountryAnalysisRequest,
    CountryTraffic,
    DashboardData,
    InsightsRequest,
    Stats,
    StatsAnalysisRequest,
)

__all__ = [
    "ErrorCodes",
    "status_for_code",
    "status_for_error",
    "FocusArea",
    "Stats",
    "CountryTraffic",
    "DashboardData",
    "StatsAnalysisRequest",
    "InsightsRequest",
    "CountryAnalysisRequest",
    "ChatMessage",
    "ChatRequest",
]
