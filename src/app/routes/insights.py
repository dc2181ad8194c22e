"""
Insights Routes: 통계 → Gemini 분석.

- POST /api/analyze-stats → JSON {"analysis": ...} (단발)
- POST /api/stream-insights → text/plain 스트림 (탭별 focus)
- POST /api/analyze-country → text/plain 스트림 (국가 선택)

에러: quota → 429, 나머지 → 500 (고정 문구, raw 에러는 로그에만)
"""

import asyncio
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from src.app.services.prompts import (
    build_country_prompt,
    build_focus_prompt,
    build_stats_analysis_prompt,
)
from src.app.services.relay import text_stream_response
from src.app.state import get_provider, get_request_timeout
from src.domain.constants import (
    ANALYZE_COUNTRY_FAILED_MESSAGE,
    ANALYZE_STATS_FAILED_MESSAGE,
    QUOTA_MESSAGE,
    STREAM_INSIGHTS_FAILED_MESSAGE,
    FocusArea,
)
from src.domain.errors import status_for_error
from src.domain.schemas import (
    AnalysisResponse,
    CountryAnalysisRequest,
    InsightsRequest,
    StatsAnalysisRequest,
)

logger = logging.getLogger(__name__)

api_router = APIRouter()


def _json_error(error: Exception, failed_message: str) -> JSONResponse:
    status = status_for_error(error)
    message = QUOTA_MESSAGE if status == 429 else failed_message
    return JSONResponse({"error": message}, status_code=status)


@api_router.post("/analyze-stats", response_model=AnalysisResponse)
async def analyze_stats(
    request: Request,
    body: StatsAnalysisRequest,
) -> Response:
    """전체 통계 단발 분석."""
    provider = get_provider(request)
    prompt = build_stats_analysis_prompt(body.stats)

    try:
        text = await asyncio.wait_for(
            provider.generate(prompt),
            timeout=get_request_timeout(request),
        )
    except Exception as e:
        logger.error(f"Error analyzing stats with {provider.model}: {e}", exc_info=True)
        return _json_error(e, ANALYZE_STATS_FAILED_MESSAGE)

    return JSONResponse(AnalysisResponse(analysis=text).model_dump())


@api_router.post("/stream-insights")
async def stream_insights(request: Request, body: InsightsRequest) -> Response:
    """탭별 인사이트 스트리밍."""
    focus = FocusArea.parse(body.focus)
    logger.info(f"Received insights request for: {focus.value}")

    provider = get_provider(request)
    prompt = build_focus_prompt(body.stats, focus)

    try:
        logger.info(f"Calling {provider.model} for {focus.value} insights")
        chunks = await asyncio.wait_for(
            provider.stream(prompt),
            timeout=get_request_timeout(request),
        )
    except Exception as e:
        logger.error(f"Error streaming insights: {e}", exc_info=True)
        status = status_for_error(e)
        message = QUOTA_MESSAGE if status == 429 else STREAM_INSIGHTS_FAILED_MESSAGE
        return PlainTextResponse(message, status_code=status)

    return text_stream_response(chunks, label=f"stream-insights:{focus.value}")


@api_router.post("/analyze-country")
async def analyze_country(
    request: Request,
    body: CountryAnalysisRequest,
) -> Response:
    """국가 선택 분석 스트리밍."""
    provider = get_provider(request)
    prompt = build_country_prompt(body)

    try:
        chunks = await asyncio.wait_for(
            provider.stream(prompt),
            timeout=get_request_timeout(request),
        )
    except Exception as e:
        logger.error(
            f"Error analyzing country {body.country_code}: {e}", exc_info=True
        )
        return _json_error(e, ANALYZE_COUNTRY_FAILED_MESSAGE)

    return text_stream_response(
        chunks,
        label=f"analyze-country:{body.country_code}",
    )
