"""
Chat Routes: 대시보드 AI 어시스턴트.

- POST /api/chat → text/plain 스트림

통계는 요청 body가 아니라 번들 데이터셋 기준 (시스템 컨텍스트).
대화 기록은 브라우저에만 존재, 서버는 저장하지 않음.
"""

import asyncio
import logging
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import ValidationError

from src.app.services.prompts import build_chat_prompt
from src.app.services.relay import text_stream_response
from src.app.state import get_chat_context, get_provider, get_request_timeout
from src.domain.constants import (
    CHAT_FAILED_MESSAGE,
    CHAT_QUOTA_MESSAGE,
    INVALID_MESSAGE,
)
from src.domain.errors import status_for_error
from src.domain.schemas import ChatRequest

logger = logging.getLogger(__name__)

api_router = APIRouter()


@api_router.post("/chat")
async def chat(request: Request, payload: Any = Body(None)) -> Response:
    """
    채팅 메시지 → 스트리밍 응답.

    message 누락/빈 문자열/문자열 아님 → 400 "Invalid message"
    """
    try:
        body = ChatRequest.model_validate(payload)
    except ValidationError:
        return PlainTextResponse(INVALID_MESSAGE, status_code=400)

    provider = get_provider(request)
    prompt = build_chat_prompt(
        get_chat_context(request),
        body.message,
        body.history,
    )

    try:
        chunks = await asyncio.wait_for(
            provider.stream(prompt),
            timeout=get_request_timeout(request),
        )
    except Exception as e:
        logger.error(f"Chat error: {e}", exc_info=True)
        status = status_for_error(e)
        message = CHAT_QUOTA_MESSAGE if status == 429 else CHAT_FAILED_MESSAGE
        return PlainTextResponse(message, status_code=status)

    return text_stream_response(chunks, label="chat")
