"""
Google Gemini Provider.

예외 매핑 (재시도/fallback 없음):
- ResourceExhausted, 메시지에 quota → QUOTA_EXCEEDED (429)
- InvalidArgument, PermissionDenied, Unauthenticated → AUTH_OR_INPUT_ERROR (500)
- 기타 → GENERATION_FAILED (500)
"""

import logging
import os
from collections.abc import AsyncIterator
from typing import Any

from google.api_core.exceptions import (
    InvalidArgument,
    PermissionDenied,
    ResourceExhausted,
    Unauthenticated,
)

from src.domain.constants import API_KEY_ENV_VARS, DEFAULT_MODEL
from src.domain.errors import ErrorCodes, is_quota_message

from .base import GenerationError, TextGenerationProvider

logger = logging.getLogger(__name__)

# 즉시 reject (인증/입력 오류)
REJECT_IMMEDIATELY: tuple[type[Exception], ...] = (
    InvalidArgument,
    PermissionDenied,
    Unauthenticated,
)


def _resolve_api_key() -> str | None:
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


def _response_text(response: Any) -> str:
    """
    응답(또는 스트림 chunk)의 텍스트.

    response.text 는 Part 없는 chunk(finish_reason만 있는 마지막 chunk,
    차단된 프롬프트)에서 ValueError → candidates에서 직접 꺼냄.
    Part 없으면 "".
    """
    candidates = response.candidates
    if not candidates:
        return ""
    return "".join(part.text for part in candidates[0].content.parts if part.text)


class GeminiProvider(TextGenerationProvider):
    """
    Gemini 텍스트 생성 Provider.

    Usage:
        provider = GeminiProvider(model="gemini-2.5-flash")
        text = await provider.generate(prompt)

        chunks = await provider.stream(prompt)
        async for chunk in chunks:
            ...
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
    ):
        """
        Args:
            model: 모델 ID (config에서 주입)
            api_key: API 키 (없으면 GOOGLE_GENERATIVE_AI_API_KEY → GOOGLE_API_KEY)
        """
        self.model = model
        self.api_key = api_key or _resolve_api_key()
        self._client: Any = None

    def _get_client(self) -> Any:
        """Gemini 클라이언트 (lazy init)."""
        if self._client is None:
            if not self.api_key:
                raise GenerationError(
                    ErrorCodes.API_KEY_MISSING,
                    "Gemini API key not configured. "
                    "Set GOOGLE_GENERATIVE_AI_API_KEY.",
                )
            import google.generativeai as genai

            genai.configure(api_key=self.api_key)
            self._client = genai
        return self._client

    def _get_model(self) -> Any:
        return self._get_client().GenerativeModel(self.model)

    async def generate(self, prompt: str) -> str:
        """단발 생성."""
        try:
            response = await self._get_model().generate_content_async(prompt)
            return _response_text(response)
        except GenerationError:
            raise
        except Exception as e:
            raise self._wrap_error(e) from e

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        """
        스트리밍 생성.

        generate_content_async(stream=True)는 await 시점에 요청을 보내므로
        쿼터/인증 오류는 여기서 바로 GenerationError로 올라옴.
        """
        try:
            response = await self._get_model().generate_content_async(
                prompt, stream=True
            )
        except GenerationError:
            raise
        except Exception as e:
            raise self._wrap_error(e) from e

        return self._iter_chunks(response)

    async def _iter_chunks(self, response: Any) -> AsyncIterator[str]:
        """응답 chunk → 텍스트 (빈 chunk 스킵)."""
        try:
            async for chunk in response:
                text = _response_text(chunk)
                if text:
                    yield text
        except Exception as e:
            logger.error(f"Gemini stream interrupted ({self.model}): {e}")
            raise GenerationError(
                ErrorCodes.STREAM_INTERRUPTED,
                f"Gemini stream interrupted: {e}",
                model=self.model,
            ) from e

    def _wrap_error(self, error: Exception) -> GenerationError:
        """업스트림 예외 → GenerationError (코드 분류)."""
        if isinstance(error, ResourceExhausted) or is_quota_message(error):
            logger.warning(f"Gemini quota exceeded ({self.model}): {error}")
            return GenerationError(
                ErrorCodes.QUOTA_EXCEEDED,
                f"Gemini quota exceeded: {error}",
                model=self.model,
            )

        if isinstance(error, REJECT_IMMEDIATELY):
            logger.error(f"Gemini authentication or input error: {error}")
            return GenerationError(
                ErrorCodes.AUTH_OR_INPUT_ERROR,
                f"Gemini rejected the request: {error}",
                model=self.model,
            )

        logger.error(f"Gemini call failed ({self.model}): {error}", exc_info=True)
        return GenerationError(
            ErrorCodes.GENERATION_FAILED,
            f"Gemini call failed: {error}",
            model=self.model,
        )
