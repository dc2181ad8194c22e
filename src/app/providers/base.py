"""
AI Provider 추상 인터페이스.

- Provider 추상화로 모델 교체 가능 (라우트는 Gemini를 모름)
- 모델명은 config만 SSOT
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Any

# =============================================================================
# Provider Exceptions
# =============================================================================


class ProviderError(Exception):
    """Provider 관련 에러."""

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """로그 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class GenerationError(ProviderError):
    """텍스트 생성 관련 에러."""
    pass


# =============================================================================
# Abstract Provider
# =============================================================================


class TextGenerationProvider(ABC):
    """
    텍스트 생성 Provider 추상 인터페이스.

    역할: 프롬프트 → 텍스트 (분석/판단은 전부 외부 모델)
    """

    model: str

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        단발 생성 (응답 전체를 기다림).

        Args:
            prompt: 완성된 프롬프트

        Returns:
            응답 텍스트

        Raises:
            GenerationError
        """
        ...

    @abstractmethod
    async def stream(self, prompt: str) -> AsyncIterator[str]:
        """
        스트리밍 생성.

        업스트림 호출 실패는 첫 chunk 이전에 GenerationError로 올라와야 함
        (라우트가 429/500으로 매핑할 수 있도록).

        Args:
            prompt: 완성된 프롬프트

        Returns:
            텍스트 chunk async iterator
        """
        ...
