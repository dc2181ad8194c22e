"""
AI Provider Abstraction.

모델 교체 가능하게 설계. 모델명은 config만 SSOT.
"""

from .base import GenerationError, ProviderError, TextGenerationProvider
from .gemini import GeminiProvider

__all__ = [
    "TextGenerationProvider",
    "ProviderError",
    "GenerationError",
    "GeminiProvider",
]
