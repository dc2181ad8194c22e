"""
Application Services.

역할:
- prompts: 통계 → 프롬프트 문자열
- relay: provider 스트림 → 브라우저 응답
"""

from .prompts import (
    build_chat_prompt,
    build_chat_system_context,
    build_country_prompt,
    build_focus_prompt,
    build_stats_analysis_prompt,
)
from .relay import relay_chunks, text_stream_response

__all__ = [
    "build_stats_analysis_prompt",
    "build_focus_prompt",
    "build_country_prompt",
    "build_chat_system_context",
    "build_chat_prompt",
    "relay_chunks",
    "text_stream_response",
]
