"""
test_relay.py - 스트림 중계 테스트

검증 포인트:
1. chunk 순서/내용 그대로 UTF-8 bytes
2. 스트림 도중 실패 → 다시 raise
3. 응답 헤더 (text/plain, no-cache)
"""

import pytest

from src.app.services.relay import relay_chunks, text_stream_response


async def _chunks(*texts: str, error: Exception | None = None):
    for text in texts:
        yield text
    if error is not None:
        raise error


class TestRelayChunks:
    """relay_chunks."""

    @pytest.mark.asyncio
    async def test_bytes_in_order(self):
        relayed = [b async for b in relay_chunks(_chunks("a", "b", "c"), "test")]

        assert relayed == [b"a", b"b", b"c"]

    @pytest.mark.asyncio
    async def test_utf8_encoding(self):
        relayed = [b async for b in relay_chunks(_chunks("캐시 적중률 ✅"), "test")]

        assert relayed == ["캐시 적중률 ✅".encode()]

    @pytest.mark.asyncio
    async def test_empty_stream(self):
        relayed = [b async for b in relay_chunks(_chunks(), "test")]

        assert relayed == []

    @pytest.mark.asyncio
    async def test_mid_stream_error_propagates(self):
        relayed = []
        with pytest.raises(RuntimeError, match="upstream closed"):
            async for b in relay_chunks(
                _chunks("partial", error=RuntimeError("upstream closed")), "test"
            ):
                relayed.append(b)

        assert relayed == [b"partial"]


class TestTextStreamResponse:
    """text_stream_response."""

    def test_headers(self):
        response = text_stream_response(_chunks("x"), "test")

        assert response.media_type == "text/plain; charset=utf-8"
        assert response.headers["cache-control"] == "no-cache"
        assert response.headers["x-accel-buffering"] == "no"
