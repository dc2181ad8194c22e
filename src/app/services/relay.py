"""
Stream Relay: provider chunk → 브라우저.

버퍼링/백프레셔 정책 없음. 도착 순서대로 그대로 전달.
"""

import logging
from collections.abc import AsyncIterator

from fastapi.responses import StreamingResponse

from src.domain.constants import TEXT_STREAM_MEDIA_TYPE

logger = logging.getLogger(__name__)

# 리버스 프록시(nginx) 버퍼링 끔 → chunk 도착 즉시 전달
STREAM_HEADERS = {"Cache-Control": "no-cache", "X-Accel-Buffering": "no"}


async def relay_chunks(
    chunks: AsyncIterator[str],
    label: str,
) -> AsyncIterator[bytes]:
    """
    텍스트 chunk → UTF-8 bytes (순서/내용 그대로).

    스트림 도중 실패는 로그 후 다시 raise → 연결 중단.
    응답 헤더가 이미 나간 뒤라 상태 코드는 바꿀 수 없음.

    Args:
        chunks: provider.stream() 결과
        label: 로그용 엔드포인트 이름
    """
    count = 0
    try:
        async for text in chunks:
            count += 1
            yield text.encode("utf-8")
    except Exception as e:
        logger.error(f"Error in stream ({label}) after {count} chunks: {e}")
        raise
    logger.debug(f"Stream ({label}) finished: {count} chunks")


def text_stream_response(
    chunks: AsyncIterator[str],
    label: str,
) -> StreamingResponse:
    """chunked text/plain 스트리밍 응답."""
    return StreamingResponse(
        relay_chunks(chunks, label),
        media_type=TEXT_STREAM_MEDIA_TYPE,
        headers=STREAM_HEADERS,
    )
