"""Server-sent-event decoding for streamed chat completions."""

import json
import logging
from collections.abc import AsyncIterable, AsyncIterator

from edgee.llm.types import StreamChunk

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "
DONE_TOKEN = "[DONE]"


async def iter_sse_data(lines: AsyncIterable[str]) -> AsyncIterator[str]:
    """Yield the payload of each ``data:`` line.

    Lines without the data prefix (comments, ``event:`` fields, blank
    separators) are ignored. Iteration stops at ``[DONE]``.

    Args:
        lines: Decoded response lines, e.g. ``response.aiter_lines()``

    Yields:
        Payload text following the ``data: `` prefix
    """
    async for line in lines:
        line = line.strip()
        if not line.startswith(DATA_PREFIX):
            continue

        payload = line[len(DATA_PREFIX) :]
        if payload == DONE_TOKEN:
            return
        yield payload


async def iter_stream_chunks(lines: AsyncIterable[str]) -> AsyncIterator[StreamChunk]:
    """Decode response lines into StreamChunks, dropping malformed frames.

    Args:
        lines: Decoded response lines

    Yields:
        One StreamChunk per well-formed JSON frame
    """
    async for payload in iter_sse_data(lines):
        try:
            data = json.loads(payload)
        except json.JSONDecodeError:
            logger.debug("Skipping malformed stream frame")
            continue

        if not isinstance(data, dict):
            logger.debug("Skipping non-object stream frame")
            continue

        yield StreamChunk.from_dict(data)
