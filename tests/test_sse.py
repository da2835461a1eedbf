"""Tests for server-sent-event decoding."""

import httpx
import pytest
from helpers import content_chunk, sse_body

from edgee.llm.sse import iter_sse_data, iter_stream_chunks


async def _pieces(*parts: bytes):
    for part in parts:
        yield part


def _lines(*parts: bytes):
    """Decode network reads into lines the way the transport does."""
    response = httpx.Response(200, content=_pieces(*parts))
    return response.aiter_lines()


async def _collect(iterator) -> list:
    return [item async for item in iterator]


@pytest.mark.asyncio
async def test_decodes_single_frame():
    body = b'data: {"choices":[{"index":0,"delta":{"content":"Hi"},"finish_reason":null}]}\n\n'

    chunks = await _collect(iter_stream_chunks(_lines(body)))

    assert len(chunks) == 1
    assert chunks[0].text == "Hi"
    assert chunks[0].finish_reason is None


@pytest.mark.asyncio
async def test_frame_split_across_reads():
    body = sse_body(content_chunk("Hello"), content_chunk(" world"))
    parts = [body[i : i + 7] for i in range(0, len(body), 7)]

    chunks = await _collect(iter_stream_chunks(_lines(*parts)))

    assert [c.text for c in chunks] == ["Hello", " world"]


@pytest.mark.asyncio
async def test_multibyte_character_split_across_reads():
    body = 'data: {"choices":[{"index":0,"delta":{"content":"café"}}]}\n\n'.encode()
    split = body.index("é".encode()) + 1

    chunks = await _collect(iter_stream_chunks(_lines(body[:split], body[split:])))

    assert chunks[0].text == "café"


@pytest.mark.asyncio
async def test_malformed_frame_is_skipped():
    body = sse_body("{not json", content_chunk("ok"))

    chunks = await _collect(iter_stream_chunks(_lines(body)))

    assert len(chunks) == 1
    assert chunks[0].text == "ok"


@pytest.mark.asyncio
async def test_non_object_frame_is_skipped():
    body = sse_body("42", content_chunk("ok"))

    chunks = await _collect(iter_stream_chunks(_lines(body)))

    assert [c.text for c in chunks] == ["ok"]


@pytest.mark.asyncio
async def test_done_token_stops_iteration():
    body = sse_body(content_chunk("before"), done=True) + sse_body(content_chunk("after"), done=False)

    payloads = await _collect(iter_sse_data(_lines(body)))

    assert len(payloads) == 1


@pytest.mark.asyncio
async def test_ignores_lines_without_data_prefix():
    body = b": keep-alive\n\nevent: message\n" + sse_body(content_chunk("x"))

    chunks = await _collect(iter_stream_chunks(_lines(body)))

    assert [c.text for c in chunks] == ["x"]


@pytest.mark.asyncio
async def test_trailing_line_without_newline():
    body = b'data: {"choices":[{"index":0,"delta":{"content":"tail"}}]}'

    chunks = await _collect(iter_stream_chunks(_lines(body)))

    assert [c.text for c in chunks] == ["tail"]


@pytest.mark.asyncio
async def test_crlf_line_endings():
    body = b'data: {"choices":[{"index":0,"delta":{"content":"a"}}]}\r\n\r\ndata: [DONE]\r\n\r\n'

    chunks = await _collect(iter_stream_chunks(_lines(body)))

    assert [c.text for c in chunks] == ["a"]
