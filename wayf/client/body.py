"""Draining of the raw callback body posted to the ACS endpoint."""

import codecs
from collections.abc import AsyncIterable, AsyncIterator
from typing import Protocol, runtime_checkable

READ_CHUNK_SIZE = 4096


@runtime_checkable
class AsyncReader(Protocol):
    """Anything with an ``async read(n)``, e.g. ``asyncio.StreamReader``."""

    async def read(self, n: int = -1) -> bytes: ...


BodyStream = AsyncReader | AsyncIterable[bytes]


async def _chunks(stream: BodyStream) -> AsyncIterator[bytes]:
    if isinstance(stream, AsyncReader):
        while chunk := await stream.read(READ_CHUNK_SIZE):
            yield chunk
    else:
        async for chunk in stream:
            yield chunk


async def read_body(stream: BodyStream) -> str:
    """Read the whole stream and decode it as UTF-8."""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    parts: list[str] = []
    async for chunk in _chunks(stream):
        parts.append(decoder.decode(chunk))
    parts.append(decoder.decode(b"", final=True))
    return "".join(parts)
