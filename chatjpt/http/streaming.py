"""Lazy chunk streams over Server-Sent Events responses."""

import asyncio
from collections.abc import AsyncGenerator, AsyncIterator, Generator, Iterator
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel

from chatjpt.core.logging import get_logger

from .responses import decode_chunk, translate_transport_error
from .sse import aiter_sse_data, iter_sse_data


logger = get_logger(__name__)

ChunkT = TypeVar("ChunkT", bound=BaseModel)

# Strong references to response closes scheduled by abandoned async streams
_pending_closes: set["asyncio.Task[None]"] = set()


class ChunkStream(Generic[ChunkT]):
    """Iterator of decoded chunks read lazily from an open streaming response.

    The response is released when the stream ends, fails, is closed, or is
    dropped without being exhausted.
    Iterating after the stream has finished yields nothing.
    """

    def __init__(
        self,
        response: httpx.Response,
        chunk_type: type[ChunkT],
        timeout: float | None = None,
    ):
        self.response = response
        self._chunk_type = chunk_type
        self._timeout = timeout
        self._chunks = 0
        self._released = False
        self._iterator = self._iter_chunks()

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def __iter__(self) -> Iterator[ChunkT]:
        return self

    def __next__(self) -> ChunkT:
        return next(self._iterator)

    def _iter_chunks(self) -> Generator[ChunkT, None, None]:
        url = str(self.response.request.url)
        try:
            for data in iter_sse_data(self.response.iter_lines()):
                chunk = decode_chunk(data, self._chunk_type, self.status_code)
                self._chunks += 1
                yield chunk
        except httpx.HTTPError as e:
            logger.warning("openai_stream_interrupted", url=url, error=str(e))
            raise translate_transport_error(e, url, self._timeout) from e
        finally:
            self._release()

    def _release(self) -> None:
        if self._released:
            return
        self._released = True
        self.response.close()
        logger.debug(
            "openai_stream_closed",
            url=str(self.response.request.url),
            chunks=self._chunks,
        )

    def close(self) -> None:
        """Stop the stream and release the connection."""
        self._iterator.close()
        self._release()

    def __enter__(self) -> "ChunkStream[ChunkT]":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __del__(self) -> None:
        if not getattr(self, "_released", True):
            self.close()


class AsyncChunkStream(Generic[ChunkT]):
    """Async iterator of decoded chunks from an open streaming response.

    Prefer `async with` or :meth:`aclose`. A stream dropped unexhausted while
    its event loop is running has its response closed by a task scheduled on
    that loop; outside a running loop the connection cannot be released and a
    warning is logged.
    """

    def __init__(
        self,
        response: httpx.Response,
        chunk_type: type[ChunkT],
        timeout: float | None = None,
    ):
        self.response = response
        self._chunk_type = chunk_type
        self._timeout = timeout
        self._chunks = 0
        self._released = False
        self._iterator = self._iter_chunks()

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def __aiter__(self) -> AsyncIterator[ChunkT]:
        return self

    async def __anext__(self) -> ChunkT:
        return await self._iterator.__anext__()

    async def _iter_chunks(self) -> AsyncGenerator[ChunkT, None]:
        url = str(self.response.request.url)
        try:
            async for data in aiter_sse_data(self.response.aiter_lines()):
                chunk = decode_chunk(data, self._chunk_type, self.status_code)
                self._chunks += 1
                yield chunk
        except httpx.HTTPError as e:
            logger.warning("openai_stream_interrupted", url=url, error=str(e))
            raise translate_transport_error(e, url, self._timeout) from e
        finally:
            await self._release()

    async def _release(self) -> None:
        if self._released:
            return
        self._released = True
        await self.response.aclose()
        logger.debug(
            "openai_stream_closed",
            url=str(self.response.request.url),
            chunks=self._chunks,
        )

    async def aclose(self) -> None:
        """Stop the stream and release the connection."""
        await self._iterator.aclose()
        await self._release()

    async def __aenter__(self) -> "AsyncChunkStream[ChunkT]":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def __del__(self) -> None:
        if getattr(self, "_released", True):
            return
        self._released = True
        url = str(self.response.request.url)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("openai_stream_abandoned", url=url, chunks=self._chunks)
            return
        task = loop.create_task(self.response.aclose())
        _pending_closes.add(task)
        task.add_done_callback(_pending_closes.discard)
        logger.debug("openai_stream_closed", url=url, chunks=self._chunks)
