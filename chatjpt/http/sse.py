"""Server-Sent Events decoding for streamed completions.

OpenAI streams look like::

    data: {"choices": [{"delta": {"content": "Hello"}}]}

    data: {"choices": [{"delta": {"content": " world"}}]}

    data: [DONE]

Only ``data`` fields are surfaced. Comment lines (``: keep-alive``) and the
``event``/``id``/``retry`` fields are skipped.
"""

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator


DONE_MARKER = "[DONE]"


class SSEDecoder:
    """Incremental decoder turning SSE lines into event data payloads."""

    def __init__(self) -> None:
        self._data: list[str] = []

    def decode(self, line: str) -> str | None:
        """Feed one line; return the event data when a blank line ends an event."""
        line = line.rstrip("\r\n")
        if not line:
            return self.flush()

        if line.startswith(":"):
            return None

        field, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]

        # Concatenate multiple data fields of one event
        if field == "data":
            self._data.append(value)
        return None

    def flush(self) -> str | None:
        """Return any buffered data, e.g. when the body ends without a blank line."""
        if not self._data:
            return None
        data = "\n".join(self._data)
        self._data = []
        return data


def iter_sse_data(lines: Iterable[str]) -> Iterator[str]:
    """Yield event data payloads until the ``[DONE]`` marker or end of input."""
    decoder = SSEDecoder()
    for line in lines:
        data = decoder.decode(line)
        if data is None:
            continue
        if data.strip() == DONE_MARKER:
            return
        yield data

    data = decoder.flush()
    if data is not None and data.strip() != DONE_MARKER:
        yield data


async def aiter_sse_data(lines: AsyncIterable[str]) -> AsyncIterator[str]:
    """Async counterpart of :func:`iter_sse_data`."""
    decoder = SSEDecoder()
    async for line in lines:
        data = decoder.decode(line)
        if data is None:
            continue
        if data.strip() == DONE_MARKER:
            return
        yield data

    data = decoder.flush()
    if data is not None and data.strip() != DONE_MARKER:
        yield data
