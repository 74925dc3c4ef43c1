"""HTTP core shared by every resource client.

Holds one sync and one async httpx client, lazily created and reused for the
lifetime of the owner. Every request carries the bearer token and, when
configured, the organization header. Non-2xx answers become OpenAIError,
httpx failures become TransportError, and bodies that do not match the
expected model become DecodingError.
"""

import contextlib
import threading
import time
from pathlib import Path
from typing import Any, TypeVar

import anyio
import anyio.to_thread
import httpx
from pydantic import BaseModel

from chatjpt.config.settings import ClientSettings
from chatjpt.core._version import __version__
from chatjpt.core.errors import TransportError
from chatjpt.core.logging import get_logger
from chatjpt.models.common import OpenAIRequest

from .multipart import encode_multipart
from .responses import decode_response, error_from_response, translate_transport_error
from .streaming import AsyncChunkStream, ChunkStream


logger = get_logger(__name__)

T = TypeVar("T")
ChunkT = TypeVar("ChunkT", bound=BaseModel)

Params = dict[str, Any] | None


def _discard_partial(destination: Path) -> None:
    if destination.is_file():
        with contextlib.suppress(OSError):
            destination.unlink()


class OpenAIHttpClient:
    """Sends OpenAI requests and decodes their responses.

    Safe to share between threads and tasks; it keeps no per-request state.
    """

    def __init__(
        self,
        settings: ClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        self._transport = transport
        self._async_transport = async_transport
        self._client: httpx.Client | None = None
        self._async_client: httpx.AsyncClient | None = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Client lifecycle
    # ------------------------------------------------------------------

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.settings.timeout, connect=self.settings.connect_timeout)

    def _default_headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.settings.api_key_value()}",
            "User-Agent": f"chatjpt-python/{__version__}",
        }
        if self.settings.organization:
            headers["OpenAI-Organization"] = self.settings.organization
        return headers

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = httpx.Client(
                        base_url=self.settings.base_url,
                        headers=self._default_headers(),
                        timeout=self._timeout(),
                        transport=self._transport,
                    )
        return self._client

    @property
    def async_client(self) -> httpx.AsyncClient:
        if self._async_client is None:
            with self._lock:
                if self._async_client is None:
                    self._async_client = httpx.AsyncClient(
                        base_url=self.settings.base_url,
                        headers=self._default_headers(),
                        timeout=self._timeout(),
                        transport=self._async_transport,
                    )
        return self._async_client

    def close(self) -> None:
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()

    async def aclose(self) -> None:
        with self._lock:
            async_client, self._async_client = self._async_client, None
        if async_client is not None:
            await async_client.aclose()
        self.close()

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------

    @staticmethod
    def _body_kwargs(body: OpenAIRequest | None, stream: bool) -> dict[str, Any]:
        if body is None:
            return {}
        if body.is_multipart:
            data, files = encode_multipart(body)
            return {"data": data, "files": files}
        payload = body.to_payload()
        if stream:
            payload["stream"] = True
        return {"json": payload}

    @staticmethod
    def _params(params: Params) -> dict[str, Any] | None:
        if not params:
            return None
        return {key: value for key, value in params.items() if value is not None}

    def _build(
        self,
        client: httpx.Client | httpx.AsyncClient,
        method: str,
        path: str,
        params: Params,
        body_kwargs: dict[str, Any],
        stream: bool,
    ) -> httpx.Request:
        headers = {"Accept": "text/event-stream"} if stream else None
        return client.build_request(
            method, path, params=self._params(params), headers=headers, **body_kwargs
        )

    # ------------------------------------------------------------------
    # Sync transport
    # ------------------------------------------------------------------

    def _send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        url = str(request.url)
        start = time.perf_counter()
        try:
            response = self.client.send(request, stream=stream)
        except httpx.HTTPError as e:
            logger.error(
                "openai_transport_error",
                method=request.method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise translate_transport_error(e, url, self.settings.timeout) from e

        logger.debug(
            "openai_request_sent",
            method=request.method,
            url=url,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            streaming=stream,
        )
        return response

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        url = str(response.request.url)
        try:
            response.read()
        except httpx.HTTPError as e:
            raise translate_transport_error(e, url, self.settings.timeout) from e
        finally:
            response.close()
        error = error_from_response(response)
        logger.warning(
            "openai_request_failed",
            method=response.request.method,
            url=url,
            status_code=error.status_code,
            error_type=error.error_type,
            error_message=error.error_message,
        )
        raise error

    def send(
        self,
        method: str,
        path: str,
        response_type: type[T] | None,
        *,
        body: OpenAIRequest | None = None,
        params: Params = None,
    ) -> T:
        """Send a request and decode the body as ``response_type``.

        Args:
            method: HTTP method
            path: Path relative to the base URL, e.g. ``/v1/models``
            response_type: Pydantic model to decode into, or ``bytes``/``str``
                for the raw body, ``None`` to ignore it
            body: JSON or multipart request body
            params: Query parameters; ``None`` values are dropped

        Raises:
            OpenAIError: If the API answers with a non-2xx status
            TransportError: If the request cannot be completed
            DecodingError: If the body does not match ``response_type``
        """
        request = self._build(
            self.client, method, path, params, self._body_kwargs(body, False), False
        )
        response = self._send(request)
        self._raise_for_status(response)
        return decode_response(response, response_type)

    def send_stream(
        self,
        path: str,
        body: OpenAIRequest,
        chunk_type: type[ChunkT],
    ) -> ChunkStream[ChunkT]:
        """POST ``body`` with ``stream: true`` and return a lazy chunk stream.

        The handshake status is checked before returning, so an error answer
        raises here rather than on the first iteration.
        """
        request = self._build(
            self.client, "POST", path, None, self._body_kwargs(body, True), True
        )
        response = self._send(request, stream=True)
        self._raise_for_status(response)
        logger.debug("openai_stream_opened", url=str(request.url))
        return ChunkStream(response, chunk_type, self.settings.timeout)

    def download(
        self,
        method: str,
        path: str,
        destination: Path,
        *,
        body: OpenAIRequest | None = None,
    ) -> Path:
        """Stream a binary response body into ``destination``.

        Nothing is written when the API answers with an error. A file left
        incomplete by a transport failure is removed.
        """
        destination = Path(destination)
        request = self._build(
            self.client, method, path, None, self._body_kwargs(body, False), False
        )
        response = self._send(request, stream=True)
        self._raise_for_status(response)

        url = str(request.url)
        written = 0
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with destination.open("wb") as fh:
                for chunk in response.iter_bytes():
                    fh.write(chunk)
                    written += len(chunk)
        except httpx.HTTPError as e:
            _discard_partial(destination)
            raise translate_transport_error(e, url, self.settings.timeout) from e
        except OSError as e:
            _discard_partial(destination)
            raise TransportError(
                f"Cannot write {destination}: {e}", url=url, cause=e
            ) from e
        finally:
            response.close()

        logger.info(
            "file_download_completed", url=url, path=str(destination), bytes=written
        )
        return destination

    # ------------------------------------------------------------------
    # Async transport
    # ------------------------------------------------------------------

    async def _abody_kwargs(
        self, body: OpenAIRequest | None, stream: bool
    ) -> dict[str, Any]:
        if body is not None and body.is_multipart:
            # Reading upload files from disk must not block the event loop
            return await anyio.to_thread.run_sync(self._body_kwargs, body, stream)
        return self._body_kwargs(body, stream)

    async def _asend(
        self, request: httpx.Request, *, stream: bool = False
    ) -> httpx.Response:
        url = str(request.url)
        start = time.perf_counter()
        try:
            response = await self.async_client.send(request, stream=stream)
        except httpx.HTTPError as e:
            logger.error(
                "openai_transport_error",
                method=request.method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise translate_transport_error(e, url, self.settings.timeout) from e

        logger.debug(
            "openai_request_sent",
            method=request.method,
            url=url,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            streaming=stream,
        )
        return response

    async def _araise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        url = str(response.request.url)
        try:
            await response.aread()
        except httpx.HTTPError as e:
            raise translate_transport_error(e, url, self.settings.timeout) from e
        finally:
            await response.aclose()
        error = error_from_response(response)
        logger.warning(
            "openai_request_failed",
            method=response.request.method,
            url=url,
            status_code=error.status_code,
            error_type=error.error_type,
            error_message=error.error_message,
        )
        raise error

    async def send_async(
        self,
        method: str,
        path: str,
        response_type: type[T] | None,
        *,
        body: OpenAIRequest | None = None,
        params: Params = None,
    ) -> T:
        """Async counterpart of :meth:`send`."""
        request = self._build(
            self.async_client,
            method,
            path,
            params,
            await self._abody_kwargs(body, False),
            False,
        )
        response = await self._asend(request)
        await self._araise_for_status(response)
        return decode_response(response, response_type)

    async def send_stream_async(
        self,
        path: str,
        body: OpenAIRequest,
        chunk_type: type[ChunkT],
    ) -> AsyncChunkStream[ChunkT]:
        """Async counterpart of :meth:`send_stream`."""
        request = self._build(
            self.async_client,
            "POST",
            path,
            None,
            await self._abody_kwargs(body, True),
            True,
        )
        response = await self._asend(request, stream=True)
        await self._araise_for_status(response)
        logger.debug("openai_stream_opened", url=str(request.url))
        return AsyncChunkStream(response, chunk_type, self.settings.timeout)

    async def download_async(
        self,
        method: str,
        path: str,
        destination: Path,
        *,
        body: OpenAIRequest | None = None,
    ) -> Path:
        """Async counterpart of :meth:`download`."""
        destination = Path(destination)
        request = self._build(
            self.async_client,
            method,
            path,
            None,
            await self._abody_kwargs(body, False),
            False,
        )
        response = await self._asend(request, stream=True)
        await self._araise_for_status(response)

        url = str(request.url)
        target = anyio.Path(destination)
        written = 0
        try:
            await target.parent.mkdir(parents=True, exist_ok=True)
            async with await anyio.open_file(destination, "wb") as fh:
                async for chunk in response.aiter_bytes():
                    await fh.write(chunk)
                    written += len(chunk)
        except httpx.HTTPError as e:
            with contextlib.suppress(OSError):
                await target.unlink(missing_ok=True)
            raise translate_transport_error(e, url, self.settings.timeout) from e
        except OSError as e:
            with contextlib.suppress(OSError):
                await target.unlink(missing_ok=True)
            raise TransportError(
                f"Cannot write {destination}: {e}", url=url, cause=e
            ) from e
        finally:
            await response.aclose()

        logger.info(
            "file_download_completed", url=url, path=str(destination), bytes=written
        )
        return destination
