"""Client for /v1/chat/completions."""

from chatjpt.http.streaming import AsyncChunkStream, ChunkStream
from chatjpt.models.chat import ChatChunkResponse, ChatRequest, ChatResponse

from .base import ResourceClient


class ChatClient(ResourceClient):
    """Creates chat completions, whole or streamed."""

    path = "/v1/chat/completions"

    def send_request(self, request: ChatRequest) -> ChatResponse:
        return self._http.send("POST", self.path, ChatResponse, body=request)

    async def send_request_async(self, request: ChatRequest) -> ChatResponse:
        return await self._http.send_async("POST", self.path, ChatResponse, body=request)

    def send_stream_request(
        self, request: ChatRequest
    ) -> ChunkStream[ChatChunkResponse]:
        """Stream the completion as chunks.

        ``"stream": true`` is always sent, whatever ``request.stream`` holds.
        Use the result as a context manager or exhaust it to release the
        connection::

            with client.chat.send_stream_request(request) as chunks:
                for chunk in chunks:
                    print(chunk.choices[0].delta.content or "", end="")
        """
        return self._http.send_stream(self.path, request, ChatChunkResponse)

    async def send_stream_request_async(
        self, request: ChatRequest
    ) -> AsyncChunkStream[ChatChunkResponse]:
        return await self._http.send_stream_async(self.path, request, ChatChunkResponse)
