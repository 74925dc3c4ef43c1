"""Client for /v1/embeddings."""

from chatjpt.models.embeddings import Embeddings, EmbeddingsRequest

from .base import ResourceClient


class EmbeddingsClient(ResourceClient):
    path = "/v1/embeddings"

    def create_embeddings(self, request: EmbeddingsRequest) -> Embeddings:
        return self._http.send("POST", self.path, Embeddings, body=request)

    async def create_embeddings_async(self, request: EmbeddingsRequest) -> Embeddings:
        return await self._http.send_async("POST", self.path, Embeddings, body=request)
