"""Client for /v1/images."""

from chatjpt.models.images import (
    CreateImageRequest,
    CreateImageVariationRequest,
    EditImageRequest,
    Images,
)

from .base import ResourceClient


class ImagesClient(ResourceClient):
    path = "/v1/images"

    def create_image(self, request: CreateImageRequest) -> Images:
        return self._http.send("POST", self._url("generations"), Images, body=request)

    async def create_image_async(self, request: CreateImageRequest) -> Images:
        return await self._http.send_async(
            "POST", self._url("generations"), Images, body=request
        )

    def edit_image(self, request: EditImageRequest) -> Images:
        return self._http.send("POST", self._url("edits"), Images, body=request)

    async def edit_image_async(self, request: EditImageRequest) -> Images:
        return await self._http.send_async(
            "POST", self._url("edits"), Images, body=request
        )

    def create_image_variation(self, request: CreateImageVariationRequest) -> Images:
        return self._http.send("POST", self._url("variations"), Images, body=request)

    async def create_image_variation_async(
        self, request: CreateImageVariationRequest
    ) -> Images:
        return await self._http.send_async(
            "POST", self._url("variations"), Images, body=request
        )
