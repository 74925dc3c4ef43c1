"""Client for /v1/models."""

from chatjpt.models.common import DataList, DeletionStatus
from chatjpt.models.models import Model

from .base import ResourceClient


class ModelsClient(ResourceClient):
    path = "/v1/models"

    def list_models(self) -> list[Model]:
        return self._http.send("GET", self.path, DataList[Model]).data

    async def list_models_async(self) -> list[Model]:
        page = await self._http.send_async("GET", self.path, DataList[Model])
        return page.data

    def retrieve_model(self, model_id: str) -> Model:
        return self._http.send("GET", self._url(model_id), Model)

    async def retrieve_model_async(self, model_id: str) -> Model:
        return await self._http.send_async("GET", self._url(model_id), Model)

    def delete_model(self, model_id: str) -> DeletionStatus:
        """Delete a fine-tuned model owned by your organization."""
        return self._http.send("DELETE", self._url(model_id), DeletionStatus)

    async def delete_model_async(self, model_id: str) -> DeletionStatus:
        return await self._http.send_async("DELETE", self._url(model_id), DeletionStatus)
