"""Client for /v1/moderations."""

from chatjpt.models.moderations import Moderation, ModerationRequest

from .base import ResourceClient


class ModerationsClient(ResourceClient):
    path = "/v1/moderations"

    def create_moderation(self, request: ModerationRequest) -> Moderation:
        return self._http.send("POST", self.path, Moderation, body=request)

    async def create_moderation_async(self, request: ModerationRequest) -> Moderation:
        return await self._http.send_async("POST", self.path, Moderation, body=request)
