"""Entry point bundling every resource client behind one configuration."""

from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from chatjpt.config.settings import ClientSettings
from chatjpt.core.errors import ConfigurationError
from chatjpt.core.logging import get_logger
from chatjpt.http.client import OpenAIHttpClient
from chatjpt.resources import (
    AudioClient,
    ChatClient,
    EmbeddingsClient,
    FilesClient,
    FineTuningClient,
    ImagesClient,
    ModelsClient,
    ModerationsClient,
)


logger = get_logger(__name__)


class ChatJPT:
    """OpenAI API client.

    Explicit arguments win over ``settings``, which in turn default to
    ``OPENAI_*`` environment variables and ``.env``. Configuration is fixed
    once the client is built; every resource client shares one HTTP core.

    Example::

        with ChatJPT(api_key="sk-...") as client:
            response = client.chat.send_request(
                ChatRequest(messages=[user_message("Hello")])
            )

    Raises:
        ConfigurationError: If no API key is available or a setting is invalid
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        organization: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        connect_timeout: float | None = None,
        settings: ClientSettings | None = None,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ):
        overrides: dict[str, Any] = {
            key: value
            for key, value in {
                "api_key": api_key,
                "organization": organization,
                "base_url": base_url,
                "timeout": timeout,
                "connect_timeout": connect_timeout,
            }.items()
            if value is not None
        }
        self.settings = self._resolve_settings(settings, overrides)

        self._http = OpenAIHttpClient(
            self.settings, transport=transport, async_transport=async_transport
        )
        self.chat = ChatClient(self._http)
        self.audio = AudioClient(self._http)
        self.images = ImagesClient(self._http)
        self.moderations = ModerationsClient(self._http)
        self.embeddings = EmbeddingsClient(self._http)
        self.files = FilesClient(self._http)
        self.fine_tuning = FineTuningClient(self._http)
        self.models = ModelsClient(self._http)

        logger.debug(
            "client_initialized",
            base_url=self.settings.base_url,
            organization=self.settings.organization,
            timeout=self.settings.timeout,
        )

    @staticmethod
    def _resolve_settings(
        settings: ClientSettings | None, overrides: dict[str, Any]
    ) -> ClientSettings:
        try:
            if settings is None:
                resolved = ClientSettings(**overrides)
            elif overrides:
                resolved = ClientSettings(**{**settings.model_dump(), **overrides})
            else:
                resolved = settings
        except ValidationError as e:
            raise ConfigurationError(f"Invalid client configuration: {e}", e) from e

        if not resolved.api_key_value().strip():
            raise ConfigurationError(
                "API key must be set, either explicitly or via OPENAI_API_KEY"
            )
        return resolved

    @classmethod
    def from_toml(cls, path: Path | str, **kwargs: Any) -> "ChatJPT":
        """Build a client from a TOML file with an ``[openai]`` table.

        Environment variables take precedence over file values; keyword
        arguments take precedence over both.
        """
        return cls(settings=ClientSettings.from_toml(path), **kwargs)

    @property
    def http(self) -> OpenAIHttpClient:
        return self._http

    def close(self) -> None:
        self._http.close()

    async def aclose(self) -> None:
        await self._http.aclose()

    def __enter__(self) -> "ChatJPT":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "ChatJPT":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
