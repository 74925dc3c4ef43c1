import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chatjpt.core.errors import ConfigurationError
from chatjpt.core.logging import get_logger


__all__ = ["ClientSettings", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT"]


logger = get_logger(__name__)


DEFAULT_BASE_URL = "https://api.openai.com"
DEFAULT_TIMEOUT = 60.0
DEFAULT_CONNECT_TIMEOUT = 10.0

ENV_PREFIX = "OPENAI_"
API_VERSION_PREFIX = "/v1"


class ClientSettings(BaseSettings):
    """
    Configuration shared by every resource client.

    Settings are loaded from keyword arguments, ``OPENAI_*`` environment
    variables and a ``.env`` file, in that order of precedence.
    ``from_toml`` additionally reads a TOML file; environment variables and
    the ``.env`` file still take precedence over its values.

    Instances are frozen: configuration is fixed once the client is built.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    api_key: SecretStr | None = Field(
        default=None,
        description="API key sent as a Bearer token on every request",
    )

    organization: str | None = Field(
        default=None,
        description="Organization id sent in the OpenAI-Organization header",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the API; a trailing /v1 is removed",
    )

    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Per-request timeout in seconds (read, write and pool)",
    )

    connect_timeout: float = Field(
        default=DEFAULT_CONNECT_TIMEOUT,
        gt=0,
        description="Connection establishment timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        v = v.rstrip("/")
        # Endpoint paths already carry the version prefix
        if v.endswith(API_VERSION_PREFIX):
            logger.warning("base_url_version_prefix_stripped", base_url=v)
            v = v.removesuffix(API_VERSION_PREFIX)
        return v

    @field_validator("organization")
    @classmethod
    def blank_organization_is_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    def api_key_value(self) -> str:
        """Return the API key in clear text, or an empty string."""
        return self.api_key.get_secret_value() if self.api_key else ""

    @classmethod
    def load_toml_config(cls, toml_path: Path) -> dict[str, Any]:
        """Load configuration from a TOML file."""
        try:
            with toml_path.open("rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read TOML config file {toml_path}: {e}", e
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                f"Invalid TOML syntax in {toml_path}: {e}", e
            ) from e

        # Accept either an [openai] table or top-level keys
        section = data.get("openai", data)
        if not isinstance(section, dict):
            raise ConfigurationError(
                f"Expected an [openai] table in {toml_path}, got {type(section).__name__}"
            )
        return section

    @classmethod
    def from_toml(cls, toml_path: Path | str, **overrides: Any) -> "ClientSettings":
        """Create settings from a TOML file, letting env vars and overrides win."""
        toml_path = Path(toml_path)
        config_data = cls.load_toml_config(toml_path)
        logger.info("config_file_loaded", path=str(toml_path), category="config")

        try:
            # Fields found in OPENAI_* variables or the .env file
            from_environment = cls().model_fields_set

            values: dict[str, Any] = {}
            for key, value in config_data.items():
                if key not in cls.model_fields:
                    logger.warning(
                        "unknown_config_key_ignored", key=key, path=str(toml_path)
                    )
                    continue
                if key not in from_environment:
                    values[key] = value
            values.update({k: v for k, v in overrides.items() if v is not None})

            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {toml_path}: {e}", e) from e
