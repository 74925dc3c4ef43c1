"""Configuration module for the OpenAI client."""

from .settings import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientSettings


__all__ = [
    "ClientSettings",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
]
