"""Typed client for the OpenAI REST API."""

from .client import ChatJPT
from .config import ClientSettings
from .core import (
    ChatJPTError,
    ConfigurationError,
    DecodingError,
    InvalidRequestStateError,
    OpenAIError,
    TransportError,
    TransportTimeoutError,
    setup_logging,
)
from .core._version import __version__
from .http import AsyncChunkStream, ChunkStream


__all__ = [
    "AsyncChunkStream",
    "ChatJPT",
    "ChatJPTError",
    "ChunkStream",
    "ClientSettings",
    "ConfigurationError",
    "DecodingError",
    "InvalidRequestStateError",
    "OpenAIError",
    "TransportError",
    "TransportTimeoutError",
    "__version__",
    "setup_logging",
]
