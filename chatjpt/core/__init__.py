"""Core building blocks shared by every chatjpt component."""

from .errors import (
    ChatJPTError,
    ConfigurationError,
    DecodingError,
    InvalidRequestStateError,
    OpenAIError,
    TransportError,
    TransportTimeoutError,
)
from .logging import get_logger, setup_logging


__all__ = [
    "ChatJPTError",
    "ConfigurationError",
    "DecodingError",
    "InvalidRequestStateError",
    "OpenAIError",
    "TransportError",
    "TransportTimeoutError",
    "get_logger",
    "setup_logging",
]
