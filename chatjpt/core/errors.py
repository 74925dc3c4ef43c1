"""Core error types for the OpenAI client."""

from typing import Any


class ChatJPTError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        """Initialize with a message and optional cause.

        Args:
            message: The error message
            cause: The underlying exception that caused this error
        """
        super().__init__(message)
        self.cause = cause
        if cause:
            self.__cause__ = cause


class InvalidRequestStateError(ChatJPTError, ValueError):
    """Raised when a request object is constructed with missing or invalid fields.

    Raised locally, before any network call is made.
    """

    def __init__(
        self,
        message: str,
        request_type: str | None = None,
        fields: list[str] | None = None,
        cause: Exception | None = None,
    ):
        """Initialize with a message, the request type and offending fields.

        Args:
            message: The error message
            request_type: Name of the request class that failed to build
            fields: Names of the fields that are missing or invalid
            cause: The underlying validation error
        """
        super().__init__(message, cause)
        self.request_type = request_type
        self.fields = fields or []

    @classmethod
    def from_validation_error(
        cls, request_type: str, error: Any
    ) -> "InvalidRequestStateError":
        """Build from a pydantic ``ValidationError``."""
        problems: list[str] = []
        fields: list[str] = []
        for detail in error.errors():
            field = ".".join(str(part) for part in detail.get("loc", ())) or "request"
            fields.append(field)
            if detail.get("type") == "missing":
                problems.append(f"{field} must be set")
            else:
                problems.append(f"{field}: {detail.get('msg', 'invalid value')}")
        return cls(
            f"{request_type}: " + "; ".join(problems),
            request_type=request_type,
            fields=fields,
            cause=error,
        )


class ConfigurationError(ChatJPTError, ValueError):
    """Raised when client configuration loading or validation fails."""


class OpenAIError(ChatJPTError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        error_message: str,
        error_type: str | None = None,
        param: str | None = None,
        code: str | None = None,
    ):
        """Initialize with the HTTP status and the remote error details.

        Args:
            status_code: HTTP status code of the response
            error_message: Message supplied by the API, or the raw body
            error_type: The ``type`` of the remote error envelope
            param: The request parameter the error refers to
            code: The remote error code
        """
        super().__init__(f"{status_code}: {error_message}")
        self.status_code = status_code
        self.error_message = error_message
        self.error_type = error_type
        self.param = param
        self.code = code


class TransportError(ChatJPTError):
    """Raised when the request fails before or while receiving a response."""

    def __init__(
        self, message: str, url: str | None = None, cause: Exception | None = None
    ):
        """Initialize with a message, URL, and cause.

        Args:
            message: The error message
            url: The URL that was being requested
            cause: The underlying exception
        """
        super().__init__(message, cause)
        self.url = url


class TransportTimeoutError(TransportError):
    """Raised when a request times out."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        timeout: float | None = None,
        cause: Exception | None = None,
    ):
        """Initialize with a message, URL, timeout value, and cause.

        Args:
            message: The error message
            url: The URL that was being requested
            timeout: The timeout value in seconds
            cause: The underlying exception
        """
        super().__init__(message, url, cause)
        self.timeout = timeout


class DecodingError(ChatJPTError):
    """Raised when a successful response body does not match the expected shape."""

    def __init__(
        self,
        message: str,
        body: str | None = None,
        cause: Exception | None = None,
    ):
        """Initialize with a message, the raw body, and cause.

        Args:
            message: The error message
            body: The raw body (or stream frame) that failed to decode
            cause: The underlying exception
        """
        super().__init__(message, cause)
        self.body = body
