"""Translation of httpx responses and failures into client results and errors."""

import json
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from chatjpt.core.errors import (
    DecodingError,
    OpenAIError,
    TransportError,
    TransportTimeoutError,
)
from chatjpt.models.common import ErrorDetail, ErrorResponse


T = TypeVar("T")


def openai_error(status_code: int, detail: ErrorDetail) -> OpenAIError:
    code = str(detail.code) if detail.code is not None else None
    return OpenAIError(
        status_code,
        detail.message,
        error_type=detail.type,
        param=detail.param,
        code=code,
    )


def error_from_response(response: httpx.Response) -> OpenAIError:
    """Build an OpenAIError from a non-2xx response whose body has been read.

    The standard ``{"error": {...}}`` envelope is decoded when present;
    otherwise the raw body text becomes the error message.
    """
    text = response.text
    try:
        envelope = ErrorResponse.model_validate_json(text)
    except ValidationError:
        return OpenAIError(response.status_code, text or response.reason_phrase)
    return openai_error(response.status_code, envelope.error)


def translate_transport_error(
    exc: httpx.HTTPError, url: str, timeout: float | None = None
) -> TransportError:
    """Map an httpx failure to the client's transport errors."""
    if isinstance(exc, httpx.TimeoutException):
        return TransportTimeoutError(
            f"Request timed out: {exc}", url=url, timeout=timeout, cause=exc
        )
    return TransportError(f"HTTP request failed: {exc}", url=url, cause=exc)


def decode_response(response: httpx.Response, response_type: type[T] | None) -> T:
    """Decode a successful response body as ``response_type``.

    ``bytes`` and ``str`` return the raw body, ``None`` discards it; pydantic
    models are validated from JSON.

    Raises:
        DecodingError: If the body does not match the expected model
    """
    if response_type is None:
        return None  # type: ignore[return-value]
    if response_type is bytes:
        return response.content  # type: ignore[return-value]
    if response_type is str:
        return response.text  # type: ignore[return-value]

    model: Any = response_type
    try:
        return model.model_validate_json(response.content)  # type: ignore[no-any-return]
    except ValidationError as e:
        raise DecodingError(
            f"Response body is not a valid {getattr(model, '__name__', model)}: {e}",
            body=response.text,
            cause=e,
        ) from e


def decode_chunk(data: str, chunk_type: type[BaseModel], status_code: int) -> Any:
    """Decode one streamed ``data:`` payload.

    Raises:
        OpenAIError: If the frame carries an ``error`` object
        DecodingError: If the frame is not valid JSON for ``chunk_type``
    """
    try:
        payload = json.loads(data)
    except json.JSONDecodeError as e:
        raise DecodingError(
            f"Stream frame is not valid JSON: {e}", body=data, cause=e
        ) from e

    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        try:
            detail = ErrorDetail.model_validate(payload["error"])
        except ValidationError:
            raise OpenAIError(status_code, data) from None
        raise openai_error(status_code, detail)

    try:
        return chunk_type.model_validate(payload)
    except ValidationError as e:
        raise DecodingError(
            f"Stream frame is not a valid {chunk_type.__name__}: {e}",
            body=data,
            cause=e,
        ) from e
