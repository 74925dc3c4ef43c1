"""
Base classes and shared records for request and response models.

Requests are frozen pydantic models validated in a single step at
construction time. Optional fields default to ``None`` and are omitted from
the encoded body, so the API sees them as absent rather than null.
"""

from pathlib import Path
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from chatjpt.core.errors import InvalidRequestStateError


T = TypeVar("T")


class RequestModel(BaseModel):
    """Frozen model that reports construction failures as InvalidRequestStateError."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidRequestStateError.from_validation_error(
                type(self).__name__, e
            ) from e


class FileContent(RequestModel):
    """In-memory file for upload endpoints."""

    filename: str = Field(..., min_length=1, description="Name sent with the file part.")
    content: bytes = Field(..., description="Raw file bytes.")
    content_type: str | None = Field(
        None, description="MIME type; inferred from the filename when omitted."
    )


# A filesystem path, read lazily when the request is sent, or in-memory content.
FileInput = Path | FileContent


class OpenAIRequest(RequestModel):
    """
    Base class for endpoint request bodies.

    Subclasses carrying uploads list their file fields in ``file_fields``;
    the HTTP layer then encodes the request as multipart form data.
    """

    file_fields: ClassVar[tuple[str, ...]] = ()

    @property
    def is_multipart(self) -> bool:
        return bool(self.file_fields)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-compatible body, without absent optionals or file fields."""
        return self.model_dump(
            mode="json", exclude_none=True, exclude=set(self.file_fields)
        )

    def to_json(self) -> str:
        """Encode the request as compact JSON."""
        return self.model_dump_json(exclude_none=True, exclude=set(self.file_fields))

    def files(self) -> dict[str, FileInput]:
        """Return the populated file fields keyed by form field name."""
        found: dict[str, FileInput] = {}
        for name in self.file_fields:
            value = getattr(self, name)
            if value is not None:
                found[name] = value
        return found


class OpenAIResponse(BaseModel):
    """Base class for decoded response payloads. Unknown fields are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


# ==============================================================================
# Error Models
# ==============================================================================


class ErrorDetail(BaseModel):
    """
    Detailed information about an API error.
    """

    code: str | int | None = Field(None, description="The error code.")
    message: str = Field(..., description="The error message.")
    param: str | None = Field(None, description="The parameter that caused the error.")
    type: str | None = Field(None, description="The type of error.")


class ErrorResponse(BaseModel):
    """
    The structure of an error response from the OpenAI API.
    """

    error: ErrorDetail = Field(..., description="Container for the error details.")


# ==============================================================================
# Shared response records
# ==============================================================================


class DataList(OpenAIResponse, Generic[T]):
    """The ``{"object": "list", "data": [...]}`` envelope used by list endpoints."""

    object: str = "list"
    data: list[T]


class DeletionStatus(OpenAIResponse):
    id: str
    object: str
    deleted: bool
