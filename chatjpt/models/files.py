"""Models for the /v1/files endpoints."""

from typing import ClassVar

from pydantic import Field

from .common import FileInput, OpenAIRequest, OpenAIResponse


class UploadFileRequest(OpenAIRequest):
    file_fields: ClassVar[tuple[str, ...]] = ("file",)

    file: FileInput = Field(..., description="The file to upload.")
    purpose: str = Field(..., description="Intended purpose, e.g. fine-tune or assistants.")


class File(OpenAIResponse):
    """An uploaded file."""

    id: str
    object: str = "file"
    bytes: int
    created_at: int
    filename: str
    purpose: str
    status: str | None = None
    status_details: str | None = None
