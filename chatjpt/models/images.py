"""Models for the /v1/images endpoints."""

from typing import ClassVar, Literal

from pydantic import Field

from .common import FileInput, OpenAIRequest, OpenAIResponse


ImageResponseFormat = Literal["url", "b64_json"]


class CreateImageRequest(OpenAIRequest):
    prompt: str = Field(..., description="A text description of the desired image(s).")
    model: str | None = None
    n: int | None = Field(None, ge=1, le=10)
    quality: Literal["standard", "hd"] | None = None
    response_format: ImageResponseFormat | None = None
    size: str | None = None
    style: Literal["vivid", "natural"] | None = None
    user: str | None = None


class EditImageRequest(OpenAIRequest):
    file_fields: ClassVar[tuple[str, ...]] = ("image", "mask")

    image: FileInput = Field(..., description="The image to edit; a square PNG.")
    prompt: str
    mask: FileInput | None = Field(
        None, description="PNG whose transparent areas indicate where to edit."
    )
    model: str | None = None
    n: int | None = Field(None, ge=1, le=10)
    size: str | None = None
    response_format: ImageResponseFormat | None = None
    user: str | None = None


class CreateImageVariationRequest(OpenAIRequest):
    file_fields: ClassVar[tuple[str, ...]] = ("image",)

    image: FileInput
    model: str | None = None
    n: int | None = Field(None, ge=1, le=10)
    response_format: ImageResponseFormat | None = None
    size: str | None = None
    user: str | None = None


class Image(OpenAIResponse):
    b64_json: str | None = None
    url: str | None = None
    revised_prompt: str | None = None


class Images(OpenAIResponse):
    created: int
    data: list[Image]
