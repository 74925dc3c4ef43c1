"""Models for the /v1/moderations endpoint."""

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from .common import OpenAIRequest, OpenAIResponse


class ModerationRequest(OpenAIRequest):
    input: list[str] = Field(..., description="The text(s) to classify.")
    model: str | None = Field(
        None, description="text-moderation-stable or text-moderation-latest."
    )

    @field_validator("input", mode="before")
    @classmethod
    def wrap_single_string(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]
        if isinstance(v, tuple):
            return list(v)
        return v


class Categories(OpenAIResponse):
    """Per-category flags. Remote keys such as ``hate/threatening`` are aliased."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    hate: bool
    hate_threatening: bool = Field(..., alias="hate/threatening")
    harassment: bool
    harassment_threatening: bool = Field(..., alias="harassment/threatening")
    self_harm: bool = Field(..., alias="self-harm")
    self_harm_intent: bool = Field(..., alias="self-harm/intent")
    self_harm_instructions: bool = Field(..., alias="self-harm/instructions")
    sexual: bool
    sexual_minors: bool = Field(..., alias="sexual/minors")
    violence: bool
    violence_graphic: bool = Field(..., alias="violence/graphic")


class CategoryScores(OpenAIResponse):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    hate: float
    hate_threatening: float = Field(..., alias="hate/threatening")
    harassment: float
    harassment_threatening: float = Field(..., alias="harassment/threatening")
    self_harm: float = Field(..., alias="self-harm")
    self_harm_intent: float = Field(..., alias="self-harm/intent")
    self_harm_instructions: float = Field(..., alias="self-harm/instructions")
    sexual: float
    sexual_minors: float = Field(..., alias="sexual/minors")
    violence: float
    violence_graphic: float = Field(..., alias="violence/graphic")


class ModerationResult(OpenAIResponse):
    flagged: bool
    categories: Categories
    category_scores: CategoryScores


class Moderation(OpenAIResponse):
    id: str
    model: str
    results: list[ModerationResult]
