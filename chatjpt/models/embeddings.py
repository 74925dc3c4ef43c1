"""
Models for the /v1/embeddings endpoint.
"""

from typing import Any, Literal

from pydantic import Field, field_validator

from .common import OpenAIRequest, OpenAIResponse


class EmbeddingsRequest(OpenAIRequest):
    """
    Request body for creating an embedding.

    ``input`` holds exactly one shape: a list of strings, a list of token
    ids, or a list of token id lists. A single string is stored as a
    one-element list.
    """

    input: list[str] | list[int] | list[list[int]] = Field(
        ..., description="Input text to embed, encoded as strings or arrays of tokens."
    )
    model: str = Field(..., description="ID of the model to use for embedding.")
    encoding_format: Literal["float", "base64"] | None = Field(
        None, description="The format to return the embeddings in."
    )
    dimensions: int | None = Field(
        None,
        gt=0,
        description="The number of dimensions the resulting output embeddings should have.",
    )
    user: str | None = Field(
        None, description="A unique identifier representing your end-user."
    )

    @field_validator("input", mode="before")
    @classmethod
    def wrap_single_string(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]
        if isinstance(v, tuple):
            return list(v)
        return v


class Embedding(OpenAIResponse):
    """
    Represents a single embedding vector.

    With ``encoding_format="base64"`` the vector arrives as a base64 string.
    """

    object: Literal["embedding"] = "embedding"
    embedding: list[float] | str
    index: int


class EmbeddingsUsage(OpenAIResponse):
    prompt_tokens: int
    total_tokens: int


class Embeddings(OpenAIResponse):
    object: Literal["list"] = "list"
    data: list[Embedding]
    model: str
    usage: EmbeddingsUsage | None = None
