"""
Models for the /v1/models endpoint.
"""

from pydantic import Field

from .common import OpenAIResponse


class Model(OpenAIResponse):
    """
    Represents a model available in the API.
    """

    id: str = Field(..., description="The model identifier.")
    created: int = Field(
        ..., description="The Unix timestamp of when the model was created."
    )
    object: str = Field("model", description="The object type, always 'model'.")
    owned_by: str = Field(..., description="The organization that owns the model.")
