"""Models for the /v1/fine_tuning endpoints."""

from typing import Any, Literal

from pydantic import Field

from .common import OpenAIRequest, OpenAIResponse, RequestModel


class Hyperparameters(RequestModel):
    n_epochs: Literal["auto"] | int | None = None
    batch_size: Literal["auto"] | int | None = None
    learning_rate_multiplier: Literal["auto"] | float | None = None


class CreateFineTuningJobRequest(OpenAIRequest):
    model: str = Field(..., description="The name of the model to fine-tune.")
    training_file: str = Field(..., description="The ID of an uploaded training file.")
    hyperparameters: Hyperparameters | None = None
    suffix: str | None = Field(None, max_length=40)
    validation_file: str | None = None


class FineTuningJobError(OpenAIResponse):
    code: str | None = None
    message: str | None = None
    param: str | None = None


class FineTuningHyperparameters(OpenAIResponse):
    n_epochs: Literal["auto"] | int | None = None
    batch_size: Literal["auto"] | int | None = None
    learning_rate_multiplier: Literal["auto"] | float | None = None


class FineTuningJob(OpenAIResponse):
    id: str
    object: str = "fine_tuning.job"
    created_at: int
    error: FineTuningJobError | None = None
    fine_tuned_model: str | None = None
    finished_at: int | None = None
    hyperparameters: FineTuningHyperparameters | None = None
    model: str
    organization_id: str | None = None
    result_files: list[str] = Field(default_factory=list)
    status: str
    trained_tokens: int | None = None
    training_file: str
    validation_file: str | None = None


class FineTuningJobEvent(OpenAIResponse):
    id: str
    object: str = "fine_tuning.job.event"
    created_at: int
    level: str
    message: str
    type: str | None = None
    data: dict[str, Any] | None = None


class PaginatedFineTuningJobs(OpenAIResponse):
    """One page of fine-tuning jobs. Pass ``last_id`` as ``after`` to get the next page."""

    object: str = "list"
    data: list[FineTuningJob]
    has_more: bool

    @property
    def last_id(self) -> str | None:
        return self.data[-1].id if self.data else None


class PaginatedFineTuningEvents(OpenAIResponse):
    """One page of fine-tuning job events. Pass ``last_id`` as ``after`` to get the next page."""

    object: str = "list"
    data: list[FineTuningJobEvent]
    has_more: bool

    @property
    def last_id(self) -> str | None:
        return self.data[-1].id if self.data else None
