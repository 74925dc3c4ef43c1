"""
Pydantic models for the /v1/chat/completions endpoint, including streaming.
"""

from typing import Annotated, Any, Literal

from pydantic import Field

from .common import OpenAIRequest, OpenAIResponse, RequestModel


DEFAULT_CHAT_MODEL = "gpt-3.5-turbo"


# --- Message content parts ---


class TextContentPart(RequestModel):
    type: Literal["text"] = "text"
    text: str


class ImageUrl(RequestModel):
    url: str = Field(..., description="Either a URL of the image or base64 data URI.")
    detail: Literal["auto", "low", "high"] | None = None


class ImageContentPart(RequestModel):
    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl


ContentPart = Annotated[TextContentPart | ImageContentPart, Field(discriminator="type")]


# --- Tools ---


class FunctionDefinition(RequestModel):
    """
    The definition of a function that the model can call.
    """

    name: str = Field(..., description="The name of the function to be called.")
    description: str | None = Field(
        None, description="A description of what the function does."
    )
    parameters: dict[str, Any] | None = Field(
        None,
        description="The parameters the functions accepts, described as a JSON Schema object.",
    )


class Tool(RequestModel):
    """
    A tool the model may call.
    """

    type: Literal["function"] = "function"
    function: FunctionDefinition


class FunctionCall(RequestModel):
    name: str
    arguments: str


class ToolCall(RequestModel):
    id: str
    type: Literal["function"] = "function"
    function: FunctionCall


class ResponseFormat(RequestModel):
    """
    An object specifying the format that the model must output.
    """

    type: Literal["text", "json_object"] = "text"


# --- Messages ---


class SystemMessage(RequestModel):
    role: Literal["system"] = "system"
    content: str
    name: str | None = None


class UserMessage(RequestModel):
    role: Literal["user"] = "user"
    content: str | list[ContentPart]
    name: str | None = None


class AssistantMessage(RequestModel):
    role: Literal["assistant"] = "assistant"
    content: str | None = None
    name: str | None = None
    tool_calls: list[ToolCall] | None = None


class ToolMessage(RequestModel):
    role: Literal["tool"] = "tool"
    content: str
    tool_call_id: str


ChatMessage = Annotated[
    SystemMessage | UserMessage | AssistantMessage | ToolMessage,
    Field(discriminator="role"),
]


def system_message(content: str, name: str | None = None) -> SystemMessage:
    return SystemMessage(content=content, name=name)


def user_message(*content: str | TextContentPart | ImageContentPart) -> UserMessage:
    """Create a user message from a single string or one or more content parts."""
    if len(content) == 1 and isinstance(content[0], str):
        return UserMessage(content=content[0])
    parts = [TextContentPart(text=c) if isinstance(c, str) else c for c in content]
    return UserMessage(content=parts)


def assistant_message(
    content: str | None = None, tool_calls: list[ToolCall] | None = None
) -> AssistantMessage:
    return AssistantMessage(content=content, tool_calls=tool_calls)


def tool_message(content: str, tool_call_id: str) -> ToolMessage:
    return ToolMessage(content=content, tool_call_id=tool_call_id)


# --- Request ---


class ChatRequest(OpenAIRequest):
    """
    Request body for creating a chat completion.
    """

    messages: list[ChatMessage]
    model: str = DEFAULT_CHAT_MODEL
    frequency_penalty: float | None = Field(None, ge=-2.0, le=2.0)
    logit_bias: dict[str, float] | None = None
    logprobs: bool | None = None
    top_logprobs: int | None = Field(None, ge=0, le=20)
    max_tokens: int | None = None
    n: int | None = None
    presence_penalty: float | None = Field(None, ge=-2.0, le=2.0)
    response_format: ResponseFormat | None = None
    seed: int | None = None
    stop: str | list[str] | None = None
    stream: bool | None = None
    temperature: float | None = Field(None, ge=0.0, le=2.0)
    top_p: float | None = Field(None, ge=0.0, le=1.0)
    tools: list[Tool] | None = None
    tool_choice: Literal["none", "auto"] | dict[str, Any] | None = None
    user: str | None = None


# --- Response Models (Non-streaming) ---


class TopLogprob(OpenAIResponse):
    token: str
    logprob: float
    bytes: list[int] | None = None


class TokenLogprob(OpenAIResponse):
    token: str
    logprob: float
    bytes: list[int] | None = None
    top_logprobs: list[TopLogprob] = Field(default_factory=list)


class Logprobs(OpenAIResponse):
    content: list[TokenLogprob] | None = None


class ResponseFunctionCall(OpenAIResponse):
    name: str
    arguments: str


class ResponseToolCall(OpenAIResponse):
    id: str
    type: Literal["function"]
    function: ResponseFunctionCall


class ResponseMessage(OpenAIResponse):
    role: Literal["assistant"]
    content: str | None = None
    tool_calls: list[ResponseToolCall] | None = None


class ChatChoice(OpenAIResponse):
    index: int
    message: ResponseMessage
    logprobs: Logprobs | None = None
    finish_reason: str | None = None


class Usage(OpenAIResponse):
    completion_tokens: int = 0
    prompt_tokens: int
    total_tokens: int


class ChatResponse(OpenAIResponse):
    id: str
    object: Literal["chat.completion"] = "chat.completion"
    created: int
    model: str
    system_fingerprint: str | None = None
    choices: list[ChatChoice]
    usage: Usage | None = None


# --- Response Models (Streaming) ---


class FunctionCallDelta(OpenAIResponse):
    name: str | None = None
    arguments: str | None = None


class ToolCallDelta(OpenAIResponse):
    index: int
    id: str | None = None
    type: Literal["function"] | None = None
    function: FunctionCallDelta | None = None


class Delta(OpenAIResponse):
    role: Literal["assistant"] | None = None
    content: str | None = None
    tool_calls: list[ToolCallDelta] | None = None


class ChunkChoice(OpenAIResponse):
    index: int
    delta: Delta
    logprobs: Logprobs | None = None
    finish_reason: str | None = None


class ChatChunkResponse(OpenAIResponse):
    id: str
    object: Literal["chat.completion.chunk"] = "chat.completion.chunk"
    created: int
    model: str
    system_fingerprint: str | None = None
    choices: list[ChunkChoice]
