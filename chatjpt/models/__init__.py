"""Request and response models for the OpenAI API."""

from .audio import (
    AudioText,
    SpeechRequest,
    TranscriptionRequest,
    TranslationRequest,
)
from .chat import (
    AssistantMessage,
    ChatChoice,
    ChatChunkResponse,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ChunkChoice,
    Delta,
    FunctionDefinition,
    ImageContentPart,
    ImageUrl,
    ResponseFormat,
    SystemMessage,
    TextContentPart,
    Tool,
    ToolCall,
    ToolMessage,
    Usage,
    UserMessage,
    assistant_message,
    system_message,
    tool_message,
    user_message,
)
from .common import (
    DataList,
    DeletionStatus,
    ErrorDetail,
    ErrorResponse,
    FileContent,
    FileInput,
    OpenAIRequest,
    OpenAIResponse,
)
from .embeddings import Embedding, Embeddings, EmbeddingsRequest
from .files import File, UploadFileRequest
from .fine_tuning import (
    CreateFineTuningJobRequest,
    FineTuningJob,
    FineTuningJobEvent,
    Hyperparameters,
    PaginatedFineTuningEvents,
    PaginatedFineTuningJobs,
)
from .images import (
    CreateImageRequest,
    CreateImageVariationRequest,
    EditImageRequest,
    Image,
    Images,
)
from .models import Model
from .moderations import Moderation, ModerationRequest, ModerationResult


__all__ = [
    "AssistantMessage",
    "AudioText",
    "ChatChoice",
    "ChatChunkResponse",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ChunkChoice",
    "CreateFineTuningJobRequest",
    "CreateImageRequest",
    "CreateImageVariationRequest",
    "DataList",
    "DeletionStatus",
    "Delta",
    "EditImageRequest",
    "Embedding",
    "Embeddings",
    "EmbeddingsRequest",
    "ErrorDetail",
    "ErrorResponse",
    "File",
    "FileContent",
    "FileInput",
    "FineTuningJob",
    "FineTuningJobEvent",
    "FunctionDefinition",
    "Hyperparameters",
    "Image",
    "ImageContentPart",
    "ImageUrl",
    "Images",
    "Model",
    "Moderation",
    "ModerationRequest",
    "ModerationResult",
    "OpenAIRequest",
    "OpenAIResponse",
    "PaginatedFineTuningEvents",
    "PaginatedFineTuningJobs",
    "ResponseFormat",
    "SpeechRequest",
    "SystemMessage",
    "TextContentPart",
    "Tool",
    "ToolCall",
    "ToolMessage",
    "TranscriptionRequest",
    "TranslationRequest",
    "UploadFileRequest",
    "Usage",
    "UserMessage",
    "assistant_message",
    "system_message",
    "tool_message",
    "user_message",
]
