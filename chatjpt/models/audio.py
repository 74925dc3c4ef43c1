"""Request models for the /v1/audio endpoints."""

from typing import ClassVar, Literal

from pydantic import Field

from .common import FileInput, OpenAIRequest, OpenAIResponse


# Formats answered with a plain-text body instead of JSON
TEXT_RESPONSE_FORMATS = frozenset({"text", "srt", "vtt"})


class SpeechRequest(OpenAIRequest):
    """Text-to-speech request. The response body is the encoded audio."""

    model: str = Field(..., description="One of the available TTS models, e.g. tts-1.")
    input: str = Field(..., max_length=4096, description="The text to generate audio for.")
    voice: str = Field(..., description="The voice to use, e.g. alloy.")
    response_format: Literal["mp3", "opus", "aac", "flac", "wav", "pcm"] | None = None
    speed: float | None = Field(None, ge=0.25, le=4.0)


class TranscriptionRequest(OpenAIRequest):
    file_fields: ClassVar[tuple[str, ...]] = ("file",)

    file: FileInput = Field(..., description="The audio file to transcribe.")
    model: str = Field(..., description="ID of the model to use, e.g. whisper-1.")
    language: str | None = Field(None, description="ISO-639-1 language of the input audio.")
    prompt: str | None = None
    response_format: Literal["json", "text", "srt", "verbose_json", "vtt"] | None = None
    temperature: float | None = Field(None, ge=0.0, le=1.0)
    timestamp_granularities: list[Literal["word", "segment"]] | None = None


class TranslationRequest(OpenAIRequest):
    """Translate audio into English."""

    file_fields: ClassVar[tuple[str, ...]] = ("file",)

    file: FileInput
    model: str
    prompt: str | None = None
    response_format: Literal["json", "text", "srt", "verbose_json", "vtt"] | None = None
    temperature: float | None = Field(None, ge=0.0, le=1.0)


class AudioText(OpenAIResponse):
    """JSON body of a transcription or translation."""

    text: str
    language: str | None = None
    duration: float | None = None
