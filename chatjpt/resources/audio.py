"""Client for /v1/audio."""

from pathlib import Path

from chatjpt.models.audio import (
    TEXT_RESPONSE_FORMATS,
    AudioText,
    SpeechRequest,
    TranscriptionRequest,
    TranslationRequest,
)

from .base import ResourceClient


def _text_or_json(request: TranscriptionRequest | TranslationRequest) -> type:
    if request.response_format in TEXT_RESPONSE_FORMATS:
        return str
    return AudioText


def _extract_text(result: str | AudioText) -> str:
    return result if isinstance(result, str) else result.text


class AudioClient(ResourceClient):
    """Speech synthesis, transcription and translation."""

    path = "/v1/audio"

    def create_speech(self, request: SpeechRequest, output: Path | str) -> Path:
        """Synthesize speech and write the audio to ``output``.

        Returns:
            The path the audio was written to
        """
        return self._http.download("POST", self._url("speech"), Path(output), body=request)

    async def create_speech_async(
        self, request: SpeechRequest, output: Path | str
    ) -> Path:
        return await self._http.download_async(
            "POST", self._url("speech"), Path(output), body=request
        )

    def create_transcript(self, request: TranscriptionRequest) -> str:
        """Transcribe audio.

        Returns the ``text`` field for JSON formats, or the raw body for
        ``text``, ``srt`` and ``vtt``.
        """
        result = self._http.send(
            "POST", self._url("transcriptions"), _text_or_json(request), body=request
        )
        return _extract_text(result)

    async def create_transcript_async(self, request: TranscriptionRequest) -> str:
        result = await self._http.send_async(
            "POST", self._url("transcriptions"), _text_or_json(request), body=request
        )
        return _extract_text(result)

    def create_translation(self, request: TranslationRequest) -> str:
        """Translate audio into English text."""
        result = self._http.send(
            "POST", self._url("translations"), _text_or_json(request), body=request
        )
        return _extract_text(result)

    async def create_translation_async(self, request: TranslationRequest) -> str:
        result = await self._http.send_async(
            "POST", self._url("translations"), _text_or_json(request), body=request
        )
        return _extract_text(result)
