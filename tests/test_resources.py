"""Tests for the endpoint-specific clients.

Each test checks the verb and path a method uses and what it returns.
"""

import json
from typing import Any

import pytest
from pytest_httpx import HTTPXMock

from chatjpt import ChatJPT
from chatjpt.models import (
    ChatRequest,
    CreateFineTuningJobRequest,
    CreateImageRequest,
    CreateImageVariationRequest,
    EditImageRequest,
    EmbeddingsRequest,
    FileContent,
    ModerationRequest,
    TranscriptionRequest,
    TranslationRequest,
    user_message,
)


BASE_URL = "https://api.openai.com"


@pytest.fixture
def images_payload() -> dict[str, Any]:
    return {
        "created": 1589478378,
        "data": [
            {"url": "https://example.com/img-1.png", "revised_prompt": "a white cat"},
        ],
    }


@pytest.fixture
def audio_file() -> FileContent:
    return FileContent(filename="german.m4a", content=b"\x00\x00\x00\x20ftypM4A")


@pytest.mark.unit
class TestChatClient:
    def test_send_request(
        self, httpx_mock: HTTPXMock, client: ChatJPT, chat_completion: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/chat/completions", method="POST", json=chat_completion
        )

        response = client.chat.send_request(ChatRequest(messages=[user_message("Hi")]))

        assert response.choices[0].message.role == "assistant"

    async def test_send_request_async(
        self, httpx_mock: HTTPXMock, async_client: ChatJPT, chat_completion: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/chat/completions", method="POST", json=chat_completion
        )

        response = await async_client.chat.send_request_async(
            ChatRequest(messages=[user_message("Hi")])
        )

        assert response.model == "gpt-3.5-turbo-0125"


@pytest.mark.unit
class TestAudioClient:
    def test_transcript_json(
        self, httpx_mock: HTTPXMock, client: ChatJPT, audio_file: FileContent
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/audio/transcriptions",
            method="POST",
            json={"text": "Imagine the wildest idea that you've ever had."},
        )

        text = client.audio.create_transcript(
            TranscriptionRequest(file=audio_file, model="whisper-1")
        )

        assert text == "Imagine the wildest idea that you've ever had."

    def test_transcript_srt_is_returned_raw(
        self, httpx_mock: HTTPXMock, client: ChatJPT, audio_file: FileContent
    ) -> None:
        srt = "1\n00:00:00,000 --> 00:00:02,000\nHello\n"
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/audio/transcriptions", method="POST", text=srt
        )

        text = client.audio.create_transcript(
            TranscriptionRequest(file=audio_file, model="whisper-1", response_format="srt")
        )

        assert text == srt
        sent = httpx_mock.get_request()
        assert sent is not None
        assert b'filename="german.m4a"' in sent.read()

    def test_translation(
        self, httpx_mock: HTTPXMock, client: ChatJPT, audio_file: FileContent
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/audio/translations",
            method="POST",
            json={"text": "Hello, my name is Wolfgang."},
        )

        text = client.audio.create_translation(
            TranslationRequest(file=audio_file, model="whisper-1")
        )

        assert text == "Hello, my name is Wolfgang."

    async def test_translation_text_async(
        self, httpx_mock: HTTPXMock, async_client: ChatJPT, audio_file: FileContent
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/audio/translations", method="POST", text="Hello."
        )

        text = await async_client.audio.create_translation_async(
            TranslationRequest(file=audio_file, model="whisper-1", response_format="text")
        )

        assert text == "Hello."


@pytest.mark.unit
class TestImagesClient:
    def test_create_image(
        self, httpx_mock: HTTPXMock, client: ChatJPT, images_payload: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/images/generations", method="POST", json=images_payload
        )

        images = client.images.create_image(
            CreateImageRequest(prompt="A cute baby sea otter", model="dall-e-3", n=1)
        )

        assert images.data[0].url == "https://example.com/img-1.png"
        sent = httpx_mock.get_request()
        assert sent is not None
        assert json.loads(sent.read()) == {
            "prompt": "A cute baby sea otter",
            "model": "dall-e-3",
            "n": 1,
        }

    def test_edit_image(
        self, httpx_mock: HTTPXMock, client: ChatJPT, images_payload: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/images/edits", method="POST", json=images_payload
        )

        images = client.images.edit_image(
            EditImageRequest(
                image=FileContent(filename="otter.png", content=b"\x89PNG"),
                prompt="add a beret",
            )
        )

        assert images.created == 1589478378

    async def test_create_image_variation_async(
        self, httpx_mock: HTTPXMock, async_client: ChatJPT, images_payload: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/images/variations", method="POST", json=images_payload
        )

        images = await async_client.images.create_image_variation_async(
            CreateImageVariationRequest(
                image=FileContent(filename="otter.png", content=b"\x89PNG"), n=1
            )
        )

        assert len(images.data) == 1


@pytest.mark.unit
class TestEmbeddingsAndModerations:
    def test_create_embeddings(self, httpx_mock: HTTPXMock, client: ChatJPT) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/embeddings",
            method="POST",
            json={
                "object": "list",
                "data": [
                    {"object": "embedding", "embedding": [0.0023, -0.0093], "index": 0}
                ],
                "model": "text-embedding-ada-002",
                "usage": {"prompt_tokens": 8, "total_tokens": 8},
            },
        )

        embeddings = client.embeddings.create_embeddings(
            EmbeddingsRequest(input="hello", model="text-embedding-ada-002")
        )

        assert embeddings.data[0].embedding == [0.0023, -0.0093]
        sent = httpx_mock.get_request()
        assert sent is not None
        assert json.loads(sent.read()) == {
            "input": ["hello"],
            "model": "text-embedding-ada-002",
        }

    async def test_create_moderation_async(
        self, httpx_mock: HTTPXMock, async_client: ChatJPT
    ) -> None:
        categories = {
            "hate": False,
            "hate/threatening": False,
            "harassment": False,
            "harassment/threatening": False,
            "self-harm": False,
            "self-harm/intent": False,
            "self-harm/instructions": False,
            "sexual": False,
            "sexual/minors": False,
            "violence": True,
            "violence/graphic": False,
        }
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/moderations",
            method="POST",
            json={
                "id": "modr-XXXXX",
                "model": "text-moderation-007",
                "results": [
                    {
                        "flagged": True,
                        "categories": categories,
                        "category_scores": {k: 0.1 for k in categories},
                    }
                ],
            },
        )

        moderation = await async_client.moderations.create_moderation_async(
            ModerationRequest(input="I want to kill them.")
        )

        assert moderation.results[0].flagged


@pytest.mark.unit
class TestFilesClient:
    def test_list_files_with_purpose(
        self, httpx_mock: HTTPXMock, client: ChatJPT, file_object: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/files?purpose=fine-tune",
            method="GET",
            json={"object": "list", "data": [file_object]},
        )

        files = client.files.list_files(purpose="fine-tune")

        assert [f.id for f in files] == ["file-abc123"]

    def test_list_files_without_purpose(
        self, httpx_mock: HTTPXMock, client: ChatJPT
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/files", method="GET", json={"object": "list", "data": []}
        )

        assert client.files.list_files() == []

    def test_retrieve_file(
        self, httpx_mock: HTTPXMock, client: ChatJPT, file_object: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/files/file-abc123", method="GET", json=file_object
        )

        assert client.files.retrieve_file("file-abc123").bytes == 120000

    def test_delete_file(self, httpx_mock: HTTPXMock, client: ChatJPT) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/files/file-abc123",
            method="DELETE",
            json={"id": "file-abc123", "object": "file", "deleted": True},
        )

        status = client.files.delete_file("file-abc123")

        assert status.deleted

    def test_retrieve_file_content(self, httpx_mock: HTTPXMock, client: ChatJPT) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/files/file-abc123/content",
            method="GET",
            content=b'{"prompt": "x", "completion": "y"}\n',
        )

        content = client.files.retrieve_file_content("file-abc123")

        assert content == b'{"prompt": "x", "completion": "y"}\n'

    async def test_retrieve_file_content_async(
        self, httpx_mock: HTTPXMock, async_client: ChatJPT
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/files/file-abc123/content", method="GET", content=b"\x00\x01"
        )

        assert await async_client.files.retrieve_file_content_async("file-abc123") == b"\x00\x01"


@pytest.mark.unit
class TestFineTuningClient:
    def test_create_job(
        self, httpx_mock: HTTPXMock, client: ChatJPT, fine_tuning_job: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/fine_tuning/jobs", method="POST", json=fine_tuning_job
        )

        job = client.fine_tuning.create_fine_tuning_job(
            CreateFineTuningJobRequest(model="gpt-3.5-turbo", training_file="file-abc123")
        )

        assert job.status == "queued"
        assert job.hyperparameters is not None
        assert job.hyperparameters.n_epochs == "auto"

    def test_list_jobs_paginates_with_cursor(
        self, httpx_mock: HTTPXMock, client: ChatJPT, fine_tuning_job: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/fine_tuning/jobs?limit=1",
            method="GET",
            json={"object": "list", "data": [fine_tuning_job], "has_more": True},
        )
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/fine_tuning/jobs?after=ftjob-abc123&limit=1",
            method="GET",
            json={"object": "list", "data": [], "has_more": False},
        )

        first = client.fine_tuning.list_fine_tuning_jobs(limit=1)
        second = client.fine_tuning.list_fine_tuning_jobs(after=first.last_id, limit=1)

        assert first.has_more
        assert not second.has_more

    def test_list_job_events(self, httpx_mock: HTTPXMock, client: ChatJPT) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/fine_tuning/jobs/ftjob-abc123/events?limit=2",
            method="GET",
            json={
                "object": "list",
                "data": [
                    {
                        "object": "fine_tuning.job.event",
                        "id": "ft-event-1",
                        "created_at": 1721764800,
                        "level": "info",
                        "message": "Fine tuning job successfully completed",
                        "data": None,
                        "type": "message",
                    }
                ],
                "has_more": False,
            },
        )

        events = client.fine_tuning.list_fine_tuning_job_events("ftjob-abc123", limit=2)

        assert events.data[0].message == "Fine tuning job successfully completed"
        assert events.last_id == "ft-event-1"

    def test_retrieve_job(
        self, httpx_mock: HTTPXMock, client: ChatJPT, fine_tuning_job: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/fine_tuning/jobs/ftjob-abc123",
            method="GET",
            json=fine_tuning_job,
        )

        assert client.fine_tuning.retrieve_fine_tuning_job("ftjob-abc123").id == "ftjob-abc123"

    async def test_cancel_job_async(
        self, httpx_mock: HTTPXMock, async_client: ChatJPT, fine_tuning_job: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/fine_tuning/jobs/ftjob-abc123/cancel",
            method="POST",
            json=dict(fine_tuning_job, status="cancelled"),
        )

        job = await async_client.fine_tuning.cancel_fine_tuning_job_async("ftjob-abc123")

        assert job.status == "cancelled"


@pytest.mark.unit
class TestModelsClient:
    def test_list_models(
        self, httpx_mock: HTTPXMock, client: ChatJPT, model_object: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/models",
            method="GET",
            json={"object": "list", "data": [model_object]},
        )

        models = client.models.list_models()

        assert [m.id for m in models] == ["gpt-3.5-turbo"]

    async def test_retrieve_model_async(
        self, httpx_mock: HTTPXMock, async_client: ChatJPT, model_object: dict
    ) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/models/gpt-3.5-turbo", method="GET", json=model_object
        )

        model = await async_client.models.retrieve_model_async("gpt-3.5-turbo")

        assert model.owned_by == "openai"

    def test_delete_model(self, httpx_mock: HTTPXMock, client: ChatJPT) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/v1/models/ft:gpt-3.5-turbo:acemeco:suffix:abc123",
            method="DELETE",
            json={
                "id": "ft:gpt-3.5-turbo:acemeco:suffix:abc123",
                "object": "model",
                "deleted": True,
            },
        )

        status = client.models.delete_model("ft:gpt-3.5-turbo:acemeco:suffix:abc123")

        assert status.deleted
