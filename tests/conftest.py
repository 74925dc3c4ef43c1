"""Shared test fixtures and configuration for chatjpt tests.

Every HTTP call is intercepted with pytest-httpx; no test talks to the live
API unless marked ``real_api``.
"""

import json
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
from pytest_httpx import HTTPXMock

from chatjpt import ChatJPT


BASE_URL = "https://api.openai.com"
API_KEY = "sk-test-key"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep OPENAI_* variables and a stray .env file out of the tests."""
    for var in (
        "OPENAI_API_KEY",
        "OPENAI_ORGANIZATION",
        "OPENAI_BASE_URL",
        "OPENAI_TIMEOUT",
        "OPENAI_CONNECT_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def client() -> Generator[ChatJPT, None, None]:
    """Sync-friendly client pointed at the default base URL."""
    chatjpt = ChatJPT(api_key=API_KEY)
    yield chatjpt
    chatjpt.close()


@pytest.fixture
async def async_client() -> AsyncGenerator[ChatJPT, None]:
    chatjpt = ChatJPT(api_key=API_KEY)
    yield chatjpt
    await chatjpt.aclose()


def encode_sse(*frames: dict[str, Any] | str, done: bool = True) -> bytes:
    """Encode frames as an SSE body, optionally terminated by [DONE]."""
    lines = []
    for frame in frames:
        data = frame if isinstance(frame, str) else json.dumps(frame)
        lines.append(f"data: {data}\n\n")
    if done:
        lines.append("data: [DONE]\n\n")
    return "".join(lines).encode()


@pytest.fixture
def sse_body() -> Any:
    return encode_sse


# Canned API payloads


@pytest.fixture
def chat_completion() -> dict[str, Any]:
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1677652288,
        "model": "gpt-3.5-turbo-0125",
        "system_fingerprint": "fp_44709d6fcb",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": "Hello there, how may I assist you today?",
                },
                "logprobs": None,
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21},
    }


@pytest.fixture
def chat_chunks() -> list[dict[str, Any]]:
    def chunk(delta: dict[str, Any], finish_reason: str | None = None) -> dict[str, Any]:
        return {
            "id": "chatcmpl-123",
            "object": "chat.completion.chunk",
            "created": 1694268190,
            "model": "gpt-3.5-turbo-0125",
            "system_fingerprint": "fp_44709d6fcb",
            "choices": [
                {
                    "index": 0,
                    "delta": delta,
                    "logprobs": None,
                    "finish_reason": finish_reason,
                }
            ],
        }

    return [
        chunk({"role": "assistant", "content": ""}),
        chunk({"content": "Hello"}),
        chunk({"content": "!"}),
        chunk({}, finish_reason="stop"),
    ]


@pytest.fixture
def unauthorized_error() -> dict[str, Any]:
    return {
        "error": {
            "message": "Incorrect API key provided: foobar. You can find your API key at https://platform.openai.com/account/api-keys.",
            "type": "invalid_request_error",
            "param": None,
            "code": "invalid_api_key",
        }
    }


@pytest.fixture
def file_object() -> dict[str, Any]:
    return {
        "id": "file-abc123",
        "object": "file",
        "bytes": 120000,
        "created_at": 1677610602,
        "filename": "mydata.jsonl",
        "purpose": "fine-tune",
    }


@pytest.fixture
def fine_tuning_job() -> dict[str, Any]:
    return {
        "object": "fine_tuning.job",
        "id": "ftjob-abc123",
        "model": "gpt-3.5-turbo-0125",
        "created_at": 1614807352,
        "fine_tuned_model": None,
        "organization_id": "org-123",
        "result_files": [],
        "status": "queued",
        "validation_file": None,
        "training_file": "file-abc123",
        "hyperparameters": {"n_epochs": "auto"},
    }


@pytest.fixture
def model_object() -> dict[str, Any]:
    return {
        "id": "gpt-3.5-turbo",
        "object": "model",
        "created": 1686935002,
        "owned_by": "openai",
    }


@pytest.fixture
def mock_unauthorized(
    httpx_mock: HTTPXMock, unauthorized_error: dict[str, Any]
) -> HTTPXMock:
    """Answer chat completions with a 401 error envelope."""
    httpx_mock.add_response(
        url=f"{BASE_URL}/v1/chat/completions",
        method="POST",
        json=unauthorized_error,
        status_code=401,
        headers={"content-type": "application/json"},
    )
    return httpx_mock


@pytest.fixture
def mock_chat_stream(
    httpx_mock: HTTPXMock, chat_chunks: list[dict[str, Any]]
) -> HTTPXMock:
    """Answer chat completions with an SSE stream of chunks."""
    httpx_mock.add_response(
        url=f"{BASE_URL}/v1/chat/completions",
        method="POST",
        content=encode_sse(*chat_chunks),
        status_code=200,
        headers={
            "content-type": "text/event-stream",
            "cache-control": "no-cache",
        },
    )
    return httpx_mock


# Pytest configuration
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark every test not hitting the live API as a unit test."""
    for item in items:
        if not any(marker.name == "real_api" for marker in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
