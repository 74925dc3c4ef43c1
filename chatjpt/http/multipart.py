"""Multipart form encoding for requests that carry files."""

import json
import mimetypes
from pathlib import Path
from typing import Any

from chatjpt.core.errors import TransportError
from chatjpt.models.common import FileContent, FileInput, OpenAIRequest


DEFAULT_CONTENT_TYPE = "application/octet-stream"

FilePart = tuple[str, bytes, str]


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def guess_content_type(filename: str) -> str:
    content_type, _ = mimetypes.guess_type(filename)
    return content_type or DEFAULT_CONTENT_TYPE


def read_file_part(value: FileInput) -> FilePart:
    """Turn a path or in-memory file into an httpx ``(filename, bytes, type)`` tuple.

    Raises:
        TransportError: If a path cannot be read
    """
    if isinstance(value, FileContent):
        content_type = value.content_type or guess_content_type(value.filename)
        return value.filename, value.content, content_type

    path = Path(value)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise TransportError(f"Cannot read upload file {path}: {e}", cause=e) from e
    return path.name, content, guess_content_type(path.name)


def encode_multipart(
    request: OpenAIRequest,
) -> tuple[dict[str, str | list[str]], dict[str, FilePart]]:
    """Split a request into form fields and file parts.

    Scalar fields become one form field each; list fields are sent as
    repeated ``name[]`` fields.

    Returns:
        Tuple of (data, files) ready for ``httpx.Client.build_request``
    """
    data: dict[str, str | list[str]] = {}
    for name, value in request.to_payload().items():
        if isinstance(value, list):
            data[f"{name}[]"] = [_form_value(item) for item in value]
        else:
            data[name] = _form_value(value)

    files = {name: read_file_part(value) for name, value in request.files().items()}
    return data, files
