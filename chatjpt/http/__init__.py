"""HTTP transport for the OpenAI API."""

from .client import OpenAIHttpClient
from .streaming import AsyncChunkStream, ChunkStream


__all__ = ["AsyncChunkStream", "ChunkStream", "OpenAIHttpClient"]
