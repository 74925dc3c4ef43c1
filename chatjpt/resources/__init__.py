"""Endpoint-specific clients sharing one HTTP core."""

from .audio import AudioClient
from .base import ResourceClient
from .chat import ChatClient
from .embeddings import EmbeddingsClient
from .files import FilesClient
from .fine_tuning import FineTuningClient
from .images import ImagesClient
from .models import ModelsClient
from .moderations import ModerationsClient


__all__ = [
    "AudioClient",
    "ChatClient",
    "EmbeddingsClient",
    "FilesClient",
    "FineTuningClient",
    "ImagesClient",
    "ModelsClient",
    "ModerationsClient",
    "ResourceClient",
]
