"""Base class for endpoint-specific clients."""

from chatjpt.http.client import OpenAIHttpClient


class ResourceClient:
    """Thin facade over the shared HTTP core for one API area.

    Subclasses set ``path`` to the resource root, e.g. ``/v1/files``.
    """

    path: str = ""

    def __init__(self, http: OpenAIHttpClient):
        self._http = http

    def _url(self, *segments: str) -> str:
        return "/".join([self.path, *segments])
