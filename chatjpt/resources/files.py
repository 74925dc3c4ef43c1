"""Client for /v1/files."""

from chatjpt.models.common import DataList, DeletionStatus
from chatjpt.models.files import File, UploadFileRequest

from .base import ResourceClient


class FilesClient(ResourceClient):
    """Upload, list, inspect and delete files."""

    path = "/v1/files"

    def upload_file(self, request: UploadFileRequest) -> File:
        return self._http.send("POST", self.path, File, body=request)

    async def upload_file_async(self, request: UploadFileRequest) -> File:
        return await self._http.send_async("POST", self.path, File, body=request)

    def list_files(self, purpose: str | None = None) -> list[File]:
        """List uploaded files, optionally only those with the given purpose."""
        page = self._http.send(
            "GET", self.path, DataList[File], params={"purpose": purpose}
        )
        return page.data

    async def list_files_async(self, purpose: str | None = None) -> list[File]:
        page = await self._http.send_async(
            "GET", self.path, DataList[File], params={"purpose": purpose}
        )
        return page.data

    def retrieve_file(self, file_id: str) -> File:
        return self._http.send("GET", self._url(file_id), File)

    async def retrieve_file_async(self, file_id: str) -> File:
        return await self._http.send_async("GET", self._url(file_id), File)

    def delete_file(self, file_id: str) -> DeletionStatus:
        return self._http.send("DELETE", self._url(file_id), DeletionStatus)

    async def delete_file_async(self, file_id: str) -> DeletionStatus:
        return await self._http.send_async("DELETE", self._url(file_id), DeletionStatus)

    def retrieve_file_content(self, file_id: str) -> bytes:
        """Return the raw contents of a file."""
        return self._http.send("GET", self._url(file_id, "content"), bytes)

    async def retrieve_file_content_async(self, file_id: str) -> bytes:
        return await self._http.send_async("GET", self._url(file_id, "content"), bytes)
