"""Client for /v1/fine_tuning/jobs."""

from chatjpt.models.fine_tuning import (
    CreateFineTuningJobRequest,
    FineTuningJob,
    PaginatedFineTuningEvents,
    PaginatedFineTuningJobs,
)

from .base import ResourceClient


class FineTuningClient(ResourceClient):
    """Fine-tuning job management.

    List calls return one page; pass the page's ``last_id`` as ``after`` to
    fetch the next one while ``has_more`` is true.
    """

    path = "/v1/fine_tuning/jobs"

    def create_fine_tuning_job(self, request: CreateFineTuningJobRequest) -> FineTuningJob:
        return self._http.send("POST", self.path, FineTuningJob, body=request)

    async def create_fine_tuning_job_async(
        self, request: CreateFineTuningJobRequest
    ) -> FineTuningJob:
        return await self._http.send_async("POST", self.path, FineTuningJob, body=request)

    def list_fine_tuning_jobs(
        self, after: str | None = None, limit: int | None = None
    ) -> PaginatedFineTuningJobs:
        return self._http.send(
            "GET",
            self.path,
            PaginatedFineTuningJobs,
            params={"after": after, "limit": limit},
        )

    async def list_fine_tuning_jobs_async(
        self, after: str | None = None, limit: int | None = None
    ) -> PaginatedFineTuningJobs:
        return await self._http.send_async(
            "GET",
            self.path,
            PaginatedFineTuningJobs,
            params={"after": after, "limit": limit},
        )

    def list_fine_tuning_job_events(
        self, job_id: str, after: str | None = None, limit: int | None = None
    ) -> PaginatedFineTuningEvents:
        return self._http.send(
            "GET",
            self._url(job_id, "events"),
            PaginatedFineTuningEvents,
            params={"after": after, "limit": limit},
        )

    async def list_fine_tuning_job_events_async(
        self, job_id: str, after: str | None = None, limit: int | None = None
    ) -> PaginatedFineTuningEvents:
        return await self._http.send_async(
            "GET",
            self._url(job_id, "events"),
            PaginatedFineTuningEvents,
            params={"after": after, "limit": limit},
        )

    def retrieve_fine_tuning_job(self, job_id: str) -> FineTuningJob:
        return self._http.send("GET", self._url(job_id), FineTuningJob)

    async def retrieve_fine_tuning_job_async(self, job_id: str) -> FineTuningJob:
        return await self._http.send_async("GET", self._url(job_id), FineTuningJob)

    def cancel_fine_tuning_job(self, job_id: str) -> FineTuningJob:
        return self._http.send("POST", self._url(job_id, "cancel"), FineTuningJob)

    async def cancel_fine_tuning_job_async(self, job_id: str) -> FineTuningJob:
        return await self._http.send_async(
            "POST", self._url(job_id, "cancel"), FineTuningJob
        )
