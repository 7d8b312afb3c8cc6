"""jsDelivr cache purging."""
from __future__ import annotations

import threading
from typing import Callable

from pydantic import ValidationError

from theme_purge_tools.errors import (
    PurgeCancelledError,
    PurgeFailedError,
    PurgeTimeoutError,
    ResponseParseError,
)
from theme_purge_tools.models.purge import PurgeJob, PurgeReport, PurgeRequest
from theme_purge_tools.utils import uris
from theme_purge_tools.utils.http_client import JsonClient

PURGE_API_URL = "https://purge.jsdelivr.net/"
STATUS_CHECK_INTERVAL = 1.0
MAX_STATUS_CHECKS = 60

StatusCallback = Callable[[int, PurgeJob], None]


def parse_job(payload, job_id: str | None = None) -> PurgeJob:
    """Parse a purge API payload, filling in the job id if the payload lacks one."""
    if not isinstance(payload, dict):
        raise ResponseParseError(f"Unexpected response: {payload!r}")
    if job_id is not None:
        payload = {"id": job_id, **payload}
    try:
        return PurgeJob.model_validate(payload)
    except ValidationError as e:
        raise ResponseParseError(f"Malformed purge response {payload!r}: {e}") from e


class Purger:
    def __init__(
        self,
        client: JsonClient | None = None,
        api_url: str = PURGE_API_URL,
        status_check_interval: float = STATUS_CHECK_INTERVAL,
        max_status_checks: int = MAX_STATUS_CHECKS,
    ):
        """Initializes the purger."""
        self.client = client or JsonClient()
        self.api_url = api_url
        self.status_check_interval = status_check_interval
        self.max_status_checks = max_status_checks

    def status_url(self, job_id: str) -> str:
        return uris.join(self.api_url, "status", job_id, quote=True)

    def submit(self, paths: list[str]) -> PurgeJob:
        """Submits a single purge request for all paths."""
        request = PurgeRequest(path=paths)
        payload = self.client.post(self.api_url, request.model_dump())
        return parse_job(payload)

    def fetch_status(self, job_id: str) -> PurgeJob:
        """Fetches the current status of a purge job."""
        payload = self.client.get(self.status_url(job_id))
        if isinstance(payload, dict) and not isinstance(payload.get("status"), str):
            # Not a status we know, keep polling
            payload = {**payload, "status": str(payload.get("status"))}
        return parse_job(payload, job_id)

    def wait(
        self,
        job_id: str,
        on_status: StatusCallback | None = None,
        cancel: threading.Event | None = None,
    ) -> PurgeJob:
        """
        Polls the job until it finishes.
        Waits status_check_interval before each of at most max_status_checks
        fetches. Setting cancel stops polling with PurgeCancelledError.
        """
        cancel = cancel or threading.Event()

        for attempt in range(1, self.max_status_checks + 1):
            if cancel.wait(self.status_check_interval):
                raise PurgeCancelledError(f"Polling of purge {job_id} was cancelled")

            job = self.fetch_status(job_id)
            if on_status is not None:
                on_status(attempt, job)

            if job.is_finished:
                return job
            if job.is_failed:
                raise PurgeFailedError(f"Purge operation {job_id} failed")

        raise PurgeTimeoutError(
            f"Purge operation {job_id} timed out after {self.max_status_checks} checks"
        )


def classify_results(job: PurgeJob) -> PurgeReport:
    """
    Splits a finished job's paths into throttled and failed.
    Providers of a throttled path are not inspected.
    """
    report = PurgeReport()
    for path, result in (job.paths or {}).items():
        if result.throttled:
            report.throttled_paths.append(path)
            continue
        for provider, success in result.providers.items():
            if not success:
                report.failed_paths.append(f"{path} ({provider})")
    return report
