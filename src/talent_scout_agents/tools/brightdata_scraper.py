"""Bright Data datasets client: batch scrape submission and snapshot polling."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import httpx
import structlog
from pydantic import BaseModel, Field, ValidationError

from talent_scout_core.constants import BRIGHTDATA_PROVIDER
from talent_scout_core.exceptions import TransientPollError
from talent_scout_core.models.discovery import CandidateRecord, JobState, ScrapeJob

if TYPE_CHECKING:
    from talent_scout_core.config.settings import Settings

logger = structlog.get_logger()

_FAILED_STATUSES = frozenset({"failed", "error"})


class TriggerResponse(BaseModel):
    """Reply to a dataset trigger request."""

    snapshot_id: str | None = None


class SnapshotStatus(BaseModel):
    """Normalized view of one snapshot status response."""

    status: str = "pending"
    data: list[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> SnapshotStatus:
        """Accept both the wrapped {status, data} shape and a bare result array."""
        if isinstance(payload, list):
            rows = [row for row in payload if isinstance(row, dict)]
            return cls(status="ready" if rows else "pending", data=rows)
        if isinstance(payload, dict):
            data = payload.get("data")
            if not isinstance(data, list):
                data = []
            return cls.model_validate(
                {
                    "status": payload.get("status") or "pending",
                    "data": [r for r in data if isinstance(r, dict)],
                }
            )
        msg = f"unexpected snapshot payload type {type(payload).__name__}"
        raise ValueError(msg)


class _BrightDataClient:
    """Shared credential and HTTP handling for the datasets API."""

    def __init__(
        self,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize with settings and an optional shared HTTP client."""
        self.settings = settings
        self._http = http_client

    @property
    def api_key(self) -> str | None:
        key = self.settings.brightdata_api_key
        if key is None or not key.get_secret_value():
            return None
        return key.get_secret_value()

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    async def _request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        timeout = self.settings.request_timeout_seconds
        headers = {**self._headers(), **kwargs.pop("headers", {})}
        if self._http is not None:
            return await self._http.request(
                method, url, headers=headers, timeout=timeout, **kwargs
            )
        async with httpx.AsyncClient(timeout=timeout) as client:
            return await client.request(method, url, headers=headers, **kwargs)


class BrightDataScraper(_BrightDataClient):
    """Submit profile URLs as one batch scrape job.

    Scraping is optional: a missing key or a rejected submission is
    logged and reported as None so the caller can continue with search
    results only.
    """

    async def submit(self, urls: list[str]) -> str | None:
        """Trigger a scrape job for the URLs and return its snapshot id."""
        if self.api_key is None:
            logger.warning("scrape_skipped_no_credential", urls=len(urls))
            return None
        if not urls:
            logger.warning("scrape_skipped_no_urls")
            return None

        try:
            response = await self._request(
                "POST",
                f"{self.settings.brightdata_base_url}/trigger",
                params={
                    "dataset_id": self.settings.brightdata_dataset_id,
                    "format": "json",
                },
                json=[{"url": url} for url in urls],
            )
        except httpx.HTTPError as e:
            logger.error("scrape_submit_failed", provider=BRIGHTDATA_PROVIDER, error=str(e))
            return None

        if not response.is_success:
            logger.error(
                "scrape_submit_failed",
                provider=BRIGHTDATA_PROVIDER,
                status=response.status_code,
                body=response.text[:200],
            )
            return None

        try:
            trigger = TriggerResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error("scrape_submit_unreadable", error=str(e))
            return None

        if not trigger.snapshot_id:
            logger.error("scrape_submit_missing_snapshot", body=response.text[:200])
            return None

        logger.info("scrape_submitted", snapshot_id=trigger.snapshot_id, urls=len(urls))
        return trigger.snapshot_id


class SnapshotPoller(_BrightDataClient):
    """Poll a snapshot at a fixed interval until it reaches a terminal state."""

    async def poll(self, job_id: str, cancel: asyncio.Event | None = None) -> ScrapeJob:
        """Sleep, check status, repeat; bounded by ``poll_max_attempts``.

        ``ready`` needs both a ready status and a non-empty result set.
        A failed status check is transient: it is logged and consumes
        the attempt. Timeout, failure and cancellation carry no records.
        """
        job = ScrapeJob(job_id=job_id)
        max_attempts = self.settings.poll_max_attempts

        for attempt in range(1, max_attempts + 1):
            if await self._wait_interval(cancel):
                job.transition(JobState.CANCELLED, detail="cancelled by caller")
                logger.info("poll_cancelled", snapshot_id=job_id, attempts=job.attempts)
                return job

            job.attempts = attempt
            try:
                status = await self._check(job_id)
            except TransientPollError as e:
                logger.warning(
                    "poll_attempt_failed",
                    snapshot_id=job_id,
                    attempt=attempt,
                    max_attempts=max_attempts,
                    error=str(e),
                )
                continue

            if status.status == "ready" and status.data:
                records = [CandidateRecord.model_validate(row) for row in status.data]
                job.transition(JobState.READY, records=records)
                logger.info(
                    "poll_ready",
                    snapshot_id=job_id,
                    attempt=attempt,
                    records=len(records),
                )
                return job

            if status.status in _FAILED_STATUSES:
                job.transition(JobState.FAILED, detail=f"provider status {status.status}")
                logger.error("poll_job_failed", snapshot_id=job_id, status=status.status)
                return job

            logger.debug(
                "poll_attempt",
                snapshot_id=job_id,
                attempt=attempt,
                max_attempts=max_attempts,
                status=status.status,
                results=len(status.data),
            )

        job.transition(JobState.TIMEOUT, detail=f"no terminal state after {max_attempts} attempts")
        logger.warning("poll_timeout", snapshot_id=job_id, attempts=max_attempts)
        return job

    async def _wait_interval(self, cancel: asyncio.Event | None) -> bool:
        """Sleep one interval; return True if cancellation was requested."""
        interval = self.settings.poll_interval_seconds
        if cancel is None:
            await asyncio.sleep(interval)
            return False
        if cancel.is_set():
            return True
        try:
            await asyncio.wait_for(cancel.wait(), timeout=interval)
        except TimeoutError:
            return False
        return True

    async def _check(self, job_id: str) -> SnapshotStatus:
        url = f"{self.settings.brightdata_base_url}/snapshot/{job_id}"
        try:
            response = await self._request("GET", url, params={"format": "json"})
        except httpx.HTTPError as e:
            raise TransientPollError(str(e)) from e

        if not response.is_success:
            raise TransientPollError(f"HTTP {response.status_code}: {response.text[:200]}")

        try:
            return SnapshotStatus.from_payload(response.json())
        except (ValueError, ValidationError) as e:
            raise TransientPollError(f"unreadable snapshot payload: {e}") from e
