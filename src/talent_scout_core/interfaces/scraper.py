"""Abstract profile-scraping provider interfaces."""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable

from talent_scout_core.models.discovery import ScrapeJob


@runtime_checkable
class ScrapeSubmitter(Protocol):
    """Submits a batch of profile URLs as one scrape job."""

    async def submit(self, urls: list[str]) -> str | None:
        """Return the provider job id, or None when scraping is unavailable."""
        ...


@runtime_checkable
class JobPoller(Protocol):
    """Drives a submitted scrape job to a terminal state."""

    async def poll(self, job_id: str, cancel: asyncio.Event | None = None) -> ScrapeJob:
        """Poll until ready, failed, timed out or cancelled."""
        ...
