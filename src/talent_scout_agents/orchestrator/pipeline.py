"""Discovery pipeline: readiness gate, query, search, scrape, poll."""

from __future__ import annotations

import asyncio
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import uuid4

import structlog

from talent_scout_agents.observability import (
    bind_run_context,
    trace_discovery_run,
    trace_span,
    unbind_run_context,
)
from talent_scout_agents.roles.presets import match_role_preset
from talent_scout_agents.roles.resolver import RolePatternResolver, query_hints
from talent_scout_agents.scoring.completeness import calculate_completeness, is_ready
from talent_scout_agents.scoring.gaps import next_gap
from talent_scout_agents.tools.brightdata_scraper import BrightDataScraper, SnapshotPoller
from talent_scout_agents.tools.query_builder import build_query
from talent_scout_agents.tools.serpapi_search import SerpApiSearchClient
from talent_scout_core.constants import SERPAPI_PROVIDER
from talent_scout_core.exceptions import (
    ConfigurationError,
    EmptyResultError,
    JobFailedError,
    RateLimitedError,
    TalentScoutError,
    UpstreamError,
)
from talent_scout_core.models.discovery import (
    DiscoveryOutcome,
    DiscoveryQuery,
    FailureReason,
    JobState,
)

if TYPE_CHECKING:
    from talent_scout_core.config.settings import Settings
    from talent_scout_core.interfaces import (
        JobPoller,
        ScrapeSubmitter,
        SearchProvider,
    )
    from talent_scout_core.models.intake import IntakeRecord
    from talent_scout_infra.ratelimit.limiter import SlidingWindowRateLimiter

logger = structlog.get_logger()

_FAILURE_CODES: tuple[tuple[type[TalentScoutError], str], ...] = (
    (ConfigurationError, "configuration"),
    (RateLimitedError, "rate_limited"),
    (EmptyResultError, "no_candidates"),
    (JobFailedError, "job_failed"),
    (UpstreamError, "upstream"),
)


def _new_run_id() -> str:
    return f"disc_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S')}_{uuid4().hex[:6]}"


class DiscoveryPipeline:
    """Sequence one discovery run for an intake record.

    The completeness gate is the only authorization to call external
    services. Fatal conditions become ``failed`` outcomes; a missing or
    rejected scrape submission degrades to ``search_only``.
    """

    def __init__(
        self,
        settings: Settings,
        search: SearchProvider | None = None,
        scraper: ScrapeSubmitter | None = None,
        poller: JobPoller | None = None,
        resolver: RolePatternResolver | None = None,
        rate_limiter: SlidingWindowRateLimiter | None = None,
    ) -> None:
        """Initialize with settings; collaborators default to the real providers."""
        self.settings = settings
        self.search = search or SerpApiSearchClient(settings)
        self.scraper = scraper or BrightDataScraper(settings)
        self.poller = poller or SnapshotPoller(settings)
        self.resolver = resolver or RolePatternResolver()
        self.rate_limiter = rate_limiter

    async def run(
        self,
        intake: IntakeRecord,
        cancel: asyncio.Event | None = None,
        run_id: str | None = None,
    ) -> DiscoveryOutcome:
        """Execute the full gate → search → scrape → poll sequence."""
        run_id = run_id or _new_run_id()
        start = time.monotonic()
        bind_run_context(run_id, role=intake.role_title or None)

        try:
            async with trace_discovery_run(run_id) as root_span:
                outcome = await self._run(intake, run_id, cancel)
                if root_span is not None:
                    root_span.set_attribute("discovery.outcome", outcome.kind)
            logger.info(
                "discovery_finished",
                outcome=outcome.kind,
                urls=len(outcome.urls),
                records=len(outcome.records),
                duration_seconds=round(time.monotonic() - start, 2),
            )
            return outcome
        finally:
            unbind_run_context("run_id", "role")

    async def _run(
        self,
        intake: IntakeRecord,
        run_id: str,
        cancel: asyncio.Event | None,
    ) -> DiscoveryOutcome:
        completeness = calculate_completeness(intake)
        if not is_ready(completeness):
            pattern = await self.resolver.resolve(intake.role_title)
            gap = next_gap(
                intake, completeness, (pattern, match_role_preset(intake.role_title))
            )
            logger.info(
                "discovery_not_ready",
                overall=completeness.overall,
                gap=gap.section if gap else None,
            )
            return DiscoveryOutcome.not_ready(run_id, completeness, gap)

        query: DiscoveryQuery | None = None
        job_id: str | None = None
        try:
            async with trace_span("discovery.resolve_role"):
                pattern = await self.resolver.resolve(intake.role_title)

            query = build_query(intake, hints=query_hints(pattern))
            logger.info("discovery_query_built", query=query.text)

            async with trace_span("discovery.search"):
                urls = await self._search(query)

            async with trace_span("discovery.scrape_submit"):
                job_id = await self.scraper.submit(urls)
            if job_id is None:
                logger.info("discovery_search_only", urls=len(urls))
                return DiscoveryOutcome.search_only(run_id, query, urls)

            async with trace_span("discovery.poll", **{"scrape.job_id": job_id}):
                job = await self.poller.poll(job_id, cancel=cancel)

            if job.state is JobState.READY:
                return DiscoveryOutcome.scraped(run_id, query, urls, job.records, job_id)
            if job.state is JobState.CANCELLED:
                return DiscoveryOutcome.cancelled(run_id, query, urls, job_id)
            if job.state is JobState.TIMEOUT:
                return DiscoveryOutcome.timed_out(run_id, query, urls, job_id)
            raise JobFailedError(job.detail or f"scrape job {job_id} failed")

        except TalentScoutError as e:
            reason = FailureReason(code=self._failure_code(e), message=str(e))
            logger.error("discovery_failed", code=reason.code, error=reason.message)
            return DiscoveryOutcome.failed(run_id, reason, query=query, job_id=job_id)

    async def _search(self, query: DiscoveryQuery) -> list[str]:
        # a misconfigured provider must not spend a budget slot
        self.search.ensure_configured()
        if self.rate_limiter is not None and not self.rate_limiter.try_acquire(
            SERPAPI_PROVIDER
        ):
            msg = f"{SERPAPI_PROVIDER} search budget exhausted for this window"
            raise RateLimitedError(msg)

        urls = await self.search.search(query)
        if not urls:
            msg = f"no candidate profiles found for query: {query.text}"
            raise EmptyResultError(msg)
        logger.info("discovery_search_complete", urls=len(urls))
        return urls

    @staticmethod
    def _failure_code(error: TalentScoutError) -> str:
        for exc_type, code in _FAILURE_CODES:
            if isinstance(error, exc_type):
                return code
        return "upstream"
