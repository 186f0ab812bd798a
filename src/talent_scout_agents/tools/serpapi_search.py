"""SerpAPI (Google engine) client that finds candidate profile links."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

import httpx
import structlog
from pydantic import BaseModel, Field, ValidationError
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from talent_scout_core.constants import PROFILE_URL_PATTERN, SERPAPI_PROVIDER
from talent_scout_core.exceptions import ConfigurationError, UpstreamError
from talent_scout_core.models.discovery import DiscoveryQuery, ProfileHit

if TYPE_CHECKING:
    from talent_scout_core.config.settings import Settings

logger = structlog.get_logger()

_TITLE_SEPARATORS = re.compile(r"\s[-|–—]\s|\|")


class OrganicResult(BaseModel):
    """One Google organic result as returned by SerpAPI."""

    link: str | None = None
    title: str | None = None
    snippet: str | None = None


class SerpApiResponse(BaseModel):
    """The subset of the SerpAPI payload the client relies on."""

    organic_results: list[OrganicResult] = Field(default_factory=list)
    error: str | None = None


def parse_profile_hit(result: OrganicResult) -> ProfileHit:
    """Split a Google title like 'Name - Title - Company | LinkedIn' into fields."""
    parts = [p.strip() for p in _TITLE_SEPARATORS.split(result.title or "")]
    parts = [p for p in parts if p and p.lower() != "linkedin"]
    hit = ProfileHit(profile_url=result.link or "", snippet=result.snippet or "")
    if len(parts) > 0:
        hit.name = parts[0]
    if len(parts) > 1:
        hit.title = parts[1]
    if len(parts) > 2:
        hit.company = parts[2]
    return hit


class SerpApiSearchClient:
    """Search the web for candidate profiles through SerpAPI."""

    def __init__(
        self,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize with settings and an optional shared HTTP client."""
        self.settings = settings
        self._http = http_client

    def ensure_configured(self) -> None:
        """Fail fast when no API key is set."""
        self._require_api_key()

    async def search(self, query: DiscoveryQuery | str) -> list[str]:
        """Return profile URLs for a query, provider order, duplicates kept."""
        hits = await self.search_profiles(query)
        return [hit.profile_url for hit in hits]

    async def search_profiles(self, query: DiscoveryQuery | str) -> list[ProfileHit]:
        """Run one search and return the results that link to a profile."""
        api_key = self._require_api_key()
        q = str(query)
        params = {
            "engine": "google",
            "q": q,
            "num": str(self.settings.search_page_size),
            "api_key": api_key,
        }

        response = await self._get_with_retry(params)
        if not response.is_success:
            logger.error(
                "search_http_error",
                status=response.status_code,
                body=response.text[:200],
            )
            raise UpstreamError(
                SERPAPI_PROVIDER,
                response.reason_phrase or response.text[:200],
                status=response.status_code,
            )

        payload = self._validate(response)
        if payload.error:
            logger.error("search_provider_error", error=payload.error)
            raise UpstreamError(SERPAPI_PROVIDER, payload.error, status=response.status_code)

        hits = [
            parse_profile_hit(result)
            for result in payload.organic_results
            if result.link and PROFILE_URL_PATTERN in result.link
        ]
        logger.info(
            "search_complete",
            query=q,
            results=len(payload.organic_results),
            profiles=len(hits),
        )
        return hits

    def _require_api_key(self) -> str:
        key = self.settings.serpapi_api_key
        if key is None or not key.get_secret_value():
            msg = "TS_SERPAPI_API_KEY not configured - cannot run candidate discovery"
            raise ConfigurationError(msg)
        return key.get_secret_value()

    async def _get_with_retry(self, params: dict[str, str]) -> httpx.Response:
        """GET the search endpoint, retrying only transport-level failures."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.settings.search_retry_max),
            wait=wait_exponential(
                multiplier=1,
                min=self.settings.search_retry_wait_min,
                max=self.settings.search_retry_wait_max,
            ),
            retry=retry_if_exception_type(httpx.TransportError),
        )
        try:
            async for attempt in retrying:
                with attempt:
                    return await self._get(params)
        except RetryError as e:
            cause = e.last_attempt.exception()
            logger.error("search_transport_failed", error=str(cause))
            raise UpstreamError(SERPAPI_PROVIDER, str(cause)) from cause
        raise AssertionError("unreachable")  # pragma: no cover

    async def _get(self, params: dict[str, str]) -> httpx.Response:
        timeout = self.settings.request_timeout_seconds
        if self._http is not None:
            return await self._http.get(
                self.settings.serpapi_base_url, params=params, timeout=timeout
            )
        async with httpx.AsyncClient(timeout=timeout) as client:
            return await client.get(self.settings.serpapi_base_url, params=params)

    @staticmethod
    def _validate(response: httpx.Response) -> SerpApiResponse:
        try:
            raw: Any = response.json()
            return SerpApiResponse.model_validate(raw)
        except (ValueError, ValidationError) as e:
            raise UpstreamError(
                SERPAPI_PROVIDER,
                f"unreadable response: {e}",
                status=response.status_code,
            ) from e
