"""Tests for the SerpAPI search client."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from talent_scout_agents.tools.serpapi_search import (
    OrganicResult,
    SerpApiSearchClient,
    parse_profile_hit,
)
from talent_scout_core.exceptions import ConfigurationError, UpstreamError
from tests.mocks.mock_settings import make_settings

ORGANIC = [
    {
        "link": "https://www.linkedin.com/in/jane",
        "title": "Jane Doe - CFO - Globex | LinkedIn",
        "snippet": "Finance leader",
    },
    {"link": "https://globex.com/team", "title": "Globex team"},
    {"link": "https://www.linkedin.com/in/jane", "title": "Jane Doe"},
    {"title": "No link at all"},
    {"link": "https://uk.linkedin.com/in/bob", "title": "Bob | LinkedIn"},
]


def _client(
    handler: Any, **settings_overrides: object
) -> tuple[SerpApiSearchClient, list[httpx.Request]]:
    """Build a client over a MockTransport, recording every request."""
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(record))
    return SerpApiSearchClient(make_settings(**settings_overrides), http_client=http), seen


@pytest.mark.unit
class TestSerpApiSearchClient:
    """Test search request, filtering and error mapping."""

    async def test_returns_profile_links_in_order_with_duplicates(self) -> None:
        """Only profile links are kept, provider order, duplicates included."""
        client, _ = _client(lambda r: httpx.Response(200, json={"organic_results": ORGANIC}))
        urls = await client.search("q")
        assert urls == [
            "https://www.linkedin.com/in/jane",
            "https://www.linkedin.com/in/jane",
            "https://uk.linkedin.com/in/bob",
        ]

    async def test_request_parameters(self) -> None:
        """The query, page size and key are sent to the google engine."""
        client, seen = _client(lambda r: httpx.Response(200, json={"organic_results": []}))
        await client.search("CFO site:linkedin.com/in")
        params = seen[0].url.params
        assert params["engine"] == "google"
        assert params["q"] == "CFO site:linkedin.com/in"
        assert params["num"] == "10"
        assert params["api_key"] == "serp-test"

    async def test_missing_key_makes_no_request(self) -> None:
        """A missing credential aborts before any network call."""
        client, seen = _client(
            lambda r: httpx.Response(200, json={}), serpapi_api_key=None
        )
        with pytest.raises(ConfigurationError, match="TS_SERPAPI_API_KEY"):
            await client.search("q")
        assert seen == []

    def test_ensure_configured(self) -> None:
        """The credential check runs without any request."""
        client, seen = _client(lambda r: httpx.Response(200, json={}))
        client.ensure_configured()
        missing, _ = _client(lambda r: httpx.Response(200, json={}), serpapi_api_key=None)
        with pytest.raises(ConfigurationError, match="TS_SERPAPI_API_KEY"):
            missing.ensure_configured()
        assert seen == []

    async def test_non_success_status(self) -> None:
        """Non-2xx responses raise UpstreamError with the status."""
        client, _ = _client(lambda r: httpx.Response(401, text="bad key"))
        with pytest.raises(UpstreamError) as exc_info:
            await client.search("q")
        assert exc_info.value.status == 401
        assert exc_info.value.provider == "serpapi"

    async def test_error_field_in_payload(self) -> None:
        """An error reported in a 200 body is fatal."""
        client, _ = _client(
            lambda r: httpx.Response(200, json={"error": "Invalid API key."})
        )
        with pytest.raises(UpstreamError, match="Invalid API key"):
            await client.search("q")

    async def test_unreadable_body(self) -> None:
        """Non-JSON bodies raise UpstreamError."""
        client, _ = _client(lambda r: httpx.Response(200, text="<html>"))
        with pytest.raises(UpstreamError, match="unreadable response"):
            await client.search("q")

    async def test_no_results_is_empty_list(self) -> None:
        """An empty result set is not an error at the client level."""
        client, _ = _client(lambda r: httpx.Response(200, json={}))
        assert await client.search("q") == []

    async def test_transport_errors_retried(self) -> None:
        """Connection failures are retried up to search_retry_max."""
        calls = {"n": 0}

        def flaky(request: httpx.Request) -> httpx.Response:
            calls["n"] += 1
            if calls["n"] < 3:
                raise httpx.ConnectError("connection refused")
            return httpx.Response(200, json={"organic_results": ORGANIC[:1]})

        client, _ = _client(flaky)
        assert await client.search("q") == ["https://www.linkedin.com/in/jane"]
        assert calls["n"] == 3

    async def test_transport_retries_exhausted(self) -> None:
        """Persistent transport failure becomes UpstreamError."""

        def down(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused")

        client, seen = _client(down, search_retry_max=2)
        with pytest.raises(UpstreamError, match="connection refused"):
            await client.search("q")
        assert len(seen) == 2

    async def test_http_errors_not_retried(self) -> None:
        """A 500 response is reported immediately, not retried."""
        client, seen = _client(lambda r: httpx.Response(500, text="boom"))
        with pytest.raises(UpstreamError):
            await client.search("q")
        assert len(seen) == 1


@pytest.mark.unit
class TestParseProfileHit:
    """Test splitting result titles into profile fields."""

    def test_full_title(self) -> None:
        """Name, title and company are split out; LinkedIn suffix dropped."""
        hit = parse_profile_hit(
            OrganicResult(
                link="https://www.linkedin.com/in/jane",
                title="Jane Doe - CFO - Globex | LinkedIn",
            )
        )
        assert (hit.name, hit.title, hit.company) == ("Jane Doe", "CFO", "Globex")

    def test_name_only(self) -> None:
        """Missing parts keep placeholder values."""
        hit = parse_profile_hit(OrganicResult(link="u", title="Jane Doe"))
        assert hit.name == "Jane Doe"
        assert hit.title == "No title available"
        assert hit.company == "Unknown"
