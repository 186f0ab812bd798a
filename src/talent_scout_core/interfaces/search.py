"""Abstract search provider interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from talent_scout_core.models.discovery import DiscoveryQuery, ProfileHit


@runtime_checkable
class SearchProvider(Protocol):
    """Web search provider that finds candidate profile links."""

    def ensure_configured(self) -> None:
        """Raise ConfigurationError when the provider cannot make requests."""
        ...

    async def search(self, query: DiscoveryQuery | str) -> list[str]:
        """Return profile URLs for the query, in provider order."""
        ...

    async def search_profiles(self, query: DiscoveryQuery | str) -> list[ProfileHit]:
        """Return parsed profile hits for the query."""
        ...
