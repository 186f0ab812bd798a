"""Custom exception hierarchy for talent-scout."""

from __future__ import annotations


class TalentScoutError(Exception):
    """Base exception for all talent-scout errors."""


class ConfigurationError(TalentScoutError):
    """Raised when a mandatory credential or setting is missing."""


class UpstreamError(TalentScoutError):
    """Raised when an external provider returns a non-success response or error."""

    def __init__(self, provider: str, message: str, status: int | None = None) -> None:
        self.provider = provider
        self.message = message
        self.status = status
        prefix = f"{provider} request failed"
        if status is not None:
            prefix = f"{prefix} ({status})"
        super().__init__(f"{prefix}: {message}")


class EmptyResultError(TalentScoutError):
    """Raised when a search returns zero candidate profile links."""


class JobFailedError(TalentScoutError):
    """Raised when the scraping provider reports a failed job."""


class TransientPollError(TalentScoutError):
    """A single failed status check while polling a scrape job."""


class JobStateError(TalentScoutError):
    """Raised on an illegal scrape job lifecycle transition."""


class RateLimitedError(TalentScoutError):
    """Raised when the in-process rate limiter refuses a provider call."""


class PatternStoreError(TalentScoutError):
    """Raised when the learned-pattern store cannot be queried."""
