"""Public interface re-exports for talent_scout_core."""

from talent_scout_core.interfaces.pattern_store import PatternStore
from talent_scout_core.interfaces.scraper import JobPoller, ScrapeSubmitter
from talent_scout_core.interfaces.search import SearchProvider

__all__ = [
    "JobPoller",
    "PatternStore",
    "ScrapeSubmitter",
    "SearchProvider",
]
