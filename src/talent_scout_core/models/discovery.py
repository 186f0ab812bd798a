"""Discovery pipeline models: query, hits, scrape job and outcome."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from talent_scout_core.exceptions import JobStateError
from talent_scout_core.models.completeness import CompletenessResult, Gap


class DiscoveryQuery(BaseModel):
    """Immutable search-engine query built once per pipeline run."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Full boolean query string")
    title_terms: tuple[str, ...] = Field(default=())
    industry_terms: tuple[str, ...] = Field(default=())
    location: str | None = None
    skill: str | None = None

    def __str__(self) -> str:
        return self.text


class ProfileHit(BaseModel):
    """A search result that points at a candidate profile."""

    profile_url: str
    name: str = "Unknown"
    title: str = "No title available"
    company: str = "Unknown"
    snippet: str = ""


class CandidateRecord(BaseModel):
    """A scraped candidate, normalized from the provider's loose payload."""

    model_config = ConfigDict(extra="ignore")

    name: str = "Unknown"
    title: str = "No title available"
    company: str = "Unknown"
    profile_url: str = ""

    @model_validator(mode="before")
    @classmethod
    def normalize_provider_fields(cls, data: Any) -> Any:
        """Map alternate provider field names onto the record shape."""
        if not isinstance(data, dict):
            return data
        out = {k: v for k, v in data.items() if v not in (None, "")}
        if "title" not in out and out.get("position"):
            out["title"] = out["position"]
        if "company" not in out:
            company = out.get("current_company_name") or out.get("current_company")
            if isinstance(company, dict):
                company = company.get("name")
            if company:
                out["company"] = company
        if "profile_url" not in out and out.get("url"):
            out["profile_url"] = out["url"]
        for key in ("name", "title", "company", "profile_url"):
            if key in out and not isinstance(out[key], str):
                out[key] = str(out[key])
        return out


class JobState(StrEnum):
    """Lifecycle of a scrape job at the provider."""

    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"


class ScrapeJob(BaseModel):
    """A submitted scrape job tracked to a terminal state by polling."""

    job_id: str
    state: JobState = JobState.PENDING
    attempts: int = Field(default=0, ge=0)
    records: list[CandidateRecord] = Field(default_factory=list)
    detail: str | None = None

    @property
    def is_terminal(self) -> bool:
        """True once the job has left the pending state."""
        return self.state is not JobState.PENDING

    def transition(
        self,
        state: JobState,
        records: list[CandidateRecord] | None = None,
        detail: str | None = None,
    ) -> None:
        """Move out of pending into a terminal state.

        Only a ready job carries records; every other terminal state
        drops whatever was passed.
        """
        if self.is_terminal:
            msg = f"job {self.job_id} already terminal ({self.state}), cannot become {state}"
            raise JobStateError(msg)
        if state is JobState.PENDING:
            msg = f"job {self.job_id} cannot transition back to pending"
            raise JobStateError(msg)
        self.state = state
        self.records = list(records or []) if state is JobState.READY else []
        self.detail = detail


class FailureReason(BaseModel):
    """Structured reason attached to a failed discovery outcome."""

    model_config = ConfigDict(frozen=True)

    code: Literal[
        "configuration",
        "upstream",
        "no_candidates",
        "job_failed",
        "rate_limited",
    ]
    message: str


OutcomeKind = Literal[
    "not_ready",
    "search_only",
    "scraped",
    "failed",
    "timed_out",
    "cancelled",
]


class DiscoveryOutcome(BaseModel):
    """Terminal result of one pipeline invocation."""

    kind: OutcomeKind
    run_id: str
    query: DiscoveryQuery | None = None
    completeness: CompletenessResult | None = None
    gap: Gap | None = None
    urls: list[str] = Field(default_factory=list)
    records: list[CandidateRecord] = Field(default_factory=list)
    reason: FailureReason | None = None
    job_id: str | None = None

    @classmethod
    def not_ready(
        cls, run_id: str, completeness: CompletenessResult, gap: Gap | None
    ) -> DiscoveryOutcome:
        """Intake is below the readiness threshold; nothing external ran."""
        return cls(kind="not_ready", run_id=run_id, completeness=completeness, gap=gap)

    @classmethod
    def search_only(
        cls, run_id: str, query: DiscoveryQuery, urls: list[str]
    ) -> DiscoveryOutcome:
        """Search succeeded but scraping was skipped or could not be submitted."""
        return cls(kind="search_only", run_id=run_id, query=query, urls=urls)

    @classmethod
    def scraped(
        cls,
        run_id: str,
        query: DiscoveryQuery,
        urls: list[str],
        records: list[CandidateRecord],
        job_id: str,
    ) -> DiscoveryOutcome:
        """Scrape job finished with candidate records."""
        return cls(
            kind="scraped",
            run_id=run_id,
            query=query,
            urls=urls,
            records=records,
            job_id=job_id,
        )

    @classmethod
    def failed(
        cls,
        run_id: str,
        reason: FailureReason,
        query: DiscoveryQuery | None = None,
        job_id: str | None = None,
    ) -> DiscoveryOutcome:
        """A fatal condition aborted the run."""
        return cls(kind="failed", run_id=run_id, reason=reason, query=query, job_id=job_id)

    @classmethod
    def timed_out(
        cls, run_id: str, query: DiscoveryQuery, urls: list[str], job_id: str
    ) -> DiscoveryOutcome:
        """Poll budget exhausted; only the searched URLs are returned."""
        return cls(kind="timed_out", run_id=run_id, query=query, urls=urls, job_id=job_id)

    @classmethod
    def cancelled(
        cls, run_id: str, query: DiscoveryQuery, urls: list[str], job_id: str
    ) -> DiscoveryOutcome:
        """Caller aborted the poll loop early."""
        return cls(kind="cancelled", run_id=run_id, query=query, urls=urls, job_id=job_id)

    @property
    def is_success(self) -> bool:
        """True for outcomes that hand discovered candidates back to the caller."""
        return self.kind in ("scraped", "search_only")
