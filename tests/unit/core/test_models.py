"""Tests for intake, completeness and discovery models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from talent_scout_core.exceptions import JobStateError
from talent_scout_core.models.completeness import CompletenessResult, Gap
from talent_scout_core.models.discovery import (
    CandidateRecord,
    DiscoveryOutcome,
    FailureReason,
    JobState,
    ScrapeJob,
)
from talent_scout_core.models.intake import IntakeRecord
from tests.mocks.mock_factories import make_candidate_record, make_query


@pytest.mark.unit
class TestIntakeRecord:
    """Test IntakeRecord access helpers."""

    def test_missing_sections_default_to_empty(self) -> None:
        """Absent sections are empty dicts."""
        record = IntakeRecord.model_validate({})
        assert record.urgency == {}
        assert record.role_title == ""

    def test_malformed_section_is_kept(self) -> None:
        """Non-object sections survive validation so they can score 0."""
        record = IntakeRecord.model_validate({"urgency": "soon"})
        assert record.urgency == "soon"
        assert record.field("urgency", "timeline") is None

    def test_role_title_stripped(self) -> None:
        """role_title trims whitespace."""
        record = IntakeRecord.model_validate({"position": {"title": "  CFO "}})
        assert record.role_title == "CFO"

    def test_unknown_top_level_keys_ignored(self) -> None:
        """Extra keys do not fail validation."""
        record = IntakeRecord.model_validate({"notes": "x"})
        assert not hasattr(record, "notes")


@pytest.mark.unit
class TestCompletenessModels:
    """Test CompletenessResult and Gap."""

    def test_score_out_of_range_rejected(self) -> None:
        """Scores above 100 are invalid."""
        with pytest.raises(ValidationError):
            CompletenessResult(
                overall=101, company=0, position=0, urgency=0, requirements=0,
                personality=0, compensation=0, process=0, selling_points=0,
            )

    def test_gap_serializes_camel_case(self) -> None:
        """Gap dumps currentScore and suggestedProbe by alias."""
        gap = Gap(section="urgency", weight=0.25, current_score=50, suggested_probe="Why now?")
        dumped = gap.model_dump(by_alias=True)
        assert dumped == {
            "section": "urgency",
            "weight": 0.25,
            "currentScore": 50,
            "suggestedProbe": "Why now?",
        }

    def test_gap_accepts_alias_input(self) -> None:
        """Gap can be built from camelCase input."""
        gap = Gap.model_validate(
            {"section": "urgency", "weight": 0.25, "currentScore": 0, "suggestedProbe": "?"}
        )
        assert gap.current_score == 0


@pytest.mark.unit
class TestCandidateRecord:
    """Test provider payload normalization."""

    def test_defaults_for_missing_fields(self) -> None:
        """Empty payload yields placeholder values."""
        record = CandidateRecord.model_validate({})
        assert record.name == "Unknown"
        assert record.title == "No title available"
        assert record.company == "Unknown"

    def test_alternate_field_names(self) -> None:
        """position, current_company and url map onto the record."""
        record = CandidateRecord.model_validate(
            {
                "name": "Ana",
                "position": "VP Finance",
                "current_company": {"name": "Initech"},
                "url": "https://www.linkedin.com/in/ana",
                "followers": 500,
            }
        )
        assert record.title == "VP Finance"
        assert record.company == "Initech"
        assert record.profile_url == "https://www.linkedin.com/in/ana"

    def test_null_values_fall_back_to_defaults(self) -> None:
        """Null or empty provider values do not override defaults."""
        record = CandidateRecord.model_validate({"name": None, "title": ""})
        assert record.name == "Unknown"
        assert record.title == "No title available"


@pytest.mark.unit
class TestScrapeJob:
    """Test the scrape job state machine."""

    def test_starts_pending(self) -> None:
        """A new job is pending and not terminal."""
        job = ScrapeJob(job_id="s1")
        assert job.state is JobState.PENDING
        assert not job.is_terminal

    def test_ready_keeps_records(self) -> None:
        """Only the ready state carries records."""
        job = ScrapeJob(job_id="s1")
        job.transition(JobState.READY, records=[make_candidate_record()])
        assert job.is_terminal
        assert len(job.records) == 1

    @pytest.mark.parametrize("state", [JobState.FAILED, JobState.TIMEOUT, JobState.CANCELLED])
    def test_other_terminal_states_drop_records(self, state: JobState) -> None:
        """Failed, timed out and cancelled jobs have no records."""
        job = ScrapeJob(job_id="s1")
        job.transition(state, records=[make_candidate_record()])
        assert job.records == []

    def test_terminal_state_is_final(self) -> None:
        """A terminal job cannot transition again."""
        job = ScrapeJob(job_id="s1")
        job.transition(JobState.TIMEOUT)
        with pytest.raises(JobStateError):
            job.transition(JobState.READY)

    def test_cannot_return_to_pending(self) -> None:
        """pending is never a transition target."""
        job = ScrapeJob(job_id="s1")
        with pytest.raises(JobStateError):
            job.transition(JobState.PENDING)


@pytest.mark.unit
class TestDiscoveryOutcome:
    """Test outcome constructors."""

    def test_success_kinds(self) -> None:
        """scraped and search_only are successes; others are not."""
        query = make_query()
        assert DiscoveryOutcome.search_only("r", query, ["u"]).is_success
        assert DiscoveryOutcome.scraped("r", query, ["u"], [], "j").is_success
        assert not DiscoveryOutcome.timed_out("r", query, ["u"], "j").is_success
        assert not DiscoveryOutcome.cancelled("r", query, ["u"], "j").is_success
        failed = DiscoveryOutcome.failed("r", FailureReason(code="upstream", message="x"))
        assert not failed.is_success

    def test_timed_out_carries_urls_not_records(self) -> None:
        """A timeout returns searched URLs only."""
        outcome = DiscoveryOutcome.timed_out("r", make_query(), ["u1", "u2"], "j")
        assert outcome.urls == ["u1", "u2"]
        assert outcome.records == []
        assert outcome.job_id == "j"
