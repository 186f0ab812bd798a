"""Domain models for talent-scout."""

from talent_scout_core.models.completeness import CompletenessResult, Gap
from talent_scout_core.models.discovery import (
    CandidateRecord,
    DiscoveryOutcome,
    DiscoveryQuery,
    FailureReason,
    JobState,
    ProfileHit,
    ScrapeJob,
)
from talent_scout_core.models.intake import IntakeRecord
from talent_scout_core.models.role import (
    CompensationBand,
    LearnedPattern,
    RolePreset,
    RoleTemplate,
)

__all__ = [
    "CandidateRecord",
    "CompensationBand",
    "CompletenessResult",
    "DiscoveryOutcome",
    "DiscoveryQuery",
    "FailureReason",
    "Gap",
    "IntakeRecord",
    "JobState",
    "LearnedPattern",
    "ProfileHit",
    "RolePreset",
    "RoleTemplate",
    "ScrapeJob",
]
