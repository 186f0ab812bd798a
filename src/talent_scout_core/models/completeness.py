"""Completeness scores and the next information gap."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompletenessResult(BaseModel):
    """Per-section completeness percentages plus the weighted overall score."""

    model_config = ConfigDict(frozen=True)

    overall: int = Field(ge=0, le=100, description="Weighted score of the gated sections")
    company: int = Field(ge=0, le=100)
    position: int = Field(ge=0, le=100)
    urgency: int = Field(ge=0, le=100)
    requirements: int = Field(ge=0, le=100)
    personality: int = Field(ge=0, le=100)
    compensation: int = Field(ge=0, le=100)
    process: int = Field(ge=0, le=100)
    selling_points: int = Field(ge=0, le=100)

    def score_for(self, section: str) -> int:
        """Return the score of a section by name."""
        return int(getattr(self, section))


class Gap(BaseModel):
    """The highest-priority incomplete gated section and how to probe it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    section: str = Field(description="Gated section name")
    weight: float = Field(description="Section weight in the overall score")
    current_score: int = Field(alias="currentScore", ge=0, le=100)
    suggested_probe: str = Field(alias="suggestedProbe", description="Question to ask next")
