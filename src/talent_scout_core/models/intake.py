"""Intake record ("NAP") model describing one hiring need."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IntakeRecord(BaseModel):
    """Structured description of one hiring need across eight sections.

    Section values are kept as raw JSON so that malformed (non-object)
    sections reach the scorer and score 0 instead of failing validation.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    company: Any = Field(default_factory=dict, description="Hiring company facts")
    position: Any = Field(default_factory=dict, description="Role title and location")
    urgency: Any = Field(default_factory=dict, description="Timeline and business impact")
    requirements: Any = Field(default_factory=dict, description="Must-have skills")
    compensation: Any = Field(default_factory=dict, description="Salary band")
    personality: Any = Field(default_factory=dict, description="Culture and team fit")
    selling_points: Any = Field(default_factory=dict, description="Why a candidate should care")
    process: Any = Field(default_factory=dict, description="Interview process (ungated)")

    def section(self, name: str) -> Any:
        """Return the raw data for a section by name."""
        return getattr(self, name)

    def field(self, section: str, name: str) -> Any:
        """Return a single field of a section, or None when absent or malformed."""
        data = self.section(section)
        if not isinstance(data, Mapping):
            return None
        return data.get(name)

    @property
    def role_title(self) -> str:
        """Position title as a stripped string ('' when missing)."""
        title = self.field("position", "title")
        return title.strip() if isinstance(title, str) else ""
