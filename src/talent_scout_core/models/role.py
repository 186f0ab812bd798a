"""Role intelligence models: static templates, presets and learned patterns."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RoleTemplate(BaseModel):
    """Static reference data for a well-known executive title."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Lowercase keyword matched inside role titles")
    title: str = Field(description="Canonical title")
    typical_skills: tuple[str, ...] = Field(default=())
    typical_years_exp: int = Field(ge=0)
    typical_responsibilities: tuple[str, ...] = Field(default=())
    preferred_companies: tuple[str, ...] = Field(
        default=(), description="Where strong candidates usually come from"
    )
    known_dimensions: tuple[str, ...] = Field(
        default=(), description="Deeper dimensions assumed known; skip when prompting"
    )


class LearnedPattern(BaseModel):
    """Historical data for a role derived from prior successful searches."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(description="Stored role title that matched")
    search_count: int = Field(default=0, ge=0)
    common_skills: tuple[str, ...] = Field(default=())
    common_keywords: tuple[str, ...] = Field(default=())
    typical_source: str = Field(default="external")


class CompensationBand(BaseModel):
    """Market salary band, optionally with on-target earnings."""

    model_config = ConfigDict(frozen=True)

    low: int = Field(ge=0)
    high: int = Field(ge=0)
    ote: int | None = Field(default=None, ge=0)


class RolePreset(BaseModel):
    """Market defaults for a common senior role."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Canonical preset name, e.g. 'VP Sales'")
    skills: tuple[str, ...] = Field(default=())
    comp: CompensationBand
    exp_years: int = Field(ge=0)
    level: str
    urgency_note: str | None = None
    culture_hints: tuple[str, ...] = Field(default=())
