"""Tests for market role presets."""

from __future__ import annotations

import pytest

from talent_scout_agents.roles.presets import (
    adjust_comp_for_industry,
    match_role_preset,
    stage_urgency_note,
)
from talent_scout_core.models.role import CompensationBand


@pytest.mark.unit
class TestMatchRolePreset:
    """Test preset lookup."""

    def test_direct_name_match(self) -> None:
        """Preset names match case-insensitively inside a title."""
        preset = match_role_preset("Interim cfo")
        assert preset is not None
        assert preset.name == "CFO"

    def test_alias_match(self) -> None:
        """Common phrasings fall back to aliases."""
        preset = match_role_preset("VP of Sales, EMEA")
        assert preset is not None
        assert preset.name == "VP Sales"

    def test_unknown_title(self) -> None:
        """Unrecognized titles return None."""
        assert match_role_preset("Barista") is None
        assert match_role_preset("") is None


@pytest.mark.unit
class TestCompAdjustments:
    """Test industry and stage adjustments."""

    def test_no_industry_keeps_band(self) -> None:
        """A missing industry leaves the band unchanged."""
        band = CompensationBand(low=100, high=200)
        assert adjust_comp_for_industry(band, None) is band

    def test_unknown_industry_keeps_band(self) -> None:
        """Industries without a multiplier leave the band unchanged."""
        band = CompensationBand(low=100, high=200)
        assert adjust_comp_for_industry(band, "Basket weaving") == band

    def test_fintech_premium(self) -> None:
        """Fintech bands get a premium, OTE included."""
        band = CompensationBand(low=100_000, high=200_000, ote=300_000)
        adjusted = adjust_comp_for_industry(band, "Fintech / Payments")
        assert adjusted == CompensationBand(low=115_000, high=230_000, ote=345_000)

    def test_stage_note_default(self) -> None:
        """Unknown or missing stages get the standard note."""
        assert stage_urgency_note(None) == "Standard urgency"
        assert stage_urgency_note("bootstrapped") == "Standard urgency"

    def test_stage_note_series_a(self) -> None:
        """Series A is high urgency."""
        assert stage_urgency_note("Series A").startswith("High urgency")
