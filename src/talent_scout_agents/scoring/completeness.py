"""Weighted NAP completeness scoring that gates the discovery search.

Each gated section has a fixed list of required fields. A section scores the
share of those fields that are filled; the overall score is the weight-sum of
the five gated sections. Company, position and process are reported with
plain presence checks and never contribute to the overall score.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from talent_scout_core.constants import (
    NAP_READY_THRESHOLD,
    PRESENCE_FIELDS,
    REQUIRED_FIELDS,
    SECTION_WEIGHTS,
)
from talent_scout_core.models.completeness import CompletenessResult
from talent_scout_core.models.intake import IntakeRecord


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up.

    Python's round() uses banker's rounding, which would turn a 12.5
    weighted score into 12. The value is first trimmed to 6 decimals so
    float noise such as 84.99999999999999 does not cross the boundary.
    """
    return math.floor(round(value, 6) + 0.5)


def is_filled(value: Any) -> bool:
    """A field is filled when it is not None/empty string, and non-empty if a sequence."""
    if value is None or value == "":
        return False
    if isinstance(value, Sequence) and not isinstance(value, str):
        return len(value) > 0
    return True


def score_section(section: str, data: Any) -> int:
    """Score one gated section 0-100 by the share of its required fields filled."""
    if not isinstance(data, Mapping):
        return 0
    required = REQUIRED_FIELDS.get(section, ())
    if not required:
        return 100
    filled = sum(1 for name in required if is_filled(data.get(name)))
    return round_half_up(filled / len(required) * 100)


def score_presence(section: str, data: Any) -> int:
    """Score an ungated section by simple truthiness of its tracked fields."""
    if not isinstance(data, Mapping) or not data:
        return 0
    fields = PRESENCE_FIELDS[section]
    filled = sum(1 for name in fields if data.get(name))
    return round_half_up(filled / len(fields) * 100)


def overall_score(scores: Mapping[str, int]) -> int:
    """Weight-sum of the gated section scores, rounded half up."""
    total = sum(weight * scores.get(section, 0) for section, weight in SECTION_WEIGHTS)
    return round_half_up(total)


def calculate_completeness(intake: IntakeRecord) -> CompletenessResult:
    """Compute every section score and the weighted overall score."""
    scores: dict[str, int] = {
        section: score_presence(section, intake.section(section))
        for section in PRESENCE_FIELDS
    }
    for section, _ in SECTION_WEIGHTS:
        scores[section] = score_section(section, intake.section(section))
    return CompletenessResult(overall=overall_score(scores), **scores)


def is_ready(result: CompletenessResult) -> bool:
    """True when the intake is complete enough to authorize a discovery search."""
    return result.overall >= NAP_READY_THRESHOLD
