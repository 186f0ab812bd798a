"""Deterministic selection of the next information gap to probe."""

from __future__ import annotations

from collections.abc import Sequence

from talent_scout_agents.roles.presets import adjust_comp_for_industry, stage_urgency_note
from talent_scout_core.constants import DEFAULT_PROBE, PROBE_QUESTIONS, SECTION_WEIGHTS
from talent_scout_core.models.completeness import CompletenessResult, Gap
from talent_scout_core.models.intake import IntakeRecord
from talent_scout_core.models.role import LearnedPattern, RolePreset, RoleTemplate

RoleHint = LearnedPattern | RoleTemplate | RolePreset
RoleHints = RoleHint | Sequence[RoleHint | None] | None


def next_gap(
    intake: IntakeRecord,
    result: CompletenessResult,
    role_hint: RoleHints = None,
) -> Gap | None:
    """Return the first gated section below 100, in fixed priority order.

    The order is the listed weight-descending order; sections are not
    re-sorted by remaining weight. Returns None only when all five gated
    sections are at 100.

    ``role_hint`` may be a single hint or several in priority order; the
    first hint with context for the gap's section supplies it.
    """
    for section, weight in SECTION_WEIGHTS:
        score = result.score_for(section)
        if score < 100:
            return Gap(
                section=section,
                weight=weight,
                current_score=score,
                suggested_probe=suggest_probe(section, intake, role_hint),
            )
    return None


def suggest_probe(
    section: str,
    intake: IntakeRecord,
    role_hint: RoleHints = None,
) -> str:
    """Canned probe for a section, with role context appended when known."""
    probe = PROBE_QUESTIONS.get(section, DEFAULT_PROBE)
    for candidate in _as_hints(role_hint):
        hint = _role_context(section, intake, candidate)
        if hint:
            return f"{probe} ({hint})"
    return probe


def _as_hints(role_hint: RoleHints) -> tuple[RoleHint, ...]:
    if role_hint is None:
        return ()
    if isinstance(role_hint, LearnedPattern | RoleTemplate | RolePreset):
        return (role_hint,)
    return tuple(h for h in role_hint if h is not None)


def _role_context(section: str, intake: IntakeRecord, role_hint: RoleHint) -> str:
    title = intake.role_title or "this role"

    if section == "requirements":
        skills = _skills_of(role_hint)
        if skills:
            return f"Typical for {title}: {', '.join(skills[:3])}"
    elif section == "compensation" and isinstance(role_hint, RolePreset):
        industry = intake.field("company", "industry")
        band = adjust_comp_for_industry(
            role_hint.comp, industry if isinstance(industry, str) else None
        )
        text = f"Market range for {role_hint.name}: ${band.low:,}-${band.high:,}"
        if band.ote:
            text += f", OTE ${band.ote:,}"
        return text
    elif section == "urgency" and isinstance(role_hint, RolePreset):
        stage = intake.field("company", "funding_stage")
        if isinstance(stage, str) and stage.strip():
            return stage_urgency_note(stage)
        return role_hint.urgency_note or ""
    elif section == "personality" and isinstance(role_hint, RolePreset):
        if role_hint.culture_hints:
            return f"Often looked for: {', '.join(role_hint.culture_hints)}"
    return ""


def _skills_of(role_hint: RoleHint) -> tuple[str, ...]:
    if isinstance(role_hint, LearnedPattern):
        return role_hint.common_skills
    if isinstance(role_hint, RoleTemplate):
        return role_hint.typical_skills
    return role_hint.skills
