"""Role intelligence lookup: learned patterns first, static templates second."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from talent_scout_agents.roles.templates import match_role_template
from talent_scout_core.models.role import LearnedPattern, RoleTemplate

if TYPE_CHECKING:
    from talent_scout_core.interfaces.pattern_store import PatternStore

logger = structlog.get_logger()

RolePattern = LearnedPattern | RoleTemplate


class RolePatternResolver:
    """Resolve a role title into learned or template role intelligence."""

    def __init__(self, store: PatternStore | None = None) -> None:
        """Initialize with an optional learned-pattern store."""
        self._store = store

    async def resolve(self, role_title: str) -> RolePattern | None:
        """Return the learned pattern for a title, else the first matching template.

        Store failures are logged and treated as "no learned pattern";
        they never propagate to the caller.
        """
        normalized = role_title.lower().strip()
        if not normalized:
            return None

        learned = await self._lookup_learned(normalized)
        if learned is not None:
            logger.info(
                "role_pattern_resolved",
                role=role_title,
                source="learned",
                matched=learned.role,
            )
            return learned

        template = match_role_template(normalized)
        if template is not None:
            logger.info(
                "role_pattern_resolved",
                role=role_title,
                source="template",
                matched=template.key,
            )
            return template

        logger.debug("role_pattern_missing", role=role_title)
        return None

    async def _lookup_learned(self, normalized: str) -> LearnedPattern | None:
        if self._store is None:
            return None
        try:
            return await self._store.find_by_role(normalized)
        except Exception as e:
            logger.warning(
                "role_pattern_store_failed",
                role=normalized,
                error_type=type(e).__name__,
                error=str(e),
            )
            return None


def format_role_intelligence(role_title: str, pattern: RolePattern | None) -> str:
    """Render a uniform role-intelligence block for prompting and query hints."""
    if pattern is None:
        return ""

    if isinstance(pattern, LearnedPattern):
        summary = (
            f'Based on {pattern.search_count} hires for "{pattern.role}":\n'
            f"- Typical Skills: {', '.join(pattern.common_skills[:5])}\n"
            f"- Keywords: {', '.join(pattern.common_keywords[:3])}"
        )
        companies = "Open to any"
    else:
        summary = (
            f"{pattern.title} ({pattern.typical_years_exp}+ years typical):\n"
            f"- Typical Skills: {', '.join(pattern.typical_skills[:5])}\n"
            f"- Responsibilities: {', '.join(pattern.typical_responsibilities[:3])}"
        )
        if pattern.known_dimensions:
            known = ", ".join(d.replace("_", " ") for d in pattern.known_dimensions)
            summary += f"\n- Assumed known, skip asking: {known}"
        companies = ", ".join(pattern.preferred_companies) or "Open to any"

    return (
        f"**ROLE INTELLIGENCE ({role_title}):**\n"
        f"{summary}\n\n"
        "When sourcing for this role, focus on:\n"
        f"- Target Companies: {companies}\n"
    )


def query_hints(pattern: RolePattern | None) -> tuple[str, ...]:
    """Skill terms a resolved pattern contributes to query construction."""
    if pattern is None:
        return ()
    if isinstance(pattern, LearnedPattern):
        return pattern.common_skills or pattern.common_keywords
    return pattern.typical_skills
