"""Learned role-pattern store interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from talent_scout_core.models.role import LearnedPattern


@runtime_checkable
class PatternStore(Protocol):
    """Read access to patterns learned from prior successful searches."""

    async def find_by_role(self, normalized_role: str) -> LearnedPattern | None:
        """Return the first pattern whose role title contains the given text."""
        ...
