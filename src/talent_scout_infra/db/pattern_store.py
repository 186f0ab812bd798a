"""SQL-backed implementation of the learned-pattern store."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from talent_scout_core.exceptions import PatternStoreError
from talent_scout_core.models.role import LearnedPattern
from talent_scout_infra.db.models import LearnedPatternModel
from talent_scout_infra.db.repositories.pattern_repo import PatternRepository


def to_learned_pattern(model: LearnedPatternModel) -> LearnedPattern:
    """Convert an ORM row to the domain model."""
    return LearnedPattern(
        role=model.position,
        search_count=model.search_count or 0,
        common_skills=tuple(model.skills or ()),
        common_keywords=tuple(model.keywords or ()),
        typical_source=model.source or "external",
    )


class SqlPatternStore:
    """PatternStore over a SQLAlchemy session factory, one session per lookup."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize with a session factory."""
        self._session_factory = session_factory

    async def find_by_role(self, normalized_role: str) -> LearnedPattern | None:
        """First stored pattern whose role title contains ``normalized_role``."""
        try:
            async with self._session_factory() as session:
                model = await PatternRepository(session).find_first_containing(
                    normalized_role
                )
                return to_learned_pattern(model) if model else None
        except SQLAlchemyError as e:
            raise PatternStoreError(f"pattern lookup failed: {e}") from e

    async def record_search(
        self, role: str, skills: list[str], keywords: list[str] | None = None
    ) -> LearnedPattern:
        """Persist one successful search for ``role`` and return the updated pattern."""
        try:
            async with self._session_factory() as session:
                model = await PatternRepository(session).record_search(
                    role, skills=skills, keywords=keywords or ()
                )
                await session.commit()
                return to_learned_pattern(model)
        except SQLAlchemyError as e:
            raise PatternStoreError(f"pattern update failed: {e}") from e
