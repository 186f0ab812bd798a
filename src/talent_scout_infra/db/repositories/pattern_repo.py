"""Learned role-pattern repository."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from talent_scout_infra.db.models import LearnedPatternModel


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _merge(existing: Iterable[str], new: Iterable[str]) -> list[str]:
    merged = list(existing)
    seen = {item.lower() for item in merged}
    for item in new:
        if item and item.lower() not in seen:
            seen.add(item.lower())
            merged.append(item)
    return merged


class PatternRepository:
    """Lookups and updates for learned role patterns."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with an async session."""
        self._session = session

    async def find_first_containing(self, text: str) -> LearnedPatternModel | None:
        """First pattern (insertion order) whose position contains ``text``, any case."""
        needle = text.lower().strip()
        if not needle:
            return None
        stmt = (
            select(LearnedPatternModel)
            .where(
                func.lower(LearnedPatternModel.position).like(
                    f"%{_escape_like(needle)}%", escape="\\"
                )
            )
            .order_by(LearnedPatternModel.id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_position(self, position: str) -> LearnedPatternModel | None:
        """Exact, case-insensitive position match."""
        stmt = select(LearnedPatternModel).where(
            func.lower(LearnedPatternModel.position) == position.lower().strip()
        )
        result = await self._session.execute(stmt)
        return result.scalars().first()

    async def create(self, model: LearnedPatternModel) -> LearnedPatternModel:
        """Insert a new pattern."""
        self._session.add(model)
        await self._session.flush()
        return model

    async def record_search(
        self,
        position: str,
        skills: Iterable[str] = (),
        keywords: Iterable[str] = (),
        source: str = "external",
    ) -> LearnedPatternModel:
        """Count a successful search for a role, merging its skills and keywords."""
        existing = await self.get_by_position(position)
        if existing is None:
            return await self.create(
                LearnedPatternModel(
                    position=position.strip(),
                    skills=_merge([], skills),
                    keywords=_merge([], keywords),
                    search_count=1,
                    source=source,
                )
            )
        existing.search_count += 1
        existing.skills = _merge(existing.skills, skills)
        existing.keywords = _merge(existing.keywords, keywords)
        await self._session.flush()
        return existing

    async def list_all(self, limit: int = 100, offset: int = 0) -> list[LearnedPatternModel]:
        """List patterns in insertion order."""
        stmt = (
            select(LearnedPatternModel)
            .order_by(LearnedPatternModel.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
