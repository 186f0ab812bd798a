"""Integration test fixtures: real Settings and a file-backed SQLite store."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine

from talent_scout_core.config.settings import Settings
from talent_scout_infra.db.engine import create_engine
from talent_scout_infra.db.pattern_store import SqlPatternStore
from talent_scout_infra.db.session import create_session_factory, init_db


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Real Settings with fake credentials, zero poll wait and a temp database."""
    return Settings(  # type: ignore[call-arg]
        _env_file=None,
        serpapi_api_key="serp-int",
        brightdata_api_key="bd-int",
        serpapi_base_url="https://serpapi.test/search.json",
        brightdata_base_url="https://brightdata.test/datasets/v3",
        poll_interval_seconds=0,
        poll_max_attempts=5,
        search_retry_wait_min=0,
        search_retry_wait_max=0,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'patterns.db'}",
    )


@pytest.fixture
async def engine(settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Engine over the temp database with tables created."""
    engine = create_engine(settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def pattern_store(engine: AsyncEngine) -> SqlPatternStore:
    """SQL-backed learned-pattern store."""
    return SqlPatternStore(create_session_factory(engine))
