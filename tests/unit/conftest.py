"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from talent_scout_agents.observability import clear_run_context, disable_tracing
from talent_scout_core.models.intake import IntakeRecord
from tests.mocks.mock_factories import make_intake
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def ready_intake() -> IntakeRecord:
    """Return an intake that scores 100 overall."""
    return make_intake()


@pytest.fixture(autouse=True)
def _reset_observability() -> Iterator[None]:
    """Keep tracer and bound log context from leaking between tests."""
    yield
    disable_tracing()
    clear_run_context()
