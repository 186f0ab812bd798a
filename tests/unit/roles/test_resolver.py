"""Tests for role-pattern resolution."""

from __future__ import annotations

import pytest

from talent_scout_agents.roles.resolver import (
    RolePatternResolver,
    format_role_intelligence,
    query_hints,
)
from talent_scout_core.models.role import LearnedPattern, RoleTemplate
from tests.mocks.mock_factories import make_learned_pattern
from tests.mocks.mock_tools import FakePatternStore


@pytest.mark.unit
class TestRolePatternResolver:
    """Test learned-first, template-second resolution."""

    async def test_learned_pattern_preferred(self) -> None:
        """A stored pattern wins over the static template."""
        learned = make_learned_pattern()
        store = FakePatternStore({"chief financial officer (cfo)": learned})
        resolver = RolePatternResolver(store)

        result = await resolver.resolve("  CFO ")

        assert result is learned
        assert store.lookups == ["cfo"]

    async def test_template_fallback(self) -> None:
        """Without a stored pattern the template is returned."""
        resolver = RolePatternResolver(FakePatternStore())
        result = await resolver.resolve("CFO")
        assert isinstance(result, RoleTemplate)
        assert result.key == "cfo"

    async def test_store_failure_falls_back_to_template(self) -> None:
        """Store errors are swallowed and treated as no learned pattern."""
        resolver = RolePatternResolver(FakePatternStore(fail=True))
        result = await resolver.resolve("CMO")
        assert isinstance(result, RoleTemplate)
        assert result.key == "cmo"

    async def test_no_store(self) -> None:
        """A resolver without a store uses templates only."""
        result = await RolePatternResolver().resolve("COO")
        assert isinstance(result, RoleTemplate)

    async def test_unknown_and_blank_titles(self) -> None:
        """Unknown or blank titles resolve to None without a lookup."""
        store = FakePatternStore()
        resolver = RolePatternResolver(store)
        assert await resolver.resolve("Head of Vibes") is None
        assert await resolver.resolve("   ") is None
        assert store.lookups == ["head of vibes"]


@pytest.mark.unit
class TestFormatting:
    """Test role-intelligence rendering and query hints."""

    def test_format_learned(self) -> None:
        """Learned patterns report their search count."""
        text = format_role_intelligence("CFO", make_learned_pattern())
        assert text.startswith("**ROLE INTELLIGENCE (CFO):**")
        assert 'Based on 7 hires for "chief financial officer"' in text
        assert "Open to any" in text

    def test_format_template(self) -> None:
        """Templates list preferred companies."""
        from talent_scout_agents.roles.templates import match_role_template

        text = format_role_intelligence("CEO", match_role_template("ceo"))
        assert "Chief Executive Officer (12+ years typical)" in text
        assert "FAANG" in text
        assert "- Assumed known, skip asking: growth preference" in text

    def test_format_template_without_known_dimensions(self) -> None:
        """Templates with nothing assumed known omit the skip line."""
        template = RoleTemplate(key="cto", title="CTO", typical_years_exp=10)
        assert "skip asking" not in format_role_intelligence("CTO", template)

    def test_format_none_is_empty(self) -> None:
        """No pattern renders nothing."""
        assert format_role_intelligence("CFO", None) == ""

    def test_query_hints(self) -> None:
        """Hints come from skills, falling back to keywords for learned patterns."""
        assert query_hints(None) == ()
        assert query_hints(make_learned_pattern()) == ("Treasury", "M&A", "Audit")
        keywords_only = LearnedPattern(role="x", common_keywords=("growth",))
        assert query_hints(keywords_only) == ("growth",)
