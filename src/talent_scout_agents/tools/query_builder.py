"""Boolean search-engine query construction from an intake record."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Any

from talent_scout_core.constants import SITE_RESTRICTION, TITLE_VARIANTS
from talent_scout_core.models.discovery import DiscoveryQuery
from talent_scout_core.models.intake import IntakeRecord

_INDUSTRY_SPLIT = re.compile(r"[,/]")


def quote(term: str) -> str:
    """Quote a literal; existing double quotes are dropped rather than escaped."""
    return '"' + term.replace('"', "").strip() + '"'


def or_group(terms: Sequence[str]) -> str:
    """Join terms into a parenthesized OR-group, quoting multi-word terms."""
    rendered = [quote(t) if " " in t else t for t in terms]
    return "(" + " OR ".join(rendered) + ")"


def title_synonyms(title: str, extra: Iterable[str] = ()) -> tuple[str, ...]:
    """Title plus known synonyms, de-duplicated case-insensitively in order."""
    base = TITLE_VARIANTS.get(title.lower().strip(), (title.strip(),))
    return _unique([*base, *extra])


def industry_terms(value: Any) -> tuple[str, ...]:
    """Normalize an industry field (string or list) into separate terms."""
    if isinstance(value, str):
        raw: list[str] = _INDUSTRY_SPLIT.split(value)
    elif isinstance(value, Sequence):
        raw = [str(v) for v in value if isinstance(v, (str, int, float))]
    else:
        return ()
    return _unique(raw)


def build_query(intake: IntakeRecord, hints: Sequence[str] = ()) -> DiscoveryQuery:
    """Build the discovery query: title, industry, location, skill, site restriction.

    Empty clauses are omitted. Identical input always yields an identical
    query string.
    """
    title = intake.role_title
    alt_titles = _string_list(intake.field("position", "alt_titles"))
    titles = title_synonyms(title, alt_titles) if title else _unique(alt_titles)

    industries = industry_terms(intake.field("company", "industry"))
    location = _clean(intake.field("position", "location"))

    skills = _string_list(intake.field("requirements", "skills"))
    skill = skills[0] if skills else next((h for h in (_clean(x) for x in hints) if h), None)

    parts: list[str] = []
    if titles:
        parts.append(or_group(titles))
    if industries:
        parts.append(or_group(industries))
    if location:
        parts.append(quote(location))
    if skill:
        parts.append(quote(skill))
    parts.append(SITE_RESTRICTION)

    return DiscoveryQuery(
        text=" ".join(parts),
        title_terms=titles,
        industry_terms=industries,
        location=location,
        skill=skill,
    )


def _clean(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    cleaned = value.replace('"', "").strip()
    return cleaned or None


def _string_list(value: Any) -> list[str]:
    if isinstance(value, str):
        cleaned = _clean(value)
        return [cleaned] if cleaned else []
    if not isinstance(value, Sequence):
        return []
    return [c for c in (_clean(v) for v in value) if c]


def _unique(terms: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    out: list[str] = []
    for term in terms:
        cleaned = _clean(term)
        if not cleaned or cleaned.lower() in seen:
            continue
        seen.add(cleaned.lower())
        out.append(cleaned)
    return tuple(out)
