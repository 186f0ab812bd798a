"""Shared constants for talent-scout."""

from __future__ import annotations

# Gated sections in priority order. The order doubles as the tie-break for
# equal weights, so this stays a sequence rather than a mapping.
SECTION_WEIGHTS: tuple[tuple[str, float], ...] = (
    ("urgency", 0.25),
    ("requirements", 0.25),
    ("compensation", 0.20),
    ("personality", 0.15),
    ("selling_points", 0.15),
)

GATED_SECTIONS: tuple[str, ...] = tuple(name for name, _ in SECTION_WEIGHTS)

INTAKE_SECTIONS: tuple[str, ...] = (
    "company",
    "position",
    "urgency",
    "requirements",
    "compensation",
    "personality",
    "selling_points",
    "process",
)

# Minimum overall completeness that authorizes a discovery search
NAP_READY_THRESHOLD = 80

REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "urgency": ("timeline", "impact"),
    "requirements": ("skills",),
    "compensation": ("salary_low", "salary_high"),
    "personality": ("culture_desc",),
    "selling_points": ("unique_opportunity",),
}

# Ungated sections: simple presence checks, reported but never weighted
PRESENCE_FIELDS: dict[str, tuple[str, ...]] = {
    "company": ("name", "industry", "size"),
    "position": ("title", "location"),
    "process": ("timeline", "interviews_count"),
}

PROBE_QUESTIONS: dict[str, str] = {
    "urgency": "How urgent is this? Is it blocking anything critical?",
    "requirements": "What are the 3 must-have skills this person absolutely needs?",
    "compensation": "Ballpark total cash - what range are you thinking?",
    "personality": "How would you describe the culture and team dynamic?",
    "selling_points": "Why would a top candidate want this role?",
}
DEFAULT_PROBE = "Tell me more about that."

# Search / scrape providers
PROFILE_URL_PATTERN = "linkedin.com/in"
SITE_RESTRICTION = "site:linkedin.com/in"
SERPAPI_PROVIDER = "serpapi"
BRIGHTDATA_PROVIDER = "brightdata"

# Title synonyms used for the OR-group title clause
TITLE_VARIANTS: dict[str, tuple[str, ...]] = {
    "cfo": ("Chief Financial Officer", "CFO", "VP Finance", "Finance Director"),
    "coo": ("Chief Operating Officer", "COO", "VP Operations", "Operations Director"),
    "cto": ("Chief Technology Officer", "CTO", "VP Engineering", "Engineering Director"),
    "vp sales": ("VP Sales", "Vice President Sales", "Head of Sales", "Sales Director"),
    "associate": (
        "Private Equity Associate",
        "PE Associate",
        "Investment Banking Associate",
        "IB Associate",
        "M&A Associate",
        "Venture Capital Associate",
        "VC Associate",
        "Associate",
    ),
    "analyst": (
        "Private Equity Analyst",
        "PE Analyst",
        "Investment Banking Analyst",
        "IB Analyst",
        "M&A Analyst",
        "Venture Capital Analyst",
        "VC Analyst",
        "Financial Analyst",
        "Analyst",
    ),
    "vice president": (
        "Vice President",
        "VP",
        "Private Equity VP",
        "Investment Banking VP",
        "M&A VP",
        "VC VP",
    ),
    "principal": (
        "Principal",
        "Private Equity Principal",
        "PE Principal",
        "Investment Principal",
        "VC Principal",
    ),
    "managing director": (
        "Managing Director",
        "MD",
        "Private Equity MD",
        "Investment Banking MD",
        "M&A Managing Director",
    ),
}
