"""Market presets for common senior roles, used to enrich intake prompts."""

from __future__ import annotations

from talent_scout_core.models.role import CompensationBand, RolePreset


def _preset(
    name: str,
    skills: tuple[str, ...],
    low: int,
    high: int,
    exp_years: int,
    level: str,
    urgency_note: str | None = None,
    culture_hints: tuple[str, ...] = (),
    ote: int | None = None,
) -> RolePreset:
    return RolePreset(
        name=name,
        skills=skills,
        comp=CompensationBand(low=low, high=high, ote=ote),
        exp_years=exp_years,
        level=level,
        urgency_note=urgency_note,
        culture_hints=culture_hints,
    )


ROLE_PRESETS: tuple[RolePreset, ...] = (
    _preset(
        "CFO", ("M&A", "FP&A", "Board reporting"), 350_000, 500_000, 12, "C-Suite",
        "High if fundraising or M&A pending",
        ("Strategic thinker", "PE/VC experience", "Hands-on during scale"),
    ),
    _preset(
        "CTO", ("Engineering leadership", "Architecture", "Team scaling"),
        400_000, 600_000, 10, "C-Suite",
        "Critical if product delays or tech debt",
        ("Technical depth", "Builder mentality", "Remote-friendly"),
    ),
    _preset(
        "COO", ("Operations", "Process optimization", "Cross-functional leadership"),
        350_000, 550_000, 12, "C-Suite",
        "High if scaling operations or inefficiencies",
        ("Systems thinker", "Execution focused", "Data-driven"),
    ),
    _preset(
        "CMO", ("Growth marketing", "Brand strategy", "Product marketing"),
        300_000, 450_000, 10, "C-Suite",
        "Critical if growth stalled",
        ("Creative + analytical", "Performance marketing", "Customer-centric"),
    ),
    _preset(
        "VP Sales", ("Enterprise sales", "ACV >$100k", "Team scaling"),
        400_000, 550_000, 10, "VP",
        "High if losing deals or pipeline weak",
        ("Hunter mentality", "SaaS metrics fluency", "Team builder"),
        ote=600_000,
    ),
    _preset(
        "VP Engineering",
        ("Engineering management", "Technical architecture", "Hiring/retention"),
        350_000, 500_000, 10, "VP",
        "Critical if product velocity dropping",
        ("Technical credibility", "People leader", "Process builder"),
    ),
    _preset(
        "VP Product", ("Product strategy", "Roadmap", "Cross-functional leadership"),
        300_000, 450_000, 8, "VP",
        "High if product-market fit unclear",
        ("Customer obsessed", "Data informed", "Strategic"),
    ),
    _preset(
        "VP Marketing", ("Demand generation", "Brand", "Product marketing"),
        280_000, 400_000, 8, "VP",
        "High if CAC rising or awareness low",
        ("Growth hacker", "Creative", "ROI focused"),
    ),
    _preset(
        "Director of Engineering",
        ("Engineering management", "System design", "Team development"),
        220_000, 320_000, 7, "Director",
        culture_hints=("Technical leader", "Mentor", "Process champion"),
    ),
    _preset(
        "Director of Sales", ("Sales management", "Enterprise deals", "Pipeline"),
        200_000, 300_000, 6, "Director",
        culture_hints=("Quota crusher", "Metrics driven", "Player-coach"),
        ote=350_000,
    ),
    _preset(
        "Director of Product",
        ("Product management", "Analytics", "Stakeholder management"),
        200_000, 280_000, 6, "Director",
        culture_hints=("User focused", "Data driven", "Communicator"),
    ),
)

FUZZY_PRESET_ALIASES: tuple[tuple[str, str], ...] = (
    ("chief financial", "CFO"),
    ("finance chief", "CFO"),
    ("chief technology", "CTO"),
    ("tech chief", "CTO"),
    ("chief operating", "COO"),
    ("operations chief", "COO"),
    ("chief marketing", "CMO"),
    ("marketing chief", "CMO"),
    ("vp of sales", "VP Sales"),
    ("sales vp", "VP Sales"),
    ("vp of eng", "VP Engineering"),
    ("engineering vp", "VP Engineering"),
    ("vp of product", "VP Product"),
    ("product vp", "VP Product"),
    ("vp of marketing", "VP Marketing"),
    ("marketing vp", "VP Marketing"),
)

INDUSTRY_COMP_MULTIPLIERS: tuple[tuple[str, float], ...] = (
    ("fintech", 1.15),
    ("crypto", 1.20),
    ("ai", 1.18),
    ("saas", 1.05),
    ("ecommerce", 0.95),
    ("nonprofit", 0.75),
)

STAGE_URGENCY_NOTES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("seed", "pre-seed"), "High urgency - early stage velocity critical"),
    (("series a",), "High urgency - scaling team for growth"),
    (("series b",), "Medium-high urgency - building senior bench"),
    (("series c", "late stage"), "Medium urgency - strategic hire"),
    (("pe", "private equity"), "High urgency - PE-backed transformation"),
)

_PRESETS_BY_NAME = {preset.name: preset for preset in ROLE_PRESETS}


def match_role_preset(title: str) -> RolePreset | None:
    """Match a free-form title to a preset, directly first and then by alias."""
    normalized = title.lower().strip()
    if not normalized:
        return None
    for preset in ROLE_PRESETS:
        if preset.name.lower() in normalized:
            return preset
    for phrase, name in FUZZY_PRESET_ALIASES:
        if phrase in normalized:
            return _PRESETS_BY_NAME.get(name)
    return None


def adjust_comp_for_industry(
    band: CompensationBand, industry: str | None
) -> CompensationBand:
    """Apply the first matching industry premium or discount to a band."""
    if not industry:
        return band
    normalized = industry.lower()
    for keyword, multiplier in INDUSTRY_COMP_MULTIPLIERS:
        if keyword in normalized:
            return CompensationBand(
                low=round(band.low * multiplier),
                high=round(band.high * multiplier),
                ote=round(band.ote * multiplier) if band.ote else None,
            )
    return band


def stage_urgency_note(funding: str | None) -> str:
    """Describe how urgent a hire usually is at a given funding stage."""
    if not funding:
        return "Standard urgency"
    normalized = funding.lower()
    for keywords, note in STAGE_URGENCY_NOTES:
        if any(keyword in normalized for keyword in keywords):
            return note
    return "Standard urgency"
