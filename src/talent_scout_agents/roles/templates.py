"""Static role templates for well-known executive titles."""

from __future__ import annotations

from talent_scout_core.models.role import RoleTemplate

# Scanned in order; the first key contained in a title wins.
ROLE_TEMPLATES: tuple[RoleTemplate, ...] = (
    RoleTemplate(
        key="ceo",
        title="Chief Executive Officer",
        typical_skills=(
            "P&L Management",
            "Strategic Planning",
            "Board Relations",
            "M&A",
            "Team Leadership",
        ),
        typical_years_exp=12,
        typical_responsibilities=(
            "Overall business strategy and execution",
            "Board management and stakeholder relations",
            "C-suite leadership and team building",
            "Financial performance and investor relations",
            "Culture and talent development",
        ),
        preferred_companies=("FAANG", "Fortune 500", "funded startups"),
        known_dimensions=("growth_preference",),
    ),
    RoleTemplate(
        key="cfo",
        title="Chief Financial Officer",
        typical_skills=(
            "FP&A",
            "SEC Compliance",
            "M&A",
            "Treasury",
            "Financial Controls",
            "IPO/Fundraising",
        ),
        typical_years_exp=10,
        typical_responsibilities=(
            "Financial planning and analysis",
            "SEC reporting and compliance",
            "M&A and capital allocation",
            "Treasury and risk management",
            "Accounting systems and controls",
            "Board reporting",
        ),
        preferred_companies=("Big 4", "Goldman Sachs", "McKinsey", "PE firms"),
        known_dimensions=("growth_preference",),
    ),
    RoleTemplate(
        key="coo",
        title="Chief Operating Officer",
        typical_skills=(
            "Operations",
            "Process Improvement",
            "Supply Chain",
            "Team Leadership",
            "P&L",
        ),
        typical_years_exp=10,
        typical_responsibilities=(
            "Daily operational execution",
            "Process optimization and efficiency",
            "Supply chain and logistics management",
            "Team structure and efficiency",
            "KPI tracking and improvement",
            "Cost management",
        ),
        preferred_companies=("Fortune 500", "logistics companies", "manufacturing"),
        known_dimensions=("growth_preference",),
    ),
    RoleTemplate(
        key="cio",
        title="Chief Information Officer",
        typical_skills=(
            "Infrastructure",
            "Cloud",
            "Cybersecurity",
            "ERP",
            "Digital Transformation",
            "Team Leadership",
        ),
        typical_years_exp=12,
        typical_responsibilities=(
            "IT strategy and roadmap",
            "Cybersecurity and risk management",
            "Cloud infrastructure and digital transformation",
            "ERP and systems implementation",
            "Vendor management",
            "IT team leadership",
        ),
        preferred_companies=("tech companies", "consulting firms", "product companies"),
        known_dimensions=("growth_preference",),
    ),
    RoleTemplate(
        key="chro",
        title="Chief Human Resources Officer",
        typical_skills=(
            "Talent Acquisition",
            "Compensation",
            "Culture",
            "Learning & Development",
            "Employment Law",
        ),
        typical_years_exp=10,
        typical_responsibilities=(
            "Talent acquisition and retention",
            "Compensation and benefits strategy",
            "Culture and engagement",
            "Learning and development programs",
            "Employee relations and compliance",
            "Organizational design",
        ),
        preferred_companies=("high-growth startups", "enterprise", "tech"),
        known_dimensions=("growth_preference",),
    ),
    RoleTemplate(
        key="cmo",
        title="Chief Marketing Officer",
        typical_skills=(
            "Brand Strategy",
            "Digital Marketing",
            "Product Marketing",
            "Analytics",
            "Team Leadership",
        ),
        typical_years_exp=10,
        typical_responsibilities=(
            "Brand strategy and positioning",
            "Digital marketing and demand generation",
            "Product marketing and go-to-market",
            "Analytics and attribution",
            "Marketing team leadership",
            "Budget management",
        ),
        preferred_companies=("SaaS", "tech", "consumer brands"),
        known_dimensions=("growth_preference",),
    ),
)


def match_role_template(role_title: str) -> RoleTemplate | None:
    """Return the first template whose key appears in the normalized title."""
    normalized = role_title.lower().strip()
    if not normalized:
        return None
    for template in ROLE_TEMPLATES:
        if template.key in normalized:
            return template
    return None
