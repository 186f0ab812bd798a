"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from talent_scout_agents.observability import configure_logging, configure_tracing
from talent_scout_agents.orchestrator.pipeline import DiscoveryPipeline
from talent_scout_agents.roles.presets import match_role_preset
from talent_scout_agents.roles.resolver import (
    RolePattern,
    RolePatternResolver,
    format_role_intelligence,
    query_hints,
)
from talent_scout_agents.scoring.completeness import calculate_completeness, is_ready
from talent_scout_agents.scoring.gaps import next_gap
from talent_scout_agents.tools.query_builder import build_query
from talent_scout_core.config.settings import Settings
from talent_scout_core.constants import INTAKE_SECTIONS
from talent_scout_core.exceptions import PatternStoreError
from talent_scout_core.models.discovery import DiscoveryOutcome
from talent_scout_core.models.intake import IntakeRecord
from talent_scout_infra.ratelimit.limiter import SlidingWindowRateLimiter

if TYPE_CHECKING:
    from talent_scout_infra.db.pattern_store import SqlPatternStore

app = typer.Typer(
    name="talent-scout",
    help="Intake completeness scoring and candidate discovery for executive search",
)
console = Console()
logger = structlog.get_logger()


def _load_intake(path: Path) -> IntakeRecord:
    """Read an intake JSON file; exit 1 on unreadable input."""
    try:
        payload = json.loads(path.read_text())
        return IntakeRecord.model_validate(payload)
    except (OSError, ValueError, ValidationError) as e:
        console.print(f"[red]Error:[/red] cannot read intake {path}: {e}")
        raise typer.Exit(code=1) from e


def _build_settings(verbose: bool) -> Settings:
    settings = Settings()  # type: ignore[call-arg]
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    configure_tracing(settings)
    return settings


@app.command()
def score(
    intake: Path = typer.Argument(..., help="Path to intake JSON", exists=True),
    use_db: bool = typer.Option(
        False, "--db/--no-db", help="Consult the learned-pattern store for probe hints"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Score intake completeness and show the next gap to probe."""
    settings = _build_settings(verbose)
    record = _load_intake(intake)
    result = calculate_completeness(record)

    table = Table(title=f"Intake completeness: {record.role_title or 'untitled role'}")
    table.add_column("Section")
    table.add_column("Score", justify="right")
    for section in INTAKE_SECTIONS:
        value = result.score_for(section)
        style = "green" if value == 100 else "yellow" if value else "red"
        table.add_row(section, f"[{style}]{value}[/{style}]")
    console.print(table)

    ready = is_ready(result)
    console.print(f"\n[bold]Overall:[/bold] {result.overall}")
    console.print(f"[bold]Ready for discovery:[/bold] {'yes' if ready else 'no'}")

    pattern = asyncio.run(_resolve_pattern(settings, record.role_title, use_db=use_db))
    gap = next_gap(record, result, (pattern, match_role_preset(record.role_title)))
    if gap is not None:
        console.print(
            f"\n[bold]Next gap:[/bold] {gap.section} "
            f"(weight {gap.weight:.2f}, score {gap.current_score})"
        )
        console.print(f"  {gap.suggested_probe}", markup=False, soft_wrap=True)


@app.command()
def query(
    intake: Path = typer.Argument(..., help="Path to intake JSON", exists=True),
    show_intel: bool = typer.Option(
        False, "--intel", help="Also print the resolved role intelligence"
    ),
    use_db: bool = typer.Option(
        False, "--db/--no-db", help="Consult the learned-pattern store"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Print the search query an intake would produce."""
    settings = _build_settings(verbose)
    record = _load_intake(intake)
    resolved = asyncio.run(_resolve_pattern(settings, record.role_title, use_db=use_db))

    if show_intel and resolved is not None:
        console.print(format_role_intelligence(record.role_title, resolved), markup=False)
    console.print(
        build_query(record, hints=query_hints(resolved)).text, markup=False, soft_wrap=True
    )


@app.command()
def discover(
    intake: Path = typer.Argument(..., help="Path to intake JSON", exists=True),
    use_db: bool = typer.Option(
        True, "--db/--no-db", help="Use and update the learned-pattern store"
    ),
    trace: bool = typer.Option(False, "--trace", help="Enable OTLP tracing"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Run candidate discovery for a ready intake."""
    settings = Settings()  # type: ignore[call-arg]
    if verbose:
        settings.log_level = "DEBUG"
    if trace:
        settings.otel_exporter = "otlp"
    configure_logging(settings)
    configure_tracing(settings)

    record = _load_intake(intake)
    outcome = asyncio.run(_run_discovery(settings, record, use_db=use_db))
    _print_outcome(outcome)

    if not outcome.is_success:
        raise typer.Exit(code=1)


@asynccontextmanager
async def _pattern_store(
    settings: Settings, enabled: bool
) -> AsyncIterator[SqlPatternStore | None]:
    """Yield a ready learned-pattern store, or None when disabled or unavailable."""
    if not enabled:
        yield None
        return

    from sqlalchemy.exc import SQLAlchemyError

    from talent_scout_infra.db.engine import create_engine
    from talent_scout_infra.db.pattern_store import SqlPatternStore
    from talent_scout_infra.db.session import create_session_factory, init_db

    engine = create_engine(settings)
    try:
        try:
            await init_db(engine)
        except SQLAlchemyError as e:
            logger.warning("pattern_store_unavailable", error=str(e))
            yield None
        else:
            yield SqlPatternStore(create_session_factory(engine))
    finally:
        await engine.dispose()


async def _resolve_pattern(
    settings: Settings, role_title: str, *, use_db: bool
) -> RolePattern | None:
    async with _pattern_store(settings, use_db) as store:
        return await RolePatternResolver(store).resolve(role_title)


async def _run_discovery(
    settings: Settings, record: IntakeRecord, *, use_db: bool
) -> DiscoveryOutcome:
    async with _pattern_store(settings, use_db) as store:
        pipeline = DiscoveryPipeline(
            settings,
            resolver=RolePatternResolver(store),
            rate_limiter=SlidingWindowRateLimiter(settings.search_rate_limit_per_minute),
        )
        outcome = await pipeline.run(record)
        if store is not None and outcome.is_success and record.role_title:
            await _learn_from_outcome(store, record, outcome)
    return outcome


async def _learn_from_outcome(
    store: SqlPatternStore, record: IntakeRecord, outcome: DiscoveryOutcome
) -> None:
    """Record a successful search so later runs resolve a learned pattern."""
    skills = record.field("requirements", "skills")
    if not isinstance(skills, list):
        skills = []
    try:
        await store.record_search(
            record.role_title,
            skills=[s for s in skills if isinstance(s, str) and s.strip()],
            keywords=list(outcome.query.title_terms) if outcome.query else [],
        )
    except PatternStoreError as e:
        logger.warning("pattern_record_failed", error=str(e))


def _print_outcome(outcome: DiscoveryOutcome) -> None:
    color = "green" if outcome.is_success else "yellow"
    console.print(f"[bold {color}]Discovery {outcome.kind}[/bold {color}] ({outcome.run_id})")

    if outcome.kind == "not_ready" and outcome.completeness is not None:
        console.print(f"  Completeness: {outcome.completeness.overall}")
        if outcome.gap is not None:
            console.print(f"  Next gap: {outcome.gap.section}")
            console.print(f"  {outcome.gap.suggested_probe}", markup=False, soft_wrap=True)
        return

    if outcome.query is not None:
        console.print(f"  Query: {outcome.query.text}", markup=False, soft_wrap=True)
    if outcome.job_id:
        console.print(f"  Scrape job: {outcome.job_id}")
    if outcome.reason is not None:
        console.print(f"  [red]{outcome.reason.code}:[/red] {outcome.reason.message}")

    if outcome.records:
        table = Table(title="Candidates")
        table.add_column("Name")
        table.add_column("Title")
        table.add_column("Company")
        table.add_column("Profile")
        for rec in outcome.records:
            table.add_row(
                rec.name or "",
                rec.title or "",
                rec.company or "",
                rec.profile_url or "",
            )
        console.print(table)
    elif outcome.urls:
        console.print(f"\n[bold]Profiles ({len(outcome.urls)}):[/bold]")
        for url in outcome.urls:
            console.print(f"  {url}")


@app.command()
def version() -> None:
    """Show version."""
    console.print("talent-scout v0.1.0")


if __name__ == "__main__":
    app()
