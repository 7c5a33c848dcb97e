"""
Main CLI application using Typer.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, List, Optional

import pendulum
import typer
from pendulum import Date
from rich.console import Console
from rich.table import Table

from ..adapters.memory_repository import InMemorySegmentRepository
from ..config import AppConfig, load_config
from ..domain.backdate import validate_backdate_limit
from ..domain.exceptions import OverlapError, TimeEngineError
from ..domain.hour_types import calculate_hour_types
from ..domain.models import TimeSegment, to_day
from ..domain.splitter import split_cross_midnight
from ..schemas import TimeEntryRequest, validate_clock_time
from ..services.time_entry import TimeEntryService

app = typer.Typer(
    name="timeengine",
    help="Split, check and classify time entries into day/evening/night minutes",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")]
TodayOption = Annotated[Optional[str], typer.Option("--today", help="Treat this date (YYYY-MM-DD) as today")]


def _parse_date(value: str) -> Date:
    """Parse a YYYY-MM-DD argument, exiting with an error message if invalid."""
    try:
        return pendulum.from_format(value, "YYYY-MM-DD").date()
    except ValueError as e:
        console.print(f"[red]Fehler beim Parsen des Datums '{value}': {e}[/red]")
        raise typer.Exit(1)


def _parse_time(value: str) -> str:
    try:
        return validate_clock_time(value)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _segments_table(segments: List[TimeSegment], title: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Datum", style="bold yellow")
    table.add_column("Von")
    table.add_column("Bis")
    table.add_column("Dauer", justify="right")
    table.add_column("Tag", justify="right")
    table.add_column("Abend", justify="right")
    table.add_column("Nacht", justify="right")

    for segment in segments:
        table.add_row(
            to_day(segment.date).to_date_string(),
            segment.start_time,
            segment.end_time,
            str(segment.duration_minutes),
            str(segment.day_minutes),
            str(segment.evening_minutes),
            str(segment.night_minutes),
        )

    return table


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Time engine command line.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )


@app.command()
def process(
    date: Annotated[str, typer.Argument(help="Entry date (YYYY-MM-DD)")],
    start: Annotated[str, typer.Argument(help="Start time (HH:mm)")],
    end: Annotated[str, typer.Argument(help="End time (HH:mm or 24:00)")],
    employee: Annotated[str, typer.Option("--employee", "-e", help="Employee id used for limits and overlap checks")] = "default",
    existing: Annotated[Optional[Path], typer.Option("--existing", help="JSON file with already stored entries")] = None,
    skip_backdate: Annotated[bool, typer.Option("--skip-backdate", help="Skip the backdate window check (admin override).")] = False,
    config_file: ConfigOption = None,
    today: TodayOption = None,
):
    """
    Validate an entry, split it at midnight, check overlaps and classify it.

    Examples:

        timeengine process 2024-01-15 09:00 17:00

        timeengine process 2024-01-15 21:00 02:00 --employee anna --existing entries.json
    """
    try:
        config = load_config(config_file)
        rules = config.rules()
        request = TimeEntryRequest(date=_parse_date(date), start_time=start, end_time=end)
        current_date = _parse_date(today) if today else None

        repository = InMemorySegmentRepository()
        if existing:
            loaded = repository.load_json(existing, rules)
            console.print(f"[dim]{loaded} gespeicherte Einträge geladen[/dim]")

        service = TimeEntryService(
            repository=repository,
            rules=rules,
            backdate_limit_days=config.backdate_limit_for(employee),
            approval_type=config.approval_type,
        )

        segments = asyncio.run(
            service.create_entry(
                employee_id=employee,
                request=request,
                skip_backdate_validation=skip_backdate,
                current_date=current_date,
            )
        )

    except OverlapError as e:
        console.print(f"[bold red]Fehler:[/bold red] {e}")
        for conflict in e.conflicts:
            console.print(f"  ✗ {conflict}")
        raise typer.Exit(1)

    except (TimeEngineError, ValueError, FileNotFoundError) as e:
        console.print(f"[bold red]Fehler:[/bold red] {e}")
        raise typer.Exit(1)

    summary = TimeEntryService.summarize(segments)

    console.print()
    console.print(_segments_table(segments, title=f"Segmente für {employee}"))
    console.print(
        f"\n[bold green]✓ {summary.segment_count} Segment(e), {summary.duration_minutes} Minuten[/bold green] "
        f"(Tag={summary.hour_types.day_minutes}, Abend={summary.hour_types.evening_minutes}, "
        f"Nacht={summary.hour_types.night_minutes})\n"
    )


@app.command()
def split(
    date: Annotated[str, typer.Argument(help="Entry date (YYYY-MM-DD)")],
    start: Annotated[str, typer.Argument(help="Start time (HH:mm)")],
    end: Annotated[str, typer.Argument(help="End time (HH:mm or 24:00)")],
):
    """
    Show how an entry is split at midnight.
    """
    ranges = split_cross_midnight(_parse_date(date), _parse_time(start), _parse_time(end))

    for time_range in ranges:
        console.print(f"  {time_range}")


@app.command()
def classify(
    start: Annotated[str, typer.Argument(help="Start time (HH:mm)")],
    end: Annotated[str, typer.Argument(help="End time (HH:mm or 24:00)")],
    config_file: ConfigOption = None,
):
    """
    Show day/evening/night minutes for a single-day segment.
    """
    try:
        config = load_config(config_file)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[bold red]Fehler:[/bold red] {e}")
        raise typer.Exit(1)

    totals = calculate_hour_types(_parse_time(start), _parse_time(end), config.rules())

    console.print(f"Day={totals.day_minutes} Evening={totals.evening_minutes} Night={totals.night_minutes}")


@app.command()
def check_backdate(
    date: Annotated[str, typer.Argument(help="Entry date (YYYY-MM-DD)")],
    limit: Annotated[Optional[int], typer.Option("--limit", "-l", help="Allowed look-back in days")] = None,
    employee: Annotated[Optional[str], typer.Option("--employee", "-e", help="Use this employee's configured limit")] = None,
    config_file: ConfigOption = None,
    today: TodayOption = None,
):
    """
    Check whether an entry date is inside the backdate window.
    """
    if limit is None:
        try:
            config = load_config(config_file)
        except (ValueError, FileNotFoundError) as e:
            console.print(f"[bold red]Fehler:[/bold red] {e}")
            raise typer.Exit(1)
        limit = config.backdate_limit_for(employee)

    current_date = _parse_date(today) if today else None
    result = validate_backdate_limit(_parse_date(date), limit, current_date)

    if not result.valid:
        console.print(f"[bold red]✗[/bold red] {result.message}")
        raise typer.Exit(1)

    console.print(f"[green]✓ Datum liegt im erlaubten Zeitraum ({limit} Tage)[/green]")


@app.command()
def rules(
    config_file: ConfigOption = None,
):
    """
    List the configured working-hour rules.
    """
    try:
        config: AppConfig = load_config(config_file)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[bold red]Fehler:[/bold red] {e}")
        raise typer.Exit(1)

    table = Table(
        title="Arbeitszeitregeln",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Name", style="bold yellow")
    table.add_column("Von")
    table.add_column("Bis")
    table.add_column("Faktor", justify="right")

    for rule in config.working_hour_rules:
        table.add_row(rule.name, rule.start_time, rule.end_time, f"{rule.multiplier:g}")

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]timeengine[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
