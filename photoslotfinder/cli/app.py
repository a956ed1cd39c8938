"""
Main CLI application using Typer.
"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..adapters.roster_sources import ConfigRosterSource, SampleRosterSource
from ..config import (
    AppConfig,
    duration_from_environment,
    get_default_config_path,
    parse_duration,
)
from ..domain.exceptions import PhotoslotError
from ..services.photoslot_finder import PhotoslotFinderService

app = typer.Typer(
    name="photoslotfinder",
    help="Find photographers with a free slot for a new booking",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")
]
SampleOption = Annotated[
    bool,
    typer.Option("--sample", help="Use the bundled sample roster instead of a config file.")
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
):
    """
    Find photographers with a free slot for a new booking.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_service(config_file: Optional[Path], sample: bool) -> Tuple[PhotoslotFinderService, AppConfig]:
    """
    Create the finder service for either the sample roster or a config file.

    Returns (service, config); for the sample roster the config holds defaults.
    """
    if sample:
        return PhotoslotFinderService(roster_source=SampleRosterSource()), AppConfig()

    config_path = config_file or get_default_config_path()
    config = AppConfig.load_from_yaml(config_path)
    return PhotoslotFinderService(roster_source=ConfigRosterSource(config)), config


def _resolve_duration(option: Optional[str], config: AppConfig) -> int:
    """
    Pick the requested duration: CLI option, then environment, then config default.
    """
    if option is not None:
        return parse_duration(option)

    from_env = duration_from_environment()
    if from_env is not None:
        return from_env

    return config.defaults.duration_minutes


@app.command()
def find(
    duration: Annotated[Optional[str], typer.Option("--duration", "-d", help="Booking duration in minutes")] = None,
    config_file: ConfigOption = None,
    sample: SampleOption = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print results as JSON.")] = False,
):
    """
    Find the first free slot per photographer for a new booking.

    Examples:

        # Sample roster, 90 minute booking
        photoslotfinder find --sample

        # Own roster with a custom duration
        photoslotfinder find --config roster.yaml --duration 60

        # Duration from the environment
        PHOTOSLOT_DURATION_MINUTES=120 photoslotfinder find --sample --json
    """
    try:
        service, config = _build_service(config_file, sample)
        duration_minutes = _resolve_duration(duration, config)
        slots = service.find_slots(duration_in_minutes=duration_minutes)

    except FileNotFoundError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    except (PhotoslotError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([slot.to_dict() for slot in slots], indent=2))
        return

    console.print()
    if not slots:
        console.print(
            f"[yellow]⚠ No photographer has {duration_minutes} free minutes.[/yellow]\n"
            "Try a shorter duration."
        )
        console.print()
        return

    table = Table(
        title=f"Available slots ({duration_minutes} min, {config.timezone})",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("ID", style="dim")
    table.add_column("Photographer", style="bold yellow")
    table.add_column("Starts")
    table.add_column("Ends")

    for slot in slots:
        starts = slot.slot.start.in_timezone(config.timezone)
        ends = slot.slot.end.in_timezone(config.timezone)
        table.add_row(
            slot.photographer.id,
            slot.photographer.name,
            starts.format("DD.MM.YYYY HH:mm"),
            ends.format("DD.MM.YYYY HH:mm"),
        )

    console.print(table)
    console.print()


@app.command()
def free(
    config_file: ConfigOption = None,
    sample: SampleOption = False,
):
    """
    Show the free intervals derived for every photographer.
    """
    try:
        service, config = _build_service(config_file, sample)
        roster = service.roster()
        derived = service.free_intervals()
    except (FileNotFoundError, PhotoslotError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(
        title=f"Free intervals ({config.timezone})",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Photographer", style="bold yellow")
    table.add_column("Starts")
    table.add_column("Ends")
    table.add_column("Minutes", justify="right")

    for entry in derived:
        photographer = roster.find_photographer(entry.photographer_id)
        name = photographer.name if photographer else entry.photographer_id
        for interval in entry.free_intervals:
            table.add_row(
                name,
                interval.start.in_timezone(config.timezone).format("DD.MM.YYYY HH:mm"),
                interval.end.in_timezone(config.timezone).format("DD.MM.YYYY HH:mm"),
                str(interval.duration_minutes),
            )

    console.print()
    console.print(table)
    console.print()


@app.command()
def list_photographers(
    config_file: ConfigOption = None,
    sample: SampleOption = False,
):
    """
    List all photographers in the roster.
    """
    try:
        service, _ = _build_service(config_file, sample)
        roster = service.roster()
    except (FileNotFoundError, PhotoslotError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if not len(roster):
        console.print("[yellow]No photographers defined in the roster.[/yellow]")
        return

    table = Table(
        title="Photographers",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold yellow")
    table.add_column("Availabilities", justify="right")
    table.add_column("Bookings", justify="right")

    for schedule in roster:
        table.add_row(
            schedule.photographer.id,
            schedule.photographer.name,
            str(len(schedule.availabilities)),
            str(len(schedule.bookings)),
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]photoslotfinder[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
