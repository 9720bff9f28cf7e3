"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import AppConfig, load_config
from ..domain.exceptions import InputFormatError, ScheduleError
from ..services.schedule_service import ScheduleService
from .parsing import (
    parse_date_hours,
    parse_dates,
    parse_datetime,
    parse_day_hours,
    parse_hours_range,
    parse_minutes,
    parse_weekdays,
)

app = typer.Typer(
    name="shophours",
    help="Compute guaranteed service completion times from shop opening hours",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./shophours.yaml")
]
HoursOption = Annotated[
    Optional[str],
    typer.Option("--hours", help="Opening hours for every day, e.g. 09:00-18:00")
]
DayOption = Annotated[
    Optional[List[str]],
    typer.Option("--day", help="Hours for one weekday, e.g. Monday=09:00-13:00 (repeatable)")
]
DateOption = Annotated[
    Optional[List[str]],
    typer.Option("--date", help="Hours for one date, e.g. 2024-12-24=09:00-13:00 (repeatable)")
]
CloseDaysOption = Annotated[
    Optional[str],
    typer.Option("--close-day", help="Comma-separated weekdays to close, e.g. Sunday,Wednesday")
]
CloseDatesOption = Annotated[
    Optional[str],
    typer.Option("--close-date", help="Comma-separated dates to close, e.g. 2024-12-25,2024-12-26")
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")]


def _configure_logging(config: AppConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_service(
    config: AppConfig,
    *,
    hours: Optional[str],
    days: Optional[List[str]],
    dates: Optional[List[str]],
    close_days: Optional[str],
    close_dates: Optional[str],
) -> ScheduleService:
    """
    Create the service from config, then apply command-line overrides in the
    order: whole week, single days, closed days, single dates, closed dates.
    """
    service = ScheduleService.initialize_schedule(config)
    applied = True

    if hours:
        applied &= service.set_week_hours(parse_hours_range(hours))

    for item in days or []:
        day, day_hours = parse_day_hours(item)
        applied &= service.set_weekday_hours(day, day_hours)

    if close_days:
        applied &= service.close_days(parse_weekdays(close_days))

    for item in dates or []:
        day, day_hours = parse_date_hours(item)
        service.set_date_hours(day, day_hours)

    if close_dates:
        applied &= service.close_dates(parse_dates(close_dates))

    if not applied:
        raise ScheduleError("Days cannot be scheduled.")

    return service


@app.command()
def calculate(
    minutes: Annotated[int, typer.Argument(help="Service duration in minutes")],
    start: Annotated[str, typer.Argument(help="Start date and time (YYYY-MM-DD HH:mm)")],
    config_file: ConfigOption = None,
    hours: HoursOption = None,
    day: DayOption = None,
    date: DateOption = None,
    close_day: CloseDaysOption = None,
    close_date: CloseDatesOption = None,
    verbose: VerboseOption = False,
):
    """
    Calculate when a service is guaranteed to be finished.

    Examples:

        shophours calculate 120 "2024-11-08 09:00"

        shophours calculate 120 "2024-11-08 17:00" --hours 09:00-18:00 --close-day Sunday

        shophours calculate 45 "2024-12-24 12:30" --date 2024-12-24=09:00-13:00
    """
    try:
        config = load_config(config_file)
        _configure_logging(config, verbose)

        duration = parse_minutes(minutes)
        start_at = parse_datetime(start)

        service = _build_service(
            config,
            hours=hours,
            days=day,
            dates=date,
            close_days=close_day,
            close_dates=close_date,
        )

        finish = service.compute_completion(duration, start_at)
        console.print(finish)

    except (FileNotFoundError, InputFormatError, ScheduleError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    except ValueError as e:
        console.print(f"[bold red]Invalid configuration:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def show(
    config_file: ConfigOption = None,
    hours: HoursOption = None,
    day: DayOption = None,
    date: DateOption = None,
    close_day: CloseDaysOption = None,
    close_date: CloseDatesOption = None,
    verbose: VerboseOption = False,
):
    """
    Show the effective weekly schedule and date overrides.
    """
    try:
        config = load_config(config_file)
        _configure_logging(config, verbose)

        service = _build_service(
            config,
            hours=hours,
            days=day,
            dates=date,
            close_days=close_day,
            close_dates=close_date,
        )

    except (FileNotFoundError, InputFormatError, ScheduleError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    except ValueError as e:
        console.print(f"[bold red]Invalid configuration:[/bold red] {e}")
        raise typer.Exit(1)

    table = Table(
        title="Weekly schedule",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Day", style="bold yellow")
    table.add_column("Hours")

    for weekday, work_hours in service.weekly_hours().items():
        table.add_row(weekday.label, str(work_hours))

    console.print()
    console.print(table)

    overrides = service.date_overrides()
    if overrides:
        override_table = Table(
            title="Date overrides",
            show_header=True,
            header_style="bold cyan"
        )
        override_table.add_column("Date", style="bold yellow")
        override_table.add_column("Hours")
        for override_date, work_hours in overrides.items():
            override_table.add_row(override_date.isoformat(), str(work_hours))
        console.print(override_table)

    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]shophours[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
