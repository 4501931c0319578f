"""CLI to generate a phased day-by-day learning schedule for a topic."""
import argparse
import logging
import sys
from pathlib import Path
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from dotenv import load_dotenv

from study_schedule import config
from study_schedule.errors import ScheduleInputError
from study_schedule.models.schedule import StudySchedule
from study_schedule.tools.input_validation import validate_schedule_request
from study_schedule.tools.plan_export import (
    EXPORT_FORMATS,
    build_study_schedule,
    default_export_path,
    export_schedule,
    save_export,
)


console = Console()

FOCUS_AREA_STYLES = {
    "Foundation": "green",
    "Core Concepts": "cyan",
    "Advanced Topics": "magenta",
    "Practice & Review": "yellow",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create a phased study plan for any topic"
    )
    parser.add_argument(
        "topic",
        help="What do you want to learn?"
    )
    parser.add_argument(
        "days",
        help="How many days do you have? (1-365)"
    )
    parser.add_argument(
        "--format",
        choices=EXPORT_FORMATS,
        default=None,
        help="Print the schedule in this export format instead of a table"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Write the export to SCHEDULE_OUTPUT_DIR"
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the export to this path (implies --save)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (very verbose)"
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.debug:
        log_level = logging.DEBUG
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif args.verbose:
        log_level = logging.INFO
        log_format = "%(asctime)s - %(levelname)s - %(message)s"
    else:
        log_level = logging.WARNING
        log_format = "%(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    logging.getLogger(__name__).info(f"Logging level set to: {logging.getLevelName(log_level)}")


def render_schedule(schedule: StudySchedule) -> None:
    """Print the schedule and its phase summary as rich tables."""
    console.print(f"\n[bold]Your {schedule.total_days}-Day Learning Plan[/bold]")
    console.print(f"Topic: [bold cyan]{escape(schedule.topic)}[/bold cyan]\n")

    table = Table(title="Schedule", show_lines=True)
    table.add_column("Day", style="bold", justify="right")
    table.add_column("Focus Area")
    table.add_column("Title")
    table.add_column("Tasks")

    for day_plan in schedule.days:
        style = FOCUS_AREA_STYLES.get(day_plan.focus_area, "white")
        table.add_row(
            str(day_plan.day),
            f"[{style}]{day_plan.focus_area}[/{style}]",
            escape(day_plan.title),
            escape("\n".join(f"✓ {task}" for task in day_plan.tasks)),
        )
    console.print(table)

    summary = Table(title="Phase Summary")
    summary.add_column("Phase", style="cyan")
    summary.add_column("Days", style="magenta", justify="right")
    for phase_name, count in schedule.phase_breakdown().items():
        summary.add_row(phase_name, str(count))
    console.print(summary)

    if len(schedule.days) < schedule.total_days:
        console.print(
            f"[yellow]⚠ Plan covers {len(schedule.days)} of {schedule.total_days} days[/yellow]"
        )


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    _configure_logging(args)

    try:
        request = validate_schedule_request(args.topic, args.days)
    except ScheduleInputError as e:
        console.print(f"[red]✗ {e.message}[/red]")
        return 1

    save = args.save or args.out is not None
    fmt = args.format or config.SCHEDULE_EXPORT_FORMAT
    if save and fmt not in EXPORT_FORMATS:
        console.print(f"[red]✗ Unknown export format in SCHEDULE_EXPORT_FORMAT: {fmt}[/red]")
        return 1

    schedule = build_study_schedule(request.topic, request.total_days)

    if args.format:
        console.print(export_schedule(schedule, args.format), markup=False, highlight=False, soft_wrap=True)
    else:
        render_schedule(schedule)

    if save:
        if args.out is not None:
            out_path = args.out
        else:
            out_path = default_export_path(schedule, fmt, Path(config.SCHEDULE_OUTPUT_DIR))
        save_export(export_schedule(schedule, fmt), out_path)
        console.print(f"\n✓ [green]Saved:[/green] {out_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
