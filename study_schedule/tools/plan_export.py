"""Build schedule envelopes and export them as markdown, CSV or JSON."""
import csv
import io
import logging
from datetime import datetime, timezone
from pathlib import Path

from study_schedule.models.schedule import StudySchedule, TASKS_PER_DAY
from study_schedule.tools.schedule_generator import generate_schedule

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("markdown", "csv", "json")

FILE_EXTENSIONS = {
    "markdown": ".md",
    "csv": ".csv",
    "json": ".json",
}


def build_study_schedule(topic: str, total_days: int) -> StudySchedule:
    """Generate the day plans for a validated request and wrap them."""
    days = generate_schedule(topic, total_days)
    logger.info(f"Generated {len(days)} day(s) for {topic!r} ({total_days} requested)")
    return StudySchedule(
        topic=topic,
        total_days=total_days,
        days=days,
        generated_at=datetime.now(timezone.utc).isoformat(),
    )


def export_to_markdown(schedule: StudySchedule) -> str:
    """Render the schedule as a markdown document, one section per day."""
    lines = [
        f"# Your {schedule.total_days}-Day Learning Plan",
        "",
        f"Topic: **{schedule.topic}**",
        "",
    ]
    for day_plan in schedule.days:
        lines.append(f"## Day {day_plan.day}: {day_plan.title}")
        lines.append("")
        lines.append(f"*{day_plan.focus_area}*")
        lines.append("")
        for task in day_plan.tasks:
            lines.append(f"- {task}")
        lines.append("")
    return "\n".join(lines)


def export_to_csv(schedule: StudySchedule) -> str:
    """Render the schedule as CSV with one row per day."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(
        ["day", "focus_area", "title"]
        + [f"task_{i}" for i in range(1, TASKS_PER_DAY + 1)]
    )
    for day_plan in schedule.days:
        writer.writerow([day_plan.day, day_plan.focus_area, day_plan.title, *day_plan.tasks])
    return buffer.getvalue()


def export_to_json(schedule: StudySchedule) -> str:
    """Render the schedule as indented JSON."""
    return schedule.model_dump_json(indent=2)


def export_schedule(schedule: StudySchedule, fmt: str) -> str:
    """Render the schedule in one of EXPORT_FORMATS."""
    if fmt == "markdown":
        return export_to_markdown(schedule)
    if fmt == "csv":
        return export_to_csv(schedule)
    if fmt == "json":
        return export_to_json(schedule)
    raise ValueError(f"Unknown export format: {fmt!r} (expected one of {', '.join(EXPORT_FORMATS)})")


def default_export_path(schedule: StudySchedule, fmt: str, output_dir: Path) -> Path:
    """Path like output_dir/machine_learning_30_days.md"""
    slug = "_".join(schedule.topic.lower().split())
    slug = "".join(c for c in slug if c.isalnum() or c == "_") or "schedule"
    return output_dir / f"{slug}_{schedule.total_days}_days{FILE_EXTENSIONS[fmt]}"


def save_export(content: str, out_path: Path) -> None:
    """Write export text atomically (write temp then replace)."""
    out_path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = out_path.with_suffix(out_path.suffix + ".tmp")
    try:
        temp_path.write_text(content, encoding="utf-8")
        temp_path.replace(out_path)
    finally:
        # Already gone after a successful replace
        temp_path.unlink(missing_ok=True)
    logger.info(f"Saved schedule to {out_path}")
