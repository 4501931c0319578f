"""Split a day budget into learning phases and fill each day from templates.

The generator is a pure function of (topic, total_days): no I/O, no
randomness and no validation. Callers are expected to pass a non-empty
topic and a day count in [1, 365] (see input_validation).

Allocation walks the phases in order. Each phase asks for
max(1, round_half_up(total_days * percentage)) days, clipped to the days
that remain. Nothing is padded afterwards, so for some small budgets the
schedule is shorter than total_days or a late phase gets no days:

    >>> len(generate_schedule("Chess", 9))
    8
"""
import math
from dataclasses import dataclass
from typing import Callable, NamedTuple

from study_schedule.models.schedule import (
    ADVANCED_TOPICS,
    CORE_CONCEPTS,
    FOUNDATION,
    PHASES,
    PRACTICE_AND_REVIEW,
    DayPlan,
    Phase,
)


@dataclass(frozen=True)
class DayContext:
    """Where a day sits inside its phase."""
    topic: str
    day_in_phase: int  # 1-based, display only
    is_first_day: bool
    is_last_day: bool


ContentSelector = Callable[[DayContext], tuple[str, list[str]]]


def _foundation_content(ctx: DayContext) -> tuple[str, list[str]]:
    if ctx.is_first_day:
        return f"Introduction to {ctx.topic}", [
            f"Research and understand what {ctx.topic} is",
            "Watch introductory videos or read overview articles",
            "Identify key terminology and concepts",
            "Set up learning environment/tools if needed",
        ]
    return f"{ctx.topic} Fundamentals - Part {ctx.day_in_phase}", [
        "Review basic concepts and terminology",
        "Study fundamental principles",
        "Take notes on key definitions",
        "Complete beginner exercises",
    ]


def _core_content(ctx: DayContext) -> tuple[str, list[str]]:
    return f"Core {ctx.topic} Concepts - Day {ctx.day_in_phase}", [
        "Deep dive into main concepts",
        "Work through practical examples",
        "Practice with hands-on exercises",
        "Review and summarize learnings",
    ]


def _advanced_content(ctx: DayContext) -> tuple[str, list[str]]:
    return f"Advanced {ctx.topic} - Day {ctx.day_in_phase}", [
        "Study advanced techniques and methods",
        "Explore real-world applications",
        "Work on complex problems",
        "Connect concepts to practical use cases",
    ]


def _practice_content(ctx: DayContext) -> tuple[str, list[str]]:
    if ctx.is_last_day:
        return f"{ctx.topic} Final Review & Assessment", [
            "Complete comprehensive review of all topics",
            "Take final assessment or quiz",
            "Create summary cheat sheet",
            "Plan next steps for continued learning",
        ]
    return f"{ctx.topic} Practice & Application - Day {ctx.day_in_phase}", [
        "Work on practical projects",
        "Apply learned concepts",
        "Review challenging areas",
        "Build confidence through repetition",
    ]


@dataclass(frozen=True)
class PhaseDescriptor:
    """A phase together with the templates used for its days."""
    phase: Phase
    select_content: ContentSelector


# Same order as models.schedule.PHASES
PHASE_DESCRIPTORS: tuple[PhaseDescriptor, ...] = (
    PhaseDescriptor(FOUNDATION, _foundation_content),
    PhaseDescriptor(CORE_CONCEPTS, _core_content),
    PhaseDescriptor(ADVANCED_TOPICS, _advanced_content),
    PhaseDescriptor(PRACTICE_AND_REVIEW, _practice_content),
)


class PhaseAllocation(NamedTuple):
    """Inclusive day range given to a phase. Empty when start_day > end_day."""
    phase: Phase
    start_day: int
    end_day: int

    @property
    def day_count(self) -> int:
        return max(0, self.end_day - self.start_day + 1)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, 3.5 -> 4)."""
    return math.floor(value + 0.5)


def allocate_phase_days(total_days: int) -> list[PhaseAllocation]:
    """
    Assign a contiguous day range to every phase, in phase order.

    Returns one PhaseAllocation per phase. A phase that starts after
    total_days gets an empty range (start_day > end_day).
    """
    allocations = []
    current_day = 1

    for phase in PHASES:
        phase_days = max(1, round_half_up(total_days * phase.percentage))
        end_day = min(current_day + phase_days - 1, total_days)
        allocations.append(PhaseAllocation(phase, current_day, end_day))
        current_day = end_day + 1

    return allocations


def select_day_content(
    phase_index: int,
    topic: str,
    day_in_phase: int,
    is_first_day: bool,
    is_last_day: bool,
) -> tuple[str, list[str]]:
    """Return (title, tasks) for one day of the phase at phase_index."""
    ctx = DayContext(
        topic=topic,
        day_in_phase=day_in_phase,
        is_first_day=is_first_day,
        is_last_day=is_last_day,
    )
    return PHASE_DESCRIPTORS[phase_index].select_content(ctx)


def generate_schedule(topic: str, total_days: int) -> list[DayPlan]:
    """
    Build the day-by-day plan for `topic` over `total_days` days.

    Returns DayPlans sorted by day, each day in [1, total_days] at most once.
    May return fewer than total_days entries when rounding runs out of days.
    """
    schedule = []

    for phase_index, allocation in enumerate(allocate_phase_days(total_days)):
        start_day, end_day = allocation.start_day, allocation.end_day
        for day in range(start_day, end_day + 1):
            title, tasks = select_day_content(
                phase_index,
                topic,
                day_in_phase=day - start_day + 1,
                is_first_day=day == start_day,
                is_last_day=day == end_day,
            )
            schedule.append(DayPlan(
                day=day,
                title=title,
                tasks=tasks,
                focus_area=allocation.phase.name,
            ))

    return schedule
