"""Study schedule models: phases and day plans."""
from pydantic import BaseModel, ConfigDict, Field, field_validator


TASKS_PER_DAY = 4


class Phase(BaseModel):
    """A named, proportionally sized block of the schedule."""
    model_config = ConfigDict(frozen=True)

    name: str
    percentage: float  # share of total days, before rounding


# Order matters: phases are allocated and emitted in this sequence
FOUNDATION = Phase(name="Foundation", percentage=0.25)
CORE_CONCEPTS = Phase(name="Core Concepts", percentage=0.35)
ADVANCED_TOPICS = Phase(name="Advanced Topics", percentage=0.25)
PRACTICE_AND_REVIEW = Phase(name="Practice & Review", percentage=0.15)

PHASES: tuple[Phase, ...] = (FOUNDATION, CORE_CONCEPTS, ADVANCED_TOPICS, PRACTICE_AND_REVIEW)


class DayPlan(BaseModel):
    """Title, tasks and focus area for a single day."""
    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1)  # 1-based
    title: str
    tasks: list[str]
    focus_area: str  # name of the containing phase

    @field_validator('tasks')
    @classmethod
    def validate_task_count(cls, v: list[str]) -> list[str]:
        """Every day carries exactly four tasks."""
        if len(v) != TASKS_PER_DAY:
            raise ValueError(f'tasks must contain exactly {TASKS_PER_DAY} entries')
        return v


class StudySchedule(BaseModel):
    """Generated schedule for one topic, as handed to renderers and exporters."""
    topic: str
    total_days: int
    days: list[DayPlan] = Field(default_factory=list)
    generated_at: str  # ISO timestamp

    def phase_breakdown(self) -> dict[str, int]:
        """Days per phase in phase order, including phases that got no days."""
        counts = {phase.name: 0 for phase in PHASES}
        for day_plan in self.days:
            counts[day_plan.focus_area] = counts.get(day_plan.focus_area, 0) + 1
        return counts
