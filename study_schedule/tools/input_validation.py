"""Validate raw topic/day-count input before a schedule is generated."""
import logging
import re
from typing import NamedTuple

from study_schedule.config import MAX_DAYS, MIN_DAYS
from study_schedule.errors import EmptyTopicError, InvalidDayCountError

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill in all fields"
INVALID_DAYS_MESSAGE = f"Please enter a valid number of days ({MIN_DAYS}-{MAX_DAYS})"

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


class ScheduleRequest(NamedTuple):
    """Validated generator input."""
    topic: str
    total_days: int


def validate_schedule_request(topic: str, days: str | int) -> ScheduleRequest:
    """
    Check the two form inputs and return them in generator-ready form.

    The topic is only trimmed for the blank check; it is returned as typed.

    Raises:
        EmptyTopicError: topic is blank after trimming
        InvalidDayCountError: days is blank, not an integer, or outside 1-365
    """
    topic = topic or ""
    if not topic.strip():
        logger.info("Rejected request: empty topic")
        raise EmptyTopicError(MISSING_FIELDS_MESSAGE)

    total_days = parse_day_count(days)
    logger.debug(f"Accepted request: topic={topic!r}, total_days={total_days}")
    return ScheduleRequest(topic=topic, total_days=total_days)


def parse_day_count(days: str | int) -> int:
    """Parse a day count given as text or int. Raises InvalidDayCountError."""
    # bool is an int subclass but never a valid count
    if isinstance(days, bool):
        raise InvalidDayCountError(INVALID_DAYS_MESSAGE)

    if isinstance(days, int):
        total_days = days
    elif isinstance(days, str):
        text = days.strip()
        if not text:
            logger.info("Rejected request: empty day count")
            raise InvalidDayCountError(MISSING_FIELDS_MESSAGE)
        if not _INTEGER_RE.match(text):
            logger.info(f"Rejected request: day count {days!r} is not an integer")
            raise InvalidDayCountError(INVALID_DAYS_MESSAGE)
        total_days = int(text)
    else:
        raise InvalidDayCountError(INVALID_DAYS_MESSAGE)

    if not MIN_DAYS <= total_days <= MAX_DAYS:
        logger.info(f"Rejected request: day count {total_days} out of range")
        raise InvalidDayCountError(INVALID_DAYS_MESSAGE)
    return total_days
