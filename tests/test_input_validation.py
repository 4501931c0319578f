"""Tests for study_schedule.tools.input_validation."""
import pytest

from study_schedule.errors import EmptyTopicError, InvalidDayCountError, ScheduleInputError
from study_schedule.tools.input_validation import (
    INVALID_DAYS_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    validate_schedule_request,
)
from study_schedule.tools.schedule_generator import generate_schedule


def test_valid_request_keeps_topic_as_typed() -> None:
    request = validate_schedule_request("  Machine Learning ", " 30 ")
    assert request.topic == "  Machine Learning "
    assert request.total_days == 30


def test_untrimmed_topic_reaches_generator() -> None:
    schedule = generate_schedule(*validate_schedule_request("  Python ", "10"))
    assert schedule[0].title == "Introduction to   Python "


def test_accepts_int_days() -> None:
    assert validate_schedule_request("Python", 365).total_days == 365


@pytest.mark.parametrize("topic", ["", "   ", "\t\n"])
def test_blank_topic_rejected(topic: str) -> None:
    with pytest.raises(EmptyTopicError) as exc_info:
        validate_schedule_request(topic, "10")
    assert exc_info.value.code == "EMPTY_TOPIC"
    assert exc_info.value.message == MISSING_FIELDS_MESSAGE


def test_blank_days_rejected() -> None:
    with pytest.raises(InvalidDayCountError) as exc_info:
        validate_schedule_request("Python", "  ")
    assert exc_info.value.message == MISSING_FIELDS_MESSAGE


@pytest.mark.parametrize("days", ["abc", "3.5", "12abc", "0", "366", "-4", 0, 366, 2.0, True])
def test_invalid_days_rejected(days) -> None:
    with pytest.raises(InvalidDayCountError) as exc_info:
        validate_schedule_request("Python", days)
    assert exc_info.value.code == "INVALID_DAY_COUNT"
    assert exc_info.value.message == INVALID_DAYS_MESSAGE


def test_errors_share_base_class() -> None:
    assert issubclass(EmptyTopicError, ScheduleInputError)
    assert issubclass(InvalidDayCountError, ValueError)
