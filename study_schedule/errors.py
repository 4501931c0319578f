"""Input error types for schedule requests.

Raised only at the input boundary, before the generator is called:
- EMPTY_TOPIC: topic is blank after trimming
- INVALID_DAY_COUNT: day count is missing, not an integer, or outside 1-365
"""


class ScheduleInputError(ValueError):
    """Raised when a schedule request is rejected.

    Attributes:
        code: Error code ("EMPTY_TOPIC" or "INVALID_DAY_COUNT")
        message: Message suitable for showing to the user
    """

    code = "INVALID_INPUT"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EmptyTopicError(ScheduleInputError):
    """Topic is missing or whitespace only."""

    code = "EMPTY_TOPIC"


class InvalidDayCountError(ScheduleInputError):
    """Day count is missing, non-numeric, non-integer or out of range."""

    code = "INVALID_DAY_COUNT"
