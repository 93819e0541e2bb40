class SchedulingError(ValueError):
    """Base class for date and recurrence rule failures."""
    pass


class InvalidDateFormat(SchedulingError):
    """Raised when a date string is not a valid YYYYMMDD calendar date."""
    pass


class DateOutOfRange(SchedulingError):
    """Raised when advancing a date would leave the supported calendar."""
    pass


class InvalidRule(SchedulingError):
    """Base class for recurrence rule failures."""
    pass


class EmptyRule(InvalidRule):
    """Raised when a rule is required but the rule string is empty."""
    pass


class InvalidRepeatCount(InvalidRule):
    """Raised when a day count or weekday list is malformed or out of range.

    Covers ``d <N>`` outside [1, 400] or non-numeric, and ``w <list>``
    with any token outside [1, 7] or non-numeric.
    """
    pass


class UnsupportedRule(InvalidRule):
    """Raised when the rule text matches none of the known forms."""
    pass


class TaskError(Exception):
    """Base class for task operation failures."""
    pass


class TaskValidationError(TaskError):
    """Raised when a task payload is missing a required field."""
    pass


class TaskNotFoundError(TaskError):
    """Raised when a task id does not match any stored task."""
    pass
