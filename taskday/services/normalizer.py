"""Date policy applied to every task write.

A task created or updated with a past date is either reset to today (no
rule) or rolled forward to its next occurrence (rule present). Present and
future dates are stored as given, without consulting the rule.
"""
from datetime import date

from taskday.formatters import DateFormatter
from taskday.services.recurrence import calculate_next_date, parse_rule


def normalize_task_date(today: date, input_date: str, repeat: str) -> date:
    """Return the date a task should be stored with.

    Args:
        today: Reference date for "now".
        input_date: The task's date as 'YYYYMMDD', or empty for today.
        repeat: The task's rule text, or empty for no recurrence.

    Raises:
        InvalidDateFormat: If input_date is non-empty and not a valid date.
        InvalidRule: If the date is in the past and the rule is invalid.
        DateOutOfRange: If rolling forward leaves the supported calendar.
    """
    if not input_date:
        return today

    parsed = DateFormatter.parse(input_date)
    if parsed >= today:
        return parsed

    if not repeat:
        return today
    return calculate_next_date(today, parsed, parse_rule(repeat))
