import calendar
import logging
import re
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import FrozenSet, Optional

from taskday.config import (
    MAX_DAY_INTERVAL,
    MAX_WEEKDAY,
    MIN_DAY_INTERVAL,
    MIN_WEEKDAY,
    RecurrenceKind,
)
from taskday.formatters import DateFormatter
from taskday.services.errors import (
    DateOutOfRange,
    EmptyRule,
    InvalidRepeatCount,
    UnsupportedRule,
)

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"\d+", re.ASCII)


@dataclass(frozen=True)
class RecurrenceRule:
    """Parsed recurrence rule.

    ``interval`` is only meaningful for DAYS, ``weekdays`` only for WEEKDAYS.
    """
    kind: RecurrenceKind
    interval: int = 1
    weekdays: FrozenSet[int] = field(default_factory=frozenset)


def _parse_number(token: str, low: int, high: int, rule: str) -> int:
    if not _NUMBER_RE.fullmatch(token):
        raise InvalidRepeatCount(f"invalid repeat rule: {rule}")
    value = int(token)
    if value < low or value > high:
        raise InvalidRepeatCount(f"invalid repeat rule: {rule}")
    return value


def parse_rule(text: str) -> RecurrenceRule:
    """Parse rule text ('y', 'd <N>', 'w <d1,d2,...>') into a RecurrenceRule.

    Raises:
        EmptyRule: If text is empty.
        InvalidRepeatCount: If the day count or weekday list is invalid.
        UnsupportedRule: If text matches none of the known forms.
    """
    if not text:
        raise EmptyRule("repeat rule is empty")

    if text == "y":
        return RecurrenceRule(RecurrenceKind.YEARLY)

    if text.startswith("d "):
        days = _parse_number(text[2:], MIN_DAY_INTERVAL, MAX_DAY_INTERVAL, text)
        return RecurrenceRule(RecurrenceKind.DAYS, interval=days)

    if text.startswith("w "):
        weekdays = frozenset(
            _parse_number(token, MIN_WEEKDAY, MAX_WEEKDAY, text)
            for token in text[2:].split(",")
        )
        return RecurrenceRule(RecurrenceKind.WEEKDAYS, weekdays=weekdays)

    raise UnsupportedRule(f"unsupported repeat rule: {text}")


def _add_years(base: date, years: int) -> date:
    """Add years to a date, rolling Feb 29 over to Mar 1 in non-leap years.
    """
    new_year = base.year + years
    if base.month == 2 and base.day == 29 and not calendar.isleap(new_year):
        return date(new_year, 3, 1)
    return date(new_year, base.month, base.day)


def _step_days(rule: RecurrenceRule) -> Optional[int]:
    """Fixed step in days, or None when the step is calendar based."""
    if rule.kind == RecurrenceKind.DAYS:
        return rule.interval
    if rule.kind == RecurrenceKind.WEEKDAYS:
        # TODO: land on the listed weekdays instead of stepping one day at a time
        return 1
    return None


def calculate_next_date(today: date, anchor: date, rule: RecurrenceRule) -> date:
    """Return the first date strictly after ``today`` reachable from ``anchor``.

    The anchor is always advanced at least one step, so a future anchor
    yields anchor + step rather than the anchor itself.

    Raises:
        DateOutOfRange: If the result would fall after 9999-12-31.
    """
    try:
        step = _step_days(rule)
        if step is not None:
            # Closed form of "add step until the result is after today"
            steps = 1
            if anchor + timedelta(days=step) <= today:
                steps = (today - anchor).days // step + 1
            return anchor + timedelta(days=steps * step)

        next_date = _add_years(anchor, 1)
        while next_date <= today:
            next_date = _add_years(next_date, 1)
        return next_date
    except (OverflowError, ValueError) as e:
        raise DateOutOfRange(f"next date out of range for anchor {anchor}") from e


def next_date(today: date, anchor: str, repeat: str) -> str:
    """Compute the next occurrence from string inputs.

    The anchor is parsed before the rule, so a bad anchor is reported
    even when the rule is also invalid.

    Raises:
        InvalidDateFormat: If anchor is not a valid YYYYMMDD date.
        InvalidRule: If repeat is empty, malformed or unsupported.
        DateOutOfRange: If the result would fall after 9999-12-31.
    """
    anchor_date = DateFormatter.parse(anchor)
    rule = parse_rule(repeat)
    result = calculate_next_date(today, anchor_date, rule)
    logger.debug(f"Next date for {anchor} with rule {repeat!r} after {today}: {result}")
    return DateFormatter.format(result)
