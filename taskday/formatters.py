"""Date formatting utilities for the canonical YYYYMMDD form.

Tasks, rules and the HTTP API all exchange dates as fixed-width eight
digit strings. Use DateFormatter.parse() at the edges and keep ``date``
objects everywhere else.
"""
import re
from datetime import date, datetime

from taskday.config import DATE_FORMAT
from taskday.services.errors import InvalidDateFormat

_DATE_RE = re.compile(r"\d{8}", re.ASCII)


class DateFormatter:
    """Canonical date conversions used throughout the app."""

    @staticmethod
    def parse(text: str) -> date:
        """Parse 'YYYYMMDD' into a date.

        Raises:
            InvalidDateFormat: If text is not eight digits forming a real date.
        """
        if not isinstance(text, str) or not _DATE_RE.fullmatch(text):
            raise InvalidDateFormat(f"invalid date format: {text!r}")
        try:
            return datetime.strptime(text, DATE_FORMAT).date()
        except ValueError as e:
            raise InvalidDateFormat(f"invalid date format: {text!r}") from e

    @staticmethod
    def format(value: date) -> str:
        """Format a date as 'YYYYMMDD'."""
        return f"{value.year:04d}{value.month:02d}{value.day:02d}"
