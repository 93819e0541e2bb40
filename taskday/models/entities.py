from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from taskday.formatters import DateFormatter


@dataclass
class Task:
    """Scheduled task with an optional recurrence rule."""
    title: str
    date: date
    comment: str = ""
    repeat: str = ""
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for database storage."""
        return {
            "id": self.id,
            "date": DateFormatter.format(self.date),
            "title": self.title,
            "comment": self.comment,
            "repeat": self.repeat,
        }

    def to_json(self) -> Dict[str, str]:
        """Convert to the string-only mapping returned by the HTTP API."""
        return {
            "id": str(self.id) if self.id is not None else "",
            "date": DateFormatter.format(self.date),
            "title": self.title,
            "comment": self.comment,
            "repeat": self.repeat,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Task":
        """Create Task from a database row dictionary."""
        raw_date = d["date"]
        return cls(
            id=d.get("id"),
            title=d["title"],
            date=raw_date if isinstance(raw_date, date) else DateFormatter.parse(raw_date),
            comment=d.get("comment") or "",
            repeat=d.get("repeat") or "",
        )
