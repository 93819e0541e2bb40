import logging
from datetime import date
from typing import Callable, List, Optional

from taskday.config import TASK_LIST_LIMIT
from taskday.database import Database
from taskday.formatters import DateFormatter
from taskday.models.entities import Task
from taskday.services.errors import TaskNotFoundError, TaskValidationError
from taskday.services.normalizer import normalize_task_date
from taskday.services import recurrence

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task operations.

    Every write goes through normalize_task_date(), so a stored task never
    carries a past date. "Today" comes from the injected clock.

    All data operations are async.
    """

    def __init__(self, db: Database, clock: Optional[Callable[[], date]] = None) -> None:
        self._db = db
        self._clock = clock or date.today

    def today(self) -> date:
        return self._clock()

    def next_date(self, now: str, anchor: str, repeat: str) -> str:
        """Compute the next occurrence for raw 'now', 'date' and 'repeat' strings.

        Raises:
            InvalidDateFormat: If now or anchor is not a valid YYYYMMDD date.
            InvalidRule: If repeat is empty, malformed or unsupported.
        """
        today = DateFormatter.parse(now)
        return recurrence.next_date(today, anchor, repeat)

    def _build_task(
        self,
        title: str,
        task_date: str,
        comment: str,
        repeat: str,
        task_id: Optional[int] = None,
    ) -> Task:
        if not title:
            raise TaskValidationError("Title is required")
        normalized = normalize_task_date(self.today(), task_date, repeat)
        return Task(
            id=task_id,
            title=title,
            date=normalized,
            comment=comment,
            repeat=repeat,
        )

    async def add_task(
        self,
        title: str,
        task_date: str = "",
        comment: str = "",
        repeat: str = "",
    ) -> Task:
        """Add a new task.

        Args:
            title: Task title, required.
            task_date: Date as 'YYYYMMDD'; empty means today.
            comment: Free-form comment.
            repeat: Recurrence rule text; empty means no recurrence.

        Returns the persisted Task with its database ID set.
        """
        task = self._build_task(title, task_date, comment, repeat)
        task.id = await self._db.save_task(task.to_dict())
        return task

    async def update_task(
        self,
        task_id: Optional[int],
        title: str,
        task_date: str = "",
        comment: str = "",
        repeat: str = "",
    ) -> Task:
        """Replace an existing task, applying the same date policy as add_task."""
        if not task_id:
            raise TaskValidationError("ID is required")
        task = self._build_task(title, task_date, comment, repeat, task_id=task_id)
        if await self._db.save_task(task.to_dict()) is None:
            raise TaskNotFoundError(f"Task {task_id} not found")
        return task

    async def get_task(self, task_id: int) -> Task:
        task_dict = await self._db.load_task(task_id)
        if task_dict is None:
            raise TaskNotFoundError(f"Task {task_id} not found")
        return Task.from_dict(task_dict)

    async def list_tasks(self, limit: int = TASK_LIST_LIMIT) -> List[Task]:
        """List upcoming tasks ordered by date (at most ``limit``)."""
        return [Task.from_dict(d) for d in await self._db.load_tasks(limit=limit)]
