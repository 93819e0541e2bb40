"""Programmatic API facade for taskday.

Wraps TaskService with the string-level contract the HTTP layer speaks
(dates as 'YYYYMMDD', ids as integers) and logs every write.

Usage:
    from taskday.core import bootstrap
    from taskday.api import TaskdayAPI

    svc = await bootstrap(db_path=Path(":memory:"))
    api = TaskdayAPI(svc)

    task = await api.add_task("Water plants", date="20240101", repeat="d 7")
    api.next_date("20240301", "20240101", "y")
"""
import logging
from typing import List, Optional

from taskday.core import ServiceContainer
from taskday.formatters import DateFormatter
from taskday.models.entities import Task

logger = logging.getLogger(__name__)


class TaskdayAPI:
    """High-level facade over taskday services.

    Each method performs a complete operation: date normalization and DB
    persistence. Callers don't need to coordinate services.
    """

    def __init__(self, services: ServiceContainer) -> None:
        self._svc = services

    def next_date(self, now: str, date: str, repeat: str) -> str:
        """Next occurrence after ``now`` for the anchor ``date`` and rule ``repeat``."""
        return self._svc.task.next_date(now, date, repeat)

    async def add_task(
        self,
        title: str,
        date: str = "",
        comment: str = "",
        repeat: str = "",
    ) -> Task:
        """Create a task, normalizing its date first.

        Returns the persisted Task with its database ID set.
        """
        task = await self._svc.task.add_task(title, task_date=date, comment=comment, repeat=repeat)
        logger.info(f"Created task {task.id} for {DateFormatter.format(task.date)}")
        return task

    async def update_task(
        self,
        task_id: Optional[int],
        title: str,
        date: str = "",
        comment: str = "",
        repeat: str = "",
    ) -> Task:
        task = await self._svc.task.update_task(
            task_id, title, task_date=date, comment=comment, repeat=repeat
        )
        logger.info(f"Updated task {task.id} for {DateFormatter.format(task.date)}")
        return task

    async def get_task(self, task_id: int) -> Task:
        return await self._svc.task.get_task(task_id)

    async def list_tasks(self) -> List[Task]:
        return await self._svc.task.list_tasks()
