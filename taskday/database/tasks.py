import sqlite3
import logging
from typing import Any, Dict, List, Optional

from taskday.config import TASK_LIST_LIMIT
from taskday.database.helpers import DatabaseError, _deserialize_task_row

logger = logging.getLogger(__name__)


class TasksMixin:
    """Task CRUD operations mixin for the Database class."""

    async def save_task(self, t: Dict[str, Any]) -> Optional[int]:
        """Insert a task when it has no id, otherwise update it.

        Returns:
            The task id, or None when an update matched no row.
        """
        params = (
            t["date"],
            t["title"],
            t.get("comment", ""),
            t.get("repeat", ""),
        )
        try:
            async with self._get_connection() as conn:
                if t.get("id") is None:
                    cursor = await conn.execute(
                        "INSERT INTO scheduler (date,title,comment,repeat) VALUES (?,?,?,?)",
                        params
                    )
                    await conn.commit()
                    return cursor.lastrowid
                cursor = await conn.execute(
                    "UPDATE scheduler SET date=?,title=?,comment=?,repeat=? WHERE id=?",
                    params + (t["id"],)
                )
                await conn.commit()
                if cursor.rowcount == 0:
                    return None
                return t["id"]
        except (sqlite3.Error, KeyError, TypeError) as e:
            logger.error(f"Error saving task: {e}")
            raise DatabaseError(f"Failed to save task: {e}") from e

    async def load_task(self, task_id: int) -> Optional[Dict[str, Any]]:
        try:
            async with self._get_connection() as conn:
                async with conn.execute(
                    "SELECT id,date,title,comment,repeat FROM scheduler WHERE id=?",
                    (task_id,)
                ) as cursor:
                    row = await cursor.fetchone()
                    return _deserialize_task_row(row) if row else None
        except sqlite3.Error as e:
            logger.error(f"Error loading task {task_id}: {e}")
            raise DatabaseError(f"Failed to load task: {e}") from e

    async def load_tasks(self, limit: int = TASK_LIST_LIMIT) -> List[Dict[str, Any]]:
        """Load tasks ordered by date, earliest first."""
        try:
            async with self._get_connection() as conn:
                async with conn.execute(
                    "SELECT id,date,title,comment,repeat FROM scheduler "
                    "ORDER BY date ASC LIMIT ?",
                    (limit,)
                ) as cursor:
                    return [_deserialize_task_row(row) async for row in cursor]
        except sqlite3.Error as e:
            logger.error(f"Error loading tasks: {e}")
            raise DatabaseError(f"Failed to load tasks: {e}") from e
