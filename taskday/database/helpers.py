from typing import Any, Dict


class DatabaseError(Exception):
    """Custom exception for database operations."""
    pass


def _deserialize_task_row(row) -> Dict[str, Any]:
    """Convert a raw database row into a task dict.

    NULL comment/repeat columns become empty strings.
    """
    task_dict = dict(row)
    task_dict["comment"] = task_dict.get("comment") or ""
    task_dict["repeat"] = task_dict.get("repeat") or ""
    return task_dict
