"""Database package - async SQLite with mixin-based composition.

``from taskday.database import Database, DatabaseError`` is the public API.
Each ``Database`` owns one connection; create it through ``core.bootstrap``.
"""
from taskday.database.helpers import DatabaseError
from taskday.database.core import DatabaseCore
from taskday.database.tasks import TasksMixin


class Database(DatabaseCore, TasksMixin):
    """Composed database class combining all mixins."""
    pass


__all__ = ["Database", "DatabaseError"]
