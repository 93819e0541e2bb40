"""Headless bootstrap for taskday services.

Initializes the service layer without the HTTP server, suitable for
CLI tools, scripts, and testing.

Usage:
    from taskday.core import bootstrap, shutdown

    svc = await bootstrap(db_path=Path("my.db"))
    task = await svc.task.add_task("Test", repeat="d 7")
    tasks = await svc.task.list_tasks()
    await shutdown(svc)
"""
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from taskday import config
from taskday.database import Database
from taskday.services.logic import TaskService


@dataclass
class ServiceContainer:
    """Container holding all initialized services for headless use."""
    db: Database
    task: TaskService


async def bootstrap(
    db_path: Optional[Path] = None,
    clock: Optional[Callable[[], date]] = None,
) -> ServiceContainer:
    """Initialize the service layer.

    Args:
        db_path: Custom database path. Uses config.DB_PATH if None.
        clock: Callable returning "today". Defaults to date.today.

    Returns:
        ServiceContainer with all services ready to use.
    """
    db = Database(db_path if db_path is not None else config.DB_PATH)
    await db.init_db()
    return ServiceContainer(db=db, task=TaskService(db, clock=clock))


async def shutdown(services: ServiceContainer) -> None:
    """Clean up resources (close database connection)."""
    await services.db.close()
