"""Shared fixtures for taskday tests."""
from datetime import date
from pathlib import Path

import pytest
import pytest_asyncio

from taskday.api import TaskdayAPI
from taskday.core import ServiceContainer, bootstrap, shutdown

TODAY = date(2024, 3, 1)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest_asyncio.fixture
async def services(tmp_path: Path) -> ServiceContainer:
    """Provide a fresh ServiceContainer backed by a temporary database.

    The clock is pinned to TODAY so date normalization is deterministic.
    """
    svc = await bootstrap(db_path=tmp_path / "scheduler.db", clock=lambda: TODAY)
    yield svc
    await shutdown(svc)


@pytest.fixture
def api(services: ServiceContainer) -> TaskdayAPI:
    return TaskdayAPI(services)
