"""HTTP layer for taskday.

Exposes the next-date computation and task create/read/update/list under
/api, and serves the static web front-end from the configured directory.
"""
from __future__ import annotations

import logging
import re
from contextlib import asynccontextmanager
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, field_validator

from taskday import config
from taskday.api import TaskdayAPI
from taskday.core import bootstrap, shutdown
from taskday.database import DatabaseError
from taskday.services.errors import SchedulingError, TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tasks"])


_ID_RE = re.compile(r"\d+", re.ASCII)


class TaskPayload(BaseModel):
    id: Optional[int] = None
    date: str = ""
    title: str = ""
    comment: str = ""
    repeat: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def strict_id(cls, value):
        # Only JSON integers and digit-only strings name a task
        if isinstance(value, (bool, float)):
            raise ValueError("task id must be an integer")
        if isinstance(value, str) and not _ID_RE.fullmatch(value):
            raise ValueError("task id must be an integer")
        return value


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def get_api(request: Request) -> TaskdayAPI:
    return request.app.state.api


@router.get("/nextdate")
def next_date(
    request: Request,
    now: str = Query(""),
    date: str = Query(""),
    repeat: str = Query(""),
):
    try:
        result = get_api(request).next_date(now, date, repeat)
    except SchedulingError as e:
        logger.warning(f"Rejected nextdate request (now={now!r}, date={date!r}, repeat={repeat!r}): {e}")
        return error_response(400, str(e))
    return {"next_date": result}


@router.post("/task/add")
async def add_task(request: Request, payload: TaskPayload):
    try:
        task = await get_api(request).add_task(
            payload.title,
            date=payload.date,
            comment=payload.comment,
            repeat=payload.repeat,
        )
    except (SchedulingError, TaskValidationError) as e:
        logger.warning(f"Rejected task create: {e}")
        return error_response(400, str(e))
    except DatabaseError as e:
        return error_response(500, str(e))
    return {"id": str(task.id)}


@router.get("/tasks")
async def list_tasks(request: Request):
    try:
        tasks = await get_api(request).list_tasks()
    except DatabaseError as e:
        return error_response(500, str(e))
    return {"tasks": [task.to_json() for task in tasks]}


@router.get("/task")
async def get_task(request: Request, id: str = Query("")):
    if not id:
        return error_response(400, "Task id is required")
    if not _ID_RE.fullmatch(id):
        return error_response(400, "Invalid task id")
    task_id = int(id)
    try:
        task = await get_api(request).get_task(task_id)
    except TaskNotFoundError as e:
        return error_response(404, str(e))
    except DatabaseError as e:
        return error_response(500, str(e))
    return task.to_json()


@router.put("/task")
async def update_task(request: Request, payload: TaskPayload):
    try:
        await get_api(request).update_task(
            payload.id,
            payload.title,
            date=payload.date,
            comment=payload.comment,
            repeat=payload.repeat,
        )
    except (SchedulingError, TaskValidationError) as e:
        logger.warning(f"Rejected task update: {e}")
        return error_response(400, str(e))
    except TaskNotFoundError as e:
        return error_response(404, str(e))
    except DatabaseError as e:
        return error_response(500, str(e))
    return {}


def create_app(
    db_path: Optional[Path] = None,
    web_dir: Optional[Path] = None,
    clock: Optional[Callable[[], date]] = None,
) -> FastAPI:
    """Build the FastAPI application.

    The lifespan handler opens the database on startup and closes it on
    shutdown. Static files are mounted at "/" only when web_dir exists.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        services = await bootstrap(db_path=db_path, clock=clock)
        app.state.api = TaskdayAPI(services)
        try:
            yield
        finally:
            await shutdown(services)

    app = FastAPI(title="taskday", lifespan=lifespan)
    app.include_router(router)

    @app.exception_handler(RequestValidationError)
    async def validation_error(_request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected malformed request: {exc.errors()}")
        return error_response(400, "Invalid request body")

    static_dir = web_dir if web_dir is not None else config.WEB_DIR
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="web")
    else:
        logger.warning(f"Web directory {static_dir} not found, static files disabled")
    return app
