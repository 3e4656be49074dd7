"""
Task Tracker API Server

FastAPI-based server providing:
- REST API for task CRUD under /tasks and /tasks/{id}
- Plain-text error responses (400 / 404 / 405) for every failure
- Entry point that runs the app under uvicorn
"""

import json
import re
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.task_store import InMemoryTaskStore, TaskStore
from task_tracker.config import ConfigProperties, ServerConfig
from task_tracker.utils.exceptions import (
    TaskTrackerError,
    InvalidTaskIdError,
    MalformedBodyError,
    MethodNotAllowedError,
)
from task_tracker.utils.logger import get_logger

logger = get_logger(__name__)

_ITEM_PREFIX = "/tasks/"
_TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_MIN_TASK_ID = -(2 ** 63)
_MAX_TASK_ID = 2 ** 63 - 1

_ALLOWED_METHODS = {
    "collection": "GET, POST",
    "item": "GET, PUT, DELETE",
}


# ============================================================================
# PYDANTIC MODELS
# ============================================================================

class TaskPayload(BaseModel):
    """Request body for POST and PUT. Every field is optional; id is ignored."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


# ============================================================================
# HELPERS
# ============================================================================

def parse_task_id(raw_id: str) -> int:
    """Parse the path suffix after /tasks/ as a signed 64-bit integer."""
    if not _TASK_ID_PATTERN.fullmatch(raw_id):
        raise InvalidTaskIdError(raw_id)
    task_id = int(raw_id)
    if not _MIN_TASK_ID <= task_id <= _MAX_TASK_ID:
        raise InvalidTaskIdError(raw_id)
    return task_id


def task_id_from_path(request: Request) -> int:
    """
    Parse the task id from the decoded request path.

    Route parameters are matched with ``.*`` and ``$``, which drop a trailing
    newline, so the suffix is taken from the scope path instead.
    """
    _, _, raw_id = request.scope["path"].partition(_ITEM_PREFIX)
    return parse_task_id(raw_id)


async def read_payload(request: Request) -> TaskPayload:
    """
    Decode the request body into a TaskPayload.

    The body is read by hand rather than declared as a route parameter, so the
    task id in the path is checked before the body. A JSON ``null`` body is an
    empty payload.
    """
    body = await request.body()
    try:
        data = json.loads(body)
    except ValueError as e:
        raise MalformedBodyError(str(e))

    if data is None:
        return TaskPayload()
    try:
        return TaskPayload.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        raise MalformedBodyError(errors[0].get("msg") if errors else None)


def _allow_header(path: str) -> str:
    if path == "/tasks":
        return _ALLOWED_METHODS["collection"]
    return _ALLOWED_METHODS["item"]


# ============================================================================
# APP SETUP
# ============================================================================

def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """Build the FastAPI app around *store* (a fresh in-memory store by default)."""
    app = FastAPI(
        title="Task Tracker",
        description="In-memory task tracking service",
        version="1.0.0",
    )
    app.state.task_store = store if store is not None else InMemoryTaskStore()

    # ------------------------------------------------------------------------
    # ERROR HANDLERS
    # ------------------------------------------------------------------------

    @app.exception_handler(TaskTrackerError)
    async def handle_tracker_error(request: Request, exc: TaskTrackerError):
        logger.warning(
            f"{request.method} {request.url.path} -> {exc.http_status} {exc.message}",
            extra=exc.details,
        )
        return PlainTextResponse(exc.message, status_code=exc.http_status)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            error = MethodNotAllowedError(request.method, request.url.path)
            logger.warning(
                f"{request.method} {request.url.path} -> 405 {error.message}",
                extra=error.details,
            )
            return PlainTextResponse(
                error.message,
                status_code=405,
                headers={"Allow": _allow_header(request.url.path)},
            )
        if exc.status_code == 404:
            return PlainTextResponse("404 page not found", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    # ------------------------------------------------------------------------
    # TASK API
    # ------------------------------------------------------------------------

    @app.get("/tasks")
    async def list_tasks():
        tasks = app.state.task_store.list_all()
        return [t.to_dict() for t in tasks]

    @app.post("/tasks", status_code=201)
    async def create_task(request: Request):
        data = await read_payload(request)
        task = app.state.task_store.create(
            title=data.title or "",
            description=data.description or "",
            status=data.status or "",
        )
        logger.info("Task created", extra={"task_id": task.id, "status": task.status})
        return task.to_dict()

    @app.get("/tasks/{raw_id:path}")
    async def get_task(request: Request):
        task = app.state.task_store.get(task_id_from_path(request))
        return task.to_dict()

    @app.put("/tasks/{raw_id:path}")
    async def update_task(request: Request):
        task_id = task_id_from_path(request)
        data = await read_payload(request)
        task = app.state.task_store.update(
            task_id,
            title=data.title,
            description=data.description,
            status=data.status,
        )
        logger.info(
            "Task updated",
            extra={"task_id": task_id, "fields": sorted(data.model_dump(exclude_none=True, exclude={"id"}))},
        )
        return task.to_dict()

    @app.delete("/tasks/{raw_id:path}", status_code=204)
    async def delete_task(request: Request):
        task_id = task_id_from_path(request)
        app.state.task_store.delete(task_id)
        logger.info("Task deleted", extra={"task_id": task_id, "remaining": app.state.task_store.count()})
        return Response(status_code=204)

    return app


app = create_app()


# ============================================================================
# ENTRYPOINT
# ============================================================================

def start_server(config: Optional[ServerConfig] = None):
    """Start the API server. A failure to bind the port ends the process."""
    import uvicorn

    if config is None:
        ConfigProperties.load_env_file()
        config = ServerConfig.from_env()

    logger.info(
        f"Server is running on port {config.port}",
        extra=config.to_dict(),
    )
    if config.reload:
        uvicorn.run("api.server:app", host=config.host, port=config.port,
                    reload=True, log_level=config.log_level.lower())
    else:
        uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    start_server()
