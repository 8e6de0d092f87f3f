"""FastAPI routes for taskboard."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard import __version__
from taskboard.application import TaskService
from taskboard.config import Settings, load_settings
from taskboard.domain.shared import Err, Result, TaskError, TaskErrorKind, is_err
from taskboard.domain.task import Task
from taskboard.infrastructure import build_store
from taskboard.interfaces.api.schemas import (
    CreateTaskRequest,
    ErrorResponse,
    MessageResponse,
    SuggestionsResponse,
    SummaryResponse,
    TaskListResponse,
    TrashResponse,
    UpdateTaskRequest,
)

logger = logging.getLogger(__name__)

_STATUS_CODES = {
    TaskErrorKind.VALIDATION: 400,
    TaskErrorKind.INVALID_TRANSITION: 400,
    TaskErrorKind.NOT_FOUND: 404,
    TaskErrorKind.STORE: 500,
}


def status_code_for(error: TaskError) -> int:
    """HTTP status for a task error. Malformed ids are a client error."""
    if error.code == "invalid_id":
        return 400
    return _STATUS_CODES[error.kind]


def unwrap(result: Result, failure_message: str | None = None):
    """Return the Ok value or raise the matching HTTPException.

    Args:
        result: Service result.
        failure_message: Message shown instead of store internals on a 500.
    """
    if is_err(result):
        error: TaskError = result.error
        code = status_code_for(error)
        detail = error.message
        if code == 500:
            logger.error(f"{failure_message or 'Store failure'}: {error.message}")
            detail = failure_message or detail
        raise HTTPException(status_code=code, detail=detail)
    return result.value


def get_service(request: Request) -> TaskService:
    return request.app.state.task_service


# =============================================================================
# Router
# =============================================================================


router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
    responses={code: {"model": ErrorResponse} for code in (400, 404, 500)},
)


@router.post("", response_model=Task, status_code=201)
def create_task(req: CreateTaskRequest, service: TaskService = Depends(get_service)):
    """Create a new task. New tasks always start pending."""
    return unwrap(
        service.create_task(req.title, req.description, req.status),
        "Failed to create task",
    )


@router.get("", response_model=TaskListResponse)
def list_tasks(
    keyword: Optional[str] = None,
    status: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    include_deleted: str = Query("false", alias="includeDeleted"),
    service: TaskService = Depends(get_service),
):
    """List tasks with keyword search, status filter and pagination."""
    return unwrap(
        service.list_tasks(keyword, status, page, limit, include_deleted == "true"),
        "Failed to fetch tasks",
    )


@router.get("/trash/list", response_model=TaskListResponse)
def list_trash(
    keyword: Optional[str] = None,
    status: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    service: TaskService = Depends(get_service),
):
    """List soft-deleted tasks."""
    return unwrap(service.list_trash(keyword, status, page, limit), "Failed to fetch trash")


@router.get("/search/suggestions", response_model=SuggestionsResponse)
def search_suggestions(
    q: Optional[str] = None,
    service: TaskService = Depends(get_service),
):
    """Type-ahead suggestions by title or description prefix."""
    suggestions = unwrap(service.suggest(q), "Failed to fetch search suggestions")
    return SuggestionsResponse(suggestions=suggestions)


@router.get("/stats/summary", response_model=SummaryResponse)
def stats_summary(service: TaskService = Depends(get_service)):
    """Count non-deleted tasks per status."""
    return unwrap(service.summary(), "Failed to fetch task statistics")


@router.get("/{task_id}", response_model=Task)
def get_task(task_id: str, service: TaskService = Depends(get_service)):
    """Get a task by ID."""
    return unwrap(service.get_task(task_id), "Failed to fetch task")


@router.put("/{task_id}", response_model=Task)
def update_task(
    task_id: str,
    req: Optional[UpdateTaskRequest] = None,
    service: TaskService = Depends(get_service),
):
    """Update a task. Completed tasks can only be reverted to in-progress."""
    return unwrap(
        service.update_task_full(task_id, req or UpdateTaskRequest()),
        "Failed to update task",
    )


@router.patch("/{task_id}", response_model=Task)
def patch_task(
    task_id: str,
    req: Optional[UpdateTaskRequest] = None,
    service: TaskService = Depends(get_service),
):
    """Partially update a task."""
    return unwrap(
        service.update_task_partial(task_id, req or UpdateTaskRequest()),
        "Failed to update task",
    )


@router.delete("/{task_id}", response_model=TrashResponse)
def delete_task(task_id: str, service: TaskService = Depends(get_service)):
    """Move a task to the trash."""
    task = unwrap(service.soft_delete_task(task_id), "Failed to delete task")
    return TrashResponse(message="Task moved to trash", task=task)


@router.patch("/{task_id}/restore", response_model=Task)
def restore_task(task_id: str, service: TaskService = Depends(get_service)):
    """Restore a task from the trash."""
    return unwrap(service.restore_task(task_id), "Failed to restore task")


@router.delete("/{task_id}/hard", response_model=MessageResponse)
def hard_delete_task(task_id: str, service: TaskService = Depends(get_service)):
    """Permanently delete a task."""
    unwrap(service.hard_delete_task(task_id), "Failed to permanently delete task")
    return MessageResponse(message="Task permanently deleted")


# =============================================================================
# Error Handlers
# =============================================================================


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unmatched paths and unmatched methods on a known path are both unknown routes
    if (exc.status_code == 404 and exc.detail == "Not Found") or exc.status_code == 405:
        return JSONResponse(status_code=404, content={"error": "Route not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Something went wrong!"})


# =============================================================================
# App Factory
# =============================================================================


def create_app(settings: Settings | None = None, service: TaskService | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Runtime settings; loaded from the environment if omitted.
        service: Pre-built service. When omitted, the store selected by
            ``settings`` is opened at startup and closed at shutdown.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the task store on startup, close it on shutdown."""
        owned: TaskService | None = None
        if getattr(app.state, "task_service", None) is None:
            store = build_store(settings)
            if isinstance(store, Err):
                raise RuntimeError(f"Could not open task store: {store.error.message}")
            owned = TaskService(
                store.value,
                default_page_limit=settings.default_page_limit,
                max_page_limit=settings.max_page_limit,
                suggestion_limit=settings.suggestion_limit,
            )
            app.state.task_service = owned
        yield
        if owned is not None:
            owned.close()
            app.state.task_service = None

    app = FastAPI(
        title="Taskboard",
        description="Task tracking with trash, search and statistics",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.task_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled_error)

    app.include_router(router)

    @app.get("/api/health")
    def health():
        return {"message": "Task Manager API is running!"}

    return app
