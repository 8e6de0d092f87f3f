"""Request/Response schemas for the taskboard API.

Request bodies reuse the domain's raw input models (``TaskDraft``,
``TaskPatch``) so that field validation messages come from the domain.
"""

from pydantic import BaseModel

from taskboard.domain.task import (
    StatusSummary,
    Suggestion,
    Task,
    TaskDraft,
    TaskPage,
    TaskPatch,
)

# Request models
CreateTaskRequest = TaskDraft
UpdateTaskRequest = TaskPatch

# Response models
TaskListResponse = TaskPage
SummaryResponse = StatusSummary


class TrashResponse(BaseModel):
    """Response from moving a task to the trash."""

    message: str
    task: Task


class MessageResponse(BaseModel):
    message: str


class SuggestionsResponse(BaseModel):
    suggestions: list[Suggestion]


class ErrorResponse(BaseModel):
    error: str

