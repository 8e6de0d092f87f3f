"""Task domain - lifecycle rules, search and aggregation.

All exports are pure (no I/O, no side effects).

Key Types:
    TaskStatus - Task state enumeration
    Task - A tracked task record
    TaskDraft / TaskPatch - Raw create and update inputs
    TaskFilter - Predicate over tasks
    PageRequest / TaskPage - Pagination
    StatusSummary - Per-status counts

Lifecycle Functions:
    validate_patch - Normalize the provided fields of an update
    plan_update - Apply the transition table to validated changes
    completion_stamp - completed_at bookkeeping

Search Functions:
    build_filter - Build a predicate from query inputs
    matches - Evaluate a predicate
    score_match - Keyword relevance (0-3)
    sort_tasks - Order a result set
    suggestion_match - Prefix match for type-ahead
"""

from .models import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    CamelModel,
    Task,
    TaskDraft,
    TaskPatch,
    TaskStatus,
)
from .pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    PageRequest,
    Pagination,
    StatusSummary,
    TaskPage,
    paginate,
    parse_int,
    summarize,
)
from .search import (
    MatchMode,
    MatchType,
    SortOrder,
    Suggestion,
    TaskFilter,
    Visibility,
    build_filter,
    matches,
    normalize_keyword,
    score_match,
    sort_tasks,
    suggestion_match,
)
from .transitions import (
    TRANSITIONS,
    Outcome,
    UpdateMode,
    completion_stamp,
    plan_update,
    resolve_transition,
)
from .validation import (
    normalize_description,
    normalize_title,
    parse_status,
    validate_patch,
)

__all__ = [
    # Models
    "TaskStatus",
    "Task",
    "TaskDraft",
    "TaskPatch",
    "CamelModel",
    "TITLE_MAX_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
    # Validation
    "normalize_title",
    "normalize_description",
    "parse_status",
    "validate_patch",
    # Transitions
    "TRANSITIONS",
    "UpdateMode",
    "Outcome",
    "resolve_transition",
    "plan_update",
    "completion_stamp",
    # Search
    "Visibility",
    "MatchMode",
    "MatchType",
    "SortOrder",
    "TaskFilter",
    "Suggestion",
    "build_filter",
    "normalize_keyword",
    "matches",
    "score_match",
    "sort_tasks",
    "suggestion_match",
    # Pagination
    "DEFAULT_PAGE",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "PageRequest",
    "Pagination",
    "TaskPage",
    "StatusSummary",
    "paginate",
    "parse_int",
    "summarize",
]
