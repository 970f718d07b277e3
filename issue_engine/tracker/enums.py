"""
Tracker Canonical Enums.

These enums define the allowed values for fields across tracker records.
Callers MUST map UI or import-specific values into these canonical sets.
"""

from enum import Enum


class IssueStatus(str, Enum):
    """Workflow status of an Issue, in board order."""

    BACKLOG = "backlog"
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    IN_REVIEW = "in_review"
    DONE = "done"
    CANCELLED = "cancelled"


class IssuePriority(str, Enum):
    """Priority levels."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class CycleStatus(str, Enum):
    """Cycle status (caller-set, never auto-transitioned)."""

    UPCOMING = "upcoming"
    ACTIVE = "active"
    COMPLETED = "completed"


class GoalStatus(str, Enum):
    """Goal status."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    ACHIEVED = "achieved"
    AT_RISK = "at_risk"
    CANCELLED = "cancelled"


class ViewType(str, Enum):
    """How a project's issues are presented by default."""

    BOARD = "board"
    LIST = "list"


class RelationType(str, Enum):
    """Directed relation kinds between two issues."""

    BLOCKS = "blocks"
    BLOCKED_BY = "blocked_by"
    RELATED = "related"
    DUPLICATES = "duplicates"


class ActivityAction(str, Enum):
    """Kinds of entries in the activity trail."""

    CREATED = "created"
    STATUS_CHANGED = "status_changed"
    PRIORITY_CHANGED = "priority_changed"
    ASSIGNEE_CHANGED = "assignee_changed"
    LABELS_CHANGED = "labels_changed"
    DUE_DATE_CHANGED = "due_date_changed"
    SUBTASK_ADDED = "subtask_added"
    SUBTASK_TOGGLED = "subtask_toggled"
    SUBTASK_REMOVED = "subtask_removed"
    RELATION_ADDED = "relation_added"
    RELATION_REMOVED = "relation_removed"
    TIME_LOGGED = "time_logged"
    ESTIMATE_CHANGED = "estimate_changed"


class SortField(str, Enum):
    """Fields an issue list can be sorted by."""

    CREATED = "created"
    UPDATED = "updated"
    PRIORITY = "priority"
    STATUS = "status"
    TITLE = "title"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class GroupBy(str, Enum):
    """Bucketing options for an issue list."""

    NONE = "none"
    STATUS = "status"
    PRIORITY = "priority"
    ASSIGNEE = "assignee"


# Highest first
PRIORITY_ORDER = [
    IssuePriority.URGENT,
    IssuePriority.HIGH,
    IssuePriority.MEDIUM,
    IssuePriority.LOW,
    IssuePriority.NONE,
]

STATUS_ORDER = [
    IssueStatus.BACKLOG,
    IssueStatus.TODO,
    IssueStatus.IN_PROGRESS,
    IssueStatus.IN_REVIEW,
    IssueStatus.DONE,
    IssueStatus.CANCELLED,
]

# Board columns exclude cancelled
BOARD_STATUSES = STATUS_ORDER[:-1]
