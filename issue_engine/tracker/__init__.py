"""
Issue tracking domain engine.

An in-memory relational store of project-management records plus a query
layer over it:

- Project: owner of issues and issuer of their identifiers ("SO-1")
- Issue: unit of work with status, priority, assignee, labels and dates
- Cycle / Goal / Milestone: planning containers
- Activity: append-only audit trail of issue changes
- Relation / SubTask / TimeTracking: per-issue ledgers
- SavedView: named filter presets

Write path:
    service -> pure state transition -> TrackerStore.commit
"""

# Enums
from .enums import (
    BOARD_STATUSES,
    PRIORITY_ORDER,
    STATUS_ORDER,
    ActivityAction,
    CycleStatus,
    GoalStatus,
    GroupBy,
    IssuePriority,
    IssueStatus,
    RelationType,
    SortDirection,
    SortField,
    ViewType,
)

# Primitives
from .primitives import (
    IssueFilters,
    IssueSort,
    Label,
    Member,
    TimeTracking,
    TrackerModel,
    generate_id,
    utc_now,
)

# Records
from .activity import Activity, ActivityCreate, ActivityPayload
from .cycle import Cycle, CycleCreate, CycleUpdate
from .goal import Goal, GoalCreate, GoalUpdate
from .issue import Issue, IssueCreate, IssueUpdate
from .milestone import Milestone, MilestoneCreate, MilestoneUpdate
from .project import Project, ProjectCreate, ProjectUpdate
from .relation import Relation, RelationCreate
from .saved_view import SavedView, SavedViewCreate
from .subtask import SubTask

# Engine
from .errors import NotFoundError, TrackerError
from .identifiers import format_issue_identifier, new_id, next_issue_identifier
from .query import (
    IssueQueryResult,
    filter_issues,
    group_issues,
    query_issues,
    sort_issues,
)
from .services import (
    ActivityService,
    BulkService,
    CycleService,
    GoalService,
    IssueService,
    IssueTracker,
    MilestoneService,
    ProjectService,
    RelationService,
    SavedViewService,
    SubTaskService,
    TimeTrackingService,
)
from .snapshot import autosave, load_snapshot, save_snapshot
from .state import TrackerState
from .store import SelectionSet, TrackerStore

__all__ = [
    # Enums
    "ActivityAction",
    "BOARD_STATUSES",
    "CycleStatus",
    "GoalStatus",
    "GroupBy",
    "IssuePriority",
    "IssueStatus",
    "PRIORITY_ORDER",
    "RelationType",
    "STATUS_ORDER",
    "SortDirection",
    "SortField",
    "ViewType",
    # Primitives
    "IssueFilters",
    "IssueSort",
    "Label",
    "Member",
    "TimeTracking",
    "TrackerModel",
    "generate_id",
    "utc_now",
    # Records
    "Activity",
    "ActivityCreate",
    "ActivityPayload",
    "Cycle",
    "CycleCreate",
    "CycleUpdate",
    "Goal",
    "GoalCreate",
    "GoalUpdate",
    "Issue",
    "IssueCreate",
    "IssueUpdate",
    "Milestone",
    "MilestoneCreate",
    "MilestoneUpdate",
    "Project",
    "ProjectCreate",
    "ProjectUpdate",
    "Relation",
    "RelationCreate",
    "SavedView",
    "SavedViewCreate",
    "SubTask",
    # Engine
    "ActivityService",
    "BulkService",
    "CycleService",
    "GoalService",
    "IssueQueryResult",
    "IssueService",
    "IssueTracker",
    "MilestoneService",
    "NotFoundError",
    "ProjectService",
    "RelationService",
    "SavedViewService",
    "SelectionSet",
    "SubTaskService",
    "TimeTrackingService",
    "TrackerError",
    "TrackerState",
    "TrackerStore",
    "autosave",
    "filter_issues",
    "format_issue_identifier",
    "group_issues",
    "load_snapshot",
    "new_id",
    "next_issue_identifier",
    "query_issues",
    "save_snapshot",
    "sort_issues",
]
