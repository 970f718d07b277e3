"""
Tracker state and state transitions.

``TrackerState`` is the whole store as one immutable value. Every mutation is
a pure function from one state to the next; the store swaps the result in
with a single commit, so multi-record changes (issue insert + counter bump,
cascading deletes, bulk updates) are never observed half-applied.
"""

from __future__ import annotations

from datetime import datetime
from typing import Collection, Dict, Iterable, List, Optional, Tuple, TypeVar

from pydantic import Field

from .activity import (
    Activity,
    ActivityPayload,
    AssigneeChangedPayload,
    CreatedPayload,
    DueDateChangedPayload,
    LabelsChangedPayload,
    PriorityChangedPayload,
    StatusChangedPayload,
)
from .cycle import Cycle
from .goal import Goal
from .identifiers import next_issue_identifier
from .issue import Issue, IssueCreate, IssueUpdate
from .milestone import Milestone
from .primitives import Member, TimeTracking, TrackerModel, utc_now
from .project import Project
from .relation import Relation
from .saved_view import SavedView
from .subtask import SubTask

M = TypeVar("M", bound=TrackerModel)


class TrackerState(TrackerModel):
    """Every collection the engine owns.

    Keyed collections preserve insertion order; list collections are in
    append order. This is also the snapshot shape exchanged with
    persistence collaborators.
    """

    projects: Dict[str, Project] = Field(default_factory=dict)
    issues: Dict[str, Issue] = Field(default_factory=dict)
    cycles: Dict[str, Cycle] = Field(default_factory=dict)
    members: List[Member] = Field(default_factory=list)
    goals: List[Goal] = Field(default_factory=list)
    milestones: List[Milestone] = Field(default_factory=list)
    activities: List[Activity] = Field(default_factory=list)
    relations: List[Relation] = Field(default_factory=list)
    sub_tasks: List[SubTask] = Field(default_factory=list)
    time_tracking: Dict[str, TimeTracking] = Field(default_factory=dict)
    saved_views: List[SavedView] = Field(default_factory=list)

    def replace(self, **changes) -> "TrackerState":
        return self.model_copy(update=changes)


def apply_patch(record: M, patch: TrackerModel, **overrides) -> M:
    """Return ``record`` with the fields explicitly set on ``patch`` applied.

    The merged record is re-validated, so a patch cannot store a value the
    record's own schema would reject (for example ``status=None``).
    """
    data = record.model_dump()
    data.update(patch.model_dump(exclude_unset=True))
    data.update(overrides)
    return type(record).model_validate(data)


def append_activities(state: TrackerState, entries: Iterable[Activity]) -> TrackerState:
    entries = list(entries)
    if not entries:
        return state
    return state.replace(activities=[*state.activities, *entries])


# =============================================================================
# Issues
# =============================================================================


def insert_issue(
    state: TrackerState, data: IssueCreate, user_id: Optional[str] = None
) -> Tuple[TrackerState, Issue]:
    """Create an issue, advance its project's counter and log ``created``.

    The project must exist; callers check that before calling.
    """
    project = state.projects[data.project_id]
    now = utc_now()
    issue = Issue(
        identifier=next_issue_identifier(project),
        created_at=now,
        updated_at=now,
        **data.model_dump(),
    )
    project = project.model_copy(
        update={"next_issue_number": project.next_issue_number + 1, "updated_at": now}
    )
    created = Activity.from_payload(issue.id, CreatedPayload(), user_id=user_id)
    state = state.replace(
        issues={**state.issues, issue.id: issue},
        projects={**state.projects, project.id: project},
        activities=[*state.activities, created],
    )
    return state, issue


def diff_issue(before: Issue, after: Issue) -> List[ActivityPayload]:
    """Describe tracked field changes between two versions of an issue.

    Unchanged fields produce nothing. Labels are compared as sets.
    """
    changes: List[ActivityPayload] = []
    if after.status != before.status:
        changes.append(StatusChangedPayload(old=before.status, new=after.status))
    if after.priority != before.priority:
        changes.append(PriorityChangedPayload(old=before.priority, new=after.priority))
    if after.assignee_id != before.assignee_id:
        changes.append(
            AssigneeChangedPayload(old=before.assignee_id, new=after.assignee_id)
        )
    if sorted(after.label_ids) != sorted(before.label_ids):
        changes.append(
            LabelsChangedPayload(old=list(before.label_ids), new=list(after.label_ids))
        )
    if after.due_date != before.due_date:
        changes.append(DueDateChangedPayload(old=before.due_date, new=after.due_date))
    return changes


def update_issue(
    state: TrackerState,
    issue_id: str,
    patch: IssueUpdate,
    track: bool = False,
    user_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Tuple[TrackerState, List[Activity]]:
    """Apply ``patch`` to one issue, optionally logging tracked changes.

    Unknown issue IDs leave the state untouched.
    """
    before = state.issues.get(issue_id)
    if before is None:
        return state, []

    after = apply_patch(before, patch, updated_at=now or utc_now())
    entries: List[Activity] = []
    if track:
        entries = [
            Activity.from_payload(issue_id, payload, user_id=user_id)
            for payload in diff_issue(before, after)
        ]
    state = state.replace(issues={**state.issues, issue_id: after})
    return append_activities(state, entries), entries


def remove_issues(state: TrackerState, issue_ids: Collection[str]) -> TrackerState:
    """Delete issues and everything that points at them.

    Relations (either end), sub-tasks and time tracking are removed.
    Goal/milestone links and child ``parent_issue_id`` pointers are cleared.
    Activities stay as history.
    """
    doomed = set(issue_ids)
    if not doomed:
        return state
    now = utc_now()

    issues: Dict[str, Issue] = {}
    for issue_id, issue in state.issues.items():
        if issue_id in doomed:
            continue
        if issue.parent_issue_id in doomed:
            issue = issue.model_copy(update={"parent_issue_id": None, "updated_at": now})
        issues[issue_id] = issue

    goals = [
        goal.model_copy(
            update={
                "issue_ids": [i for i in goal.issue_ids if i not in doomed],
                "updated_at": now,
            }
        )
        if doomed.intersection(goal.issue_ids)
        else goal
        for goal in state.goals
    ]
    milestones = [
        milestone.model_copy(
            update={"issue_ids": [i for i in milestone.issue_ids if i not in doomed]}
        )
        if doomed.intersection(milestone.issue_ids)
        else milestone
        for milestone in state.milestones
    ]

    return state.replace(
        issues=issues,
        relations=[
            r
            for r in state.relations
            if r.issue_id not in doomed and r.target_issue_id not in doomed
        ],
        sub_tasks=[st for st in state.sub_tasks if st.issue_id not in doomed],
        time_tracking={
            k: v for k, v in state.time_tracking.items() if k not in doomed
        },
        goals=goals,
        milestones=milestones,
    )


# =============================================================================
# Cycles and projects
# =============================================================================


def remove_cycles(state: TrackerState, cycle_ids: Collection[str]) -> TrackerState:
    """Delete cycles and unplan the issues that referenced them."""
    doomed = set(cycle_ids)
    if not doomed:
        return state
    now = utc_now()
    issues = {
        issue_id: (
            issue.model_copy(update={"cycle_id": None, "updated_at": now})
            if issue.cycle_id in doomed
            else issue
        )
        for issue_id, issue in state.issues.items()
    }
    cycles = {k: v for k, v in state.cycles.items() if k not in doomed}
    return state.replace(issues=issues, cycles=cycles)


def remove_project(state: TrackerState, project_id: str) -> TrackerState:
    """Delete a project with its issues, cycles, goals, milestones and views."""
    state = remove_issues(
        state,
        [i.id for i in state.issues.values() if i.project_id == project_id],
    )
    state = remove_cycles(
        state,
        [c.id for c in state.cycles.values() if c.project_id == project_id],
    )
    projects = {k: v for k, v in state.projects.items() if k != project_id}
    return state.replace(
        projects=projects,
        goals=[g for g in state.goals if g.project_id != project_id],
        milestones=[m for m in state.milestones if m.project_id != project_id],
        saved_views=[v for v in state.saved_views if v.project_id != project_id],
    )
