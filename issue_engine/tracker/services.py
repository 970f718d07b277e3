"""
Tracker Service Layer.

Each service class handles the operations for one record type against a
shared ``TrackerStore``. Every state-changing method computes the next state
with the pure transitions in ``state`` and commits it once, so an operation
and its cascade or activity entries land together.

Stale IDs on update/delete/toggle are no-ops: they return ``None``/``False``
and only leave a debug log line. Creating an issue for an unknown project is
the one hard failure (``NotFoundError``).
"""

import math
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import structlog

from .activity import (
    Activity,
    ActivityCreate,
    EstimateChangedPayload,
    RelationAddedPayload,
    RelationRemovedPayload,
    SubTaskAddedPayload,
    SubTaskRemovedPayload,
    SubTaskToggledPayload,
    TimeLoggedPayload,
)
from .cycle import Cycle, CycleCreate, CycleUpdate
from .enums import RelationType, ViewType
from .errors import NotFoundError
from .goal import Goal, GoalCreate, GoalUpdate
from .issue import Issue, IssueCreate, IssueUpdate
from .milestone import Milestone, MilestoneCreate, MilestoneUpdate
from .primitives import IssueFilters, TimeTracking, TrackerModel, utc_now
from .project import Project, ProjectCreate, ProjectUpdate
from .relation import Relation, RelationCreate
from .saved_view import SavedView, SavedViewCreate
from .state import (
    append_activities,
    apply_patch,
    insert_issue,
    remove_cycles,
    remove_issues,
    remove_project,
    update_issue,
)
from .store import TrackerStore
from .subtask import SubTask

logger = structlog.get_logger(__name__)

S = TypeVar("S", bound=TrackerModel)


def _coerce(schema: Type[S], data: Union[S, Dict[str, Any]]) -> S:
    """Accept either a schema instance or a plain dict for it."""
    if isinstance(data, schema):
        return data
    return schema.model_validate(data)


def _minutes(value: Any, allow_zero: bool) -> Optional[int]:
    """Return ``value`` as whole minutes, or None if it is not usable."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and (not math.isfinite(value) or not value.is_integer()):
        return None
    minutes = int(value)
    if minutes < 0 or (minutes == 0 and not allow_zero):
        return None
    return minutes


# =============================================================================
# Entity store
# =============================================================================


class ProjectService:
    """Service for managing Projects."""

    def __init__(self, store: TrackerStore):
        self.store = store

    def create(self, data: Union[ProjectCreate, Dict[str, Any]]) -> str:
        """Create a new Project and return its ID."""
        data = _coerce(ProjectCreate, data)
        now = utc_now()
        project = Project(created_at=now, updated_at=now, **data.model_dump())

        state = self.store.state
        self.store.commit(state.replace(projects={**state.projects, project.id: project}))
        logger.info("project_created", project_id=project.id, prefix=project.prefix)
        return project.id

    def get(self, project_id: str) -> Optional[Project]:
        return self.store.state.projects.get(project_id)

    def get_by_prefix(self, prefix: str) -> Optional[Project]:
        """Get a Project by its issue prefix (first match)."""
        for project in self.store.state.projects.values():
            if project.prefix == prefix:
                return project
        return None

    def list(self) -> List[Project]:
        return list(self.store.state.projects.values())

    def update(
        self, project_id: str, patch: Union[ProjectUpdate, Dict[str, Any]]
    ) -> Optional[Project]:
        """Apply a patch. Returns the updated Project, or None if missing."""
        patch = _coerce(ProjectUpdate, patch)
        state = self.store.state
        project = state.projects.get(project_id)
        if project is None:
            logger.debug("update_skipped", entity="Project", entity_id=project_id)
            return None

        project = apply_patch(project, patch, updated_at=utc_now())
        self.store.commit(state.replace(projects={**state.projects, project_id: project}))
        return project

    def set_view(self, project_id: str, view: Union[ViewType, str]) -> Optional[Project]:
        """Switch the project's default presentation (board or list)."""
        state = self.store.state
        project = state.projects.get(project_id)
        if project is None:
            logger.debug("update_skipped", entity="Project", entity_id=project_id)
            return None

        project = project.model_copy(update={"current_view": ViewType(view)})
        self.store.commit(state.replace(projects={**state.projects, project_id: project}))
        return project

    def delete(self, project_id: str) -> bool:
        """Delete a Project and everything it owns."""
        state = self.store.state
        if project_id not in state.projects:
            logger.debug("delete_skipped", entity="Project", entity_id=project_id)
            return False

        issue_count = sum(1 for i in state.issues.values() if i.project_id == project_id)
        self.store.commit(remove_project(state, project_id))
        logger.info("project_deleted", project_id=project_id, issues_removed=issue_count)
        return True


class IssueService:
    """Service for managing Issues.

    ``update`` is the untracked path; ``update_with_activity`` diffs the
    tracked fields and logs one Activity per change.
    """

    def __init__(self, store: TrackerStore):
        self.store = store

    def create(
        self, data: Union[IssueCreate, Dict[str, Any]], user_id: Optional[str] = None
    ) -> Issue:
        """Create an Issue with the project's next identifier.

        Raises:
            NotFoundError: If the project does not exist.
        """
        data = _coerce(IssueCreate, data)
        state = self.store.state
        if data.project_id not in state.projects:
            raise NotFoundError("Project", data.project_id)

        state, issue = insert_issue(state, data, user_id=user_id)
        self.store.commit(state)
        logger.info(
            "issue_created",
            issue_id=issue.id,
            identifier=issue.identifier,
            project_id=issue.project_id,
        )
        return issue

    def get(self, issue_id: str) -> Optional[Issue]:
        return self.store.state.issues.get(issue_id)

    def get_by_identifier(self, identifier: str) -> Optional[Issue]:
        """Get an Issue by its human key, e.g. "SO-1"."""
        for issue in self.store.state.issues.values():
            if issue.identifier == identifier:
                return issue
        return None

    def list(self, project_id: Optional[str] = None) -> List[Issue]:
        """List Issues in creation order, optionally for one project."""
        issues = self.store.state.issues.values()
        if project_id is not None:
            return [i for i in issues if i.project_id == project_id]
        return list(issues)

    def update(
        self, issue_id: str, patch: Union[IssueUpdate, Dict[str, Any]]
    ) -> Optional[Issue]:
        """Apply a patch without writing activity entries."""
        patch = _coerce(IssueUpdate, patch)
        state, _ = update_issue(self.store.state, issue_id, patch)
        if state is self.store.state:
            logger.debug("update_skipped", entity="Issue", entity_id=issue_id)
            return None

        self.store.commit(state)
        return state.issues[issue_id]

    def update_with_activity(
        self,
        issue_id: str,
        patch: Union[IssueUpdate, Dict[str, Any]],
        user_id: Optional[str] = None,
    ) -> Optional[Issue]:
        """Apply a patch and log status/priority/assignee/labels/due-date changes."""
        patch = _coerce(IssueUpdate, patch)
        state, entries = update_issue(
            self.store.state, issue_id, patch, track=True, user_id=user_id
        )
        if state is self.store.state:
            logger.debug("update_skipped", entity="Issue", entity_id=issue_id)
            return None

        self.store.commit(state)
        if entries:
            logger.info(
                "issue_updated",
                issue_id=issue_id,
                changes=[e.action.value for e in entries],
            )
        return state.issues[issue_id]

    def delete(self, issue_id: str) -> bool:
        """Delete an Issue with its relations, sub-tasks and time tracking."""
        state = self.store.state
        if issue_id not in state.issues:
            logger.debug("delete_skipped", entity="Issue", entity_id=issue_id)
            return False

        self.store.commit(remove_issues(state, [issue_id]))
        logger.info("issue_deleted", issue_id=issue_id)
        return True


class CycleService:
    """Service for managing Cycles."""

    def __init__(self, store: TrackerStore):
        self.store = store

    def create(self, data: Union[CycleCreate, Dict[str, Any]]) -> str:
        data = _coerce(CycleCreate, data)
        cycle = Cycle(**data.model_dump())
        state = self.store.state
        self.store.commit(state.replace(cycles={**state.cycles, cycle.id: cycle}))
        logger.info("cycle_created", cycle_id=cycle.id, project_id=cycle.project_id)
        return cycle.id

    def get(self, cycle_id: str) -> Optional[Cycle]:
        return self.store.state.cycles.get(cycle_id)

    def list(self, project_id: Optional[str] = None) -> List[Cycle]:
        cycles = self.store.state.cycles.values()
        if project_id is not None:
            return [c for c in cycles if c.project_id == project_id]
        return list(cycles)

    def update(
        self, cycle_id: str, patch: Union[CycleUpdate, Dict[str, Any]]
    ) -> Optional[Cycle]:
        patch = _coerce(CycleUpdate, patch)
        state = self.store.state
        cycle = state.cycles.get(cycle_id)
        if cycle is None:
            logger.debug("update_skipped", entity="Cycle", entity_id=cycle_id)
            return None

        cycle = apply_patch(cycle, patch)
        self.store.commit(state.replace(cycles={**state.cycles, cycle_id: cycle}))
        return cycle

    def delete(self, cycle_id: str) -> bool:
        """Delete a Cycle. Its issues stay, with ``cycle_id`` cleared."""
        state = self.store.state
        if cycle_id not in state.cycles:
            logger.debug("delete_skipped", entity="Cycle", entity_id=cycle_id)
            return False

        self.store.commit(remove_cycles(state, [cycle_id]))
        logger.info("cycle_deleted", cycle_id=cycle_id)
        return True


class GoalService:
    """Service for managing Goals."""

    def __init__(self, store: TrackerStore):
        self.store = store

    def create(self, data: Union[GoalCreate, Dict[str, Any]]) -> str:
        data = _coerce(GoalCreate, data)
        now = utc_now()
        goal = Goal(created_at=now, updated_at=now, **data.model_dump())
        state = self.store.state
        self.store.commit(state.replace(goals=[*state.goals, goal]))
        logger.info("goal_created", goal_id=goal.id, project_id=goal.project_id)
        return goal.id

    def get(self, goal_id: str) -> Optional[Goal]:
        for goal in self.store.state.goals:
            if goal.id == goal_id:
                return goal
        return None

    def list(self, project_id: Optional[str] = None) -> List[Goal]:
        goals = self.store.state.goals
        if project_id is not None:
            return [g for g in goals if g.project_id == project_id]
        return list(goals)

    def _store(self, goal: Goal) -> Goal:
        state = self.store.state
        self.store.commit(
            state.replace(goals=[goal if g.id == goal.id else g for g in state.goals])
        )
        return goal

    def update(
        self, goal_id: str, patch: Union[GoalUpdate, Dict[str, Any]]
    ) -> Optional[Goal]:
        patch = _coerce(GoalUpdate, patch)
        goal = self.get(goal_id)
        if goal is None:
            logger.debug("update_skipped", entity="Goal", entity_id=goal_id)
            return None
        return self._store(apply_patch(goal, patch, updated_at=utc_now()))

    def link_issue(self, goal_id: str, issue_id: str) -> Optional[Goal]:
        """Add ``issue_id`` to the goal. Linking twice keeps one entry."""
        goal = self.get(goal_id)
        if goal is None:
            logger.debug("update_skipped", entity="Goal", entity_id=goal_id)
            return None
        if issue_id in goal.issue_ids:
            return goal
        return self._store(
            goal.model_copy(
                update={"issue_ids": [*goal.issue_ids, issue_id], "updated_at": utc_now()}
            )
        )

    def unlink_issue(self, goal_id: str, issue_id: str) -> Optional[Goal]:
        goal = self.get(goal_id)
        if goal is None:
            logger.debug("update_skipped", entity="Goal", entity_id=goal_id)
            return None
        issue_ids = [i for i in goal.issue_ids if i != issue_id]
        return self._store(
            goal.model_copy(update={"issue_ids": issue_ids, "updated_at": utc_now()})
        )

    def delete(self, goal_id: str) -> bool:
        state = self.store.state
        goals = [g for g in state.goals if g.id != goal_id]
        if len(goals) == len(state.goals):
            logger.debug("delete_skipped", entity="Goal", entity_id=goal_id)
            return False
        self.store.commit(state.replace(goals=goals))
        return True


class MilestoneService:
    """Service for managing Milestones. Milestones carry no ``updated_at``."""

    def __init__(self, store: TrackerStore):
        self.store = store

    def create(self, data: Union[MilestoneCreate, Dict[str, Any]]) -> str:
        data = _coerce(MilestoneCreate, data)
        milestone = Milestone(**data.model_dump())
        state = self.store.state
        self.store.commit(state.replace(milestones=[*state.milestones, milestone]))
        logger.info(
            "milestone_created",
            milestone_id=milestone.id,
            project_id=milestone.project_id,
        )
        return milestone.id

    def get(self, milestone_id: str) -> Optional[Milestone]:
        for milestone in self.store.state.milestones:
            if milestone.id == milestone_id:
                return milestone
        return None

    def list(self, project_id: Optional[str] = None) -> List[Milestone]:
        milestones = self.store.state.milestones
        if project_id is not None:
            return [m for m in milestones if m.project_id == project_id]
        return list(milestones)

    def _store(self, milestone: Milestone) -> Milestone:
        state = self.store.state
        milestones = [
            milestone if m.id == milestone.id else m for m in state.milestones
        ]
        self.store.commit(state.replace(milestones=milestones))
        return milestone

    def update(
        self, milestone_id: str, patch: Union[MilestoneUpdate, Dict[str, Any]]
    ) -> Optional[Milestone]:
        patch = _coerce(MilestoneUpdate, patch)
        milestone = self.get(milestone_id)
        if milestone is None:
            logger.debug("update_skipped", entity="Milestone", entity_id=milestone_id)
            return None
        return self._store(apply_patch(milestone, patch))

    def link_issue(self, milestone_id: str, issue_id: str) -> Optional[Milestone]:
        milestone = self.get(milestone_id)
        if milestone is None:
            logger.debug("update_skipped", entity="Milestone", entity_id=milestone_id)
            return None
        if issue_id in milestone.issue_ids:
            return milestone
        return self._store(
            milestone.model_copy(update={"issue_ids": [*milestone.issue_ids, issue_id]})
        )

    def unlink_issue(self, milestone_id: str, issue_id: str) -> Optional[Milestone]:
        milestone = self.get(milestone_id)
        if milestone is None:
            logger.debug("update_skipped", entity="Milestone", entity_id=milestone_id)
            return None
        issue_ids = [i for i in milestone.issue_ids if i != issue_id]
        return self._store(milestone.model_copy(update={"issue_ids": issue_ids}))

    def delete(self, milestone_id: str) -> bool:
        state = self.store.state
        milestones = [m for m in state.milestones if m.id != milestone_id]
        if len(milestones) == len(state.milestones):
            logger.debug("delete_skipped", entity="Milestone", entity_id=milestone_id)
            return False
        self.store.commit(state.replace(milestones=milestones))
        return True


# =============================================================================
# Activity log
# =============================================================================


class ActivityService:
    """Service for the append-only activity trail.

    Usage:
        activity = ActivityService(store)
        activity.add_activity({"issue_id": issue.id, "action": "status_changed",
                               "field": "status", "old_value": "todo",
                               "new_value": "done"})
    """

    def __init__(self, store: TrackerStore):
        self.store = store

    def add_activity(
        self, entry: Union[ActivityCreate, Dict[str, Any]]
    ) -> Activity:
        """Append an entry with a fresh ID and timestamp.

        Only ``issue_id`` is required to refer to something; it is not
        checked against the issue collection.
        """
        entry = _coerce(ActivityCreate, entry)
        activity = Activity(**entry.model_dump())
        self.store.commit(append_activities(self.store.state, [activity]))
        return activity

    def get_activities_for_issue(self, issue_id: str) -> List[Activity]:
        """Entries for an existing issue, oldest first.

        Entries of deleted issues are kept in the log but not listed here.
        """
        state = self.store.state
        if issue_id not in state.issues:
            return []
        return [a for a in state.activities if a.issue_id == issue_id]

    def list(self) -> List[Activity]:
        return list(self.store.state.activities)


# =============================================================================
# Ledgers
# =============================================================================


class RelationService:
    """Service for typed issue-to-issue relations."""

    def __init__(self, store: TrackerStore):
        self.store = store

    def add_relation(
        self,
        issue_id: str,
        type: Union[RelationType, str],
        target_issue_id: str,
        user_id: Optional[str] = None,
    ) -> Relation:
        """Add an edge. Duplicates and self-relations are stored as given."""
        data = RelationCreate(issue_id=issue_id, type=type, target_issue_id=target_issue_id)
        relation = Relation(**data.model_dump())
        payload = RelationAddedPayload(
            relation_id=relation.id,
            relation_type=relation.type,
            target_issue_id=relation.target_issue_id,
        )
        state = self.store.state
        state = state.replace(relations=[*state.relations, relation])
        state = append_activities(
            state, [Activity.from_payload(issue_id, payload, user_id=user_id)]
        )
        self.store.commit(state)
        logger.info(
            "relation_added",
            relation_id=relation.id,
            issue_id=issue_id,
            relation_type=relation.type.value,
            target_issue_id=target_issue_id,
        )
        return relation

    def remove_relation(self, relation_id: str, user_id: Optional[str] = None) -> bool:
        state = self.store.state
        relation = next((r for r in state.relations if r.id == relation_id), None)
        if relation is None:
            logger.debug("delete_skipped", entity="Relation", entity_id=relation_id)
            return False

        payload = RelationRemovedPayload(
            relation_id=relation.id,
            relation_type=relation.type,
            target_issue_id=relation.target_issue_id,
        )
        state = state.replace(relations=[r for r in state.relations if r.id != relation_id])
        state = append_activities(
            state, [Activity.from_payload(relation.issue_id, payload, user_id=user_id)]
        )
        self.store.commit(state)
        return True

    def get_relations_for_issue(self, issue_id: str) -> List[Relation]:
        """Relations where the issue is either the source or the target."""
        return [r for r in self.store.state.relations if r.involves(issue_id)]


class SubTaskService:
    """Service for per-issue checklists."""

    def __init__(self, store: TrackerStore):
        self.store = store

    def add_subtask(
        self, issue_id: str, title: str, user_id: Optional[str] = None
    ) -> SubTask:
        subtask = SubTask(issue_id=issue_id, title=title)
        payload = SubTaskAddedPayload(subtask_id=subtask.id, title=subtask.title)
        state = self.store.state
        state = state.replace(sub_tasks=[*state.sub_tasks, subtask])
        state = append_activities(
            state, [Activity.from_payload(issue_id, payload, user_id=user_id)]
        )
        self.store.commit(state)
        return subtask

    def toggle_subtask(
        self, subtask_id: str, user_id: Optional[str] = None
    ) -> Optional[SubTask]:
        """Flip ``completed``. Returns the toggled item, or None if missing."""
        state = self.store.state
        for index, subtask in enumerate(state.sub_tasks):
            if subtask.id != subtask_id:
                continue
            subtask = subtask.model_copy(update={"completed": not subtask.completed})
            sub_tasks = list(state.sub_tasks)
            sub_tasks[index] = subtask
            payload = SubTaskToggledPayload(
                subtask_id=subtask.id, title=subtask.title, completed=subtask.completed
            )
            state = append_activities(
                state.replace(sub_tasks=sub_tasks),
                [Activity.from_payload(subtask.issue_id, payload, user_id=user_id)],
            )
            self.store.commit(state)
            return subtask

        logger.debug("update_skipped", entity="SubTask", entity_id=subtask_id)
        return None

    def remove_subtask(self, subtask_id: str, user_id: Optional[str] = None) -> bool:
        state = self.store.state
        subtask = next((st for st in state.sub_tasks if st.id == subtask_id), None)
        if subtask is None:
            logger.debug("delete_skipped", entity="SubTask", entity_id=subtask_id)
            return False

        payload = SubTaskRemovedPayload(subtask_id=subtask.id, title=subtask.title)
        state = state.replace(
            sub_tasks=[st for st in state.sub_tasks if st.id != subtask_id]
        )
        state = append_activities(
            state, [Activity.from_payload(subtask.issue_id, payload, user_id=user_id)]
        )
        self.store.commit(state)
        return True

    def get_subtasks_for_issue(self, issue_id: str) -> List[SubTask]:
        return [st for st in self.store.state.sub_tasks if st.issue_id == issue_id]


class TimeTrackingService:
    """Service for the per-issue time ledger.

    Entries are keyed by issue ID and are not checked against the issue
    collection. Unusable minute values are ignored.
    """

    def __init__(self, store: TrackerStore):
        self.store = store

    def get_time_tracking(self, issue_id: str) -> TimeTracking:
        return self.store.state.time_tracking.get(issue_id, TimeTracking())

    def _commit(
        self,
        issue_id: str,
        entry: TimeTracking,
        activity: Activity,
    ) -> TimeTracking:
        state = self.store.state
        state = state.replace(time_tracking={**state.time_tracking, issue_id: entry})
        self.store.commit(append_activities(state, [activity]))
        return entry

    def set_time_estimate(
        self, issue_id: str, minutes: Optional[Union[int, float]], user_id: Optional[str] = None
    ) -> Optional[TimeTracking]:
        """Set or clear (``None``) the estimate in minutes."""
        if minutes is not None:
            minutes = _minutes(minutes, allow_zero=True)
            if minutes is None:
                logger.debug("estimate_ignored", issue_id=issue_id)
                return None

        entry = self.get_time_tracking(issue_id).model_copy(
            update={"estimate_minutes": minutes}
        )
        payload = EstimateChangedPayload(minutes=minutes)
        return self._commit(
            issue_id, entry, Activity.from_payload(issue_id, payload, user_id=user_id)
        )

    def log_time(
        self, issue_id: str, minutes: Union[int, float], user_id: Optional[str] = None
    ) -> Optional[TimeTracking]:
        """Add a positive number of minutes to the logged total."""
        minutes = _minutes(minutes, allow_zero=False)
        if minutes is None:
            logger.debug("time_entry_ignored", issue_id=issue_id)
            return None

        current = self.get_time_tracking(issue_id)
        entry = current.model_copy(
            update={"logged_minutes": current.logged_minutes + minutes}
        )
        payload = TimeLoggedPayload(minutes=minutes)
        return self._commit(
            issue_id, entry, Activity.from_payload(issue_id, payload, user_id=user_id)
        )


class SavedViewService:
    """Service for named filter presets."""

    def __init__(self, store: TrackerStore):
        self.store = store

    def save_view(
        self,
        project_id: str,
        name: str,
        filters: Union[IssueFilters, Dict[str, Any], None] = None,
    ) -> str:
        data = SavedViewCreate(
            project_id=project_id,
            name=name,
            filters=_coerce(IssueFilters, filters or {}),
        )
        view = SavedView(**data.model_dump())
        state = self.store.state
        self.store.commit(state.replace(saved_views=[*state.saved_views, view]))
        return view.id

    def delete_saved_view(self, view_id: str) -> bool:
        state = self.store.state
        views = [v for v in state.saved_views if v.id != view_id]
        if len(views) == len(state.saved_views):
            logger.debug("delete_skipped", entity="SavedView", entity_id=view_id)
            return False
        self.store.commit(state.replace(saved_views=views))
        return True

    def get_saved_views_for_project(self, project_id: str) -> List[SavedView]:
        return [v for v in self.store.state.saved_views if v.project_id == project_id]


# =============================================================================
# Bulk operations
# =============================================================================


class BulkService:
    """Selection management and bulk operations over the selected issues."""

    def __init__(self, store: TrackerStore):
        self.store = store

    @property
    def selection(self) -> List[str]:
        return self.store.selection.ids

    def toggle_issue_selection(self, issue_id: str) -> bool:
        return self.store.selection.toggle(issue_id)

    def select_all_issues(self, issue_ids: List[str]) -> None:
        self.store.selection.select_all(issue_ids)

    def clear_selection(self) -> None:
        self.store.selection.clear()

    def bulk_update_issues(
        self,
        patch: Union[IssueUpdate, Dict[str, Any]],
        user_id: Optional[str] = None,
    ) -> List[Issue]:
        """Apply one tracked update to every selected issue, then clear the selection.

        Selected IDs with no issue are skipped. All updates and their
        activity entries are committed together.
        """
        patch = _coerce(IssueUpdate, patch)
        state = self.store.state
        now = utc_now()
        updated: List[Issue] = []
        entry_count = 0
        for issue_id in self.store.selection:
            state, entries = update_issue(
                state, issue_id, patch, track=True, user_id=user_id, now=now
            )
            if issue_id in state.issues:
                updated.append(state.issues[issue_id])
            entry_count += len(entries)

        self.store.commit(state)
        self.store.selection.clear()
        logger.info("bulk_update", issues=len(updated), activities=entry_count)
        return updated

    def bulk_delete_issues(self) -> int:
        """Delete every selected issue with full cascade, then clear the selection.

        Returns the number of issues removed.
        """
        state = self.store.state
        selected = self.store.selection.ids
        removed = sum(1 for issue_id in selected if issue_id in state.issues)
        self.store.commit(remove_issues(state, selected))
        self.store.selection.clear()
        logger.info("bulk_delete", issues=removed)
        return removed


class IssueTracker:
    """All tracker services bound to one store.

    Usage:
        tracker = IssueTracker()
        project_id = tracker.projects.create({"name": "Sonar", "prefix": "SO"})
        issue = tracker.issues.create({"project_id": project_id, "title": "Fix login"})
    """

    def __init__(self, store: Optional[TrackerStore] = None):
        self.store = store if store is not None else TrackerStore()
        self.projects = ProjectService(self.store)
        self.issues = IssueService(self.store)
        self.cycles = CycleService(self.store)
        self.goals = GoalService(self.store)
        self.milestones = MilestoneService(self.store)
        self.activity = ActivityService(self.store)
        self.relations = RelationService(self.store)
        self.subtasks = SubTaskService(self.store)
        self.time = TimeTrackingService(self.store)
        self.views = SavedViewService(self.store)
        self.bulk = BulkService(self.store)
