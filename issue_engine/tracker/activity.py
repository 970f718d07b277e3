"""
Tracker Activity Schema.

The activity trail is append-only. Each entry carries a typed payload that
says exactly what happened (discriminated on ``action``), and the flat
``field`` / ``old_value`` / ``new_value`` strings the UI renders are derived
from that payload when the entry is built.

Rendering rules:
- status/priority: the enum values
- assignee: member ID, or "unassigned" when cleared
- labels: label IDs sorted and joined with ","
- due date: ISO date, or "none" when cleared
- sub-task toggles: field is the sub-task title, values are
  "completed"/"incomplete"
- relations: "{type}:{target_issue_id}"
- time: minutes as a decimal string, or "none" for a cleared estimate
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import Field, constr

from .enums import ActivityAction, IssuePriority, IssueStatus, RelationType
from .primitives import TrackerModel, generate_id, utc_now

UNASSIGNED = "unassigned"
NO_DATE = "none"
NO_ESTIMATE = "none"

Rendered = Tuple[Optional[str], Optional[str], Optional[str]]


def _completion(completed: bool) -> str:
    return "completed" if completed else "incomplete"


class CreatedPayload(TrackerModel):
    action: Literal["created"] = "created"

    def render(self) -> Rendered:
        return None, None, None


class StatusChangedPayload(TrackerModel):
    action: Literal["status_changed"] = "status_changed"
    old: IssueStatus
    new: IssueStatus

    def render(self) -> Rendered:
        return "status", self.old.value, self.new.value


class PriorityChangedPayload(TrackerModel):
    action: Literal["priority_changed"] = "priority_changed"
    old: IssuePriority
    new: IssuePriority

    def render(self) -> Rendered:
        return "priority", self.old.value, self.new.value


class AssigneeChangedPayload(TrackerModel):
    action: Literal["assignee_changed"] = "assignee_changed"
    old: Optional[str] = None
    new: Optional[str] = None

    def render(self) -> Rendered:
        return "assignee", self.old or UNASSIGNED, self.new or UNASSIGNED


class LabelsChangedPayload(TrackerModel):
    action: Literal["labels_changed"] = "labels_changed"
    old: List[str] = Field(default_factory=list)
    new: List[str] = Field(default_factory=list)

    def render(self) -> Rendered:
        return "labels", ",".join(sorted(self.old)), ",".join(sorted(self.new))


class DueDateChangedPayload(TrackerModel):
    action: Literal["due_date_changed"] = "due_date_changed"
    old: Optional[date] = None
    new: Optional[date] = None

    def render(self) -> Rendered:
        old = self.old.isoformat() if self.old else NO_DATE
        new = self.new.isoformat() if self.new else NO_DATE
        return "dueDate", old, new


class SubTaskAddedPayload(TrackerModel):
    action: Literal["subtask_added"] = "subtask_added"
    subtask_id: str
    title: str

    def render(self) -> Rendered:
        return None, None, self.title


class SubTaskToggledPayload(TrackerModel):
    """``completed`` is the state after the toggle."""

    action: Literal["subtask_toggled"] = "subtask_toggled"
    subtask_id: str
    title: str
    completed: bool

    def render(self) -> Rendered:
        return self.title, _completion(not self.completed), _completion(self.completed)


class SubTaskRemovedPayload(TrackerModel):
    action: Literal["subtask_removed"] = "subtask_removed"
    subtask_id: str
    title: str

    def render(self) -> Rendered:
        return None, self.title, None


class RelationAddedPayload(TrackerModel):
    action: Literal["relation_added"] = "relation_added"
    relation_id: str
    relation_type: RelationType
    target_issue_id: str

    def render(self) -> Rendered:
        return "relation", None, f"{self.relation_type.value}:{self.target_issue_id}"


class RelationRemovedPayload(TrackerModel):
    action: Literal["relation_removed"] = "relation_removed"
    relation_id: str
    relation_type: RelationType
    target_issue_id: str

    def render(self) -> Rendered:
        return "relation", f"{self.relation_type.value}:{self.target_issue_id}", None


class TimeLoggedPayload(TrackerModel):
    action: Literal["time_logged"] = "time_logged"
    minutes: int = Field(..., gt=0)

    def render(self) -> Rendered:
        return "time", None, str(self.minutes)


class EstimateChangedPayload(TrackerModel):
    action: Literal["estimate_changed"] = "estimate_changed"
    minutes: Optional[int] = Field(None, ge=0)

    def render(self) -> Rendered:
        new = str(self.minutes) if self.minutes is not None else NO_ESTIMATE
        return "estimate", None, new


ActivityPayload = Annotated[
    Union[
        CreatedPayload,
        StatusChangedPayload,
        PriorityChangedPayload,
        AssigneeChangedPayload,
        LabelsChangedPayload,
        DueDateChangedPayload,
        SubTaskAddedPayload,
        SubTaskToggledPayload,
        SubTaskRemovedPayload,
        RelationAddedPayload,
        RelationRemovedPayload,
        TimeLoggedPayload,
        EstimateChangedPayload,
    ],
    Field(discriminator="action"),
]


class Activity(TrackerModel):
    """One entry of an issue's audit trail.

    Invariants:
    - Append-only: entries are never edited.
    - Entries outlive their issue; per-issue views hide orphans.
    - payload is None only for entries rehydrated from snapshots that
      predate typed payloads, or for free-form entries logged explicitly.
    """

    id: constr(min_length=1, max_length=128) = Field(
        default_factory=generate_id, description="Globally unique identifier (ULID)"
    )
    issue_id: constr(min_length=1, max_length=128) = Field(
        ..., description="Issue the entry belongs to"
    )
    user_id: Optional[str] = Field(None, description="Acting member, if known")
    action: ActivityAction = Field(..., description="What happened")
    field: Optional[str] = Field(None, description="Changed field (display)")
    old_value: Optional[str] = Field(None, description="Previous value (display)")
    new_value: Optional[str] = Field(None, description="New value (display)")
    payload: Optional[ActivityPayload] = Field(None, description="Typed detail")
    timestamp: datetime = Field(default_factory=utc_now, description="When (UTC)")

    @classmethod
    def from_payload(
        cls,
        issue_id: str,
        payload: ActivityPayload,
        user_id: Optional[str] = None,
    ) -> "Activity":
        """Build an entry, rendering the display strings from the payload."""
        field, old_value, new_value = payload.render()
        return cls(
            issue_id=issue_id,
            user_id=user_id,
            action=ActivityAction(payload.action),
            field=field,
            old_value=old_value,
            new_value=new_value,
            payload=payload,
        )


class ActivityCreate(TrackerModel):
    """Schema for an explicitly logged activity entry."""

    issue_id: constr(min_length=1, max_length=128)
    user_id: Optional[str] = None
    action: ActivityAction
    field: Optional[str] = None
    old_value: Optional[str] = None
    new_value: Optional[str] = None
    payload: Optional[ActivityPayload] = None
