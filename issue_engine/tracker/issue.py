"""
Tracker Issue Schema.

Represents a unit of work inside a Project.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, constr

from .enums import IssuePriority, IssueStatus
from .primitives import TrackerModel, generate_id, utc_now


class Issue(TrackerModel):
    """A unit of work: what we want done.

    Invariants:
    - identifier is assigned once at creation and never changes.
    - updated_at is refreshed on every mutation.
    - parent_issue_id forms a tree; cycles are not prevented.
    """

    # Object identity
    id: constr(min_length=1, max_length=128) = Field(
        default_factory=generate_id, description="Globally unique identifier (ULID)"
    )
    project_id: constr(min_length=1, max_length=128) = Field(
        ..., description="Owning Project"
    )
    identifier: constr(min_length=1, max_length=64) = Field(
        ..., description="Human-readable key, e.g. 'SO-1'"
    )

    # Core fields
    title: constr(min_length=1, max_length=512) = Field(..., description="Issue title")
    description: str = Field("", description="Detailed description")
    status: IssueStatus = Field(IssueStatus.TODO, description="Workflow status")
    priority: IssuePriority = Field(IssuePriority.NONE, description="Priority level")

    # People and classification
    assignee_id: Optional[str] = Field(None, description="Assigned member")
    label_ids: List[str] = Field(
        default_factory=list, description="Subset of the project's labels"
    )

    # Planning
    estimate: Optional[float] = Field(None, ge=0, description="Estimate (points)")
    due_date: Optional[date] = Field(None, description="Due date")
    parent_issue_id: Optional[str] = Field(None, description="Parent issue")
    cycle_id: Optional[str] = Field(None, description="Cycle this issue is planned in")

    # Timestamps
    created_at: datetime = Field(
        default_factory=utc_now, description="Creation timestamp (UTC)"
    )
    updated_at: datetime = Field(
        default_factory=utc_now, description="Last update timestamp (UTC)"
    )


class IssueCreate(TrackerModel):
    """Schema for creating a new Issue."""

    project_id: constr(min_length=1, max_length=128)
    title: constr(min_length=1, max_length=512)
    description: str = ""
    status: IssueStatus = IssueStatus.TODO
    priority: IssuePriority = IssuePriority.NONE
    assignee_id: Optional[str] = None
    label_ids: List[str] = Field(default_factory=list)
    estimate: Optional[float] = Field(None, ge=0)
    due_date: Optional[date] = None
    parent_issue_id: Optional[str] = None
    cycle_id: Optional[str] = None


class IssueUpdate(TrackerModel):
    """Patch for an Issue.

    Only fields that are mutable after creation are listed; id, project_id
    and identifier cannot be overwritten. Only fields explicitly set on the
    patch are applied, so ``IssueUpdate(assignee_id=None)`` unassigns while
    ``IssueUpdate()`` changes nothing.
    """

    title: Optional[constr(min_length=1, max_length=512)] = None
    description: Optional[str] = None
    status: Optional[IssueStatus] = None
    priority: Optional[IssuePriority] = None
    assignee_id: Optional[str] = None
    label_ids: Optional[List[str]] = None
    estimate: Optional[float] = Field(None, ge=0)
    due_date: Optional[date] = None
    parent_issue_id: Optional[str] = None
    cycle_id: Optional[str] = None
