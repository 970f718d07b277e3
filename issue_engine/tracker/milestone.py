"""
Tracker Milestone Schema.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, constr

from .primitives import TrackerModel, generate_id, utc_now


class Milestone(TrackerModel):
    """A dated checkpoint with a set of issues that must land by then."""

    id: constr(min_length=1, max_length=128) = Field(
        default_factory=generate_id, description="Globally unique identifier (ULID)"
    )
    project_id: constr(min_length=1, max_length=128) = Field(
        ..., description="Owning Project"
    )
    title: constr(min_length=1, max_length=512) = Field(
        ..., description="Milestone title"
    )
    due_date: date = Field(..., description="Due date")
    completed: bool = Field(False, description="Whether the milestone is met")
    issue_ids: List[str] = Field(default_factory=list, description="Linked issues")
    created_at: datetime = Field(
        default_factory=utc_now, description="Creation timestamp (UTC)"
    )


class MilestoneCreate(TrackerModel):
    """Schema for creating a new Milestone."""

    project_id: constr(min_length=1, max_length=128)
    title: constr(min_length=1, max_length=512)
    due_date: date


class MilestoneUpdate(TrackerModel):
    """Patch for a Milestone."""

    title: Optional[constr(min_length=1, max_length=512)] = None
    due_date: Optional[date] = None
    completed: Optional[bool] = None
