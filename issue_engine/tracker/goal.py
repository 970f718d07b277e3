"""
Tracker Goal Schema.

Represents an outcome a project is working towards, linked to issues.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, constr

from .enums import GoalStatus
from .primitives import TrackerModel, generate_id, utc_now


class Goal(TrackerModel):
    """An outcome tracked against a set of issues.

    Invariants:
    - issue_ids has set semantics: an issue appears at most once.
    - progress is computed by the caller from the linked issues.
    """

    id: constr(min_length=1, max_length=128) = Field(
        default_factory=generate_id, description="Globally unique identifier (ULID)"
    )
    project_id: constr(min_length=1, max_length=128) = Field(
        ..., description="Owning Project"
    )
    title: constr(min_length=1, max_length=512) = Field(..., description="Goal title")
    description: str = Field("", description="Goal description")
    target_date: Optional[date] = Field(None, description="Target date")
    status: GoalStatus = Field(GoalStatus.NOT_STARTED, description="Goal status")
    progress: float = Field(0, ge=0, le=100, description="Percent complete (0-100)")
    issue_ids: List[str] = Field(default_factory=list, description="Linked issues")

    # Timestamps
    created_at: datetime = Field(
        default_factory=utc_now, description="Creation timestamp (UTC)"
    )
    updated_at: datetime = Field(
        default_factory=utc_now, description="Last update timestamp (UTC)"
    )


class GoalCreate(TrackerModel):
    """Schema for creating a new Goal."""

    project_id: constr(min_length=1, max_length=128)
    title: constr(min_length=1, max_length=512)
    description: str = ""
    target_date: Optional[date] = None


class GoalUpdate(TrackerModel):
    """Patch for a Goal. Linked issues change through link/unlink only."""

    title: Optional[constr(min_length=1, max_length=512)] = None
    description: Optional[str] = None
    target_date: Optional[date] = None
    status: Optional[GoalStatus] = None
    progress: Optional[float] = Field(None, ge=0, le=100)
