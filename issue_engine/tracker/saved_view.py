"""
Tracker SavedView Schema.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, constr

from .primitives import IssueFilters, TrackerModel, generate_id, utc_now


class SavedView(TrackerModel):
    """A named filter preset. Names are not required to be unique."""

    id: constr(min_length=1, max_length=128) = Field(
        default_factory=generate_id, description="Globally unique identifier (ULID)"
    )
    project_id: constr(min_length=1, max_length=128) = Field(
        ..., description="Owning Project"
    )
    name: str = Field(..., max_length=256, description="View name (may be empty)")
    filters: IssueFilters = Field(
        default_factory=IssueFilters, description="Filter snapshot"
    )
    created_at: datetime = Field(
        default_factory=utc_now, description="Creation timestamp (UTC)"
    )


class SavedViewCreate(TrackerModel):
    """Schema for saving a view."""

    project_id: constr(min_length=1, max_length=128)
    name: str = Field(..., max_length=256)
    filters: IssueFilters = Field(default_factory=IssueFilters)
