"""
Tracker SubTask Schema.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, constr

from .primitives import TrackerModel, generate_id, utc_now


class SubTask(TrackerModel):
    """A checklist item on an issue. Ordering is insertion order."""

    id: constr(min_length=1, max_length=128) = Field(
        default_factory=generate_id, description="Globally unique identifier (ULID)"
    )
    issue_id: constr(min_length=1, max_length=128) = Field(
        ..., description="Owning issue"
    )
    title: str = Field(..., max_length=512, description="Item text (may be empty)")
    completed: bool = Field(False, description="Whether the item is checked off")
    created_at: datetime = Field(
        default_factory=utc_now, description="Creation timestamp (UTC)"
    )
