"""
Tracker Relation Schema.

Relations are directed edges between two issues. They are stored once, from
the source issue's point of view, and queried from either end.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, constr

from .enums import RelationType
from .primitives import TrackerModel, generate_id, utc_now


class Relation(TrackerModel):
    """A typed edge: ``issue_id`` <type> ``target_issue_id``.

    Duplicate edges and self-relations are accepted as-is.
    """

    id: constr(min_length=1, max_length=128) = Field(
        default_factory=generate_id, description="Globally unique identifier (ULID)"
    )
    issue_id: constr(min_length=1, max_length=128) = Field(
        ..., description="Source issue"
    )
    type: RelationType = Field(..., description="Relation kind")
    target_issue_id: constr(min_length=1, max_length=128) = Field(
        ..., description="Target issue"
    )
    created_at: datetime = Field(
        default_factory=utc_now, description="Creation timestamp (UTC)"
    )

    def involves(self, issue_id: str) -> bool:
        return self.issue_id == issue_id or self.target_issue_id == issue_id


class RelationCreate(TrackerModel):
    """Schema for creating a new Relation."""

    issue_id: constr(min_length=1, max_length=128)
    type: RelationType
    target_issue_id: constr(min_length=1, max_length=128)
