"""
Tracker Common Primitives.

These are the building blocks used across all tracker record types.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, constr
from pydantic.alias_generators import to_camel
from ulid import ULID

from .enums import (
    IssuePriority,
    IssueStatus,
    SortDirection,
    SortField,
)


def generate_id() -> str:
    """Generate a ULID for record IDs.

    ULIDs are a millisecond timestamp plus 80 random bits, so they are
    unique without coordination and sort by creation time.
    """
    return str(ULID())


def utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


class TrackerModel(BaseModel):
    """Base for every tracker schema.

    Records are immutable values: a mutation replaces the whole record with
    ``model_copy(update=...)``. Snapshots use camelCase keys; snake_case
    field names are accepted on input as well.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Label(TrackerModel):
    """A project-scoped label."""

    id: constr(min_length=1, max_length=128) = Field(
        default_factory=generate_id, description="Label identifier"
    )
    name: constr(min_length=1, max_length=128) = Field(..., description="Label name")
    color: str = Field("#94A3B8", description="Display color")


class Member(TrackerModel):
    """Reference data for a person who can be assigned issues.

    Members are owned outside the engine; they ride along in snapshots so
    the presentation layer can join assignee IDs to names.
    """

    id: constr(min_length=1, max_length=128) = Field(..., description="Member ID")
    name: str = Field(..., description="Display name")
    email: str = Field("", description="Email address")
    avatar_url: str = Field("", description="Avatar URL")


class TimeTracking(TrackerModel):
    """Per-issue time ledger."""

    estimate_minutes: Optional[int] = Field(
        None, ge=0, description="Estimated minutes (None = no estimate)"
    )
    logged_minutes: int = Field(0, ge=0, description="Sum of all logged minutes")


class IssueFilters(TrackerModel):
    """Filter criteria for issue queries.

    Dimensions are ANDed together. An empty list or missing search matches
    everything. Labels match when any label of the issue is in the list.
    """

    status: List[IssueStatus] = Field(default_factory=list)
    priority: List[IssuePriority] = Field(default_factory=list)
    assignee_id: List[str] = Field(default_factory=list)
    label_ids: List[str] = Field(default_factory=list)
    search: Optional[str] = None

    def is_empty(self) -> bool:
        return not (
            self.status
            or self.priority
            or self.assignee_id
            or self.label_ids
            or self.search
        )


class IssueSort(TrackerModel):
    """Sort criteria for issue queries."""

    field: SortField = SortField.CREATED
    direction: SortDirection = SortDirection.DESC
