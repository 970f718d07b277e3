"""
Tracker Project Schema.

Represents the container that owns issues, cycles, goals and milestones.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field, constr

from .enums import ViewType
from .primitives import Label, TrackerModel, generate_id, utc_now


class Project(TrackerModel):
    """A project: the owner of issues and the issuer of their identifiers.

    Invariants:
    - next_issue_number only ever increases; numbers are never reused, even
      after the issues that carried them are deleted.
    - prefix + next_issue_number names the next issue (e.g. "SO-7").
    """

    id: constr(min_length=1, max_length=128) = Field(
        default_factory=generate_id, description="Globally unique identifier (ULID)"
    )
    name: constr(min_length=1, max_length=256) = Field(
        ..., description="Project name"
    )
    description: str = Field("", description="Project description")
    prefix: constr(min_length=1, max_length=16) = Field(
        ..., description="Short uppercase code used in issue identifiers"
    )
    color: str = Field("#6366F1", description="Display color")
    member_ids: List[str] = Field(default_factory=list, description="Project members")
    labels: List[Label] = Field(default_factory=list, description="Project labels")
    next_issue_number: int = Field(
        1, ge=1, description="Number the next created issue will receive"
    )
    current_view: ViewType = Field(ViewType.BOARD, description="Default view")

    # Timestamps
    created_at: datetime = Field(
        default_factory=utc_now, description="Creation timestamp (UTC)"
    )
    updated_at: datetime = Field(
        default_factory=utc_now, description="Last update timestamp (UTC)"
    )


class ProjectCreate(TrackerModel):
    """Schema for creating a new Project."""

    name: constr(min_length=1, max_length=256)
    description: str = ""
    prefix: constr(min_length=1, max_length=16)
    color: str = "#6366F1"


class ProjectUpdate(TrackerModel):
    """Patch for a Project.

    The issue counter is deliberately absent: it only moves through issue
    creation.
    """

    name: Optional[constr(min_length=1, max_length=256)] = None
    description: Optional[str] = None
    prefix: Optional[constr(min_length=1, max_length=16)] = None
    color: Optional[str] = None
    member_ids: Optional[List[str]] = None
    labels: Optional[List[Label]] = None
    current_view: Optional[ViewType] = None
