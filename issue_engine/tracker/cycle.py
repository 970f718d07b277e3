"""
Tracker Cycle Schema.

Represents a time-boxed iteration within a Project.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field, constr

from .enums import CycleStatus
from .primitives import TrackerModel, generate_id


class Cycle(TrackerModel):
    """A time-boxed iteration.

    Invariants:
    - status is set by callers; it is never derived from the dates.
    - Deleting a Cycle unplans its issues (cycle_id -> None) but keeps them.
    """

    id: constr(min_length=1, max_length=128) = Field(
        default_factory=generate_id, description="Globally unique identifier (ULID)"
    )
    project_id: constr(min_length=1, max_length=128) = Field(
        ..., description="Owning Project"
    )
    name: constr(min_length=1, max_length=256) = Field(..., description="Cycle name")
    start_date: date = Field(..., description="First day of the cycle")
    end_date: date = Field(..., description="Last day of the cycle")
    status: CycleStatus = Field(CycleStatus.UPCOMING, description="Cycle status")


class CycleCreate(TrackerModel):
    """Schema for creating a new Cycle."""

    project_id: constr(min_length=1, max_length=128)
    name: constr(min_length=1, max_length=256)
    start_date: date
    end_date: date


class CycleUpdate(TrackerModel):
    """Patch for a Cycle."""

    name: Optional[constr(min_length=1, max_length=256)] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[CycleStatus] = None
