"""
Tracker error types.

Only a missing parent record is a hard failure. Stale IDs on update, delete
or toggle are no-ops, and malformed time-tracking minutes are ignored; those
paths return normally and never raise.
"""

from typing import Any, Dict


class TrackerError(Exception):
    """Base class for errors raised by the tracker engine.

    Attributes:
        code: Stable error code for programmatic handling
        message: Human-readable error description
    """

    code = "TRACKER_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{self.code}: {message}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "error": self.code,
            "message": self.message,
        }


class NotFoundError(TrackerError):
    """Raised when a referenced parent record does not exist."""

    code = "NOT_FOUND"

    def __init__(self, object_type: str, object_id: str):
        self.object_type = object_type
        self.object_id = object_id
        super().__init__(f"{object_type} {object_id} not found")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.code,
            "object_type": self.object_type,
            "object_id": self.object_id,
            "message": self.message,
        }
