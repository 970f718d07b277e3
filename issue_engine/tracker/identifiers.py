"""
Identifier generation.

Two kinds of identifiers exist:
- opaque record IDs (ULIDs), unique without coordination
- human issue keys ("SO-12"), unique per project because they are drawn
  from the project's monotonic counter
"""

from .primitives import generate_id
from .project import Project


def new_id() -> str:
    """Return a fresh opaque record ID."""
    return generate_id()


def format_issue_identifier(prefix: str, number: int) -> str:
    return f"{prefix}-{number}"


def next_issue_identifier(project: Project) -> str:
    """Return the identifier the next issue of ``project`` will receive.

    This does not advance the counter. The caller must store the
    incremented counter in the same commit as the new issue.
    """
    return format_issue_identifier(project.prefix, project.next_issue_number)
