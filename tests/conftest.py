"""Test configuration and fixtures."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from issue_engine.config import reset_settings
from issue_engine.tracker import (
    Issue,
    IssueTracker,
    ProjectCreate,
    TrackerStore,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so env overrides do not leak."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def store() -> TrackerStore:
    return TrackerStore()


@pytest.fixture
def tracker(store: TrackerStore) -> IssueTracker:
    return IssueTracker(store)


@pytest.fixture
def project_id(tracker: IssueTracker) -> str:
    """A project with prefix SO."""
    return tracker.projects.create(ProjectCreate(name="Sonar", prefix="SO"))


@pytest.fixture
def make_issue(tracker: IssueTracker, project_id: str) -> Callable[..., Issue]:
    """Factory creating issues in the SO project."""

    def _make(title: str = "Fix bug", **fields) -> Issue:
        return tracker.issues.create({"project_id": project_id, "title": title, **fields})

    return _make


def build_issue(number: int, minutes: int = 0, **fields) -> Issue:
    """An Issue value with a controlled creation time, for query tests."""
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    stamp = base + timedelta(minutes=minutes or number)
    data = {
        "id": f"issue-{number}",
        "project_id": "p1",
        "identifier": f"SO-{number}",
        "title": f"Issue {number}",
        "created_at": stamp,
        "updated_at": stamp,
    }
    data.update(fields)
    return Issue(**data)


@pytest.fixture
def issue_factory() -> Callable[..., Issue]:
    return build_issue
