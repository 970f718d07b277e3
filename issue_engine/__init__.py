"""
issue-engine

An in-memory issue tracking engine: projects, issues, cycles, goals and
milestones with an activity trail, per-issue ledgers and a query layer.
"""

import importlib.metadata

__version__ = importlib.metadata.version("issue-engine")

from .tracker import IssueTracker, TrackerStore

__all__ = [
    "IssueTracker",
    "TrackerStore",
]
