"""
Snapshot files.

A snapshot is the JSON form of ``TrackerStore.to_snapshot()``. These helpers
are the persistence collaborator: they load a store from disk and write it
back, either on demand or after every commit.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable, Union

import structlog

from .store import TrackerStore

logger = structlog.get_logger(__name__)

PathLike = Union[str, Path]


def save_snapshot(store: TrackerStore, path: PathLike) -> Path:
    """Write the store's current state to ``path``.

    The file is replaced atomically so a reader never sees a partial write.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(json.dumps(store.to_snapshot(), indent=2), encoding="utf-8")
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    logger.debug("snapshot_saved", path=str(path))
    return path


def load_snapshot(path: PathLike) -> TrackerStore:
    """Load a store from ``path``. A missing file yields an empty store."""
    path = Path(path)
    if not path.exists():
        logger.info("snapshot_missing", path=str(path))
        return TrackerStore()
    data = json.loads(path.read_text(encoding="utf-8"))
    return TrackerStore.from_snapshot(data)


def autosave(store: TrackerStore, path: PathLike) -> Callable[[], None]:
    """Save ``store`` to ``path`` after every commit.

    Returns a function that stops autosaving.
    """
    target = Path(path)
    return store.subscribe(lambda _state: save_snapshot(store, target))
