"""
Tracker store.

The store owns the current ``TrackerState`` and the process-local issue
selection. Services compute a new state and hand it to ``commit``; that swap
is the only write path.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

import structlog

from .state import TrackerState

logger = structlog.get_logger(__name__)

Listener = Callable[[TrackerState], None]


class SelectionSet:
    """Ordered set of selected issue IDs.

    Never persisted. Iteration follows selection order.
    """

    def __init__(self, issue_ids: Iterable[str] = ()):
        self._ids: Dict[str, None] = dict.fromkeys(issue_ids)

    def toggle(self, issue_id: str) -> bool:
        """Flip membership of ``issue_id``. Returns True if now selected."""
        if issue_id in self._ids:
            del self._ids[issue_id]
            return False
        self._ids[issue_id] = None
        return True

    def select_all(self, issue_ids: Iterable[str]) -> None:
        """Replace the selection."""
        self._ids = dict.fromkeys(issue_ids)

    def clear(self) -> None:
        self._ids = {}

    @property
    def ids(self) -> List[str]:
        return list(self._ids)

    def __contains__(self, issue_id: object) -> bool:
        return issue_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._ids))

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"SelectionSet({self.ids!r})"


class TrackerStore:
    """Holder of the current tracker state.

    Usage:
        store = TrackerStore()
        issues = IssueService(store)
        issue = issues.create({"project_id": project_id, "title": "Fix login"})
        store.state.issues[issue.id]
    """

    def __init__(self, state: Optional[TrackerState] = None):
        self._state = state if state is not None else TrackerState()
        self._listeners: List[Listener] = []
        self.selection = SelectionSet()

    @property
    def state(self) -> TrackerState:
        return self._state

    def commit(self, state: TrackerState) -> TrackerState:
        """Make ``state`` current and notify subscribers.

        The new state stands even if a subscriber fails; the failure is
        logged and the remaining subscribers still run.
        """
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("listener_failed", listener=repr(listener))
        return state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every commit. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def to_snapshot(self) -> Dict[str, Any]:
        """Return every collection as a JSON-serializable dict (camelCase keys)."""
        return self._state.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_snapshot(cls, data: Dict[str, Any]) -> "TrackerStore":
        """Build a store from a dict produced by ``to_snapshot``.

        Missing collections default to empty.
        """
        state = TrackerState.model_validate(data)
        logger.debug(
            "snapshot_loaded",
            projects=len(state.projects),
            issues=len(state.issues),
            activities=len(state.activities),
        )
        return cls(state)
