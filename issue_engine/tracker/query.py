"""
Issue query engine.

Pure functions over a sequence of issues: filter, then sort, then group.
Nothing here reads or writes the store.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

from pydantic import Field

from .activity import UNASSIGNED
from .enums import PRIORITY_ORDER, STATUS_ORDER, GroupBy, SortDirection, SortField
from .issue import Issue
from .primitives import IssueFilters, IssueSort, TrackerModel

ALL_GROUP = "all"

_PRIORITY_RANK = {priority: rank for rank, priority in enumerate(PRIORITY_ORDER)}
_STATUS_RANK = {status: rank for rank, status in enumerate(STATUS_ORDER)}

_SORT_KEYS: Dict[SortField, Callable[[Issue], object]] = {
    SortField.CREATED: lambda issue: issue.created_at,
    SortField.UPDATED: lambda issue: issue.updated_at,
    SortField.PRIORITY: lambda issue: _PRIORITY_RANK[issue.priority],
    SortField.STATUS: lambda issue: _STATUS_RANK[issue.status],
    SortField.TITLE: lambda issue: issue.title.casefold(),
}


class IssueQueryResult(TrackerModel):
    """Filtered, sorted and grouped issues."""

    issues: List[Issue] = Field(default_factory=list)
    groups: Dict[str, List[Issue]] = Field(default_factory=dict)
    total_count: int = 0
    filtered_count: int = 0


def matches(issue: Issue, filters: IssueFilters) -> bool:
    """True if the issue passes every non-empty filter dimension."""
    if filters.status and issue.status not in filters.status:
        return False
    if filters.priority and issue.priority not in filters.priority:
        return False
    if filters.assignee_id and issue.assignee_id not in filters.assignee_id:
        return False
    if filters.label_ids and not set(filters.label_ids).intersection(issue.label_ids):
        return False
    if filters.search:
        needle = filters.search.lower()
        haystacks = (issue.title, issue.identifier, issue.description)
        if not any(needle in text.lower() for text in haystacks):
            return False
    return True


def filter_issues(
    issues: Iterable[Issue], filters: Optional[IssueFilters] = None
) -> List[Issue]:
    if filters is None or filters.is_empty():
        return list(issues)
    return [issue for issue in issues if matches(issue, filters)]


def sort_issues(issues: Iterable[Issue], sort: Optional[IssueSort] = None) -> List[Issue]:
    """Sort stably; equal keys keep their input order in both directions.

    Ascending priority puts urgent first, ascending status puts backlog first.
    """
    sort = sort or IssueSort()
    issues = list(issues)
    key = _SORT_KEYS[sort.field]
    if sort.direction == SortDirection.DESC:
        return sorted(issues, key=key, reverse=True)
    return sorted(issues, key=key)


def group_issues(
    issues: Iterable[Issue], group_by: Union[GroupBy, str] = GroupBy.NONE
) -> Dict[str, List[Issue]]:
    """Bucket issues by a field. Keys appear in first-seen order."""
    group_by = GroupBy(group_by)
    if group_by == GroupBy.NONE:
        return {ALL_GROUP: list(issues)}

    groups: Dict[str, List[Issue]] = {}
    for issue in issues:
        if group_by == GroupBy.STATUS:
            key = issue.status.value
        elif group_by == GroupBy.PRIORITY:
            key = issue.priority.value
        else:
            key = issue.assignee_id or UNASSIGNED
        groups.setdefault(key, []).append(issue)
    return groups


def query_issues(
    issues: Sequence[Issue],
    filters: Optional[IssueFilters] = None,
    sort: Optional[IssueSort] = None,
    group_by: Union[GroupBy, str] = GroupBy.NONE,
) -> IssueQueryResult:
    """Filter, sort and group ``issues`` in one pass."""
    ordered = sort_issues(filter_issues(issues, filters), sort)
    return IssueQueryResult(
        issues=ordered,
        groups=group_issues(ordered, group_by),
        total_count=len(issues),
        filtered_count=len(ordered),
    )
