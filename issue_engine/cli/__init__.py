"""
Command Line Interface for issue-engine.

Every command works on a snapshot file written by ``seed`` or by an
application using ``issue_engine.tracker.snapshot``. The file defaults to
the ``snapshot_path`` setting.
"""

from datetime import date, timedelta
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config import get_settings
from ..logging_config import setup_logging
from ..tracker import (
    GroupBy,
    IssueFilters,
    IssuePriority,
    IssueSort,
    IssueStatus,
    IssueTracker,
    IssueUpdate,
    Member,
    SortDirection,
    SortField,
    load_snapshot,
    query_issues,
    save_snapshot,
)

app = typer.Typer(help="issue-engine - issue tracking over a snapshot file")
console = Console()

PRIORITY_STYLE = {
    IssuePriority.URGENT: "bold red",
    IssuePriority.HIGH: "red",
    IssuePriority.MEDIUM: "yellow",
    IssuePriority.LOW: "green",
    IssuePriority.NONE: "dim",
}


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, help="Override the log level"),
):
    """Configure logging before any command runs."""
    setup_logging(level=log_level)


def _snapshot_path(path: Optional[Path]) -> Path:
    return path if path is not None else Path(get_settings().snapshot_path)


def _load(path: Optional[Path]) -> IssueTracker:
    path = _snapshot_path(path)
    if not path.exists():
        console.print(f"[red]Snapshot not found:[/red] {path}")
        raise typer.Exit(code=1)
    return IssueTracker(load_snapshot(path))


def _member_names(tracker: IssueTracker) -> dict:
    return {m.id: m.name for m in tracker.store.state.members}


@app.command()
def seed(
    path: Optional[Path] = typer.Option(None, "--file", "-f", help="Snapshot file to write"),
    force: bool = typer.Option(False, help="Overwrite an existing file"),
):
    """Write a demo project with sample issues."""
    path = _snapshot_path(path)
    if path.exists() and not force:
        console.print(f"[red]Refusing to overwrite[/red] {path} (use --force)")
        raise typer.Exit(code=1)

    tracker = IssueTracker()
    state = tracker.store.state
    tracker.store.commit(
        state.replace(
            members=[
                Member(id="u-ada", name="Ada Lovelace", email="ada@example.com"),
                Member(id="u-grace", name="Grace Hopper", email="grace@example.com"),
            ]
        )
    )

    project_id = tracker.projects.create(
        {"name": "Sonar", "prefix": "SO", "description": "Sample project"}
    )
    tracker.projects.update(
        project_id,
        {
            "member_ids": ["u-ada", "u-grace"],
            "labels": [
                {"id": "l-bug", "name": "bug", "color": "#EF4444"},
                {"id": "l-feature", "name": "feature", "color": "#22C55E"},
            ],
        },
    )

    today = date.today()
    cycle_id = tracker.cycles.create(
        {
            "project_id": project_id,
            "name": "Cycle 1",
            "start_date": today,
            "end_date": today + timedelta(days=14),
        }
    )
    login = tracker.issues.create(
        {
            "project_id": project_id,
            "title": "Fix login redirect",
            "priority": "high",
            "label_ids": ["l-bug"],
            "cycle_id": cycle_id,
        }
    )
    search = tracker.issues.create(
        {
            "project_id": project_id,
            "title": "Add search to issue list",
            "label_ids": ["l-feature"],
        }
    )
    tracker.issues.create(
        {"project_id": project_id, "title": "Write onboarding docs", "status": "backlog"}
    )

    tracker.issues.update_with_activity(
        login.id,
        IssueUpdate(status=IssueStatus.IN_PROGRESS, assignee_id="u-ada"),
        user_id="u-ada",
    )
    tracker.relations.add_relation(login.id, "blocks", search.id, user_id="u-ada")
    tracker.subtasks.add_subtask(login.id, "Reproduce on staging")
    tracker.time.set_time_estimate(login.id, 120)
    tracker.time.log_time(login.id, 45, user_id="u-ada")

    goal_id = tracker.goals.create({"project_id": project_id, "title": "Ship v1"})
    tracker.goals.link_issue(goal_id, login.id)
    tracker.views.save_view(project_id, "My bugs", {"label_ids": ["l-bug"]})

    save_snapshot(tracker.store, path)
    console.print(
        Panel.fit(
            f"Seeded project SO with {len(tracker.issues.list())} issues into {path}",
            style="bold blue",
        )
    )


@app.command()
def issues(
    path: Optional[Path] = typer.Option(None, "--file", "-f", help="Snapshot file"),
    project: Optional[str] = typer.Option(None, help="Only this project prefix"),
    status: Optional[List[IssueStatus]] = typer.Option(None, help="Status filter"),
    priority: Optional[List[IssuePriority]] = typer.Option(None, help="Priority filter"),
    assignee: Optional[List[str]] = typer.Option(None, help="Assignee ID filter"),
    label: Optional[List[str]] = typer.Option(None, help="Label ID filter"),
    search: Optional[str] = typer.Option(None, help="Search title/identifier/description"),
    sort: Optional[SortField] = typer.Option(None, help="Sort field"),
    direction: Optional[SortDirection] = typer.Option(None, help="Sort direction"),
    group_by: Optional[GroupBy] = typer.Option(None, help="Group issues"),
):
    """List issues with filters, sorting and grouping."""
    settings = get_settings()
    tracker = _load(path)

    project_id = None
    if project:
        match = tracker.projects.get_by_prefix(project)
        if match is None:
            console.print(f"[red]Unknown project:[/red] {project}")
            raise typer.Exit(code=1)
        project_id = match.id

    result = query_issues(
        tracker.issues.list(project_id),
        filters=IssueFilters(
            status=status or [],
            priority=priority or [],
            assignee_id=assignee or [],
            label_ids=label or [],
            search=search,
        ),
        sort=IssueSort(
            field=sort or settings.default_sort_field,
            direction=direction or settings.default_sort_direction,
        ),
        group_by=group_by or settings.default_group_by,
    )

    names = _member_names(tracker)
    for group, members in result.groups.items():
        table = Table(title=group, show_header=True, header_style="bold magenta")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Title")
        table.add_column("Status", no_wrap=True)
        table.add_column("Priority", no_wrap=True)
        table.add_column("Assignee")
        for issue in members:
            table.add_row(
                issue.identifier,
                issue.title,
                issue.status.value,
                f"[{PRIORITY_STYLE[issue.priority]}]{issue.priority.value}[/]",
                names.get(issue.assignee_id, issue.assignee_id or "-"),
            )
        console.print(table)

    console.print(f"{result.filtered_count} of {result.total_count} issues")


@app.command()
def activity(
    path: Optional[Path] = typer.Option(None, "--file", "-f", help="Snapshot file"),
    identifier: str = typer.Argument(..., help="Issue identifier, e.g. SO-1"),
):
    """Show the activity trail of one issue."""
    tracker = _load(path)
    issue = tracker.issues.get_by_identifier(identifier)
    if issue is None:
        console.print(f"[red]Unknown issue:[/red] {identifier}")
        raise typer.Exit(code=1)

    names = _member_names(tracker)
    table = Table(title=f"{issue.identifier} {issue.title}", show_header=True)
    table.add_column("When", no_wrap=True)
    table.add_column("Who")
    table.add_column("Action", style="cyan", no_wrap=True)
    table.add_column("Field")
    table.add_column("From")
    table.add_column("To")
    for entry in tracker.activity.get_activities_for_issue(issue.id):
        table.add_row(
            entry.timestamp.strftime("%Y-%m-%d %H:%M"),
            names.get(entry.user_id, entry.user_id or "system"),
            entry.action.value,
            entry.field or "",
            entry.old_value or "",
            entry.new_value or "",
        )
    console.print(table)


@app.command()
def views(
    path: Optional[Path] = typer.Option(None, "--file", "-f", help="Snapshot file"),
    prefix: str = typer.Argument(..., help="Project prefix"),
):
    """List the saved views of a project."""
    tracker = _load(path)
    project = tracker.projects.get_by_prefix(prefix)
    if project is None:
        console.print(f"[red]Unknown project:[/red] {prefix}")
        raise typer.Exit(code=1)

    table = Table(title=f"Saved views: {project.name}", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Filters")
    for view in tracker.views.get_saved_views_for_project(project.id):
        filters = view.filters.model_dump(exclude_defaults=True, mode="json")
        table.add_row(view.name, ", ".join(f"{k}={v}" for k, v in filters.items()) or "-")
    console.print(table)


if __name__ == "__main__":
    app()
