"""End-to-end scenario through the service layer."""

from issue_engine.tracker import ActivityAction, IssueStatus, IssueTracker, ProjectCreate


def test_issue_lifecycle_end_to_end():
    """Create, track, relate and delete issues in one project."""
    tracker = IssueTracker()
    project_id = tracker.projects.create(ProjectCreate(name="Sonar", prefix="SO"))

    first = tracker.issues.create({"project_id": project_id, "title": "Fix bug"})
    assert first.identifier == "SO-1"
    assert first.status == IssueStatus.TODO
    entries = tracker.activity.get_activities_for_issue(first.id)
    assert [e.action for e in entries] == [ActivityAction.CREATED]

    tracker.issues.update_with_activity(first.id, {"status": "in_progress"})
    entries = tracker.activity.get_activities_for_issue(first.id)
    assert len(entries) == 2
    assert entries[1].action == ActivityAction.STATUS_CHANGED
    assert (entries[1].old_value, entries[1].new_value) == ("todo", "in_progress")

    second = tracker.issues.create({"project_id": project_id, "title": "Follow-up"})
    assert second.identifier == "SO-2"
    tracker.relations.add_relation(first.id, "blocks", second.id)
    assert len(tracker.relations.get_relations_for_issue(second.id)) == 1

    tracker.issues.delete(first.id)
    assert tracker.relations.get_relations_for_issue(second.id) == []
