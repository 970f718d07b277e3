"""Activity log tests: tracked updates, idempotence and explicit logging."""

from datetime import date

import pytest

from issue_engine.tracker import ActivityAction, IssueUpdate


def actions(tracker, issue_id):
    return [a.action for a in tracker.activity.get_activities_for_issue(issue_id)]


class TestCreatedEntry:
    """Issue creation logs exactly one entry."""

    def test_created_entry(self, tracker, make_issue):
        issue = make_issue()
        entries = tracker.activity.get_activities_for_issue(issue.id)
        assert len(entries) == 1
        assert entries[0].action == ActivityAction.CREATED
        assert entries[0].user_id is None

    def test_created_entry_records_user(self, tracker, project_id):
        issue = tracker.issues.create({"project_id": project_id, "title": "x"}, user_id="u1")
        assert tracker.activity.get_activities_for_issue(issue.id)[0].user_id == "u1"


class TestTrackedUpdate:
    """update_with_activity logs one entry per changed tracked field."""

    def test_status_change(self, tracker, make_issue):
        issue = make_issue()
        tracker.issues.update_with_activity(issue.id, {"status": "in_progress"}, user_id="u1")
        entry = tracker.activity.get_activities_for_issue(issue.id)[-1]
        assert entry.action == ActivityAction.STATUS_CHANGED
        assert (entry.field, entry.old_value, entry.new_value) == (
            "status",
            "todo",
            "in_progress",
        )
        assert entry.user_id == "u1"

    def test_multiple_fields_one_entry_each(self, tracker, make_issue):
        issue = make_issue()
        tracker.issues.update_with_activity(
            issue.id,
            IssueUpdate(
                status="done",
                priority="urgent",
                assignee_id="u1",
                label_ids=["l1"],
                due_date=date(2024, 6, 1),
                title="Not tracked",
            ),
        )
        assert actions(tracker, issue.id) == [
            ActivityAction.CREATED,
            ActivityAction.STATUS_CHANGED,
            ActivityAction.PRIORITY_CHANGED,
            ActivityAction.ASSIGNEE_CHANGED,
            ActivityAction.LABELS_CHANGED,
            ActivityAction.DUE_DATE_CHANGED,
        ]
        assert tracker.issues.get(issue.id).title == "Not tracked"

    @pytest.mark.parametrize(
        "patch",
        [
            {"status": "todo"},
            {"priority": "none"},
            {"assignee_id": None},
            {"label_ids": []},
            {"due_date": None},
            {"title": "Only untracked"},
            {},
        ],
    )
    def test_unchanged_values_log_nothing(self, tracker, make_issue, patch):
        issue = make_issue()
        tracker.issues.update_with_activity(issue.id, patch)
        assert actions(tracker, issue.id) == [ActivityAction.CREATED]

    def test_idempotent(self, tracker, make_issue):
        issue = make_issue()
        tracker.issues.update_with_activity(issue.id, {"status": "done"})
        tracker.issues.update_with_activity(issue.id, {"status": "done"})
        assert actions(tracker, issue.id).count(ActivityAction.STATUS_CHANGED) == 1

    def test_labels_compared_as_sets(self, tracker, make_issue):
        issue = make_issue(label_ids=["b", "a"])
        tracker.issues.update_with_activity(issue.id, {"label_ids": ["a", "b"]})
        assert actions(tracker, issue.id) == [ActivityAction.CREATED]

        tracker.issues.update_with_activity(issue.id, {"label_ids": ["c", "a"]})
        entry = tracker.activity.get_activities_for_issue(issue.id)[-1]
        assert (entry.field, entry.old_value, entry.new_value) == ("labels", "a,b", "a,c")

    def test_assignee_cleared(self, tracker, make_issue):
        issue = make_issue(assignee_id="u1")
        tracker.issues.update_with_activity(issue.id, {"assignee_id": None})
        entry = tracker.activity.get_activities_for_issue(issue.id)[-1]
        assert (entry.field, entry.old_value, entry.new_value) == (
            "assignee",
            "u1",
            "unassigned",
        )

    def test_due_date_set(self, tracker, make_issue):
        issue = make_issue()
        tracker.issues.update_with_activity(issue.id, {"due_date": "2024-06-01"})
        entry = tracker.activity.get_activities_for_issue(issue.id)[-1]
        assert (entry.field, entry.old_value, entry.new_value) == (
            "dueDate",
            "none",
            "2024-06-01",
        )

    def test_update_and_entries_commit_together(self, store, tracker, make_issue):
        issue = make_issue()
        commits = []
        store.subscribe(lambda state: commits.append(state))
        tracker.issues.update_with_activity(issue.id, {"status": "done", "priority": "high"})
        assert len(commits) == 1
        assert commits[0].issues[issue.id].status.value == "done"
        assert len(commits[0].activities) == 3


class TestExplicitLogging:
    """add_activity appends free-form entries."""

    def test_add_activity(self, tracker, make_issue):
        issue = make_issue()
        entry = tracker.activity.add_activity(
            {
                "issue_id": issue.id,
                "action": "status_changed",
                "field": "status",
                "old_value": "todo",
                "new_value": "done",
            }
        )
        assert entry.id
        assert entry.timestamp is not None
        assert tracker.activity.get_activities_for_issue(issue.id)[-1] == entry

    def test_unknown_issue_listing_is_empty(self, tracker):
        tracker.activity.add_activity({"issue_id": "ghost", "action": "created"})
        assert tracker.activity.get_activities_for_issue("ghost") == []
        assert len(tracker.activity.list()) == 1
