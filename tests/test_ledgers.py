"""Relation, sub-task, time tracking and saved view ledger tests."""

import math

import pytest

from issue_engine.tracker import ActivityAction, IssueFilters, RelationType, TimeTracking


def last_entry(tracker, issue_id):
    return tracker.activity.get_activities_for_issue(issue_id)[-1]


class TestRelations:
    """Typed edges between issues."""

    def test_add_relation(self, tracker, make_issue):
        a, b = make_issue("A"), make_issue("B")
        relation = tracker.relations.add_relation(a.id, "blocks", b.id)
        assert relation.type == RelationType.BLOCKS
        entry = last_entry(tracker, a.id)
        assert entry.action == ActivityAction.RELATION_ADDED
        assert (entry.field, entry.old_value, entry.new_value) == (
            "relation",
            None,
            f"blocks:{b.id}",
        )

    def test_relations_queried_from_either_end(self, tracker, make_issue):
        a, b, c = make_issue("A"), make_issue("B"), make_issue("C")
        ab = tracker.relations.add_relation(a.id, "blocks", b.id)
        bc = tracker.relations.add_relation(b.id, "related", c.id)
        assert tracker.relations.get_relations_for_issue(b.id) == [ab, bc]
        assert tracker.relations.get_relations_for_issue(a.id) == [ab]

    def test_duplicates_and_self_relations_are_kept(self, tracker, make_issue):
        a, b = make_issue("A"), make_issue("B")
        tracker.relations.add_relation(a.id, "blocks", b.id)
        tracker.relations.add_relation(a.id, "blocks", b.id)
        tracker.relations.add_relation(a.id, "related", a.id)
        assert len(tracker.relations.get_relations_for_issue(a.id)) == 3

    def test_remove_relation(self, tracker, make_issue):
        a, b = make_issue("A"), make_issue("B")
        relation = tracker.relations.add_relation(a.id, "duplicates", b.id)
        assert tracker.relations.remove_relation(relation.id) is True
        assert tracker.relations.get_relations_for_issue(a.id) == []
        entry = last_entry(tracker, a.id)
        assert entry.action == ActivityAction.RELATION_REMOVED
        assert entry.old_value == f"duplicates:{b.id}"

    def test_remove_missing_is_noop(self, tracker):
        before = tracker.store.state
        assert tracker.relations.remove_relation("missing") is False
        assert tracker.store.state is before

    def test_invalid_type_rejected(self, tracker, make_issue):
        a, b = make_issue("A"), make_issue("B")
        with pytest.raises(ValueError):
            tracker.relations.add_relation(a.id, "parent_of", b.id)


class TestSubTasks:
    """Per-issue checklists."""

    def test_add_in_insertion_order(self, tracker, make_issue):
        issue = make_issue()
        first = tracker.subtasks.add_subtask(issue.id, "First")
        second = tracker.subtasks.add_subtask(issue.id, "Second")
        assert tracker.subtasks.get_subtasks_for_issue(issue.id) == [first, second]
        assert first.completed is False
        entry = last_entry(tracker, issue.id)
        assert entry.action == ActivityAction.SUBTASK_ADDED
        assert entry.new_value == "Second"

    def test_toggle(self, tracker, make_issue):
        issue = make_issue()
        subtask = tracker.subtasks.add_subtask(issue.id, "Write tests")

        toggled = tracker.subtasks.toggle_subtask(subtask.id)
        assert toggled.completed is True
        entry = last_entry(tracker, issue.id)
        assert entry.action == ActivityAction.SUBTASK_TOGGLED
        assert (entry.field, entry.old_value, entry.new_value) == (
            "Write tests",
            "incomplete",
            "completed",
        )

        tracker.subtasks.toggle_subtask(subtask.id)
        entry = last_entry(tracker, issue.id)
        assert (entry.old_value, entry.new_value) == ("completed", "incomplete")
        assert entry.payload.completed is False

    def test_remove(self, tracker, make_issue):
        issue = make_issue()
        subtask = tracker.subtasks.add_subtask(issue.id, "Step")
        assert tracker.subtasks.remove_subtask(subtask.id) is True
        assert tracker.subtasks.get_subtasks_for_issue(issue.id) == []
        entry = last_entry(tracker, issue.id)
        assert entry.action == ActivityAction.SUBTASK_REMOVED
        assert entry.old_value == "Step"

    def test_empty_title_accepted(self, tracker, make_issue):
        issue = make_issue()
        subtask = tracker.subtasks.add_subtask(issue.id, "")
        assert subtask.title == ""
        assert tracker.subtasks.get_subtasks_for_issue(issue.id) == [subtask]

    def test_missing_ids_are_noops(self, tracker):
        before = tracker.store.state
        assert tracker.subtasks.toggle_subtask("missing") is None
        assert tracker.subtasks.remove_subtask("missing") is False
        assert tracker.store.state is before


class TestTimeTracking:
    """Per-issue estimate and logged minutes."""

    def test_default_entry(self, tracker):
        assert tracker.time.get_time_tracking("issue-x") == TimeTracking()

    def test_log_time_accumulates(self, tracker, make_issue):
        issue = make_issue()
        tracker.time.log_time(issue.id, 30)
        tracker.time.log_time(issue.id, 15)
        assert tracker.time.get_time_tracking(issue.id).logged_minutes == 45
        entry = last_entry(tracker, issue.id)
        assert entry.action == ActivityAction.TIME_LOGGED
        assert (entry.field, entry.new_value) == ("time", "15")

    def test_estimate_set_and_cleared(self, tracker, make_issue):
        issue = make_issue()
        tracker.time.set_time_estimate(issue.id, 90)
        assert tracker.time.get_time_tracking(issue.id).estimate_minutes == 90
        assert last_entry(tracker, issue.id).new_value == "90"

        tracker.time.set_time_estimate(issue.id, None)
        assert tracker.time.get_time_tracking(issue.id).estimate_minutes is None
        entry = last_entry(tracker, issue.id)
        assert entry.action == ActivityAction.ESTIMATE_CHANGED
        assert (entry.field, entry.new_value) == ("estimate", "none")

    def test_estimate_keeps_logged_minutes(self, tracker):
        tracker.time.log_time("issue-x", 20)
        tracker.time.set_time_estimate("issue-x", 60)
        assert tracker.time.get_time_tracking("issue-x") == TimeTracking(
            estimate_minutes=60, logged_minutes=20
        )

    @pytest.mark.parametrize("minutes", [0, -5, 1.5, math.nan, math.inf, True, "30"])
    def test_invalid_log_time_ignored(self, tracker, minutes):
        before = tracker.store.state
        assert tracker.time.log_time("issue-x", minutes) is None
        assert tracker.store.state is before

    @pytest.mark.parametrize("minutes", [-1, 2.5, math.nan, False])
    def test_invalid_estimate_ignored(self, tracker, minutes):
        before = tracker.store.state
        assert tracker.time.set_time_estimate("issue-x", minutes) is None
        assert tracker.store.state is before

    def test_zero_estimate_allowed(self, tracker):
        tracker.time.set_time_estimate("issue-x", 0)
        assert tracker.time.get_time_tracking("issue-x").estimate_minutes == 0

    def test_integral_float_accepted(self, tracker):
        tracker.time.log_time("issue-x", 30.0)
        assert tracker.time.get_time_tracking("issue-x").logged_minutes == 30

    def test_failing_listener_does_not_double_log(self, store, tracker, make_issue):
        issue = make_issue()

        def broken(_state):
            raise OSError("disk full")

        store.subscribe(broken)
        tracker.time.log_time(issue.id, 30)
        assert tracker.time.get_time_tracking(issue.id).logged_minutes == 30


class TestSavedViews:
    """Named filter presets."""

    def test_save_and_list(self, tracker, project_id):
        first = tracker.views.save_view(project_id, "Mine", {"assignee_id": ["u1"]})
        second = tracker.views.save_view(project_id, "Mine", IssueFilters(search="bug"))
        tracker.views.save_view("other-project", "Theirs")
        views = tracker.views.get_saved_views_for_project(project_id)
        assert [v.id for v in views] == [first, second]
        assert views[0].filters.assignee_id == ["u1"]
        assert views[1].filters.search == "bug"

    def test_delete(self, tracker, project_id):
        view_id = tracker.views.save_view(project_id, "Mine")
        assert tracker.views.delete_saved_view(view_id) is True
        assert tracker.views.get_saved_views_for_project(project_id) == []
        assert tracker.views.delete_saved_view(view_id) is False

    def test_empty_name_accepted(self, tracker, project_id):
        view_id = tracker.views.save_view(project_id, "")
        views = tracker.views.get_saved_views_for_project(project_id)
        assert [(v.id, v.name) for v in views] == [(view_id, "")]
