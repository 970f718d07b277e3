"""Selection and bulk operation tests."""

from issue_engine.tracker import ActivityAction, IssueStatus, SelectionSet


class TestSelectionSet:
    """Process-local ordered selection."""

    def test_toggle(self):
        selection = SelectionSet()
        assert selection.toggle("a") is True
        assert "a" in selection
        assert selection.toggle("a") is False
        assert len(selection) == 0

    def test_select_all_replaces(self):
        selection = SelectionSet(["a"])
        selection.select_all(["b", "c", "b"])
        assert selection.ids == ["b", "c"]

    def test_clear(self):
        selection = SelectionSet(["a", "b"])
        selection.clear()
        assert list(selection) == []


class TestBulkUpdate:
    """One tracked update applied to every selected issue."""

    def test_updates_selected_and_clears_selection(self, tracker, make_issue):
        a, b, c = make_issue("A"), make_issue("B"), make_issue("C")
        tracker.bulk.toggle_issue_selection(a.id)
        tracker.bulk.toggle_issue_selection(c.id)

        updated = tracker.bulk.bulk_update_issues({"status": "done"}, user_id="u1")

        assert [i.id for i in updated] == [a.id, c.id]
        assert tracker.issues.get(a.id).status == IssueStatus.DONE
        assert tracker.issues.get(b.id).status == IssueStatus.TODO
        assert tracker.issues.get(c.id).status == IssueStatus.DONE
        assert tracker.bulk.selection == []
        for issue in (a, c):
            entry = tracker.activity.get_activities_for_issue(issue.id)[-1]
            assert entry.action == ActivityAction.STATUS_CHANGED
            assert entry.user_id == "u1"

    def test_missing_ids_skipped(self, tracker, make_issue):
        issue = make_issue()
        tracker.bulk.select_all_issues(["ghost", issue.id])
        updated = tracker.bulk.bulk_update_issues({"priority": "high"})
        assert [i.id for i in updated] == [issue.id]
        assert tracker.bulk.selection == []

    def test_single_commit(self, store, tracker, make_issue):
        a, b = make_issue("A"), make_issue("B")
        tracker.bulk.select_all_issues([a.id, b.id])
        commits = []
        store.subscribe(commits.append)
        tracker.bulk.bulk_update_issues({"assignee_id": "u1", "label_ids": ["bug"]})
        assert len(commits) == 1
        assert all(i.assignee_id == "u1" for i in commits[0].issues.values())

    def test_unchanged_fields_log_nothing(self, tracker, make_issue):
        issue = make_issue()
        tracker.bulk.select_all_issues([issue.id])
        tracker.bulk.bulk_update_issues({"status": "todo"})
        assert len(tracker.activity.get_activities_for_issue(issue.id)) == 1

    def test_empty_selection(self, tracker):
        assert tracker.bulk.bulk_update_issues({"status": "done"}) == []

    def test_failing_listener_does_not_interrupt(self, store, tracker, make_issue):
        a, b = make_issue("A"), make_issue("B")
        tracker.bulk.select_all_issues([a.id, b.id])

        def broken(_state):
            raise OSError("disk full")

        seen = []
        store.subscribe(broken)
        store.subscribe(seen.append)

        updated = tracker.bulk.bulk_update_issues({"status": "done"})

        assert len(updated) == 2
        assert all(i.status == IssueStatus.DONE for i in tracker.issues.list())
        assert tracker.bulk.selection == []
        assert seen == [store.state]


class TestBulkDelete:
    """Cascading delete of every selected issue."""

    def test_deletes_selected_with_cascade(self, tracker, make_issue):
        a, b, c = make_issue("A"), make_issue("B"), make_issue("C")
        tracker.relations.add_relation(a.id, "blocks", c.id)
        kept = tracker.relations.add_relation(c.id, "related", c.id)
        tracker.subtasks.add_subtask(b.id, "Step")
        tracker.time.log_time(a.id, 10)
        activity_count = len(tracker.store.state.activities)

        tracker.bulk.select_all_issues([a.id, b.id])
        assert tracker.bulk.bulk_delete_issues() == 2

        state = tracker.store.state
        assert list(state.issues) == [c.id]
        assert state.relations == [kept]
        assert state.sub_tasks == []
        assert state.time_tracking == {}
        assert len(state.activities) == activity_count
        assert tracker.bulk.selection == []

    def test_empty_selection(self, tracker, make_issue):
        make_issue()
        assert tracker.bulk.bulk_delete_issues() == 0
        assert len(tracker.issues.list()) == 1

    def test_failing_listener_after_delete(self, store, tracker, make_issue):
        a, b = make_issue("A"), make_issue("B")
        tracker.bulk.select_all_issues([a.id])

        def broken(_state):
            raise OSError("disk full")

        store.subscribe(broken)
        assert tracker.bulk.bulk_delete_issues() == 1
        assert list(store.state.issues) == [b.id]
        assert tracker.bulk.selection == []
