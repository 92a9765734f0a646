#!/usr/bin/env python3
"""Unit tests for TodoController."""

import pytest

from application.todo_controller import TodoController, TodoState, TaskCounts
from core import EMPTY_TASK, NOTHING_TO_CLEAR, Task, TaskFilter, ValidationError


class MemoryStore:
    def __init__(self, tasks=None):
        self.saved = [list(tasks or [])]
        self.save_calls = 0

    def load(self):
        return list(self.saved[-1])

    def save(self, tasks):
        self.save_calls += 1
        self.saved.append([Task(t.id, t.text, t.completed, t.created_at) for t in tasks])


class ScriptedPrompts:
    def __init__(self, answer=True):
        self.answer = answer
        self.confirmations = []
        self.notifications = []

    def confirm(self, message):
        self.confirmations.append(message)
        return self.answer

    def notify(self, message):
        self.notifications.append(message)


def make_controller(tasks=None, answer=True):
    store = MemoryStore(tasks)
    prompts = ScriptedPrompts(answer)
    return TodoController(store, prompts, language="en"), store, prompts


def visible_ids(ctl):
    return [t.id for t in ctl.visible_tasks()]


class TestAdd:
    @pytest.mark.parametrize("raw", ["buy milk", "  padded  ", "x", "牛乳を買う"])
    def test_add_prepends_active_task(self, raw):
        ctl, store, _ = make_controller([Task(1, "existing")])
        task = ctl.add(raw)
        assert len(ctl.tasks) == 2
        assert ctl.tasks[0] is task
        assert task.text == raw.strip()
        assert task.completed is False
        assert store.saved[-1][0].text == raw.strip()

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
    def test_add_empty_raises_and_leaves_list(self, raw):
        ctl, store, _ = make_controller([Task(1, "existing")])
        with pytest.raises(ValidationError) as exc:
            ctl.add(raw)
        assert exc.value.reason == EMPTY_TASK
        assert exc.value.context == "add"
        assert len(ctl.tasks) == 1
        assert store.save_calls == 0

    def test_add_assigns_unique_ids(self):
        ctl, _, _ = make_controller()
        ids = {ctl.add(f"task {i}").id for i in range(20)}
        assert len(ids) == 20

    def test_add_notifies_listeners(self):
        ctl, _, _ = make_controller()
        calls = []
        ctl.add_listener(lambda: calls.append(1))
        ctl.add("one")
        assert calls == [1]


class TestToggleAndFilter:
    def test_toggle_twice_is_identity(self):
        ctl, _, _ = make_controller([Task(1, "a"), Task(2, "b", completed=True)])
        for tid in (1, 2):
            before = ctl.find(tid).completed
            ctl.toggle_complete(tid)
            assert ctl.find(tid).completed is (not before)
            ctl.toggle_complete(tid)
            assert ctl.find(tid).completed is before

    def test_toggle_unknown_id_is_noop(self):
        ctl, store, _ = make_controller([Task(1, "a")])
        assert ctl.toggle_complete(999) is None
        assert store.save_calls == 0

    def test_active_and_completed_partition_all(self):
        ctl, _, _ = make_controller(
            [Task(1, "a"), Task(2, "b", completed=True), Task(3, "c"), Task(4, "d", completed=True)]
        )
        ctl.set_filter("active")
        active = set(visible_ids(ctl))
        ctl.set_filter("completed")
        completed = set(visible_ids(ctl))
        ctl.set_filter("all")
        everything = set(visible_ids(ctl))
        assert active | completed == everything
        assert not active & completed

    def test_visible_tasks_is_recomputed(self):
        ctl, _, _ = make_controller([Task(1, "a")])
        first = ctl.visible_tasks()
        ctl.toggle_complete(1)
        ctl.set_filter(TaskFilter.ACTIVE)
        assert visible_ids(ctl) == []
        # An earlier projection is independent of later calls.
        assert list(ctl.visible_tasks()) == []
        assert first is not ctl.visible_tasks()

    def test_set_filter_does_not_persist(self):
        ctl, store, _ = make_controller([Task(1, "a")])
        ctl.set_filter("completed")
        assert ctl.task_filter is TaskFilter.COMPLETED
        assert store.save_calls == 0

    def test_set_filter_rejects_unknown(self):
        ctl, _, _ = make_controller()
        with pytest.raises(ValueError):
            ctl.set_filter("archived")

    def test_counts_ignore_filter(self):
        ctl, _, _ = make_controller([Task(1, "a"), Task(2, "b", completed=True)])
        ctl.set_filter("completed")
        assert ctl.counts() == TaskCounts(total=2, active=1, completed=1)


class TestDelete:
    def test_delete_requires_confirmation(self):
        ctl, store, prompts = make_controller([Task(1, "a"), Task(2, "b")], answer=False)
        assert ctl.delete(1) is False
        assert len(ctl.tasks) == 2
        assert prompts.confirmations and "a" in prompts.confirmations[0]
        assert store.save_calls == 0

    def test_delete_accepted(self):
        ctl, store, _ = make_controller([Task(1, "a"), Task(2, "b")])
        assert ctl.delete(1) is True
        assert [t.id for t in ctl.tasks] == [2]
        assert [t.id for t in store.saved[-1]] == [2]

    def test_delete_unknown_id_skips_prompt(self):
        ctl, _, prompts = make_controller([Task(1, "a")])
        assert ctl.delete(42) is False
        assert prompts.confirmations == []

    def test_delete_clears_edit_cursor(self):
        ctl, _, _ = make_controller([Task(1, "a")])
        ctl.begin_edit(1)
        ctl.delete(1)
        assert ctl.editing_id is None


class TestEdit:
    def test_begin_edit_sets_cursor_without_mutation(self):
        ctl, store, _ = make_controller([Task(1, "a")])
        ctl.begin_edit(1)
        assert ctl.editing_id == 1
        assert ctl.find(1).text == "a"
        assert store.save_calls == 0

    def test_begin_edit_unknown_id_ignored(self):
        ctl, _, _ = make_controller([Task(1, "a")])
        ctl.begin_edit(7)
        assert ctl.editing_id is None

    def test_commit_edit_trims_and_persists(self):
        ctl, store, _ = make_controller([Task(1, "a")])
        ctl.begin_edit(1)
        ctl.commit_edit(1, "  renamed ")
        assert ctl.find(1).text == "renamed"
        assert ctl.editing_id is None
        assert store.saved[-1][0].text == "renamed"

    def test_commit_whitespace_keeps_cursor_and_text(self):
        ctl, store, _ = make_controller([Task(1, "a")])
        ctl.begin_edit(1)
        with pytest.raises(ValidationError) as exc:
            ctl.commit_edit(1, "   ")
        assert exc.value.context == "edit"
        assert ctl.find(1).text == "a"
        assert ctl.editing_id == 1
        assert store.save_calls == 0

    def test_commit_edit_keeps_id_and_created_at(self):
        original = Task(1, "a", created_at="2024-01-01T00:00:00.000Z")
        ctl, _, _ = make_controller([original])
        ctl.begin_edit(1)
        task = ctl.commit_edit(1, "b")
        assert task.id == 1
        assert task.created_at == "2024-01-01T00:00:00.000Z"

    def test_commit_edit_unknown_id_clears_cursor(self):
        ctl, store, _ = make_controller([Task(1, "a")])
        ctl.state.editing_id = 5
        assert ctl.commit_edit(5, "text") is None
        assert ctl.editing_id is None
        assert store.save_calls == 0

    def test_cancel_edit(self):
        ctl, store, _ = make_controller([Task(1, "a")])
        ctl.begin_edit(1)
        ctl.cancel_edit()
        assert ctl.editing_id is None
        assert ctl.find(1).text == "a"
        assert store.save_calls == 0


class TestClearCompleted:
    def test_nothing_to_clear(self):
        ctl, _, prompts = make_controller([Task(1, "a")])
        with pytest.raises(ValidationError) as exc:
            ctl.clear_completed()
        assert exc.value.reason == NOTHING_TO_CLEAR
        assert prompts.confirmations == []

    def test_confirmation_mentions_count(self):
        ctl, _, prompts = make_controller(
            [Task(1, "a", completed=True), Task(2, "b", completed=True), Task(3, "c")], answer=False
        )
        assert ctl.clear_completed() == 0
        assert "2" in prompts.confirmations[0]
        assert len(ctl.tasks) == 3

    def test_clear_removes_completed(self):
        ctl, store, _ = make_controller([Task(1, "a", completed=True), Task(2, "b")])
        assert ctl.clear_completed() == 1
        assert [t.id for t in ctl.tasks] == [2]
        assert [t.id for t in store.saved[-1]] == [2]


class TestReport:
    def test_report_uses_context_message(self):
        ctl, _, prompts = make_controller()
        ctl.report(ValidationError(EMPTY_TASK, context="add"))
        ctl.report(ValidationError(NOTHING_TO_CLEAR, context="clear"))
        assert prompts.notifications == ["Please enter a task", "There are no completed tasks"]


class TestScenarios:
    def test_buy_milk_lifecycle(self):
        ctl, _, _ = make_controller()
        task = ctl.add("buy milk")
        assert [(t.text, t.completed) for t in ctl.tasks] == [("buy milk", False)]
        ctl.toggle_complete(task.id)
        assert ctl.find(task.id).completed is True
        ctl.clear_completed()
        assert ctl.tasks == ()
        with pytest.raises(ValidationError) as exc:
            ctl.clear_completed()
        assert exc.value.reason == NOTHING_TO_CLEAR

    def test_newest_first_and_filters(self):
        ctl, _, _ = make_controller()
        a = ctl.add("a")
        b = ctl.add("b")
        assert [t.text for t in ctl.tasks] == ["b", "a"]
        ctl.set_filter("active")
        assert visible_ids(ctl) == [b.id, a.id]
        ctl.toggle_complete(b.id)
        ctl.set_filter("completed")
        assert visible_ids(ctl) == [b.id]

    def test_explicit_state_skips_store_load(self):
        store = MemoryStore([Task(1, "stored")])
        ctl = TodoController(store, ScriptedPrompts(), state=TodoState(tasks=[Task(9, "given")]), language="en")
        assert [t.id for t in ctl.tasks] == [9]
