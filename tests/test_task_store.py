"""
Unit tests for the in-memory task store.
"""

import threading

import pytest

from api.task_store import InMemoryTaskStore, TaskStore
from task_tracker.models import Task, TaskStatus
from task_tracker.utils.exceptions import TaskNotFoundError


class TestCreate:
    """Tests for InMemoryTaskStore.create."""

    def setup_method(self):
        self.store = InMemoryTaskStore()

    def test_store_implements_contract(self):
        assert isinstance(self.store, TaskStore)

    def test_missing_status_defaults_to_pending(self):
        task = self.store.create(title="Buy milk")

        assert task.status == TaskStatus.PENDING.value
        assert task.to_dict() == {
            "id": 1,
            "title": "Buy milk",
            "description": "",
            "status": "pending",
        }

    def test_explicit_status_is_kept(self):
        task = self.store.create(title="Ship it", status="in-review")
        assert task.status == "in-review"

    def test_ids_strictly_increase_from_one(self):
        ids = [self.store.create(title=f"task {i}").id for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_ids_not_reused_after_delete(self):
        first = self.store.create(title="a")
        self.store.delete(first.id)

        second = self.store.create(title="b")

        assert second.id == 2

    def test_returned_task_is_a_copy(self):
        task = self.store.create(title="original")
        task.title = "mutated"

        assert self.store.get(task.id).title == "original"


class TestLookup:
    """Tests for list_all and get."""

    def setup_method(self):
        self.store = InMemoryTaskStore()

    def test_list_empty_store(self):
        assert self.store.list_all() == []

    def test_list_preserves_creation_order(self):
        for title in ("A", "B", "C"):
            self.store.create(title=title)

        assert [t.title for t in self.store.list_all()] == ["A", "B", "C"]

    def test_get_existing(self):
        created = self.store.create(title="find me", description="details")

        found = self.store.get(created.id)

        assert found == created

    def test_get_missing_raises(self):
        with pytest.raises(TaskNotFoundError) as exc_info:
            self.store.get(42)

        assert exc_info.value.task_id == 42
        assert exc_info.value.http_status == 404


class TestUpdate:
    """Tests for the merge semantics of update."""

    def setup_method(self):
        self.store = InMemoryTaskStore()
        self.task = self.store.create(title="Buy milk", description="2 litres")

    def test_status_only_leaves_other_fields(self):
        updated = self.store.update(self.task.id, status="completed")

        assert updated.title == "Buy milk"
        assert updated.description == "2 litres"
        assert updated.status == "completed"

    def test_empty_strings_do_not_clear_fields(self):
        updated = self.store.update(self.task.id, title="", description="", status="")

        assert updated == self.task

    def test_update_is_visible_to_get(self):
        self.store.update(self.task.id, title="Buy oat milk")
        assert self.store.get(self.task.id).title == "Buy oat milk"

    def test_update_missing_raises(self):
        with pytest.raises(TaskNotFoundError):
            self.store.update(99, title="nope")


class TestDelete:
    """Tests for delete, count and reset."""

    def setup_method(self):
        self.store = InMemoryTaskStore()
        for title in ("A", "B", "C"):
            self.store.create(title=title)

    def test_delete_removes_only_that_task(self):
        self.store.delete(2)

        assert [t.id for t in self.store.list_all()] == [1, 3]
        assert self.store.count() == 2
        with pytest.raises(TaskNotFoundError):
            self.store.get(2)

    def test_delete_missing_raises(self):
        with pytest.raises(TaskNotFoundError):
            self.store.delete(7)
        assert self.store.count() == 3

    def test_reset_restarts_ids(self):
        self.store.reset()

        assert self.store.list_all() == []
        assert self.store.create(title="fresh").id == 1


class TestConcurrency:
    """Concurrent writers must never receive the same id."""

    def test_parallel_creates_get_unique_ids(self):
        store = InMemoryTaskStore()
        results = []
        results_lock = threading.Lock()

        def worker():
            for _ in range(50):
                task = store.create(title="parallel")
                with results_lock:
                    results.append(task.id)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 400
        assert sorted(results) == list(range(1, 401))
        assert [t.id for t in store.list_all()] == list(range(1, 401))


def test_task_from_dict_defaults():
    task = Task.from_dict({"id": 3, "title": "x"})
    assert task == Task(id=3, title="x", description="", status="pending")
