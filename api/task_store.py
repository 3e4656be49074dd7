"""
Task Store - Ownership and mutation of the task collection.

Holds every task in memory, keyed by id in insertion order, and hands out ids
from a counter that starts at 1 and never goes backwards.
"""

import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from task_tracker.models import Task, TaskStatus
from task_tracker.utils.exceptions import TaskNotFoundError


# ============================================================================
# STORE CONTRACT
# ============================================================================

class TaskStore(ABC):
    """Operations every task store implementation provides."""

    @abstractmethod
    def create(self, title: str = "", description: str = "", status: str = "") -> Task:
        """Store a new task and return it with its assigned id."""

    @abstractmethod
    def list_all(self) -> List[Task]:
        """Return every task in creation order."""

    @abstractmethod
    def get(self, task_id: int) -> Task:
        """Return the task with *task_id* or raise TaskNotFoundError."""

    @abstractmethod
    def update(self, task_id: int, title: Optional[str] = None,
               description: Optional[str] = None, status: Optional[str] = None) -> Task:
        """Merge non-empty fields into a task or raise TaskNotFoundError."""

    @abstractmethod
    def delete(self, task_id: int) -> None:
        """Remove a task or raise TaskNotFoundError."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored tasks."""


# ============================================================================
# IN-MEMORY STORE
# ============================================================================

class InMemoryTaskStore(TaskStore):
    """
    Process-local task store.

    Every public method runs under a single lock, so concurrent requests see
    each operation as atomic. Tasks leave the store as copies; the only way
    to change a stored task is through update().
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1

    def create(self, title: str = "", description: str = "", status: str = "") -> Task:
        with self._lock:
            task = Task(
                id=self._next_id,
                title=title or "",
                description=description or "",
                status=status or TaskStatus.PENDING.value,
            )
            self._next_id += 1
            self._tasks[task.id] = task
            return task.copy()

    def list_all(self) -> List[Task]:
        with self._lock:
            return [t.copy() for t in self._tasks.values()]

    def get(self, task_id: int) -> Task:
        with self._lock:
            return self._find(task_id).copy()

    def update(self, task_id: int, title: Optional[str] = None,
               description: Optional[str] = None, status: Optional[str] = None) -> Task:
        """
        Overwrite title, description and status with the given values.

        An empty string or None leaves the stored field unchanged, so a field
        cannot be cleared through update().
        """
        with self._lock:
            task = self._find(task_id)
            if title:
                task.title = title
            if description:
                task.description = description
            if status:
                task.status = status
            return task.copy()

    def delete(self, task_id: int) -> None:
        with self._lock:
            self._find(task_id)
            del self._tasks[task_id]

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def reset(self) -> None:
        """Drop every task and restart ids at 1."""
        with self._lock:
            self._tasks.clear()
            self._next_id = 1

    def _find(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task
