"""In-memory task repository.

Owns the keyed task collection plus three running counters (all, active,
completed). Every public method leaves the counters consistent with the
collection before it returns:

    num_all == len(items)
    num_active + num_completed == num_all

The repository does no locking of its own; callers sharing one instance
between threads go through `todomvc.state.AppState`.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace

from todomvc.models import Task, TaskFilter, ToggleAction

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    """Raised when a single-task operation is given an unknown id."""

    def __init__(self, task_id: uuid.UUID) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


@dataclass(frozen=True)
class TaskCounts:
    """Snapshot of the repository counters."""

    all: int = 0
    active: int = 0
    completed: int = 0


class TaskRepository:
    """Keyed task collection with denormalised counters."""

    def __init__(self) -> None:
        self.items: dict[uuid.UUID, Task] = {}
        self.num_all = 0
        self.num_active = 0
        self.num_completed = 0

    def __len__(self) -> int:
        return self.num_all

    def counts(self) -> TaskCounts:
        return TaskCounts(
            all=self.num_all,
            active=self.num_active,
            completed=self.num_completed,
        )

    def get(self, task_id: uuid.UUID) -> Task:
        """Return a copy of the task with the given id."""
        task = self.items.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return replace(task)

    def list(self, task_filter: TaskFilter = TaskFilter.ALL) -> list[Task]:
        """Return copies of matching tasks, newest first.

        Tasks created at the same instant come out in reverse insertion order.
        """
        newest_first = reversed(list(self.items.values()))
        tasks = [replace(task) for task in newest_first if task_filter.matches(task)]
        tasks.sort(key=lambda t: t.created_at, reverse=True)
        return tasks

    def create(self, text: str) -> Task:
        """Insert a new active task and return a copy of it."""
        task = Task.new(text)
        self.items[task.id] = task
        self.num_all += 1
        self.num_active += 1
        logger.debug("Task created id=%s", task.id)
        return replace(task)

    def update(
        self,
        task_id: uuid.UUID,
        text: str | None = None,
        is_completed: bool | None = None,
    ) -> Task:
        """Change the text and/or completion flag of a task.

        Omitted fields are left alone. The counters move only when the
        completion flag actually flips, so repeating an update is harmless.
        """
        task = self.items.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        if is_completed is not None and is_completed != task.is_completed:
            task.is_completed = is_completed
            if is_completed:
                self.num_completed += 1
                self.num_active -= 1
            else:
                self.num_completed -= 1
                self.num_active += 1

        if text is not None:
            task.text = text

        logger.debug("Task updated id=%s is_completed=%s", task.id, task.is_completed)
        return replace(task)

    def delete(self, task_id: uuid.UUID) -> None:
        """Remove a task."""
        task = self.items.pop(task_id, None)
        if task is None:
            raise TaskNotFoundError(task_id)

        if task.is_completed:
            self.num_completed -= 1
        else:
            self.num_active -= 1
        self.num_all -= 1
        logger.debug("Task deleted id=%s", task_id)

    def delete_completed(self) -> None:
        """Remove every completed task in one step."""
        removed = [task_id for task_id, task in self.items.items() if task.is_completed]
        for task_id in removed:
            del self.items[task_id]

        self.num_all -= len(removed)
        self.num_completed = 0
        logger.debug("Deleted %d completed task(s)", len(removed))

    def toggle_all(self, action: ToggleAction) -> None:
        """Set every task's completion flag to the action's target value."""
        for task in self.items.values():
            task.is_completed = action.is_completed

        if action.is_completed:
            self.num_completed = self.num_all
            self.num_active = 0
        else:
            self.num_completed = 0
            self.num_active = self.num_all
        logger.debug("Toggled all tasks action=%s count=%d", action, self.num_all)
