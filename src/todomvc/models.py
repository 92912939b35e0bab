"""Data models for todomvc."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


@dataclass
class Task:
    """A single to-do entry.

    `id` and `created_at` are fixed at construction; only `text` and
    `is_completed` change afterwards.
    """

    text: str
    is_completed: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def new(cls, text: str) -> Task:
        """Create a fresh, active task with a new id."""
        return cls(text=text)


class TaskFilter(Enum):
    """Which tasks a listing shows."""

    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, raw: str) -> TaskFilter:
        """Parse a query-string value such as ``Active`` (case-insensitive)."""
        for member in cls:
            if member.value.lower() == raw.strip().lower():
                return member
        raise ValueError(f"Unknown filter: {raw!r}")

    def matches(self, task: Task) -> bool:
        """Return True if the task belongs in this listing."""
        if self is TaskFilter.ACTIVE:
            return not task.is_completed
        if self is TaskFilter.COMPLETED:
            return task.is_completed
        return True

    def __str__(self) -> str:
        return self.value


class ToggleAction(Enum):
    """Bulk completion action offered by the toggle-all button."""

    CHECK = "Check"
    UNCHECK = "Uncheck"

    @classmethod
    def parse(cls, raw: str) -> ToggleAction:
        """Parse a query-string value such as ``Check`` (case-insensitive)."""
        for member in cls:
            if member.value.lower() == raw.strip().lower():
                return member
        raise ValueError(f"Unknown action: {raw!r}")

    @property
    def is_completed(self) -> bool:
        """The completion flag every task ends up with."""
        return self is ToggleAction.CHECK

    def inverse(self) -> ToggleAction:
        return ToggleAction.UNCHECK if self is ToggleAction.CHECK else ToggleAction.CHECK

    def __str__(self) -> str:
        return self.value
