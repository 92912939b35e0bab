"""Shared application state for request handlers."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from todomvc.models import TaskFilter, ToggleAction
from todomvc.repository import TaskRepository


class ReadWriteLock:
    """Many readers or one writer.

    Waiting writers block new readers, so a steady stream of reads cannot
    starve a write.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


@dataclass
class AppState:
    """Everything a request handler may touch.

    One instance per application, handed to the handlers by the app factory.
    Hold `lock.read()` for lookups and `lock.write()` for anything that
    mutates the repository or the UI selections.
    """

    repo: TaskRepository = field(default_factory=TaskRepository)
    selected_filter: TaskFilter = TaskFilter.ALL
    toggle_action: ToggleAction = ToggleAction.CHECK
    lock: ReadWriteLock = field(default_factory=ReadWriteLock, repr=False)

    def settle_toggle_action(self) -> ToggleAction:
        """Offer Uncheck once every task is completed, Check otherwise."""
        if self.repo.num_all and self.repo.num_completed == self.repo.num_all:
            self.toggle_action = ToggleAction.UNCHECK
        else:
            self.toggle_action = ToggleAction.CHECK
        return self.toggle_action
