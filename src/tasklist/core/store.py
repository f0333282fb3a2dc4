# src/tasklist/core/store.py

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Callable
from dataclasses import replace

from .models import Priority, Task

logger = logging.getLogger(__name__)

StoreListener = Callable[["TaskListStore"], None]
Clock = Callable[[], int]


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class TaskListStore:
    """
    In-memory task list.

    Two maps:
    - durable task records, kept in insertion (canonical) order
    - transient editing state: task id -> text snapshot taken on entering edit mode

    Every operation is total: unknown ids are a no-op, never an error.
    Listeners are notified only when something actually changed.
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._tasks: dict[int, Task] = {}
        self._editing: dict[int, str] = {}
        self._listeners: list[StoreListener] = []
        self._ids = itertools.count(1)
        self._clock: Clock = clock or _now_ms
        self._last_created_at = 0

    # ---- read API ----
    # Reads hand out copies; records change only through the mutations below.

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(replace(t) for t in self._tasks.values())

    def get(self, task_id: int) -> Task | None:
        task = self._tasks.get(task_id)
        return replace(task) if task is not None else None

    def is_editing(self, task_id: int) -> bool:
        return task_id in self._editing

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    # ---- subscriptions ----

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register `listener`; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Store listener %r failed.", listener)

    def _next_created_at(self) -> int:
        ts = max(int(self._clock()), self._last_created_at + 1)
        self._last_created_at = ts
        return ts

    # ---- mutations ----

    def add(self, text: str) -> Task | None:
        clean = (text or "").strip()
        if not clean:
            logger.debug("Ignoring blank task text.")
            return None

        task = Task(id=next(self._ids), text=clean, created_at=self._next_created_at())
        self._tasks[task.id] = task
        logger.debug("Task added id=%s created_at=%s", task.id, task.created_at)
        self._notify()
        return replace(task)

    def remove(self, task_id: int) -> None:
        if self._tasks.pop(task_id, None) is None:
            return
        self._editing.pop(task_id, None)
        logger.debug("Task removed id=%s", task_id)
        self._notify()

    def set_text(self, task_id: int, text: str) -> None:
        """
        Replace text verbatim; blank values are allowed while editing.
        Tasks not in edit mode are left alone, so a task at rest never goes blank.
        """
        task = self._tasks.get(task_id)
        if task is None or task_id not in self._editing:
            return
        task.text = text
        self._notify()

    def toggle_editing(self, task_id: int) -> None:
        task = self._tasks.get(task_id)
        if task is None:
            return

        if task_id in self._editing:
            snapshot = self._editing.pop(task_id)
            if not task.text.strip():
                # A task at rest never has blank text.
                logger.debug("Blank text on save for id=%s; restoring previous text.", task_id)
                task.text = snapshot
        else:
            self._editing[task_id] = task.text
        self._notify()

    def toggle_completed(self, task_id: int) -> None:
        task = self._tasks.get(task_id)
        if task is None:
            return
        task.completed = not task.completed
        self._notify()

    def set_priority(self, task_id: int, priority: int) -> None:
        """Values outside Low/Medium/High are rejected (no-op)."""
        task = self._tasks.get(task_id)
        if task is None:
            return
        try:
            value = Priority(priority)
        except ValueError:
            logger.debug("Rejected priority=%r for id=%s", priority, task_id)
            return
        task.priority = value
        self._notify()
