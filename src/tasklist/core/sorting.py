# src/tasklist/core/sorting.py

"""
Display order is a projection over the canonical collection.

Both keys sort descending; Python's sort is stable, so equal keys keep
their canonical (insertion) order.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import SortKey, Task


def sort_value(task: Task, key: SortKey) -> int:
    if key is SortKey.PRIORITY:
        return int(task.priority)
    return int(task.created_at)


def sorted_tasks(tasks: Iterable[Task], key: SortKey) -> list[Task]:
    """Return a new list ordered by `key`, descending. Input is not touched."""
    return sorted(tasks, key=lambda t: sort_value(t, key), reverse=True)
