# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the view layer.

Commands and the renderer depend on this Protocol rather than on
TaskListStore directly, which keeps them testable with fakes.
"""

from collections.abc import Callable
from typing import Any, Protocol


class TaskRepo(Protocol):
    @property
    def tasks(self) -> tuple[Any, ...]: ...
    def get(self, task_id: int) -> Any | None: ...
    def is_editing(self, task_id: int) -> bool: ...
    def subscribe(self, listener: Callable[[Any], None]) -> Callable[[], None]: ...

    def add(self, text: str) -> Any | None: ...
    def remove(self, task_id: int) -> None: ...
    def set_text(self, task_id: int, text: str) -> None: ...
    def toggle_editing(self, task_id: int) -> None: ...
    def toggle_completed(self, task_id: int) -> None: ...
    def set_priority(self, task_id: int, priority: int) -> None: ...
