# src/tasklist/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .models import SortKey
from .ports import TaskRepo

ViewListener = Callable[["AppState"], None]


@dataclass
class AppState:
    """
    View state for one session.

    Durable data lives in `store`; this only holds what the view owns:
    the sort selection and the new-task draft buffer.
    """

    # Store Settings on the state for easy access in other modules later.
    settings: Any
    store: TaskRepo

    sort_by: SortKey = SortKey.CREATED_AT
    draft: str = ""

    view_listeners: list[ViewListener] = field(default_factory=list)

    def notify_view(self) -> None:
        for listener in list(self.view_listeners):
            listener(self)
