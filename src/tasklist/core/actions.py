# src/tasklist/core/actions.py

from __future__ import annotations

import logging

from .models import SortKey, Task
from .state import AppState

logger = logging.getLogger(__name__)


def submit_draft(state: AppState) -> Task | None:
    """
    Submit the new-task input.
    The draft is cleared only when a task was actually created.
    """
    task = state.store.add(state.draft)
    if task is not None:
        state.draft = ""
    return task


def add_task(state: AppState, text: str) -> Task | None:
    """Type `text` into the new-task input and submit it."""
    state.draft = text
    return submit_draft(state)


def set_sort(state: AppState, key: SortKey) -> None:
    if state.sort_by is key:
        return
    logger.debug("Sort changed %s -> %s", state.sort_by, key)
    state.sort_by = key
    state.notify_view()
