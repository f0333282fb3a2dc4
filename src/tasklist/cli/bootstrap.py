# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings and wires
a fresh in-memory store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..core.store import TaskListStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(
        settings=settings,
        store=TaskListStore(),
        sort_by=settings.default_sort,
    )
    logger.debug("Initial state ready (sort=%s color=%s).", state.sort_by, settings.color)
    return state
