# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.models import SortKey
from tasklist.core.state import AppState
from tasklist.core.store import TaskListStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the view.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="To-Do List",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        default_sort=SortKey.CREATED_AT,
        color=False,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskListStore:
    return TaskListStore(clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskListStore) -> AppState:
    return AppState(settings=settings, store=store, sort_by=settings.default_sort)
