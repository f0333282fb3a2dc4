# src/tasklist/view/render.py

"""
Pure text rendering of the task list.

One row per task, in display order:
    [x] #3  Buy milk                  High    (Edit) (Remove)
Completed tasks are struck through (ANSI) or, without color, wrapped in ~~.
"""

from __future__ import annotations

from ..core.models import Priority, SortKey, Task
from ..core.ports import TaskRepo
from ..core.sorting import sorted_tasks

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
STRIKE = "\033[9m"

PRIORITY_COLOR = {
    Priority.LOW: "\033[32m",
    Priority.MEDIUM: "\033[33m",
    Priority.HIGH: "\033[31m",
}

TEXT_WIDTH = 32


def _style(text: str, *codes: str, color: bool) -> str:
    if not color or not codes:
        return text
    return "".join(codes) + text + RESET


def render_task(task: Task, *, editing: bool, color: bool = False) -> str:
    box = "[x]" if task.completed else "[ ]"
    tid = f"#{task.id}"

    if editing:
        body = f"> {task.text}_"
        body = _style(body.ljust(TEXT_WIDTH), BOLD, color=color)
    elif task.completed:
        if color:
            body = _style(task.text, STRIKE, DIM, color=True) + " " * max(0, TEXT_WIDTH - len(task.text))
        else:
            body = f"~~{task.text}~~".ljust(TEXT_WIDTH)
    else:
        body = task.text.ljust(TEXT_WIDTH)

    label = task.priority_label.ljust(6)
    try:
        label = _style(label, PRIORITY_COLOR[Priority(task.priority)], color=color)
    except ValueError:
        pass

    toggle = "(Save)" if editing else "(Edit)"
    return f"{box} {tid:>4}  {body}  {label}  {toggle} (Remove)"


def render_board(
    store: TaskRepo,
    sort_by: SortKey,
    *,
    title: str = "To-Do List",
    color: bool = False,
) -> str:
    lines = [
        _style(title, BOLD, color=color),
        f"Sort by: {sort_by.label}",
        "",
    ]

    tasks = sorted_tasks(store.tasks, sort_by)
    if not tasks:
        lines.append(_style("(no tasks yet - type some text and press Enter)", DIM, color=color))
    for task in tasks:
        lines.append(render_task(task, editing=store.is_editing(task.id), color=color))

    return "\n".join(lines)
