# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.actions import add_task, set_sort
from ..core.models import Priority, SortKey
from ..core.state import AppState

# (state, args, rest) -> reply. `rest` is the raw text after the command name.
CommandHandler = Callable[[AppState, list[str], str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string ("" when the re-rendered list says it all)
        or None if not a command.
        """
        if not line.startswith("/"):
            return None

        head, _, rest = line[1:].partition(" ")
        name = head.strip().lower()
        if not name:
            return "Empty command. Use /help to list available commands."

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, rest.split(), rest)

    def build_help(self) -> str:
        lines = [
            "Type any text and press Enter to add a task.",
            "Available commands:",
        ]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def _missing(task_id: int) -> str:
    return f"No task #{task_id}."


def cmd_help(state: AppState, args: list[str], rest: str) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], rest: str) -> str:
    # Blank input is dropped silently, same as pressing Enter on an empty field.
    add_task(state, rest)
    return ""


def cmd_list(state: AppState, args: list[str], rest: str) -> str:
    state.notify_view()
    return ""


def cmd_sort(state: AppState, args: list[str], rest: str) -> str:
    """
    /sort           -> show current order
    /sort created   -> newest first
    /sort priority  -> highest priority first
    """
    if not args:
        return f"Sorted by {state.sort_by.label}. Use /sort created or /sort priority."

    key = SortKey.parse(args[0])
    if key is None:
        return "Usage: /sort created | /sort priority."

    set_sort(state, key)
    return ""


def cmd_done(state: AppState, args: list[str], rest: str) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>."
    if state.store.get(task_id) is None:
        return _missing(task_id)
    state.store.toggle_completed(task_id)
    return ""


def cmd_edit(state: AppState, args: list[str], rest: str) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /edit <id>."
    if state.store.get(task_id) is None:
        return _missing(task_id)
    state.store.toggle_editing(task_id)
    return ""


def cmd_save(state: AppState, args: list[str], rest: str) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /save <id>."
    if state.store.get(task_id) is None:
        return _missing(task_id)
    if not state.store.is_editing(task_id):
        return f"Task #{task_id} is not being edited."
    state.store.toggle_editing(task_id)
    return ""


def cmd_text(state: AppState, args: list[str], rest: str) -> str:
    """
    /text <id> <new text>
    Only valid in edit mode; the text is stored as typed (may be empty).
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /text <id> <new text>."
    if state.store.get(task_id) is None:
        return _missing(task_id)
    if not state.store.is_editing(task_id):
        return f"Task #{task_id} is not being edited. Use /edit {task_id} first."

    # Only the id token is consumed; everything after its separator is kept as typed.
    _, _, new_text = rest.lstrip().partition(" ")
    state.store.set_text(task_id, new_text)
    return ""


def cmd_prio(state: AppState, args: list[str], rest: str) -> str:
    task_id = _parse_id(args)
    if task_id is None or len(args) < 2:
        return "Usage: /prio <id> low|medium|high."
    if state.store.get(task_id) is None:
        return _missing(task_id)

    prio = Priority.parse(args[1])
    if prio is None:
        return f"Unknown priority: {args[1]}. Use low, medium or high (1-3)."

    state.store.set_priority(task_id, prio)
    return ""


def cmd_rm(state: AppState, args: list[str], rest: str) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>."
    if state.store.get(task_id) is None:
        return _missing(task_id)
    state.store.remove(task_id)
    logger.debug("Removed task id=%s via console", task_id)
    return ""


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register("list", cmd_list, help_text="Show the list again.", aliases=["ls"])
registry.register("sort", cmd_sort, help_text="Change order: /sort created | /sort priority.")
registry.register("done", cmd_done, help_text="Toggle completed: /done <id>.", aliases=["x", "check"])
registry.register("edit", cmd_edit, help_text="Enter/leave edit mode: /edit <id>.")
registry.register("save", cmd_save, help_text="Leave edit mode: /save <id>.")
registry.register("text", cmd_text, help_text="Change text while editing: /text <id> <new text>.")
registry.register("prio", cmd_prio, help_text="Set priority: /prio <id> low|medium|high.", aliases=["priority"])
registry.register("rm", cmd_rm, help_text="Remove a task: /rm <id>.", aliases=["remove", "del"])
