# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.actions import add_task
from ..core.state import AppState
from ..view.render import render_board

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _print(text: str) -> None:
    print(text, flush=True)


def run_console_loop(
    state: AppState,
    *,
    read: Reader = input,
    write: Writer = _print,
) -> None:
    """
    Interactive loop. One line in, handled to completion, list re-rendered.

    Store mutations and view changes both trigger a full re-render through
    subscriptions; command replies are printed after it.
    """
    settings = state.settings
    title = str(getattr(settings, "app_name", "tasklist"))
    color = bool(getattr(settings, "color", False))

    def render(_source: object = None) -> None:
        write(render_board(state.store, state.sort_by, title=title, color=color))
        write("")

    unsubscribe = state.store.subscribe(render)
    state.view_listeners.append(render)

    logger.info("Console connector started (sort=%s).", state.sort_by)
    write("Type a task and press Enter to add it. Use /help for commands. Use /exit to quit.\n")
    render()

    try:
        while True:
            try:
                line = read("> ")
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                write("")
                break

            user_input = line.strip()
            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                reply = command_registry.handle(state, line.lstrip())
                if reply is None:
                    # Plain text is the new-task input; Enter submits it.
                    add_task(state, line)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply:
                write(reply)
    finally:
        unsubscribe()
        if render in state.view_listeners:
            state.view_listeners.remove(render)

    logger.info("Console connector finished.")
