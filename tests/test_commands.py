# tests/test_commands.py

from __future__ import annotations

from tasklist.cli.commands import CommandRegistry, registry
from tasklist.core.actions import submit_draft
from tasklist.core.models import Priority, SortKey


def test_command_registry_routes_args_and_rest(state) -> None:
    reg = CommandRegistry()
    seen: list[tuple[list[str], str]] = []

    def h(state, args, rest):
        seen.append((args, rest))
        return "ok"

    reg.register("a", h, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x  y") == "ok"
    assert reg.handle(state, "/ALPHA z") == "ok"
    assert seen == [(["x", "y"], "x  y"), (["z"], "z")]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/add", "/sort", "/done", "/edit", "/prio", "/rm"):
        assert name in text


def test_add_clears_draft_and_blank_is_silent(state) -> None:
    assert registry.handle(state, "/add Buy milk") == ""
    assert [t.text for t in state.store.tasks] == ["Buy milk"]
    assert state.draft == ""

    assert registry.handle(state, "/add    ") == ""
    assert len(state.store.tasks) == 1


def test_blank_submit_keeps_draft(state) -> None:
    state.draft = "   "

    assert submit_draft(state) is None
    assert state.draft == "   "
    assert state.store.tasks == ()

    state.draft = "  Walk dog "
    task = submit_draft(state)
    assert task is not None
    assert task.text == "Walk dog"
    assert state.draft == ""


def test_done_edit_text_save_flow(state) -> None:
    task = state.store.add("Call mom")
    assert task

    registry.handle(state, f"/done {task.id}")
    assert state.store.get(task.id).completed is True

    reply = registry.handle(state, f"/text {task.id} Call dad")
    assert "not being edited" in (reply or "")

    registry.handle(state, f"/edit {task.id}")
    assert state.store.is_editing(task.id)
    registry.handle(state, f"/text {task.id} Call  dad tonight")
    assert state.store.get(task.id).text == "Call  dad tonight"

    registry.handle(state, f"/save {task.id}")
    assert not state.store.is_editing(task.id)
    assert "not being edited" in (registry.handle(state, f"/save {task.id}") or "")


def test_text_without_value_sets_blank_then_save_restores(state) -> None:
    task = state.store.add("Groceries")
    assert task

    registry.handle(state, f"/edit #{task.id}")
    registry.handle(state, f"/text {task.id}")
    assert state.store.get(task.id).text == ""

    registry.handle(state, f"/edit {task.id}")
    assert state.store.get(task.id).text == "Groceries"


def test_prio_accepts_names_and_numbers(state) -> None:
    task = state.store.add("taxes")
    assert task

    registry.handle(state, f"/prio {task.id} high")
    assert state.store.get(task.id).priority == Priority.HIGH
    registry.handle(state, f"/prio {task.id} 2")
    assert state.store.get(task.id).priority == Priority.MEDIUM

    reply = registry.handle(state, f"/prio {task.id} 7")
    assert "Unknown priority" in (reply or "")
    assert state.store.get(task.id).priority == Priority.MEDIUM

    assert "Usage" in (registry.handle(state, f"/prio {task.id}") or "")


def test_rm_and_bad_ids(state) -> None:
    task = state.store.add("temp")
    assert task

    assert "Usage" in (registry.handle(state, "/rm") or "")
    assert "Usage" in (registry.handle(state, "/rm abc") or "")
    assert registry.handle(state, "/rm 999") == "No task #999."
    assert len(state.store.tasks) == 1

    assert registry.handle(state, f"/rm {task.id}") == ""
    assert state.store.tasks == ()


def test_sort_changes_view_state_and_notifies(state) -> None:
    renders: list[object] = []
    state.view_listeners.append(renders.append)

    assert registry.handle(state, "/sort priority") == ""
    assert state.sort_by is SortKey.PRIORITY
    assert len(renders) == 1

    # Same key again: nothing to re-render.
    registry.handle(state, "/sort prio")
    assert len(renders) == 1

    assert "Usage" in (registry.handle(state, "/sort alphabet") or "")
    assert "Priority" in (registry.handle(state, "/sort") or "")


def test_text_keeps_remainder_as_typed(state) -> None:
    task = state.store.add("Groceries")
    assert task

    registry.handle(state, f"/edit {task.id}")
    registry.handle(state, f"/text {task.id}   indented  text ")

    assert state.store.get(task.id).text == "  indented  text "
