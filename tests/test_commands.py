# tests/test_commands.py

from __future__ import annotations

from memobot.cli.commands import CommandRegistry, registry

from .conftest import TODAY


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_splits_trailing_url(state) -> None:
    reply = registry.handle(state, "/add Graph algorithms notes https://example.org/graphs") or ""
    assert reply.startswith("Added #")

    created = [t for t in state.task_store.list_all() if t.name == "Graph algorithms notes"]
    assert len(created) == 1
    assert created[0].url == "https://example.org/graphs"
    assert created[0].due_date == TODAY

    registry.handle(state, "/add just a name")
    (plain,) = [t for t in state.task_store.list_all() if t.name == "just a name"]
    assert plain.url == ""


def test_rate_reports_next_review(state) -> None:
    task = state.task_store.create("x", "")
    state.task_store.update(task.id, 3, TODAY)
    notes: list[str] = []

    reply = registry.handle(state, f"/rate {task.id} hard", emit=notes.append) or ""

    assert "[level 4]" in reply
    assert notes == [f"Next review of #{task.id} in 6 day(s)."]


def test_domain_errors_become_one_line_replies(state) -> None:
    task = state.task_store.create("x", "")

    assert (registry.handle(state, f"/rate {task.id} easy") or "").startswith("Error: Invalid rating")
    assert (registry.handle(state, "/rate 999 good") or "").startswith("Error: Task 999 not found")
    assert (registry.handle(state, "/del abc") or "").startswith("Error: task id must be an integer")
    assert state.task_store.get(task.id).level == 0


def test_list_due_del_and_status(state) -> None:
    task = state.task_store.create("visible", "")

    assert "visible" in (registry.handle(state, "/list") or "")
    assert "visible" in (registry.handle(state, "/due") or "")
    assert registry.handle(state, f"/del {task.id}") == f"Deleted task #{task.id}."
    assert registry.handle(state, f"/del {task.id}") == f"No task #{task.id}; nothing deleted."

    status = registry.handle(state, "/status") or ""
    assert "Tasks: 1 (1 due)" in status
    assert TODAY.isoformat() in status
