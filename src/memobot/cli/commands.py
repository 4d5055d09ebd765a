# src/memobot/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.errors import MemobotError
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console shell (/help, /list, /rate, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Domain errors (unknown id, bad rating, storage failure) become a one-line reply.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except (MemobotError, ValueError) as e:
            logger.info("/%s failed: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task) -> str:
    url = f" {task.url}" if task.url else ""
    return f"#{task.id} {task.name} [level {task.level}] due {task.due_date.isoformat()}{url}"


def _format_list(title: str, tasks: list[Task]) -> str:
    if not tasks:
        return f"{title}: none."
    lines = [f"{title} ({len(tasks)}):"]
    lines.extend(f"  {format_task(t)}" for t in tasks)
    return "\n".join(lines)


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"task id must be an integer, got {raw!r}") from None


def _looks_like_url(s: str) -> bool:
    return "://" in s or s.lower().startswith("www.")


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    total = state.task_store.count_tasks()
    due = len(task_api.list_due(state))
    db_path = getattr(state.settings, "tasks_db_path", "?")
    return (
        "Status:\n"
        f"  Today: {state.clock.today().isoformat()}\n"
        f"  Tasks: {total} ({due} due)\n"
        f"  Database: {db_path}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    return _format_list("All tasks", task_api.list_all(state))


def cmd_due(state: AppState, args: list[str]) -> str:
    return _format_list("Due tasks", task_api.list_due(state))


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <name>         -> task without url
    /add <name> <url>   -> the last argument is taken as url when it looks like one
    """
    if not args:
        return "Usage: /add <name> [url]"

    url = ""
    if len(args) >= 2 and _looks_like_url(args[-1]):
        url = args[-1]
        args = args[:-1]

    task = task_api.create_task(state, " ".join(args), url)
    return f"Added {format_task(task)}"


def cmd_del(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /del <id>"
    task_id = _parse_id(args[0])
    if task_api.delete_task(state, task_id):
        return f"Deleted task #{task_id}."
    return f"No task #{task_id}; nothing deleted."


def cmd_rate(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /rate <id> hard   -> level + 1, long interval
    /rate <id> good   -> level + 1, gentle interval
    /rate <id> reset  -> level - 3, due tomorrow
    """
    if len(args) != 2:
        return "Usage: /rate <id> <hard|good|reset>"

    task_id = _parse_id(args[0])
    task = task_api.rate_task(state, task_id, args[1])

    if emit is not None and task.due_date > state.clock.today():
        emit(f"Next review of #{task.id} in {(task.due_date - state.clock.today()).days} day(s).")
    return f"Rated {format_task(task)}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task totals and database location.")
registry.register("list", cmd_list, help_text="List all tasks, latest due date first.", aliases=["ls", "all"])
registry.register("due", cmd_due, help_text="List tasks due today or earlier.")
registry.register("add", cmd_add, help_text="Create a task: /add <name> [url].", aliases=["new"])
registry.register("del", cmd_del, help_text="Delete a task: /del <id>.", aliases=["rm", "delete"])
registry.register(
    "rate", cmd_rate, help_text="Record a review: /rate <id> <hard|good|reset>.", aliases=["r", "review"]
)
