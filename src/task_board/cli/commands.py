# src/task_board/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..core.state import BoardState
from ..tasks import transitions
from ..tasks.task_models import STATUSES, Task, TaskId, TaskStatus, snapshot_task

CommandHandler = Callable[[BoardState, str], Awaitable[str]]

logger = logging.getLogger(__name__)

_STATUS_ALIASES: dict[str, TaskStatus] = {
    "todo": TaskStatus.TODO,
    "to-do": TaskStatus.TODO,
    "in-progress": TaskStatus.IN_PROGRESS,
    "in_progress": TaskStatus.IN_PROGRESS,
    "inprogress": TaskStatus.IN_PROGRESS,
    "progress": TaskStatus.IN_PROGRESS,
    "in progress": TaskStatus.IN_PROGRESS,
    "done": TaskStatus.DONE,
}


class CommandRegistry:
    """Slash-command registry used by the console (/help, /add, /move, ...)."""

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

    async def handle(self, state: BoardState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        head, _, rest = line[1:].strip().partition(" ")
        if not head:
            return "Empty command. Use /help to list available commands."

        name = head.lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        logger.debug("Command /%s args=%r", name, rest.strip())
        return await handler(state, rest.strip())

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_status_arg(raw: str) -> TaskStatus | None:
    key = " ".join(raw.strip().split()).lower()
    return _STATUS_ALIASES.get(key)


def _resolve_id(state: BoardState, raw: str) -> TaskId:
    """Map a typed id back to the id object the service used (ints stay ints)."""
    for t in state.store.tasks:
        if str(t.id) == raw:
            return t.id
    return int(raw) if raw.isdigit() else raw


def _split_title(text: str) -> tuple[str, str | None]:
    """
    'title | description' -> (title, description). The title is passed on untrimmed.

    Without '|' the description is None, meaning "not given".
    """
    title, sep, description = text.partition("|")
    if not sep:
        return text, None
    return title, description.strip()


def _outcome(state: BoardState, before: object, ok_text: str) -> str:
    """Report the store's error only if this command is what set it."""
    if state.store.error and state.store.last_failure is not before:
        return f"Error: {state.store.error}"
    return ok_text


def format_task(task: Task) -> str:
    line = f"#{task.id} [{task.status}] {task.title}"
    if task.description:
        line += f" - {task.description}"
    return line


def render_board(state: BoardState) -> str:
    if state.store.loading:
        return "Loading tasks..."
    groups = state.view.groups
    lines: list[str] = []
    for status in STATUSES:
        bucket = groups[status]
        lines.append(f"== {status} ({len(bucket)})")
        if not bucket:
            lines.append("   (drag tasks here)")
        for t in bucket:
            moves = ", ".join(str(s) for s in transitions.available_targets(t.status))
            lines.append(f"   {format_task(t)}  -> {moves}")
    return "\n".join(lines)


async def cmd_help(state: BoardState, args: str) -> str:
    return registry.build_help()


async def cmd_list(state: BoardState, args: str) -> str:
    tasks = state.store.tasks
    if not tasks:
        return "No tasks."
    return "\n".join(format_task(t) for t in tasks)


async def cmd_board(state: BoardState, args: str) -> str:
    return render_board(state)


async def cmd_reload(state: BoardState, args: str) -> str:
    before = state.store.last_failure
    await state.store.load()
    return _outcome(state, before, f"Loaded {len(state.store.tasks)} tasks.")


async def cmd_add(state: BoardState, args: str) -> str:
    """
    /add <title>                 -> create with empty description
    /add <title> | <description> -> create with description
    """
    title, description = _split_title(args)
    before = state.store.last_failure
    created = await state.store.create(title, description or "")
    if created is None:
        return _outcome(state, before, "Task not created.")
    return f"Created {format_task(created)}"


async def cmd_edit(state: BoardState, args: str) -> str:
    raw_id, _, rest = args.partition(" ")
    if not raw_id or not rest.strip():
        return "Usage: /edit <id> <title> [| description]"
    title, description = _split_title(rest)
    before = state.store.last_failure
    updated = await state.store.edit(_resolve_id(state, raw_id), title=title, description=description)
    if updated is None:
        return _outcome(state, before, "Nothing changed.")
    return f"Updated {format_task(updated)}"


async def cmd_move(state: BoardState, args: str) -> str:
    raw_id, _, raw_status = args.partition(" ")
    target = parse_status_arg(raw_status)
    if not raw_id or target is None:
        return "Usage: /move <id> todo|in-progress|done"
    task_id = _resolve_id(state, raw_id)
    before = state.store.last_failure
    updated = await transitions.move(state.store, task_id, target)
    if updated is None:
        return _outcome(state, before, f"Task {raw_id} not moved.")
    return f"Moved {format_task(updated)}"


async def cmd_snapshot(state: BoardState, args: str) -> str:
    """/snapshot <id> -> the drag payload for a task (feed it to /drop)."""
    task = state.store.get(_resolve_id(state, args.strip())) if args.strip() else None
    if task is None:
        return "Usage: /snapshot <id> (id must be on the board)"
    return snapshot_task(task)


async def cmd_drop(state: BoardState, args: str) -> str:
    """/drop todo|in-progress|done <snapshot-json>"""
    raw_status, _, payload = args.partition(" ")
    target = parse_status_arg(raw_status)
    if target is None:
        return "Usage: /drop todo|in-progress|done <snapshot-json>"
    before = state.store.last_failure
    updated = await transitions.drop(state.store, payload, target)
    if updated is None:
        return _outcome(state, before, "Dropped; nothing to do.")
    return f"Moved {format_task(updated)}"


async def cmd_rm(state: BoardState, args: str) -> str:
    if not args:
        return "Usage: /rm <id>"
    before = state.store.last_failure
    ok = await state.store.remove(_resolve_id(state, args))
    return _outcome(state, before, f"Deleted task {args}." if ok else "Task not deleted.")


async def cmd_status(state: BoardState, args: str) -> str:
    counts = state.view.counts
    per_stage = ", ".join(f"{s}: {counts[s]}" for s in STATUSES)
    return (
        "Status:\n"
        f"  Service: {getattr(state.settings, 'api_url', '?')}\n"
        f"  Loading: {'yes' if state.store.loading else 'no'}\n"
        f"  Tasks: {len(state.store.tasks)} ({per_stage})\n"
        f"  Error: {state.store.error or '-'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("board", cmd_board, help_text="Show tasks grouped by stage.", aliases=["b"])
registry.register("list", cmd_list, help_text="List all tasks in board order.", aliases=["ls"])
registry.register("reload", cmd_reload, help_text="Fetch the task list again.")
registry.register("add", cmd_add, help_text="Create a task: /add <title> [| description].")
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id> <title> [| description].")
registry.register("move", cmd_move, help_text="Move a task: /move <id> todo|in-progress|done.")
registry.register("snapshot", cmd_snapshot, help_text="Print a task's drag payload: /snapshot <id>.")
registry.register("drop", cmd_drop, help_text="Drop a payload on a column: /drop <status> <json>.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["delete", "del"])
registry.register("status", cmd_status, help_text="Show service, counts and the current error.")
