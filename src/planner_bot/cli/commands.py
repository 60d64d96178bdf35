# src/planner_bot/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core import replies
from ..core.ports import Reply
from ..core.state import AppState

CommandHandler = Callable[[AppState, int, str], Reply]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Command:
    name: str
    handler: CommandHandler
    help_text: str


class CommandRegistry:
    """
    Command table used by the router.

    A command is reachable two ways:
    - "/name [args]" typed by the user (name is case-insensitive, "@botname" suffix is ignored)
    - an exact alias text, e.g. a menu button label
    """

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}
        self._aliases: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        cmd = _Command(name=name.lower(), handler=handler, help_text=help_text)
        self._commands[cmd.name] = cmd
        for alias in aliases:
            self._aliases[alias] = cmd

    def resolve(self, line: str) -> tuple[_Command, str] | None:
        """Find the command for a line. Returns (command, argument text) or None."""
        cmd = self._aliases.get(line)
        if cmd is not None:
            return cmd, ""

        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return None

        name = parts[0].split("@", 1)[0].lower()
        cmd = self._commands.get(name)
        if cmd is None:
            return None
        arg = parts[1].strip() if len(parts) > 1 else ""
        return cmd, arg

    def handle(self, state: AppState, chat_id: int, line: str) -> Reply | None:
        """
        Handle a menu label or a string like "/command args".
        Returns a reply or None if the line is not a known command.
        """
        found = self.resolve(line)
        if found is None:
            return None
        cmd, arg = found
        logger.debug("chat=%s command=/%s", chat_id, cmd.name)
        return cmd.handler(state, chat_id, arg)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, cmd in self._commands.items():
            lines.append(f"/{name} - {cmd.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_start(state: AppState, chat_id: int, arg: str) -> Reply:
    return Reply(chat_id, replies.GREETING, replies.main_keyboard())


def cmd_help(state: AppState, chat_id: int, arg: str) -> Reply:
    return Reply(chat_id, registry.build_help())


def cmd_add_prompt(state: AppState, chat_id: int, arg: str) -> Reply:
    """Menu "Add task": the next text from this chat becomes the description."""
    state.conversations.set_awaiting_description(chat_id)
    return Reply(chat_id, replies.ASK_DESCRIPTION)


def cmd_add(state: AppState, chat_id: int, arg: str) -> Reply:
    """
    /add <description> -> create a task right away
    /add               -> usage hint (the menu button starts the two-step flow)
    """
    if not arg.strip():
        return Reply(chat_id, replies.MISSING_ADD_ARG)
    task = state.task_store.create_task(arg.strip())
    return Reply(chat_id, replies.task_added_text(task))


def cmd_list(state: AppState, chat_id: int, arg: str) -> Reply:
    return Reply(chat_id, replies.format_task_list(state.task_store.list_tasks()))


def cmd_done(state: AppState, chat_id: int, arg: str) -> Reply:
    """
    /done       -> wait for a task ID
    /done <id>  -> complete the task right away
    """
    if not arg:
        state.conversations.set_awaiting_done_id(chat_id)
        return Reply(chat_id, replies.ASK_DONE_ID)

    task_id = replies.parse_task_id(arg)
    if task_id is None:
        return Reply(chat_id, replies.INVALID_ID)
    ok = state.task_store.complete_task(task_id)
    return Reply(chat_id, replies.completion_text(task_id, ok), replies.main_keyboard())


registry.register(
    "start", cmd_start, help_text="start working with the bot", aliases=[replies.LABEL_MAIN_MENU]
)
registry.register("help", cmd_help, help_text="show this help")
registry.register("add", cmd_add, help_text="add a new task: /add <description>")
registry.register(
    "new", cmd_add_prompt, help_text="add a task, the bot asks for the description", aliases=[replies.LABEL_ADD]
)
registry.register("list", cmd_list, help_text="show the task list", aliases=[replies.LABEL_LIST])
registry.register(
    "done",
    cmd_done,
    help_text="mark a task as done by ID: /done <id>, or /done and then the ID",
    aliases=[replies.LABEL_DONE],
)
