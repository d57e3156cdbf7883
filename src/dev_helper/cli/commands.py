# src/dev_helper/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..core.errors import UserInputError
from ..core.state import AppState
from ..credentials.api import resolve_api_key
from ..git.workflow import GitWorkflow
from ..tasks.task_store import format_tasks, parse_position

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, list[str], CommandEmitter], str | None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Match:
    name: str
    handler: CommandHandler
    args: list[str]


class CommandRegistry:
    """Registry of multi-word commands ("task list", "git repo here", ...)."""

    def __init__(self) -> None:
        self._handlers: dict[tuple[str, ...], CommandHandler] = {}
        self._names: dict[tuple[str, ...], str] = {}
        self._help: dict[str, str] = {}

    @staticmethod
    def _key(name: str) -> tuple[str, ...]:
        return tuple(name.lower().split())

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = self._key(name)
        self._handlers[key] = handler
        self._names[key] = name
        self._help[name] = help_text
        for alias in aliases:
            self._handlers[self._key(alias)] = handler
            self._names[self._key(alias)] = name

    def resolve(self, argv: Sequence[str]) -> Match | None:
        """Longest registered word prefix of argv wins; the rest become args."""
        words = [w.lower() for w in argv]
        for n in range(len(words), 0, -1):
            key = tuple(words[:n])
            handler = self._handlers.get(key)
            if handler is not None:
                return Match(name=self._names[key], handler=handler, args=list(argv[n:]))
        return None

    def build_help(self, prog: str = "helper") -> str:
        width = max((len(n) for n in self._help), default=0)
        lines = [f"Usage: {prog} <command>", "", "Commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name.ljust(width)}  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _workflow(state: AppState, emit: CommandEmitter) -> GitWorkflow:
    return GitWorkflow(
        runner=state.runner,
        prompts=state.prompts,
        cwd=state.cwd,
        emit=emit,
        remote_name=str(getattr(state.settings, "remote_name", "origin")),
    )


def cmd_help(state: AppState, args: list[str], emit: CommandEmitter) -> str:
    return registry.build_help(str(getattr(state.settings, "app_name", "helper")))


# ---- git ----


def cmd_git_repo_here(state: AppState, args: list[str], emit: CommandEmitter) -> str | None:
    """Initialize the working tree (if needed) and register the GitHub remote."""
    wf = _workflow(state, emit)
    wf.init()
    wf.connect_remote()
    return None


def cmd_git_add(state: AppState, args: list[str], emit: CommandEmitter) -> str | None:
    _workflow(state, emit).stage_files()
    return None


def cmd_git_commit(state: AppState, args: list[str], emit: CommandEmitter) -> str | None:
    """
    git commit            -> prompt for a message
    git commit <message>  -> use the remaining words as the message
    """
    wf = _workflow(state, emit)
    wf.guard_env_file()
    message = " ".join(args) if args else state.prompts.ask("Enter commit message: ")
    wf.commit_all(message)
    return None


def cmd_git_push(state: AppState, args: list[str], emit: CommandEmitter) -> str | None:
    _workflow(state, emit).push()
    return None


# ---- tasks ----


def cmd_task_list(state: AppState, args: list[str], emit: CommandEmitter) -> str:
    tasks = state.task_store.load()
    if not tasks:
        return "No tasks found."
    return "Your tasks:\n" + format_tasks(tasks)


def cmd_add_task(state: AppState, args: list[str], emit: CommandEmitter) -> str:
    text = " ".join(args) if args else state.prompts.ask("Enter task: ")
    task = state.task_store.add(text)
    return f'Task added: "{task}"'


def cmd_remove_task(state: AppState, args: list[str], emit: CommandEmitter) -> str:
    if args:
        raw = args[0]
    else:
        tasks = state.task_store.load()
        if not tasks:
            return "No tasks to remove."
        emit("Your tasks:\n" + format_tasks(tasks))
        raw = state.prompts.ask("Enter task number to remove: ")

    removed = state.task_store.remove(parse_position(raw))
    return f'Removed task: "{removed}"'


# ---- remote APIs ----


def cmd_get_coding_time(state: AppState, args: list[str], emit: CommandEmitter) -> str:
    api_key = resolve_api_key(state.wakatime_credentials, state.prompts, label="WakaTime")
    emit("Fetching your coding stats...")
    total = state.coding_time.fetch_total(api_key)
    return f"Total coding time: {total}"


def cmd_ask_ai(state: AppState, args: list[str], emit: CommandEmitter) -> str:
    question = " ".join(args) if args else state.prompts.ask("Ask AI: ")
    question = question.strip()
    if not question:
        raise UserInputError("Question cannot be empty.")
    api_key = resolve_api_key(state.ai_credentials, state.prompts, label="OpenAI")
    emit("Thinking...")
    return state.chat.ask(api_key, question)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["-h", "--help"])
registry.register(
    "git repo here",
    cmd_git_repo_here,
    help_text="Initialize Git here and connect a GitHub remote.",
    aliases=["git here"],
)
registry.register("git add", cmd_git_add, help_text="Choose which files to stage.")
registry.register("git commit", cmd_git_commit, help_text="Stage everything and commit with a message.")
registry.register("git push", cmd_git_push, help_text="Push the current branch to origin.")
registry.register("task list", cmd_task_list, help_text="View all tasks.", aliases=["tasks"])
registry.register("add task", cmd_add_task, help_text="Add a new task.", aliases=["add-task"])
registry.register("remove task", cmd_remove_task, help_text="Remove a task by number.", aliases=["remove-task"])
registry.register(
    "get coding time",
    cmd_get_coding_time,
    help_text="Fetch your WakaTime coding stats.",
    aliases=["get time"],
)
registry.register("ask ai", cmd_ask_ai, help_text="Ask the chat-completion API a question.")
