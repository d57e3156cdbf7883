# src/dev_helper/git/workflow.py

"""
Git operations over a single working tree.

Every git call goes through the injected CommandRunner as an argv list, so user
text (commit messages, URLs, file names) is never parsed by a shell.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..core.errors import CommandFailedError, UserInputError
from ..core.ports import CommandRunner, PromptProvider
from ..core.runner import CommandResult

logger = logging.getLogger(__name__)

GITHUB_URL_RE = re.compile(r"^https://github\.com/[\w-]+/[\w-]+(\.git)?$", re.ASCII)

ENV_FILE = ".env"
GITIGNORE = ".gitignore"

Emitter = Callable[[str], None]


def is_valid_github_url(url: str) -> bool:
    return bool(GITHUB_URL_RE.match((url or "").strip()))


def _checked(result: CommandResult) -> CommandResult:
    if not result.success:
        raise CommandFailedError(result)
    return result


@dataclass
class GitWorkflow:
    runner: CommandRunner
    prompts: PromptProvider
    cwd: Path
    emit: Emitter
    remote_name: str = "origin"

    def _git(self, *args: str, capture: bool = False) -> CommandResult:
        return self.runner.run(["git", *args], capture=capture, cwd=self.cwd)

    # ---- queries (failure is an answer, not an error) ----

    def is_work_tree(self) -> bool:
        res = self._git("rev-parse", "--is-inside-work-tree", capture=True)
        return res.success and (res.output or "").strip() == "true"

    def remote_url(self) -> str | None:
        res = self._git("remote", "get-url", self.remote_name, capture=True)
        if not res.success:
            return None
        return (res.output or "").strip() or None

    def current_branch(self) -> str:
        res = _checked(self._git("rev-parse", "--abbrev-ref", "HEAD", capture=True))
        branch = (res.output or "").strip()
        if not branch or branch == "HEAD":
            raise UserInputError("Not on a branch (detached HEAD); check out a branch before pushing.")
        return branch

    # ---- operations ----

    def init(self) -> bool:
        """Initialize the repo if needed. Returns True if `git init` ran."""
        if self.is_work_tree():
            self.emit("Git repository already initialized.")
            return False
        _checked(self._git("init"))
        self.emit("Git has been initialized!")
        return True

    def connect_remote(self) -> str | None:
        """Ask for a GitHub URL and register it. Returns the URL or None if skipped."""
        existing = self.remote_url()
        if existing:
            self.emit(f"Remote '{self.remote_name}' already set: {existing}")
            return None

        url = self.prompts.ask("Enter your GitHub repo URL (or leave blank to skip): ").strip()
        if not url:
            self.emit("No remote added.")
            return None
        if not is_valid_github_url(url):
            raise UserInputError(
                f"Invalid GitHub URL: {url} (expected https://github.com/<owner>/<repo>[.git])"
            )

        _checked(self._git("remote", "add", self.remote_name, url))
        self.emit("Connected to GitHub!")
        return url

    def guard_env_file(self) -> bool:
        """
        If .env exists, offer to add it to .gitignore. Returns True if added.

        Advisory only: nothing stops a later `git add -f .env`.
        """
        env_path = self.cwd / ENV_FILE
        if not env_path.exists():
            return False

        gitignore = self.cwd / GITIGNORE
        existing = gitignore.read_text("utf-8") if gitignore.exists() else ""
        if ENV_FILE in (line.strip() for line in existing.splitlines()):
            logger.debug(".env already listed in %s", gitignore)
            return False

        if not self.prompts.confirm("Warning: .env may contain secrets. Add it to .gitignore?"):
            return False

        with gitignore.open("a", encoding="utf-8") as fh:
            if existing and not existing.endswith("\n"):
                fh.write("\n")
            fh.write(f"{ENV_FILE}\n")
        self.emit("Added .env to .gitignore.")
        return True

    def stage_files(self) -> list[str]:
        """Let the user pick files in the working directory to stage."""
        files = sorted(p.name for p in self.cwd.iterdir() if p.is_file())
        if not files:
            self.emit("No files found to add.")
            return []

        self.emit('Select files to add (comma-separated numbers or "all"):')
        for i, name in enumerate(files, start=1):
            self.emit(f"{i}) {name}")

        selected = select_files(files, self.prompts.ask("Files: "))
        if not selected:
            raise UserInputError("No valid files selected.")

        if ENV_FILE in selected and self.prompts.confirm(
            "Warning: .env contains sensitive info. Remove it from the selection?"
        ):
            selected = [f for f in selected if f != ENV_FILE]
            if not selected:
                raise UserInputError("No files left to add.")

        _checked(self._git("add", "--", *selected))
        self.emit(f"Added: {', '.join(selected)}")
        return selected

    def commit_all(self, message: str) -> None:
        """`git add .` then `git commit -m`; an empty message aborts before any git call."""
        message = (message or "").strip()
        if not message:
            raise UserInputError("Commit message cannot be empty.")
        _checked(self._git("add", "."))
        _checked(self._git("commit", "-m", message))
        self.emit(f'Changes committed: "{message}"')

    def push(self) -> str:
        branch = self.current_branch()
        _checked(self._git("push", "-u", self.remote_name, branch))
        self.emit(f"Pushed {branch} to {self.remote_name}!")
        return branch


def select_files(files: list[str], raw: str) -> list[str]:
    """
    Resolve "all" or "1, 3" against `files`.

    Out-of-range and non-numeric entries are ignored; duplicates collapse.
    """
    raw = (raw or "").strip()
    if raw.lower() == "all":
        return list(files)

    out: list[str] = []
    for part in raw.split(","):
        try:
            idx = int(part.strip())
        except ValueError:
            continue
        if 1 <= idx <= len(files) and files[idx - 1] not in out:
            out.append(files[idx - 1])
    return out
