# src/dev_helper/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from ..core.errors import TaskStoreError, UserInputError

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Flat to-do list persisted as a JSON array of strings.

    - The file is the only source of truth: every call reads it again,
      every mutation rewrites the whole list (temp file + os.replace).
    - A missing file is an empty list; the file is created on first write.
    - Positions are 1-based at this API, as shown to the user.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def load(self) -> list[str]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError) as e:
            logger.exception("Failed to read task file %s", self._path)
            raise TaskStoreError(f"Cannot read task file {self._path}: {e}") from e

        if not isinstance(data, list) or not all(isinstance(t, str) for t in data):
            raise TaskStoreError(f"Task file {self._path} is not a JSON list of strings.")
        return data

    def save(self, tasks: list[str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(json.dumps(list(tasks), ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to write task file %s", self._path)
            raise TaskStoreError(f"Cannot write task file {self._path}: {e}") from e
        logger.debug("Saved %d task(s) to %s", len(tasks), self._path)

    # ---- operations ----

    def add(self, text: str) -> str:
        """Append a task to the end of the list. Returns the stored text."""
        task = (text or "").strip()
        if not task:
            raise UserInputError("Task cannot be empty.")
        tasks = self.load()
        tasks.append(task)
        self.save(tasks)
        logger.info("Task added (total=%d)", len(tasks))
        return task

    def remove(self, position: int) -> str:
        """Remove the task at 1-based `position`. Returns the removed text."""
        tasks = self.load()
        if not 1 <= position <= len(tasks):
            raise UserInputError("Invalid selection.")
        removed = tasks.pop(position - 1)
        self.save(tasks)
        logger.info("Task removed at position=%d (total=%d)", position, len(tasks))
        return removed


def format_tasks(tasks: list[str]) -> str:
    return "\n".join(f"{i}) {task}" for i, task in enumerate(tasks, start=1))


def parse_position(raw: str) -> int:
    """Parse a user-typed ordinal; anything non-numeric is an invalid selection."""
    text = (raw or "").strip()
    if not (text.isascii() and text.isdigit()):
        raise UserInputError("Invalid selection.")
    return int(text)
