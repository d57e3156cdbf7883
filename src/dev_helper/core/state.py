# src/dev_helper/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..credentials.store import CredentialStore
from ..tasks.task_store import TaskStore
from .ports import ChatClient, CodingTimeClient, CommandRunner, PromptProvider


@dataclass
class AppState:
    # Store Settings on the state for easy access in handlers.
    settings: Any

    prompts: PromptProvider
    runner: CommandRunner
    task_store: TaskStore
    wakatime_credentials: CredentialStore
    ai_credentials: CredentialStore
    coding_time: CodingTimeClient
    chat: ChatClient

    # Working tree the git commands operate on.
    cwd: Path = field(default_factory=Path.cwd)
