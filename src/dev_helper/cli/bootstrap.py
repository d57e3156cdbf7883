# src/dev_helper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires concrete implementations (terminal prompts, subprocess runner,
  file-backed stores, HTTP clients) into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..connectors.console_connector import ConsolePromptProvider
from ..core.ports import PromptProvider
from ..core.runner import SubprocessRunner
from ..core.state import AppState
from ..credentials.store import CredentialStore
from ..llm.client import OpenAIChatClient
from ..remote.wakatime import WakaTimeClient
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    prompts: PromptProvider | None = None,
    cwd: str | Path | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(
        settings=settings,
        prompts=prompts or ConsolePromptProvider(),
        runner=SubprocessRunner(),
        task_store=TaskStore(settings.tasks_path),
        # ~/.wakatime.cfg belongs to the WakaTime plugins: read it, never write it.
        wakatime_credentials=CredentialStore(settings.wakatime_config_path, read_only=True),
        ai_credentials=CredentialStore(settings.ai_config_path),
        coding_time=WakaTimeClient.from_settings(settings),
        chat=OpenAIChatClient.from_settings(settings),
        cwd=Path.cwd() if cwd is None else Path(cwd),
    )
    logger.debug("State ready tasks=%s cwd=%s", settings.tasks_path, state.cwd)
    return state
