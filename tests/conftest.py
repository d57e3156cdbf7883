# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from dev_helper.core.state import AppState
from dev_helper.credentials.store import CredentialStore
from dev_helper.tasks.task_store import TaskStore

from .fakes import FakeChatClient, FakeCodingTimeClient, FakeRunner, ScriptedPrompts


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and handlers.

    We intentionally use a SimpleNamespace rather than importing real config,
    so no test reads the environment or the real home directory.
    """
    return SimpleNamespace(
        app_name="helper",
        log_level="DEBUG",
        data_dir=tmp_path / "state",
        tasks_path=tmp_path / "home" / ".helper-tasks.json",
        wakatime_config_path=tmp_path / "home" / ".wakatime.cfg",
        ai_config_path=tmp_path / "home" / ".helper-ai.cfg",
        remote_name="origin",
        wakatime_url="https://waka.example.test/api/all_time_since_today",
        openai_base_url="https://llm.example.test/v1",
        openai_model="test-model",
        http_connect_timeout=1.0,
        http_read_timeout=1.0,
    )


@pytest.fixture()
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture()
def prompts() -> ScriptedPrompts:
    return ScriptedPrompts()


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def state(settings: SimpleNamespace, prompts: ScriptedPrompts, runner: FakeRunner, workdir: Path) -> AppState:
    """
    AppState wired with deterministic fakes.

    NOTE: We keep the real file-backed stores here because their
    on-disk behavior is part of what we want to test.
    """
    return AppState(
        settings=settings,
        prompts=prompts,
        runner=runner,
        task_store=TaskStore(settings.tasks_path),
        wakatime_credentials=CredentialStore(settings.wakatime_config_path, read_only=True),
        ai_credentials=CredentialStore(settings.ai_config_path),
        coding_time=FakeCodingTimeClient(),
        chat=FakeChatClient(),
        cwd=workdir,
    )
