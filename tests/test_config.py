# tests/test_config.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

from dev_helper import config
from dev_helper.config import (
    DEFAULT_OPENAI_BASE_URL,
    DEFAULT_OPENAI_MODEL,
    DEFAULT_WAKATIME_URL,
    Settings,
    get_settings,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in list(os.environ):
        if name.startswith("HELPER_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("HOME", str(tmp_path))


def test_defaults_live_in_home(tmp_path: Path) -> None:
    s = Settings.from_env()
    assert s.tasks_path == tmp_path / ".helper-tasks.json"
    assert s.wakatime_config_path == tmp_path / ".wakatime.cfg"
    assert s.ai_config_path == tmp_path / ".helper-ai.cfg"
    assert s.wakatime_url == DEFAULT_WAKATIME_URL
    assert s.openai_base_url == DEFAULT_OPENAI_BASE_URL
    assert s.remote_name == "origin"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HELPER_TASKS_PATH", str(tmp_path / "t.json"))
    monkeypatch.setenv("HELPER_OPENAI_MODEL", "gpt-x")
    monkeypatch.setenv("HELPER_HTTP_READ_TIMEOUT_SECONDS", "12.5")

    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "t.json"
    assert s.openai_model == "gpt-x"
    assert s.http_read_timeout == 12.5


def test_bad_numbers_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HELPER_HTTP_CONNECT_TIMEOUT_SECONDS", "soon")
    assert Settings.from_env().http_connect_timeout == 5.0


@pytest.fixture()
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config, "_SETTINGS", None)
    # Register these names so anything written to os.environ is undone after the test.
    for name in ("HTTPS_PROXY", "DB_PASSWORD", "HELPER_OPENAI_MODEL", "HELPER_REMOTE_NAME"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_project_dotenv_in_cwd_is_ignored(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, fresh_settings
) -> None:
    project = tmp_path / "project"
    project.mkdir()
    (project / ".env").write_text(
        "HTTPS_PROXY=http://evil.example:8080\nDB_PASSWORD=hunter2\nHELPER_OPENAI_MODEL=from-project\n",
        "utf-8",
    )
    monkeypatch.chdir(project)

    s = get_settings()

    assert "HTTPS_PROXY" not in os.environ
    assert "DB_PASSWORD" not in os.environ
    assert s.openai_model == DEFAULT_OPENAI_MODEL


def test_user_env_file_only_contributes_helper_keys(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, fresh_settings
) -> None:
    env_file = tmp_path / ".config" / "helper" / ".env"
    env_file.parent.mkdir(parents=True)
    env_file.write_text(
        "HELPER_OPENAI_MODEL=gpt-user\nHELPER_REMOTE_NAME=upstream\nHTTPS_PROXY=http://evil.example:8080\n",
        "utf-8",
    )
    monkeypatch.setenv("HELPER_REMOTE_NAME", "from-shell")

    s = get_settings()

    assert s.openai_model == "gpt-user"
    assert s.remote_name == "from-shell"
    assert "HTTPS_PROXY" not in os.environ
