# src/dev_helper/config.py

"""Centralized settings loaded from environment variables (+ optional user .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required at import time (API keys live in their own INI files).
- Every path is overridable, so tests never touch the real home directory.
- The .env file is the user's own (~/.config/helper/.env), never the project
  in the working directory, and only HELPER_* keys are taken from it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

ENV_PREFIX = "HELPER"

DEFAULT_WAKATIME_URL = (
    "https://waka.hackclub.com/api/compat/wakatime/v1/users/current/all_time_since_today"
)
DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Local files ----
    tasks_path: Path
    wakatime_config_path: Path
    ai_config_path: Path

    # ---- Git ----
    remote_name: str

    # ---- Remote APIs ----
    wakatime_url: str
    openai_base_url: str
    openai_model: str
    http_connect_timeout: float
    http_read_timeout: float

    @staticmethod
    def from_env() -> "Settings":
        home = Path.home()

        app_name = _env(_k("APP_NAME"), "helper").strip() or "helper"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        data_dir = _env_path(_k("DATA_DIR"), home / ".local" / "state" / "helper")

        tasks_path = _env_path(_k("TASKS_PATH"), home / ".helper-tasks.json")
        wakatime_config_path = _env_path(_k("WAKATIME_CONFIG"), home / ".wakatime.cfg")
        ai_config_path = _env_path(_k("AI_CONFIG"), home / ".helper-ai.cfg")

        remote_name = _env(_k("REMOTE_NAME"), "origin").strip() or "origin"

        wakatime_url = _env(_k("WAKATIME_URL"), DEFAULT_WAKATIME_URL)
        openai_base_url = _env(_k("OPENAI_BASE_URL"), DEFAULT_OPENAI_BASE_URL)
        openai_model = _env(_k("OPENAI_MODEL"), DEFAULT_OPENAI_MODEL).strip() or DEFAULT_OPENAI_MODEL

        http_connect_timeout = _env_float(_k("HTTP_CONNECT_TIMEOUT_SECONDS"), 5.0)
        http_read_timeout = _env_float(_k("HTTP_READ_TIMEOUT_SECONDS"), 60.0)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_path=tasks_path,
            wakatime_config_path=wakatime_config_path,
            ai_config_path=ai_config_path,
            remote_name=remote_name,
            wakatime_url=wakatime_url,
            openai_base_url=openai_base_url,
            openai_model=openai_model,
            http_connect_timeout=http_connect_timeout,
            http_read_timeout=http_read_timeout,
        )


_SETTINGS: Settings | None = None


def default_env_file() -> Path:
    return _env_path(_k("ENV_FILE"), Path.home() / ".config" / "helper" / ".env")


def load_user_env(path: Path) -> None:
    """Copy HELPER_* values from the user's env file into os.environ (real env vars win)."""
    if not path.is_file():
        return
    for name, value in dotenv_values(path).items():
        if not name.startswith(f"{ENV_PREFIX}_") or value is None:
            continue
        os.environ.setdefault(name, value)


def get_settings() -> Settings:
    """Load settings once per process."""
    global _SETTINGS
    if _SETTINGS is None:
        load_user_env(default_env_file())
        _SETTINGS = Settings.from_env()
    return _SETTINGS
