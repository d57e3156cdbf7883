# src/dev_helper/core/ports.py

"""
Ports (interfaces) used by command handlers.

Handlers depend on Protocols instead of concrete implementations.
This keeps the terminal, git and HTTP providers swappable and makes testing easier.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .runner import CommandResult


class PromptProvider(Protocol):
    """Blocking interactive input (real terminal or scripted answers in tests)."""

    def ask(self, text: str) -> str: ...
    def ask_secret(self, text: str) -> str: ...
    def confirm(self, text: str, default: bool = False) -> bool: ...


class CommandRunner(Protocol):
    """Runs one external command given as an argv list (never a shell string)."""

    def run(
            self,
            args: Sequence[str],
            *,
            capture: bool = False,
            cwd: str | Path | None = None,
    ) -> CommandResult: ...


class CodingTimeClient(Protocol):
    """Time-tracking API: returns a human-readable total, e.g. "12 hrs 3 mins"."""

    def fetch_total(self, api_key: str) -> str: ...


class ChatClient(Protocol):
    """Chat-completion API: one question in, the first completion's text out."""

    def ask(self, api_key: str, question: str) -> str: ...
