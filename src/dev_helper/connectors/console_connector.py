# src/dev_helper/connectors/console_connector.py

from __future__ import annotations

import getpass
import logging
import sys

logger = logging.getLogger(__name__)

_YES = {"y", "yes"}
_NO = {"n", "no"}


class ConsolePromptProvider:
    """PromptProvider reading the real terminal (blocking, no timeout)."""

    def ask(self, text: str) -> str:
        return input(text)

    def ask_secret(self, text: str) -> str:
        # getpass falls back to echoing input (with a warning) when there is no TTY.
        return getpass.getpass(text)

    def confirm(self, text: str, default: bool = False) -> bool:
        hint = "[Y/n]" if default else "[y/N]"
        answer = input(f"{text} {hint} ").strip().lower()
        if not answer:
            return default
        if answer in _YES:
            return True
        if answer not in _NO:
            logger.debug("Unrecognized confirmation answer %r treated as no", answer)
        return False


def emit(text: str) -> None:
    """Immediate user-visible progress line (stdout, flushed)."""
    print(text, flush=True)


def print_error(text: str) -> None:
    print(f"Error: {text}", file=sys.stderr, flush=True)
