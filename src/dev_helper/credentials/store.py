# src/dev_helper/credentials/store.py

from __future__ import annotations

import configparser
import contextlib
import logging
import os
from pathlib import Path

from ..core.errors import ConfigurationError

logger = logging.getLogger(__name__)

SECTION = "settings"
KEY = "api_key"


class CredentialStore:
    """
    One API key kept in an INI file under [settings] api_key.

    Writable stores (helper-owned files) are rewritten with only the key.
    `read_only=True` is for files owned by other tools (~/.wakatime.cfg):
    they are read, never written.
    """

    def __init__(self, path: str | Path, *, read_only: bool = False) -> None:
        self._path = Path(path).expanduser()
        self._read_only = read_only

    @property
    def path(self) -> Path:
        return self._path

    @property
    def read_only(self) -> bool:
        return self._read_only

    def load(self) -> str | None:
        """Return the stored key, or None if the file/section/key is absent or blank."""
        if not self._path.exists():
            return None
        parser = configparser.ConfigParser(interpolation=None)
        try:
            parser.read(self._path, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigurationError(f"Cannot parse {self._path}: {e}") from e
        value = parser.get(SECTION, KEY, fallback="").strip()
        return value or None

    def save(self, api_key: str) -> None:
        if self._read_only:
            raise ConfigurationError(f"{self._path} is managed by another tool; not writing to it.")

        parser = configparser.ConfigParser(interpolation=None)
        parser.add_section(SECTION)
        parser.set(SECTION, KEY, api_key)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with self._path.open("w", encoding="utf-8") as fh:
                parser.write(fh)
        except OSError as e:
            raise ConfigurationError(f"Cannot write {self._path}: {e}") from e
        with contextlib.suppress(OSError):
            # Best-effort: the file holds a secret, keep it private on disk.
            os.chmod(self._path, 0o600)
        logger.info("Saved API key to %s", self._path)
