# src/dev_helper/credentials/api.py

from __future__ import annotations

import logging

from ..core.errors import UserInputError
from ..core.ports import PromptProvider
from .store import CredentialStore

logger = logging.getLogger(__name__)


def resolve_api_key(store: CredentialStore, prompts: PromptProvider, *, label: str) -> str:
    """
    Return the persisted key, or ask for one.

    A freshly typed key is only written to disk if the store is writable and
    the user agrees; otherwise the next invocation asks again.
    """
    key = store.load()
    if key:
        logger.debug("%s API key loaded from %s", label, store.path)
        return key

    key = prompts.ask_secret(f"Enter your {label} API key: ").strip()
    if not key:
        raise UserInputError(f"{label} API key cannot be empty.")

    if store.read_only:
        logger.debug("%s API key not persisted (%s is read-only)", label, store.path)
    elif prompts.confirm(f"Save this key to {store.path}?"):
        store.save(key)
    else:
        logger.debug("%s API key not persisted", label)
    return key
