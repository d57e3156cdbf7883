# tests/test_credentials.py

from __future__ import annotations

import configparser
from pathlib import Path

import pytest

from dev_helper.core.errors import ConfigurationError, UserInputError
from dev_helper.credentials.api import resolve_api_key
from dev_helper.credentials.store import CredentialStore

from .fakes import ScriptedPrompts


def test_missing_file_means_no_key(tmp_path: Path) -> None:
    assert CredentialStore(tmp_path / "ai.cfg").load() is None


def test_blank_key_is_absent(tmp_path: Path) -> None:
    path = tmp_path / "ai.cfg"
    path.write_text("[settings]\napi_key =   \n", "utf-8")
    assert CredentialStore(path).load() is None


def test_save_overwrites_whole_file(tmp_path: Path) -> None:
    path = tmp_path / "ai.cfg"
    path.write_text("[other]\nfoo = bar\n", "utf-8")

    CredentialStore(path).save("sk-new")

    parser = configparser.ConfigParser()
    parser.read(path, encoding="utf-8")
    assert parser.sections() == ["settings"]
    assert parser.get("settings", "api_key") == "sk-new"
    assert CredentialStore(path).load() == "sk-new"


def test_read_only_store_loads_but_never_writes(tmp_path: Path) -> None:
    path = tmp_path / ".wakatime.cfg"
    original = "[settings]\n; keep me\ndebug = false\napi_key = old\n"
    path.write_text(original, "utf-8")
    store = CredentialStore(path, read_only=True)

    assert store.load() == "old"
    with pytest.raises(ConfigurationError):
        store.save("new")
    assert path.read_text("utf-8") == original


def test_resolve_with_read_only_store_never_offers_to_save(tmp_path: Path) -> None:
    store = CredentialStore(tmp_path / ".wakatime.cfg", read_only=True)

    prompts = ScriptedPrompts(["waka_typed"])
    assert resolve_api_key(store, prompts, label="WakaTime") == "waka_typed"
    assert len(prompts.prompts) == 1
    assert not store.path.exists()

    again = ScriptedPrompts(["waka_typed"])
    resolve_api_key(store, again, label="WakaTime")
    assert len(again.prompts) == 1


def test_resolve_uses_persisted_key_without_prompting(tmp_path: Path) -> None:
    store = CredentialStore(tmp_path / "ai.cfg")
    store.save("sk-stored")
    prompts = ScriptedPrompts()

    assert resolve_api_key(store, prompts, label="OpenAI") == "sk-stored"
    assert prompts.prompts == []


def test_resolve_declining_to_persist_prompts_again(tmp_path: Path) -> None:
    store = CredentialStore(tmp_path / "ai.cfg")

    assert resolve_api_key(store, ScriptedPrompts(["sk-1", "n"]), label="OpenAI") == "sk-1"
    assert not store.path.exists()

    prompts = ScriptedPrompts(["sk-2", "n"])
    assert resolve_api_key(store, prompts, label="OpenAI") == "sk-2"
    assert len(prompts.prompts) == 2


def test_resolve_accepting_persists(tmp_path: Path) -> None:
    store = CredentialStore(tmp_path / "ai.cfg")
    resolve_api_key(store, ScriptedPrompts([" sk-keep ", "y"]), label="OpenAI")
    assert store.load() == "sk-keep"


def test_resolve_rejects_empty_key(tmp_path: Path) -> None:
    store = CredentialStore(tmp_path / "ai.cfg")
    prompts = ScriptedPrompts(["   "])
    with pytest.raises(UserInputError, match="cannot be empty"):
        resolve_api_key(store, prompts, label="OpenAI")
    assert len(prompts.prompts) == 1
    assert not store.path.exists()
