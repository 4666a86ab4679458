"""Unit tests for the layered provider configuration and timeouts."""

from __future__ import annotations

import json

from kforge_providers.base.timeouts import TimeoutConfig, get_timeout_config
from kforge_providers.config import (
    CONFIG_FILE_ENV,
    get_base_url,
    get_model,
    get_provider_config,
    reset_config_cache,
)


def test_defaults_carry_presets_and_base_url():
    cfg = get_provider_config("ollama")
    assert cfg["base_url"] == "http://localhost:11434"
    assert cfg["model"] == "llama3.1"
    assert "llama3.1" in cfg["models"]
    assert get_model("custom") is None


def test_unknown_provider_yields_empty_config():
    assert get_provider_config("nope") == {}


def test_yaml_file_overrides_defaults(tmp_path, monkeypatch):
    path = tmp_path / "providers.yaml"
    path.write_text("ollama:\n  base_url: http://gpu-box:11434\n  api_key: leaked\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    reset_config_cache()
    cfg = get_provider_config("ollama")
    assert cfg["base_url"] == "http://gpu-box:11434"
    assert "api_key" not in cfg


def test_json_file_is_accepted(tmp_path, monkeypatch):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"openrouter": {"model": "anthropic/claude-3.5-sonnet"}}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    assert get_model("openrouter") == "anthropic/claude-3.5-sonnet"


def test_env_beats_file_and_overrides_beat_env(tmp_path, monkeypatch):
    path = tmp_path / "providers.yaml"
    path.write_text("groq:\n  model: from-file\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    monkeypatch.setenv("GROQ_MODEL", "from-env")
    assert get_model("groq") == "from-env"
    assert get_provider_config("groq", {"model": "explicit", "base_url": None})["model"] == "explicit"
    assert get_base_url("groq") == "https://api.groq.com/openai"


def test_missing_or_malformed_file_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_FILE_ENV, str(tmp_path / "absent.yaml"))
    assert get_model("mistral") == "mistral-small-latest"
    bad = tmp_path / "bad.yaml"
    bad.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(bad))
    assert get_model("mistral") == "mistral-small-latest"


def test_undecodable_file_is_ignored_with_warning(tmp_path, monkeypatch, log_events):
    binary = tmp_path / "binary.yaml"
    binary.write_bytes(b"\xff\xfe\x00bad")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(binary))
    assert get_provider_config("openai")["base_url"] == "https://api.openai.com"
    assert get_model("mistral") == "mistral-small-latest"
    events = [e for e in log_events() if e.get("event") == "config.load_failed"]
    assert events and events[0]["error"] == "UnicodeDecodeError"
    assert events[0]["_level"] == "WARNING"


def test_timeout_defaults(monkeypatch):
    for name in ("KFORGE_TIMEOUT_HTTP_SECONDS", "KFORGE_TIMEOUT_LOCAL_SECONDS", "KFORGE_TIMEOUT_LIST_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    assert get_timeout_config() == TimeoutConfig(60.0, 120.0, 30.0)


def test_timeout_env_overrides_and_invalid_values(monkeypatch):
    monkeypatch.setenv("KFORGE_TIMEOUT_HTTP_SECONDS", "5")
    monkeypatch.setenv("KFORGE_TIMEOUT_LOCAL_SECONDS", "-1")
    monkeypatch.setenv("KFORGE_TIMEOUT_LIST_SECONDS", "abc")
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 5.0
    assert cfg.local_timeout_seconds == 120.0
    assert cfg.list_timeout_seconds == 30.0
    monkeypatch.setenv("KFORGE_TIMEOUT_HTTP_SECONDS", "7.5")
    assert get_timeout_config().http_timeout_seconds == 7.5
