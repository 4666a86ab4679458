"""Unified configuration layer for providers.

Sources are merged in a predictable order (later wins):

1. Built-in defaults (:mod:`kforge_providers.config.defaults`)
2. Optional config file (JSON or YAML) named by ``KFORGE_PROVIDERS_CONFIG``
3. Environment variables ``<PROVIDER>_BASE_URL`` / ``<PROVIDER>_MODEL``
4. In-code overrides passed to :func:`get_provider_config`

API keys are never read from configuration; they live only in the
credential store.

Config file structure example::

    ollama:
      base_url: http://gpu-box:11434
    openrouter:
      model: anthropic/claude-3.5-sonnet

Public API
----------
* get_provider_config(provider, overrides=None) -> dict
* get_model(provider) -> str | None
* get_base_url(provider) -> str | None
* reset_config_cache()
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..base.logging import get_logger, log_event
from .defaults import (
    CLAUDE_DEFAULT_BASE_URL,
    CUSTOM_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_BASE_URL,
    GROQ_DEFAULT_BASE_URL,
    MISTRAL_DEFAULT_BASE_URL,
    MODEL_PRESETS,
    OLLAMA_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_BASE_URL,
)

CONFIG_FILE_ENV = "KFORGE_PROVIDERS_CONFIG"

_logger = get_logger("kforge.config")

_BASE_URLS = {
    "openai": OPENAI_DEFAULT_BASE_URL,
    "claude": CLAUDE_DEFAULT_BASE_URL,
    "gemini": GEMINI_DEFAULT_BASE_URL,
    "ollama": OLLAMA_DEFAULT_BASE_URL,
    "deepseek": DEEPSEEK_DEFAULT_BASE_URL,
    "groq": GROQ_DEFAULT_BASE_URL,
    "mistral": MISTRAL_DEFAULT_BASE_URL,
    "openrouter": OPENROUTER_DEFAULT_BASE_URL,
    "custom": CUSTOM_DEFAULT_BASE_URL,
}


def _build_defaults() -> Dict[str, Dict[str, Any]]:
    out: Dict[str, Dict[str, Any]] = {}
    for name, presets in MODEL_PRESETS.items():
        entry: Dict[str, Any] = {"models": list(presets)}
        if presets:
            entry["model"] = presets[0]
        if name in _BASE_URLS:
            entry["base_url"] = _BASE_URLS[name]
        out[name] = entry
    return out


DEFAULTS: Dict[str, Dict[str, Any]] = _build_defaults()

ENV_FIELD_MAP = {
    "model": "MODEL",
    "base_url": "BASE_URL",
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None


def _load_external_config() -> Dict[str, Any]:
    """Load and cache the optional config file.

    JSON is tried first, then YAML. A missing path, an unreadable file or a
    document that is not a mapping yields ``{}``.
    """
    global _FILE_CACHE, _FILE_CACHE_PATH  # noqa: PLW0603 - module cache
    path = os.getenv(CONFIG_FILE_ENV) or ""
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    data: Any = {}
    p = Path(path) if path else None
    if p is not None and p.is_file():
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            log_event(
                _logger,
                "config.load_failed",
                path=path,
                error=type(exc).__name__,
                detail=str(exc),
                level=logging.WARNING,
            )
            text = ""
        try:
            data = json.loads(text)
        except ValueError:
            try:
                data = yaml.safe_load(text) or {}
            except yaml.YAMLError:
                data = {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    _FILE_CACHE_PATH = path
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the cached config file contents."""
    global _FILE_CACHE, _FILE_CACHE_PATH  # noqa: PLW0603 - module cache
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None and val.strip():
            out[field] = val.strip()
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.
    ``None`` override values are ignored.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = dict(DEFAULTS.get(name, {}))

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= {k: v for k, v in file_cfg.items() if k != "api_key"}

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


def get_base_url(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("base_url")


__all__ = [
    "get_provider_config",
    "get_model",
    "get_base_url",
    "reset_config_cache",
    "DEFAULTS",
    "CONFIG_FILE_ENV",
]
