"""Timeout values used by provider adapters.

All HTTP timeouts come from :func:`get_timeout_config`; adapters never carry
their own numeric literals. Supported environment overrides (seconds, all
optional, positive floats only):

    KFORGE_TIMEOUT_HTTP_SECONDS   hosted upstream generation (default 60)
    KFORGE_TIMEOUT_LOCAL_SECONDS  local Ollama generation (default 120)
    KFORGE_TIMEOUT_LIST_SECONDS   local model listing (default 30)

The parsed config is cached and refreshed whenever one of the variables
changes, so tests can adjust values with ``monkeypatch.setenv``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

_ENV_HTTP = "KFORGE_TIMEOUT_HTTP_SECONDS"
_ENV_LOCAL = "KFORGE_TIMEOUT_LOCAL_SECONDS"
_ENV_LIST = "KFORGE_TIMEOUT_LIST_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values in seconds.

    Attributes:
        http_timeout_seconds: Hosted upstream generation calls.
        local_timeout_seconds: Local (Ollama) generation, which may load a
            model on first use.
        list_timeout_seconds: Local model listing.
    """

    http_timeout_seconds: float = 60.0
    local_timeout_seconds: float = 120.0
    list_timeout_seconds: float = 30.0


_CACHED: Optional[TimeoutConfig] = None
_ENV_GUARD: Optional[str] = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, else return ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - module cache
    guard = "/".join(os.getenv(n, "") for n in (_ENV_HTTP, _ENV_LOCAL, _ENV_LIST))
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(_ENV_HTTP, defaults.http_timeout_seconds),
        local_timeout_seconds=_parse_env_float(_ENV_LOCAL, defaults.local_timeout_seconds),
        list_timeout_seconds=_parse_env_float(_ENV_LIST, defaults.list_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
