"""Shared HTTP client pool for providers.

Adapters obtain reusable ``httpx.Client`` instances through
:func:`get_httpx_client` instead of building one per call. Clients are cached
by ``(purpose, timeout)``; purposes keep pools apart (e.g. ``"hosted"`` vs
``"ollama"``) and the timeout is fixed per client at creation.

All clients are closed at interpreter exit via ``atexit``; tests may call
:func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Tuple

import httpx

from ..logging import get_logger

_CLIENTS: Dict[Tuple[str, float], httpx.Client] = {}
_LOCK = threading.RLock()
_logger = get_logger("kforge.http")


def get_httpx_client(purpose: str, timeout: float) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for ``purpose`` with ``timeout`` seconds.

    Thread-safe; per-key creation is guarded by a re-entrant lock.
    """
    key = (purpose, float(timeout))
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        client = httpx.Client(timeout=httpx.Timeout(float(timeout)))
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and forget every pooled client."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except RuntimeError as exc:
                # interpreter teardown can close transports underneath us
                _logger.debug("http.close_failed: %s", exc)
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
