"""Ollama model discovery.

Thin entrypoint over :meth:`OllamaProvider.list_models` for callers that do
not hold an adapter instance (the service layer and the CLI).
"""

from __future__ import annotations

from typing import List, Optional

import httpx

from ..base.logging import LogContext, get_logger, log_event
from .client import OllamaProvider

PROVIDER = "ollama"

_logger = get_logger("kforge.ollama.models")


def get_ollama_models(endpoint: Optional[str] = None, *, http_client: Optional[httpx.Client] = None) -> List[str]:
    """Return the sorted, deduplicated model names served at ``endpoint``.

    Raises
    ------
    ProviderError
        With the same kinds and messages as Ollama generation failures.
    """
    names = OllamaProvider(http_client=http_client).list_models(endpoint)
    log_event(_logger, "ollama.models.listed", LogContext(provider=PROVIDER), count=len(names))
    return names


__all__ = ["get_ollama_models"]
