"""Ollama provider adapter.

Purpose:
    Talks to a local (or remote) Ollama daemon over its native HTTP API:
    ``POST {base}/api/chat`` for generation and ``GET {base}/api/tags`` for
    model discovery. No API key is involved.

Timeout strategy:
    Generation uses ``local_timeout_seconds`` (a cold model load can take a
    while); listing uses ``list_timeout_seconds``.

Failure semantics:
    A refused connection is reported as a ``Network`` error whose message
    tells the user the daemon is probably not running. Error bodies use the
    ``{"error": "..."}`` envelope.
"""

from __future__ import annotations

from typing import List, Optional

import httpx

from ..base.errors import ErrorKind, ProviderError
from ..base.http_provider import BaseHttpProvider
from ..base.models import RequestDescriptor, ResponseDescriptor
from ..base.timeouts import get_timeout_config
from ..base.utils import json_str, ollama_message
from ..config.defaults import OLLAMA_DEFAULT_BASE_URL
from .helpers import build_chat_body, extract_model_names, extract_output_text, extract_usage


def connection_hint(base_url: str) -> str:
    return f"Could not connect to Ollama at {base_url}. Is Ollama running? Try starting Ollama, then retry."


class OllamaProvider(BaseHttpProvider):
    """Adapter for the Ollama daemon (default ``http://localhost:11434``)."""

    PROVIDER_ID = "ollama"
    DISPLAY_NAME = "Ollama"
    DEFAULT_BASE_URL = OLLAMA_DEFAULT_BASE_URL
    HTTP_PURPOSE = "ollama"

    def _timeout(self) -> float:
        return get_timeout_config().local_timeout_seconds

    def _extract_error_message(self, text: str) -> Optional[str]:
        return ollama_message(text)

    def _transport_error(self, exc: httpx.TransportError, base_url: str) -> ProviderError:
        if isinstance(exc, httpx.ConnectError):
            return self._error(ErrorKind.NETWORK, connection_hint(base_url))
        return super()._transport_error(exc, base_url)

    def _generate(self, request: RequestDescriptor) -> ResponseDescriptor:
        self._require_input(request)
        base_url = self._resolve_base_url(request)
        tree = self._post_for_object(
            f"{base_url}/api/chat",
            headers={"Content-Type": "application/json"},
            body=build_chat_body(request),
            base_url=base_url,
        )
        return ResponseDescriptor(
            id=json_str(tree, "id") or "ollama",
            provider_id=self.provider_name,
            model=json_str(tree, "model") or request.model,
            output_text=extract_output_text(tree),
            usage=extract_usage(tree),
        )

    def list_models(self, endpoint: Optional[str] = None) -> List[str]:
        """Return installed model names from ``GET {base}/api/tags``.

        ``endpoint`` overrides the base URL the same way a request's
        ``endpoint`` does for generation.
        """
        base_url = self._resolve_base_url(RequestDescriptor(self.provider_name, "", "", endpoint=endpoint))
        status, text = self._exchange(
            "GET",
            f"{base_url}/api/tags",
            headers={"Accept": "application/json"},
            base_url=base_url,
            timeout=get_timeout_config().list_timeout_seconds,
        )
        if not 200 <= status < 300:
            raise self._status_error(status, text)
        return extract_model_names(self._parse_object(text))


__all__ = ["OllamaProvider", "connection_hint"]
