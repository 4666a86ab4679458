"""Shared client for OpenAI-compatible upstreams.

Purpose:
    One ``httpx``-based client reused by the DeepSeek, Groq, Mistral,
    OpenRouter and custom-endpoint adapters. It owns URL assembly
    (``{base}/v1/<path>``), bearer authentication, extra headers and the
    success/failure split; it knows nothing about request or response shapes.

Failure semantics:
    - Non-2xx: the whole body is read and :class:`CompatUpstreamError` is
      raised with the status and the raw text.
    - Transport failures and timeouts: :class:`CompatTransportError`.
    - Body read failures: :class:`CompatBodyReadError`.
    - 2xx with undecodable JSON: :class:`CompatDecodeError`.
    - Invalid header names/values: :class:`CompatHeaderError`, raised at
      construction before any I/O.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import httpx

from ..http import BodyReadError, InvalidHeaderError, check_headers, exchange, get_httpx_client
from .config import CompatConfig
from .errors import (
    CompatBodyReadError,
    CompatDecodeError,
    CompatHeaderError,
    CompatTransportError,
    CompatUpstreamError,
)


class CompatClient:
    """Blocking client for ``/v1/chat/completions``, ``/v1/responses`` and ``/v1/models``."""

    def __init__(self, config: CompatConfig, http_client: Optional[httpx.Client] = None) -> None:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {config.api_key}",
        }
        for name, value in config.extra_headers:
            headers[name] = value
        try:
            self._headers = check_headers(headers)
        except InvalidHeaderError as exc:
            raise CompatHeaderError(str(exc)) from exc
        self._base_url = config.normalized_base_url()
        self._timeout = config.timeout_seconds
        self._default_model = config.default_model
        self._http = http_client if http_client is not None else get_httpx_client("compat", config.timeout_seconds)

    @property
    def base_url(self) -> str:
        return self._base_url

    def v1(self, path: str) -> str:
        """Return ``{base}/v1/{path}`` with exactly one slash at each joint."""
        return f"{self._base_url}/v1/{path.lstrip('/')}"

    def post_chat_completions(self, body: Dict[str, Any]) -> Any:
        """POST ``{base}/v1/chat/completions`` and return the decoded JSON."""
        return self._request("POST", self.v1("chat/completions"), body)

    def post_responses(self, body: Dict[str, Any]) -> Any:
        """POST ``{base}/v1/responses`` and return the decoded JSON."""
        return self._request("POST", self.v1("responses"), body)

    def get_models(self) -> Any:
        """GET ``{base}/v1/models`` and return the decoded JSON."""
        return self._request("GET", self.v1("models"), None)

    def _request(self, method: str, url: str, body: Optional[Dict[str, Any]]) -> Any:
        if body is not None and self._default_model and not body.get("model"):
            body = {**body, "model": self._default_model}
        try:
            status, text = exchange(
                self._http, method, url, headers=self._headers, json_body=body, timeout=self._timeout
            )
        except httpx.TransportError as exc:
            raise CompatTransportError(str(exc) or type(exc).__name__) from exc
        except BodyReadError as exc:
            raise CompatBodyReadError(str(exc)) from exc
        if not 200 <= status < 300:
            raise CompatUpstreamError(status, text)
        try:
            return json.loads(text)
        except ValueError as exc:
            raise CompatDecodeError(f"invalid JSON from upstream: {exc}") from exc


__all__ = ["CompatClient"]
