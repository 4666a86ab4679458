"""BaseCompatProvider: adapters built on the shared compatible-family client.

Subclasses only declare their id, display name, default base URL and
error policy; body construction, the HTTP call and response parsing are
shared.

Error policy:
    ``PRESERVE_RAW_BODY = False`` extracts ``error.message`` from the upstream
    envelope (falling back to the raw body) and maps unlisted statuses to
    ``Provider``. ``True`` keeps the raw body verbatim and maps unlisted
    statuses to ``Upstream``.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..errors import ErrorKind, ProviderError, kind_for_status
from ..http_provider import BaseHttpProvider
from ..models import RequestDescriptor, ResponseDescriptor
from ..utils import openai_style_message
from .client import CompatClient
from .config import CompatConfig
from .errors import (
    CompatBodyReadError,
    CompatDecodeError,
    CompatError,
    CompatHeaderError,
    CompatTransportError,
    CompatUpstreamError,
)
from .helpers import build_chat_body, parse_chat_completion


class BaseCompatProvider(BaseHttpProvider):
    """Chat Completions adapter over :class:`CompatClient`."""

    HTTP_PURPOSE = "compat"
    PRESERVE_RAW_BODY: bool = False
    RATE_LIMIT_HINT: Optional[str] = None

    def _extra_headers(self) -> Tuple[Tuple[str, str], ...]:
        return ()

    def _make_client(self, base_url: str, api_key: str) -> CompatClient:
        cfg = CompatConfig(
            base_url=base_url,
            api_key=api_key,
            extra_headers=self._extra_headers(),
            timeout_seconds=self._timeout(),
        )
        return CompatClient(cfg, http_client=self._http_client)

    def _generate(self, request: RequestDescriptor) -> ResponseDescriptor:
        self._require_input(request)
        base_url = self._resolve_base_url(request)
        api_key = self._load_api_key()
        body = build_chat_body(request)
        try:
            tree = self._make_client(base_url, api_key).post_chat_completions(body)
        except CompatError as exc:
            raise self._map_compat_error(exc) from exc
        if not isinstance(tree, dict):
            raise self._error(ErrorKind.PARSE, f"Failed to parse {self.DISPLAY_NAME} JSON: expected an object")
        return parse_chat_completion(tree, self.provider_name, request.model)

    def _map_compat_error(self, exc: CompatError) -> ProviderError:
        if isinstance(exc, CompatUpstreamError):
            return self._upstream_error(exc.status, exc.body)
        if isinstance(exc, CompatTransportError):
            return self._error(ErrorKind.NETWORK, f"Network error: {exc}")
        if isinstance(exc, CompatDecodeError):
            return self._error(ErrorKind.PARSE, f"Failed to parse {self.DISPLAY_NAME} JSON: {exc}")
        if isinstance(exc, CompatHeaderError):
            return self._error(ErrorKind.UNKNOWN, f"HTTP client build failed: {exc}")
        if isinstance(exc, CompatBodyReadError):
            return self._error(ErrorKind.UNKNOWN, f"Failed reading response: {exc}")
        return self._error(ErrorKind.UNKNOWN, str(exc))

    def _upstream_error(self, status: int, body: str) -> ProviderError:
        if self.PRESERVE_RAW_BODY:
            message = body
        else:
            message = openai_style_message(body) or body
        if not message.strip():
            message = f"empty response body (HTTP {status})"
        if status == 429 and self.RATE_LIMIT_HINT:
            message = f"{message}{self.RATE_LIMIT_HINT}"
        kind = kind_for_status(status, raw_body_preserved=self.PRESERVE_RAW_BODY)
        return self._error(kind, message, http_status=status)


__all__ = ["BaseCompatProvider"]
