"""BaseHttpProvider: shared plumbing for HTTP-backed adapters.

Purpose:
    Every real adapter follows the same per-call sequence: validate the
    input, resolve the base URL, load the credential, build the wire body,
    make one HTTP exchange, then either parse the success body or map the
    failure into a :class:`ProviderError`. This base class owns the
    provider-independent steps and the structured logging around them;
    subclasses implement ``_generate`` and the upstream-specific mapping.

External dependencies:
    - ``httpx`` through the pooled clients of :mod:`kforge_providers.base.http`.
      Tests inject their own ``httpx.Client`` (usually backed by
      ``httpx.MockTransport``) through the constructor.

Timeout strategy:
    - Timeouts come from :func:`get_timeout_config`; no retries are made.

Logging:
    - ``generate.start`` / ``generate.end`` / ``generate.error`` events via
      :func:`normalized_log_event`. Secrets are never logged.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Mapping, Optional, Tuple

import httpx

from ..config import get_base_url
from .errors import ErrorKind, ProviderError, kind_for_status
from .http import BodyReadError, InvalidHeaderError, exchange, get_httpx_client
from .logging import LogContext, get_logger, normalized_log_event
from .models import RequestDescriptor, ResponseDescriptor
from .repositories.credentials import CredentialStore, get_credential_store
from .timeouts import get_timeout_config
from .urls import resolve_base_url
from .utils import openai_style_message


class BaseHttpProvider:
    """Reusable base class for adapters that talk to an HTTP upstream.

    Subclasses set the class attributes below and implement ``_generate``.

    Parameters
    ----------
    credentials:
        Credential store to read API keys from; defaults to the process-wide
        store.
    http_client:
        ``httpx.Client`` to use instead of the shared pool.
    base_url:
        Base-URL override applied when the request carries no ``endpoint``.
    """

    PROVIDER_ID: str = ""
    DISPLAY_NAME: str = ""
    DEFAULT_BASE_URL: str = ""
    VERSION_SEGMENTS: Tuple[str, ...] = ("/v1",)
    HTTP_PURPOSE: str = "hosted"

    def __init__(
        self,
        credentials: Optional[CredentialStore] = None,
        http_client: Optional[httpx.Client] = None,
        base_url: Optional[str] = None,
    ) -> None:
        self._credentials = credentials
        self._http_client = http_client
        self._base_url_override = base_url
        self._logger = get_logger(f"kforge.providers.{self.PROVIDER_ID}")

    @property
    def provider_name(self) -> str:
        return self.PROVIDER_ID

    # ----- Template -----
    def generate(self, request: RequestDescriptor) -> ResponseDescriptor:
        """Run one generation call with start/end/error log events."""
        ctx = LogContext(provider=self.provider_name, model=request.model)
        normalized_log_event(
            self._logger,
            "generate.start",
            ctx,
            phase="start",
            has_system=request.has_system(),
            temperature=request.temperature,
            max_output_tokens=request.max_output_tokens,
            endpoint_override=bool(request.endpoint and request.endpoint.strip()),
        )
        t0 = time.perf_counter()
        try:
            response = self._generate(request)
        except ProviderError as err:
            normalized_log_event(
                self._logger,
                "generate.error",
                ctx,
                phase="finalize",
                error_kind=err.kind.value,
                http_status=err.http_status,
                latency_ms=round((time.perf_counter() - t0) * 1000.0, 2),
                level=logging.WARNING,
                error=err.message,
            )
            raise
        ctx.response_id = response.id
        normalized_log_event(
            self._logger,
            "generate.end",
            ctx,
            phase="finalize",
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 2),
            tokens=response.usage,
            output_chars=len(response.output_text),
        )
        return response

    def _generate(self, request: RequestDescriptor) -> ResponseDescriptor:  # pragma: no cover - abstract
        raise NotImplementedError

    # ----- Preconditions -----
    def _error(self, kind: ErrorKind, message: str, http_status: Optional[int] = None) -> ProviderError:
        return ProviderError(kind=kind, message=message, provider=self.provider_name, http_status=http_status)

    def _require_input(self, request: RequestDescriptor) -> None:
        if not (request.input or "").strip():
            raise self._error(ErrorKind.BAD_REQUEST, f"Missing input for {self.DISPLAY_NAME} request.")

    def _credential_store(self) -> CredentialStore:
        return self._credentials if self._credentials is not None else get_credential_store()

    def _load_api_key(self) -> str:
        """Return the stored API key, raising ``Auth`` when none is set."""
        key = self._credential_store().get(self.provider_name)
        if key is None or not key.strip():
            raise self._error(
                ErrorKind.AUTH,
                f"No {self.DISPLAY_NAME} API key set. Save a key for provider '{self.provider_name}' first.",
            )
        return key.strip()

    def _resolve_base_url(self, request: Optional[RequestDescriptor] = None) -> str:
        """Request endpoint, then constructor override, then config, then default."""
        override = request.endpoint if request is not None else None
        if not (override and override.strip()):
            override = self._base_url_override
        if not (override and override.strip()):
            override = get_base_url(self.provider_name)
        return resolve_base_url(override, self.DEFAULT_BASE_URL, self.VERSION_SEGMENTS)

    # ----- Transport -----
    def _timeout(self) -> float:
        return get_timeout_config().http_timeout_seconds

    def _client(self, timeout: float) -> httpx.Client:
        if self._http_client is not None:
            return self._http_client
        return get_httpx_client(self.HTTP_PURPOSE, timeout)

    def _exchange(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Optional[Dict[str, Any]] = None,
        base_url: str = "",
        timeout: Optional[float] = None,
    ) -> Tuple[int, str]:
        """Perform one exchange, translating every failure into ``ProviderError``."""
        timeout = self._timeout() if timeout is None else timeout
        try:
            return exchange(self._client(timeout), method, url, headers=headers, json_body=body, timeout=timeout)
        except InvalidHeaderError as exc:
            raise self._error(ErrorKind.UNKNOWN, f"HTTP client build failed: {exc}") from exc
        except httpx.TransportError as exc:
            raise self._transport_error(exc, base_url) from exc
        except BodyReadError as exc:
            raise self._error(ErrorKind.UNKNOWN, f"Failed reading response: {exc}") from exc

    def _transport_error(self, exc: httpx.TransportError, base_url: str) -> ProviderError:
        return self._error(ErrorKind.NETWORK, f"Network error: {str(exc) or type(exc).__name__}")

    # ----- Response handling -----
    def _extract_error_message(self, text: str) -> Optional[str]:
        return openai_style_message(text)

    def _status_error(self, status: int, text: str) -> ProviderError:
        """Map a non-2xx response to a ``ProviderError``.

        The upstream envelope message is preferred; otherwise the raw body is
        kept verbatim and unmapped statuses become ``Upstream``.
        """
        extracted = self._extract_error_message(text)
        if extracted is not None:
            kind = kind_for_status(status)
            message = extracted
        else:
            kind = kind_for_status(status, raw_body_preserved=True)
            message = text.strip() or f"empty response body (HTTP {status})"
        if kind not in (ErrorKind.AUTH, ErrorKind.BAD_REQUEST):
            message = f"{self.DISPLAY_NAME} HTTP {status}: {message}"
        return self._error(kind, message, http_status=status)

    def _parse_object(self, text: str) -> Dict[str, Any]:
        """Decode a 2xx body that must be a JSON object."""
        try:
            value = json.loads(text)
        except ValueError as exc:
            raise self._error(ErrorKind.PARSE, f"Failed to parse {self.DISPLAY_NAME} JSON: {exc}") from exc
        if not isinstance(value, dict):
            raise self._error(
                ErrorKind.PARSE,
                f"Failed to parse {self.DISPLAY_NAME} JSON: expected an object, got {type(value).__name__}",
            )
        return value

    def _post_for_object(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Dict[str, Any],
        base_url: str = "",
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        """POST ``body`` and return the decoded success object."""
        status, text = self._exchange("POST", url, headers=headers, body=body, base_url=base_url, timeout=timeout)
        if not 200 <= status < 300:
            raise self._status_error(status, text)
        return self._parse_object(text)


__all__ = ["BaseHttpProvider"]
