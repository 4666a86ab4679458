"""
Error classification helpers mapping HTTP statuses and exceptions to
normalized :class:`ErrorKind` values.

Every adapter that receives an HTTP status routes it through
:func:`kind_for_status`; transport exceptions raised by ``httpx`` go through
:func:`classify_exception`.
"""
from __future__ import annotations

import json
from typing import Dict, Optional

import httpx

from .error_kind import ErrorKind
from .provider_error import ProviderError


_HTTP_STATUS_MAP: Dict[int, ErrorKind] = {
    400: ErrorKind.BAD_REQUEST,
    401: ErrorKind.AUTH,
    403: ErrorKind.AUTH,
    408: ErrorKind.NETWORK,
    429: ErrorKind.RATE_LIMITED,
    504: ErrorKind.NETWORK,
}


def kind_for_status(status: int, *, raw_body_preserved: bool = False) -> ErrorKind:
    """Map a non-2xx HTTP status to its canonical :class:`ErrorKind`.

    Parameters:
        status: Upstream HTTP status code.
        raw_body_preserved: ``True`` when the caller keeps the raw response
            body verbatim as the message (unmapped statuses become
            ``Upstream``); ``False`` when a provider-specific message was
            extracted (unmapped statuses become ``Provider``).

    Returns:
        The normalized kind. Explicit entries win over the 5xx range, so
        504 maps to ``Network`` rather than ``Server``.
    """
    mapped = _HTTP_STATUS_MAP.get(status)
    if mapped is not None:
        return mapped
    if 500 <= status <= 599:
        return ErrorKind.SERVER
    return ErrorKind.UPSTREAM if raw_body_preserved else ErrorKind.PROVIDER


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported shapes (checked in order): ``exc.status_code``, ``exc.status``,
    ``exc.response.status_code``. Returns ``None`` when nothing valid is found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


def classify_exception(exc: BaseException) -> ErrorKind:
    """Classify an exception into a normalized :class:`ErrorKind`.

    Precedence:
        1. ProviderError passthrough.
        2. HTTP status carried by the exception.
        3. ``httpx`` transport failures (timeouts, refused connections) and
           builtin timeouts -> ``Network``.
        4. JSON decoding failures -> ``Parse``.
        5. ``Unknown`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.kind
    status = _extract_status(exc)
    if status is not None and not 200 <= status < 300:
        return kind_for_status(status)
    if isinstance(exc, (httpx.TransportError, TimeoutError)):
        return ErrorKind.NETWORK
    if isinstance(exc, json.JSONDecodeError):
        return ErrorKind.PARSE
    return ErrorKind.UNKNOWN


__all__ = [
    "classify_exception",
    "kind_for_status",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
