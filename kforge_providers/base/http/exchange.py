"""Single request/response exchange over a pooled ``httpx.Client``.

The exchange reads the full body even for non-2xx responses so callers can
preserve the upstream's own error text. Failures are split by phase:

- invalid header names/values -> :class:`InvalidHeaderError` (before I/O)
- connect/send failures and timeouts -> ``httpx.TransportError`` (propagated)
- failures while reading the body -> :class:`BodyReadError`
"""

from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Optional, Tuple

import httpx

_TOKEN_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


class InvalidHeaderError(ValueError):
    """A header name or value that cannot be sent on the wire."""


class BodyReadError(Exception):
    """The response status arrived but the body could not be read."""


def check_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Validate header pairs and return them as a plain dict.

    Names must be RFC 7230 tokens; values must be ASCII without control
    characters (a pasted API key with a trailing newline is the usual
    offender).
    """
    out: Dict[str, str] = {}
    for name, value in headers.items():
        if not isinstance(name, str) or not _TOKEN_RE.match(name):
            raise InvalidHeaderError(f"invalid header name: {name!r}")
        if not isinstance(value, str):
            raise InvalidHeaderError(f"invalid header value for {name}")
        try:
            value.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidHeaderError(f"invalid header value for {name}: non-ASCII characters") from exc
        if any((ord(ch) < 0x20 and ch != "\t") or ord(ch) == 0x7F for ch in value):
            raise InvalidHeaderError(f"invalid header value for {name}: control characters")
        out[name] = value
    return out


def exchange(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    headers: Mapping[str, str],
    json_body: Optional[Any] = None,
    timeout: Optional[float] = None,
) -> Tuple[int, str]:
    """Send one request and return ``(status_code, body_text)``.

    ``timeout`` overrides the client's own timeout for this request.
    """
    extra: Dict[str, Any] = {}
    if timeout is not None:
        extra["timeout"] = httpx.Timeout(timeout)
    request = client.build_request(method, url, headers=check_headers(headers), json=json_body, **extra)
    response = client.send(request, stream=True)
    try:
        response.read()
    except httpx.TimeoutException:
        raise
    except (httpx.HTTPError, httpx.StreamError) as exc:
        raise BodyReadError(str(exc) or type(exc).__name__) from exc
    finally:
        response.close()
    return response.status_code, response.text


__all__ = ["InvalidHeaderError", "BodyReadError", "check_headers", "exchange"]
