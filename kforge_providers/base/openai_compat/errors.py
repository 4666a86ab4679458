"""Failure types raised by :class:`CompatClient`.

These stay internal to the compatible-family adapters, which translate them
into :class:`~kforge_providers.base.errors.ProviderError` so each adapter can
word its own messages (e.g. the Mistral rate-limit hint).
"""

from __future__ import annotations


class CompatError(Exception):
    """Base class for shared-client failures."""


class CompatUpstreamError(CompatError):
    """Non-2xx response; the full response body is preserved verbatim."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"upstream error {status}: {body}")
        self.status = status
        self.body = body


class CompatTransportError(CompatError):
    """Connection refused, DNS failure, TLS failure or timeout."""


class CompatBodyReadError(CompatError):
    """The response arrived but its body could not be read."""


class CompatDecodeError(CompatError):
    """A 2xx body that is not valid JSON."""


class CompatHeaderError(CompatError):
    """An invalid header name or value (including the API key)."""


__all__ = [
    "CompatError",
    "CompatUpstreamError",
    "CompatTransportError",
    "CompatBodyReadError",
    "CompatDecodeError",
    "CompatHeaderError",
]
