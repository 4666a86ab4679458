"""
Structured provider error exception type.

`ProviderError` is the only exception adapters raise. It carries everything
needed to build the serializable :class:`ErrorPayload` handed to callers at
the component boundary.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_payload import ErrorPayload
from .error_kind import ErrorKind


@dataclass
class ProviderError(Exception):
    """Represents a normalized provider failure.

    Attributes:
        kind: Normalized :class:`ErrorKind` classification for the failure.
        message: Human-readable message; keeps the upstream's own error text
            whenever one was available.
        provider: Provider id where the error originated (e.g. ``"claude"``).
        http_status: Upstream HTTP status code, when the failure came from a
            non-2xx response.
    """

    kind: ErrorKind
    message: str
    provider: Optional[str] = None
    http_status: Optional[int] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, kind, status and message."""
        if self.provider and self.http_status is not None:
            return f"[{self.provider}] {self.kind.value} (HTTP {self.http_status}): {self.message}"
        if self.provider:
            return f"[{self.provider}] {self.kind.value}: {self.message}"
        return f"{self.kind.value}: {self.message}"

    def to_payload(self) -> ErrorPayload:
        """Return the boundary-safe :class:`ErrorPayload` for this error."""
        return ErrorPayload(
            kind=self.kind,
            message=self.message,
            provider=self.provider,
            http_status=self.http_status,
        )


__all__ = ["ProviderError"]
