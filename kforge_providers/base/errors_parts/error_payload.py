"""
Serializable error descriptor returned across the component boundary.

`ErrorPayload` is pure data: a kind from the closed taxonomy, a message, and
optional provider / HTTP status context. ``to_dict`` omits absent optional
fields so the JSON shape stays stable for the desktop front end.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .error_kind import ErrorKind


@dataclass(frozen=True)
class ErrorPayload:
    """Boundary-safe description of a failed operation.

    Attributes:
        kind: Normalized :class:`ErrorKind`.
        message: Human-readable message.
        provider: Originating provider id, when known.
        http_status: Upstream HTTP status code, when the failure was a
            non-2xx response.
    """

    kind: ErrorKind
    message: str
    provider: Optional[str] = None
    http_status: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dict, omitting absent optional fields."""
        out: Dict[str, Any] = {"kind": self.kind.value, "message": self.message}
        if self.provider is not None:
            out["provider"] = self.provider
        if self.http_status is not None:
            out["http_status"] = self.http_status
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ErrorPayload":
        """Rebuild a payload from its ``to_dict`` shape."""
        return cls(
            kind=ErrorKind(data["kind"]),
            message=str(data.get("message", "")),
            provider=data.get("provider"),
            http_status=data.get("http_status"),
        )


__all__ = ["ErrorPayload"]
