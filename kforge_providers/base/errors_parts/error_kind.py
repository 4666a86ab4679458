"""
Normalized provider error kinds (taxonomy).

Defines the closed `ErrorKind` enumeration every adapter failure is mapped
into. Values are the PascalCase names the desktop front end branches on and
are considered a stable public contract.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Enumerated error kinds representing failure categories."""

    AUTH = "Auth"
    RATE_LIMITED = "RateLimited"
    NETWORK = "Network"
    BAD_REQUEST = "BadRequest"
    SERVER = "Server"
    UPSTREAM = "Upstream"
    PARSE = "Parse"
    PROVIDER = "Provider"
    UNKNOWN = "Unknown"


__all__ = ["ErrorKind"]
