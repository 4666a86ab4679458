"""Configuration bundle for the shared OpenAI-compatible client.

Pure data; no I/O happens here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class CompatConfig:
    """Connection settings for one OpenAI-compatible upstream.

    Attributes:
        base_url: Upstream base without the ``/v1`` suffix, e.g.
            ``https://api.groq.com/openai``. Trailing slashes are tolerated.
        api_key: Secret sent as ``Authorization: Bearer <api_key>``.
        extra_headers: Additional ``(name, value)`` header pairs, e.g. the
            OpenRouter attribution headers.
        timeout_seconds: Per-request timeout.
        default_model: Optional model used when a body omits one.
    """

    base_url: str
    api_key: str
    extra_headers: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    timeout_seconds: float = 60.0
    default_model: Optional[str] = None

    def normalized_base_url(self) -> str:
        """Return the base URL without surrounding whitespace or trailing slashes."""
        return self.base_url.strip().rstrip("/")


__all__ = ["CompatConfig"]
