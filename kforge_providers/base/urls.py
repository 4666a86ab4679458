"""Base-URL normalization shared by every adapter.

Adapters store base URLs *without* an API version suffix and append their
own versioned path. User-supplied endpoints frequently carry the version
anyway (``http://localhost:11434/v1/``), so overrides are normalized here
exactly once before use.
"""
from __future__ import annotations

from typing import Iterable, Optional


def normalize_base_url(raw: str, version_segments: Iterable[str] = ("/v1",)) -> str:
    """Return ``raw`` trimmed of whitespace, trailing slashes and version suffixes.

    Version segments are removed repeatedly (``/v1/v1/`` collapses fully) and
    trailing slashes between them are stripped too, so the function is
    idempotent: ``normalize_base_url(normalize_base_url(u)) == normalize_base_url(u)``.

    Matching is case-sensitive.
    """
    segments = tuple(s.rstrip("/") for s in version_segments if s and s.strip("/"))
    url = (raw or "").strip().rstrip("/")
    changed = True
    while changed:
        changed = False
        for seg in segments:
            if url.endswith(seg):
                url = url[: -len(seg)].rstrip("/")
                changed = True
    return url


def resolve_base_url(
    override: Optional[str],
    default: str,
    version_segments: Iterable[str] = ("/v1",),
) -> str:
    """Pick ``override`` when non-blank, else ``default``, and normalize it."""
    chosen = override if override and override.strip() else default
    return normalize_base_url(chosen, version_segments)


__all__ = ["normalize_base_url", "resolve_base_url"]
