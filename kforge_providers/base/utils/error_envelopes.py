"""Extraction of human-readable messages from upstream error bodies.

Each function takes the raw response text and returns the upstream's own
message, or ``None`` when the body does not match the expected envelope
(callers then fall back to the raw text).
"""
from __future__ import annotations

import json
from typing import Any, Optional

from .json_path import json_get, json_str


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return None


def openai_style_message(text: str) -> Optional[str]:
    """``{"error": {"message": "..."}}`` as used by OpenAI, Anthropic and most gateways."""
    msg = json_str(_loads(text), "error", "message")
    return msg if msg and msg.strip() else None


def gemini_message(text: str) -> Optional[str]:
    """``{"error": {"code": 400, "message": "...", "status": "INVALID_ARGUMENT"}}``.

    Rendered as ``code=400; status=INVALID_ARGUMENT; <message>`` with absent
    parts left out.
    """
    err = json_get(_loads(text), "error")
    if not isinstance(err, dict):
        return None
    parts = []
    code = err.get("code")
    if isinstance(code, int) and not isinstance(code, bool):
        parts.append(f"code={code}")
    status = err.get("status")
    if isinstance(status, str) and status:
        parts.append(f"status={status}")
    message = err.get("message")
    if isinstance(message, str) and message:
        parts.append(message)
    return "; ".join(parts) if parts else None


def ollama_message(text: str) -> Optional[str]:
    """``{"error": "model 'x' not found"}``."""
    msg = json_str(_loads(text), "error")
    return msg if msg and msg.strip() else None


__all__ = ["openai_style_message", "gemini_message", "ollama_message"]
