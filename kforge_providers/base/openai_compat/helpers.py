"""Request/response shaping for Chat Completions-style upstreams.

Side-effect free; used by :class:`BaseCompatProvider` and usable on its own
for any ``/v1/chat/completions`` payload.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from ..models import RequestDescriptor, ResponseDescriptor, UsageDescriptor
from ..utils import json_get, json_str


def build_chat_messages(request: RequestDescriptor) -> List[Dict[str, str]]:
    """Return ``[system?, user]`` messages; a blank system prompt is omitted."""
    messages: List[Dict[str, str]] = []
    if request.has_system():
        messages.append({"role": "system", "content": request.system or ""})
    messages.append({"role": "user", "content": request.input})
    return messages


def build_chat_body(request: RequestDescriptor) -> Dict[str, Any]:
    """Build a non-streaming Chat Completions body."""
    body: Dict[str, Any] = {
        "model": request.model,
        "messages": build_chat_messages(request),
        "stream": False,
    }
    if request.temperature is not None:
        body["temperature"] = request.temperature
    if request.max_output_tokens is not None:
        body["max_tokens"] = request.max_output_tokens
    return body


def extract_chat_text(tree: Mapping[str, Any]) -> str:
    """Return ``choices[0].message.content`` or ``""``."""
    return json_str(tree, "choices", 0, "message", "content") or ""


def extract_chat_usage(tree: Mapping[str, Any]):
    """Map ``usage.prompt_tokens``/``completion_tokens``/``total_tokens``."""
    usage = json_get(tree, "usage")
    if not isinstance(usage, Mapping):
        return None
    return UsageDescriptor.from_counts(
        usage.get("prompt_tokens"),
        usage.get("completion_tokens"),
        usage.get("total_tokens"),
    )


def parse_chat_completion(tree: Mapping[str, Any], provider_id: str, requested_model: str) -> ResponseDescriptor:
    """Normalize a Chat Completions success body."""
    return ResponseDescriptor(
        id=json_str(tree, "id") or "unknown",
        provider_id=provider_id,
        model=json_str(tree, "model") or requested_model,
        output_text=extract_chat_text(tree),
        usage=extract_chat_usage(tree),
    )


__all__ = [
    "build_chat_messages",
    "build_chat_body",
    "extract_chat_text",
    "extract_chat_usage",
    "parse_chat_completion",
]
