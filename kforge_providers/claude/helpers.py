"""Anthropic Messages API request/response shaping."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.models import RequestDescriptor, UsageDescriptor
from ..base.utils import iter_objects, join_fragments, json_get
from ..config.defaults import CLAUDE_DEFAULT_MAX_TOKENS


def build_messages_body(request: RequestDescriptor) -> Dict[str, Any]:
    """Build a ``/v1/messages`` body with one user turn.

    ``max_tokens`` is mandatory upstream and defaults to
    :data:`CLAUDE_DEFAULT_MAX_TOKENS` when the request has no cap.
    """
    max_tokens = request.max_output_tokens
    body: Dict[str, Any] = {
        "model": request.model,
        "max_tokens": CLAUDE_DEFAULT_MAX_TOKENS if max_tokens is None else max_tokens,
        "messages": [
            {"role": "user", "content": [{"type": "text", "text": request.input}]},
        ],
        "stream": False,
    }
    if request.has_system():
        body["system"] = request.system
    if request.temperature is not None:
        body["temperature"] = request.temperature
    return body


def extract_output_text(tree: Mapping[str, Any]) -> str:
    """Newline-join ``content[type=text].text`` blocks in document order."""
    fragments: List[str] = [
        block["text"]
        for block in iter_objects(tree.get("content"))
        if block.get("type") == "text" and isinstance(block.get("text"), str)
    ]
    return join_fragments(fragments)


def extract_usage(tree: Mapping[str, Any]) -> Optional[UsageDescriptor]:
    usage = json_get(tree, "usage")
    if not isinstance(usage, Mapping):
        return None
    return UsageDescriptor.from_counts(usage.get("input_tokens"), usage.get("output_tokens"))


__all__ = ["build_messages_body", "extract_output_text", "extract_usage"]
