"""OpenAI Responses API request/response shaping.

Side-effect free; used by :class:`~kforge_providers.openai.client.OpenAIProvider`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.models import RequestDescriptor, UsageDescriptor
from ..base.utils import iter_objects, join_fragments, json_get


def build_responses_body(request: RequestDescriptor) -> Dict[str, Any]:
    """Build a text-only, non-streaming ``/v1/responses`` body.

    ``store`` is always ``false`` so the upstream does not retain the
    exchange.
    """
    body: Dict[str, Any] = {
        "model": request.model,
        "input": request.input,
        "store": False,
        "stream": False,
    }
    if request.has_system():
        body["instructions"] = request.system
    if request.temperature is not None:
        body["temperature"] = request.temperature
    if request.max_output_tokens is not None:
        body["max_output_tokens"] = request.max_output_tokens
    return body


def extract_output_text(tree: Mapping[str, Any]) -> str:
    """Collect ``output[type=message].content[type=output_text].text`` in order.

    Reasoning items, tool calls and refusals are skipped.
    """
    fragments: List[str] = []
    for item in iter_objects(tree.get("output")):
        if item.get("type") != "message":
            continue
        for part in iter_objects(item.get("content")):
            text = part.get("text")
            if part.get("type") == "output_text" and isinstance(text, str):
                fragments.append(text)
    return join_fragments(fragments)


def extract_usage(tree: Mapping[str, Any]) -> Optional[UsageDescriptor]:
    usage = json_get(tree, "usage")
    if not isinstance(usage, Mapping):
        return None
    return UsageDescriptor.from_counts(
        usage.get("input_tokens"),
        usage.get("output_tokens"),
        usage.get("total_tokens"),
    )


__all__ = ["build_responses_body", "extract_output_text", "extract_usage"]
