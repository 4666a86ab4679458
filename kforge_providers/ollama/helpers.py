"""Ollama request/response shaping (``/api/chat`` and ``/api/tags``)."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.models import RequestDescriptor, UsageDescriptor
from ..base.openai_compat.helpers import build_chat_messages
from ..base.utils import iter_objects, json_str


def build_chat_body(request: RequestDescriptor) -> Dict[str, Any]:
    """Build a non-streaming ``/api/chat`` body.

    Sampling settings live under ``options``; the token cap is
    ``num_predict``.
    """
    body: Dict[str, Any] = {"model": request.model, "messages": build_chat_messages(request), "stream": False}
    options: Dict[str, Any] = {}
    if request.temperature is not None:
        options["temperature"] = request.temperature
    if request.max_output_tokens is not None:
        options["num_predict"] = request.max_output_tokens
    if options:
        body["options"] = options
    return body


def extract_output_text(tree: Mapping[str, Any]) -> str:
    return json_str(tree, "message", "content") or ""


def extract_usage(tree: Mapping[str, Any]) -> Optional[UsageDescriptor]:
    """``prompt_eval_count``/``eval_count``; Ollama reports no total."""
    return UsageDescriptor.from_counts(tree.get("prompt_eval_count"), tree.get("eval_count"))


def extract_model_names(tree: Mapping[str, Any]) -> List[str]:
    """Return ``models[].name`` deduplicated and sorted."""
    names = {
        item["name"]
        for item in iter_objects(tree.get("models"))
        if isinstance(item.get("name"), str) and item["name"]
    }
    return sorted(names)


__all__ = ["build_chat_body", "extract_output_text", "extract_usage", "extract_model_names"]
