"""Gemini ``generateContent`` request/response shaping."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.models import RequestDescriptor, UsageDescriptor
from ..base.utils import iter_objects, join_fragments, json_get

_MODEL_PREFIX = "models/"
_METHOD_SUFFIX = ":generateContent"


def normalize_model(model: str) -> str:
    """Accept ``gemini-x``, ``models/gemini-x`` and ``models/gemini-x:generateContent``."""
    m = (model or "").strip()
    if m.startswith(_MODEL_PREFIX):
        m = m[len(_MODEL_PREFIX):]
    if m.endswith(_METHOD_SUFFIX):
        m = m[: -len(_METHOD_SUFFIX)]
    return m.strip()


def build_generate_body(request: RequestDescriptor) -> Dict[str, Any]:
    """Build the camelCase ``generateContent`` body.

    ``generationConfig`` is only sent when a temperature or token cap is set.
    """
    body: Dict[str, Any] = {
        "contents": [{"role": "user", "parts": [{"text": request.input}]}],
    }
    if request.has_system():
        body["systemInstruction"] = {"parts": [{"text": request.system}]}
    generation_config: Dict[str, Any] = {}
    if request.temperature is not None:
        generation_config["temperature"] = request.temperature
    if request.max_output_tokens is not None:
        generation_config["maxOutputTokens"] = request.max_output_tokens
    if generation_config:
        body["generationConfig"] = generation_config
    return body


def extract_output_text(tree: Mapping[str, Any]) -> str:
    """Newline-join the text parts of the first candidate."""
    fragments: List[str] = [
        part["text"]
        for part in iter_objects(json_get(tree, "candidates", 0, "content", "parts"))
        if isinstance(part.get("text"), str)
    ]
    return join_fragments(fragments)


def extract_usage(tree: Mapping[str, Any]) -> Optional[UsageDescriptor]:
    meta = json_get(tree, "usageMetadata")
    if not isinstance(meta, Mapping):
        return None
    return UsageDescriptor.from_counts(
        meta.get("promptTokenCount"),
        meta.get("candidatesTokenCount"),
        meta.get("totalTokenCount"),
    )


__all__ = ["normalize_model", "build_generate_body", "extract_output_text", "extract_usage"]
