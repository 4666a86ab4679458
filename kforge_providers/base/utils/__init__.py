"""Small shared helpers for response parsing."""

from .clock import now_millis
from .error_envelopes import gemini_message, ollama_message, openai_style_message
from .json_path import iter_objects, join_fragments, json_get, json_list, json_str

__all__ = [
    "now_millis",
    "json_get",
    "json_str",
    "json_list",
    "iter_objects",
    "join_fragments",
    "openai_style_message",
    "gemini_message",
    "ollama_message",
]
