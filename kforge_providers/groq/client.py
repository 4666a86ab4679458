"""Groq provider adapter (OpenAI-compatible Chat Completions under ``/openai``)."""

from __future__ import annotations

from ..base.openai_compat import BaseCompatProvider
from ..config.defaults import GROQ_DEFAULT_BASE_URL


class GroqProvider(BaseCompatProvider):
    PROVIDER_ID = "groq"
    DISPLAY_NAME = "Groq"
    DEFAULT_BASE_URL = GROQ_DEFAULT_BASE_URL


__all__ = ["GroqProvider"]
