"""Mistral provider adapter (OpenAI-compatible Chat Completions).

Error bodies are surfaced verbatim. Free-tier keys hit 429 often, so rate
limit failures carry a hint telling the user what happened.
"""

from __future__ import annotations

from ..base.openai_compat import BaseCompatProvider
from ..config.defaults import MISTRAL_DEFAULT_BASE_URL

RATE_LIMIT_HINT = (
    "\n\nHint: Mistral rate limit / free-tier evaluation limit reached. "
    "Check your Mistral usage/limits or try again later."
)


class MistralProvider(BaseCompatProvider):
    PROVIDER_ID = "mistral"
    DISPLAY_NAME = "Mistral"
    DEFAULT_BASE_URL = MISTRAL_DEFAULT_BASE_URL
    PRESERVE_RAW_BODY = True
    RATE_LIMIT_HINT = RATE_LIMIT_HINT


__all__ = ["MistralProvider", "RATE_LIMIT_HINT"]
