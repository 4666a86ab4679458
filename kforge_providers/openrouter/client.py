"""OpenRouter provider adapter (OpenAI-compatible Chat Completions).

Sends the ``HTTP-Referer`` and ``X-Title`` attribution headers OpenRouter
uses to identify the calling application.
"""

from __future__ import annotations

from typing import Tuple

from ..base.openai_compat import BaseCompatProvider
from ..config.defaults import OPENROUTER_DEFAULT_BASE_URL, OPENROUTER_REFERER, OPENROUTER_TITLE


class OpenRouterProvider(BaseCompatProvider):
    PROVIDER_ID = "openrouter"
    DISPLAY_NAME = "OpenRouter"
    DEFAULT_BASE_URL = OPENROUTER_DEFAULT_BASE_URL

    def _extra_headers(self) -> Tuple[Tuple[str, str], ...]:
        return (("HTTP-Referer", OPENROUTER_REFERER), ("X-Title", OPENROUTER_TITLE))


__all__ = ["OpenRouterProvider"]
