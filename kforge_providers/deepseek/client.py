"""DeepSeek provider adapter (OpenAI-compatible Chat Completions).

Thin declaration over :class:`BaseCompatProvider`; the shared client appends
``/v1/chat/completions`` to the version-less base URL.
"""

from __future__ import annotations

from ..base.openai_compat import BaseCompatProvider
from ..config.defaults import DEEPSEEK_DEFAULT_BASE_URL


class DeepSeekProvider(BaseCompatProvider):
    PROVIDER_ID = "deepseek"
    DISPLAY_NAME = "DeepSeek"
    DEFAULT_BASE_URL = DEEPSEEK_DEFAULT_BASE_URL


__all__ = ["DeepSeekProvider"]
