"""Custom endpoint adapter for any OpenAI-compatible server.

Intended for self-hosted gateways (vLLM, LM Studio, LiteLLM, ...): the
request's ``endpoint`` points at the server and the key stored under
``custom`` is sent as a bearer token. Upstream error bodies are surfaced
verbatim since their shape is unknown.
"""

from __future__ import annotations

from ..base.openai_compat import BaseCompatProvider
from ..config.defaults import CUSTOM_DEFAULT_BASE_URL


class CustomProvider(BaseCompatProvider):
    PROVIDER_ID = "custom"
    DISPLAY_NAME = "Custom endpoint"
    DEFAULT_BASE_URL = CUSTOM_DEFAULT_BASE_URL
    PRESERVE_RAW_BODY = True


__all__ = ["CustomProvider"]
