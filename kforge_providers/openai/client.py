"""OpenAI provider adapter (Responses API).

Purpose:
    POSTs ``{base}/v1/responses`` directly over ``httpx`` with bearer
    authentication and normalizes the reply into a ``ResponseDescriptor``.

Failure semantics:
    Non-2xx bodies are read in full; ``error.message`` is surfaced when the
    standard envelope is present, otherwise the raw text.
"""

from __future__ import annotations

from ..base.http_provider import BaseHttpProvider
from ..base.models import RequestDescriptor, ResponseDescriptor
from ..base.utils import json_str
from ..config.defaults import OPENAI_DEFAULT_BASE_URL
from .helpers import build_responses_body, extract_output_text, extract_usage


class OpenAIProvider(BaseHttpProvider):
    """Adapter for ``api.openai.com`` (or any Responses-compatible endpoint)."""

    PROVIDER_ID = "openai"
    DISPLAY_NAME = "OpenAI"
    DEFAULT_BASE_URL = OPENAI_DEFAULT_BASE_URL

    def _generate(self, request: RequestDescriptor) -> ResponseDescriptor:
        self._require_input(request)
        base_url = self._resolve_base_url(request)
        api_key = self._load_api_key()
        tree = self._post_for_object(
            f"{base_url}/v1/responses",
            headers={"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"},
            body=build_responses_body(request),
            base_url=base_url,
        )
        return ResponseDescriptor(
            id=json_str(tree, "id") or "unknown",
            provider_id=self.provider_name,
            model=json_str(tree, "model") or request.model,
            output_text=extract_output_text(tree),
            usage=extract_usage(tree),
        )


__all__ = ["OpenAIProvider"]
