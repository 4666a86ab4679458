"""Anthropic Claude provider adapter (Messages API).

Authenticates with ``x-api-key`` and pins ``anthropic-version``. Error
bodies use the ``{"type": "error", "error": {"type", "message"}}``
envelope; its message is surfaced verbatim.
"""

from __future__ import annotations

from ..base.http_provider import BaseHttpProvider
from ..base.models import RequestDescriptor, ResponseDescriptor
from ..base.utils import json_str
from ..config.defaults import CLAUDE_API_VERSION, CLAUDE_DEFAULT_BASE_URL
from .helpers import build_messages_body, extract_output_text, extract_usage


class ClaudeProvider(BaseHttpProvider):
    """Adapter for ``api.anthropic.com``."""

    PROVIDER_ID = "claude"
    DISPLAY_NAME = "Claude"
    DEFAULT_BASE_URL = CLAUDE_DEFAULT_BASE_URL

    def _generate(self, request: RequestDescriptor) -> ResponseDescriptor:
        self._require_input(request)
        base_url = self._resolve_base_url(request)
        api_key = self._load_api_key()
        tree = self._post_for_object(
            f"{base_url}/v1/messages",
            headers={
                "x-api-key": api_key,
                "anthropic-version": CLAUDE_API_VERSION,
                "Content-Type": "application/json",
            },
            body=build_messages_body(request),
            base_url=base_url,
        )
        return ResponseDescriptor(
            id=json_str(tree, "id") or "unknown",
            provider_id=self.provider_name,
            model=json_str(tree, "model") or request.model,
            output_text=extract_output_text(tree),
            usage=extract_usage(tree),
        )


__all__ = ["ClaudeProvider"]
