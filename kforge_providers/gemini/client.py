"""Google Gemini provider adapter (Generative Language API).

Purpose:
    POSTs ``{base}/v1beta/models/{model}:generateContent`` with the key in the
    ``x-goog-api-key`` header (never in the query string, so it cannot leak
    into logged URLs).

Notes:
    - The API returns no response id; a ``gemini-<millis>`` placeholder is
      used.
    - A 2xx reply without candidate text (e.g. blocked by safety filters) is
      reported as a ``Provider`` error rather than an empty success.
"""

from __future__ import annotations

from typing import Optional

from ..base.errors import ErrorKind
from ..base.http_provider import BaseHttpProvider
from ..base.models import RequestDescriptor, ResponseDescriptor
from ..base.utils import gemini_message, json_str, now_millis
from ..config.defaults import GEMINI_DEFAULT_BASE_URL
from .helpers import build_generate_body, extract_output_text, extract_usage, normalize_model


class GeminiProvider(BaseHttpProvider):
    """Adapter for ``generativelanguage.googleapis.com``."""

    PROVIDER_ID = "gemini"
    DISPLAY_NAME = "Gemini"
    DEFAULT_BASE_URL = GEMINI_DEFAULT_BASE_URL
    VERSION_SEGMENTS = ("/v1beta", "/v1")

    def _extract_error_message(self, text: str) -> Optional[str]:
        return gemini_message(text)

    def _generate(self, request: RequestDescriptor) -> ResponseDescriptor:
        model = normalize_model(request.model)
        if not model:
            raise self._error(ErrorKind.BAD_REQUEST, "Missing model for Gemini request.")
        self._require_input(request)
        base_url = self._resolve_base_url(request)
        api_key = self._load_api_key()
        tree = self._post_for_object(
            f"{base_url}/v1beta/models/{model}:generateContent",
            headers={"x-goog-api-key": api_key, "Content-Type": "application/json"},
            body=build_generate_body(request),
            base_url=base_url,
        )
        output_text = extract_output_text(tree)
        if not output_text.strip():
            raise self._error(ErrorKind.PROVIDER, "Gemini returned an empty response (no candidate text).")
        return ResponseDescriptor(
            id=f"gemini-{now_millis()}",
            provider_id=self.provider_name,
            model=json_str(tree, "modelVersion") or request.model,
            output_text=output_text,
            usage=extract_usage(tree),
        )


__all__ = ["GeminiProvider"]
