"""Echoing mock provider for offline use.

Performs no I/O and reads no credentials: the reply echoes the input under a
``mock-<millis>`` id. Useful for wiring the desktop front end and the service
surfaces without a real upstream.
"""

from __future__ import annotations

from typing import Any

from ..base.logging import LogContext, get_logger, log_event
from ..base.models import RequestDescriptor, ResponseDescriptor
from ..base.utils import now_millis

MOCK_PREFIX = "(mock) you said:\n"


class MockProvider:
    """Adapter that answers every request locally."""

    PROVIDER_ID = "mock"

    def __init__(self, **_ignored: Any) -> None:
        self._logger = get_logger("kforge.providers.mock")

    @property
    def provider_name(self) -> str:
        return self.PROVIDER_ID

    def generate(self, request: RequestDescriptor) -> ResponseDescriptor:
        response = ResponseDescriptor(
            id=f"mock-{now_millis()}",
            provider_id=self.PROVIDER_ID,
            model=request.model,
            output_text=f"{MOCK_PREFIX}{request.input}",
            usage=None,
        )
        log_event(
            self._logger,
            "generate.end",
            LogContext(provider=self.PROVIDER_ID, model=request.model, response_id=response.id),
            output_chars=len(response.output_text),
        )
        return response


__all__ = ["MockProvider", "MOCK_PREFIX"]
