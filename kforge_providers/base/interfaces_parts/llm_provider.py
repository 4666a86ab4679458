"""LLMProvider Protocol (single-class module).

Defines the generation contract every adapter implements.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import RequestDescriptor, ResponseDescriptor


@runtime_checkable
class LLMProvider(Protocol):
    """Minimal interface for Large Language Model providers.

    Implementations map :class:`RequestDescriptor` fields onto their
    upstream's wire format and normalize the reply into a
    :class:`ResponseDescriptor`. Calls are synchronous and may block on
    network I/O; adapters only read the credential store.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"`` or ``"claude"``."""
        ...

    def generate(self, request: RequestDescriptor) -> ResponseDescriptor:
        """Execute a single non-streaming generation request.

        Failure handling: every failure is raised as
        :class:`~kforge_providers.base.errors.ProviderError`.
        """
        ...
