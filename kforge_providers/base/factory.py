"""Provider Factory utilities.

Purpose
-------
Resolve a provider id to an adapter instance implementing ``LLMProvider``.
Adapters are imported lazily with ``importlib`` so unknown ids fail before any
adapter module is imported, constructed or allowed near the network.

Scope
-----
The provider set is closed: ``mock``, ``openai``, ``claude``, ``gemini``,
``deepseek``, ``groq``, ``mistral``, ``openrouter``, ``ollama`` and
``custom``.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import import_module
from typing import Any, Dict, Tuple, Type

from .errors import ErrorKind, ProviderError


@dataclass
class UnknownProviderError(ProviderError):
    """Raised when a provider id is not registered.

    Always carries the ``BadRequest`` kind.
    """

    kind: ErrorKind = ErrorKind.BAD_REQUEST
    message: str = "Unknown provider"

    @classmethod
    def for_id(cls, provider_id: str) -> "UnknownProviderError":
        return cls(
            kind=ErrorKind.BAD_REQUEST,
            message=f"Unknown provider '{provider_id}'. Supported: {', '.join(ProviderFactory.supported())}",
            provider=provider_id or None,
        )


class ProviderFactory:
    """Create provider adapters from a canonical id (e.g. ``"openai"``).

    Design notes
    ------------
    - Ids are matched after trimming and lower-casing.
    - Constructor keyword arguments (``credentials``, ``http_client``,
      ``base_url``) are forwarded unchanged; the mock adapter ignores them.
    """

    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "mock": {"module": "kforge_providers.mock.client", "class": "MockProvider"},
        "openai": {"module": "kforge_providers.openai.client", "class": "OpenAIProvider"},
        "claude": {"module": "kforge_providers.claude.client", "class": "ClaudeProvider"},
        "gemini": {"module": "kforge_providers.gemini.client", "class": "GeminiProvider"},
        "deepseek": {"module": "kforge_providers.deepseek.client", "class": "DeepSeekProvider"},
        "groq": {"module": "kforge_providers.groq.client", "class": "GroqProvider"},
        "mistral": {"module": "kforge_providers.mistral.client", "class": "MistralProvider"},
        "openrouter": {"module": "kforge_providers.openrouter.client", "class": "OpenRouterProvider"},
        "ollama": {"module": "kforge_providers.ollama.client", "class": "OllamaProvider"},
        "custom": {"module": "kforge_providers.custom.client", "class": "CustomProvider"},
    }

    @staticmethod
    def canonical(provider: str) -> str:
        return (provider or "").lower().strip()

    @classmethod
    def is_supported(cls, provider: str) -> bool:
        return cls.canonical(provider) in cls._PROVIDERS

    @classmethod
    def resolve(cls, provider: str) -> Type:
        """Return the adapter class for ``provider`` (imports its module).

        Raises
        ------
        UnknownProviderError
            If the id is not registered. Nothing is imported in that case.
        """
        name = cls.canonical(provider)
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError.for_id(provider)
        mod = import_module(spec["module"])
        return getattr(mod, spec["class"])

    @classmethod
    def create(cls, provider: str, **kwargs: Any) -> Any:
        """Create a provider adapter instance.

        Import or constructor failures of a *registered* adapter are
        programming errors and propagate unchanged.
        """
        klass = cls.resolve(provider)
        return klass(**kwargs)

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported provider ids in deterministic order."""
        return tuple(cls._PROVIDERS.keys())


__all__ = ["ProviderFactory", "UnknownProviderError"]
