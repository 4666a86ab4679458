"""kforge_providers package

Provider abstraction layer for the KForge desktop application.

Purpose:
    Give callers one provider-agnostic way to run a single-turn text
    generation against hosted and local LLM upstreams (OpenAI, Claude,
    Gemini, DeepSeek, Groq, Mistral, OpenRouter, Ollama, a custom
    OpenAI-compatible endpoint, and an offline mock), with API keys kept in
    the platform secure store.

Public API (re-exported):
    - Version: ``__version__``
    - Dispatch: :func:`generate` (never raises), :func:`create`
    - Data model: :class:`RequestDescriptor`, :class:`ResponseDescriptor`,
      :class:`UsageDescriptor`, :class:`ErrorPayload`
    - Errors: :class:`ProviderError`, :class:`ErrorKind`
    - Factory: :class:`ProviderFactory`
    - Credentials: :class:`CredentialStore`, :func:`get_credential_store`

Example::

    from kforge_providers import RequestDescriptor, generate

    result = generate(RequestDescriptor(provider_id="mock", model="m", input="hi"))
"""

from .base import (
    CredentialStore,
    ErrorKind,
    ErrorPayload,
    LLMProvider,
    ModelListingProvider,
    ProviderError,
    ProviderFactory,
    RequestDescriptor,
    ResponseDescriptor,
    UnknownProviderError,
    UsageDescriptor,
    create,
    generate,
    get_credential_store,
    set_credential_store,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "generate",
    "create",
    "RequestDescriptor",
    "ResponseDescriptor",
    "UsageDescriptor",
    "ErrorPayload",
    "ErrorKind",
    "ProviderError",
    "UnknownProviderError",
    "ProviderFactory",
    "LLMProvider",
    "ModelListingProvider",
    "CredentialStore",
    "get_credential_store",
    "set_credential_store",
]
