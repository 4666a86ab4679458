"""
Providers Base Package

Exports the provider-agnostic contracts, data model, error taxonomy,
credential store and provider factory:

- Interfaces: ``LLMProvider`` and ``ModelListingProvider``
- Models: request / response / usage / error descriptors
- Repositories: keyring-backed credential store
- Factory: lazy creation of provider adapters by id
- Dispatch: ``generate`` returning a response or an error payload
"""

from .dispatch import create, generate
from .errors import ErrorKind, ErrorPayload, ProviderError, classify_exception, kind_for_status
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import LLMProvider, ModelListingProvider
from .models import RequestDescriptor, ResponseDescriptor, UsageDescriptor
from .repositories import CredentialStore, get_credential_store, set_credential_store
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "RequestDescriptor",
    "ResponseDescriptor",
    "UsageDescriptor",
    "ErrorPayload",
    # Errors
    "ErrorKind",
    "ProviderError",
    "UnknownProviderError",
    "classify_exception",
    "kind_for_status",
    # Interfaces
    "LLMProvider",
    "ModelListingProvider",
    # Factory / dispatch
    "ProviderFactory",
    "create",
    "generate",
    # Repositories
    "CredentialStore",
    "get_credential_store",
    "set_credential_store",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
]
