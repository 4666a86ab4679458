"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `kforge_providers.base.errors` for the stable surface.
"""

from .error_kind import ErrorKind
from .error_payload import ErrorPayload
from .provider_error import ProviderError
from .classification import classify_exception, kind_for_status

__all__ = ["ErrorKind", "ErrorPayload", "ProviderError", "classify_exception", "kind_for_status"]
