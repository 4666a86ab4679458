"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``kforge_providers.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_kind import ErrorKind
from .errors_parts.error_payload import ErrorPayload
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception, kind_for_status

__all__ = ["ErrorKind", "ErrorPayload", "ProviderError", "classify_exception", "kind_for_status"]
