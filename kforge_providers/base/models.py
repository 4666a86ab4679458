"""
Provider-agnostic data model.

Pure data: request, response, usage and error descriptors exchanged between
callers and adapters. All of them serialize to plain JSON-compatible dicts
via ``to_dict``.
"""

from .errors_parts.error_payload import ErrorPayload
from .models_parts.request_descriptor import RequestDescriptor
from .models_parts.response_descriptor import ResponseDescriptor
from .models_parts.usage_descriptor import UsageDescriptor

__all__ = [
    "RequestDescriptor",
    "ResponseDescriptor",
    "UsageDescriptor",
    "ErrorPayload",
]
