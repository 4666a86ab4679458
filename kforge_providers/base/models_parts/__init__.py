"""Split model classes for provider DTOs.

Each DTO lives in its own module; ``kforge_providers.base.models`` re-exports
them as the stable import surface.
"""

from .request_descriptor import RequestDescriptor
from .usage_descriptor import UsageDescriptor
from .response_descriptor import ResponseDescriptor

__all__ = ["RequestDescriptor", "UsageDescriptor", "ResponseDescriptor"]
