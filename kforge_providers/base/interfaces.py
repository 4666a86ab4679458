"""Provider capability interfaces public surface."""

from .interfaces_parts import LLMProvider, ModelListingProvider

__all__ = ["LLMProvider", "ModelListingProvider"]
