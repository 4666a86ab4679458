"""Interfaces (Protocols) split into single-class modules.

``kforge_providers.base.interfaces`` re-exports them as a stable API.
"""

from .llm_provider import LLMProvider
from .model_listing_provider import ModelListingProvider

__all__ = ["LLMProvider", "ModelListingProvider"]
