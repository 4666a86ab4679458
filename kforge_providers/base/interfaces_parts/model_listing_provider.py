"""ModelListingProvider Protocol (single-class module)."""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable


@runtime_checkable
class ModelListingProvider(Protocol):
    """Adapters that can enumerate the models their upstream serves."""

    def list_models(self) -> List[str]:
        """Return model names, deduplicated and sorted."""
        ...
