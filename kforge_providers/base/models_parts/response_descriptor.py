"""
ResponseDescriptor DTO representing a normalized generation result.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .usage_descriptor import UsageDescriptor


@dataclass(frozen=True)
class ResponseDescriptor:
    """Provider-agnostic result of a generation call.

    Attributes:
        id: Upstream response id, or a provider-specific placeholder when the
            upstream omitted it.
        provider_id: Id of the adapter that served the call.
        model: Model reported by the upstream, else the requested model.
        output_text: Generated text; fragments are newline-joined in
            document order. May be empty.
        usage: Optional token usage.
    """

    id: str
    provider_id: str
    model: str
    output_text: str
    usage: Optional[UsageDescriptor] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dict, omitting ``usage`` when absent."""
        out: Dict[str, Any] = {
            "id": self.id,
            "provider_id": self.provider_id,
            "model": self.model,
            "output_text": self.output_text,
        }
        if self.usage is not None:
            out["usage"] = self.usage.to_dict()
        return out


__all__ = ["ResponseDescriptor"]
