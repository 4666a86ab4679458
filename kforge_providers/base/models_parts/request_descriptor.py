"""
RequestDescriptor DTO for provider-agnostic generation calls.

One user turn plus an optional system instruction. Adapters map these fields
onto their upstream's wire format; the field names match the JSON shape the
desktop front end sends.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class RequestDescriptor:
    """Normalized generation request.

    Attributes:
        provider_id: Registry identifier of the target adapter (e.g. ``"openai"``).
        model: Upstream model identifier.
        input: The user's input text.
        system: Optional system instruction.
        temperature: Optional sampling temperature.
        max_output_tokens: Optional cap on generated tokens.
        endpoint: Optional base-URL override for the upstream.
    """

    provider_id: str
    model: str
    input: str
    system: Optional[str] = None
    temperature: Optional[float] = None
    max_output_tokens: Optional[int] = None
    endpoint: Optional[str] = None

    def has_system(self) -> bool:
        """Return True when a non-blank system instruction is present."""
        return bool(self.system and self.system.strip())

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dict, omitting absent optional fields."""
        out: Dict[str, Any] = {
            "provider_id": self.provider_id,
            "model": self.model,
            "input": self.input,
        }
        for key in ("system", "temperature", "max_output_tokens", "endpoint"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RequestDescriptor":
        """Build a descriptor from its ``to_dict`` shape (no validation)."""
        return cls(
            provider_id=str(data.get("provider_id", "")),
            model=str(data.get("model", "")),
            input=str(data.get("input", "")),
            system=data.get("system"),
            temperature=data.get("temperature"),
            max_output_tokens=data.get("max_output_tokens"),
            endpoint=data.get("endpoint"),
        )


__all__ = ["RequestDescriptor"]
