"""
Token usage counters reported by an upstream.

Counts are unsigned 32-bit quantities. When the upstream reports input and
output counts but no total, the total is derived as their saturating sum; an
explicit upstream total is kept as-is even when it disagrees.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

MAX_TOKEN_COUNT = 2**32 - 1


def saturating_add(a: int, b: int) -> int:
    """Add two token counts, clamping at :data:`MAX_TOKEN_COUNT`."""
    return min(a + b, MAX_TOKEN_COUNT)


def coerce_count(value: Any) -> Optional[int]:
    """Return ``value`` as a token count, or ``None`` when it is not one.

    Accepts non-negative ints and integral floats (some gateways emit
    ``12.0``). Booleans, negatives and anything else are treated as absent.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and value >= 0:
        return min(value, MAX_TOKEN_COUNT)
    return None


@dataclass(frozen=True)
class UsageDescriptor:
    """Token counts for a single generation call."""

    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    def __post_init__(self) -> None:
        if self.total_tokens is None and self.input_tokens is not None and self.output_tokens is not None:
            object.__setattr__(self, "total_tokens", saturating_add(self.input_tokens, self.output_tokens))

    @classmethod
    def from_counts(cls, input_tokens: Any = None, output_tokens: Any = None, total_tokens: Any = None) -> Optional["UsageDescriptor"]:
        """Build usage from raw upstream values.

        Returns ``None`` when none of the three counts is usable, so responses
        without usage data carry no usage object at all.
        """
        i, o, t = coerce_count(input_tokens), coerce_count(output_tokens), coerce_count(total_tokens)
        if i is None and o is None and t is None:
            return None
        return cls(input_tokens=i, output_tokens=o, total_tokens=t)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dict, omitting absent counts."""
        return {
            k: v
            for k, v in (
                ("input_tokens", self.input_tokens),
                ("output_tokens", self.output_tokens),
                ("total_tokens", self.total_tokens),
            )
            if v is not None
        }


__all__ = ["UsageDescriptor", "MAX_TOKEN_COUNT", "saturating_add", "coerce_count"]
