"""Wall-clock helpers."""
from __future__ import annotations

import time


def now_millis() -> int:
    """Milliseconds since the Unix epoch; used for placeholder response ids."""
    return time.time_ns() // 1_000_000


__all__ = ["now_millis"]
