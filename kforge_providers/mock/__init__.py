"""Mock provider package."""

from .client import MockProvider

__all__ = ["MockProvider"]
