"""Anthropic Claude provider package."""

from .client import ClaudeProvider

__all__ = ["ClaudeProvider"]
