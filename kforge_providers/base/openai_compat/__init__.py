"""Shared OpenAI-compatible client family.

``CompatClient`` speaks the ``/v1/...`` protocol; ``BaseCompatProvider``
turns it into an :class:`~kforge_providers.base.interfaces.LLMProvider`.
"""

from .client import CompatClient
from .config import CompatConfig
from .errors import (
    CompatBodyReadError,
    CompatDecodeError,
    CompatError,
    CompatHeaderError,
    CompatTransportError,
    CompatUpstreamError,
)
from .helpers import build_chat_body, build_chat_messages, parse_chat_completion
from .provider import BaseCompatProvider

__all__ = [
    "CompatClient",
    "CompatConfig",
    "CompatError",
    "CompatUpstreamError",
    "CompatTransportError",
    "CompatBodyReadError",
    "CompatDecodeError",
    "CompatHeaderError",
    "BaseCompatProvider",
    "build_chat_body",
    "build_chat_messages",
    "parse_chat_completion",
]
