"""Ollama provider package."""

from .client import OllamaProvider
from .get_ollama_models import get_ollama_models

__all__ = ["OllamaProvider", "get_ollama_models"]
