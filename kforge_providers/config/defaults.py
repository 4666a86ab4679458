"""kforge_providers.config.defaults
================================

Stable default values for the provider layer and its service surfaces.
Plain constants only; no imports from other kforge packages so this module
can be loaded from anywhere without cycles.

Base URLs carry no API version suffix; each adapter appends its own
versioned path.
"""

from __future__ import annotations

# ---- Upstream base URLs ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com"
CLAUDE_DEFAULT_BASE_URL = "https://api.anthropic.com"
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
OLLAMA_DEFAULT_BASE_URL = "http://localhost:11434"
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com"
GROQ_DEFAULT_BASE_URL = "https://api.groq.com/openai"
MISTRAL_DEFAULT_BASE_URL = "https://api.mistral.ai"
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api"
CUSTOM_DEFAULT_BASE_URL = "https://api.openai.com"

# ---- Upstream protocol constants ----
CLAUDE_API_VERSION = "2023-06-01"
CLAUDE_DEFAULT_MAX_TOKENS = 1024
OPENROUTER_REFERER = "https://kforge.local"
OPENROUTER_TITLE = "KForge"

# ---- Model suggestions ----
# Suggestions only; callers may pass any model id. The first entry is the
# default used by the CLI when no model is given.
MODEL_PRESETS = {
    "mock": ["mock-1"],
    "openai": ["gpt-5-mini", "gpt-4.1-mini"],
    "claude": ["claude-haiku-4-5", "claude-sonnet-4-5", "claude-opus-4-5"],
    "gemini": [
        "gemini-2.5-flash-lite",
        "gemini-2.5-flash",
        "gemini-3-flash-preview",
        "gemini-2.5-pro",
        "gemini-3-pro-preview",
    ],
    "ollama": ["llama3.1", "llama3", "mistral", "qwen2.5"],
    "deepseek": ["deepseek-chat"],
    "groq": ["llama-3.1-8b-instant", "llama-3.3-70b-versatile"],
    "mistral": ["mistral-small-latest"],
    "openrouter": ["openai/gpt-4o-mini", "anthropic/claude-3.5-sonnet"],
    "custom": [],
}

# ---- Service / HTTP layer ----
# Comma-separated list of allowed origins for the FastAPI dev server.
PROVIDER_SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173,tauri://localhost"

# ---- CLI Defaults ----
PROVIDER_CLI_DEFAULT_PROVIDER = "mock"
