"""FastAPI surface over the boundary commands.

Used by the desktop front end during development. Every endpoint answers
with a ``{"ok": ...}`` envelope; provider failures are reported in the body,
not through HTTP status codes.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kforge_providers import __version__
from kforge_providers.config.defaults import PROVIDER_SERVICE_CORS_DEFAULT_ORIGINS
from kforge_providers.service import commands

from .app_parts.app_core import _handle_generate, _handle_set_key

app = FastAPI(title="KForge Provider Service", version=__version__)


# ---------------------------------------------------------------------------
# CORS configuration
# ---------------------------------------------------------------------------

cors_origins_env = os.getenv("PROVIDER_SERVICE_CORS_ORIGINS", PROVIDER_SERVICE_CORS_DEFAULT_ORIGINS)
allow_origins = [o.strip() for o in cors_origins_env.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
def health() -> Dict[str, Any]:
    """Report that the service is up."""
    return {"ok": True, "version": __version__}


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------


@app.get("/api/providers")
def get_providers() -> Dict[str, Any]:
    """List registered providers with their model suggestions."""
    return commands.list_providers()


@app.get("/api/ollama/models")
def get_ollama_models(endpoint: Optional[str] = None) -> Dict[str, Any]:
    """List models installed on the local (or given) Ollama instance."""
    return commands.ollama_list_models(endpoint)


# ---------------------------------------------------------------------------
# Key management
# ---------------------------------------------------------------------------


@app.post("/api/keys")
def post_key(body: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Store one API key: ``{"provider_id": ..., "api_key": ...}``."""
    return _handle_set_key(body)


@app.delete("/api/keys")
def delete_key(provider_id: str) -> Dict[str, Any]:
    """Forget the stored key for ``provider_id``."""
    return commands.clear_credential(provider_id)


@app.get("/api/keys/{provider_id}")
def get_key_status(provider_id: str) -> Dict[str, Any]:
    """Report whether a key is available and whether it reached the keyring."""
    return commands.credential_status(provider_id)


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


@app.post("/api/generate")
def post_generate(body: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Run one generation and return the response or error envelope."""
    return _handle_generate(body)


def get_app() -> FastAPI:
    """Return the FastAPI application instance."""
    return app
