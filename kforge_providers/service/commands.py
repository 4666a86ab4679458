"""
Boundary operations exposed to the desktop front end.

Every function returns a JSON-serializable envelope and never raises:

- success: ``{"ok": True, ...}``
- failure: ``{"ok": False, "error": <ErrorPayload.to_dict()>}``

The FastAPI app and the CLI are thin wrappers over these functions.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from ..base.dispatch import generate as dispatch_generate
from ..base.dto import GenerateRequestDTO, validation_error_message
from ..base.errors import ErrorKind, ErrorPayload, ProviderError
from ..base.factory import ProviderFactory
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import RequestDescriptor
from ..base.repositories.credentials import CredentialStore, get_credential_store
from ..config.defaults import MODEL_PRESETS
from ..ollama.get_ollama_models import get_ollama_models

Envelope = Dict[str, Any]

_logger = get_logger("kforge.service.commands")


def ok(**fields: Any) -> Envelope:
    return {"ok": True, **fields}


def fail(payload: ErrorPayload) -> Envelope:
    return {"ok": False, "error": payload.to_dict()}


def _store(credentials: Optional[CredentialStore]) -> CredentialStore:
    return credentials if credentials is not None else get_credential_store()


def _run(operation: str, fn, provider_id: Optional[str] = None) -> Envelope:
    """Call ``fn`` and wrap its result or failure in an envelope."""
    try:
        return fn()
    except ProviderError as err:
        return fail(err.to_payload())
    except Exception as exc:  # noqa: BLE001 - boundary must not raise
        log_event(
            _logger,
            "command.unexpected",
            LogContext(provider=provider_id or None),
            level=logging.ERROR,
            operation=operation,
            error=type(exc).__name__,
            detail=str(exc),
        )
        return fail(
            ErrorPayload(
                kind=ErrorKind.UNKNOWN,
                message=f"Unexpected error: {str(exc) or type(exc).__name__}",
                provider=provider_id or None,
            )
        )


# ----- Credentials -----
def set_credential(provider_id: str, secret: str, *, credentials: Optional[CredentialStore] = None) -> Envelope:
    """Store ``secret`` for ``provider_id``."""

    def _do() -> Envelope:
        _store(credentials).set(provider_id, secret)
        return ok()

    return _run("set_credential", _do, provider_id)


def clear_credential(provider_id: str, *, credentials: Optional[CredentialStore] = None) -> Envelope:
    """Forget the secret for ``provider_id``; succeeds when nothing is stored."""

    def _do() -> Envelope:
        _store(credentials).clear(provider_id)
        return ok()

    return _run("clear_credential", _do, provider_id)


def has_credential(provider_id: str, *, credentials: Optional[CredentialStore] = None) -> Envelope:
    return _run("has_credential", lambda: ok(value=_store(credentials).has(provider_id)), provider_id)


def is_credential_persisted(provider_id: str, *, credentials: Optional[CredentialStore] = None) -> Envelope:
    return _run(
        "is_credential_persisted",
        lambda: ok(value=_store(credentials).is_persisted(provider_id)),
        provider_id,
    )


def credential_status(provider_id: str, *, credentials: Optional[CredentialStore] = None) -> Envelope:
    """Combine ``has`` and ``is_persisted`` into one envelope."""

    def _do() -> Envelope:
        store = _store(credentials)
        return ok(provider_id=provider_id, has=store.has(provider_id), persisted=store.is_persisted(provider_id))

    return _run("credential_status", _do, provider_id)


# ----- Generation -----
def _to_descriptor(request: Union[RequestDescriptor, Mapping[str, Any]]) -> RequestDescriptor:
    if isinstance(request, RequestDescriptor):
        return request
    try:
        return GenerateRequestDTO.model_validate(dict(request)).to_descriptor()
    except ValidationError as exc:
        raise ProviderError(ErrorKind.BAD_REQUEST, f"Invalid request: {validation_error_message(exc)}") from exc


def generate(
    request: Union[RequestDescriptor, Mapping[str, Any]],
    *,
    credentials: Optional[CredentialStore] = None,
    http_client: Optional[httpx.Client] = None,
) -> Envelope:
    """Validate ``request`` (dict or descriptor) and run one generation.

    Returns ``{"ok": True, "response": {...}}`` on success.
    """

    def _do() -> Envelope:
        descriptor = _to_descriptor(request)
        result = dispatch_generate(descriptor, credentials=credentials, http_client=http_client)
        if isinstance(result, ErrorPayload):
            return fail(result)
        return ok(response=result.to_dict())

    return _run("generate", _do)


# ----- Discovery -----
def ollama_list_models(endpoint: Optional[str] = None, *, http_client: Optional[httpx.Client] = None) -> Envelope:
    """List the models served by a local Ollama instance."""
    return _run("ollama_list_models", lambda: ok(models=get_ollama_models(endpoint, http_client=http_client)), "ollama")


def list_providers() -> Envelope:
    """Return the registered provider ids with their model presets."""
    providers = [
        {"id": pid, "models": list(MODEL_PRESETS.get(pid, []))}
        for pid in ProviderFactory.supported()
    ]
    return ok(providers=providers)


__all__ = [
    "Envelope",
    "ok",
    "fail",
    "set_credential",
    "clear_credential",
    "has_credential",
    "is_credential_persisted",
    "credential_status",
    "generate",
    "ollama_list_models",
    "list_providers",
]
