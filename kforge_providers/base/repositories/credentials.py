"""
Credential Store

Purpose
- Persist one API secret per provider id in the platform secure store
  (via ``keyring``) and keep a process-local copy so the current session
  keeps working when the backend fails or lags.

Design
- ``set`` writes the cache first, then the backend. A backend write failure
  (``KeyringError`` or a raw OS or runtime error from the backend)
  is logged and absorbed.
- ``get`` asks the backend first; when the backend fails, a cached value
  wins, otherwise the failure surfaces as an ``Unknown`` ProviderError.
- ``clear`` removes both copies; "nothing to delete" counts as success.
- The cache is guarded by a ``threading.Lock`` and never outlives the
  process.

Usage
- store = get_credential_store()
- store.set("openai", "sk-...")
- key = store.get("openai")
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

import keyring
from keyring.backend import KeyringBackend
from keyring.errors import KeyringError, PasswordDeleteError

from ..errors import ErrorKind, ProviderError
from ..logging import get_logger, log_event

SERVICE_NAME = "com.kforge.kforge"

_logger = get_logger("kforge.credentials")


def keyring_username(provider_id: str) -> str:
    """Return the keyring account name used for ``provider_id``."""
    return f"provider_{provider_id}"


def _scope(provider_id: Optional[str]) -> str:
    return (provider_id or "").strip()


class CredentialStore:
    """Keyring-backed secret store with an in-process fallback cache.

    Parameters
    ----------
    backend:
        Keyring backend to use. Defaults to ``keyring.get_keyring()`` resolved
        on first access, so tests can install their own backend with
        ``keyring.set_keyring`` or pass one explicitly.
    service:
        Keyring service name.
    """

    def __init__(self, backend: Optional[KeyringBackend] = None, service: str = SERVICE_NAME) -> None:
        self._backend = backend
        self._service = service
        self._cache: Dict[str, str] = {}
        self._lock = threading.Lock()

    @property
    def backend(self) -> KeyringBackend:
        return self._backend if self._backend is not None else keyring.get_keyring()

    def set(self, provider_id: str, secret: str) -> None:
        """Store ``secret`` for ``provider_id`` (last write wins).

        Raises
        ------
        ProviderError
            ``BadRequest`` when the provider id or the secret is blank.
        """
        pid = _scope(provider_id)
        if not pid:
            raise ProviderError(ErrorKind.BAD_REQUEST, "Provider id must not be empty")
        value = (secret or "").strip()
        if not value:
            raise ProviderError(ErrorKind.BAD_REQUEST, "API key must not be empty", provider=pid)

        with self._lock:
            self._cache[pid] = value
        try:
            self.backend.set_password(self._service, keyring_username(pid), value)
        except (KeyringError, OSError, RuntimeError) as exc:
            log_event(
                _logger,
                "credentials.persist_failed",
                provider=pid,
                error=type(exc).__name__,
                detail=str(exc),
                level=logging.WARNING,
            )

    def get(self, provider_id: str) -> Optional[str]:
        """Return the stored secret for ``provider_id`` or ``None``.

        The backend is authoritative; the cache answers when the backend has
        no entry (e.g. after a failed write) or cannot be reached.
        """
        pid = _scope(provider_id)
        if not pid:
            return None
        try:
            value = self.backend.get_password(self._service, keyring_username(pid))
        except KeyringError as exc:
            with self._lock:
                cached = self._cache.get(pid)
            if cached is not None:
                return cached
            raise ProviderError(
                ErrorKind.UNKNOWN,
                f"Failed to read API key from secure storage: {exc}",
                provider=pid,
            ) from exc
        if value:
            return value
        with self._lock:
            return self._cache.get(pid)

    def has(self, provider_id: str) -> bool:
        """Return True when a non-blank secret is available in this session."""
        return bool((self.get(provider_id) or "").strip())

    def clear(self, provider_id: str) -> None:
        """Forget ``provider_id``'s secret in the cache and the backend."""
        pid = _scope(provider_id)
        if not pid:
            return
        with self._lock:
            self._cache.pop(pid, None)
        try:
            self.backend.delete_password(self._service, keyring_username(pid))
        except PasswordDeleteError:
            return
        except KeyringError as exc:
            raise ProviderError(
                ErrorKind.UNKNOWN,
                f"Failed to delete API key from secure storage: {exc}",
                provider=pid,
            ) from exc

    def is_persisted(self, provider_id: str) -> bool:
        """Return True when the backend itself (not the cache) holds a value."""
        pid = _scope(provider_id)
        if not pid:
            return False
        try:
            value = self.backend.get_password(self._service, keyring_username(pid))
        except KeyringError as exc:
            raise ProviderError(
                ErrorKind.UNKNOWN,
                f"Failed to query secure storage: {exc}",
                provider=pid,
            ) from exc
        return bool(value)


_STORE: Optional[CredentialStore] = None
_STORE_LOCK = threading.Lock()


def get_credential_store() -> CredentialStore:
    """Return the process-wide :class:`CredentialStore`, creating it lazily."""
    global _STORE  # noqa: PLW0603 - process singleton
    if _STORE is None:
        with _STORE_LOCK:
            if _STORE is None:
                _STORE = CredentialStore()
    return _STORE


def set_credential_store(store: Optional[CredentialStore]) -> None:
    """Replace the process-wide store (``None`` resets to lazy creation)."""
    global _STORE  # noqa: PLW0603 - process singleton
    with _STORE_LOCK:
        _STORE = store


__all__ = [
    "SERVICE_NAME",
    "CredentialStore",
    "get_credential_store",
    "set_credential_store",
    "keyring_username",
]
