"""Pytest configuration for the providers test suite.

Every test runs against an in-memory keyring backend and a clean
configuration: provider environment overrides and the config-file cache are
reset so a developer's shell cannot leak into assertions. HTTP is never
performed for real; adapters receive an ``httpx.Client`` backed by
``httpx.MockTransport``.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Dict, Iterator, List, Optional, Tuple

import httpx
import pytest
from keyring.backend import KeyringBackend
from keyring.errors import KeyringError, PasswordDeleteError

from kforge_providers.base.factory import ProviderFactory
from kforge_providers.base.http import close_all_clients
from kforge_providers.base.logging import ROOT_LOGGER_NAME
from kforge_providers.base.repositories.credentials import CredentialStore, set_credential_store
from kforge_providers.config import CONFIG_FILE_ENV, reset_config_cache


class MemoryKeyring(KeyringBackend):
    """Dict-backed keyring used instead of the platform store."""

    priority = 1

    def __init__(self) -> None:
        super().__init__()
        self.passwords: Dict[Tuple[str, str], str] = {}

    def get_password(self, service: str, username: str) -> Optional[str]:
        return self.passwords.get((service, username))

    def set_password(self, service: str, username: str, password: str) -> None:
        self.passwords[(service, username)] = password

    def delete_password(self, service: str, username: str) -> None:
        if (service, username) not in self.passwords:
            raise PasswordDeleteError("not found")
        del self.passwords[(service, username)]


class FailingKeyring(KeyringBackend):
    """Keyring whose every operation fails, like a locked or absent store."""

    priority = 1

    def get_password(self, service: str, username: str) -> Optional[str]:
        raise KeyringError("secure storage unavailable")

    def set_password(self, service: str, username: str, password: str) -> None:
        raise KeyringError("secure storage unavailable")

    def delete_password(self, service: str, username: str) -> None:
        raise KeyringError("secure storage unavailable")


_ENV_VARS = [CONFIG_FILE_ENV] + [
    f"{pid.upper()}_{suffix}" for pid in ProviderFactory.supported() for suffix in ("BASE_URL", "MODEL")
]


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def memory_keyring() -> MemoryKeyring:
    return MemoryKeyring()


@pytest.fixture(autouse=True)
def credential_store(memory_keyring: MemoryKeyring) -> Iterator[CredentialStore]:
    """Install a process-wide store backed by :class:`MemoryKeyring`."""
    store = CredentialStore(backend=memory_keyring)
    set_credential_store(store)
    yield store
    set_credential_store(None)


@pytest.fixture()
def failing_store() -> CredentialStore:
    return CredentialStore(backend=FailingKeyring())


@pytest.fixture(scope="session", autouse=True)
def _close_pooled_clients() -> Iterator[None]:
    yield
    close_all_clients()


class Recorder:
    """Collects the requests an ``httpx.MockTransport`` handler receives."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture()
def mock_http() -> Iterator[Callable[..., Tuple[httpx.Client, Recorder]]]:
    """Return a factory building ``(client, recorder)`` pairs.

    ``respond`` may be an ``httpx.Response``, a callable taking the request,
    or an exception instance to raise from the transport.
    """
    clients: List[httpx.Client] = []

    def _factory(respond) -> Tuple[httpx.Client, Recorder]:
        recorder = Recorder()

        def handler(request: httpx.Request) -> httpx.Response:
            recorder.requests.append(request)
            if isinstance(respond, Exception):
                raise respond
            if isinstance(respond, httpx.Response):
                return httpx.Response(respond.status_code, headers=respond.headers, content=respond.content)
            return respond(request)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client, recorder

    yield _factory
    for c in clients:
        c.close()


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def log_events() -> Iterator[Callable[[], List[dict]]]:
    """Capture structured events emitted on the ``kforge`` logger tree.

    The shared logger does not propagate to the root logger, so ``caplog``
    cannot see these events; a handler is attached directly instead. The
    fixture yields a callable returning the decoded events so far.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handler = _ListHandler()
    logger.addHandler(handler)
    yield lambda: [_decode(r) for r in handler.records]
    logger.removeHandler(handler)


def _decode(record: logging.LogRecord) -> dict:
    try:
        data = json.loads(record.getMessage())
    except ValueError:
        data = {"msg": record.getMessage()}
    if not isinstance(data, dict):
        data = {"msg": record.getMessage()}
    data["_level"] = record.levelname
    return data
