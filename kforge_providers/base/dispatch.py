"""Request dispatch: the single entrypoint callers use to generate text.

``generate`` looks the provider id up in :class:`ProviderFactory`, runs the
adapter, and returns either a :class:`ResponseDescriptor` or an
:class:`ErrorPayload`. It never raises: unknown ids become ``BadRequest``
without touching the network, adapter failures become their payload, and any
other exception is reported as ``Unknown``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import httpx

from .errors import ErrorKind, ErrorPayload, ProviderError
from .factory import ProviderFactory, UnknownProviderError
from .logging import LogContext, get_logger, log_event
from .models import RequestDescriptor, ResponseDescriptor
from .repositories.credentials import CredentialStore

_logger = get_logger("kforge.dispatch")


def create(
    provider_id: str,
    *,
    credentials: Optional[CredentialStore] = None,
    http_client: Optional[httpx.Client] = None,
    base_url: Optional[str] = None,
) -> Any:
    """Instantiate the adapter registered for ``provider_id``.

    Raises
    ------
    UnknownProviderError
        When ``provider_id`` is not registered.
    """
    return ProviderFactory.create(provider_id, credentials=credentials, http_client=http_client, base_url=base_url)


def generate(
    request: RequestDescriptor,
    *,
    credentials: Optional[CredentialStore] = None,
    http_client: Optional[httpx.Client] = None,
) -> Union[ResponseDescriptor, ErrorPayload]:
    """Run ``request`` against its provider and return the outcome as data.

    Parameters
    ----------
    request:
        Provider-agnostic request; ``provider_id`` selects the adapter.
    credentials:
        Credential store override (tests, embedding applications).
    http_client:
        ``httpx.Client`` override handed to the adapter.
    """
    try:
        adapter = create(request.provider_id, credentials=credentials, http_client=http_client)
    except UnknownProviderError as err:
        log_event(
            _logger,
            "generate.unknown_provider",
            LogContext(provider=request.provider_id or None, model=request.model),
            level=logging.WARNING,
        )
        return err.to_payload()

    try:
        return adapter.generate(request)
    except ProviderError as err:
        return err.to_payload()
    except Exception as exc:  # noqa: BLE001 - boundary must not raise
        log_event(
            _logger,
            "generate.unexpected",
            LogContext(provider=adapter.provider_name, model=request.model),
            level=logging.ERROR,
            error=type(exc).__name__,
            detail=str(exc),
        )
        return ErrorPayload(
            kind=ErrorKind.UNKNOWN,
            message=f"Unexpected error: {str(exc) or type(exc).__name__}",
            provider=adapter.provider_name,
        )


__all__ = ["create", "generate"]
