from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ValidationError

from kforge_providers.base.dto import CredentialBodyDTO, validation_error_message
from kforge_providers.base.errors import ErrorKind, ErrorPayload
from kforge_providers.service import commands


def _bad_request(message: str, provider: Optional[str] = None) -> Dict[str, Any]:
    return commands.fail(ErrorPayload(kind=ErrorKind.BAD_REQUEST, message=message, provider=provider))


def _handle_set_key(body: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a ``{provider_id, api_key}`` body and store the key."""
    try:
        dto = CredentialBodyDTO.model_validate(body)
    except ValidationError as exc:
        return _bad_request(f"Invalid request: {validation_error_message(exc)}")
    return commands.set_credential(dto.provider_id, dto.api_key)


def _handle_generate(body: Dict[str, Any]) -> Dict[str, Any]:
    return commands.generate(body)


__all__ = ["_handle_set_key", "_handle_generate"]
