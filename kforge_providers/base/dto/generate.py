"""
Pydantic DTOs validating inbound payloads at the service boundary.

Purpose
-------
Validate JSON arriving from the HTTP service or the CLI before it becomes a
:class:`~kforge_providers.base.models.RequestDescriptor`. Adapters never see
unvalidated input from these surfaces.

External dependencies: Pydantic v2 only. No I/O.

Failure semantics: validation raises ``pydantic.ValidationError``; the
service layer turns it into a ``BadRequest`` error payload via
:func:`validation_error_message`.

Both ``snake_case`` and the desktop front end's ``camelCase`` field names
are accepted.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..models import RequestDescriptor
from ..models_parts.usage_descriptor import MAX_TOKEN_COUNT


class GenerateRequestDTO(BaseModel):
    """Inbound generation request.

    Parameters:
        provider_id: Registry id; must be non-blank (trimmed).
        model: Upstream model id. Blank is allowed here; adapters that need a
            model reject it themselves.
        input: User input text.
        system: Optional system instruction.
        temperature: Optional, within ``[0.0, 2.0]``.
        max_output_tokens: Optional unsigned 32-bit cap.
        endpoint: Optional base-URL override.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    provider_id: str = Field(..., validation_alias=AliasChoices("provider_id", "providerId"))
    model: str = ""
    input: str = ""
    system: Optional[str] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    max_output_tokens: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_TOKEN_COUNT,
        validation_alias=AliasChoices("max_output_tokens", "maxOutputTokens"),
    )
    endpoint: Optional[str] = None

    @field_validator("provider_id")
    @classmethod
    def _non_blank_provider(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("provider_id must be non-empty")
        return value

    def to_descriptor(self) -> RequestDescriptor:
        return RequestDescriptor(
            provider_id=self.provider_id,
            model=self.model,
            input=self.input,
            system=self.system,
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
            endpoint=self.endpoint,
        )


class CredentialBodyDTO(BaseModel):
    """Inbound ``set credential`` payload."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    provider_id: str = Field(..., validation_alias=AliasChoices("provider_id", "providerId"))
    api_key: str = Field(..., validation_alias=AliasChoices("api_key", "apiKey"))


def validation_error_message(exc: ValidationError) -> str:
    """Flatten a ``ValidationError`` into one readable line."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "__root__")
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else str(err.get("msg", "invalid")))
    return "; ".join(parts) or "invalid request"


__all__ = ["GenerateRequestDTO", "CredentialBodyDTO", "validation_error_message"]
