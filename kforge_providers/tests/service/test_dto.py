"""Validation tests for the inbound request DTOs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kforge_providers.base.dto import CredentialBodyDTO, GenerateRequestDTO, validation_error_message
from kforge_providers.base.models import RequestDescriptor


def test_snake_and_camel_case_are_accepted():
    a = GenerateRequestDTO.model_validate({"provider_id": "openai", "model": "m", "input": "hi", "max_output_tokens": 5})
    b = GenerateRequestDTO.model_validate({"providerId": "openai", "model": "m", "input": "hi", "maxOutputTokens": 5})
    assert a.to_descriptor() == b.to_descriptor() == RequestDescriptor("openai", "m", "hi", max_output_tokens=5)


def test_provider_id_is_trimmed_and_required():
    assert GenerateRequestDTO.model_validate({"provider_id": " groq "}).provider_id == "groq"
    with pytest.raises(ValidationError):
        GenerateRequestDTO.model_validate({"provider_id": "   "})
    with pytest.raises(ValidationError):
        GenerateRequestDTO.model_validate({"model": "m"})


@pytest.mark.parametrize("field, value", [("max_output_tokens", -1), ("temperature", 3.5), ("temperature", -0.1)])
def test_out_of_range_values_are_rejected(field, value):
    with pytest.raises(ValidationError) as info:
        GenerateRequestDTO.model_validate({"provider_id": "mock", field: value})
    assert field in validation_error_message(info.value)


def test_unknown_fields_are_ignored():
    dto = GenerateRequestDTO.model_validate({"provider_id": "mock", "stream": True})
    assert dto.to_descriptor().to_dict() == {"provider_id": "mock", "model": "", "input": ""}


def test_credential_body():
    dto = CredentialBodyDTO.model_validate({"providerId": "claude", "apiKey": "k"})
    assert (dto.provider_id, dto.api_key) == ("claude", "k")
    with pytest.raises(ValidationError):
        CredentialBodyDTO.model_validate({"provider_id": "claude"})
