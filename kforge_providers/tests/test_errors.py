"""Unit tests for the error taxonomy and status/exception classification."""

from __future__ import annotations

import json

import httpx
import pytest

from kforge_providers.base.errors import (
    ErrorKind,
    ErrorPayload,
    ProviderError,
    classify_exception,
    kind_for_status,
)


@pytest.mark.parametrize(
    "status, kind",
    [
        (400, ErrorKind.BAD_REQUEST),
        (401, ErrorKind.AUTH),
        (403, ErrorKind.AUTH),
        (408, ErrorKind.NETWORK),
        (429, ErrorKind.RATE_LIMITED),
        (500, ErrorKind.SERVER),
        (503, ErrorKind.SERVER),
        (504, ErrorKind.NETWORK),
    ],
)
def test_mapped_statuses(status, kind):
    assert kind_for_status(status) is kind
    assert kind_for_status(status, raw_body_preserved=True) is kind


def test_unmapped_status_depends_on_body_policy():
    assert kind_for_status(404) is ErrorKind.PROVIDER
    assert kind_for_status(404, raw_body_preserved=True) is ErrorKind.UPSTREAM
    assert kind_for_status(422, raw_body_preserved=True) is ErrorKind.UPSTREAM


def test_classify_exception_precedence():
    err = ProviderError(ErrorKind.AUTH, "nope")
    assert classify_exception(err) is ErrorKind.AUTH

    request = httpx.Request("GET", "https://example.test")
    status_err = httpx.HTTPStatusError(
        "boom", request=request, response=httpx.Response(429, request=request)
    )
    assert classify_exception(status_err) is ErrorKind.RATE_LIMITED

    assert classify_exception(httpx.ConnectError("refused")) is ErrorKind.NETWORK
    assert classify_exception(httpx.ReadTimeout("slow")) is ErrorKind.NETWORK
    assert classify_exception(TimeoutError()) is ErrorKind.NETWORK

    with pytest.raises(json.JSONDecodeError) as info:
        json.loads("{")
    assert classify_exception(info.value) is ErrorKind.PARSE

    assert classify_exception(RuntimeError("?")) is ErrorKind.UNKNOWN


def test_error_kind_values_are_canonical():
    assert [k.value for k in ErrorKind] == [
        "Auth",
        "RateLimited",
        "Network",
        "BadRequest",
        "Server",
        "Upstream",
        "Parse",
        "Provider",
        "Unknown",
    ]


def test_provider_error_to_payload_and_display():
    err = ProviderError(ErrorKind.RATE_LIMITED, "slow down", provider="groq", http_status=429)
    payload = err.to_payload()
    assert payload == ErrorPayload(ErrorKind.RATE_LIMITED, "slow down", "groq", 429)
    assert str(err) == "[groq] RateLimited (HTTP 429): slow down"
    assert str(ProviderError(ErrorKind.AUTH, "x", provider="openai")) == "[openai] Auth: x"
    assert str(ProviderError(ErrorKind.UNKNOWN, "x")) == "Unknown: x"


def test_error_payload_dict_omits_absent_fields():
    payload = ErrorPayload(ErrorKind.BAD_REQUEST, "bad")
    assert payload.to_dict() == {"kind": "BadRequest", "message": "bad"}
    full = ErrorPayload(ErrorKind.SERVER, "down", provider="claude", http_status=502)
    assert full.to_dict() == {"kind": "Server", "message": "down", "provider": "claude", "http_status": 502}
    assert ErrorPayload.from_dict(full.to_dict()) == full
