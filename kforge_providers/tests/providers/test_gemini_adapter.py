"""Gemini adapter tests."""

from __future__ import annotations

import httpx
import pytest

from kforge_providers.base.errors import ErrorKind, ProviderError
from kforge_providers.base.models import RequestDescriptor
from kforge_providers.gemini.client import GeminiProvider
from kforge_providers.gemini.helpers import build_generate_body, normalize_model

SUCCESS = {
    "candidates": [{"content": {"role": "model", "parts": [{"text": "Hello"}, {"text": "world"}]}}],
    "usageMetadata": {"promptTokenCount": 4, "candidatesTokenCount": 2, "totalTokenCount": 6},
    "modelVersion": "gemini-2.5-flash-001",
}


@pytest.fixture(autouse=True)
def with_key(credential_store):
    credential_store.set("gemini", "g-key")


def _request(model: str = "gemini-2.5-flash", **kw) -> RequestDescriptor:
    return RequestDescriptor(provider_id="gemini", model=model, input=kw.pop("input", "hi"), **kw)


@pytest.mark.parametrize(
    "raw", ["gemini-2.5-flash", "models/gemini-2.5-flash", "models/gemini-2.5-flash:generateContent", " gemini-2.5-flash "]
)
def test_model_name_normalization(raw):
    assert normalize_model(raw) == "gemini-2.5-flash"


def test_success(mock_http):
    client, rec = mock_http(httpx.Response(200, json=SUCCESS))
    resp = GeminiProvider(http_client=client).generate(_request("models/gemini-2.5-flash"))
    assert str(rec.last.url) == (
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent"
    )
    assert rec.last.headers["x-goog-api-key"] == "g-key"
    assert "key=" not in str(rec.last.url)
    assert resp.output_text == "Hello\nworld"
    assert resp.model == "gemini-2.5-flash-001"
    assert resp.id.startswith("gemini-")
    assert resp.usage.total_tokens == 6


def test_body_shape():
    assert build_generate_body(_request()) == {"contents": [{"role": "user", "parts": [{"text": "hi"}]}]}
    body = build_generate_body(_request(system="sys", temperature=0.5, max_output_tokens=10))
    assert body["systemInstruction"] == {"parts": [{"text": "sys"}]}
    assert body["generationConfig"] == {"temperature": 0.5, "maxOutputTokens": 10}


def test_blank_model_is_bad_request(mock_http):
    client, rec = mock_http(httpx.Response(200, json=SUCCESS))
    with pytest.raises(ProviderError) as info:
        GeminiProvider(http_client=client).generate(_request("models/"))
    assert info.value.kind is ErrorKind.BAD_REQUEST
    assert info.value.message == "Missing model for Gemini request."
    assert rec.requests == []


def test_empty_candidates_is_provider_error(mock_http):
    client, _ = mock_http(httpx.Response(200, json={"candidates": [], "promptFeedback": {"blockReason": "SAFETY"}}))
    with pytest.raises(ProviderError) as info:
        GeminiProvider(http_client=client).generate(_request())
    assert info.value.kind is ErrorKind.PROVIDER
    assert "empty response" in info.value.message


def test_error_envelope_is_rendered(mock_http):
    body = {"error": {"code": 403, "message": "API key not valid.", "status": "PERMISSION_DENIED"}}
    client, _ = mock_http(httpx.Response(403, json=body))
    with pytest.raises(ProviderError) as info:
        GeminiProvider(http_client=client).generate(_request())
    assert info.value.kind is ErrorKind.AUTH
    assert info.value.message == "code=403; status=PERMISSION_DENIED; API key not valid."


def test_endpoint_with_version_suffix(mock_http):
    client, rec = mock_http(httpx.Response(200, json=SUCCESS))
    GeminiProvider(http_client=client).generate(_request(endpoint="https://proxy.test/v1beta/"))
    assert str(rec.last.url) == "https://proxy.test/v1beta/models/gemini-2.5-flash:generateContent"
