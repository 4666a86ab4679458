"""Unit tests for the shared OpenAI-compatible client."""

from __future__ import annotations

import httpx
import pytest

from kforge_providers.base.openai_compat import (
    CompatClient,
    CompatConfig,
    CompatDecodeError,
    CompatHeaderError,
    CompatTransportError,
    CompatUpstreamError,
)


def _client(http: httpx.Client, **kw) -> CompatClient:
    return CompatClient(CompatConfig(base_url=kw.pop("base_url", "https://gw.test/"), api_key="k", **kw), http_client=http)


def test_v1_joins_paths():
    with httpx.Client() as http:
        client = CompatClient(CompatConfig(base_url=" https://gw.test// ", api_key="k"), http_client=http)
    assert client.v1("/chat/completions") == "https://gw.test/v1/chat/completions"
    assert client.v1("models") == "https://gw.test/v1/models"


def test_get_models_and_post_responses(mock_http):
    http, rec = mock_http(httpx.Response(200, json={"data": [{"id": "a"}]}))
    client = _client(http)
    assert client.get_models() == {"data": [{"id": "a"}]}
    assert rec.last.method == "GET" and str(rec.last.url) == "https://gw.test/v1/models"
    client.post_responses({"model": "x", "input": "hi"})
    assert str(rec.last.url) == "https://gw.test/v1/responses"


def test_default_model_fills_blank_model(mock_http):
    http, rec = mock_http(httpx.Response(200, json={}))
    _client(http, default_model="fallback").post_chat_completions({"model": "", "messages": []})
    assert rec.last_json()["model"] == "fallback"
    _client(http, default_model="fallback").post_chat_completions({"model": "chosen", "messages": []})
    assert rec.last_json()["model"] == "chosen"


def test_extra_headers_are_sent(mock_http):
    http, rec = mock_http(httpx.Response(200, json={}))
    _client(http, extra_headers=(("X-Title", "KForge"),)).post_chat_completions({"model": "m"})
    assert rec.last.headers["X-Title"] == "KForge"
    assert rec.last.headers["Authorization"] == "Bearer k"


def test_upstream_error_keeps_status_and_body(mock_http):
    http, _ = mock_http(httpx.Response(418, text="short and stout"))
    with pytest.raises(CompatUpstreamError) as info:
        _client(http).post_chat_completions({})
    assert info.value.status == 418
    assert info.value.body == "short and stout"


def test_transport_and_decode_errors(mock_http):
    http, _ = mock_http(httpx.ConnectTimeout("slow"))
    with pytest.raises(CompatTransportError):
        _client(http).get_models()
    http, _ = mock_http(httpx.Response(200, text="nope"))
    with pytest.raises(CompatDecodeError):
        _client(http).get_models()


def test_bad_header_fails_at_construction():
    with httpx.Client() as http, pytest.raises(CompatHeaderError):
        CompatClient(CompatConfig(base_url="https://gw.test", api_key="k\n"), http_client=http)
