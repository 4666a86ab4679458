"""Ollama adapter and model-listing tests."""

from __future__ import annotations

import httpx
import pytest

from kforge_providers.base.errors import ErrorKind, ProviderError
from kforge_providers.base.models import RequestDescriptor
from kforge_providers.ollama import OllamaProvider, get_ollama_models
from kforge_providers.ollama.helpers import build_chat_body

SUCCESS = {
    "model": "llama3.1",
    "message": {"role": "assistant", "content": "hi there"},
    "done": True,
    "prompt_eval_count": 12,
    "eval_count": 3,
}


def _request(**kw) -> RequestDescriptor:
    return RequestDescriptor(provider_id="ollama", model="llama3.1", input=kw.pop("input", "hi"), **kw)


def test_success_needs_no_key(mock_http):
    client, rec = mock_http(httpx.Response(200, json=SUCCESS))
    resp = OllamaProvider(http_client=client).generate(_request())
    assert str(rec.last.url) == "http://localhost:11434/api/chat"
    assert "authorization" not in rec.last.headers
    assert resp.id == "ollama"
    assert resp.output_text == "hi there"
    assert resp.usage.to_dict() == {"input_tokens": 12, "output_tokens": 3, "total_tokens": 15}


def test_body_options():
    body = build_chat_body(_request(system="sys", temperature=0.1, max_output_tokens=20))
    assert body["messages"][0] == {"role": "system", "content": "sys"}
    assert body["options"] == {"temperature": 0.1, "num_predict": 20}
    assert body["stream"] is False
    assert "options" not in build_chat_body(_request())


def test_connection_refused_hints_daemon_not_running(mock_http):
    client, _ = mock_http(httpx.ConnectError("Connection refused"))
    with pytest.raises(ProviderError) as info:
        OllamaProvider(http_client=client).generate(_request())
    assert info.value.kind is ErrorKind.NETWORK
    assert "Is Ollama running?" in info.value.message
    assert "http://localhost:11434" in info.value.message


def test_endpoint_override_strips_v1(mock_http):
    client, rec = mock_http(httpx.Response(200, json=SUCCESS))
    OllamaProvider(http_client=client).generate(_request(endpoint="http://gpu-box:11434/v1/"))
    assert str(rec.last.url) == "http://gpu-box:11434/api/chat"


def test_configured_base_url_is_used(mock_http, monkeypatch):
    monkeypatch.setenv("OLLAMA_BASE_URL", "http://lan-box:11434")
    client, rec = mock_http(httpx.Response(200, json=SUCCESS))
    OllamaProvider(http_client=client).generate(_request())
    assert str(rec.last.url) == "http://lan-box:11434/api/chat"


def test_model_not_found_message(mock_http):
    client, _ = mock_http(httpx.Response(404, json={"error": "model 'nope' not found"}))
    with pytest.raises(ProviderError) as info:
        OllamaProvider(http_client=client).generate(_request())
    assert info.value.kind is ErrorKind.PROVIDER
    assert info.value.message == "Ollama HTTP 404: model 'nope' not found"


def test_list_models_dedupes_and_sorts(mock_http, log_events):
    tags = {"models": [{"name": "qwen2.5:14b"}, {"name": "llama3.1:8b"}, {"name": "qwen2.5:14b"}, {"size": 1}]}
    client, rec = mock_http(httpx.Response(200, json=tags))
    assert get_ollama_models("http://localhost:11434/", http_client=client) == ["llama3.1:8b", "qwen2.5:14b"]
    assert rec.last.method == "GET"
    assert str(rec.last.url) == "http://localhost:11434/api/tags"
    assert any(e.get("event") == "ollama.models.listed" and e.get("count") == 2 for e in log_events())


def test_list_models_connection_refused(mock_http):
    client, _ = mock_http(httpx.ConnectError("refused"))
    with pytest.raises(ProviderError) as info:
        get_ollama_models(http_client=client)
    assert info.value.kind is ErrorKind.NETWORK
    assert "Is Ollama running?" in info.value.message


def test_list_models_empty(mock_http):
    client, _ = mock_http(httpx.Response(200, json={}))
    assert OllamaProvider(http_client=client).list_models() == []


def test_adapter_satisfies_model_listing_contract():
    from kforge_providers.base.interfaces import ModelListingProvider

    assert isinstance(OllamaProvider(), ModelListingProvider)
