"""Tests for provider resolution and the never-raising ``generate`` dispatch."""

from __future__ import annotations

import sys

import httpx
import pytest

import kforge_providers
from kforge_providers import ErrorKind, ErrorPayload, RequestDescriptor, ResponseDescriptor, generate
from kforge_providers.base.factory import ProviderFactory, UnknownProviderError
from kforge_providers.mock.client import MOCK_PREFIX, MockProvider


def test_registry_is_closed_and_ordered():
    assert ProviderFactory.supported() == (
        "mock",
        "openai",
        "claude",
        "gemini",
        "deepseek",
        "groq",
        "mistral",
        "openrouter",
        "ollama",
        "custom",
    )


@pytest.mark.parametrize("pid", ProviderFactory.supported())
def test_every_registered_id_resolves_to_an_adapter(pid):
    adapter = ProviderFactory.create(pid)
    assert adapter.provider_name == pid
    assert isinstance(adapter, kforge_providers.LLMProvider)


def test_ids_are_matched_case_insensitively():
    assert isinstance(ProviderFactory.create("  MOCK "), MockProvider)


def test_unknown_provider_raises_before_import():
    with pytest.raises(UnknownProviderError) as info:
        ProviderFactory.resolve("xai")
    assert info.value.kind is ErrorKind.BAD_REQUEST
    assert "Unknown provider 'xai'" in info.value.message
    assert "kforge_providers.xai" not in sys.modules


def test_unknown_provider_is_bad_request_with_zero_network(mock_http):
    client, rec = mock_http(httpx.Response(200, json={}))
    result = generate(RequestDescriptor("nope", "m", "hi"), http_client=client)
    assert isinstance(result, ErrorPayload)
    assert result.kind is ErrorKind.BAD_REQUEST
    assert result.provider == "nope"
    assert rec.requests == []


def test_mock_echoes_input():
    result = generate(RequestDescriptor("mock", "mock-1", "ping"))
    assert isinstance(result, ResponseDescriptor)
    assert result.output_text == f"{MOCK_PREFIX}ping"
    assert result.id.startswith("mock-")
    assert result.model == "mock-1"
    assert result.usage is None


def test_provider_errors_become_payloads(mock_http):
    client, rec = mock_http(httpx.Response(200, json={}))
    result = generate(RequestDescriptor("openai", "gpt", "hi"), http_client=client)
    assert isinstance(result, ErrorPayload)
    assert result.kind is ErrorKind.AUTH
    assert result.provider == "openai"
    assert rec.requests == []


def test_unexpected_exceptions_become_unknown(monkeypatch, log_events):
    def explode(self, request):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(MockProvider, "generate", explode)
    result = generate(RequestDescriptor("mock", "m", "hi"))
    assert isinstance(result, ErrorPayload)
    assert result.kind is ErrorKind.UNKNOWN
    assert "kaboom" in result.message
    assert any(e.get("event") == "generate.unexpected" for e in log_events())


def test_package_exports_version():
    assert kforge_providers.__version__
