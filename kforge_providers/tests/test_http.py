"""Unit tests for the pooled httpx clients and the single-exchange helper."""

from __future__ import annotations

import httpx
import pytest

from kforge_providers.base.http import (
    BodyReadError,
    InvalidHeaderError,
    check_headers,
    close_all_clients,
    exchange,
    get_httpx_client,
)


def setup_function(_):
    close_all_clients()


def teardown_function(_):
    close_all_clients()


def test_same_key_returns_same_instance():
    assert get_httpx_client("hosted", 60) is get_httpx_client("hosted", 60.0)


def test_purpose_and_timeout_split_pools():
    c1 = get_httpx_client("hosted", 60)
    assert get_httpx_client("ollama", 60) is not c1
    assert get_httpx_client("hosted", 30) is not c1


def test_closed_client_is_replaced():
    c1 = get_httpx_client("hosted", 60)
    c1.close()
    c2 = get_httpx_client("hosted", 60)
    assert c2 is not c1 and not c2.is_closed


def test_check_headers_rejects_control_characters():
    assert check_headers({"Authorization": "Bearer k"}) == {"Authorization": "Bearer k"}
    with pytest.raises(InvalidHeaderError):
        check_headers({"Authorization": "Bearer k\n"})
    with pytest.raises(InvalidHeaderError):
        check_headers({"x-api-key": "ключ"})
    with pytest.raises(InvalidHeaderError):
        check_headers({"bad name": "v"})


def test_exchange_returns_error_bodies(mock_http):
    client, rec = mock_http(httpx.Response(500, text="upstream exploded"))
    status, text = exchange(client, "POST", "https://u.test/x", headers={"A": "b"}, json_body={"k": 1})
    assert (status, text) == (500, "upstream exploded")
    assert rec.last.headers["A"] == "b"
    assert rec.last_json() == {"k": 1}


def test_exchange_rejects_bad_headers_before_io(mock_http):
    client, rec = mock_http(httpx.Response(200))
    with pytest.raises(InvalidHeaderError):
        exchange(client, "GET", "https://u.test", headers={"k": "v\r\n"})
    assert rec.requests == []


def test_exchange_propagates_transport_errors(mock_http):
    client, _ = mock_http(httpx.ConnectError("refused"))
    with pytest.raises(httpx.ConnectError):
        exchange(client, "GET", "https://u.test", headers={})


class _BrokenStream(httpx.SyncByteStream):
    def __iter__(self):
        yield b"partial"
        raise httpx.ReadError("connection reset")


def test_exchange_wraps_body_read_failures(mock_http):
    client, _ = mock_http(lambda request: httpx.Response(200, stream=_BrokenStream()))
    with pytest.raises(BodyReadError):
        exchange(client, "GET", "https://u.test", headers={})
