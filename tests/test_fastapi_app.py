from __future__ import annotations

from typing import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

import toolshed.serve.app as app_mod
from toolshed.common.config import ClientSettings
from toolshed.generator.strings import LOWERCASE, NUMBERS, SYMBOLS, UPPERCASE
from toolshed.translate.client import TranslationClient

OK_BODY = {"candidates": [{"content": {"parts": [{"text": "Hola"}]}}]}


def _use_provider(handler, api_key: str = "test-key") -> None:  # noqa: ANN001
    settings = ClientSettings(api_key=api_key, base_url="http://provider.test")
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    app_mod.app.dependency_overrides[app_mod.get_client] = lambda: TranslationClient(settings, http_client)


@pytest.fixture
def client() -> Iterator[TestClient]:
    yield TestClient(app_mod.app)
    app_mod.app.dependency_overrides.clear()


def test_health_ok(client: TestClient) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data.get("status") == "ok"
    assert data["model"] == app_mod.SETTINGS.model


def test_root_lists_tools(client: TestClient) -> None:
    r = client.get("/")
    assert r.status_code == 200
    assert "/translate" in r.json()["tools"]


def test_generate_defaults(client: TestClient) -> None:
    r = client.post("/generate", json={})
    assert r.status_code == 200
    data = r.json()
    assert data["length"] == 16
    assert len(data["value"]) == 16
    assert set(data["value"]) <= set(LOWERCASE + UPPERCASE + NUMBERS)


def test_generate_with_symbols(client: TestClient) -> None:
    body = {"length": 32, "include_uppercase": False, "include_numbers": False, "include_symbols": True}
    r = client.post("/generate", json=body)
    assert r.status_code == 200
    assert set(r.json()["value"]) <= set(LOWERCASE + SYMBOLS)


@pytest.mark.parametrize("length", [5, 33])
def test_generate_rejects_out_of_range_length(client: TestClient, length: int) -> None:
    r = client.post("/generate", json={"length": length})
    assert r.status_code == 422


def test_translate_success(client: TestClient) -> None:
    _use_provider(lambda req: httpx.Response(200, json=OK_BODY))
    r = client.post("/translate", json={"text": "Hello"})
    assert r.status_code == 200
    assert r.json() == {"text": "Hola"}


def test_translate_blank_text_makes_no_call(client: TestClient) -> None:
    calls: list[httpx.Request] = []

    def handler(req: httpx.Request) -> httpx.Response:
        calls.append(req)
        return httpx.Response(200, json=OK_BODY)

    _use_provider(handler)
    r = client.post("/translate", json={"text": "  ", "language": "Spanish"})
    assert r.status_code == 422
    assert r.json()["detail"]["error"] == "validation_error"
    assert calls == []


def test_translate_missing_key(client: TestClient) -> None:
    _use_provider(lambda req: httpx.Response(200, json=OK_BODY), api_key="")
    r = client.post("/translate", json={"text": "Hello"})
    assert r.status_code == 503
    assert r.json()["detail"]["error"] == "missing_credential"


def test_translate_upstream_error(client: TestClient) -> None:
    _use_provider(lambda req: httpx.Response(500))
    r = client.post("/translate", json={"text": "Hello"})
    assert r.status_code == 502
    detail = r.json()["detail"]
    assert detail["error"] == "remote_error"
    assert "500" in detail["message"]


def test_translate_invalid_response(client: TestClient) -> None:
    _use_provider(lambda req: httpx.Response(200, json={"candidates": []}))
    r = client.post("/translate", json={"text": "Hello"})
    assert r.status_code == 502
    assert r.json()["detail"]["error"] == "invalid_response"


def test_translate_transport_failure(client: TestClient) -> None:
    def fail(req: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=req)

    _use_provider(fail)
    r = client.post("/translate", json={"text": "Hello"})
    assert r.status_code == 502
    detail = r.json()["detail"]
    assert detail["error"] == "transport_error"
    assert "timed out" in detail["message"]
