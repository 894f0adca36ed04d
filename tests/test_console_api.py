from __future__ import annotations

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from prospection.console import app as console_app
from prospection.console import security
from prospection.console.routes import analysis as analysis_routes
from prospection.domain import LexiconError, NO_ORIENTATION


@pytest.fixture()
def client(monkeypatch, analyzer, lexicon):
    monkeypatch.setattr(analysis_routes, "get_analyzer", lambda: analyzer)
    monkeypatch.setattr(analysis_routes, "get_lexicon", lambda: lexicon)
    monkeypatch.setattr(security, "get_settings", lambda: SimpleNamespace(api_token=None))
    return TestClient(console_app.create_app())


def test_healthz(client: TestClient) -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_analyze_returns_scores(client: TestClient, analyzer) -> None:
    response = client.post("/analyze", json={"text": "tomorrow will be fine"})

    assert response.status_code == 200
    assert response.json() == {"result": analyzer.analyze("tomorrow will be fine")}


def test_analyze_accepts_options(client: TestClient) -> None:
    response = client.post("/analyze", json={"text": "?!", "options": {"output": "orientation"}})

    assert response.json() == {"result": NO_ORIENTATION}


def test_analyze_matches_are_serialised_as_lists(client: TestClient) -> None:
    response = client.post("/analyze", json={"text": "will", "options": {"output": "matches", "nGrams": False}})

    assert response.json()["result"]["FUTURE"] == [["will", 1, 0.5, 0.5]]


def test_analyze_without_text_returns_null(client: TestClient) -> None:
    response = client.post("/analyze", json={})

    assert response.status_code == 200
    assert response.json() == {"result": None}


def test_lexicon_summary(client: TestClient) -> None:
    response = client.get("/lexicon")

    assert response.status_code == 200
    body = response.json()
    assert body["entries"] == 16
    assert body["arities"] == [1, 2, 3]


def test_lexicon_errors_become_server_errors(monkeypatch, client: TestClient) -> None:
    def broken():
        raise LexiconError("missing")

    monkeypatch.setattr(analysis_routes, "get_analyzer", broken)

    response = client.post("/analyze", json={"text": "now"})

    assert response.status_code == 500


def test_token_required_when_configured(monkeypatch, client: TestClient) -> None:
    monkeypatch.setattr(security, "get_settings", lambda: SimpleNamespace(api_token="secret"))

    denied = client.post("/analyze", json={"text": "now"})
    allowed = client.post("/analyze", json={"text": "now"}, headers={"Authorization": "Bearer secret"})
    health = client.get("/healthz")

    assert denied.status_code == 401
    assert allowed.status_code == 200
    assert health.status_code == 200


def test_analyze_coerces_non_string_text(client: TestClient, analyzer) -> None:
    response = client.post("/analyze", json={"text": 12345})

    assert response.status_code == 200
    assert response.json() == {"result": analyzer.analyze("12345")}
