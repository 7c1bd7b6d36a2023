"""API tests for the extraction router."""
from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from report_extractor.config import reset_settings_cache


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    """Return a test client for the FastAPI application."""

    from report_extractor.app import app

    with TestClient(app) as test_client:
        yield test_client


def test_extract_endpoint_returns_rows_and_diagnostics(client: TestClient, dealer_report: str) -> None:
    response = client.post("/api/reports/extract", json={"text": dealer_report})
    assert response.status_code == 200
    payload = response.json()

    assert payload["ok"] is False
    assert len(payload["rows"]) == 5
    first = payload["rows"][0]
    assert first["entity_id"] == "D1001"
    assert first["entity_name"] == "ACME MOTORS"
    assert first["period"] == 2021
    assert [item["reason"] for item in payload["diagnostics"]] == [
        "detail_field_parse_error",
        "segment_header_missing",
    ]
    assert payload["meta"]["segment_count"] == 5


def test_extract_endpoint_accepts_pattern_overrides(client: TestClient) -> None:
    body = {
        "text": "intro\n===\nID A1 NAME Widget Co TEL 1234\nQ1 1/2/3\n",
        "patterns": {
            "delimiter": "===\\n",
            "header_line": "^ID ",
            "header_fields": "^ID (\\w+) NAME (.+?) TEL (\\S+)$",
            "detail_line": "^Q",
            "detail_fields": "^(Q\\d) (\\d+)/(\\d+)/(\\d+)$",
        },
        "coerce_period": False,
    }
    response = client.post("/api/reports/extract", json=body)
    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is True
    assert payload["rows"] == [
        {
            "segment_index": 1,
            "entity_id": "A1",
            "entity_name": "Widget Co",
            "entity_contact": "1234",
            "period": "Q1",
            "count_a": 1,
            "count_b": 2,
            "count_c": 3,
        }
    ]


def test_extract_endpoint_rejects_bad_patterns(client: TestClient) -> None:
    response = client.post(
        "/api/reports/extract",
        json={"text": "DEALER# x", "patterns": {"header_fields": "(one)"}},
    )
    assert response.status_code == 422
    assert "header_fields" in response.json()["detail"]


def test_extract_endpoint_rejects_blank_text(client: TestClient) -> None:
    response = client.post("/api/reports/extract", json={"text": "   "})
    assert response.status_code == 422


def test_summary_endpoint(client: TestClient, dealer_report: str) -> None:
    response = client.post("/api/reports/summary", json={"text": dealer_report})
    assert response.status_code == 200
    payload = response.json()
    assert [item["period"] for item in payload["periods"]] == [2021, 2022]
    assert payload["periods"][0]["count_c"] == 302
    assert payload["diagnostic_count"] == 2


def test_trace_written_when_enabled(
    client: TestClient, monkeypatch: pytest.MonkeyPatch, tmp_path: Path, scenario_report: str
) -> None:
    trace_dir = tmp_path / "api-trace"
    monkeypatch.setenv("REPORT_TRACE_ENABLED", "true")
    monkeypatch.setenv("REPORT_TRACE_DIR", str(trace_dir))
    reset_settings_cache()

    response = client.post("/api/reports/extract", json={"text": scenario_report})
    assert response.status_code == 200
    log_path = response.json()["meta"]["log_path"]
    assert Path(log_path).parent == trace_dir
    assert Path(log_path).exists()
