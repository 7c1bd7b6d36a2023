"""Test configuration for the report extractor."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Generator

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from report_extractor.config import reset_settings_cache  # noqa: E402

FIXTURES = Path(__file__).resolve().parent / "fixtures"

_REPORT_ENV = (
    "REPORT_MAX_WORKERS",
    "REPORT_COERCE_PERIOD",
    "REPORT_LOG_LEVEL",
    "REPORT_TRACE_ENABLED",
    "REPORT_TRACE_DIR",
    "REPORT_DELIMITER_PATTERN",
    "REPORT_HEADER_LINE_PATTERN",
    "REPORT_HEADER_FIELD_PATTERN",
    "REPORT_DETAIL_LINE_PATTERN",
    "REPORT_DETAIL_FIELD_PATTERN",
)


@pytest.fixture(autouse=True)
def _isolate_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Provide isolated configuration for each test."""

    for name in _REPORT_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("REPORT_TRACE_DIR", str(tmp_path / "trace"))
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def dealer_report() -> str:
    return (FIXTURES / "dealers_franchise_report.txt").read_text(encoding="utf-8")


@pytest.fixture
def scenario_report() -> str:
    return (
        "HEADER\n"
        "DEALER# D001  ACME MOTORS  PHONE: 555-111-2222\n"
        "UNITS SOLD IN 2021 NEW:10 USED:5 TOTAL:15\n"
        "UNITS SOLD IN 2022 NEW:12 USED:6 TOTAL:18\n"
        "DEALER# D002  BETA AUTO, INC.  PHONE: 555-333-4444\n"
        "UNITS SOLD IN 2022 NEW:3 USED:4 TOTAL:7\n"
    )
