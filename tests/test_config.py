"""Settings tests."""
from __future__ import annotations

import pytest

from report_extractor.config import Settings, get_settings, reset_settings_cache
from report_extractor.extraction import ReportExtractor
from report_extractor.extraction.patterns import DEALER_DELIMITER


def test_defaults_match_dealer_report() -> None:
    settings = Settings()
    assert settings.max_workers == 1
    assert settings.coerce_period is True
    assert settings.delimiter_pattern == DEALER_DELIMITER


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REPORT_MAX_WORKERS", "4")
    monkeypatch.setenv("REPORT_COERCE_PERIOD", "false")
    monkeypatch.setenv("REPORT_DELIMITER_PATTERN", r"^-{3,}$")
    reset_settings_cache()

    settings = get_settings()
    assert settings.max_workers == 4
    assert settings.coerce_period is False
    assert settings.delimiter_pattern == r"^-{3,}$"
    assert get_settings() is settings


def test_extractor_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REPORT_MAX_WORKERS", "3")
    monkeypatch.setenv("REPORT_COERCE_PERIOD", "0")
    reset_settings_cache()

    extractor = ReportExtractor.from_settings(get_settings())
    assert extractor.max_workers == 3
    assert extractor.coerce_period is False
    assert extractor.patterns.delimiter.pattern == DEALER_DELIMITER


def test_invalid_pattern_setting_fails_when_building_extractor() -> None:
    settings = Settings(header_field_pattern=r"(only one group)")
    with pytest.raises(ValueError):
        ReportExtractor.from_settings(settings)


def test_relative_trace_dir_resolves_under_project_root() -> None:
    settings = Settings(trace_dir="logs/extraction")
    assert settings.resolved_trace_dir.is_absolute()
    assert settings.resolved_trace_dir.parts[-2:] == ("logs", "extraction")
