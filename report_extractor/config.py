"""Environment-driven settings for the report extractor."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from . import PROJECT_ROOT
from .extraction.patterns import (
    DEALER_DELIMITER,
    DEALER_DETAIL_FIELDS,
    DEALER_DETAIL_LINE,
    DEALER_HEADER_FIELDS,
    DEALER_HEADER_LINE,
)

_ENV_FIELDS = {
    "REPORT_MAX_WORKERS": "max_workers",
    "REPORT_COERCE_PERIOD": "coerce_period",
    "REPORT_LOG_LEVEL": "log_level",
    "REPORT_TRACE_ENABLED": "trace_enabled",
    "REPORT_TRACE_DIR": "trace_dir",
    "REPORT_DELIMITER_PATTERN": "delimiter_pattern",
    "REPORT_HEADER_LINE_PATTERN": "header_line_pattern",
    "REPORT_HEADER_FIELD_PATTERN": "header_field_pattern",
    "REPORT_DETAIL_LINE_PATTERN": "detail_line_pattern",
    "REPORT_DETAIL_FIELD_PATTERN": "detail_field_pattern",
}


class Settings(BaseModel):
    """Runtime configuration; defaults match the dealers franchise report."""

    max_workers: int = Field(default=1, ge=1)
    coerce_period: bool = True
    log_level: str = "INFO"
    trace_enabled: bool = False
    trace_dir: Path = Path("logs/extraction")

    delimiter_pattern: str = DEALER_DELIMITER
    header_line_pattern: str = DEALER_HEADER_LINE
    header_field_pattern: str = DEALER_HEADER_FIELDS
    detail_line_pattern: str = DEALER_DETAIL_LINE
    detail_field_pattern: str = DEALER_DETAIL_FIELDS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        source = os.environ if environ is None else environ
        values = {name: source[key] for key, name in _ENV_FIELDS.items() if source.get(key)}
        return cls(**values)

    @property
    def resolved_trace_dir(self) -> Path:
        if self.trace_dir.is_absolute():
            return self.trace_dir
        return PROJECT_ROOT / self.trace_dir


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def reset_settings_cache() -> None:
    get_settings.cache_clear()


__all__ = ["PROJECT_ROOT", "Settings", "get_settings", "reset_settings_cache"]
