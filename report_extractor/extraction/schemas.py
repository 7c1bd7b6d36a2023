"""Pydantic models used by the report extraction API."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .models import Diagnostic, OutputRow
from .patterns import ExtractionPatterns
from .summary import PeriodTotals


class PatternOverrides(BaseModel):
    """Optional replacements for the configured extraction patterns."""

    delimiter: Optional[str] = None
    header_line: Optional[str] = None
    header_fields: Optional[str] = None
    detail_line: Optional[str] = None
    detail_fields: Optional[str] = None

    def apply(self, base: ExtractionPatterns) -> ExtractionPatterns:
        """Return *base* with every provided pattern replaced.

        Raises :class:`ValueError` when a pattern does not compile or has the
        wrong number of capturing groups.
        """

        overrides = self.model_dump(exclude_none=True)
        if not overrides:
            return base
        merged = {**base.describe(), **overrides}
        return ExtractionPatterns.compile(**merged)


class ExtractRequest(BaseModel):
    """Incoming request payload for an extraction run."""

    text: str
    patterns: Optional[PatternOverrides] = None
    coerce_period: Optional[bool] = None

    @field_validator("text")
    @classmethod
    def _text_minimum(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("text must be provided")
        return value


class RowOut(BaseModel):
    segment_index: int
    entity_id: str
    entity_name: str
    entity_contact: str
    period: Union[int, str]
    count_a: int = Field(ge=0)
    count_b: int = Field(ge=0)
    count_c: int = Field(ge=0)

    @classmethod
    def from_row(cls, row: OutputRow) -> "RowOut":
        return cls(
            segment_index=row.segment_index,
            entity_id=row.entity_id,
            entity_name=row.entity_name,
            entity_contact=row.entity_contact,
            period=row.period,
            count_a=row.count_a,
            count_b=row.count_b,
            count_c=row.count_c,
        )


class DiagnosticOut(BaseModel):
    segment_index: int
    reason: str
    message: str
    line_number: Optional[int] = None

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic) -> "DiagnosticOut":
        return cls(
            segment_index=diagnostic.segment_index,
            reason=diagnostic.reason,
            message=diagnostic.message,
            line_number=diagnostic.line_number,
        )


class ExtractResponse(BaseModel):
    """Stable response envelope returned by the extraction endpoint."""

    ok: bool
    rows: List[RowOut] = Field(default_factory=list)
    diagnostics: List[DiagnosticOut] = Field(default_factory=list)
    meta: Dict[str, Any] = Field(default_factory=dict)


class PeriodTotalsOut(BaseModel):
    period: Union[int, str]
    count_a: int
    count_b: int
    count_c: int
    entity_count: int

    @classmethod
    def from_totals(cls, totals: PeriodTotals) -> "PeriodTotalsOut":
        return cls(
            period=totals.period,
            count_a=totals.count_a,
            count_b=totals.count_b,
            count_c=totals.count_c,
            entity_count=totals.entity_count,
        )


class SummaryResponse(BaseModel):
    ok: bool
    periods: List[PeriodTotalsOut] = Field(default_factory=list)
    diagnostic_count: int = 0


__all__ = [
    "DiagnosticOut",
    "ExtractRequest",
    "ExtractResponse",
    "PatternOverrides",
    "PeriodTotalsOut",
    "RowOut",
    "SummaryResponse",
]
