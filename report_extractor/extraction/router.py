"""FastAPI router exposing the report extraction pipeline."""
from __future__ import annotations

from dataclasses import replace

from fastapi import APIRouter, Depends, HTTPException

from report_extractor.config import Settings, get_settings

from .extractor import ReportExtractor
from .reporting import ExtractionReporter
from .schemas import (
    DiagnosticOut,
    ExtractRequest,
    ExtractResponse,
    PeriodTotalsOut,
    RowOut,
    SummaryResponse,
)
from .summary import summarize_by_period

router = APIRouter()


def _build_extractor(payload: ExtractRequest, settings: Settings) -> ReportExtractor:
    try:
        extractor = ReportExtractor.from_settings(settings)
        if payload.patterns is not None:
            extractor = replace(extractor, patterns=payload.patterns.apply(extractor.patterns))
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if payload.coerce_period is not None:
        extractor = replace(extractor, coerce_period=payload.coerce_period)
    return extractor


def _build_reporter(settings: Settings) -> ExtractionReporter:
    if not settings.trace_enabled:
        return ExtractionReporter.disabled()
    return ExtractionReporter(base_dir=settings.resolved_trace_dir)


@router.post("/api/reports/extract", response_model=ExtractResponse)
def run_extraction(
    payload: ExtractRequest,
    settings: Settings = Depends(get_settings),
) -> ExtractResponse:
    """Extract rows from the posted report text."""

    extractor = _build_extractor(payload, settings)
    result = extractor.extract(payload.text, reporter=_build_reporter(settings))
    return ExtractResponse(
        ok=result.ok,
        rows=[RowOut.from_row(row) for row in result.rows],
        diagnostics=[DiagnosticOut.from_diagnostic(item) for item in result.diagnostics],
        meta=result.meta,
    )


@router.post("/api/reports/summary", response_model=SummaryResponse)
def run_summary(
    payload: ExtractRequest,
    settings: Settings = Depends(get_settings),
) -> SummaryResponse:
    """Return per-period totals for the posted report text."""

    extractor = _build_extractor(payload, settings)
    result = extractor.extract(payload.text, reporter=_build_reporter(settings))
    return SummaryResponse(
        ok=result.ok,
        periods=[PeriodTotalsOut.from_totals(item) for item in summarize_by_period(result.rows)],
        diagnostic_count=len(result.diagnostics),
    )


__all__ = ["router"]
