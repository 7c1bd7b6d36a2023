"""Segment-by-segment extraction of a flat text report into rows."""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from ..utils.logging import configure_logging
from .errors import (
    DetailFieldParseError,
    ExtractionError,
    SegmentHeaderMalformed,
    SegmentHeaderMissing,
)
from .join import join_records
from .models import DetailRecord, Diagnostic, ExtractionResult, OutputRow, Segment
from .normalize import DEFAULT_NAME_RULES, CleanRule, clean, coerce_detail
from .parsers import parse_details, parse_header
from .patterns import DEALER_REPORT_PATTERNS, ExtractionPatterns
from .reporting import ExtractionReporter
from .segment import segment

LOGGER = configure_logging().getChild("extraction")

_Outcome = Tuple[List[OutputRow], List[Diagnostic]]


def _diagnostic(exc: ExtractionError, segment_index: int, line_number: Optional[int] = None) -> Diagnostic:
    return Diagnostic(
        segment_index=segment_index,
        reason=exc.reason,
        message=exc.message,
        line_number=exc.line_number if line_number is None else line_number,
    )


@dataclass(frozen=True, slots=True)
class ReportExtractor:
    """Immutable extraction configuration plus the pipeline that uses it."""

    patterns: ExtractionPatterns = DEALER_REPORT_PATTERNS
    name_rules: Sequence[CleanRule] = DEFAULT_NAME_RULES
    coerce_period: bool = True
    max_workers: int = 1

    @classmethod
    def from_settings(cls, settings) -> "ReportExtractor":
        patterns = ExtractionPatterns.compile(
            delimiter=settings.delimiter_pattern,
            header_line=settings.header_line_pattern,
            header_fields=settings.header_field_pattern,
            detail_line=settings.detail_line_pattern,
            detail_fields=settings.detail_field_pattern,
        )
        return cls(
            patterns=patterns,
            coerce_period=bool(settings.coerce_period),
            max_workers=max(1, int(settings.max_workers)),
        )

    def process_segment(
        self,
        item: Segment,
        reporter: Optional[ExtractionReporter] = None,
    ) -> _Outcome:
        """Return the rows and diagnostics produced by a single segment."""

        reporter = reporter or ExtractionReporter.disabled()
        patterns = self.patterns

        try:
            header = parse_header(item, patterns.header_line, patterns.header_fields)
            if header is None:
                raise SegmentHeaderMissing(
                    f"segment {item.index}: no line matches the header line pattern",
                    segment_index=item.index,
                )
        except (SegmentHeaderMissing, SegmentHeaderMalformed) as exc:
            LOGGER.warning("Dropping segment %d: %s", item.index, exc.message)
            reporter.log("segment.dropped", segment_index=item.index, reason=exc.reason)
            return [], [_diagnostic(exc, item.index)]

        header = replace(header, name=clean(header.name, self.name_rules))

        details: List[DetailRecord] = []
        diagnostics: List[Diagnostic] = []
        for raw in parse_details(item, patterns.detail_line, patterns.detail_fields):
            try:
                details.append(coerce_detail(raw, coerce_period=self.coerce_period))
            except DetailFieldParseError as exc:
                LOGGER.warning(
                    "Dropping row at segment %d line %d: %s",
                    item.index,
                    raw.line_number,
                    exc.message,
                )
                reporter.log(
                    "row.dropped",
                    segment_index=item.index,
                    line_number=raw.line_number,
                    field=exc.field,
                    value=exc.value,
                )
                diagnostics.append(_diagnostic(exc, item.index, raw.line_number))

        return join_records(item.index, header, details), diagnostics

    def extract(
        self,
        document: str,
        *,
        reporter: Optional[ExtractionReporter] = None,
    ) -> ExtractionResult:
        """Extract every segment of *document* and merge results in order."""

        reporter = reporter or ExtractionReporter.disabled()
        start = time.perf_counter()
        segments = [item for item in segment(document, self.patterns.delimiter) if not item.is_preamble]
        reporter.log(
            "extraction.start",
            document_length=len(document),
            segment_count=len(segments),
            max_workers=self.max_workers,
        )
        LOGGER.debug("Extracting %d segments with %d worker(s)", len(segments), self.max_workers)

        if self.max_workers > 1 and len(segments) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                outcomes = list(pool.map(lambda item: self.process_segment(item, reporter), segments))
        else:
            outcomes = [self.process_segment(item, reporter) for item in segments]

        rows: List[OutputRow] = []
        diagnostics: List[Diagnostic] = []
        for segment_rows, segment_diagnostics in outcomes:
            rows.extend(segment_rows)
            diagnostics.extend(segment_diagnostics)

        duration = time.perf_counter() - start
        meta = {
            "segment_count": len(segments),
            "row_count": len(rows),
            "diagnostic_count": len(diagnostics),
            "duration_s": duration,
            "patterns": self.patterns.describe(),
        }
        log_path = reporter.finalize(
            "ok" if not diagnostics else "partial",
            row_count=len(rows),
            diagnostic_count=len(diagnostics),
        )
        if log_path:
            meta["log_path"] = log_path
        LOGGER.info(
            "Extracted %d rows from %d segments (%d diagnostics)",
            len(rows),
            len(segments),
            len(diagnostics),
        )
        return ExtractionResult(
            rows=rows,
            diagnostics=diagnostics,
            segment_count=len(segments),
            meta=meta,
        )


def extract_report(
    document: str,
    patterns: ExtractionPatterns = DEALER_REPORT_PATTERNS,
    *,
    max_workers: int = 1,
    reporter: Optional[ExtractionReporter] = None,
) -> ExtractionResult:
    """Convenience wrapper around :meth:`ReportExtractor.extract`."""

    extractor = ReportExtractor(patterns=patterns, max_workers=max_workers)
    return extractor.extract(document, reporter=reporter)


__all__ = ["ReportExtractor", "extract_report"]
