"""CLI helper to extract a dealers franchise report into a CSV table."""

from __future__ import annotations

import argparse
import csv
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, TextIO

from report_extractor.config import get_settings
from report_extractor.extraction import ExtractionReporter, OutputRow, ReportExtractor
from report_extractor.extraction.summary import summarize_by_period
from report_extractor.utils.logging import configure_logging

DEALER_COLUMNS = ("dealer_id", "dealer_name", "dealer_phone", "year", "new", "used", "total")


def write_rows(rows: Iterable[OutputRow], handle: TextIO, columns=DEALER_COLUMNS) -> int:
    """Write *rows* as CSV to *handle* and return the number written."""

    writer = csv.writer(handle)
    writer.writerow(columns)
    count = 0
    for row in rows:
        writer.writerow(
            [
                row.entity_id,
                row.entity_name,
                row.entity_contact,
                row.period,
                row.count_a,
                row.count_b,
                row.count_c,
            ]
        )
        count += 1
    return count


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("report", type=Path, help="Path to the flat text report")
    parser.add_argument("-o", "--output", type=Path, help="CSV destination (default: stdout)")
    parser.add_argument("--workers", type=int, default=None, help="Parallel segment workers")
    parser.add_argument("--trace", action="store_true", help="Write a JSONL event log")
    parser.add_argument("--summary", action="store_true", help="Print per-year totals")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any segment or row was dropped",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    logger = configure_logging(settings.log_level)
    extractor = ReportExtractor.from_settings(settings)
    if args.workers is not None:
        extractor = replace(extractor, max_workers=max(1, args.workers))
    reporter = (
        ExtractionReporter(base_dir=settings.resolved_trace_dir)
        if args.trace or settings.trace_enabled
        else ExtractionReporter.disabled()
    )

    document = args.report.read_text(encoding="utf-8", errors="replace")
    result = extractor.extract(document, reporter=reporter)

    if args.output:
        with args.output.open("w", encoding="utf-8", newline="") as handle:
            written = write_rows(result.rows, handle)
        logger.info("Wrote %d rows to %s", written, args.output)
    else:
        write_rows(result.rows, sys.stdout)

    if args.summary:
        for totals in summarize_by_period(result.rows):
            print(
                f"{totals.period}\tnew={totals.count_a}\tused={totals.count_b}"
                f"\ttotal={totals.count_c}\tdealers={totals.entity_count}",
                file=sys.stderr,
            )

    print(f"Diagnostics: {len(result.diagnostics)}", file=sys.stderr)
    for diagnostic in result.diagnostics:
        print(f"  - segment {diagnostic.segment_index}: {diagnostic.reason}", file=sys.stderr)
    if reporter.log_path:
        print(f"Trace: {reporter.log_path}", file=sys.stderr)

    if args.strict and result.diagnostics:
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual tool
    sys.exit(main())
