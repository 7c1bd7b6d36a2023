"""Text report extraction: segments, headers, detail lines and rows."""

from .errors import (
    DetailFieldParseError,
    ExtractionError,
    SegmentHeaderMalformed,
    SegmentHeaderMissing,
)
from .extractor import ReportExtractor, extract_report
from .models import (
    DetailRecord,
    Diagnostic,
    ExtractionResult,
    HeaderRecord,
    OutputRow,
    RawDetail,
    Segment,
)
from .normalize import DEFAULT_NAME_RULES, CleanRule, clean, coerce_numeric
from .patterns import DEALER_REPORT_PATTERNS, ExtractionPatterns
from .reporting import ExtractionReporter
from .segment import rejoin, segment

__all__ = [
    "CleanRule",
    "DEALER_REPORT_PATTERNS",
    "DEFAULT_NAME_RULES",
    "DetailFieldParseError",
    "DetailRecord",
    "Diagnostic",
    "ExtractionError",
    "ExtractionPatterns",
    "ExtractionReporter",
    "ExtractionResult",
    "HeaderRecord",
    "OutputRow",
    "RawDetail",
    "ReportExtractor",
    "Segment",
    "SegmentHeaderMalformed",
    "SegmentHeaderMissing",
    "clean",
    "coerce_numeric",
    "extract_report",
    "rejoin",
    "segment",
]
