"""Recoverable errors raised while extracting a report."""

from __future__ import annotations

from typing import Optional


class ExtractionError(Exception):
    """Base class for per-segment and per-row extraction failures."""

    reason = "extraction_error"

    def __init__(
        self,
        message: str,
        *,
        segment_index: Optional[int] = None,
        line_number: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.segment_index = segment_index
        self.line_number = line_number


class SegmentHeaderMissing(ExtractionError):
    """No line of the segment matched the header line pattern."""

    reason = "segment_header_missing"


class SegmentHeaderMalformed(ExtractionError):
    """The header line matched but the field pattern could not capture it."""

    reason = "segment_header_malformed"

    def __init__(
        self,
        message: str,
        *,
        line_pattern: str,
        field_pattern: str,
        segment_index: Optional[int] = None,
        line_number: Optional[int] = None,
    ) -> None:
        super().__init__(
            f"{message} [header_line: {line_pattern}] [header_fields: {field_pattern}]",
            segment_index=segment_index,
            line_number=line_number,
        )
        self.line_pattern = line_pattern
        self.field_pattern = field_pattern


class DetailFieldParseError(ExtractionError, ValueError):
    """A captured detail field is not a well-formed non-negative integer."""

    reason = "detail_field_parse_error"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[str] = None,
        segment_index: Optional[int] = None,
        line_number: Optional[int] = None,
    ) -> None:
        super().__init__(message, segment_index=segment_index, line_number=line_number)
        self.field = field
        self.value = value


__all__ = [
    "DetailFieldParseError",
    "ExtractionError",
    "SegmentHeaderMalformed",
    "SegmentHeaderMissing",
]
