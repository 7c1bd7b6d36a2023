"""Data models used by the report extractor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

Period = Union[int, str]


@dataclass(frozen=True, slots=True)
class Segment:
    """One entity's block of text between two delimiter matches."""

    index: int
    text: str
    delimiter: str = ""
    trailer: str = ""

    @property
    def lines(self) -> List[str]:
        return self.text.splitlines()

    @property
    def is_preamble(self) -> bool:
        return self.index == 0


@dataclass(frozen=True, slots=True)
class HeaderRecord:
    """Entity-level fields captured once per segment."""

    entity_id: str
    name: str
    contact: str
    line_number: int


@dataclass(frozen=True, slots=True)
class RawDetail:
    """Captured groups of a detail line, before numeric coercion."""

    period: str
    count_a: str
    count_b: str
    count_c: str
    line: str
    line_number: int


@dataclass(frozen=True, slots=True)
class DetailRecord:
    """A detail line with its counts coerced to integers."""

    period: Period
    count_a: int
    count_b: int
    count_c: int


@dataclass(frozen=True, slots=True)
class OutputRow:
    """A header joined onto one of its detail records."""

    segment_index: int
    entity_id: str
    entity_name: str
    entity_contact: str
    period: Period
    count_a: int
    count_b: int
    count_c: int


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A recoverable error for a skipped segment or row."""

    segment_index: int
    reason: str
    message: str
    line_number: Optional[int] = None


@dataclass(slots=True)
class ExtractionResult:
    """Result object returned by :meth:`ReportExtractor.extract`."""

    rows: List[OutputRow]
    diagnostics: List[Diagnostic]
    segment_count: int = 0
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.diagnostics


__all__ = [
    "Diagnostic",
    "DetailRecord",
    "ExtractionResult",
    "HeaderRecord",
    "OutputRow",
    "Period",
    "RawDetail",
    "Segment",
]
