"""Pattern configuration for the report extractor."""

from __future__ import annotations

import re
from dataclasses import dataclass
from re import Pattern

HEADER_GROUPS = 3
DETAIL_GROUPS = 4

# Missouri DOR dealers franchise report.
DEALER_DELIMITER = r"DEALER# \**"
DEALER_HEADER_LINE = r"^\s*D\d+.*PHONE: \d{3}-\d{3}-\d{4}"
DEALER_HEADER_FIELDS = r"^\s*(D\d+)\s*(.*)\s*PHONE: (\d{3}-\d{3}-\d{4})"
DEALER_DETAIL_LINE = (
    r"^\s*UNITS SOLD IN \d{4}\s+NEW:\s*\S+\s+USED:\s*\S+\s+TOTAL:\s*\S+\s*$"
)
DEALER_DETAIL_FIELDS = (
    r"^\s*UNITS SOLD IN (\d{4})\s+NEW:\s*(\S+)\s+USED:\s*(\S+)\s+TOTAL:\s*(\S+)\s*$"
)


def _compile(name: str, value: str | Pattern[str]) -> Pattern[str]:
    if isinstance(value, re.Pattern):
        return value
    try:
        return re.compile(value)
    except re.error as exc:
        raise ValueError(f"{name} is not a valid regular expression: {exc}") from exc


@dataclass(frozen=True, slots=True)
class ExtractionPatterns:
    """The five patterns that drive one extraction pass.

    ``header_fields`` must capture exactly three groups (id, name, contact) and
    ``detail_fields`` exactly four (period and three counts). Patterns are used
    with :meth:`re.Pattern.search` as compiled; no flags are added.
    """

    delimiter: Pattern[str]
    header_line: Pattern[str]
    header_fields: Pattern[str]
    detail_line: Pattern[str]
    detail_fields: Pattern[str]

    def __post_init__(self) -> None:
        if self.header_fields.groups != HEADER_GROUPS:
            raise ValueError(
                f"header_fields must have {HEADER_GROUPS} capturing groups, "
                f"got {self.header_fields.groups}"
            )
        if self.detail_fields.groups != DETAIL_GROUPS:
            raise ValueError(
                f"detail_fields must have {DETAIL_GROUPS} capturing groups, "
                f"got {self.detail_fields.groups}"
            )

    @classmethod
    def compile(
        cls,
        *,
        delimiter: str | Pattern[str],
        header_line: str | Pattern[str],
        header_fields: str | Pattern[str],
        detail_line: str | Pattern[str],
        detail_fields: str | Pattern[str],
    ) -> "ExtractionPatterns":
        return cls(
            delimiter=_compile("delimiter", delimiter),
            header_line=_compile("header_line", header_line),
            header_fields=_compile("header_fields", header_fields),
            detail_line=_compile("detail_line", detail_line),
            detail_fields=_compile("detail_fields", detail_fields),
        )

    def describe(self) -> dict[str, str]:
        """Return the pattern sources keyed by name."""

        return {
            "delimiter": self.delimiter.pattern,
            "header_line": self.header_line.pattern,
            "header_fields": self.header_fields.pattern,
            "detail_line": self.detail_line.pattern,
            "detail_fields": self.detail_fields.pattern,
        }


DEALER_REPORT_PATTERNS = ExtractionPatterns.compile(
    delimiter=DEALER_DELIMITER,
    header_line=DEALER_HEADER_LINE,
    header_fields=DEALER_HEADER_FIELDS,
    detail_line=DEALER_DETAIL_LINE,
    detail_fields=DEALER_DETAIL_FIELDS,
)


__all__ = [
    "DEALER_DELIMITER",
    "DEALER_DETAIL_FIELDS",
    "DEALER_DETAIL_LINE",
    "DEALER_HEADER_FIELDS",
    "DEALER_HEADER_LINE",
    "DEALER_REPORT_PATTERNS",
    "ExtractionPatterns",
]
