"""Cleanup and coercion of captured fields."""

from __future__ import annotations

import re
from dataclasses import dataclass
from re import Pattern
from typing import Optional, Sequence

from .errors import DetailFieldParseError
from .models import DetailRecord, Period, RawDetail

_NUMERIC_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class CleanRule:
    """A substitution applied by :func:`clean`."""

    pattern: Pattern[str]
    replacement: str = ""
    name: str = ""

    def apply(self, value: str) -> str:
        return self.pattern.sub(self.replacement, value)


# Order matters: suffixes are stripped after whitespace runs are collapsed.
DEFAULT_NAME_RULES: tuple[CleanRule, ...] = (
    CleanRule(re.compile(r"\s+"), " ", name="collapse_whitespace"),
    CleanRule(re.compile(r"(?:\s*,?\s+(?:LLC|INC)\.?)+\s*$"), "", name="strip_entity_suffix"),
    CleanRule(re.compile(r"^\s+|\s+$"), "", name="trim"),
)


def clean(value: str, rules: Sequence[CleanRule] = DEFAULT_NAME_RULES) -> str:
    """Apply *rules* to *value* in declared order."""

    text = value or ""
    for rule in rules:
        text = rule.apply(text)
    return text


def coerce_numeric(value: Optional[str], *, field: str = "value") -> int:
    """Return *value* as a non-negative integer.

    Only ASCII digit strings are accepted; anything else raises
    :class:`DetailFieldParseError`.
    """

    if value is None or not _NUMERIC_RE.fullmatch(value):
        raise DetailFieldParseError(
            f"{field} is not a non-negative integer: {value!r}",
            field=field,
            value=value,
        )
    return int(value)


def coerce_detail(raw: RawDetail, *, coerce_period: bool = True) -> DetailRecord:
    """Return the typed counterpart of *raw*, coercing counts (and the period)."""

    period: Period = coerce_numeric(raw.period, field="period") if coerce_period else raw.period
    return DetailRecord(
        period=period,
        count_a=coerce_numeric(raw.count_a, field="count_a"),
        count_b=coerce_numeric(raw.count_b, field="count_b"),
        count_c=coerce_numeric(raw.count_c, field="count_c"),
    )


__all__ = ["CleanRule", "DEFAULT_NAME_RULES", "clean", "coerce_detail", "coerce_numeric"]
