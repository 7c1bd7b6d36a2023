"""Aggregations over extracted rows."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List

from .models import OutputRow, Period


@dataclass(frozen=True, slots=True)
class PeriodTotals:
    period: Period
    count_a: int
    count_b: int
    count_c: int
    entity_count: int


@dataclass(frozen=True, slots=True)
class EntityTotals:
    entity_id: str
    entity_name: str
    count_a: int
    count_b: int
    count_c: int


def _period_key(period: Period) -> tuple:
    # Integer periods sort before text ones; each group sorts naturally.
    return (0, period, "") if isinstance(period, int) else (1, 0, str(period))


def summarize_by_period(rows: Iterable[OutputRow]) -> List[PeriodTotals]:
    """Return count totals per period, in ascending period order."""

    totals: Dict[Period, List[int]] = defaultdict(lambda: [0, 0, 0])
    entities: Dict[Period, set[str]] = defaultdict(set)
    for row in rows:
        bucket = totals[row.period]
        bucket[0] += row.count_a
        bucket[1] += row.count_b
        bucket[2] += row.count_c
        entities[row.period].add(row.entity_id)

    return [
        PeriodTotals(
            period=period,
            count_a=values[0],
            count_b=values[1],
            count_c=values[2],
            entity_count=len(entities[period]),
        )
        for period, values in sorted(totals.items(), key=lambda item: _period_key(item[0]))
    ]


def top_entities(rows: Iterable[OutputRow], period: Period, limit: int = 10) -> List[EntityTotals]:
    """Return the entities with the highest ``count_c`` within *period*.

    Rows for the same entity and period are summed; ties are broken by
    entity id so the ranking is deterministic.
    """

    if limit <= 0:
        return []

    grouped: Dict[str, List[int]] = defaultdict(lambda: [0, 0, 0])
    names: Dict[str, str] = {}
    for row in rows:
        if row.period != period:
            continue
        bucket = grouped[row.entity_id]
        bucket[0] += row.count_a
        bucket[1] += row.count_b
        bucket[2] += row.count_c
        names.setdefault(row.entity_id, row.entity_name)

    ranked = sorted(grouped.items(), key=lambda item: (-item[1][2], item[0]))
    return [
        EntityTotals(
            entity_id=entity_id,
            entity_name=names[entity_id],
            count_a=values[0],
            count_b=values[1],
            count_c=values[2],
        )
        for entity_id, values in ranked[:limit]
    ]


__all__ = ["EntityTotals", "PeriodTotals", "summarize_by_period", "top_entities"]
