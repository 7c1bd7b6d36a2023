"""Flatten a header and its detail records into output rows."""

from __future__ import annotations

from typing import Iterable, List

from .models import DetailRecord, HeaderRecord, OutputRow


def join_records(
    segment_index: int,
    header: HeaderRecord,
    details: Iterable[DetailRecord],
) -> List[OutputRow]:
    """Return one row per detail, each carrying every header field."""

    return [
        OutputRow(
            segment_index=segment_index,
            entity_id=header.entity_id,
            entity_name=header.name,
            entity_contact=header.contact,
            period=detail.period,
            count_a=detail.count_a,
            count_b=detail.count_b,
            count_c=detail.count_c,
        )
        for detail in details
    ]


__all__ = ["join_records"]
