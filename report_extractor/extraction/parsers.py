"""Line-level parsers for segment headers and detail lines."""

from __future__ import annotations

from re import Pattern
from typing import List, Optional

from .errors import SegmentHeaderMalformed
from .models import HeaderRecord, RawDetail, Segment


def _find_header_line(lines: List[str], pattern: Pattern[str]) -> Optional[int]:
    for number, line in enumerate(lines):
        if pattern.search(line):
            return number
    return None


def parse_header(
    segment: Segment,
    header_line: Pattern[str],
    header_fields: Pattern[str],
) -> Optional[HeaderRecord]:
    """Return the header of *segment*, or ``None`` when no line looks like one.

    The first line accepted by *header_line* is re-read with *header_fields*.
    When the two patterns disagree on that line the segment cannot be trusted
    and :class:`SegmentHeaderMalformed` is raised.
    """

    lines = segment.lines
    line_number = _find_header_line(lines, header_line)
    if line_number is None:
        return None

    match = header_fields.search(lines[line_number])
    if match is None or any(group is None for group in match.groups()):
        raise SegmentHeaderMalformed(
            f"segment {segment.index}: header line {line_number} did not capture id, name and contact",
            line_pattern=header_line.pattern,
            field_pattern=header_fields.pattern,
            segment_index=segment.index,
            line_number=line_number,
        )

    entity_id, name, contact = match.groups()
    return HeaderRecord(
        entity_id=entity_id.strip(),
        name=name,
        contact=contact.strip(),
        line_number=line_number,
    )


def parse_details(
    segment: Segment,
    detail_line: Pattern[str],
    detail_fields: Pattern[str],
) -> List[RawDetail]:
    """Return the captured detail lines of *segment* in order of appearance.

    Lines accepted by *detail_line* but not captured by *detail_fields* keep
    empty strings for the missing groups so numeric coercion reports them.
    """

    details: List[RawDetail] = []
    for line_number, line in enumerate(segment.lines):
        if not detail_line.search(line):
            continue
        match = detail_fields.search(line)
        groups = match.groups(default="") if match else ("", "", "", "")
        period, count_a, count_b, count_c = groups
        details.append(
            RawDetail(
                period=period,
                count_a=count_a,
                count_b=count_b,
                count_c=count_c,
                line=line,
                line_number=line_number,
            )
        )
    return details


__all__ = ["parse_details", "parse_header"]
