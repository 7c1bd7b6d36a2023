"""Delimiter-based segmentation of a report document."""

from __future__ import annotations

from re import Pattern
from typing import Iterable, Iterator, List, Tuple

from .models import Segment


def _pieces(document: str, delimiter: Pattern[str]) -> Iterator[Tuple[str, str]]:
    """Yield ``(delimiter_text, body)`` pairs in document order."""

    position = 0
    preceding = ""
    for match in delimiter.finditer(document):
        if match.start() == match.end():
            continue
        yield preceding, document[position : match.start()]
        preceding = match.group(0)
        position = match.end()
    yield preceding, document[position:]


class SegmentSequence:
    """Lazy, restartable view of the segments of *document*.

    Segment 0 is the preamble before the first delimiter and is always
    present, even when empty. Empty segments at the end of the document are
    not yielded; their delimiter text is kept on the last segment's
    ``trailer`` so that :func:`rejoin` reproduces the document.
    """

    def __init__(self, document: str, delimiter: Pattern[str]) -> None:
        self.document = document
        self.delimiter = delimiter

    def __iter__(self) -> Iterator[Segment]:
        pieces = _pieces(self.document, self.delimiter)
        held = next(pieces)
        empties: List[Tuple[str, str]] = []
        index = 0

        for piece in pieces:
            if not piece[1]:
                empties.append(piece)
                continue
            yield Segment(index=index, text=held[1], delimiter=held[0])
            index += 1
            for delimiter_text, body in empties:
                yield Segment(index=index, text=body, delimiter=delimiter_text)
                index += 1
            empties = []
            held = piece

        trailer = "".join(delimiter_text for delimiter_text, _ in empties)
        yield Segment(index=index, text=held[1], delimiter=held[0], trailer=trailer)

    def __repr__(self) -> str:
        return f"SegmentSequence(length={len(self.document)}, delimiter={self.delimiter.pattern!r})"


def segment(document: str, delimiter: Pattern[str]) -> SegmentSequence:
    """Split *document* at every non-empty match of *delimiter*."""

    return SegmentSequence(document, delimiter)


def rejoin(segments: Iterable[Segment]) -> str:
    """Concatenate segments with their delimiters back into a document."""

    return "".join(item.delimiter + item.text + item.trailer for item in segments)


__all__ = ["SegmentSequence", "rejoin", "segment"]
