"""Segmentation tests."""
from __future__ import annotations

import re

import pytest

from report_extractor.extraction.patterns import DEALER_REPORT_PATTERNS
from report_extractor.extraction.segment import rejoin, segment

DELIMITER = re.compile(r"DEALER# ")


@pytest.mark.parametrize(
    "document",
    [
        "",
        "no delimiter at all\n",
        "DEALER# starts with a delimiter",
        "HEADER\nDEALER# A\nDEALER# B\n",
        "HEADER\nDEALER# A\nDEALER# ",
        "HEADER\nDEALER# DEALER# A\n",
        "DEALER# DEALER# DEALER# ",
        "pre\nDEALER# A\nDEALER# DEALER# ",
    ],
)
def test_rejoin_reproduces_document(document: str) -> None:
    assert rejoin(segment(document, DELIMITER)) == document


def test_rejoin_reproduces_fixture_report(dealer_report: str) -> None:
    segments = segment(dealer_report, DEALER_REPORT_PATTERNS.delimiter)
    assert rejoin(segments) == dealer_report


def test_preamble_is_segment_zero_and_delimiters_are_consumed() -> None:
    segments = list(segment("HEADER\nDEALER# A\nDEALER# B\n", DELIMITER))
    assert [item.index for item in segments] == [0, 1, 2]
    assert segments[0].is_preamble
    assert segments[0].text == "HEADER\n"
    assert [item.text for item in segments[1:]] == ["A\n", "B\n"]
    assert all("DEALER#" not in item.text for item in segments)
    assert segments[1].delimiter == "DEALER# "


def test_preamble_returned_even_when_empty() -> None:
    segments = list(segment("DEALER# A", DELIMITER))
    assert [item.text for item in segments] == ["", "A"]


def test_trailing_empty_segments_are_dropped() -> None:
    segments = list(segment("HEADER\nDEALER# A\nDEALER# DEALER# ", DELIMITER))
    assert [item.text for item in segments] == ["HEADER\n", "A\n"]
    assert segments[-1].trailer == "DEALER# DEALER# "


def test_inner_empty_segments_are_kept() -> None:
    segments = list(segment("HEADER\nDEALER# DEALER# A\n", DELIMITER))
    assert [item.text for item in segments] == ["HEADER\n", "", "A\n"]
    assert [item.index for item in segments] == [0, 1, 2]


def test_sequence_is_restartable() -> None:
    sequence = segment("HEADER\nDEALER# A\nDEALER# B\n", DELIMITER)
    assert list(sequence) == list(sequence)


def test_zero_width_matches_are_not_boundaries() -> None:
    segments = list(segment("abc", re.compile(r"x*")))
    assert [item.text for item in segments] == ["abc"]


def test_segment_lines_split_on_newlines() -> None:
    segments = list(segment("HEADER\nDEALER# one\ntwo\n", DELIMITER))
    assert segments[1].lines == ["one", "two"]
