"""Unit tests for core/spacing.py"""

import pytest

from mdfix.core.models import BlockMarker
from mdfix.core.spacing import join_lines, promote_notices, reconcile_spacing, strip_trailing_blanks


def _respace(text: str) -> str:
    return join_lines(reconcile_spacing(text.split("\n")))


def test_blank_lines_around_headings():
    md = "# Heading 1\nContent right after heading\n## Heading 2\nMore content"
    assert _respace(md) == "# Heading 1\n\nContent right after heading\n\n## Heading 2\n\nMore content\n"


def test_blank_lines_around_lists():
    md = "Some text\n* List item 1\n* List item 2\nMore text"
    assert _respace(md) == "Some text\n\n* List item 1\n* List item 2\n\nMore text\n"


def test_blank_lines_around_raw_code_block():
    md = "Some text\n```python\nx = 1\n```\nMore text"
    assert _respace(md) == "Some text\n\n```python\nx = 1\n```\n\nMore text\n"


def test_runs_of_blank_lines_collapse():
    assert _respace("Para one\n\n\n\nPara two\n\n\n") == "Para one\n\nPara two\n"


def test_leading_blank_lines_dropped():
    assert _respace("\n\n\nText") == "Text\n"


def test_consecutive_headings_are_separated():
    assert _respace("# A\n## B") == "# A\n\n## B\n"


def test_list_continuation_stays_attached():
    """Indented text after an item is part of the item, not a new block."""
    md = "1. item\n   continued\n2. next"
    assert _respace(md) == md + "\n"


def test_raw_fence_contents_copied_verbatim():
    """Blank lines and heading-like lines inside a raw fence are not touched."""
    lines = ["text", "```", "# x", "", "", "y", "```", "more"]
    assert reconcile_spacing(lines) == ["text", "", "```text", "# x", "", "", "y", "```", "", "more"]


def test_bare_fence_gets_default_language():
    assert reconcile_spacing(["```", "x", "```"])[0] == "```text"


def test_bare_fence_left_alone_without_default_language():
    assert reconcile_spacing(["```", "x", "```"], default_language=None)[0] == "```"


def test_marker_line_is_a_code_block():
    """A marker gets blank lines on both sides and carries the language for restore."""
    out = reconcile_spacing(["para", BlockMarker(1), "after"])
    assert out[0] == "para"
    assert out[1] == ""
    assert isinstance(out[2], BlockMarker)
    assert out[2].block_id == 1
    assert out[2].language == "text"
    assert out[3:] == ["", "after"]


@pytest.mark.parametrize("line,expected", [
    ("*Last updated: 2026-01-15*",   "### Last updated: 2026-01-15"),
    ("*Last Archived on Monday*",    "### Last Archived on Monday"),
    ("_Last updated yesterday_",     "### Last updated yesterday"),
    ("*Just emphasis*",              "*Just emphasis*"),
    ("See *Last updated* below",     "See *Last updated* below"),
    ("**Last updated: bold**",       "**Last updated: bold**"),
])
def test_promote_notices(line, expected):
    """Only a whole-line emphasized last-updated/archived notice becomes a heading."""
    assert promote_notices([line]) == [expected]


def test_strip_trailing_blanks():
    assert strip_trailing_blanks(["a", "", "  "]) == ["a"]
    assert strip_trailing_blanks(["", ""]) == []


def test_join_lines_single_trailing_newline():
    assert join_lines(["a", "b"]) == "a\nb\n"
    assert join_lines([]) == ""
