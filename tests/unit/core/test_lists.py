"""Unit tests for core/lists.py"""

from mdfix.core.lists import renumber_lists


def test_flat_list_renumbered():
    """Out-of-order ordinals at one indentation become 1, 2, 3."""
    lines = ["5. first", "7. second", "2. third"]
    assert renumber_lists(lines) == ["1. first", "2. second", "3. third"]


def test_nested_list_numbers_independently():
    """An inner list counts on its own and does not continue the outer sequence."""
    lines = ["1. outer", "   4. inner a", "   9. inner b", "8. outer again"]
    assert renumber_lists(lines) == ["1. outer", "   1. inner a", "   2. inner b", "2. outer again"]


def test_deeper_counter_restarts_after_returning_to_parent():
    lines = ["1. a", "   1. x", "   2. y", "2. b", "   7. z"]
    assert renumber_lists(lines)[-1] == "   1. z"


def test_blank_line_does_not_end_a_run():
    assert renumber_lists(["1. a", "", "5. b"]) == ["1. a", "", "2. b"]


def test_unindented_prose_ends_all_runs():
    lines = ["3. a", "4. b", "", "Some prose", "", "7. c"]
    assert renumber_lists(lines) == ["1. a", "2. b", "", "Some prose", "", "1. c"]


def test_indented_continuation_keeps_the_run():
    lines = ["1. a", "   continued text", "4. b"]
    assert renumber_lists(lines) == ["1. a", "   continued text", "2. b"]


def test_bullets_neither_count_nor_reset():
    lines = ["1. a", "- aside", "5. b"]
    assert renumber_lists(lines) == ["1. a", "- aside", "2. b"]


def test_heading_ends_a_run():
    assert renumber_lists(["2. a", "# H", "9. b"]) == ["1. a", "# H", "1. b"]


def test_item_text_and_leading_zeros():
    """Only the numeral changes; indentation and item text are kept verbatim."""
    assert renumber_lists(["  007. keep  *this*  "]) == ["  1. keep  *this*  "]
