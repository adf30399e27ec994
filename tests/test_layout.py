from __future__ import annotations

from bingo_board.text.layout import LaidOutLine, wrap


def test_empty_and_blank_text_yield_no_lines(fixed_font) -> None:
    assert wrap(fixed_font, "", 100, 100) == []
    assert wrap(fixed_font, "  \t\n ", 100, 100) == []


def test_single_fitting_word_is_one_line(fixed_font) -> None:
    assert wrap(fixed_font, "hello", 100, 100) == [LaidOutLine("hello", 0)]


def test_greedy_wrap_fills_lines_up_to_max_width(fixed_font) -> None:
    # "aa bb" is exactly 50 wide and still fits
    lines = wrap(fixed_font, "aa bb cc", 50, 100)

    assert lines == [LaidOutLine("aa bb", 0), LaidOutLine("cc", 20)]


def test_whitespace_runs_collapse_to_single_spaces(fixed_font) -> None:
    lines = wrap(fixed_font, "  a\t\tb\n c  ", 100, 100)

    assert lines == [LaidOutLine("a b c", 0)]


def test_lines_never_exceed_max_width_except_lone_long_words(fixed_font) -> None:
    text = "one two verylongword three four five extraordinarily six"
    max_width = 90

    lines = wrap(fixed_font, text, max_width, 1000)

    assert " ".join(line.text for line in lines) == " ".join(text.split())
    for line in lines:
        if fixed_font.measure(line.text) > max_width:
            assert " " not in line.text
    assert LaidOutLine("verylongword", 20) in lines


def test_long_word_is_never_split(fixed_font) -> None:
    lines = wrap(fixed_font, "a supercalifragilistic b", 50, 100)

    assert [line.text for line in lines] == ["a", "supercalifragilistic", "b"]


def test_line_offsets_step_by_line_height(fixed_font) -> None:
    lines = wrap(fixed_font, "w1 w2 w3 w4", 20, 1000)

    assert [line.y for line in lines] == [0, 20, 40, 60]


def test_overflow_is_truncated_silently(fixed_font) -> None:
    text = "alpha beta gamma delta epsilon zeta eta theta"

    lines = wrap(fixed_font, text, 50, 45)

    assert [line.text for line in lines] == ["alpha", "beta"]
    assert len(lines) * fixed_font.line_height <= 45


def test_last_line_dropped_when_it_does_not_fit(fixed_font) -> None:
    # Two lines needed, room for one
    lines = wrap(fixed_font, "aaaa bbbb", 40, 39)

    assert lines == [LaidOutLine("aaaa", 0)]


def test_box_shorter_than_a_line_yields_nothing(fixed_font) -> None:
    assert wrap(fixed_font, "hi", 100, 19) == []


def test_line_exactly_filling_height_is_kept(fixed_font) -> None:
    lines = wrap(fixed_font, "aaaa bbbb cccc", 40, 60)

    assert [line.text for line in lines] == ["aaaa", "bbbb", "cccc"]


def test_wrapping_wrapped_lines_is_stable(fixed_font) -> None:
    lines = wrap(fixed_font, "the quick brown fox jumps over the lazy dog", 100, 1000)

    for line in lines:
        assert wrap(fixed_font, line.text, 100, 1000) == [LaidOutLine(line.text, 0)]
