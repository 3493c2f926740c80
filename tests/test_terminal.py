import io
import sys

from tmsu.ansi import red, strip
from tmsu.terminal import print_columns, print_wrapped, width


def _columns(items, max_width):
    buffer = io.StringIO()
    print_columns(items, max_width, buffer)
    return buffer.getvalue()


def _wrapped(text, max_width):
    buffer = io.StringIO()
    print_wrapped(text, max_width, buffer)
    return buffer.getvalue()


def test_width_without_terminal_is_zero(monkeypatch):
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    assert width() == 0


def test_columns_single_row():
    assert _columns(["b", "a", "c"], 80) == "a  b  c\n"


def test_columns_zero_width_one_per_line():
    assert _columns(["c", "a", "b"], 0).splitlines() == ["a", "b", "c"]


def test_columns_empty():
    assert _columns([], 80) == ""


def test_columns_does_not_mutate_input():
    items = ["b", "a"]
    _columns(items, 80)
    assert items == ["b", "a"]


def test_columns_multi_row_fits_and_keeps_all_items():
    items = [f"item{n}" for n in range(10)]
    output = _columns(list(reversed(items)), 20)
    lines = output.splitlines()

    assert len(lines) > 1
    assert all(len(line) <= 20 for line in lines)
    assert sorted(output.split()) == items
    first_column = [line.split()[0] for line in lines]
    assert first_column == sorted(first_column)


def test_columns_sort_ignores_ansi():
    output = _columns([red("b"), "a"], 80)
    assert strip(output).split() == ["a", "b"]
    assert red("b") in output


def test_wrapped_zero_width_prints_verbatim():
    text = "one two three"
    assert _wrapped(text, 0) == text + "\n"


def test_wrapped_fits_on_one_line():
    assert _wrapped("hello world", 80) == "hello world\n"


def test_wrapped_breaks_long_lines():
    assert _wrapped("aaa bbb ccc", 7) == "aaa bbb\nccc\n"


def test_wrapped_lines_within_width_and_words_preserved():
    text = "the quick brown fox jumps over the lazy dog again and again"
    output = _wrapped(text, 15)
    assert all(len(line) <= 15 for line in output.splitlines())
    assert output.split() == text.split()


def test_wrapped_preserves_newlines():
    text = "first\nsecond"
    assert _wrapped(text, 80) == text + "\n"


def test_wrapped_keeps_indent_on_continuation():
    output = _wrapped("  alpha beta gamma", 12)
    lines = output.splitlines()
    assert len(lines) > 1
    assert all(line.startswith("  ") for line in lines)
    assert output.split() == ["alpha", "beta", "gamma"]