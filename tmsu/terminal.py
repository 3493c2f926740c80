"""Terminal capabilities and column/wrapped text output."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from tmsu.ansi import strip

ETX = "\x03"

_MIN_PADDING = 2


def colour() -> bool:
    """Whether the terminal is expected to understand ANSI colour codes."""
    return os.name != "nt"


def _terminal_width() -> int:
    try:
        columns = os.get_terminal_size(sys.stdout.fileno()).columns
    except (OSError, ValueError, AttributeError):
        return 0

    if os.name == "nt" and columns > 0:
        columns -= 1

    return columns


def width() -> int:
    """The width of the terminal attached to standard output, or 0 if unknown."""
    return _terminal_width()


def _layout(items: list[str], max_width: int) -> tuple[int, list[int], int]:
    """Find the fewest rows that fit; return rows, column widths and used width."""
    lengths = [len(strip(item)) for item in items]
    col_widths: list[int] = []
    calc_width = max_width + 1
    rows = 1

    while calc_width > max_width and rows <= len(items):
        col_widths = []
        calc_width = -_MIN_PADDING  # last column has no padding

        for index, length in enumerate(lengths):
            col = index // rows

            if col >= len(col_widths):
                col_widths.append(0)
                calc_width += _MIN_PADDING

            if length > col_widths[col]:
                calc_width += length - col_widths[col]
                col_widths[col] = length

            if calc_width > max_width:
                break

        rows += 1

    return rows - 1, col_widths, calc_width


def print_columns(
    items: list[str],
    width: int | None = None,
    file: TextIO | None = None,
) -> None:
    """Print ``items`` sorted, arranged column-wise to fit ``width``."""
    max_width = _terminal_width() if width is None else width
    out = sys.stdout if file is None else file

    ordered = sorted(items, key=strip)
    rows, col_widths, calc_width = _layout(ordered, max_width)
    cols = len(col_widths)

    padding = _MIN_PADDING
    if cols > 2 and rows > 1:
        padding = max((max_width - calc_width) // (cols - 1) + 2, _MIN_PADDING)

    for row in range(rows):
        line: list[str] = []
        for col in range(cols):
            index = rows * col + row
            if index >= len(ordered):
                break

            item = ordered[index]
            line.append(item)

            if col < cols - 1:
                line.append(" " * (col_widths[col] + padding - len(strip(item))))

        out.write("".join(line) + "\n")


def print_wrapped(
    text: str,
    max_width: int | None = None,
    file: TextIO | None = None,
) -> None:
    """Print ``text`` word-wrapped to ``max_width``, preserving leading indentation."""
    limit = _terminal_width() if max_width is None else max_width
    out = sys.stdout if file is None else file

    if limit == 0:
        out.write(text + "\n")
        return

    word = ""
    used = 0
    indent = 0

    for char in text + ETX:
        if char not in (" ", "\n", ETX):
            word += char
            continue

        bare = strip(word)

        if bare == "" and char == " ":
            # tabulation
            out.write(" ")
            used += 1
            indent = used
            continue

        needed = len(word) + (1 if used > 0 else 0)

        if used + needed > limit:
            out.write("\n")
            used = 0
            if indent > 0:
                out.write(" " * indent)
                used += indent
        elif used > indent:
            out.write(" ")
            used += 1

        if bare == "" and indent > 0:
            out.write(" " * indent)
            used += indent

        out.write(word)
        used += len(bare)
        word = ""

        if char == "\n":
            out.write("\n")
            used = 0
            indent = 0

    out.write("\n")