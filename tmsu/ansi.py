"""ANSI terminal formatting codes and helpers."""

from __future__ import annotations

import re

_ESC = "\x1b["

RESET_CODE = _ESC + "0m"

BOLD_CODE = _ESC + "1m"
ITALIC_CODE = _ESC + "3m"
UNDERLINE_CODE = _ESC + "4m"
BLINK_CODE = _ESC + "5m"
INVERT_CODE = _ESC + "7m"

BLACK_CODE = _ESC + "30m"
RED_CODE = _ESC + "31m"
GREEN_CODE = _ESC + "32m"
YELLOW_CODE = _ESC + "33m"
BLUE_CODE = _ESC + "34m"
MAGENTA_CODE = _ESC + "35m"
CYAN_CODE = _ESC + "36m"
WHITE_CODE = _ESC + "37m"

DARK_GREY_CODE = BOLD_CODE + BLACK_CODE

CODE_BY_NAME = {
    "reset": RESET_CODE,
    "bold": BOLD_CODE,
    "italic": ITALIC_CODE,
    "blink": BLINK_CODE,
    "invert": INVERT_CODE,
    "black": BLACK_CODE,
    "red": RED_CODE,
    "green": GREEN_CODE,
    "yellow": YELLOW_CODE,
    "blue": BLUE_CODE,
    "magenta": MAGENTA_CODE,
    "cyan": CYAN_CODE,
    "white": WHITE_CODE,
    "darkgrey": DARK_GREY_CODE,
}

_FORMATTING = re.compile(r"\x1b\[[0-9]*(;[0-9]*)*m")


def _wrap(code: str, text: str) -> str:
    return code + text + RESET_CODE


def bold(text: str) -> str:
    return _wrap(BOLD_CODE, text)


def italic(text: str) -> str:
    return _wrap(ITALIC_CODE, text)


def underline(text: str) -> str:
    return _wrap(UNDERLINE_CODE, text)


def blink(text: str) -> str:
    return _wrap(BLINK_CODE, text)


def invert(text: str) -> str:
    return _wrap(INVERT_CODE, text)


def black(text: str) -> str:
    return _wrap(BLACK_CODE, text)


def red(text: str) -> str:
    return _wrap(RED_CODE, text)


def green(text: str) -> str:
    return _wrap(GREEN_CODE, text)


def yellow(text: str) -> str:
    return _wrap(YELLOW_CODE, text)


def blue(text: str) -> str:
    return _wrap(BLUE_CODE, text)


def magenta(text: str) -> str:
    return _wrap(MAGENTA_CODE, text)


def cyan(text: str) -> str:
    return _wrap(CYAN_CODE, text)


def white(text: str) -> str:
    return _wrap(WHITE_CODE, text)


def dark_grey(text: str) -> str:
    return _wrap(DARK_GREY_CODE, text)


def strip(text: str) -> str:
    """Remove all ANSI formatting sequences from ``text``."""
    return _FORMATTING.sub("", text)


def sort_stripped(items: list[str]) -> None:
    """Sort ``items`` in place, ignoring any ANSI formatting."""
    items.sort(key=strip)