"""Helpers for absolute, relative and symbolic-link paths."""

from __future__ import annotations

import os
import re

_SEP = os.sep
_OCTAL_ESCAPE = re.compile(r"\\[0-7]{3}")


def _clean(path: str) -> str:
    if not path:
        return "."
    cleaned = os.path.normpath(path)
    if cleaned.startswith(_SEP * 2):
        cleaned = cleaned[1:]
    return cleaned


def _dir(path: str) -> str:
    return _clean(path[: path.rfind(_SEP) + 1])


def _abs(path: str) -> str:
    if os.path.isabs(path):
        return _clean(path)
    return _clean(os.path.join(os.getcwd(), path))


def _trailing_separator(path: str) -> str:
    return path if path.endswith(_SEP) else path + _SEP


def is_root(path: str) -> bool:
    """Whether ``path`` is its own parent directory."""
    return _dir(path) == path


def rel(path: str) -> str:
    """``path`` expressed relative to the working directory where practical."""
    try:
        working_directory = os.getcwd()
    except OSError:
        return path
    return rel_to(path, working_directory)


def rel_to(path: str, to: str) -> str:
    """``path`` relative to ``to`` if it lies beneath it or its parent, else absolute."""
    path = _abs(path)
    to = _abs(to)

    if path == to:
        return "."

    prefix = _trailing_separator(to)
    if path.startswith(prefix):
        return "." + _SEP + path[len(prefix):]

    prefix = _trailing_separator(_dir(to))
    if path.startswith(prefix):
        return ".." + _SEP + path[len(prefix):]

    return path


def unescape_octal(path: str) -> str:
    """Replace three-digit octal escapes such as ``\\040`` with their characters."""
    return _OCTAL_ESCAPE.sub(lambda match: chr(int(match.group(0)[1:], 8) & 0xFF), path)


def dereference(path: str) -> str:
    """Follow symbolic links from ``path`` until a non-link is reached."""
    while os.path.islink(path) or _is_symlink_strict(path):
        path = os.readlink(path)
    return path


def _is_symlink_strict(path: str) -> bool:
    # lstat raises for missing paths, as the caller expects
    import stat as _stat

    return _stat.S_ISLNK(os.lstat(path).st_mode)