"""Recursive enumeration of files and directories."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass

from tmsu import logs


@dataclass(frozen=True)
class FileSystemFile:
    """A path found on disk and whether it is a directory."""

    path: str
    is_dir: bool


def _walk(path: str) -> Iterator[FileSystemFile]:
    try:
        info = os.stat(path)
    except FileNotFoundError:
        return
    except PermissionError:
        logs.warn(f"{path}: permission denied")
        return
    except OSError as error:
        raise OSError(f"{path}: could not stat: {error}") from error

    is_dir = stat.S_ISDIR(info.st_mode)
    yield FileSystemFile(path, is_dir)

    if not is_dir:
        return

    try:
        names = os.listdir(path)
    except OSError as error:
        raise OSError(f"{path}: could not read directory entries: {error}") from error

    for name in names:
        yield from _walk(os.path.join(path, name))


def enumerate_files(*paths: str) -> list[FileSystemFile]:
    """Every existing path in ``paths`` followed by its descendants."""
    return [entry for path in paths for entry in _walk(path)]


def enumerate_paths(*paths: str) -> list[str]:
    """The paths of ``enumerate_files(*paths)``."""
    return [entry.path for entry in enumerate_files(*paths)]