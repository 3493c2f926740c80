"""Diagnostic output with a verbosity threshold."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import TextIO


class Logger:
    """Writes prefixed diagnostic lines to standard output and error."""

    def __init__(
        self,
        verbosity: int = 1,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.verbosity = verbosity
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def _write(self, dest: TextIO, args: tuple) -> None:
        if self.verbosity > 1:
            dest.write(f"{datetime.now()}: ")
        dest.write("tmsu: " + " ".join(str(arg) for arg in args) + "\n")
        dest.flush()

    def fatal(self, *args) -> None:
        """Report an error and exit with status 1."""
        self._write(self.err, args)
        raise SystemExit(1)

    def warn(self, *args) -> None:
        """Report a warning on standard error."""
        self._write(self.err, args)

    def info(self, verbosity: int, *args) -> None:
        """Report information if ``verbosity`` is within the threshold."""
        if verbosity > self.verbosity:
            return
        self._write(self.out, args)


default_logger = Logger()


def fatal(*args) -> None:
    default_logger.fatal(*args)


def warn(*args) -> None:
    default_logger.warn(*args)


def info(verbosity: int, *args) -> None:
    default_logger.info(verbosity, *args)