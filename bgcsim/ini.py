"""Plain-text initialization file reading and file opening helpers."""

from __future__ import annotations

import re
from typing import IO, TextIO

FLT_COND_TOL = 1e-10
"""Tolerance used when comparing floating point values in conditions."""

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_MODES = {
    "r": ("rb", "binary read"),
    "i": ("r", "ascii read"),
    "w": ("wb", "binary write"),
    "o": ("w", "ascii write"),
}


class IniError(Exception):
    """Raised when an initialization file cannot be read or a file opened."""


def file_open(path, mode: str) -> IO:
    """Open *path* using one of the modes 'r', 'i', 'w' or 'o'.

    'r' and 'w' are binary read and write, 'i' and 'o' are text read
    and write.
    """
    try:
        open_mode, description = _MODES[mode]
    except KeyError:
        raise IniError(f"Invalid mode specification for file_open: {mode!r}") from None
    try:
        return open(path, open_mode)
    except OSError as exc:
        raise IniError(f"Can't open {path} for {description}: {exc}") from exc


class InitFile:
    """A text initialization file read one value per line.

    Each read takes the first whitespace-delimited word on the next
    non-blank line and discards the rest of that line.
    """

    def __init__(self, stream: TextIO, name: str = "<stream>"):
        self.stream = stream
        self.name = name

    def _next_word(self, kind: str) -> str:
        while True:
            line = self.stream.readline()
            if not line:
                raise IniError(f"Error reading {kind} value from {self.name}: end of file")
            words = line.split()
            if words:
                return words[0]

    def read_int(self) -> int:
        """Read an integer from the start of the next line."""
        word = self._next_word("int")
        match = _INT_PREFIX.match(word)
        if match is None:
            raise IniError(f"Error reading int value from {self.name}: {word!r}")
        return int(match.group())

    def read_float(self) -> float:
        """Read a floating point number from the start of the next line."""
        word = self._next_word("double")
        match = _FLOAT_PREFIX.match(word)
        if match is None:
            raise IniError(f"Error reading double value from {self.name}: {word!r}")
        return float(match.group())

    def read_string(self) -> str:
        """Read the first word of the next line."""
        return self._next_word("string")

    def expect_keyword(self, keyword: str) -> None:
        """Read a word and raise IniError unless it equals *keyword*."""
        word = self.read_string()
        if word != keyword:
            raise IniError(f"Expecting keyword --> {keyword} in file {self.name}, found {word!r}")

    def open_listed_file(self, mode: str) -> IO:
        """Read a file name from the next line and open it with *mode*."""
        try:
            path = self.read_string()
        except IniError as exc:
            raise IniError(f"Error reading filename from {self.name}") from exc
        return file_open(path, mode)


def end_init(init: InitFile) -> None:
    """Check that the initialization file ends with the END_INIT keyword."""
    key = "END_INIT"
    try:
        init.expect_keyword(key)
    except IniError as exc:
        raise IniError(
            f"Error reading keyword for end of initialization file: expecting "
            f"keyword --> {key} in file {init.name}. This indicates that you have "
            f"the wrong number of lines of information in your initialization file."
        ) from exc