"""Reading and writing point files and integer sequences as text."""

from __future__ import annotations

import os
import re
from typing import Any, Iterable

INT_HEADER = "sequenceInt"

_WORD_SEPARATORS = re.compile(r"[\r\t\n, \x00]+")
_NEWLINE_CHARS = "\r\n"
_DELIM_CHARS = "\t;, "
_NUMBER_CHARS = "0123456789.+-e"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _atol(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def split_words(text: str) -> list[str]:
    """Split text into words separated by whitespace, commas or NUL characters."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def format_value(value: Any) -> str:
    """Text form of a value: integers in decimal, floats with 11 significant decimals."""
    if isinstance(value, tuple):
        return " ".join(format_value(v) for v in value)
    if isinstance(value, (bool, int)):
        return str(int(value))
    if isinstance(value, float):
        return f"{value:.11e}"
    return str(value)


def write_array(path: str | os.PathLike[str], header: str, values: Iterable[Any]) -> None:
    """Write a header line followed by one value per line."""
    with open(path, "w", encoding="utf-8", newline="") as out:
        out.write(f"{header}\n")
        out.writelines(f"{format_value(v)}\n" for v in values)


def write_int_array(path: str | os.PathLike[str], values: Iterable[int]) -> None:
    """Write integers under the integer-sequence header."""
    write_array(path, INT_HEADER, values)


def read_int_array(path: str | os.PathLike[str]) -> list[int]:
    """Read integers written by write_int_array."""
    with open(path, encoding="utf-8") as src:
        words = split_words(src.read())
    if not words or words[0] != INT_HEADER:
        raise ValueError(f"{os.fspath(path)}: not an integer sequence file")
    return [_atol(word) for word in words[1:]]


def is_generic_header(line: str) -> bool:
    """Whether a line holds anything besides numbers and delimiters."""
    return any(c not in _NUMBER_CHARS and c not in _DELIM_CHARS for c in line)


def count_entry(line: str) -> int:
    """Number of delimiter-separated entries on a line, ignoring trailing delimiters."""
    trailing = _DELIM_CHARS + _NEWLINE_CHARS + "\x00"
    stripped = line.rstrip(trailing)
    return sum(1 for c in stripped if c in _DELIM_CHARS) + 1


def _read_line(src) -> str:
    return src.readline().rstrip("\n")


def read_header(path: str | os.PathLike[str]) -> int:
    """The dimension of a point file: entries on its first data line."""
    with open(path, encoding="utf-8", newline="") as src:
        first = _read_line(src)
        if is_generic_header(first):
            return count_entry(_read_line(src))
        return count_entry(first)


def read_doubles(path: str | os.PathLike[str], dim: int) -> list[tuple[float, ...]]:
    """Read a point file into points of the given dimension.

    A leading header word is skipped. Values that do not make up a whole
    point at the end of the file are dropped.
    """
    if dim < 1:
        raise ValueError("dimension must be at least 1")
    with open(path, encoding="utf-8") as src:
        words = split_words(src.read())
    if words and is_generic_header(words[0]):
        words = words[1:]
    values = [_atof(word) for word in words]
    usable = len(values) - len(values) % dim
    return [tuple(values[i:i + dim]) for i in range(0, usable, dim)]