"""Command-line program that clusters a point file with DBSCAN."""

from __future__ import annotations

import re
import sys
from typing import Sequence

from griddbscan.algo import UnsupportedDimensionError, dbscan
from griddbscan.fileio import read_doubles, read_header, write_array

USAGE = "[-o <outFile>] [-eps <p_epsilon>] [-minpts <p_minpts>] <inFile>"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class CommandLineError(ValueError):
    """Raised when the arguments do not fit the program's usage."""


class CommandLine:
    """Positional arguments counted from the end and "-name value" options."""

    def __init__(self, args: Sequence[str], usage: str = "bad arguments",
                 prog: str = "dbscan") -> None:
        self.args = list(args)
        self.usage = usage
        self.prog = prog

    def _bad_argument(self) -> CommandLineError:
        return CommandLineError(f"usage: {self.prog} {self.usage}")

    def get_argument(self, i: int) -> str:
        """The i-th argument counted from the last one (0 is the last)."""
        if len(self.args) < 1 + i:
            raise self._bad_argument()
        return self.args[-1 - i]

    def get_option(self, option: str) -> bool:
        """Whether the option appears anywhere."""
        return option in self.args

    def get_option_value(self, option: str, default: str | None = None) -> str | None:
        """The argument following the option, or default."""
        for name, value in zip(self.args, self.args[1:]):
            if name == option:
                return value
        return default

    def get_option_int_value(self, option: str, default: int) -> int:
        """A positive integer option value, or default."""
        value = self.get_option_value(option)
        if value is None:
            return default
        match = _INT_PREFIX.match(value)
        number = int(match.group(1)) if match else 0
        if number < 1:
            raise self._bad_argument()
        return number

    def get_option_double_value(self, option: str, default: float) -> float:
        """A floating-point option value, or default."""
        value = self.get_option_value(option)
        if value is None:
            return default
        match = _FLOAT_PREFIX.match(value)
        if match is None:
            raise self._bad_argument()
        return float(match.group(1))


def main(argv: Sequence[str] | None = None) -> int:
    """Cluster the points of the input file and optionally write their labels."""
    args = sys.argv[1:] if argv is None else list(argv)
    command = CommandLine(args, USAGE)
    try:
        in_file = command.get_argument(0)
        out_file = command.get_option_value("-o")
        command.get_option_int_value("-r", 1)
        epsilon = command.get_option_double_value("-eps", 1.0)
        min_pts = command.get_option_int_value("-minpts", 1)
        command.get_option_double_value("-rho", -1.0)
    except CommandLineError as exc:
        print(exc)
        return 1

    dim = read_header(in_file)
    points = read_doubles(in_file, dim)

    try:
        result = dbscan(points, epsilon, min_pts)
    except UnsupportedDimensionError as exc:
        print(f"Error: {exc}")
        return 1

    if out_file is not None:
        write_array(out_file, "cluster-id", result.labels)
    return 0


if __name__ == "__main__":
    sys.exit(main())