"""Raw argument scan run before the full command line parser.

The work path decides which subcommands exist, so it has to be known before
the argument parser can be built. This module reads the handful of values
needed for that straight from ``sys.argv``.
"""
from __future__ import annotations

import sys
from typing import Sequence

from gomake.errors import MissingArgumentValueError


def discover_string_argument(
    short_name: str,
    long_name: str,
    default_value: str,
    argv: Sequence[str] | None = None,
) -> str:
    """Return the value of ``-<short_name>`` / ``--<long_name>`` in argv.

    Args:
        short_name: Short flag without dash, e.g. ``"W"``.
        long_name: Long flag without dashes, e.g. ``"work-path"``.
        default_value: Returned when the flag is absent or appears after ``--``.
        argv: Full argument list including the program name. Defaults to sys.argv.

    Returns:
        The first matching value.

    Raises:
        MissingArgumentValueError: The flag is the last token and has no value.
    """
    if argv is None:
        argv = sys.argv

    long_flag = f"--{long_name}"
    long_attached = f"{long_flag}="
    short_flag = f"-{short_name}"

    for i in range(1, len(argv)):
        token = argv[i]
        if token == "--":
            return default_value
        if token == short_flag or token == long_flag:
            if i + 1 >= len(argv):
                raise MissingArgumentValueError(
                    f"Missing {long_flag} ({short_flag}) value",
                    long=long_flag,
                    short=short_flag,
                )
            return argv[i + 1]
        if token.startswith(long_attached):
            return token[len(long_attached):]

    return default_value
