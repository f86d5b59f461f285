"""Command line interface for gomake.

Usage::

    gomake [-L LEVEL] [-W PATH] <command> [args...]

Every ``<work-path>/scripts/command-<name>[.<ext>]`` file is exposed as
``<name>``. Arguments after the command token are passed to the script, minus
gomake's own -L/-W/-V flags; anything after ``--`` is passed unchanged.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from gomake import __version__
from gomake.config import GomakeSettings, get_settings
from gomake.discovery import CommandRegistry, discover_commands
from gomake.errors import GomakeError, InvalidLogLevelError
from gomake.logs import configure_logging, level_names, parse_level, set_level
from gomake.preparse import discover_string_argument
from gomake.runner import ScriptRunner

logger = logging.getLogger(__name__)

PROG = "gomake"

_VALUE_FLAGS = ("-L", "--log-level", "-W", "--work-path")
_ATTACHED_FLAGS = ("--log-level=", "--work-path=")
_VERSION_FLAGS = ("-V", "--version")


def version_text() -> str:
    return f"{PROG} {__version__}\n"


def split_command_args(args: Sequence[str]) -> tuple[list[str], bool]:
    """Remove gomake's own flags from the arguments after the command token.

    ``-L``/``--log-level`` and ``-W``/``--work-path`` are dropped with their
    value, ``-V``/``--version`` is dropped and reported. The first ``--`` ends
    the scan and is dropped; everything after it is forwarded unchanged.

    Returns:
        Tuple of (arguments for the script, whether a version flag was seen).
    """
    forwarded: list[str] = []
    version = False
    i = 0
    while i < len(args):
        token = args[i]
        if token == "--":
            forwarded.extend(args[i + 1:])
            break
        if token in _VERSION_FLAGS:
            version = True
        elif token in _VALUE_FLAGS:
            i += 1
        elif not token.startswith(_ATTACHED_FLAGS):
            forwarded.append(token)
        i += 1
    return forwarded, version


def _commands_epilog(registry: CommandRegistry) -> str:
    if not len(registry):
        return "no commands found (add scripts/command-<name> under the work path)"
    width = max(len(name) for name in registry.names())
    lines = ["commands:"]
    for command in registry:
        lines.append(f"  {command.name.ljust(width)}  {command.short}")
    return "\n".join(lines)


def prepare_arg_parser(
    argv: Sequence[str] | None = None,
    *,
    settings: GomakeSettings | None = None,
) -> tuple[argparse.ArgumentParser, CommandRegistry]:
    """Build the root parser with one choice per discovered command script.

    ``argv`` is the full argument list including the program name and defaults
    to ``sys.argv``. Log level and work path are read from it by the pre-parser;
    the matching parser options only exist for help output.

    Raises:
        MissingArgumentValueError: -L or -W is the last token.
        InvalidLogLevelError: The log level is not a known level name.
    """
    if argv is None:
        argv = sys.argv
    if settings is None:
        settings = get_settings()

    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Run build commands from the work path scripts directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-L",
        "--log-level",
        default=settings.log_level,
        help=f"Set log level ({', '.join(level_names())})",
    )
    log_level = discover_string_argument("L", "log-level", settings.log_level, argv)
    try:
        level = parse_level(log_level)
    except ValueError as exc:
        raise InvalidLogLevelError("Cannot set log level", input=log_level) from exc
    set_level(level)

    default_work_path = str(settings.work_path)
    parser.add_argument("-W", "--work-path", default=default_work_path, help="Set the work path")
    work_path = discover_string_argument("W", "work-path", default_work_path, argv)

    parser.add_argument("-V", "--version", action="store_true", help="Display gomake version")

    registry = discover_commands(
        work_path,
        scripts_dir=settings.scripts_dir,
        prefix=settings.command_prefix,
    )
    logger.debug("Discovered %d command(s) in %s", len(registry), work_path)

    parser.add_argument(
        "command",
        nargs="?",
        choices=registry.names(),
        metavar="command",
        help="Command to run",
    )
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments forwarded to the command script")
    parser.epilog = _commands_epilog(registry)

    return parser, registry


def main(argv: Sequence[str] | None = None, *, runner: ScriptRunner | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    settings = get_settings()
    configure_logging(settings.log_format)

    try:
        parser, registry = prepare_arg_parser([PROG, *args], settings=settings)
    except GomakeError as exc:
        logger.error("%s", exc)
        return 1

    ns = parser.parse_args(args)

    script_args = list(ns.args)
    version = ns.version
    command_index = len(args) - len(script_args) - 1
    # The pre-parser stops at "--", so flags are only honoured before it.
    if ns.command is not None and "--" not in args[:command_index]:
        script_args, trailing_version = split_command_args(script_args)
        version = version or trailing_version

    if version:
        sys.stdout.write(version_text())
        return 0

    if ns.command is None:
        parser.print_help()
        return 1

    command = registry.get(ns.command)
    assert command is not None
    if runner is None:
        runner = ScriptRunner()
    result = runner.run(command, script_args)
    return result.returncode


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
