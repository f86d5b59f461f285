"""Command discoverer - maps script files to subcommands.

Lists ``<work_path>/<scripts_dir>`` once per invocation. Every file named
``<prefix><name>[.<ext>]`` becomes subcommand ``<name>``.
"""
from __future__ import annotations

import logging
from pathlib import Path

from gomake.discovery.registry import CommandRegistry, DiscoveredCommand

logger = logging.getLogger(__name__)


def command_name(filename: str, prefix: str) -> str:
    """Strip the prefix and everything from the first dot on.

    ``command-build.sh`` -> ``build``, ``command-a.b.c`` -> ``a``.
    """
    return filename[len(prefix):].split(".")[0]


def discover_commands(
    work_path: Path | str,
    *,
    scripts_dir: str = "scripts",
    prefix: str = "command-",
) -> CommandRegistry:
    """Build the command registry for a work path.

    A missing or unreadable scripts directory yields an empty registry.
    Entries are visited in filename order; on a name clash the first one wins.
    Directories are skipped, and so are symlinks pointing at directories
    (``Path.is_dir`` follows links); a symlink to a file is a command.
    """
    registry = CommandRegistry()
    directory = Path(work_path) / scripts_dir

    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        logger.debug("No scripts directory at %s (%s)", directory, exc)
        return registry

    logger.debug("Found scripts directory path=%s", directory)

    for entry in entries:
        if not entry.name.startswith(prefix) or entry.is_dir():
            continue

        name = command_name(entry.name, prefix)
        if not name:
            logger.warning("Ignoring script with empty command name: %s", entry)
            continue

        command = DiscoveredCommand(name=name, path=entry.absolute())
        if registry.add(command):
            logger.debug("Registered command '%s' -> %s", name, command.path)
        else:
            logger.warning(
                "Ignoring %s: command '%s' is already provided by %s",
                entry,
                name,
                registry.commands[name].path,
            )

    return registry
