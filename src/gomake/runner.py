from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Sequence

from gomake.discovery.registry import DiscoveredCommand

logger = logging.getLogger(__name__)

# Shell conventions for a command that could not be started.
EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126


@dataclass(frozen=True)
class ScriptResult:
    returncode: int
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ScriptRunner:
    """Runs a discovered command script in the foreground.

    stdin/stdout/stderr are inherited; the call blocks until the script exits.
    """

    def run(self, command: DiscoveredCommand, args: Sequence[str]) -> ScriptResult:
        argv = [str(command.path), *args]
        logger.debug("Running command '%s': %s", command.name, argv)
        try:
            completed = subprocess.run(argv, check=False)
        except FileNotFoundError as exc:
            logger.error("Command script not found: %s (%s)", command.path, exc)
            return ScriptResult(returncode=EXIT_NOT_FOUND, error=str(exc))
        except OSError as exc:
            logger.error("Cannot execute command script %s (%s)", command.path, exc)
            return ScriptResult(returncode=EXIT_NOT_EXECUTABLE, error=str(exc))

        returncode = completed.returncode
        if returncode < 0:
            # Killed by signal N.
            returncode = 128 - returncode
        if returncode != 0:
            logger.debug("Command '%s' exited with status %d", command.name, returncode)
        return ScriptResult(returncode=returncode)
