"""Discovered command records."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class DiscoveredCommand:
    """A subcommand backed by a script file."""
    name: str  # Subcommand token
    path: Path  # Absolute path of the script to execute

    @property
    def short(self) -> str:
        return f"Run command from {self.path}"


@dataclass
class CommandRegistry:
    """Ordered registry of discovered commands, keyed by name."""
    commands: dict[str, DiscoveredCommand] = field(default_factory=dict)

    def add(self, command: DiscoveredCommand) -> bool:
        """Add a command. Returns True if new, False if the name is already taken."""
        if command.name in self.commands:
            return False
        self.commands[command.name] = command
        return True

    def get(self, name: str) -> DiscoveredCommand | None:
        return self.commands.get(name)

    def names(self) -> list[str]:
        return list(self.commands.keys())

    def __contains__(self, name: object) -> bool:
        return name in self.commands

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands.values())
