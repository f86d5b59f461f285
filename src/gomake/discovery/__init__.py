"""Command discovery module for gomake.

Turns the scripts directory of a work path into runtime subcommands.
"""
from __future__ import annotations

from gomake.discovery.registry import CommandRegistry, DiscoveredCommand
from gomake.discovery.discoverer import command_name, discover_commands

__all__ = [
    "CommandRegistry",
    "DiscoveredCommand",
    "command_name",
    "discover_commands",
]
