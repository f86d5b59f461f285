"""Tests for gomake.discovery.registry module."""
from __future__ import annotations

from pathlib import Path

import pytest

from gomake.discovery.registry import CommandRegistry, DiscoveredCommand


class TestDiscoveredCommand:
    """Tests for DiscoveredCommand dataclass."""

    def test_short_help_names_script(self):
        command = DiscoveredCommand(name="build", path=Path("/w/scripts/command-build.sh"))
        assert command.short == "Run command from /w/scripts/command-build.sh"

    def test_is_frozen(self):
        command = DiscoveredCommand(name="build", path=Path("/w"))
        with pytest.raises(AttributeError):
            command.name = "other"  # type: ignore

    def test_equality(self):
        a = DiscoveredCommand(name="build", path=Path("/w/a"))
        b = DiscoveredCommand(name="build", path=Path("/w/a"))
        assert a == b


class TestCommandRegistry:
    """Tests for CommandRegistry."""

    def test_add_new_command(self):
        registry = CommandRegistry()
        command = DiscoveredCommand(name="build", path=Path("/w/command-build"))

        assert registry.add(command) is True
        assert len(registry) == 1
        assert registry.get("build") is command

    def test_add_duplicate_name_keeps_first(self):
        registry = CommandRegistry()
        first = DiscoveredCommand(name="build", path=Path("/w/command-build.py"))
        second = DiscoveredCommand(name="build", path=Path("/w/command-build.sh"))

        assert registry.add(first) is True
        assert registry.add(second) is False
        assert len(registry) == 1
        assert registry.get("build") is first

    def test_get_unknown_returns_none(self):
        assert CommandRegistry().get("missing") is None

    def test_names_keep_insertion_order(self):
        registry = CommandRegistry()
        for name in ("zeta", "alpha", "mid"):
            registry.add(DiscoveredCommand(name=name, path=Path(f"/w/command-{name}")))

        assert registry.names() == ["zeta", "alpha", "mid"]
        assert [c.name for c in registry] == ["zeta", "alpha", "mid"]

    def test_contains(self):
        registry = CommandRegistry()
        registry.add(DiscoveredCommand(name="test", path=Path("/w/command-test")))

        assert "test" in registry
        assert "build" not in registry

    def test_empty_registry(self):
        registry = CommandRegistry()
        assert len(registry) == 0
        assert registry.names() == []
        assert list(registry) == []
