"""Build tool front end exposing work path scripts as subcommands."""
from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
