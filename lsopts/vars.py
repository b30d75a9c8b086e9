"""Environment variables that affect option parsing, and ways to read them."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

LS_COLORS = "LS_COLORS"
"""Colours files by filesystem type and by name or extension."""

COLUMNS = "COLUMNS"
"""Overrides the width of the terminal, in characters."""

TIME_STYLE = "TIME_STYLE"
"""Chooses the timestamp format."""

EXA_COLORS = "EXA_COLORS"
"""Colours the interface, overriding anything from LS_COLORS."""

EXA_STRICT = "EXA_STRICT"
"""Any non-empty value turns on strict argument checking."""

EXA_DEBUG = "EXA_DEBUG"
"""Any non-empty value turns on debugging output."""

EXA_GRID_ROWS = "EXA_GRID_ROWS"
"""Minimum number of rows before the grid-details view is used."""

EXA_ICON_SPACING = "EXA_ICON_SPACING"
"""Number of spaces to print between an icon and its file name."""


@runtime_checkable
class Vars(Protocol):
    """A source of environment variables."""

    def get(self, name: str) -> str | None:
        """Return the value of the named variable, or None if it is unset."""


@dataclass(frozen=True)
class EnvironmentVars:
    """Reads variables from the process environment."""

    def get(self, name: str) -> str | None:
        """Return the value of the named variable, or None if it is unset."""
        return os.environ.get(name)


@dataclass(frozen=True)
class MappingVars:
    """Reads variables from a fixed mapping."""

    mapping: Mapping[str, str] = field(default_factory=dict)

    def get(self, name: str) -> str | None:
        """Return the value of the named variable, or None if it is absent."""
        return self.mapping.get(name)