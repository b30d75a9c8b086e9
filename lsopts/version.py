"""The version string, and deciding when to show it."""

from __future__ import annotations

from dataclasses import dataclass

from . import flags
from .matches import MatchedFlags

PROGRAM_NAME = "exa"
PROGRAM_VERSION = "0.1.0"


@dataclass(frozen=True)
class VersionString:
    """The text shown for ``--version``."""

    name: str = PROGRAM_NAME
    version: str = PROGRAM_VERSION

    def __str__(self) -> str:
        return f"{self.name} v{self.version}"


def deduce_version(matches: MatchedFlags) -> VersionString | None:
    """Return the version string if ``--version`` was given, otherwise None.

    No strict-mode checks are made.
    """
    if matches.count(flags.VERSION) > 0:
        return VersionString()
    return None