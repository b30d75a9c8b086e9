"""Deciding what to do when a directory is encountered."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from . import flags
from .error import ArgSource, Conflict, FailedParse, Useless2
from .matches import MatchedFlags

_UNSIGNED = re.compile(r"\+?([0-9]+)")


def _parse_unsigned(text: str, bits: int = 64) -> int:
    """Parse an unsigned integer that must fit in the given number of bits.

    Raises ValueError with a short reason if the text is not such a number.
    """
    if not text:
        raise ValueError("cannot parse integer from empty string")
    match = _UNSIGNED.fullmatch(text)
    if match is None:
        raise ValueError("invalid digit found in string")
    value = int(match.group(1))
    if value >= 1 << bits:
        raise ValueError("number too large to fit in target type")
    return value


class DirAction(Enum):
    """What to do with a directory when recursion is not wanted.

    Recursion itself is described by a ``RecurseOptions`` value instead.
    """

    LIST = "list"
    """List the directory's contents."""

    AS_FILE = "as_file"
    """Treat the directory as a file, without listing its contents."""


@dataclass(frozen=True)
class RecurseOptions:
    """How to recurse into directories."""

    tree: bool
    max_depth: int | None = None


def deduce_recurse_options(matches: MatchedFlags, tree: bool) -> RecurseOptions:
    """Work out recursion settings from ``--level`` and the tree choice.

    Raises FailedParse if the level is not a number.
    """
    level = matches.get(flags.LEVEL)
    if level is None:
        return RecurseOptions(tree=tree, max_depth=None)

    try:
        depth = _parse_unsigned(level)
    except ValueError as err:
        raise FailedParse(level, ArgSource(flags.LEVEL), str(err)) from err
    return RecurseOptions(tree=tree, max_depth=depth)


def deduce_dir_action(matches: MatchedFlags, can_tree: bool) -> DirAction | RecurseOptions:
    """Decide whether to list, treat as a file, or recurse into directories.

    ``--tree`` and ``--recurse`` may both be given; ``--list-dirs`` is
    separate from them. Tree recursion only happens when ``can_tree`` is set.
    """
    recurse = matches.has(flags.RECURSE)
    as_file = matches.has(flags.LIST_DIRS)
    tree = matches.has(flags.TREE)

    if matches.is_strict():
        if not recurse and not tree and matches.count(flags.LEVEL) > 0:
            raise Useless2(flags.LEVEL, flags.RECURSE, flags.TREE)
        if recurse and as_file:
            raise Conflict(flags.RECURSE, flags.LIST_DIRS)
        if tree and as_file:
            raise Conflict(flags.TREE, flags.LIST_DIRS)

    if tree and can_tree:
        return deduce_recurse_options(matches, True)
    if recurse:
        return deduce_recurse_options(matches, False)
    if as_file:
        return DirAction.AS_FILE
    return DirAction.LIST