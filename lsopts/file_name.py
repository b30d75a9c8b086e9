"""Options for how file names are rendered."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from . import flags
from . import vars as envvars
from .dir_action import _parse_unsigned
from .error import EnvSource, FailedParse
from .matches import MatchedFlags
from .vars import Vars


class Classify(Enum):
    """Whether to add type indicators to file names."""

    JUST_FILENAMES = "just_filenames"
    ADD_FILE_INDICATORS = "add_file_indicators"


@dataclass(frozen=True)
class ShowIcons:
    """Whether to show icons, and how many spaces follow each one.

    A ``spacing`` of None means icons are off.
    """

    spacing: int | None = None

    @property
    def on(self) -> bool:
        return self.spacing is not None


@dataclass(frozen=True)
class FileNameOptions:
    """How to render file names."""

    classify: Classify = Classify.JUST_FILENAMES
    show_icons: ShowIcons = field(default_factory=ShowIcons)


def deduce_classify(matches: MatchedFlags) -> Classify:
    """Decide whether to classify files from ``--classify``."""
    if matches.has(flags.CLASSIFY):
        return Classify.ADD_FILE_INDICATORS
    return Classify.JUST_FILENAMES


def deduce_show_icons(matches: MatchedFlags, vars: Vars) -> ShowIcons:
    """Decide whether to show icons, reading their spacing from the environment.

    ``--no-icons`` always wins over ``--icons``. Raises FailedParse if the
    spacing variable is not a number.
    """
    if matches.has(flags.NO_ICONS) or not matches.has(flags.ICONS):
        return ShowIcons()

    columns = vars.get(envvars.EXA_ICON_SPACING)
    if columns is None:
        return ShowIcons(1)

    try:
        width = _parse_unsigned(columns, 32)
    except ValueError as err:
        raise FailedParse(columns, EnvSource(envvars.EXA_ICON_SPACING), str(err)) from err
    return ShowIcons(width)


def deduce_file_name_options(matches: MatchedFlags, vars: Vars) -> FileNameOptions:
    """Work out all the file name options."""
    classify = deduce_classify(matches)
    show_icons = deduce_show_icons(matches, vars)
    return FileNameOptions(classify=classify, show_icons=show_icons)