"""Options for colouring the interface and file names."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from . import flags
from . import vars as envvars
from .error import BadArgument
from .matches import MatchedFlags
from .vars import Vars


class UseColours(Enum):
    """When to use terminal colours."""

    ALWAYS = "always"
    AUTOMATIC = "automatic"
    NEVER = "never"


class ColourScale(Enum):
    """Whether file sizes are coloured by a fixed style or by a gradient."""

    FIXED = "fixed"
    GRADIENT = "gradient"


@dataclass(frozen=True)
class Definitions:
    """Colour definitions read from the environment."""

    ls: str | None = None
    exa: str | None = None


@dataclass(frozen=True)
class ThemeOptions:
    """The options that make up the styles of the interface and file names."""

    use_colours: UseColours = UseColours.AUTOMATIC
    colour_scale: ColourScale = ColourScale.FIXED
    definitions: Definitions = field(default_factory=Definitions)


def deduce_use_colours(matches: MatchedFlags) -> UseColours:
    """Decide when to use colours from ``--color`` or ``--colour``.

    Raises BadArgument, naming ``--color``, for an unknown value.
    """
    word = matches.get_where(
        lambda flag: flag.matches(flags.COLOR) or flag.matches(flags.COLOUR)
    )
    if word is None:
        return UseColours.AUTOMATIC
    if word == "always":
        return UseColours.ALWAYS
    if word in ("auto", "automatic"):
        return UseColours.AUTOMATIC
    if word == "never":
        return UseColours.NEVER
    raise BadArgument(flags.COLOR, word)


def deduce_colour_scale(matches: MatchedFlags) -> ColourScale:
    """Decide the colour scale from ``--color-scale`` or ``--colour-scale``."""
    flag = matches.has_where(
        lambda f: f.matches(flags.COLOR_SCALE) or f.matches(flags.COLOUR_SCALE)
    )
    return ColourScale.GRADIENT if flag is not None else ColourScale.FIXED


def deduce_definitions(vars: Vars) -> Definitions:
    """Read the colour definitions from the environment."""
    return Definitions(ls=vars.get(envvars.LS_COLORS), exa=vars.get(envvars.EXA_COLORS))


def deduce_theme_options(matches: MatchedFlags, vars: Vars) -> ThemeOptions:
    """Work out every theme option; definitions are skipped if colours are off."""
    use_colours = deduce_use_colours(matches)
    colour_scale = deduce_colour_scale(matches)

    if use_colours is UseColours.NEVER:
        definitions = Definitions()
    else:
        definitions = deduce_definitions(vars)

    return ThemeOptions(use_colours=use_colours, colour_scale=colour_scale, definitions=definitions)