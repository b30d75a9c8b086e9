"""Building blocks for command-line option parsing: arguments, flags and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TakesValue(Enum):
    """Whether a flag takes a value, for both long and short forms."""

    NECESSARY = "necessary"
    """The flag has to be followed by a value."""

    FORBIDDEN = "forbidden"
    """The flag is an error if a value follows it."""

    OPTIONAL = "optional"
    """The flag may be followed by a value that overrides its default."""


class Strictness(Enum):
    """Whether redundant arguments should be considered a problem."""

    COMPLAIN_ABOUT_REDUNDANT_ARGUMENTS = "complain"
    """Raise an error when an argument does nothing or two of them conflict."""

    USE_LAST_ARGUMENTS = "last"
    """Search the arguments back to front, so later ones take priority."""


def _choices_text(values: tuple[str, ...]) -> str:
    return "choices: " + ", ".join(values)


@dataclass(frozen=True)
class Arg:
    """An argument that one of the user's input strings can match.

    ``values`` lists the known choices for a value-taking argument; it is
    only used as help text and never to validate the value.
    """

    short: str | None
    long: str
    takes_value: TakesValue = TakesValue.FORBIDDEN
    values: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.short is not None and len(self.short) != 1:
            raise ValueError(f"short argument must be one character, not {self.short!r}")

    def __str__(self) -> str:
        if self.short is None:
            return f"--{self.long}"
        return f"--{self.long} (-{self.short})"


@dataclass(frozen=True)
class ShortFlag:
    """A flag given in its single-character form, such as ``-l``."""

    short: str

    def matches(self, arg: Arg) -> bool:
        """Whether this flag refers to the given argument."""
        return arg.short == self.short

    def __str__(self) -> str:
        return f"-{self.short}"


@dataclass(frozen=True)
class LongFlag:
    """A flag given in its long form, such as ``--long``."""

    long: str

    def matches(self, arg: Arg) -> bool:
        """Whether this flag refers to the given argument."""
        return arg.long == self.long

    def __str__(self) -> str:
        return f"--{self.long}"


Flag = ShortFlag | LongFlag


class ParseError(Exception):
    """The user's input could not be parsed into a list of arguments."""

    def __post_init__(self) -> None:
        Exception.__init__(self, str(self))


@dataclass
class NeedsValue(ParseError):
    """A flag that has to take a value was not given one."""

    flag: Flag
    values: tuple[str, ...] | None = None

    def __str__(self) -> str:
        if self.values is None:
            return f"Flag {self.flag} needs a value"
        return f"Flag {self.flag} needs a value ({_choices_text(self.values)})"


@dataclass
class ForbiddenValue(ParseError):
    """A flag that cannot take a value was given one."""

    flag: Flag

    def __str__(self) -> str:
        return f"Flag {self.flag} cannot take a value"


@dataclass
class UnknownShortArgument(ParseError):
    """A short argument, alone or in a cluster, was not recognised."""

    attempt: str

    def __str__(self) -> str:
        return f"Unknown argument -{self.attempt}"


@dataclass
class UnknownArgument(ParseError):
    """A long argument was not recognised."""

    attempt: str

    def __str__(self) -> str:
        return f"Unknown argument --{self.attempt}"


def split_on_equals(text: str) -> tuple[str, str] | None:
    """Split a string on its first ``=``.

    Returns ``None`` if there is no equals sign or either side is empty.
    """
    before, sep, after = text.partition("=")
    if sep and before and after:
        return before, after
    return None