"""Errors for option combinations that the user should not have picked."""

from __future__ import annotations

from dataclasses import dataclass

from .parser import Arg, Flag, NeedsValue, ParseError, ShortFlag, TakesValue


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass(frozen=True)
class Choices:
    """A list of legal choices for an argument-taking option."""

    values: tuple[str, ...]

    def __str__(self) -> str:
        return "choices: " + ", ".join(self.values)


@dataclass(frozen=True)
class ArgSource:
    """A number that came from a command-line argument."""

    arg: Arg

    def __str__(self) -> str:
        return f"option {self.arg}"


@dataclass(frozen=True)
class EnvSource:
    """A number that came from an environment variable."""

    name: str

    def __str__(self) -> str:
        return f"environment variable {self.name}"


NumberSource = ArgSource | EnvSource


class OptionsError(Exception):
    """Something is wrong with the combination of options given."""

    def __post_init__(self) -> None:
        Exception.__init__(self, str(self))

    def suggestion(self) -> str | None:
        """Guess at what the user was trying to do, if there is a guess."""
        return None


@dataclass
class ParseFailure(OptionsError):
    """The arguments could not be parsed."""

    error: ParseError

    def __str__(self) -> str:
        return str(self.error)

    def suggestion(self) -> str | None:
        if isinstance(self.error, NeedsValue) and self.error.flag == ShortFlag("t"):
            return 'To sort newest files last, try "--sort newest", or just "-snew"'
        return None


@dataclass
class BadArgument(OptionsError):
    """An argument was given a value it does not accept."""

    arg: Arg
    attempt: str

    def __str__(self) -> str:
        text = f"Option {self.arg} has no {_quote(self.attempt)} setting"
        if self.arg.takes_value is TakesValue.NECESSARY and self.arg.values is not None:
            return f"{text} ({Choices(self.arg.values)})"
        return text

    def suggestion(self) -> str | None:
        if self.arg.long == "time" and self.attempt == "r":
            return 'To sort oldest files last, try "--sort oldest", or just "-sold"'
        return None


@dataclass
class Unsupported(OptionsError):
    """The options given are not supported."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class Duplicate(OptionsError):
    """An option was given twice or more in strict mode."""

    first: Flag
    second: Flag

    def __str__(self) -> str:
        if self.first == self.second:
            return f"Flag {self.first} was given twice"
        return f"Flag {self.first} conflicts with flag {self.second}"


@dataclass
class Conflict(OptionsError):
    """Two options were given that conflict with one another."""

    first: Arg
    second: Arg

    def __str__(self) -> str:
        return f"Option {self.first} conflicts with option {self.second}"


@dataclass
class Useless(OptionsError):
    """An option does nothing when another one is, or is not, present."""

    arg: Arg
    present: bool
    other: Arg

    def __str__(self) -> str:
        if self.present:
            return f"Option {self.arg} is useless given option {self.other}"
        return f"Option {self.arg} is useless without option {self.other}"


@dataclass
class Useless2(OptionsError):
    """An option does nothing unless one of two others is present."""

    arg: Arg
    first: Arg
    second: Arg

    def __str__(self) -> str:
        return f"Option {self.arg} is useless without options {self.first} or {self.second}"


@dataclass
class TreeAllAll(OptionsError):
    """--tree cannot be used with --all given twice."""

    def __str__(self) -> str:
        return "Option --tree is useless given --all --all"


@dataclass
class FailedParse(OptionsError):
    """A numeric option could not be parsed as a number."""

    text: str
    source: NumberSource
    reason: str

    def __str__(self) -> str:
        return f"Value {_quote(self.text)} not valid for {self.source}: {self.reason}"


@dataclass
class FailedGlobPattern(OptionsError):
    """A glob pattern to ignore could not be parsed."""

    message: str

    def __str__(self) -> str:
        return f"Failed to parse glob pattern: {self.message}"