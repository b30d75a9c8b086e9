"""Parsing a list of command-line strings into matched flags and free strings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .matches import MatchedFlag, MatchedFlags
from .parser import (
    Arg,
    ForbiddenValue,
    LongFlag,
    NeedsValue,
    ShortFlag,
    Strictness,
    TakesValue,
    UnknownArgument,
    UnknownShortArgument,
    split_on_equals,
)


@dataclass(frozen=True)
class Matches:
    """The result of parsing the user's command-line strings."""

    flags: MatchedFlags
    frees: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Args:
    """A set of arguments that input strings can be matched against."""

    args: tuple[Arg, ...]

    def __init__(self, args: Iterable[Arg]) -> None:
        object.__setattr__(self, "args", tuple(args))

    def _lookup_short(self, short: str) -> Arg:
        for arg in self.args:
            if arg.short == short:
                return arg
        raise UnknownShortArgument(attempt=short)

    def _lookup_long(self, long: str) -> Arg:
        for arg in self.args:
            if arg.long == long:
                return arg
        raise UnknownArgument(attempt=long)

    def parse(self, inputs: Iterable[str], strictness: Strictness) -> Matches:
        """Parse the inputs into matched flags and free strings.

        Raises a ParseError subclass if the input cannot be parsed.
        """
        flags: list[MatchedFlag] = []
        frees: list[str] = []
        parsing = True
        remaining = iter(inputs)

        for text in remaining:
            if not parsing:
                frees.append(text)
            elif text == "--":
                parsing = False
            elif text.startswith("--"):
                self._parse_long(text[2:], remaining, flags)
            elif text.startswith("-") and text != "-":
                self._parse_short(text[1:], remaining, flags)
            else:
                frees.append(text)

        return Matches(flags=MatchedFlags(flags, strictness), frees=frees)

    def _parse_long(self, name: str, remaining, flags: list[MatchedFlag]) -> None:
        split = split_on_equals(name)
        if split is not None:
            before, after = split
            arg = self._lookup_long(before)
            flag = LongFlag(arg.long)
            if arg.takes_value is TakesValue.FORBIDDEN:
                raise ForbiddenValue(flag=flag)
            flags.append((flag, after))
            return

        arg = self._lookup_long(name)
        flag = LongFlag(arg.long)
        if arg.takes_value is TakesValue.FORBIDDEN:
            flags.append((flag, None))
            return

        following = next(remaining, None)
        if following is None and arg.takes_value is TakesValue.NECESSARY:
            raise NeedsValue(flag=flag, values=arg.values)
        flags.append((flag, following))

    def _parse_short(self, cluster: str, remaining, flags: list[MatchedFlag]) -> None:
        split = split_on_equals(cluster)
        if split is not None:
            before, after = split
            *others, last = before
            for short in others:
                arg = self._lookup_short(short)
                flag = ShortFlag(short)
                if arg.takes_value is TakesValue.NECESSARY:
                    raise NeedsValue(flag=flag, values=arg.values)
                flags.append((flag, None))

            arg = self._lookup_short(last)
            flag = ShortFlag(last)
            if arg.takes_value is TakesValue.FORBIDDEN:
                raise ForbiddenValue(flag=flag)
            flags.append((flag, after))
            return

        for index, short in enumerate(cluster):
            arg = self._lookup_short(short)
            flag = ShortFlag(short)
            if arg.takes_value is TakesValue.FORBIDDEN:
                flags.append((flag, None))
                continue

            rest = cluster[index + 1:]
            if rest:
                flags.append((flag, rest))
                break

            following = next(remaining, None)
            if following is None and arg.takes_value is TakesValue.NECESSARY:
                raise NeedsValue(flag=flag, values=arg.values)
            flags.append((flag, following))