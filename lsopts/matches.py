"""The flags matched from the user's input, and queries over them."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .error import Duplicate
from .parser import Arg, Flag, Strictness

FlagPredicate = Callable[[Flag], bool]
MatchedFlag = tuple[Flag, "str | None"]


@dataclass(frozen=True)
class MatchedFlags:
    """The flags parsed from the user's input, in the order they were given.

    Long and short flags share one sequence because the one nearest the end
    usually wins, which needs their relative positions.
    """

    flags: tuple[MatchedFlag, ...] = ()
    strictness: Strictness = Strictness.USE_LAST_ARGUMENTS
    _frozen_flags: bool = field(default=True, init=False, repr=False, compare=False)

    def __init__(
        self,
        flags: Iterable[MatchedFlag] = (),
        strictness: Strictness = Strictness.USE_LAST_ARGUMENTS,
    ) -> None:
        object.__setattr__(self, "flags", tuple(flags))
        object.__setattr__(self, "strictness", strictness)
        object.__setattr__(self, "_frozen_flags", True)

    def is_strict(self) -> bool:
        """Whether duplicate or redundant arguments should be complained about."""
        return self.strictness is Strictness.COMPLAIN_ABOUT_REDUNDANT_ARGUMENTS

    def has(self, arg: Arg) -> bool:
        """Whether the given value-less argument was specified.

        Raises Duplicate in strict mode if it was given more than once.
        """
        return self.has_where(lambda flag: flag.matches(arg)) is not None

    def has_where(self, predicate: FlagPredicate) -> Flag | None:
        """Return a value-less flag satisfying the predicate, or None.

        In strict mode, raises Duplicate if more than one flag satisfies it.
        """
        if not self.is_strict():
            return self.has_where_any(predicate)

        found = [flag for flag, value in self.flags if value is None and predicate(flag)]
        if len(found) >= 2:
            raise Duplicate(found[0], found[1])
        return found[0] if found else None

    def has_where_any(self, predicate: FlagPredicate) -> Flag | None:
        """Return the last value-less flag satisfying the predicate, ignoring strictness."""
        return next(
            (flag for flag, value in reversed(self.flags) if value is None and predicate(flag)),
            None,
        )

    def get(self, arg: Arg) -> str | None:
        """Return the value given to the argument, or None if it was not given.

        Raises Duplicate in strict mode if it was given more than once.
        """
        return self.get_where(lambda flag: flag.matches(arg))

    def get_where(self, predicate: FlagPredicate) -> str | None:
        """Return the value of a flag satisfying the predicate, or None.

        In strict mode, raises Duplicate if more than one flag satisfies it;
        otherwise the last matching flag wins.
        """
        if self.is_strict():
            found = [(flag, value) for flag, value in self.flags
                     if value is not None and predicate(flag)]
            if len(found) >= 2:
                raise Duplicate(found[0][0], found[1][0])
            return found[0][1] if found else None

        return next(
            (value for flag, value in reversed(self.flags)
             if value is not None and predicate(flag)),
            None,
        )

    def count(self, arg: Arg) -> int:
        """Count the occurrences of the argument, with or without values."""
        return sum(1 for flag, _ in self.flags if flag.matches(arg))