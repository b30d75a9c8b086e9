import pytest

from lsopts.error import (
    ArgSource,
    BadArgument,
    Choices,
    Conflict,
    Duplicate,
    EnvSource,
    FailedGlobPattern,
    FailedParse,
    OptionsError,
    ParseFailure,
    TreeAllAll,
    Unsupported,
    Useless,
    Useless2,
)
from lsopts.parser import Arg, LongFlag, NeedsValue, ShortFlag, TakesValue

TIMES = ("modified", "changed", "accessed", "created")
TIME = Arg("t", "time", TakesValue.NECESSARY, TIMES)
LEVEL = Arg("L", "level", TakesValue.NECESSARY)
RECURSE = Arg("R", "recurse")
TREE = Arg("T", "tree")
LONG = Arg("l", "long")
HEADER = Arg("h", "header")
ALL = Arg("a", "all")


def test_choices_display():
    assert str(Choices(("always", "auto", "never"))) == "choices: always, auto, never"


def test_number_sources_display():
    assert str(ArgSource(LEVEL)) == "option --level (-L)"
    assert str(EnvSource("COLUMNS")) == "environment variable COLUMNS"


def test_bad_argument_lists_choices():
    error = BadArgument(TIME, "r")
    assert str(error) == (
        'Option --time (-t) has no "r" setting '
        "(choices: modified, changed, accessed, created)"
    )


def test_bad_argument_without_choices():
    assert str(BadArgument(LEVEL, "x")).endswith('has no "x" setting')


def test_time_r_suggestion():
    assert BadArgument(TIME, "r").suggestion() == (
        'To sort oldest files last, try "--sort oldest", or just "-sold"'
    )


def test_needs_value_t_suggestion():
    error = ParseFailure(NeedsValue(ShortFlag("t"), TIMES))
    assert error.suggestion() == (
        'To sort newest files last, try "--sort newest", or just "-snew"'
    )


def test_no_suggestion_otherwise():
    assert BadArgument(TIME, "x").suggestion() is None
    assert ParseFailure(NeedsValue(LongFlag("time"), TIMES)).suggestion() is None
    assert TreeAllAll().suggestion() is None


def test_parse_failure_uses_inner_message():
    inner = NeedsValue(LongFlag("count"))
    assert str(ParseFailure(inner)) == str(inner)


def test_duplicate_same_flag():
    assert "was given twice" in str(Duplicate(LongFlag("sort"), LongFlag("sort")))


def test_duplicate_different_flags():
    text = str(Duplicate(LongFlag("color"), LongFlag("colour")))
    assert "conflicts with flag" in text
    assert text.startswith("Flag --color ")


def test_conflict_message():
    assert str(Conflict(RECURSE, Arg("d", "list-dirs"))) == (
        "Option --recurse (-R) conflicts with option --list-dirs (-d)"
    )


def test_useless_messages():
    assert str(Useless(HEADER, False, LONG)).endswith("is useless without option --long (-l)")
    assert "is useless given option" in str(Useless(HEADER, True, LONG))


def test_useless2_message():
    assert str(Useless2(LEVEL, RECURSE, TREE)) == (
        "Option --level (-L) is useless without options --recurse (-R) or --tree (-T)"
    )


def test_tree_all_all_message():
    assert str(TreeAllAll()) == "Option --tree is useless given --all --all"


def test_failed_parse_message():
    error = FailedParse("abc", EnvSource("COLUMNS"), "invalid digit found in string")
    assert str(error) == (
        'Value "abc" not valid for environment variable COLUMNS: invalid digit found in string'
    )


def test_unsupported_and_glob_messages():
    assert str(Unsupported("nope")) == "nope"
    assert str(FailedGlobPattern("bad")).startswith("Failed to parse glob pattern: ")


def test_errors_compare_by_value():
    assert Conflict(ALL, ALL) == Conflict(ALL, ALL)
    assert Conflict(RECURSE, TREE) != Conflict(TREE, RECURSE)
    assert TreeAllAll() == TreeAllAll()
    assert BadArgument(TIME, "r") != BadArgument(TIME, "s")


def test_errors_raise_as_options_error():
    with pytest.raises(OptionsError) as info:
        raise Useless2(LEVEL, RECURSE, TREE)
    assert info.value == Useless2(LEVEL, RECURSE, TREE)
    assert info.value.args == (str(info.value),)