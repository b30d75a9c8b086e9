import pytest

from lsopts.parser import (
    Arg,
    ForbiddenValue,
    LongFlag,
    NeedsValue,
    ParseError,
    ShortFlag,
    Strictness,
    TakesValue,
    UnknownArgument,
    UnknownShortArgument,
    split_on_equals,
)

SUGGESTIONS = ("example",)
VERBOSE = Arg("v", "verbose")
COUNT = Arg("c", "count", TakesValue.NECESSARY)
TYPE = Arg("t", "type", TakesValue.NECESSARY, SUGGESTIONS)
GIT = Arg(None, "git")


@pytest.mark.parametrize("text", ["", "a", "=", "=bbb", "aaa="])
def test_split_none(text):
    assert split_on_equals(text) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("aaa=bbb", ("aaa", "bbb")),
        ("--sort=size", ("--sort", "size")),
        ("this=that=other", ("this", "that=other")),
    ],
)
def test_split_some(text, expected):
    assert split_on_equals(text) == expected


def test_arg_display_with_short():
    assert str(VERBOSE) == "--verbose (-v)"


def test_arg_display_without_short():
    assert str(GIT) == "--git"


def test_arg_rejects_long_short():
    with pytest.raises(ValueError):
        Arg("vv", "verbose")


def test_arg_default_takes_no_value():
    assert VERBOSE.takes_value is TakesValue.FORBIDDEN
    assert VERBOSE.values is None


def test_flag_display():
    assert str(ShortFlag("l")) == "-l"
    assert str(LongFlag("long")) == "--long"


def test_short_flag_matches():
    assert ShortFlag("v").matches(VERBOSE)
    assert not ShortFlag("c").matches(VERBOSE)
    assert not ShortFlag("v").matches(GIT)


def test_long_flag_matches():
    assert LongFlag("verbose").matches(VERBOSE)
    assert not LongFlag("count").matches(VERBOSE)
    assert LongFlag("git").matches(GIT)


def test_flags_compare_by_value():
    assert ShortFlag("l") == ShortFlag("l")
    assert LongFlag("l") != ShortFlag("l")


def test_needs_value_without_choices():
    error = NeedsValue(LongFlag("count"))
    assert str(error) == "Flag --count needs a value"


def test_needs_value_with_choices():
    error = NeedsValue(ShortFlag("t"), SUGGESTIONS)
    assert str(error) == "Flag -t needs a value (choices: example)"


def test_forbidden_value_message():
    assert str(ForbiddenValue(LongFlag("long"))) == "Flag --long cannot take a value"


def test_unknown_short_message():
    assert str(UnknownShortArgument("q")) == "Unknown argument -q"


def test_unknown_long_message():
    assert str(UnknownArgument("quiet")) == "Unknown argument --quiet"


def test_parse_errors_compare_by_value():
    assert NeedsValue(LongFlag("type"), SUGGESTIONS) == NeedsValue(LongFlag("type"), SUGGESTIONS)
    assert NeedsValue(LongFlag("type"), None) != NeedsValue(LongFlag("type"), SUGGESTIONS)
    assert UnknownShortArgument("q") != UnknownArgument("q")


def test_parse_errors_raise_as_parse_error():
    with pytest.raises(ParseError) as info:
        raise ForbiddenValue(ShortFlag("l"))
    assert info.value == ForbiddenValue(ShortFlag("l"))
    assert info.value.args == ("Flag -l cannot take a value",)


def test_strictness_members_distinct():
    assert Strictness.USE_LAST_ARGUMENTS != Strictness.COMPLAIN_ABOUT_REDUNDANT_ARGUMENTS
    assert COUNT.takes_value is TakesValue.NECESSARY and TYPE.values == SUGGESTIONS