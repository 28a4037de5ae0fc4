from __future__ import annotations

import pytest

from dnstlib.common import ErrorMessage
from dnstlib.options import ShortOptionLexer


def test_short_option_with_separate_value() -> None:
    lexer = ShortOptionLexer(["-a", "SHA-1", "example.test"])
    assert next(lexer) == ("short", "a")
    assert lexer.value() == "SHA-1"
    assert next(lexer) == ("value", "example.test")
    with pytest.raises(StopIteration):
        next(lexer)


def test_short_option_with_attached_value() -> None:
    lexer = ShortOptionLexer(["-t5", "-s=aabb"])
    assert next(lexer) == ("short", "t")
    assert lexer.value() == "5"
    assert next(lexer) == ("short", "s")
    assert lexer.value() == "aabb"


def test_value_may_look_like_an_option() -> None:
    lexer = ShortOptionLexer(["-s", "-t"])
    assert next(lexer) == ("short", "s")
    assert lexer.value() == "-t"


def test_clustered_short_options() -> None:
    assert list(ShortOptionLexer(["-xy"])) == [("short", "x"), ("short", "y")]


def test_long_options() -> None:
    assert list(ShortOptionLexer(["--salt=aa", "--help"])) == \
        [("long", "salt"), ("long", "help")]


def test_double_dash_ends_options() -> None:
    assert list(ShortOptionLexer(["a", "--", "-t", "--salt"])) == \
        [("value", "a"), ("value", "-t"), ("value", "--salt")]


def test_single_dash_is_a_value() -> None:
    assert list(ShortOptionLexer(["-"])) == [("value", "-")]


def test_missing_value() -> None:
    lexer = ShortOptionLexer(["-a"])
    next(lexer)
    with pytest.raises(ErrorMessage, match="missing argument for option '-a'"):
        lexer.value()
