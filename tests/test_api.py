from __future__ import annotations

import pytest

from gnuopt.parser.api import ArgType
from gnuopt.parser.api import Desc
from gnuopt.parser.api import Option
from gnuopt.parser.api import Options
from gnuopt.parser.api import Parsed
from gnuopt.parser.errors import OptionTypeError
from gnuopt.parser.errors import OptParseError
from gnuopt.parser.optparser import parse


def test_bool() -> None:
    descs = [Desc("a"), Desc("b"), Desc("c"), Desc("d")]

    opts, _ = parse(["-ab", "-c"], descs)

    assert opts.has("a")
    assert opts.has("b")
    assert opts.has("c")
    assert not opts.has("d")
    assert not opts.has("e")


def test_string() -> None:
    descs = [
        Desc("a", "a-opt", ArgType.STRING),
        Desc("b", "b-opt", ArgType.STRING),
    ]

    opts, _ = parse(["--a-opt", "A", "-bB"], descs)

    assert opts.get_string("a") == "A"
    assert opts.get_string("a-opt") == "A"
    assert opts.get_string("b") == "B"
    assert opts.get_string("b-opt") == "B"


def test_strings_last_value_wins() -> None:
    descs = [Desc("a", "", ArgType.STRING)]

    opts, _ = parse(["-a", "A", "-a", "AA"], descs)

    assert opts.get_strings("a") == ["A", "AA"]
    assert opts.get_string("a") == "AA"
    assert opts.get_string_or("a", "default") == "AA"


def test_empty_string_is_a_value() -> None:
    descs = [Desc("s", "str", ArgType.STRING)]

    opts, _ = parse(["--str="], descs)

    assert opts.get_string("s") == ""
    assert opts.get_string_or("s", "default") == ""


def test_type_int() -> None:
    descs = [Desc("a", "aaa", ArgType.INT), Desc("b", "bbb", ArgType.INT)]

    opts, args = parse(["-a", "1", "--aaa", "2", "-b", "3"], descs)

    assert opts == [Option(descs[0], [1, 2]), Option(descs[1], [3])]
    assert args == []
    assert opts.get_int("a") == 2
    assert opts.get_ints("a") == [1, 2]
    assert opts.get_int_or("a", -1) == 2
    assert opts.get_int_or("c", -1) == -1
    assert opts.get_int("c") is None
    assert opts.get_ints("c") == []


def test_type_float() -> None:
    descs = [Desc("a", "aaa", ArgType.FLOAT), Desc("b", "bbb", ArgType.FLOAT)]

    opts, args = parse(["-a", "1.23", "--aaa", "2.34", "-b", "3"], descs)

    assert opts == [Option(descs[0], [1.23, 2.34]), Option(descs[1], [3.0])]
    assert args == []
    assert opts.get_float("a") == 2.34
    assert opts.get_floats("a") == [1.23, 2.34]
    assert opts.get_float_or("a", 0.12) == 2.34
    assert opts.get_float_or("c", 0.12) == 0.12
    assert isinstance(opts.get_float("b"), float)
    assert opts.get_floats("c") == []


def test_missing_options() -> None:
    opts = Options()

    assert not opts.has("a")
    assert opts.option("a") is None
    assert opts.get_string("a") is None
    assert opts.get_strings("a") == []
    assert opts.get_string_or("a", "x") == "x"
    assert opts.get_float("a") is None


def test_empty_name_never_matches() -> None:
    descs = [Desc("", "long-only"), Desc("s")]

    opts, _ = parse(["--long-only", "-s"], descs)

    assert not opts.has("")


def test_option_lookup() -> None:
    descs = [Desc("a", "add")]

    opts, _ = parse(["--add"], descs)

    assert opts.option("a") is opts[0]
    assert opts.option("add").desc is descs[0]


@pytest.mark.parametrize(
    "accessor",
    [
        lambda opts: opts.get_int("s"),
        lambda opts: opts.get_ints("s"),
        lambda opts: opts.get_float_or("s", 1.0),
        lambda opts: opts.get_string("n"),
        lambda opts: opts.get_strings("flag"),
    ],
)
def test_wrong_type(accessor) -> None:
    descs = [
        Desc("s", "", ArgType.STRING),
        Desc("n", "", ArgType.INT),
        Desc("", "flag"),
    ]
    opts, _ = parse(["-s", "x", "-n", "1", "--flag"], descs)

    with pytest.raises(OptionTypeError) as e:
        accessor(opts)

    assert isinstance(e.value, TypeError)
    assert not isinstance(e.value, OptParseError)


def test_wrong_type_message() -> None:
    descs = [Desc("s", "str", ArgType.STRING)]
    opts, _ = parse(["-s", "x"], descs)

    with pytest.raises(OptionTypeError, match="option -s/--str: not int option"):
        opts.get_int("str")


def test_accessors_return_copies() -> None:
    descs = [Desc("a", "", ArgType.STRING)]
    opts, _ = parse(["-a", "A"], descs)

    opts.get_strings("a").append("B")

    assert opts.get_strings("a") == ["A"]


def test_desc_identity() -> None:
    first = Desc("a", "add", ArgType.NONE, "", "add new item")
    second = Desc("a", "add", ArgType.NONE, "", "add new item")

    assert first == first
    assert first != second
    assert len({first, second}) == 2


@pytest.mark.parametrize(
    "desc, expected",
    [
        (Desc("a", "add"), "-a/--add"),
        (Desc("a"), "-a"),
        (Desc("", "add"), "--add"),
    ],
)
def test_desc_str(desc: Desc, expected: str) -> None:
    assert str(desc) == expected
    assert repr(desc).endswith(f": {expected}>")


def test_desc_takes_value() -> None:
    assert not Desc("a").takes_value()
    assert Desc("a", "", ArgType.INT).takes_value()
    assert Desc("a", "", ArgType.FLOAT).takes_value()
    assert Desc("a", "", ArgType.STRING).takes_value()


def test_parsed_unpacks() -> None:
    descs = [Desc("a")]

    parsed = parse(["-a", "x"], descs)
    opts, args = parsed

    assert isinstance(parsed, Parsed)
    assert parsed.options is opts
    assert parsed.arguments is args
    assert isinstance(opts, Options)
