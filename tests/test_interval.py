import math

import pytest

from inrange import interval
from inrange.errors import InvalidRangeError, ParseError
from inrange.interval import Interval, parse

SAMPLE_POINTS = [-1e9, -10.5, -3, -1, -0.001, 0.0, 0.001, 1, 2.999, 3, 9.999, 10, 10.001, 1e9]


@pytest.mark.parametrize("n", [0, 0.5, 3, 10, 1e6, 2.5e-3])
def test_non_negative_shorthand(n: float):
    i = parse(str(n))
    for x in SAMPLE_POINTS:
        expected = 0 <= x < n
        assert i.includes(x) == expected, (n, x)


@pytest.mark.parametrize("n", [-0.5, -3, -10, -1e6, -2.5e-3])
def test_negative_shorthand(n: float):
    i = parse(str(n))
    for x in SAMPLE_POINTS:
        expected = n < x <= 0
        assert i.includes(x) == expected, (n, x)


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("5", Interval(0.0, True, 5.0, False)),
        ("0", Interval(0.0, True, 0.0, False)),
        ("-5", Interval(-5.0, False, 0.0, True)),
        ("1e3", Interval(0.0, True, 1000.0, False)),
        ("[3,10)", Interval(3.0, True, 10.0, False)),
        ("(3,10]", Interval(3.0, False, 10.0, True)),
        ("[-2.5,2.5]", Interval(-2.5, True, 2.5, True)),
        ("(-1e2,+1e2)", Interval(-100.0, False, 100.0, False)),
        ("3,10", Interval(3.0, True, 10.0, False)),
        ("[10,3)", Interval(10.0, True, 3.0, False)),
        ("0x1p2", Interval(0.0, True, 4.0, False)),
        ("(-inf,0x1.8p1]", Interval(-math.inf, False, 3.0, True)),
    ],
)
def test_parse(spec: str, expected: Interval):
    actual = parse(spec)
    assert actual == expected, (expected, actual)


@pytest.mark.parametrize(
    "spec, n, expected",
    [
        ("[3,10)", 3, True),
        ("[3,10)", 10, False),
        ("[3,10)", 9.999, True),
        ("[3,10)", 2.999, False),
        ("(3,10]", 3, False),
        ("(3,10]", 10, True),
        ("[3,3]", 3, True),
        ("[3,3)", 3, False),
        ("(3,3]", 3, False),
    ],
)
def test_includes(spec: str, n: float, expected: bool):
    assert parse(spec).includes(n) is expected
    assert (n in parse(spec)) is expected


def test_bare_range_defaults_to_closed_open():
    bare, bracketed = parse("3,10"), parse("[3,10)")
    assert bare == bracketed
    for x in SAMPLE_POINTS:
        assert bare.includes(x) == bracketed.includes(x), x


@pytest.mark.parametrize("spec", ["[10,3)", "[10,3]", "(10,3)", "(10,3]"])
def test_inverted_range_is_empty(spec: str):
    i = parse(spec)
    assert not any(map(i.includes, SAMPLE_POINTS)), spec


def test_nan_is_never_included():
    assert not parse("[0,5)").includes(math.nan)
    assert not any(map(parse("nan").includes, SAMPLE_POINTS))


def test_infinite_bounds():
    i = parse("[-inf,inf]")
    assert i.includes(-math.inf) and i.includes(math.inf) and i.includes(0)
    assert not parse("(-inf,inf)").includes(math.inf)


@pytest.mark.parametrize(
    "spec, text",
    [
        ("[abc,10)", "abc"),
        ("3,10,20", "10,20"),
        ("[3,x)", "x"),
        ("abc", "abc"),
        ("", ""),
        (" 5", " 5"),
        ("[3, 10)", " 10"),
        ("{3,10)", "{3"),
        ("1e400", "1e400"),
        ("3,10]", "10]"),
        ("[,", ""),
    ],
)
def test_parse_error(spec: str, text: str):
    with pytest.raises(ParseError) as e:
        parse(spec)
    assert not isinstance(e.value, InvalidRangeError)
    assert e.value.text == text
    assert str(e.value) == f"not a number: {text}"


@pytest.mark.parametrize("spec", ["[3,10}", "(3,10", "[3,", "[3,10"])
def test_invalid_range(spec: str):
    with pytest.raises(InvalidRangeError) as e:
        parse(spec)
    assert isinstance(e.value, ParseError)
    assert str(e.value) == "range is invalid"


@pytest.mark.parametrize(
    "spec, rendered",
    [("[3,10)", "[3.0,10.0)"), ("(-1,2]", "(-1.0,2.0]"), ("7", "[0.0,7.0)")],
)
def test_str(spec: str, rendered: str):
    assert str(parse(spec)) == rendered


def test_module_self_check():
    interval.test()
