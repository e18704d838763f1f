"""Intervals of real numbers in mathematical notation.

Two grammars are accepted:

- a single number n, meaning [0,n) when n >= 0 and (n,0] when n < 0
- a bracketed range like [3,10) or (-1.5,2e3], where [ and ] include the bound and
  ( and ) exclude it. A range without an opening bracket is wrapped in [...), so 3,10
  means [3,10).

Bounds are not checked against each other; an interval like [10,3) is valid and
contains nothing.
"""
from typing import Dict, NamedTuple, Tuple

from .errors import InvalidRangeError, ParseError
from .reals import parse_real

COMMA = ","
INCLUSIVE_LOW, EXCLUSIVE_LOW = "[", "("
INCLUSIVE_HIGH, EXCLUSIVE_HIGH = "]", ")"
LOW_BRACKETS: Dict[str, bool] = {INCLUSIVE_LOW: True, EXCLUSIVE_LOW: False}
HIGH_BRACKETS: Dict[str, bool] = {INCLUSIVE_HIGH: True, EXCLUSIVE_HIGH: False}


class Interval(NamedTuple):
    low: float
    low_inclusive: bool
    high: float
    high_inclusive: bool

    def includes(self, n: float) -> bool:
        # each side keeps its strict comparison alongside the inclusive one
        return ((self.low_inclusive and self.low <= n) or self.low < n) and (
            (self.high_inclusive and n <= self.high) or n < self.high
        )

    def __contains__(self, n) -> bool:
        return self.includes(n)

    def __str__(self):
        open_ = INCLUSIVE_LOW if self.low_inclusive else EXCLUSIVE_LOW
        close = INCLUSIVE_HIGH if self.high_inclusive else EXCLUSIVE_HIGH
        return f"{open_}{self.low},{self.high}{close}"


def parse_bound(s: str) -> float:
    try:
        return parse_real(s)
    except ValueError as e:
        raise ParseError(s) from e


def parse_single_number(s: str) -> Interval:
    n = parse_bound(s)
    if n >= 0:
        return Interval(0.0, True, n, False)
    else:
        return Interval(n, False, 0.0, True)


def split_bracket(s: str, brackets: Dict[str, bool], at_end: bool) -> Tuple[bool, str]:
    """Strip the bracket character off one end of `s`, returning its inclusivity and the
    rest of the string"""
    bracket, rest = (s[-1:], s[:-1]) if at_end else (s[:1], s[1:])
    inclusive = brackets.get(bracket)
    if inclusive is None:
        raise InvalidRangeError(s)
    return inclusive, rest


def parse_range(s: str) -> Interval:
    if s[:1] not in LOW_BRACKETS:
        return parse_range(f"{INCLUSIVE_LOW}{s}{EXCLUSIVE_HIGH}")

    left, right = s.split(COMMA, 1)
    low_inclusive, low = split_bracket(left, LOW_BRACKETS, at_end=False)
    low_ = parse_bound(low)
    high_inclusive, high = split_bracket(right, HIGH_BRACKETS, at_end=True)
    high_ = parse_bound(high)
    return Interval(low_, low_inclusive, high_, high_inclusive)


def parse(spec: str) -> Interval:
    """Parse an interval from either the single-number shorthand or bracketed notation.

    :raises ParseError: when a bound isn't a number. `InvalidRangeError`, a subclass, is
      raised when a bracket character is missing or wrong.
    """
    if COMMA not in spec:
        return parse_single_number(spec)
    else:
        return parse_range(spec)


def test():
    i = parse("[3,10)")
    assert i == Interval(3.0, True, 10.0, False), i
    assert [i.includes(n) for n in (3, 10, 9.999, 2.999)] == [True, False, True, False]

    i = parse("(3,10]")
    assert not i.includes(3) and i.includes(10), i

    assert parse("3,10") == parse("[3,10)")
    assert parse("5") == Interval(0.0, True, 5.0, False)
    assert parse("-5") == Interval(-5.0, False, 0.0, True)
    assert not any(map(parse("[10,3)").includes, (2, 3, 6.5, 10, 11)))
    assert str(parse("(-1,2]")) == "(-1.0,2.0]"

    for spec, error in [
        ("[abc,10)", ParseError),
        ("3,10,20", ParseError),
        ("", ParseError),
        ("{3,10)", ParseError),
        ("[3,10}", InvalidRangeError),
        ("[3,", InvalidRangeError),
    ]:
        try:
            parse(spec)
        except error:
            pass
        else:
            assert False, spec
