import sys
from typing import IO, Iterable, Iterator, Optional, Tuple

from .errors import InputParseError, StreamError
from .interval import Interval, parse
from .reals import parse_real
from .util import print_, strip_line_ending, zip_with


def parse_line(line: str) -> float:
    try:
        return parse_real(line)
    except ValueError as e:
        raise InputParseError(line) from e


def read_lines(input_: IO[str]) -> Iterator[str]:
    try:
        for line in input_:
            yield strip_line_ending(line)
    except (OSError, UnicodeDecodeError) as e:
        raise StreamError(e) from e


def matching_lines(interval: Interval, lines: Iterable[str]) -> Iterator[str]:
    """Lines whose value is in `interval`, in input order. Raises `InputParseError` at the
    first line that isn't a number, after yielding every match before it."""
    numbered: Iterator[Tuple[str, float]] = zip_with(parse_line, lines)
    return (line for line, n in numbered if interval.includes(n))


def run(input_: IO[str], spec: str, output: Optional[IO[str]] = None) -> int:
    """Echo the lines of `input_` that fall within the interval `spec` to `output`,
    returning how many were echoed. `output` defaults to stdout."""
    output_ = sys.stdout if output is None else output
    interval = parse(spec)
    print_(f"Filtering to {interval}")
    n_matches = 0
    for line in matching_lines(interval, read_lines(input_)):
        print(line, file=output_)
        n_matches += 1
    print_(f"{n_matches} lines in range")
    return n_matches


test_input = """
0
4.9
5
-1""".strip()


def test():
    import io

    output = io.StringIO()
    result = run(io.StringIO(test_input), "[0,5)", output)
    assert result == 2, result
    assert output.getvalue() == "0\n4.9\n", output.getvalue()

    output = io.StringIO()
    run(io.StringIO("0\r\n5\r\n4.999\r\n-0.001\r\n"), "5", output)
    assert output.getvalue() == "0\n4.999\n", output.getvalue()

    output = io.StringIO()
    try:
        run(io.StringIO("1\n2\nfoo\n3\n"), "[0,5)", output)
    except InputParseError as e:
        assert e.line == "foo", e.line
    else:
        assert False, "expected an InputParseError"
    assert output.getvalue() == "1\n2\n", output.getvalue()
