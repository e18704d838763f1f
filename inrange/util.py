import sys
from typing import Callable, Iterable, Iterator, Tuple, TypeVar

VERBOSE = False

T = TypeVar("T")
U = TypeVar("U")


# Iterators


def zip_with(f: Callable[[T], U], it: Iterable[T]) -> Iterator[Tuple[T, U]]:
    for i in it:
        yield i, f(i)


# I/O


def set_verbose(value: bool):
    global VERBOSE
    VERBOSE = value


def print_(*args, **kwargs):
    if VERBOSE:
        print(*args, **kwargs, file=sys.stderr)


def strip_line_ending(line: str) -> str:
    """Drop a trailing newline, then a trailing carriage return"""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
