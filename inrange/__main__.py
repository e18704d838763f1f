import os
import sys
from pathlib import Path
from typing import List, Optional

from .errors import InrangeError, UsageError, diagnostic
from .scan import run

USAGE = """usage:
    {prog} INTERVAL
where INTERVAL is a range of numbers in mathematical notation (e.g. [3,10)).

If a single number n is specified, the range is assumed to be [0,n) or (n,0],
depending on whether n is positive or negative.
"""


def program_name(arg0: str) -> str:
    name = Path(arg0).name
    return "python -m inrange" if name == "__main__.py" else name


def interval_arg(args: List[str]) -> str:
    if len(args) != 1:
        raise UsageError(len(args))
    return args[0]


def silence_stdout():
    """Point stdout at devnull, so the flush at exit can't hit a closed pipe again"""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    os.dup2(os.open(os.devnull, os.O_WRONLY), fd)


def main(argv: Optional[List[str]] = None) -> int:
    """Arguments are taken as-is, with no option parsing, so that `inrange -5` means (-5,0]"""
    argv_ = sys.argv if argv is None else argv
    try:
        spec = interval_arg(argv_[1:])
    except UsageError:
        print(USAGE.format(prog=program_name(argv_[0])), file=sys.stderr, end="")
        return 1

    try:
        run(sys.stdin, spec, sys.stdout)
        sys.stdout.flush()
    except InrangeError as e:
        print(diagnostic(e), file=sys.stderr)
        return 1
    except BrokenPipeError:
        # the reader went away, e.g. `inrange 5 < numbers | head -1`
        silence_stdout()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
