#! /usr/bin/env python
import sys
from inspect import signature
from time import perf_counter_ns

from bourbaki.application.cli import CommandLineInterface, cli_spec  # type: ignore

from inrange import interval as intervals
from inrange import reals, scan
from inrange.errors import InrangeError, diagnostic
from inrange.util import print_, set_verbose

SELF_CHECKED_MODULES = [reals, intervals, scan]


def print_match_count(n_matches: int):
    print_(f"{n_matches} matching lines")


cli = CommandLineInterface(
    prog="main",
    require_options=False,
    require_subcommand=True,
    implicit_flags=True,
)


@cli.definition
class Inrange:
    """Filter numeric lines of stdin down to those inside an interval, and check the interval
    parser"""

    @cli_spec.output_handler(print_match_count)
    def run(self, interval: str, verbose: bool = False):
        """Print the lines of stdin whose numeric value lies in an interval, in their original
        order. Stops at the first line that isn't a number.

        :param interval: a range in mathematical notation like [3,10) or (-1,1], or a single
          number n meaning [0,n) or (n,0]. Pass negative shorthand after `--`, e.g. `-- -5`.
        :param verbose: print the parsed interval and timing information to stderr
        """
        set_verbose(verbose)
        tic = perf_counter_ns()
        try:
            n_matches = scan.run(sys.stdin, interval)
        except InrangeError as e:
            print(diagnostic(e), file=sys.stderr)
            sys.exit(1)
        toc = perf_counter_ns()
        print_(f"Ran in {(toc - tic) / 1000000} ms")
        return n_matches

    def test(self):
        """Run the self-checks embedded in the number parser, interval parser and line scanner"""
        for module in SELF_CHECKED_MODULES:
            module.test()
        print("Tests pass for inrange!")

    def info(self):
        """Print a description of the interval notation and the parser's signature"""
        print("Interval notation:")
        if intervals.__doc__:
            print(intervals.__doc__, end="\n\n")
        print("Signature:")
        print(signature(intervals.parse))


if __name__ == "__main__":
    cli.run()
