class InrangeError(Exception):
    """Base exception for everything that stops an inrange run"""


class UsageError(InrangeError):
    def __init__(self, n_args: int):
        self.n_args = n_args
        super().__init__(n_args)

    def __str__(self) -> str:
        return f"expected exactly 1 argument, got {self.n_args}"


class ParseError(InrangeError, ValueError):
    """The interval argument is malformed. `text` is the part that couldn't be read."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(text)

    def __str__(self) -> str:
        return f"not a number: {self.text}"


class InvalidRangeError(ParseError):
    """A bracketed range is missing its opening or closing bracket character"""

    def __str__(self) -> str:
        return "range is invalid"


class InputParseError(InrangeError, ValueError):
    def __init__(self, line: str):
        self.line = line
        super().__init__(line)

    def __str__(self) -> str:
        return self.line


class StreamError(InrangeError):
    """Reading the input stream failed; the underlying error is chained as `__cause__`"""


def diagnostic(e: InrangeError) -> str:
    """The message printed to stderr when `e` ends a run"""
    if isinstance(e, ParseError):
        return f"Error parsing range: {e}"
    elif isinstance(e, InputParseError):
        return f"Error parsing input: {e}"
    elif isinstance(e, StreamError):
        return f"Error reading from stdin: {e}"
    else:
        return str(e)
