import math
import re

decimal_re = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
hex_re = re.compile(
    r"[+-]?0[xX](?:_?[0-9a-fA-F])*(?:\.(?:[0-9a-fA-F](?:_?[0-9a-fA-F])*)?)?[pP][+-]?[0-9]+"
)
special_re = re.compile(r"[+-]?inf(?:inity)?|nan", re.IGNORECASE)


def _hex_has_digits(s: str) -> bool:
    mantissa = re.split("[pP]", s, maxsplit=1)[0]
    return any(c in "0123456789abcdefABCDEF" for c in mantissa.lstrip("+-")[2:])


def parse_real(s: str) -> float:
    """Parse a 64-bit float using strict literal rules: no surrounding whitespace, underscores
    only between the digits of a hex mantissa, and no silent overflow to infinity. Hex
    literals need a binary exponent, e.g. 0x1.8p3."""
    if decimal_re.fullmatch(s):
        value = float(s)
        if math.isinf(value):
            raise ValueError(f"value out of range: {s}")
        return value
    elif hex_re.fullmatch(s) and _hex_has_digits(s):
        try:
            return float.fromhex(s.replace("_", ""))
        except OverflowError:
            raise ValueError(f"value out of range: {s}")
    elif special_re.fullmatch(s):
        return float(s)
    else:
        raise ValueError(f"invalid syntax: {s!r}")


def test():
    for s, expected in [
        ("0", 0.0),
        ("-4.5", -4.5),
        (".5", 0.5),
        ("5.", 5.0),
        ("+2E-7", 2e-7),
        ("0x1p-2", 0.25),
        ("-0X1.8P3", -12.0),
        ("0x1_0p0", 16.0),
        ("0x1.8_0p0", 1.5),
    ]:
        actual = parse_real(s)
        assert actual == expected, (s, expected, actual)

    assert parse_real("-Infinity") == -math.inf
    assert math.isnan(parse_real("NaN"))

    for s in ["", " 3", "3 ", "1_000", "1e400", "0x1", "0xp1", "--1", "e5", "1,5"]:
        try:
            parse_real(s)
        except ValueError:
            pass
        else:
            assert False, s
