import pytest

from inrange import util


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1.5\n", "1.5"),
        ("1.5\r\n", "1.5"),
        ("1.5", "1.5"),
        ("1.5\r", "1.5"),
        ("\n", ""),
        ("1.5\n\n", "1.5\n"),
        ("1.5\r\r\n", "1.5\r"),
    ],
)
def test_strip_line_ending(line: str, expected: str):
    actual = util.strip_line_ending(line)
    assert expected == actual, (expected, actual)


def test_zip_with():
    actual = list(util.zip_with(len, ["a", "bb", ""]))
    assert actual == [("a", 1), ("bb", 2), ("", 0)]


def test_print_respects_verbose(capsys, monkeypatch):
    monkeypatch.setattr(util, "VERBOSE", False)
    util.print_("hidden")
    util.set_verbose(True)
    util.print_("shown", 1)
    util.set_verbose(False)
    out, err = capsys.readouterr()
    assert out == ""
    assert err == "shown 1\n"
