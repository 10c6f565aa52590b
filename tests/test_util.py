import pytest

from refstats.core.util import TopSelection, format_elapsed, parse_top


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, TopSelection(show=False, limit=None)),
        ("10", TopSelection(show=True, limit=10)),
        ("0", TopSelection(show=True, limit=0)),
        ("*", TopSelection(show=True, limit=None)),
        ("-3", TopSelection(show=False, limit=None, valid=False)),
        ("all", TopSelection(show=False, limit=None, valid=False)),
    ],
)
def test_parse_top(value, expected):
    assert parse_top(value) == expected


def test_format_elapsed():
    assert format_elapsed(0) == "00:00:00.00"
    assert format_elapsed(3723.456) == "01:02:03.45"
