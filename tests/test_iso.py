# tests/test_iso.py

import pytest

from calcal.core.errors import InvalidDate
from calcal.core.types import ISODate
from calcal.engines import gregorian as g
from calcal.engines import iso


@pytest.mark.parametrize(
    "ymd, expected",
    [
        ((2000, 1, 1), ISODate(1999, 52, 6)),
        ((1970, 1, 1), ISODate(1970, 1, 4)),
        ((2008, 12, 29), ISODate(2009, 1, 1)),
        ((2010, 1, 3), ISODate(2009, 53, 7)),
        ((1, 1, 1), ISODate(1, 1, 1)),
    ],
)
def test_known_weeks(ymd, expected):
    d = g.fixed_from_gregorian(*ymd)
    assert iso.iso_from_fixed(d) == expected
    assert iso.fixed_from_iso(expected.year, expected.week, expected.weekday) == d

def test_weeks_in_year():
    assert iso.weeks_in_year(2009) == 53
    assert iso.weeks_in_year(2020) == 53
    assert iso.weeks_in_year(2021) == 52

def test_week_53_only_in_long_years():
    with pytest.raises(InvalidDate):
        iso.fixed_from_iso(2021, 53, 1)
    with pytest.raises(InvalidDate):
        iso.fixed_from_iso(2021, 1, 8)

def test_string_form():
    assert str(ISODate(1999, 52, 6)) == "1999-W52-6"
