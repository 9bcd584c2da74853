# tests/test_french.py

import pytest

from calcal.core.errors import InvalidDate
from calcal.core.types import FrenchDate
from calcal.engines.french import FrenchCalendar, FrenchParams
from calcal.engines.gregorian import fixed_from_gregorian

FR = FrenchCalendar()


@pytest.mark.parametrize(
    "year, ymd",
    [
        (1, (1792, 9, 22)),
        (2, (1793, 9, 22)),
        (3, (1794, 9, 22)),
        (4, (1795, 9, 23)),
        (5, (1796, 9, 22)),
    ],
)
def test_historical_new_years(year, ymd):
    assert FR.new_year(year) == fixed_from_gregorian(*ymd)
    assert FR.from_canonical(fixed_from_gregorian(*ymd)) == FrenchDate(year, 1, 1)

def test_epoch():
    assert FrenchParams().epoch == fixed_from_gregorian(1792, 9, 22)

def test_year_three_is_leap():
    assert FR.is_leap_year(3)
    assert not FR.is_leap_year(2)
    assert FR.days_in_month(3, 13) == 6
    assert FR.days_in_month(2, 13) == 5
    assert FR.to_canonical(FrenchDate(3, 13, 6)) == fixed_from_gregorian(1795, 9, 22)

def test_sixth_sansculottide_only_in_leap_years():
    with pytest.raises(InvalidDate):
        FR.to_canonical(FrenchDate(2, 13, 6))
    with pytest.raises(InvalidDate):
        FR.to_canonical(FrenchDate(2, 12, 31))
    with pytest.raises(InvalidDate):
        FR.to_canonical(FrenchDate(2, 14, 1))

def test_unix_epoch():
    d = FR.from_canonical(719163)
    assert d == FrenchDate(178, 4, 11)
    assert d.month_name == "Nivose"
    assert (d.decade, d.day_of_decade) == (2, 1)
    assert str(d) == "0178-04-11"

def test_year_lengths_in_the_modern_era():
    lengths = [FR.days_in_year(y) for y in range(200, 240)]
    assert set(lengths) == {365, 366}
    assert 8 <= lengths.count(366) <= 12

def test_proleptic_years_before_the_epoch():
    d = FR.from_canonical(fixed_from_gregorian(1792, 9, 21))
    assert d.year == 0
    assert d.month == 13
    assert FR.to_canonical(d) == fixed_from_gregorian(1792, 9, 21)
