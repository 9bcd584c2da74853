# tests/test_gregorian.py

import random
from datetime import date

import pytest

from calcal.core.errors import InvalidDate
from calcal.core.types import GregorianDate
from calcal.engines import gregorian as g


def test_unix_epoch_matches_datetime_ordinal():
    assert g.fixed_from_gregorian(1970, 1, 1) == 719163
    assert g.fixed_from_gregorian(1970, 1, 1) == date(1970, 1, 1).toordinal()
    assert g.gregorian_from_fixed(719163) == GregorianDate(1970, 1, 1)

def test_no_year_zero_across_the_epoch():
    """1 BCE is year -1 and ends the day before 1 January 1."""
    assert g.fixed_from_gregorian(1, 1, 1) == 1
    assert g.fixed_from_gregorian(-1, 12, 31) == 0
    assert g.gregorian_from_fixed(0) == GregorianDate(-1, 12, 31)
    assert str(g.gregorian_from_fixed(0)) == "-0001-12-31"
    with pytest.raises(InvalidDate):
        g.fixed_from_gregorian(0, 1, 1)

def test_february_lengths():
    assert g.days_in_month(1900, 2) == 28
    assert g.days_in_month(2000, 2) == 29
    assert g.days_in_month(2024, 2) == 29
    # 1 BCE is an astronomical year 0, hence leap
    assert g.is_leap_year(-1)
    assert not g.is_leap_year(-2)

def test_maya_epoch_in_proleptic_gregorian():
    assert g.fixed_from_gregorian(-3114, 8, 11) == -1137142

def test_day_of_year():
    assert g.day_of_year(g.fixed_from_gregorian(2024, 12, 31)) == 366
    assert g.day_of_year(g.fixed_from_gregorian(2023, 3, 1)) == 60

@pytest.mark.parametrize("bad", [(2023, 2, 29), (2024, 13, 1), (2024, 4, 31), (2024, 1, 0)])
def test_invalid_fields_raise(bad):
    with pytest.raises(InvalidDate):
        g.fixed_from_gregorian(*bad)

def test_agrees_with_datetime_on_random_sample():
    rng = random.Random(1970)
    for _ in range(2000):
        d = rng.randint(1, date.max.toordinal())
        x = date.fromordinal(d)
        assert g.gregorian_from_fixed(d) == GregorianDate(x.year, x.month, x.day)
        assert g.fixed_from_gregorian(x.year, x.month, x.day) == d


def test_parse_date():
    assert g.parse_date("2024-02-29") == GregorianDate(2024, 2, 29)
    assert g.parse_date("-0001-12-31") == GregorianDate(-1, 12, 31)
    assert g.parse_date(" 1970-01-01 ") == GregorianDate(1970, 1, 1)

@pytest.mark.parametrize("text", ["0000-01-01", "2023-02-29", "1970-1-1", "19700101", "", "-1970-13-01", "abcd-ef-gh"])
def test_parse_date_rejects(text):
    with pytest.raises(InvalidDate):
        g.parse_date(text)

def test_invalid_date_is_a_value_error():
    with pytest.raises(ValueError):
        g.parse_date("2023-02-30")
