# tests/test_time.py

from datetime import date

from calcal.core import time as t


def test_adjusted_remainder():
    assert t.amod(13, 13) == 13
    assert t.amod(0, 13) == 13
    assert t.amod(14, 13) == 1
    assert t.amod(-91, 13) == 13

def test_weekdays():
    assert t.day_of_week(1) == t.MONDAY
    assert t.day_of_week(719163) == t.THURSDAY   # 1970-01-01
    assert t.kday_on_or_before(719163, t.SUNDAY) == 719159
    assert t.kday_on_or_before(719163, t.THURSDAY) == 719163

def test_julian_day_numbers():
    assert t.from_jdn(2440588) == 719163
    # JDN 584283 is the Maya epoch day
    assert t.from_jdn(584283) == -1137142
    assert t.jd_from_moment(719163.5) == 2440588.0

def test_datetime_bridge():
    assert t.canonical_from_date(date(1970, 1, 1)) == 719163
    assert t.today() == date.today().toordinal()
