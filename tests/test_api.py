# tests/test_api.py

import pytest

import calcal
from calcal.core.types import CalendarSpec, MayanLongCount
from calcal.engines.specs import ALL_SPECS, CALENDAR_IDS

UNIX_EPOCH = 719163

EXPECTED_1970 = {
    "gregorian": "1970-01-01",
    "iso": "1970-W01-4",
    "julian": "1969-12-19",
    "islamic": "1389-10-22",
    "hebrew": "5730-10-23",
    "mayanLongCount": "12.17.16.7.5",
    "mayanHaab": "3 Kankin",
    "mayanTzolkin": "13 Chicchan",
    "french": "0178-04-11",
    "oldHinduSolar": "5070-09-18",
    "oldHinduLunar": "5070-09-24",
}


def test_calendar_order():
    assert calcal.list_calendars() == list(EXPECTED_1970)
    assert list(CALENDAR_IDS) == list(EXPECTED_1970)

def test_convert_unix_epoch():
    assert calcal.convert(UNIX_EPOCH) == EXPECTED_1970

def test_convert_keeps_request_order():
    out = calcal.convert(UNIX_EPOCH, ["hebrew", "gregorian"])
    assert list(out) == ["hebrew", "gregorian"]

@pytest.mark.parametrize("cid", list(EXPECTED_1970))
def test_format_from_canonical(cid):
    assert calcal.format_from_canonical(cid, UNIX_EPOCH) == EXPECTED_1970[cid]

def test_text_entry_points():
    assert calcal.canonical_from_text("1970-01-01") == UNIX_EPOCH
    assert calcal.to_canonical_from_gregorian(1970, 1, 1) == UNIX_EPOCH
    assert calcal.canonical_from_text("-0001-12-31") == calcal.canonical_from_text("0001-01-01") - 1
    assert calcal.format_from_canonical("gregorian", 0) == "-0001-12-31"

def test_invalid_text():
    with pytest.raises(calcal.InvalidDate):
        calcal.canonical_from_text("1970-02-30")
    with pytest.raises(calcal.InvalidDate):
        calcal.to_canonical_from_gregorian(1970, 0, 1)

def test_unknown_calendar():
    with pytest.raises(calcal.UnknownCalendar) as ei:
        calcal.format_from_canonical("aztec", UNIX_EPOCH)
    assert "aztec" in str(ei.value)
    # still catchable as a lookup failure
    with pytest.raises(KeyError):
        calcal.calendar_info("aztec")
    assert isinstance(ei.value, calcal.CalcalError)

def test_to_canonical_dispatch():
    d = calcal.from_canonical("hebrew", UNIX_EPOCH)
    assert calcal.to_canonical("hebrew", d) == UNIX_EPOCH
    assert calcal.to_canonical("mayanLongCount", MayanLongCount(12, 17, 16, 7, 5)) == UNIX_EPOCH

@pytest.mark.parametrize("cid", ["mayanHaab", "mayanTzolkin"])
def test_cyclic_calendars_have_no_inverse(cid):
    x = calcal.from_canonical(cid, UNIX_EPOCH)
    with pytest.raises(TypeError):
        calcal.to_canonical(cid, x)
    assert calcal.calendar_info(cid)["invertible"] is False

def test_caveats():
    notes = calcal.caveats()
    labels = [n.split(":")[0] for n in notes]
    assert labels == ["ISO", "Julian", "Islamic", "French Revolutionary", "Old Hindu Solar", "Old Hindu Lunar"]
    assert calcal.caveats(["gregorian", "hebrew"]) == []

def test_today_is_a_canonical_day():
    assert isinstance(calcal.today(), int)
    assert calcal.today() > calcal.canonical_from_text("2024-01-01")


def test_specs_are_pure_data():
    spec = ALL_SPECS["mayanLongCount"]
    assert isinstance(spec, CalendarSpec)
    assert spec.params.correlation_jd == 584283

def test_tweak_builds_a_variant_converter():
    alt = ALL_SPECS["mayanLongCount"].tweak(correlation_jd=584285)
    conv = calcal.make_converter(alt)
    end = calcal.to_canonical_from_gregorian(2012, 12, 21)
    assert conv.from_canonical(end + 2) == MayanLongCount(13, 0, 0, 0, 0)
    # the registry is untouched
    assert calcal.from_canonical("mayanLongCount", end) == MayanLongCount(13, 0, 0, 0, 0)

def test_tweak_without_params():
    with pytest.raises(ValueError):
        ALL_SPECS["gregorian"].tweak(year=1)

def test_unknown_kind():
    with pytest.raises(TypeError):
        calcal.make_converter(CalendarSpec("aztec", "aztec"))

def test_calendar_info_carries_spec_meta():
    assert calcal.calendar_info("hebrew")["meta"] == {"epoch": "-3761-10-07 (Julian)"}
    assert calcal.calendar_info("islamic")["meta"] == {"epoch": "622-07-16 (Julian)"}
    assert calcal.calendar_info("french")["meta"]["rule"] == "autumnal equinox in Paris"
    assert calcal.calendar_info("gregorian")["meta"] == {}
    # tweak keeps the metadata of the spec it was made from
    conv = calcal.make_converter(ALL_SPECS["french"].tweak(longitude_deg_east=0.0))
    assert conv.info()["meta"] == {"rule": "autumnal equinox in Paris"}
