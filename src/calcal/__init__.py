"""calcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_calendar,
    make_converter,
    parse_date,
    to_canonical_from_gregorian,
    canonical_from_text,
    today,
    from_canonical,
    format_from_canonical,
    to_canonical,
    convert,
    caveats,
)
from .core.errors import CalcalError, InvalidDate, UnknownCalendar
from .core.types import (
    CanonicalDay,
    GregorianDate,
    JulianDate,
    ISODate,
    IslamicDate,
    HebrewDate,
    MayanLongCount,
    MayanHaab,
    MayanTzolkin,
    FrenchDate,
    OldHinduSolarDate,
    OldHinduLunarDate,
)

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_converter",
    "parse_date",
    "to_canonical_from_gregorian",
    "canonical_from_text",
    "today",
    "from_canonical",
    "format_from_canonical",
    "to_canonical",
    "convert",
    "caveats",
    "CalcalError",
    "InvalidDate",
    "UnknownCalendar",
    "CanonicalDay",
    "GregorianDate",
    "JulianDate",
    "ISODate",
    "IslamicDate",
    "HebrewDate",
    "MayanLongCount",
    "MayanHaab",
    "MayanTzolkin",
    "FrenchDate",
    "OldHinduSolarDate",
    "OldHinduLunarDate",
]
