"""
calcal.engines.factory
----------------------
Transforms pure data specifications into live converter objects.
"""

from __future__ import annotations

from types import MappingProxyType

from calcal.core.engine import CalendarConverter
from calcal.core.types import CalendarSpec
from .french import FrenchCalendar
from .gregorian import GregorianCalendar
from .hebrew import HebrewCalendar
from .islamic import IslamicCalendar
from .iso import ISOCalendar
from .julian import JulianCalendar
from .mayan import MayanHaabCalendar, MayanLongCountCalendar, MayanTzolkinCalendar
from .old_hindu import OldHinduLunarCalendar, OldHinduSolarCalendar

_KINDS = {
    "gregorian": GregorianCalendar,
    "iso": ISOCalendar,
    "julian": JulianCalendar,
    "islamic": IslamicCalendar,
    "hebrew": HebrewCalendar,
    "mayan-long-count": MayanLongCountCalendar,
    "mayan-haab": MayanHaabCalendar,
    "mayan-tzolkin": MayanTzolkinCalendar,
    "french": FrenchCalendar,
    "old-hindu-solar": OldHinduSolarCalendar,
    "old-hindu-lunar": OldHinduLunarCalendar,
}


def make_converter(spec: CalendarSpec) -> CalendarConverter:
    """The universal entry point."""
    if spec.kind not in _KINDS:
        raise TypeError(f"Unknown calendar kind: {spec.kind!r}")
    cls = _KINDS[spec.kind]
    conv = cls() if spec.params is None else cls(spec.params)
    if spec.meta:
        conv.meta = MappingProxyType(dict(spec.meta))
    return conv
