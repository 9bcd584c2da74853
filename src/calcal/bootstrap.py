from __future__ import annotations
from types import MappingProxyType

from calcal.core.engine import CalendarRegistry
from calcal.engines.specs import ALL_SPECS
from calcal.engines.factory import make_converter

def build_registry() -> CalendarRegistry:
    converters = {}
    for name, spec in ALL_SPECS.items():
        converters[name] = make_converter(spec)
    return CalendarRegistry(MappingProxyType(converters))
