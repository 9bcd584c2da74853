from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .core.engine import CalendarConverter, CalendarRegistry, InvertibleConverter
from .core.types import CalendarSpec, CanonicalDay, GregorianDate
from .core import time as _time
from .engines import gregorian as _gregorian
from .engines.factory import make_converter as _make_converter

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar_id: str) -> Dict[str, Any]:
    return _reg().get(calendar_id).info()

def get_calendar(calendar_id: str) -> CalendarConverter:
    return _reg().get(calendar_id)

def make_converter(spec: CalendarSpec) -> CalendarConverter:
    return _make_converter(spec)

# ============================================================
# Gregorian entry points
# ============================================================

def parse_date(text: str) -> GregorianDate:
    """Parse `[-]YYYY-MM-DD`; a leading '-' marks a year before the common era."""
    return _gregorian.parse_date(text)

def to_canonical_from_gregorian(year: int, month: int, day: int) -> CanonicalDay:
    return _gregorian.fixed_from_gregorian(year, month, day)

def canonical_from_text(text: str) -> CanonicalDay:
    d = parse_date(text)
    return to_canonical_from_gregorian(d.year, d.month, d.day)

def today() -> CanonicalDay:
    return _time.today()

# ============================================================
# Dispatch by calendar identifier
# ============================================================

def from_canonical(calendar_id: str, day: CanonicalDay) -> Any:
    return _reg().get(calendar_id).from_canonical(day)

def format_from_canonical(calendar_id: str, day: CanonicalDay) -> str:
    return _reg().get(calendar_id).format(day)

def to_canonical(calendar_id: str, date: Any) -> CanonicalDay:
    """
    Inverse conversion. The Haab and Tzolkin cycles repeat, so they have no
    inverse; use their on_or_before searches instead.
    """
    conv = _reg().get(calendar_id)
    if not isinstance(conv, InvertibleConverter):
        raise TypeError(f"Calendar '{calendar_id}' has no unambiguous inverse")
    return conv.to_canonical(date)

def convert(day: CanonicalDay, calendars: Optional[Sequence[str]] = None) -> Dict[str, str]:
    """Format `day` in each requested calendar (all of them by default), in request order."""
    ids = list_calendars() if calendars is None else list(calendars)
    return {cid: format_from_canonical(cid, day) for cid in ids}

def caveats(calendars: Optional[Sequence[str]] = None) -> List[str]:
    """Accuracy notes for the requested calendars, skipping those without one."""
    ids = list_calendars() if calendars is None else list(calendars)
    out = []
    for cid in ids:
        note = _reg().get(cid).caveat
        if note:
            out.append(f"{_reg().get(cid).label}: {note}")
    return out
