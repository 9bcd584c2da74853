from __future__ import annotations

from typing import Dict

from ..core.types import CalendarSpec
from .french import FrenchParams
from .mayan import MayanParams
from .old_hindu import ARYA


# ============================================================
# SHARED CONSTANTS
# ============================================================

# Goodman-Martinez-Thompson correlation: 0.0.0.0.0 = JD 584283 = 11 August 3114 BCE
GMT = MayanParams(correlation_jd=584283)

PARIS = FrenchParams()


# ============================================================
# CALENDAR SPECS (display order)
# ============================================================

ALL_SPECS: Dict[str, CalendarSpec] = {
    "gregorian": CalendarSpec("gregorian", "gregorian"),
    "iso": CalendarSpec("iso", "iso"),
    "julian": CalendarSpec("julian", "julian"),
    "islamic": CalendarSpec("islamic", "islamic", meta={"epoch": "622-07-16 (Julian)"}),
    "hebrew": CalendarSpec("hebrew", "hebrew", meta={"epoch": "-3761-10-07 (Julian)"}),
    "mayanLongCount": CalendarSpec("mayan-long-count", "mayanLongCount", params=GMT),
    "mayanHaab": CalendarSpec("mayan-haab", "mayanHaab", params=GMT),
    "mayanTzolkin": CalendarSpec("mayan-tzolkin", "mayanTzolkin", params=GMT),
    "french": CalendarSpec("french", "french", params=PARIS, meta={"rule": "autumnal equinox in Paris"}),
    "oldHinduSolar": CalendarSpec("old-hindu-solar", "oldHinduSolar", params=ARYA),
    "oldHinduLunar": CalendarSpec("old-hindu-lunar", "oldHinduLunar", params=ARYA),
}

CALENDAR_IDS = tuple(ALL_SPECS)
