from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict

# Whole days since the epoch; R.D. 1 is 1 January 1 (proleptic Gregorian).
CanonicalDay = int


def _signed_year(year: int) -> str:
    return f"-{-year:04d}" if year < 0 else f"{year:04d}"


@dataclass(frozen=True)
class GregorianDate:
    year: int   # no year 0: -1 is 1 BCE
    month: int
    day: int

    def __str__(self) -> str:
        return f"{_signed_year(self.year)}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class JulianDate:
    year: int   # no year 0: -1 is 1 BCE
    month: int
    day: int

    def __str__(self) -> str:
        return f"{_signed_year(self.year)}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class ISODate:
    year: int   # astronomical numbering, as in ISO 8601
    week: int
    weekday: int  # 1 = Monday .. 7 = Sunday

    def __str__(self) -> str:
        return f"{_signed_year(self.year)}-W{self.week:02d}-{self.weekday}"


ISLAMIC_MONTHS = (
    "Muharram", "Safar", "Rabi I", "Rabi II", "Jumada I", "Jumada II",
    "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qa'da", "Dhu al-Hijja",
)

@dataclass(frozen=True)
class IslamicDate:
    year: int
    month: int
    day: int

    @property
    def month_name(self) -> str:
        return ISLAMIC_MONTHS[self.month - 1]

    def __str__(self) -> str:
        return f"{_signed_year(self.year)}-{self.month:02d}-{self.day:02d}"


HEBREW_MONTHS = (
    "Nisan", "Iyyar", "Sivan", "Tammuz", "Av", "Elul",
    "Tishri", "Marheshvan", "Kislev", "Tevet", "Shevat", "Adar", "Adar II",
)

@dataclass(frozen=True)
class HebrewDate:
    year: int
    month: int  # 1 = Nisan .. 7 = Tishri .. 12 = Adar (Adar I), 13 = Adar II
    day: int

    @property
    def month_name(self) -> str:
        return HEBREW_MONTHS[self.month - 1]

    def __str__(self) -> str:
        return f"{_signed_year(self.year)}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class MayanLongCount:
    baktun: int
    katun: int
    tun: int
    uinal: int
    kin: int

    def __str__(self) -> str:
        return f"{self.baktun}.{self.katun}.{self.tun}.{self.uinal}.{self.kin}"


HAAB_MONTHS = (
    "Pop", "Uo", "Zip", "Zotz", "Tzec", "Xul", "Yaxkin", "Mol", "Chen", "Yax",
    "Zac", "Ceh", "Mac", "Kankin", "Muan", "Pax", "Kayab", "Cumku", "Uayeb",
)

TZOLKIN_NAMES = (
    "Imix", "Ik", "Akbal", "Kan", "Chicchan", "Cimi", "Manik", "Lamat", "Muluc", "Oc",
    "Chuen", "Eb", "Ben", "Ix", "Men", "Cib", "Caban", "Etznab", "Cauac", "Ahau",
)

@dataclass(frozen=True)
class MayanHaab:
    day: int    # 0..19 (0..4 in Uayeb)
    month: int  # 1..19

    @property
    def month_name(self) -> str:
        return HAAB_MONTHS[self.month - 1]

    def __str__(self) -> str:
        return f"{self.day} {self.month_name}"

@dataclass(frozen=True)
class MayanTzolkin:
    number: int  # 1..13
    name: int    # 1..20

    @property
    def name_label(self) -> str:
        return TZOLKIN_NAMES[self.name - 1]

    def __str__(self) -> str:
        return f"{self.number} {self.name_label}"


FRENCH_MONTHS = (
    "Vendemiaire", "Brumaire", "Frimaire", "Nivose", "Pluviose", "Ventose",
    "Germinal", "Floreal", "Prairial", "Messidor", "Thermidor", "Fructidor",
    "Sansculottides",
)

@dataclass(frozen=True)
class FrenchDate:
    year: int
    month: int  # 13 = Sansculottides
    day: int

    @property
    def month_name(self) -> str:
        return FRENCH_MONTHS[self.month - 1]

    @property
    def decade(self) -> int:
        """Ten-day week (1..3) within the month; the Sansculottides form decade 1."""
        return (self.day - 1) // 10 + 1

    @property
    def day_of_decade(self) -> int:
        return (self.day - 1) % 10 + 1

    def __str__(self) -> str:
        return f"{_signed_year(self.year)}-{self.month:02d}-{self.day:02d}"


HINDU_SOLAR_MONTHS = (
    "Mesha", "Vrishabha", "Mithuna", "Karka", "Simha", "Kanya",
    "Tula", "Vrischika", "Dhanus", "Makara", "Kumbha", "Mina",
)

HINDU_LUNAR_MONTHS = (
    "Chaitra", "Vaisakha", "Jyaishtha", "Ashadha", "Sravana", "Bhadrapada",
    "Asvina", "Kartika", "Margasirsha", "Pausha", "Magha", "Phalguna",
)

@dataclass(frozen=True)
class OldHinduSolarDate:
    year: int   # elapsed years of the Kali Yuga
    month: int
    day: int

    @property
    def month_name(self) -> str:
        return HINDU_SOLAR_MONTHS[self.month - 1]

    def __str__(self) -> str:
        return f"{_signed_year(self.year)}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class OldHinduLunarDate:
    year: int
    month: int
    leap: bool
    day: int

    @property
    def month_name(self) -> str:
        name = HINDU_LUNAR_MONTHS[self.month - 1]
        return f"Adhika {name}" if self.leap else name

    def __str__(self) -> str:
        mark = "L" if self.leap else ""
        return f"{_signed_year(self.year)}-{self.month:02d}{mark}-{self.day:02d}"


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar converter."""
    kind: str
    id: str
    params: Any = None  # MayanParams | FrenchParams | OldHinduParams | None
    meta: Dict[str, Any] = field(default_factory=dict)

    def tweak(self, **kwargs) -> "CalendarSpec":
        if self.params is None:
            raise ValueError(f"Calendar '{self.id}' has no tunable parameters.")
        return replace(self, params=replace(self.params, **kwargs))
