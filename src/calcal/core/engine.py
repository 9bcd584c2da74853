from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Protocol, runtime_checkable

from .errors import UnknownCalendar
from .types import CanonicalDay


class CalendarConverter(Protocol):
    id: str
    label: str
    caveat: str

    def from_canonical(self, day: CanonicalDay) -> Any: ...
    def format(self, day: CanonicalDay) -> str: ...


@runtime_checkable
class InvertibleConverter(CalendarConverter, Protocol):
    def to_canonical(self, d: Any) -> CanonicalDay: ...


class CalendarBase:
    """Shared formatting and introspection for the concrete converters."""
    id: str = ""
    label: str = ""
    caveat: str = ""
    meta: Mapping[str, Any] = {}

    def from_canonical(self, day: CanonicalDay) -> Any:
        raise NotImplementedError

    def format(self, day: CanonicalDay) -> str:
        return str(self.from_canonical(day))

    @property
    def invertible(self) -> bool:
        return isinstance(self, InvertibleConverter)

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "invertible": self.invertible,
            "caveat": self.caveat,
            "meta": dict(self.meta),
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id!r}>"


@dataclass(frozen=True)
class CalendarRegistry:
    """Fixed mapping from calendar identifier to converter, in display order."""
    _converters: Mapping[str, CalendarConverter]

    def get(self, name: str) -> CalendarConverter:
        if name not in self._converters:
            raise UnknownCalendar(f"Unknown calendar '{name}'. Available: {list(self._converters)}")
        return self._converters[name]

    def list(self) -> List[str]:
        return list(self._converters.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._converters
