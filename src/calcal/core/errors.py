class CalcalError(Exception):
    """Base error."""

class InvalidDate(CalcalError, ValueError):
    """Raised for malformed date text or impossible calendar fields."""

class UnknownCalendar(CalcalError, KeyError):
    """Raised when a calendar identifier is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
