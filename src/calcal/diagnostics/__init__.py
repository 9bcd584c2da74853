"""Diagnostics package.

- round_trip: always available, stdlib only
- leap_years: optional plotting (requires the diagnostics extras)
"""

__all__ = ["round_trip", "leap_years"]
