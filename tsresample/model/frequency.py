"""
API for the various resample frequencies.
"""

from enum import StrEnum


class Frequency(StrEnum):
    MONTH_END = "monthEnd"
    WEEK_END = "weekEnd"  # Weeks start on Sunday
    QUARTER_END = "quarterEnd"
    YEAR_END = "yearEnd"

    @classmethod
    def values(cls) -> list[str]:
        return list(map(lambda c: c.value, cls))
