"""
API for the reduction functions applied to each resampled period.
"""

from enum import StrEnum


class Function(StrEnum):
    MIN = "min"
    MAX = "max"
    SUM = "sum"

    @classmethod
    def values(cls) -> list[str]:
        return list(map(lambda c: c.value, cls))
