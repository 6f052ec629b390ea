"""
Public resample API dataclasses
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from tsresample.model.frequency import Frequency
from tsresample.model.function import Function

# The query parameters each option is read from.
FREQUENCY_PARAM = "resampleFrequency"
FUNCTION_PARAM = "resampleFunction"

# A [date, value] pair exactly as it arrives in a request body.
RawPoint = tuple[Any, Any] | list[Any]


@dataclass(eq=True, frozen=True)
class Point:
    date: date
    value: float


@dataclass(eq=True, frozen=True)
class ResultPoint:
    period: str
    value: float

    def to_pair(self) -> list[str | float]:
        return [self.period, self.value]


@dataclass(eq=True, frozen=True)
class ResampleOptions:
    frequency: Frequency
    function: Function
