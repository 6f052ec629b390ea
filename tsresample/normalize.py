"""
Conversion of raw request data into validated points.
"""

from datetime import date, datetime
import math
from typing import Any, Iterable

from tsresample.errors import InvalidDate, InvalidValue
from tsresample.model.data import Point, RawPoint


def normalize(raw: Iterable[RawPoint]) -> list[Point]:
    """
    Parse and validate every [date, value] pair of a raw series, in order.

    The first bad entry aborts the whole series.

    Args:
        raw: The raw [date, value] pairs.

    Returns: One point per input pair.
    """
    points = []
    for date_raw, value_raw in raw:
        points.append(Point(parse_date(date_raw), parse_value(value_raw)))
    return points


def parse_date(text: Any) -> date:
    """
    Parse an ISO-8601 date or date-time string into a calendar date.

    The date written in the text is used as-is. UTC offsets are accepted but not
    applied.

    Args:
        text: The date text.
    """
    if not isinstance(text, str):
        raise InvalidDate(text)
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise InvalidDate(text)


def parse_value(raw: Any) -> float:
    """
    Coerce a raw value to a finite float.

    Args:
        raw: An int, a float or a numeric string.
    """
    # bool is an int subclass but never a meaningful observation.
    if raw is None or isinstance(raw, bool):
        raise InvalidValue(raw)
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        raise InvalidValue(raw)

    if not math.isfinite(value):
        raise InvalidValue(raw)
    return value
