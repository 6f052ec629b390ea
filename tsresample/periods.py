"""
Calendar period resolution.

Every date is mapped to the last calendar day of the period it falls in. The
formatted end date is the period key: two points belong to the same output
period exactly when their keys are equal.
"""

import calendar
from datetime import date, timedelta

from tsresample.errors import InvalidDate
from tsresample.model.frequency import Frequency

# Weeks start on Sunday, so every week ends on a Saturday.
WEEK_START = calendar.SUNDAY
WEEK_END = (WEEK_START + 6) % 7


def resolve_period_end(day: date, frequency: Frequency) -> date:
    """
    Compute the last day of the period containing the provided day.

    Args:
        day: The calendar date to resolve.
        frequency: The period size.

    Returns: The canonical end-of-period date. Raises InvalidDate when that date
    is past date.max.
    """
    if frequency == Frequency.MONTH_END:
        return _last_day_of_month(day.year, day.month)
    elif frequency == Frequency.WEEK_END:
        try:
            return day + timedelta(days=(WEEK_END - day.weekday()) % 7)
        except OverflowError:
            # The last days of 9999 belong to a week ending after date.max.
            raise InvalidDate(day.isoformat())
    elif frequency == Frequency.QUARTER_END:
        last_month = ((day.month - 1) // 3 + 1) * 3
        return _last_day_of_month(day.year, last_month)
    elif frequency == Frequency.YEAR_END:
        return date(day.year, 12, 31)
    else:
        raise ValueError(f"Unhandled frequency: {frequency}")


def period_key(day: date, frequency: Frequency) -> str:
    """
    The grouping key of the period containing the provided day, as YYYY-MM-DD.

    Args:
        day: The calendar date to resolve.
        frequency: The period size.
    """
    # strftime doesn't zero pad years before 1000 on every platform.
    end = resolve_period_end(day, frequency)
    return f"{end.year:04d}-{end.month:02d}-{end.day:02d}"


def _last_day_of_month(year: int, month: int) -> date:
    _, num_days = calendar.monthrange(year, month)
    return date(year, month, num_days)
