"""
The resampling core.

A series is resampled in two passes. The first pass assigns every point to the
period it falls in, the second groups the values by period and reduces each
group to one value. This walks the data twice but keeps each step easy to follow.
"""

import logging
from typing import Iterable, Mapping, Sequence

from tsresample.aggregators import aggregator
from tsresample.model.data import Point, RawPoint, ResultPoint
from tsresample.model.frequency import Frequency
from tsresample.model.function import Function
from tsresample.normalize import normalize
from tsresample.options import validate
from tsresample.periods import period_key

logger = logging.getLogger(__name__)


def resample(
    points: Sequence[Point],
    frequency: Frequency,
    function: Function,
) -> list[ResultPoint]:
    """
    Resample validated points to a coarser frequency.

    Periods without any points are not emitted. Within a period the values are
    reduced in arrival order.

    Args:
        points: The points to resample.
        frequency: The output frequency.
        function: The reduction applied to each period.

    Returns: One point per period, in chronological order.
    """
    # Assign every point to its period.
    keyed = [(period_key(point.date, frequency), point.value) for point in points]

    # Group the values by period.
    groups: dict[str, list[float]] = {}
    for key, value in keyed:
        groups.setdefault(key, []).append(value)

    # Reduce each group. Period keys are YYYY-MM-DD so they sort chronologically.
    reduce = aggregator(function)
    resampled = [ResultPoint(key, reduce(groups[key])) for key in sorted(groups)]

    logger.debug(
        "Resampled %d points into %d %s periods using %s",
        len(points),
        len(resampled),
        frequency.value,
        function.value,
    )
    return resampled


def resample_series(
    raw_series: Iterable[RawPoint],
    raw_options: Mapping[str, str | None],
) -> list[ResultPoint]:
    """
    Validate the options, then validate the series, then resample it.

    The options are always checked before any of the series is read. The first
    failure raises a ResampleError and no partial result is returned.

    Args:
        raw_series: The [date, value] pairs to resample.
        raw_options: The resampleFrequency and resampleFunction options.

    Returns: The resampled series.
    """
    options = validate(raw_options)
    points = normalize(raw_series)
    return resample(points, options.frequency, options.function)
