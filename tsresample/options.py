"""
Validation of the resample options supplied with a request.
"""

from typing import Mapping

from tsresample.errors import InvalidParameter
from tsresample.model.data import FREQUENCY_PARAM, FUNCTION_PARAM, ResampleOptions
from tsresample.model.frequency import Frequency
from tsresample.model.function import Function


def validate(params: Mapping[str, str | None]) -> ResampleOptions:
    """
    Check that both options name known policies. The frequency is checked first.

    Args:
        params: The raw options, keyed by query parameter name.

    Returns: The validated options.
    """
    frequency = params.get(FREQUENCY_PARAM)
    if frequency not in Frequency.values():
        raise InvalidParameter("frequency")

    function = params.get(FUNCTION_PARAM)
    if function not in Function.values():
        raise InvalidParameter("function")

    return ResampleOptions(Frequency(frequency), Function(function))
