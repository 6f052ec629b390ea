"""
Request-level failures raised while resampling a series.

Every failure aborts the whole request. The message of each error is meant to be
returned verbatim to the caller.
"""

from typing import Any

from tsresample.model.data import FREQUENCY_PARAM, FUNCTION_PARAM


class ResampleError(ValueError):
    """
    Base class for every failure the resampler reports to its caller.
    """


class InvalidParameter(ResampleError):
    """
    A resample option was missing or not one of the recognized values.
    """

    # Maps the option name to the query parameter it was read from.
    PARAMETERS = {
        "frequency": FREQUENCY_PARAM,
        "function": FUNCTION_PARAM,
    }

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid {self.PARAMETERS.get(name, name)} parameter")


class InvalidDate(ResampleError):
    def __init__(self, text: Any):
        self.text = text
        super().__init__(f"Invalid date: {text}")


class InvalidValue(ResampleError):
    def __init__(self, raw: Any):
        self.raw = raw
        super().__init__(f"Invalid value: {raw}")
