"""
SamplingRate - a validated, positive and normal sampling rate.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and wavegen contributors

MIT License
"""

import numbers
from typing import Any, Optional, Type

import numpy as np

from wavegen.config import get_default_precision, handle_error, resolve_precision
from wavegen.errors import InvalidSampleRateError


def _cast(value: Any, precision: Type[np.floating]) -> Optional[np.floating]:
    """Cast to precision, or return None when numpy refuses the value."""
    try:
        with np.errstate(over="ignore", under="ignore"):
            return precision(value)
    except (TypeError, ValueError, OverflowError):
        return None


def is_real(value: Any) -> bool:
    """True for Python and numpy ints and floats. Bools and strings are not numbers here."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Real, np.integer, np.floating))


def is_normal(value: Any, precision: Type[np.floating] = np.float64) -> bool:
    """
    True if value is finite, non-zero and not subnormal in the given precision.

    The check runs on the value after it has been cast, so a rate that is fine
    as a Python float but overflows float16 is not normal in float16.
    """
    if not is_real(value):
        return False
    cast = _cast(value, precision)
    if cast is None or not np.isfinite(cast):
        return False
    return bool(np.abs(cast) >= np.finfo(precision).tiny)


class SamplingRate:
    """
    Sampling rate in Hz: a positive, non-zero, finite and non-subnormal value.

    The value is checked once, here. Everything downstream may take its
    reciprocal without further checks.

    Args:
        value: Rate in Hz. Python ints and floats and numpy scalars are accepted.
        precision: Floating dtype the rate is held in (default: config default)

    Raises:
        InvalidSampleRateError: If the rate is not a real number, or is NaN,
            zero, negative, subnormal or infinite after casting to precision

    Example:
        rate = SamplingRate(44100)
        rate.period   # 1/44100 as np.float32
    """

    __slots__ = ("_value", "_precision", "_period")

    def __init__(self, value: Any, precision: Any = None):
        precision = resolve_precision(
            precision if precision is not None else get_default_precision()
        )
        if not (is_normal(value, precision) and _cast(value, precision) > 0):
            handle_error(
                f"Invalid SamplingRate value: `{value}`. "
                "SamplingRate has to be positive, non-zero and finite.",
                fatal=True,
                exception_class=InvalidSampleRateError,
            )
        self._precision = precision
        self._value = precision(value)
        self._period = precision(1) / self._value

    @property
    def value(self) -> np.floating:
        """The rate in Hz, in calculation precision."""
        return self._value

    @property
    def precision(self) -> Type[np.floating]:
        return self._precision

    @property
    def period(self) -> np.floating:
        """Duration of one sample in seconds (1 / rate)."""
        return self._period

    def __float__(self) -> float:
        return float(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SamplingRate):
            return float(self) == float(other)
        if isinstance(other, (int, float, np.number)):
            return float(self) == float(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(float(self))

    def __repr__(self) -> str:
        return f"SamplingRate({float(self._value)}, precision={self._precision.__name__})"
