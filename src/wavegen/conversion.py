"""
Saturating conversion from calculation precision into an output sample type.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and wavegen contributors

MIT License
"""

from typing import Any, Optional, Tuple, Type

import numpy as np

from wavegen.logger import get_logger

logger = get_logger(__name__)


def sample_bounds(sample_type: Type[np.number]) -> Tuple[Any, Any]:
    """
    Return the (min, max) representable values of a numeric sample type.

    Floats report their largest finite values, not the infinities.
    """
    if np.issubdtype(sample_type, np.integer):
        info = np.iinfo(sample_type)
    else:
        info = np.finfo(sample_type)
    return sample_type(info.min), sample_type(info.max)


def _lossless(value: float, sample_type: Type[np.number]) -> Optional[np.number]:
    """
    Convert when the target can hold the value, return None otherwise.

    Integers take any value strictly between min - 1 and max + 1 and truncate
    toward zero. Floats take NaN, the infinities and any finite value that
    stays finite after rounding.
    """
    if np.issubdtype(sample_type, np.integer):
        if np.isnan(value):
            return None
        info = np.iinfo(sample_type)
        if info.min - 1 < value < info.max + 1:
            return sample_type(int(value))
        return None
    with np.errstate(over="ignore"):
        converted = sample_type(value)
    if np.isfinite(converted) or not np.isfinite(value):
        return converted
    return None


def to_sample(value: Any, sample_type: Type[np.number]) -> Optional[np.number]:
    """
    Narrow a calculation-precision value into sample_type, saturating on overflow.

    - In range: converted directly (integers truncate toward zero).
    - Positive and out of range: the type's maximum.
    - Negative and out of range: the type's minimum.
    - NaN into an integer type, or a zero that will not convert: None.

    NaN into a floating type is representable and survives as NaN.

    Args:
        value: Scalar in calculation precision
        sample_type: numpy integer or floating scalar type

    Returns:
        A scalar of sample_type, or None if the value has no representation

    Example:
        to_sample(np.float32(300.0), np.uint8)    # 255
        to_sample(np.float32(-300.0), np.uint8)   # 0
        to_sample(np.float32("nan"), np.int16)    # None
    """
    value = float(value) if not isinstance(value, np.longdouble) else value
    converted = _lossless(value, sample_type)
    if converted is not None:
        return converted
    if value > 0:
        return sample_bounds(sample_type)[1]
    if value < 0:
        return sample_bounds(sample_type)[0]
    logger.debug(f"{value} has no representation as {sample_type.__name__}")
    return None
