"""
Configuration and error handling utilities for wavegen.

Holds the global error mode and the default numeric types used when a
Waveform is built without an explicit calculation precision or output
sample type.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and wavegen contributors

MIT License
"""

from enum import Enum
from typing import Any, Optional, Type

import numpy as np

from wavegen.logger import get_logger

logger = get_logger(__name__)


class ErrorMode(Enum):
    """
    Error handling mode for wavegen operations.

    STRICT: All errors raise exceptions (default, fail-fast)
    LENIENT: Non-fatal errors become warnings, execution continues
    """
    STRICT = "strict"
    LENIENT = "lenient"


# Module-level default error mode
DEFAULT_ERROR_MODE: ErrorMode = ErrorMode.STRICT

# Module-level default numeric types
DEFAULT_PRECISION: Type[np.floating] = np.float32
DEFAULT_SAMPLE_TYPE: Type[np.number] = np.float32


def set_error_mode(mode: ErrorMode) -> None:
    """
    Set the default error mode for all wavegen operations.

    Args:
        mode: The error mode to use
    """
    global DEFAULT_ERROR_MODE
    DEFAULT_ERROR_MODE = mode


def get_error_mode() -> ErrorMode:
    """
    Get the current default error mode.

    Returns:
        The current error mode
    """
    return DEFAULT_ERROR_MODE


def handle_error(
    message: str,
    fatal: bool = False,
    error_mode: Optional[ErrorMode] = None,
    exception_class: Type[Exception] = RuntimeError,
) -> bool:
    """
    Handle an error based on the error mode.

    In STRICT mode (or if fatal=True), raises an exception.
    In LENIENT mode (and fatal=False), logs a warning and returns True.

    Args:
        message: Error description
        fatal: If True, always raise regardless of mode
        error_mode: Override the default error mode (optional)
        exception_class: Exception type to raise (default: RuntimeError)

    Returns:
        True if operation should continue (warning was issued)

    Raises:
        exception_class: If in STRICT mode or fatal=True

    Example:
        # Construction parameters are always checked fatally
        if not is_normal(rate, precision):
            handle_error("Invalid SamplingRate value", fatal=True,
                         exception_class=InvalidSampleRateError)

        # In lenient mode, logs warning and carries on
        if not isinstance(component, PeriodicFunction):
            if handle_error("Not a PeriodicFunction", exception_class=TypeError):
                component = custom(component)
    """
    mode = error_mode if error_mode is not None else DEFAULT_ERROR_MODE

    if fatal or mode == ErrorMode.STRICT:
        raise exception_class(message)
    else:
        logger.warning(message)
        return True


def resolve_precision(dtype: Any) -> Type[np.floating]:
    """
    Normalize a dtype-like value into a numpy floating scalar type.

    Args:
        dtype: Anything np.dtype() accepts (np.float32, "float64", ...)

    Returns:
        The numpy scalar type, e.g. np.float32

    Raises:
        TypeError: If the value is not a floating point dtype
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError:
        resolved = None
    if resolved is None or resolved.kind != "f":
        handle_error(
            f"Calculation precision must be a floating point dtype, got {dtype!r}",
            fatal=True,
            exception_class=TypeError,
        )
    return resolved.type


def resolve_sample_type(dtype: Any) -> Type[np.number]:
    """
    Normalize a dtype-like value into a numpy numeric scalar type.

    Signed integers, unsigned integers and floats are accepted.
    Booleans, complex numbers and objects are not.

    Args:
        dtype: Anything np.dtype() accepts (np.int16, "uint8", ...)

    Returns:
        The numpy scalar type, e.g. np.int16

    Raises:
        TypeError: If the value is not an integer or floating point dtype
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError:
        resolved = None
    if resolved is None or resolved.kind not in "iuf":
        handle_error(
            f"Output sample type must be an integer or floating point dtype, got {dtype!r}",
            fatal=True,
            exception_class=TypeError,
        )
    return resolved.type


def set_default_precision(dtype: Any) -> None:
    """
    Set the calculation precision used by Waveforms built without one.

    Args:
        dtype: A floating point dtype
    """
    global DEFAULT_PRECISION
    DEFAULT_PRECISION = resolve_precision(dtype)


def get_default_precision() -> Type[np.floating]:
    """Return the default calculation precision."""
    return DEFAULT_PRECISION


def set_default_sample_type(dtype: Any) -> None:
    """
    Set the output sample type used by Waveforms built without one.

    Args:
        dtype: An integer or floating point dtype
    """
    global DEFAULT_SAMPLE_TYPE
    DEFAULT_SAMPLE_TYPE = resolve_sample_type(dtype)


def get_default_sample_type() -> Type[np.number]:
    """Return the default output sample type."""
    return DEFAULT_SAMPLE_TYPE
