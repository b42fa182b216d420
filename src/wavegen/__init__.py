"""
wavegen - composite periodic waveform sampling.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and wavegen contributors

MIT License
"""

from wavegen.config import (
    ErrorMode,
    set_error_mode,
    get_error_mode,
    handle_error,
    set_default_precision,
    get_default_precision,
    set_default_sample_type,
    get_default_sample_type,
)
from wavegen.errors import WavegenError, InvalidParameterError, InvalidSampleRateError
from wavegen.sampling_rate import SamplingRate, is_normal, is_real
from wavegen.periodic_function import (
    FunctionKind,
    PeriodicFunction,
    sine,
    square,
    sawtooth,
    bias,
    dc_bias,
    custom,
)
from wavegen.conversion import to_sample, sample_bounds
from wavegen.waveform import Waveform
from wavegen.waveform_iterator import WaveformIterator
from wavegen.logger import set_global_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ErrorMode",
    "set_error_mode",
    "get_error_mode",
    "handle_error",
    "set_default_precision",
    "get_default_precision",
    "set_default_sample_type",
    "get_default_sample_type",
    # Errors
    "WavegenError",
    "InvalidParameterError",
    "InvalidSampleRateError",
    # Periodic functions
    "FunctionKind",
    "PeriodicFunction",
    "sine",
    "square",
    "sawtooth",
    "bias",
    "dc_bias",
    "custom",
    # Sampling
    "SamplingRate",
    "is_normal",
    "is_real",
    "Waveform",
    "WaveformIterator",
    "to_sample",
    "sample_bounds",
    # Logging
    "set_global_logging",
    "get_logger",
]
