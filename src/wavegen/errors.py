"""
Exception classes raised by wavegen.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and wavegen contributors

MIT License
"""


class WavegenError(Exception):
    """Base class for all wavegen errors."""


class InvalidParameterError(WavegenError, ValueError):
    """A periodic function was built with a bad frequency, amplitude or phase."""


class InvalidSampleRateError(WavegenError, ValueError):
    """A sampling rate was not a positive, normal number."""
