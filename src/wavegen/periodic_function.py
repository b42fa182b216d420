"""
PeriodicFunction - one additive term of a Waveform.

A PeriodicFunction is a pure map from elapsed time (seconds) to an amplitude.
Four canonical shapes are built in (sine, square, sawtooth and DC bias), and
custom() wraps any caller-supplied callable.

Evaluation happens in the precision of the time value passed in, so the same
function can be sampled at np.float32 by one Waveform and at np.float64 by
another. Scalars and ndarrays are both accepted.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and wavegen contributors

MIT License
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Type

import numpy as np

from wavegen.config import handle_error
from wavegen.errors import InvalidParameterError
from wavegen.sampling_rate import is_normal, is_real


class FunctionKind(Enum):
    """The shape of a PeriodicFunction."""
    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    BIAS = "bias"
    CUSTOM = "custom"


_CANONICAL = (FunctionKind.SINE, FunctionKind.SQUARE, FunctionKind.SAWTOOTH)


def _fail(message: str) -> None:
    handle_error(message, fatal=True, exception_class=InvalidParameterError)


def _real(name: str, value: Any) -> float:
    if not is_real(value):
        _fail(f"{name} must be a real number, got {value!r}")
    return float(value)


def _check_periodic_params(
    frequency: float,
    amplitude: float,
    phase: float,
    precision: Type[np.floating] = np.float64,
) -> None:
    """
    Reject parameters that could only ever produce garbage samples.

    Each value is checked as it will be seen in precision, so a frequency
    that is fine as a Python float but overflows float32 is rejected for a
    float32 Waveform.
    """
    name = np.dtype(precision).name
    with np.errstate(over="ignore", under="ignore"):
        cast_amplitude = precision(amplitude)
        cast_phase = precision(phase)
    if not (is_normal(frequency, precision) and frequency > 0):
        _fail(
            f"frequency must be a positive, finite, non-zero {name} number, got {frequency}"
        )
    if np.isnan(amplitude) or amplitude < 0:
        _fail(f"amplitude must be a non-negative number, got {amplitude}")
    if np.isfinite(amplitude) and not np.isfinite(cast_amplitude):
        _fail(f"amplitude {amplitude} overflows {name}")
    if not np.isfinite(cast_phase):
        _fail(f"phase must be a finite {name} number, got {phase}")


def _as_time(t: Any) -> np.ndarray:
    arr = np.asarray(t)
    if arr.dtype.kind != "f":
        arr = arr.astype(np.float64)
    return arr


class PeriodicFunction:
    """
    A pure, immutable function of time, tagged with its kind.

    Instances are usually built with the factories in this module (sine,
    square, sawtooth, bias, custom). Building one directly runs the same
    checks. Once built they never change, so one instance may be shared by
    several Waveforms and sampled from several threads at once.

    Args:
        kind: The FunctionKind
        frequency: Frequency in Hz (canonical kinds only)
        amplitude: Peak amplitude (canonical kinds only)
        phase: Phase offset (canonical kinds only)
        value: Constant output (BIAS only)
        function: Callable of time (CUSTOM only)

    Raises:
        InvalidParameterError: On a bad frequency, amplitude, phase or value
        TypeError: If kind is not a FunctionKind, or a CUSTOM function is not
            callable

    Example:
        tone = sine(440.0, amplitude=0.5)
        tone.sample(np.float32(0.25 / 440.0))   # ~0.5
        tone(np.linspace(0.0, 1.0, 100))        # vectorized
    """

    __slots__ = ("_kind", "_frequency", "_amplitude", "_phase", "_value", "_function")

    def __init__(
        self,
        kind: FunctionKind,
        frequency: float | None = None,
        amplitude: float = 1.0,
        phase: float = 0.0,
        value: float = 0.0,
        function: Callable[[Any], Any] | None = None,
    ):
        if not isinstance(kind, FunctionKind):
            handle_error(
                f"kind must be a FunctionKind, got {kind!r}",
                fatal=True,
                exception_class=TypeError,
            )
        if kind is FunctionKind.CUSTOM and not callable(function):
            handle_error(
                f"custom() needs a callable, got {function!r}",
                fatal=True,
                exception_class=TypeError,
            )
        if kind in _CANONICAL:
            frequency = _real("frequency", frequency)
            amplitude = _real("amplitude", amplitude)
            phase = _real("phase", phase)
            _check_periodic_params(frequency, amplitude, phase)
        else:
            frequency, amplitude, phase = 0.0, 0.0, 0.0
        self._kind = kind
        self._frequency = frequency
        self._amplitude = amplitude
        self._phase = phase
        self._value = _real("value", value) if kind is FunctionKind.BIAS else 0.0
        self._function = function if kind is FunctionKind.CUSTOM else None

    @property
    def kind(self) -> FunctionKind:
        return self._kind

    @property
    def frequency(self) -> float:
        """Frequency in Hz."""
        return self._frequency

    @property
    def amplitude(self) -> float:
        """Peak amplitude (0-peak notation)."""
        return self._amplitude

    @property
    def phase(self) -> float:
        """Phase offset: cycles for sine and sawtooth, seconds for square."""
        return self._phase

    @property
    def value(self) -> float:
        """Constant output of a BIAS function."""
        return self._value

    @property
    def function(self) -> Callable[[Any], Any] | None:
        """Wrapped callable of a CUSTOM function."""
        return self._function

    def check_precision(self, precision: Type[np.floating]) -> None:
        """
        Check that the parameters survive the cast into a calculation precision.

        Bias and custom functions are not checked.

        Raises:
            InvalidParameterError: If a parameter overflows, or a frequency
                becomes subnormal, in precision
        """
        if self._kind in _CANONICAL:
            _check_periodic_params(
                self._frequency, self._amplitude, self._phase, precision
            )

    def sample(self, t: Any) -> Any:
        """
        Evaluate the function at time t (seconds).

        Args:
            t: Time as a numpy scalar, Python number or ndarray. Floating
               inputs set the calculation precision; anything else is
               evaluated as float64.

        Returns:
            Amplitude in the precision of t, with the shape of t
        """
        t = _as_time(t)
        p = t.dtype.type
        with np.errstate(over="ignore", invalid="ignore"):
            if self._kind is FunctionKind.SINE:
                two_pi = p(2.0 * np.pi)
                y = p(self._amplitude) * np.sin(
                    two_pi * p(self._frequency) * t + two_pi * p(self._phase)
                )
            elif self._kind is FunctionKind.SQUARE:
                power = np.floor(p(2) * (t - p(self._phase)) * p(self._frequency))
                amplitude = p(self._amplitude)
                y = np.where(np.mod(power, p(2)) == 0, amplitude, -amplitude)
            elif self._kind is FunctionKind.SAWTOOTH:
                x = t * p(self._frequency) + p(self._phase)
                amplitude = p(self._amplitude)
                y = p(2) * amplitude * (x - np.floor(x)) - amplitude
            elif self._kind is FunctionKind.BIAS:
                y = np.full(t.shape, self._value, dtype=t.dtype)
            else:
                y = np.asarray(self._function(t[()])).astype(t.dtype)
        return np.asarray(y, dtype=t.dtype)[()]

    __call__ = sample

    def __repr__(self) -> str:
        if self._kind is FunctionKind.BIAS:
            return f"PeriodicFunction(bias, value={self._value})"
        if self._kind is FunctionKind.CUSTOM:
            return f"PeriodicFunction(custom, function={self._function!r})"
        return (
            f"PeriodicFunction({self._kind.value}, frequency={self._frequency}, "
            f"amplitude={self._amplitude}, phase={self._phase})"
        )


def sine(frequency: float, amplitude: float = 1.0, phase: float = 0.0) -> PeriodicFunction:
    """
    Sine wave: amplitude * sin(2*pi*frequency*t + 2*pi*phase).

    Args:
        frequency: Frequency in Hz (> 0, finite)
        amplitude: Peak amplitude (>= 0, default: 1.0)
        phase: Phase shift in cycles; 1.0 is a full revolution (default: 0.0)

    Raises:
        InvalidParameterError: On a bad frequency, amplitude or phase
    """
    return PeriodicFunction(FunctionKind.SINE, frequency, amplitude, phase)


def square(frequency: float, amplitude: float = 1.0, phase: float = 0.0) -> PeriodicFunction:
    """
    Square wave toggling between +amplitude and -amplitude twice per period.

    The value is amplitude * (-1)**floor(2*(t - phase)*frequency): +amplitude
    for the first half of each period, -amplitude for the second half.

    Args:
        frequency: Frequency in Hz (> 0, finite)
        amplitude: Peak amplitude (>= 0, default: 1.0)
        phase: Time shift in seconds, in the same units as t (default: 0.0)

    Raises:
        InvalidParameterError: On a bad frequency, amplitude or phase
    """
    return PeriodicFunction(FunctionKind.SQUARE, frequency, amplitude, phase)


def sawtooth(frequency: float, amplitude: float = 1.0, phase: float = 0.0) -> PeriodicFunction:
    """
    Rising ramp from -amplitude up to (just below) +amplitude once per period.

    Args:
        frequency: Frequency in Hz (> 0, finite)
        amplitude: Peak amplitude (>= 0, default: 1.0)
        phase: Phase shift in cycles (default: 0.0)

    Raises:
        InvalidParameterError: On a bad frequency, amplitude or phase
    """
    return PeriodicFunction(FunctionKind.SAWTOOTH, frequency, amplitude, phase)


def bias(value: float) -> PeriodicFunction:
    """
    Constant (DC offset) function.

    Any real is accepted, NaN and infinities included; they propagate into
    the waveform sum unchanged.
    """
    return PeriodicFunction(FunctionKind.BIAS, value=value)


dc_bias = bias


def custom(function: Callable[[Any], Any]) -> PeriodicFunction:
    """
    Wrap an arbitrary time -> amplitude callable.

    The callable receives the time in calculation precision (a numpy scalar,
    or an ndarray when sampled vectorized) and its result is cast back into
    that precision. Nothing else is checked.

    Example:
        triangle = custom(lambda t: 2.0 * np.abs(2.0 * (t % 1.0) - 1.0) - 1.0)
    """
    return PeriodicFunction(FunctionKind.CUSTOM, function=function)
