"""
Waveform - a sampling rate plus periodic functions summed into one signal.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and wavegen contributors

MIT License
"""

from __future__ import annotations

import itertools
from typing import Any, Iterable, Optional, Type

import numpy as np

from wavegen.config import (
    get_default_precision,
    get_default_sample_type,
    handle_error,
    resolve_precision,
    resolve_sample_type,
)
from wavegen.logger import get_logger
from wavegen.periodic_function import PeriodicFunction, custom
from wavegen.sampling_rate import SamplingRate
from wavegen.waveform_iterator import WaveformIterator

logger = get_logger(__name__)


class Waveform:
    """
    An ordered collection of PeriodicFunctions sharing one sampling rate.

    Two numeric types are chosen independently:

    - precision: the floating dtype all time and amplitude arithmetic runs in
    - sample_type: the integer or floating dtype samples are delivered in

    Component outputs are summed in precision and then narrowed into
    sample_type with saturation: out-of-range sums clamp to the type's min or
    max instead of wrapping.

    The sampling rate is validated once, here, and cannot be changed later.
    Components may be appended at any time.

    Args:
        sample_rate: Samples per second (positive, finite, normal)
        components: Initial PeriodicFunctions (optional)
        sample_type: Output dtype (default: config default, np.float32)
        precision: Calculation dtype (default: config default, np.float32)

    Raises:
        InvalidSampleRateError: If sample_rate is NaN, zero, negative,
            subnormal or infinite
        TypeError: If sample_type or precision is not a supported dtype
        InvalidParameterError: If a component's parameters overflow precision

    Example:
        wf = Waveform(44100, [sine(500, 16383), bias(16383)], sample_type=np.int16)
        samples = wf.take(44100)   # one second of int16 audio
    """

    def __init__(
        self,
        sample_rate: Any,
        components: Optional[Iterable[PeriodicFunction]] = None,
        sample_type: Any = None,
        precision: Any = None,
    ):
        self._precision = resolve_precision(
            precision if precision is not None else get_default_precision()
        )
        self._sample_type = resolve_sample_type(
            sample_type if sample_type is not None else get_default_sample_type()
        )
        self._rate = SamplingRate(sample_rate, self._precision)
        self._components: list[PeriodicFunction] = []
        for component in components or ():
            self.add_component(component)
        logger.debug(f"Created {self!r}")

    @property
    def sample_rate(self) -> np.floating:
        """Samples per second, in calculation precision."""
        return self._rate.value

    @property
    def sample_period(self) -> np.floating:
        """Seconds per sample (1 / sample_rate), in calculation precision."""
        return self._rate.period

    @property
    def sample_type(self) -> Type[np.number]:
        return self._sample_type

    @property
    def precision(self) -> Type[np.floating]:
        return self._precision

    @property
    def components(self) -> tuple[PeriodicFunction, ...]:
        """Snapshot of the components in insertion order."""
        return tuple(self._components)

    def add_component(self, component: PeriodicFunction) -> None:
        """
        Append a PeriodicFunction to the end of the component list.

        A bare callable is not a PeriodicFunction: in STRICT mode this raises
        TypeError, in LENIENT mode it logs a warning and wraps the callable
        with custom().

        Args:
            component: The function to add

        Raises:
            InvalidParameterError: If a parameter of the component overflows,
                or its frequency becomes subnormal, in this Waveform's precision
        """
        if not isinstance(component, PeriodicFunction):
            if not callable(component):
                handle_error(
                    f"Waveform components must be PeriodicFunctions, got {component!r}",
                    fatal=True,
                    exception_class=TypeError,
                )
            if handle_error(
                f"Component {component!r} is not a PeriodicFunction, wrapping it with custom()",
                exception_class=TypeError,
            ):
                component = custom(component)
        component.check_precision(self._precision)
        self._components.append(component)

    def components_count(self) -> int:
        """Return the number of components."""
        return len(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def value_at(self, t: Any) -> Any:
        """
        Sum every component at time t, in calculation precision.

        Args:
            t: Time in seconds, scalar or ndarray

        Returns:
            The sum (0 when there are no components), shaped like t
        """
        t = np.asarray(t, dtype=self._precision)
        total = np.zeros(t.shape, dtype=self._precision)
        with np.errstate(over="ignore", invalid="ignore"):
            for component in self._components:
                total = total + component.sample(t)
        return np.asarray(total, dtype=self._precision)[()]

    def iter(self) -> WaveformIterator:
        """Start a new sampling walk at time 0."""
        return WaveformIterator(self)

    def __iter__(self) -> WaveformIterator:
        return self.iter()

    def take(self, count: int) -> np.ndarray:
        """
        Collect up to count samples from a fresh iterator.

        Collection stops early at the first sample that cannot be
        represented in sample_type.

        Args:
            count: Maximum number of samples

        Returns:
            1-D array of sample_type
        """
        return np.fromiter(
            itertools.islice(self.iter(), count), dtype=self._sample_type
        )

    def __repr__(self) -> str:
        return (
            f"Waveform(sample_rate={float(self._rate)}, "
            f"components={len(self._components)}, "
            f"sample_type={self._sample_type.__name__}, "
            f"precision={self._precision.__name__})"
        )
