"""
WaveformIterator - a sampling cursor walking a Waveform one time step at a time.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and wavegen contributors

MIT License
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Optional

import numpy as np

from wavegen.config import handle_error
from wavegen.conversion import to_sample
from wavegen.logger import get_logger

if TYPE_CHECKING:
    from wavegen.waveform import Waveform

logger = get_logger(__name__)


def _check_count(name: str, count: Any) -> int:
    if isinstance(count, (bool, np.bool_)) or not isinstance(count, (int, np.integer)):
        handle_error(
            f"{name} needs an integer count, got {count!r}",
            fatal=True,
            exception_class=TypeError,
        )
    return int(count)


class WaveformIterator:
    """
    Lazy, unbounded sequence of output samples from a Waveform.

    Each iterator owns its position, starting at sample 0 and time 0, so any
    number of iterators may walk the same Waveform independently. The Waveform
    itself is only read. An iterator must not be shared between threads.

    Sample n is taken at time n * (1 / sample_rate): the sum of all components
    is computed at the current time, converted into the output sample type and
    only then is the position advanced by one step.

    The position is kept as an integer sample count and the time is derived
    from it with a single multiplication, rounded once into calculation
    precision. Stepping with next() and skipping with nth() or advance()
    therefore land on exactly the same times, and no rounding error builds
    up however long the walk runs.

    A sum that cannot be represented in the output type (NaN into an integer
    type) ends iteration for that call only. Time still advances, and the
    next call may produce a sample again.

    Args:
        waveform: The Waveform to sample

    Example:
        wf = Waveform(100, [sine(1.0)], sample_type=np.float32)
        it = iter(wf)
        next(it)        # sample 0, time 0.0
        it.nth(24)      # sample 25, ~1.0
    """

    def __init__(self, waveform: Waveform):
        self._waveform = waveform
        self._precision = waveform.precision
        # Products are formed in at least float64 before rounding to precision
        self._wide = np.result_type(self._precision, np.float64).type
        self._step = waveform.sample_period
        self._max_time = self._precision(np.finfo(self._precision).max)
        self._origin = self._precision(0)
        self._index = 0
        self._time = self._precision(0)
        logger.debug(f"WaveformIterator started over {waveform!r}")

    @property
    def time(self) -> np.floating:
        """Elapsed time in seconds of the next sample, in calculation precision."""
        return self._time

    def __iter__(self) -> WaveformIterator:
        return self

    def __next__(self) -> np.number:
        value = self._waveform.value_at(self._time)
        sample = to_sample(value, self._waveform.sample_type)
        self.advance(1)
        if sample is None:
            raise StopIteration
        return sample

    def _time_at(self, index: int) -> Optional[np.floating]:
        """origin + index * step in precision, or None if that is not finite."""
        wide = self._wide
        try:
            with np.errstate(over="ignore", invalid="ignore"):
                t = self._precision(
                    wide(self._origin) + wide(index) * wide(self._step)
                )
        except OverflowError:
            return None
        return t if np.isfinite(t) else None

    def advance(self, steps: int = 1) -> None:
        """
        Move the position forward by a number of sample periods.

        If the new time would overflow to infinity, the time wraps around to
        step - (MAX - time) instead, so the iterator never reaches a finite
        horizon. Counting then restarts from the wrapped time. The wrap costs
        a phase discontinuity and is only reachable after an astronomically
        long walk.

        Args:
            steps: Number of sample periods to skip (an integer >= 1)

        Raises:
            TypeError: If steps is not an integer
            ValueError: If steps < 1
        """
        steps = _check_count("advance()", steps)
        if steps < 1:
            handle_error(
                f"advance() needs at least one step, got {steps}",
                fatal=True,
                exception_class=ValueError,
            )
        index = self._index + steps
        new_time = self._time_at(index)
        if new_time is not None:
            self._index = index
            self._time = new_time
        else:
            with np.errstate(over="ignore", invalid="ignore"):
                self._time = self._step - (self._max_time - self._time)
            self._origin = self._time
            self._index = 0
            logger.debug(f"Time overflowed, wrapped to {self._time}")

    def nth(self, n: int) -> Optional[np.number]:
        """
        Skip n samples and return the one after them.

        Equivalent to calling next() n + 1 times and keeping the last value,
        but the components are only evaluated once.

        Args:
            n: Number of samples to skip (an integer >= 0)

        Returns:
            The sample, or None if it has no representation in the output type

        Raises:
            TypeError: If n is not an integer
            ValueError: If n < 0
        """
        n = _check_count("nth()", n)
        if n < 0:
            handle_error(
                f"nth() needs a non-negative index, got {n}",
                fatal=True,
                exception_class=ValueError,
            )
        if n > 0:
            self.advance(n)
        return next(self, None)

    def size_hint(self) -> tuple[int, Optional[int]]:
        """
        Return (lower, upper) bounds on the number of remaining samples.

        The sequence is unbounded for all practical inputs, but a
        non-representable sample can end it, so the upper bound is unknown.
        """
        return sys.maxsize, None

    def __repr__(self) -> str:
        return f"WaveformIterator(time={self._time}, waveform={self._waveform!r})"
