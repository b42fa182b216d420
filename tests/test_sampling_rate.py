"""
Tests for SamplingRate and is_normal.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and wavegen contributors

MIT License
"""

import numpy as np
import pytest
from wavegen import (
    SamplingRate,
    is_normal,
    is_real,
    InvalidSampleRateError,
    ErrorMode,
    set_error_mode,
)

BAD_RATES = [np.nan, 0.0, -0.0, -1.0, -44100.0, np.inf, -np.inf]


class TestIsNormal:
    """Test the normal-number predicate."""

    @pytest.mark.parametrize("value", [1.0, -1.0, 44100, 1e-30, np.float32(3.5)])
    def test_normal_values(self, value):
        assert is_normal(value)

    @pytest.mark.parametrize("value", [0.0, np.nan, np.inf, -np.inf, 5e-324])
    def test_non_normal_values(self, value):
        assert not is_normal(value)

    def test_depends_on_precision(self):
        # Normal in float64, subnormal in float32
        assert is_normal(1e-40, np.float64)
        assert not is_normal(1e-40, np.float32)
        # Overflows float16
        assert not is_normal(1e6, np.float16)

    def test_rejects_non_numbers(self):
        assert not is_normal("fast")
        assert not is_normal(None)

    def test_numeric_strings_are_not_numbers(self):
        assert not is_normal("44100")
        assert not is_normal(True)


class TestIsReal:
    """Test the real-number predicate."""

    @pytest.mark.parametrize("value", [1, 2.5, np.int16(3), np.float32(4.0), np.uint64(5)])
    def test_real_values(self, value):
        assert is_real(value)

    @pytest.mark.parametrize("value", ["1", None, True, np.bool_(False), 1j, [1.0]])
    def test_non_real_values(self, value):
        assert not is_real(value)


class TestSamplingRate:
    """Test SamplingRate construction and properties."""

    def test_create_from_int(self):
        rate = SamplingRate(44100)
        assert rate.value == 44100
        assert isinstance(rate.value, np.float32)
        assert rate.precision is np.float32

    def test_create_with_precision(self):
        rate = SamplingRate(48000.0, np.float64)
        assert isinstance(rate.value, np.float64)
        assert rate.period == pytest.approx(1.0 / 48000.0)

    @pytest.mark.parametrize(
        "value", [np.int16(8000), np.uint32(96000), np.float64(22050.0), 1]
    )
    def test_accepts_numeric_types(self, value):
        assert float(SamplingRate(value)) == float(value)

    def test_period_is_reciprocal(self):
        rate = SamplingRate(100)
        assert rate.period == np.float32(1) / np.float32(100)

    @pytest.mark.parametrize("value", BAD_RATES)
    def test_bad_rates_raise(self, value):
        with pytest.raises(InvalidSampleRateError, match="SamplingRate has to be positive"):
            SamplingRate(value)

    @pytest.mark.parametrize("value", ["44100", True, None, 44100j])
    def test_non_numbers_raise(self, value):
        with pytest.raises(InvalidSampleRateError):
            SamplingRate(value)

    def test_subnormal_rate_raises(self):
        with pytest.raises(InvalidSampleRateError):
            SamplingRate(1e-40, np.float32)

    def test_rate_overflowing_precision_raises(self):
        with pytest.raises(InvalidSampleRateError):
            SamplingRate(1e300, np.float32)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            SamplingRate(0)

    def test_fatal_even_in_lenient_mode(self):
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(InvalidSampleRateError):
            SamplingRate(-1)

    def test_smallest_normal_rate_is_accepted(self):
        tiny = np.finfo(np.float32).tiny
        rate = SamplingRate(tiny, np.float32)
        assert np.isfinite(rate.period)

    def test_equality(self):
        assert SamplingRate(100) == SamplingRate(100.0)
        assert SamplingRate(100) == 100
        assert SamplingRate(100) != SamplingRate(200)

    def test_repr(self):
        assert repr(SamplingRate(100)) == "SamplingRate(100.0, precision=float32)"
