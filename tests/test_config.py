"""
Tests for config module and error handling utilities.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and wavegen contributors

MIT License
"""

import numpy as np
import pytest
from wavegen.config import (
    ErrorMode,
    set_error_mode,
    get_error_mode,
    handle_error,
    resolve_precision,
    resolve_sample_type,
    set_default_precision,
    get_default_precision,
    set_default_sample_type,
    get_default_sample_type,
)
from wavegen import (
    Waveform,
    PeriodicFunction,
    FunctionKind,
    WavegenError,
    InvalidParameterError,
    InvalidSampleRateError,
    sine,
)


class TestErrorMode:
    """Test the error mode switch."""

    def setup_method(self):
        self._original_mode = get_error_mode()

    def teardown_method(self):
        set_error_mode(self._original_mode)

    def test_default_is_strict(self):
        assert get_error_mode() is ErrorMode.STRICT

    def test_modes_by_value(self):
        assert ErrorMode("strict") is ErrorMode.STRICT
        assert ErrorMode("lenient") is ErrorMode.LENIENT

    def test_switch_and_back(self):
        set_error_mode(ErrorMode.LENIENT)
        assert get_error_mode() is ErrorMode.LENIENT
        set_error_mode(ErrorMode.STRICT)
        assert get_error_mode() is ErrorMode.STRICT


class TestHandleError:
    """Test handle_error with wavegen's error classes."""

    def setup_method(self):
        self._original_mode = get_error_mode()

    def teardown_method(self):
        set_error_mode(self._original_mode)

    def test_strict_raises_given_class(self):
        with pytest.raises(InvalidSampleRateError, match="rate of 0"):
            handle_error("rate of 0", exception_class=InvalidSampleRateError)

    def test_default_class_is_runtime_error(self):
        with pytest.raises(RuntimeError, match="no class given"):
            handle_error("no class given")

    def test_lenient_logs_warning_under_wavegen(self, caplog):
        set_error_mode(ErrorMode.LENIENT)
        assert handle_error("component wrapped", exception_class=TypeError) is True
        record = caplog.records[-1]
        assert record.levelname == "WARNING"
        assert record.name == "wavegen.config"
        assert record.getMessage() == "component wrapped"

    def test_fatal_raises_in_lenient_mode(self):
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(InvalidParameterError, match="frequency"):
            handle_error("frequency is zero", fatal=True, exception_class=InvalidParameterError)

    def test_per_call_mode_overrides_global(self):
        assert handle_error("carry on", error_mode=ErrorMode.LENIENT) is True
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(TypeError):
            handle_error("stop", error_mode=ErrorMode.STRICT, exception_class=TypeError)

    def test_errors_share_a_base_class(self):
        for exception_class in (InvalidParameterError, InvalidSampleRateError):
            with pytest.raises(WavegenError):
                handle_error("bad", fatal=True, exception_class=exception_class)


class TestDefaultTypes:
    """Test the default precision and sample type."""

    def test_defaults_are_float32(self):
        assert get_default_precision() is np.float32
        assert get_default_sample_type() is np.float32

    def test_set_default_precision(self):
        set_default_precision("float64")
        assert get_default_precision() is np.float64
        assert Waveform(100).precision is np.float64

    def test_set_default_sample_type(self):
        set_default_sample_type(np.int16)
        assert get_default_sample_type() is np.int16
        assert Waveform(100).sample_type is np.int16

    @pytest.mark.parametrize("dtype", [np.int32, np.bool_, np.complex64, "not a dtype"])
    def test_precision_must_be_floating(self, dtype):
        with pytest.raises(TypeError, match="Calculation precision"):
            resolve_precision(dtype)

    @pytest.mark.parametrize("dtype", [np.bool_, np.complex128, object, "not a dtype"])
    def test_sample_type_must_be_numeric(self, dtype):
        with pytest.raises(TypeError, match="Output sample type"):
            resolve_sample_type(dtype)

    @pytest.mark.parametrize(
        "dtype", [np.int8, np.uint8, np.int16, np.uint32, np.int64, np.float16, np.float64]
    )
    def test_sample_type_accepts_numeric(self, dtype):
        assert resolve_sample_type(dtype) is dtype

    def test_type_errors_are_fatal_in_lenient_mode(self):
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(TypeError):
            Waveform(100, sample_type=np.complex64)


class TestLenientComponents:
    """Bare callables are only accepted as components in LENIENT mode."""

    def test_strict_rejects_bare_callable(self):
        wf = Waveform(100)
        with pytest.raises(TypeError, match="not a PeriodicFunction"):
            wf.add_component(lambda t: t)

    def test_lenient_wraps_bare_callable(self, caplog):
        set_error_mode(ErrorMode.LENIENT)
        wf = Waveform(100, [sine(1.0)])
        wf.add_component(lambda t: t * 0 + 2)
        assert "not a PeriodicFunction" in caplog.text
        assert wf.components[-1].kind is FunctionKind.CUSTOM
        assert isinstance(wf.components[-1], PeriodicFunction)
        assert wf.value_at(0.0) == pytest.approx(2.0)

    def test_non_callable_always_fatal(self):
        set_error_mode(ErrorMode.LENIENT)
        wf = Waveform(100)
        with pytest.raises(TypeError, match="must be PeriodicFunctions"):
            wf.add_component(42)
