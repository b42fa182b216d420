import numpy as np
import pytest
import wavegen.config as cfg


@pytest.fixture(autouse=True)
def _reset_config():
    cfg.set_error_mode(cfg.ErrorMode.STRICT)
    cfg.set_default_precision(np.float32)
    cfg.set_default_sample_type(np.float32)
    yield
    cfg.set_error_mode(cfg.ErrorMode.STRICT)
    cfg.set_default_precision(np.float32)
    cfg.set_default_sample_type(np.float32)
