"""
RF Signal - Test Configuration

Pytest fixtures and configuration for testing.
"""

import numpy as np
import pytest

from rf_signal.core.signal import FrequencyDomainSignal, TimeDomainSignal

# Constant IQ value used by the interval power fixtures
IQ_REAL = -0.0044
IQ_IMAG = 0.0021


@pytest.fixture
def sample_rate():
    """Default sample rate for tests."""
    return 122_880_000


@pytest.fixture
def resistance():
    """Reference resistance in ohms."""
    return 50.0


@pytest.fixture
def rng():
    """Seeded random generator so failures are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def complex_noise(rng):
    """Generate complex Gaussian noise."""

    def _generate(num_samples, std=1.0):
        return (rng.standard_normal(num_samples) + 1j * rng.standard_normal(num_samples)) * std

    return _generate


@pytest.fixture
def tone_signal():
    """Generate a complex tone as a TimeDomainSignal."""

    def _generate(num_samples, freq_hz, sample_rate, amplitude=1.0):
        t = np.arange(num_samples) / sample_rate
        return TimeDomainSignal(amplitude * np.exp(2j * np.pi * freq_hz * t), sample_rate)

    return _generate


@pytest.fixture
def constant_capture(sample_rate):
    """1,228,800 identical samples (10 ms at 122.88 MHz)."""
    samples = np.full(1_228_800, complex(IQ_REAL, IQ_IMAG))
    return TimeDomainSignal(samples, sample_rate)


@pytest.fixture
def expected_constant_power_dbm(resistance):
    """Average power in dBm of ``constant_capture``."""
    return 10 * np.log10((IQ_REAL**2 + IQ_IMAG**2) / resistance / 0.001)


@pytest.fixture
def legacy_spectrum():
    """Build the reference spectrum [-0.5, 1, -1, 0, (-1, 0) * extra_pairs] at 4 Hz."""

    def _build(extra_pairs=0):
        data = [-0.5, 1.0, -1.0, 0.0] + [-1.0, 0.0] * extra_pairs
        return FrequencyDomainSignal(np.array(data, dtype=np.complex128), 4)

    return _build


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: mark test as slow running")
