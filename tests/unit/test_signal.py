"""
RF Signal - Signal Model Tests

Unit tests for TimeDomainSignal / FrequencyDomainSignal.
"""

import dataclasses
import math

import numpy as np
import pytest

from rf_signal.core.signal import FrequencyDomainSignal, TimeDomainSignal
from rf_signal.exceptions import SizeMismatchError

SAMPLE_RATE = 120
RESISTANCE = 50.0


@pytest.fixture
def unit_spectrum():
    return FrequencyDomainSignal([1 + 0j], SAMPLE_RATE)


class TestOwnership:
    """Signals own an immutable copy of their samples."""

    def test_source_mutation_not_visible(self):
        source = np.array([1 + 1j, 2 + 2j])
        signal = TimeDomainSignal(source, SAMPLE_RATE)

        source[0] = 99

        assert signal.samples[0] == 1 + 1j

    def test_samples_read_only(self):
        signal = TimeDomainSignal([1, 2, 3], SAMPLE_RATE)
        with pytest.raises(ValueError):
            signal.samples[0] = 5

    def test_frozen(self):
        signal = TimeDomainSignal([1, 2, 3], SAMPLE_RATE)
        with pytest.raises(dataclasses.FrozenInstanceError):
            signal.sample_rate = 10

    def test_samples_are_complex(self):
        signal = TimeDomainSignal([1, 2], SAMPLE_RATE)
        assert signal.samples.dtype == np.complex128


class TestEquality:
    def test_equal_by_value(self):
        assert TimeDomainSignal([1, 2], 10) == TimeDomainSignal(np.array([1, 2]), 10)

    def test_sample_rate_matters(self):
        assert TimeDomainSignal([1, 2], 10) != TimeDomainSignal([1, 2], 20)

    def test_domain_matters(self):
        assert TimeDomainSignal([1, 2], 10) != FrequencyDomainSignal([1, 2], 10)

    def test_repr(self):
        assert repr(TimeDomainSignal([1, 2], 10)) == "TimeDomainSignal(num_samples=2, sample_rate=10)"


class TestPowerAccessors:
    def test_sample_rate_and_samples(self, unit_spectrum):
        assert unit_spectrum.sample_rate == SAMPLE_RATE
        assert len(unit_spectrum) == 1
        assert unit_spectrum.samples[0] == 1 + 0j

    def test_magnitude(self, unit_spectrum):
        np.testing.assert_array_equal(unit_spectrum.to_magnitude(), [1.0])

    def test_power(self, unit_spectrum):
        np.testing.assert_allclose(unit_spectrum.to_power(RESISTANCE), [1.0 / RESISTANCE])

    def test_power_dbm(self, unit_spectrum):
        expected = 10 * math.log10(1.0 / RESISTANCE / 0.001)
        np.testing.assert_allclose(unit_spectrum.to_power_dbm(RESISTANCE), [expected])

    def test_sum_power_dbm(self, unit_spectrum):
        expected = 10 * math.log10(1.0 / RESISTANCE / 0.001)
        assert unit_spectrum.to_sum_power_dbm(RESISTANCE) == pytest.approx(expected)

    def test_average_power_dbm(self):
        signal = TimeDomainSignal([1, 1j, -1, -1j], SAMPLE_RATE)
        expected = 10 * math.log10(1.0 / RESISTANCE / 0.001)
        assert signal.to_average_power_dbm(RESISTANCE) == pytest.approx(expected)

    def test_correlation_to(self, complex_noise):
        a = TimeDomainSignal(complex_noise(16), SAMPLE_RATE)
        assert a.correlation_to(a) == pytest.approx(1.0)

    def test_correlation_size_mismatch(self):
        a = TimeDomainSignal([1, 2, 3], SAMPLE_RATE)
        b = TimeDomainSignal([1, 2], SAMPLE_RATE)
        with pytest.raises(SizeMismatchError):
            a.correlation_to(b)


class TestDomainConversion:
    def test_time_to_frequency(self, complex_noise):
        signal = TimeDomainSignal(complex_noise(10), SAMPLE_RATE)

        spectrum = signal.as_frequency_domain_signal()

        assert isinstance(spectrum, FrequencyDomainSignal)
        assert len(spectrum) == len(signal)
        assert spectrum.sample_rate == SAMPLE_RATE

    def test_round_trip(self, complex_noise):
        signal = TimeDomainSignal(complex_noise(100), SAMPLE_RATE)

        restored = signal.as_frequency_domain_signal().as_time_domain_signal()

        assert isinstance(restored, TimeDomainSignal)
        assert restored.sample_rate == signal.sample_rate
        np.testing.assert_allclose(restored.samples, signal.samples, atol=1e-9)

    def test_single_bin_round_trip(self, unit_spectrum):
        restored = unit_spectrum.as_time_domain_signal().as_frequency_domain_signal()

        assert len(restored) == 1
        assert restored.sample_rate == SAMPLE_RATE
        assert restored.samples[0] == pytest.approx(1 + 0j)

    def test_conversion_does_not_alias(self, complex_noise):
        signal = TimeDomainSignal(complex_noise(8), SAMPLE_RATE)
        spectrum = signal.as_frequency_domain_signal()
        assert not np.shares_memory(signal.samples, spectrum.samples)


class TestDerivedProperties:
    def test_duration(self, constant_capture):
        assert constant_capture.duration == pytest.approx(0.01)

    def test_resolution(self):
        assert FrequencyDomainSignal(np.zeros(1024), 1_024_000).resolution_hz == 1000.0

    def test_resolution_of_empty_spectrum_raises(self):
        with pytest.raises(ValueError):
            FrequencyDomainSignal([], SAMPLE_RATE).resolution_hz

    def test_frequencies_of_empty_spectrum(self):
        assert FrequencyDomainSignal([], SAMPLE_RATE).frequencies().size == 0

    def test_frequencies(self):
        np.testing.assert_array_equal(
            FrequencyDomainSignal(np.zeros(4), 4).frequencies(), [-2.0, -1.0, 0.0, 1.0]
        )
