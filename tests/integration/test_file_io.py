"""
RF Signal - Capture File Integration Tests

Write captures to disk, read them back and run the analysis chain.
"""

import numpy as np
import pytest

from rf_signal.dsp.intervals import power_for_time_interval, split_iq_data_for_time_interval
from rf_signal.dsp.spectral import filter_replace_with_zero, subset_frequency_range
from rf_signal.exceptions import FormatMismatchError
from rf_signal.io.capture_descriptor import CaptureDescriptor
from rf_signal.io.factory import read_capture


def _write_capture(path, samples, dtype):
    interleaved = np.column_stack([samples.real, samples.imag]).astype(dtype)
    interleaved.tofile(path)


class TestPowerPipeline:
    def test_constant_capture(self, tmp_path, sample_rate, resistance, expected_constant_power_dbm):
        path = tmp_path / "constant.iq"
        samples = np.full(122_880, complex(-0.0044, 0.0021))
        _write_capture(path, samples, "<f4")

        signal = read_capture(
            path,
            CaptureDescriptor(format="float32", byte_order="little", sample_rate_hz=sample_rate),
        )
        windows = split_iq_data_for_time_interval(signal, 0.0002)
        powers = power_for_time_interval(signal, resistance, 0.0002)

        assert len(signal) == 122_880
        assert [len(w) for w in windows] == [24_576] * 5
        np.testing.assert_allclose(powers, expected_constant_power_dbm, rtol=1e-5)

    def test_big_endian_default(self, tmp_path, complex_noise):
        path = tmp_path / "noise.iq"
        samples = complex_noise(256)
        _write_capture(path, samples, ">f8")

        signal = read_capture(path, CaptureDescriptor(format="float64", sample_rate_hz=1000))

        np.testing.assert_array_equal(signal.samples, samples)

    def test_truncated_file(self, tmp_path):
        path = tmp_path / "truncated.iq"
        path.write_bytes(b"\x00" * 6)

        with pytest.raises(FormatMismatchError):
            read_capture(path, CaptureDescriptor(format="float32", sample_rate_hz=1000))

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_capture(tmp_path / "missing.iq", CaptureDescriptor(sample_rate_hz=1000))


class TestSpectrumPipeline:
    NUM_SAMPLES = 1024
    SAMPLE_RATE = 1_024_000  # 1 kHz bins

    def _read_tones(self, tmp_path, tone_signal, *freqs):
        samples = sum(
            tone_signal(self.NUM_SAMPLES, f, self.SAMPLE_RATE).samples for f in freqs
        )
        path = tmp_path / "tones.iq"
        _write_capture(path, samples, "<f8")
        return read_capture(
            path,
            CaptureDescriptor(format="float64", byte_order="little", sample_rate_hz=self.SAMPLE_RATE),
        )

    def test_tone_lands_in_expected_bin(self, tmp_path, tone_signal):
        spectrum = self._read_tones(tmp_path, tone_signal, 100_000).as_frequency_domain_signal()

        peak = int(np.argmax(spectrum.to_magnitude()))

        assert spectrum.frequencies()[peak] == pytest.approx(100_000)
        assert abs(spectrum.samples[peak]) == pytest.approx(1.0)

    def test_subset_keeps_tone(self, tmp_path, tone_signal):
        spectrum = self._read_tones(tmp_path, tone_signal, 100_000).as_frequency_domain_signal()

        subset = subset_frequency_range(spectrum, 400_000)

        assert len(subset) == 400
        assert int(np.argmax(subset.to_magnitude())) == 300

    def test_filter_removes_edge_tone(self, tmp_path, tone_signal):
        signal = self._read_tones(tmp_path, tone_signal, 100_000, 450_000)
        expected = tone_signal(self.NUM_SAMPLES, 100_000, self.SAMPLE_RATE)

        filtered = filter_replace_with_zero(signal, 400_000)

        assert len(filtered) == self.NUM_SAMPLES
        np.testing.assert_allclose(filtered.samples, expected.samples, atol=1e-9)
