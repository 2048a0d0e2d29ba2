"""
RF Signal - Signal Data Model

Time-domain and frequency-domain views of a sampled complex (I/Q) signal.

A signal owns a private, read-only copy of its samples and a fixed integer
sample rate. Every conversion returns a new signal; inputs are never
modified.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rf_signal.analysis import power as power_util
from rf_signal.analysis.statistics import complex_pearson_correlation


def _owned_samples(samples: ArrayLike) -> NDArray[np.complex128]:
    """Copy samples into a read-only 1-D complex128 array."""
    owned = np.array(samples, dtype=np.complex128, copy=True).reshape(-1)
    owned.flags.writeable = False
    return owned


@dataclass(frozen=True, eq=False)
class Signal:
    """
    Common state and power accessors shared by both signal domains.

    Attributes:
        samples: Complex samples. Temporal order for time-domain signals,
            ascending frequency (zero at ``len // 2``) for frequency-domain ones.
        sample_rate: Sample rate in Hz.
    """

    samples: NDArray[np.complex128]
    sample_rate: int

    def __post_init__(self):
        object.__setattr__(self, "samples", _owned_samples(self.samples))

    def __len__(self) -> int:
        return int(self.samples.size)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.sample_rate == other.sample_rate and np.array_equal(
            self.samples, other.samples
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(num_samples={len(self)}, "
            f"sample_rate={self.sample_rate})"
        )

    # -------------------------------------------------------------------------
    # Power
    # -------------------------------------------------------------------------

    def to_magnitude(self) -> NDArray[np.float64]:
        """Magnitude of every sample."""
        return power_util.to_magnitude_list(self.samples)

    def to_power(self, resistance: float) -> NDArray[np.float64]:
        """Power in watts of every sample across ``resistance`` ohms."""
        return power_util.to_power_list(self.samples, resistance)

    def to_power_dbm(self, resistance: float) -> NDArray[np.float64]:
        """Power in dBm of every sample across ``resistance`` ohms."""
        return power_util.to_power_dbm_list(self.samples, resistance)

    def to_average_power_dbm(self, resistance: float) -> float:
        """Mean power over all samples in dBm."""
        return power_util.average_power_dbm(self.samples, resistance)

    def to_sum_power_dbm(self, resistance: float) -> float:
        """Total power over all samples in dBm."""
        return power_util.sum_power_dbm(self.samples, resistance)

    def correlation_to(self, other: Signal) -> complex:
        """
        Pearson correlation of this signal's samples with ``other``'s.

        Raises:
            SizeMismatchError: If the two signals differ in length.
        """
        return complex_pearson_correlation(self.samples, other.samples)


@dataclass(frozen=True, eq=False, repr=False)
class TimeDomainSignal(Signal):
    """I/Q samples in temporal order."""

    @property
    def duration(self) -> float:
        """Capture length in seconds."""
        return len(self) / self.sample_rate

    def as_frequency_domain_signal(self) -> FrequencyDomainSignal:
        """Centred, 1/N-normalised spectrum of this signal."""
        from rf_signal.dsp.transform import forward

        return FrequencyDomainSignal(forward(self.samples), self.sample_rate)


@dataclass(frozen=True, eq=False, repr=False)
class FrequencyDomainSignal(Signal):
    """Centred spectrum: bin ``i`` sits at ``(i - N/2) * sample_rate / N`` Hz."""

    @property
    def resolution_hz(self) -> float:
        """
        Bin width in Hz.

        Raises:
            ValueError: If the spectrum has no bins.
        """
        if len(self) == 0:
            raise ValueError("An empty spectrum has no bin width")
        return self.sample_rate / len(self)

    def frequencies(self) -> NDArray[np.float64]:
        """Centre frequency of every bin in Hz."""
        from rf_signal.dsp.spectral import bin_frequencies

        return bin_frequencies(len(self), self.sample_rate)

    def as_time_domain_signal(self) -> TimeDomainSignal:
        """Time-domain samples at original amplitude."""
        from rf_signal.dsp.transform import inverse

        return TimeDomainSignal(inverse(self.samples), self.sample_rate)
