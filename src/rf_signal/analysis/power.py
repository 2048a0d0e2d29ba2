"""
RF Signal - Power Conversion

Magnitude, watt and dBm conversions for complex IQ samples. Voltage magnitudes
are converted to power across a reference resistance; dBm is referenced to
one milliwatt.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rf_signal.config.defaults import MILLIWATT


def magnitude(sample: complex) -> float:
    """Magnitude |sample| of a single IQ sample."""
    return float(abs(sample))


def magnitude_to_power(magnitude: float, resistance: float) -> float:
    """Power in watts of a voltage magnitude across ``resistance`` ohms."""
    return magnitude**2 / resistance


def watts_to_dbm(watts: float) -> float:
    """Convert watts to dBm."""
    return float(10 * np.log10(watts / MILLIWATT))


def dbm_to_watts(dbm: float) -> float:
    """Convert dBm to watts."""
    return float(10 ** (dbm * 0.1) * MILLIWATT)


# =============================================================================
# Sequence conversions
# =============================================================================


def to_magnitude_list(samples: ArrayLike) -> NDArray[np.float64]:
    """Magnitude of every sample."""
    return np.abs(np.asarray(samples, dtype=np.complex128))


def to_power_list(samples: ArrayLike, resistance: float) -> NDArray[np.float64]:
    """Power in watts of every sample."""
    return to_magnitude_list(samples) ** 2 / resistance


def power_list_to_dbm_list(powers: ArrayLike) -> NDArray[np.float64]:
    """Convert an array of watt values to dBm."""
    with np.errstate(divide="ignore"):
        return 10 * np.log10(np.asarray(powers, dtype=np.float64) / MILLIWATT)


def to_power_dbm_list(samples: ArrayLike, resistance: float) -> NDArray[np.float64]:
    """Power in dBm of every sample. Zero samples map to -inf."""
    return power_list_to_dbm_list(to_power_list(samples, resistance))


# =============================================================================
# Aggregates
# =============================================================================


def sum_power(samples: ArrayLike, resistance: float) -> float:
    """Total power in watts over all samples."""
    return float(np.sum(to_power_list(samples, resistance)))


def sum_power_dbm(samples: ArrayLike, resistance: float) -> float:
    """Total power over all samples, in dBm."""
    return watts_to_dbm(sum_power(samples, resistance))


def average_power_dbm(samples: ArrayLike, resistance: float) -> float:
    """
    Mean power over all samples, in dBm.

    The mean is taken in the linear (watt) domain before converting.

    Raises:
        ValueError: If ``samples`` is empty.
    """
    powers = to_power_list(samples, resistance)
    if powers.size == 0:
        raise ValueError("Cannot average power of an empty sample sequence")
    return watts_to_dbm(float(np.mean(powers)))
