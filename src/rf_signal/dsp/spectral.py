"""
RF Signal - Spectral Index Mapping

Maps a requested frequency span (Hz, symmetric around DC) onto bin indices of
a centred spectrum, and uses the mapping to subset or zero-fill filter a
signal.

Two bound derivations coexist and must not be merged:

- Subset: frequency comparison. Bins with ``|f| <= range // 2`` are found
  and the slice runs from the first match up to (not including) the last.
- Filter: bin count. ``s = int(range / resolution)`` bins are kept, from
  ``ceil(s / 2)`` up to (not including) ``N - ceil(s / 2)``.
"""

from __future__ import annotations

import logging
import math
from typing import overload

import numpy as np
from numpy.typing import NDArray

from rf_signal.core.signal import FrequencyDomainSignal, TimeDomainSignal
from rf_signal.exceptions import InvalidRangeError

logger = logging.getLogger(__name__)


def bin_frequencies(num_bins: int, sample_rate: float) -> NDArray[np.float64]:
    """
    Centre frequency of each bin of a centred spectrum.

    Bin ``i`` maps to ``(i - N/2) * sample_rate / N`` Hz.
    """
    if num_bins == 0:
        return np.empty(0, dtype=np.float64)
    indexes = np.arange(num_bins, dtype=np.float64)
    return (indexes - num_bins / 2.0) * sample_rate / num_bins


def _check_range(frequency_range: float, sample_rate: float) -> None:
    if frequency_range > sample_rate:
        raise InvalidRangeError(
            f"Requested frequency range ({frequency_range} Hz) is larger than "
            f"data sample rate ({sample_rate} Hz)"
        )
    if frequency_range < 0:
        raise InvalidRangeError(f"Frequency range must be >= 0, got {frequency_range}")


def subset_index_bounds(
    num_bins: int, sample_rate: float, frequency_range: float
) -> tuple[int, int]:
    """
    Slice bounds ``[low, high)`` used by ``subset_frequency_range``.

    ``low`` is the first bin whose frequency lies in
    ``[-range // 2, range // 2]`` and ``high`` is the last such bin.
    Returns ``(0, 0)`` when no bin lies in range.

    Raises:
        InvalidRangeError: If ``frequency_range`` exceeds ``sample_rate``.
    """
    _check_range(frequency_range, sample_rate)

    freqs = bin_frequencies(num_bins, sample_rate)
    half_range = frequency_range // 2
    (indexes,) = np.nonzero((freqs >= -half_range) & (freqs <= half_range))
    if indexes.size == 0:
        return 0, 0
    return int(indexes[0]), int(indexes[-1])


def filter_index_bounds(
    num_bins: int, sample_rate: float, frequency_range: float
) -> tuple[int, int]:
    """
    Pass-band bounds ``[low, high)`` used by ``filter_replace_with_zero``.

    An empty spectrum has no bins to keep and gives ``(0, 0)``.

    Raises:
        InvalidRangeError: If ``frequency_range`` exceeds ``sample_rate``.
    """
    _check_range(frequency_range, sample_rate)
    if num_bins == 0:
        return 0, 0

    kept_bins = int(frequency_range / (sample_rate / num_bins))
    half_bins = math.ceil(kept_bins / 2.0)
    return half_bins, num_bins - half_bins


def subset_frequency_range(
    signal: FrequencyDomainSignal, frequency_range: float
) -> FrequencyDomainSignal:
    """
    Select the bins of a centred spectrum within ``frequency_range`` Hz.

    Args:
        signal: Spectrum to select from.
        frequency_range: Span in Hz, centred on DC.

    Returns:
        New FrequencyDomainSignal with the selected bins and the same sample rate.

    Raises:
        InvalidRangeError: If ``frequency_range`` exceeds the sample rate.
    """
    low, high = subset_index_bounds(len(signal), signal.sample_rate, frequency_range)

    logger.debug(
        "Spectral subset",
        extra={"frequency_range": frequency_range, "low_index": low, "high_index": high},
    )
    return FrequencyDomainSignal(signal.samples[low:high], signal.sample_rate)


@overload
def filter_replace_with_zero(
    signal: FrequencyDomainSignal, frequency_range: float
) -> FrequencyDomainSignal: ...


@overload
def filter_replace_with_zero(
    signal: TimeDomainSignal, frequency_range: float
) -> TimeDomainSignal: ...


def filter_replace_with_zero(signal, frequency_range):
    """
    Replace bins outside ``filter_index_bounds`` with zero.

    With ``s = int(frequency_range / resolution)``, the first and last
    ``ceil(s / 2)`` bins are zeroed and the rest keep their values.

    A FrequencyDomainSignal is filtered directly and returned in the frequency
    domain. A TimeDomainSignal is transformed, filtered and transformed back,
    and returned in the time domain. Length is always preserved.

    Raises:
        InvalidRangeError: If ``frequency_range`` exceeds the sample rate.
    """
    if isinstance(signal, TimeDomainSignal):
        filtered = filter_replace_with_zero(
            signal.as_frequency_domain_signal(), frequency_range
        )
        return filtered.as_time_domain_signal()

    low, high = filter_index_bounds(len(signal), signal.sample_rate, frequency_range)

    filtered = np.zeros(len(signal), dtype=np.complex128)
    filtered[low:high] = signal.samples[low:high]

    logger.debug(
        "Zero-fill filter",
        extra={"frequency_range": frequency_range, "low_index": low, "high_index": high},
    )
    return FrequencyDomainSignal(filtered, signal.sample_rate)
