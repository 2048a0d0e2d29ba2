"""
RF Signal - DSP Module

Domain transforms, spectral index mapping and time interval slicing.
"""

from rf_signal.dsp.intervals import (
    IntervalWindow,
    interval_windows,
    iter_time_intervals,
    power_for_time_interval,
    split_iq_data_for_time_interval,
)
from rf_signal.dsp.spectral import (
    bin_frequencies,
    filter_index_bounds,
    filter_replace_with_zero,
    subset_frequency_range,
    subset_index_bounds,
)
from rf_signal.dsp.transform import fft_shift, forward, ifft_shift, inverse

__all__ = [
    "forward",
    "inverse",
    "fft_shift",
    "ifft_shift",
    "bin_frequencies",
    "subset_index_bounds",
    "filter_index_bounds",
    "subset_frequency_range",
    "filter_replace_with_zero",
    "IntervalWindow",
    "interval_windows",
    "iter_time_intervals",
    "split_iq_data_for_time_interval",
    "power_for_time_interval",
]
