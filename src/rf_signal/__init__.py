"""
RF Signal

Representation of sampled complex (I/Q) signals with conversion between time
and frequency domains, spectral subsetting, zero-fill filtering and
time-segmented power analysis.

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "RF Signal Team"

from rf_signal.core.signal import FrequencyDomainSignal, Signal, TimeDomainSignal
from rf_signal.core.types import BinaryIqFormat, ByteOrder
from rf_signal.dsp.intervals import power_for_time_interval, split_iq_data_for_time_interval
from rf_signal.dsp.spectral import filter_replace_with_zero, subset_frequency_range
from rf_signal.exceptions import (
    FormatMismatchError,
    InvalidRangeError,
    MalformedInputError,
    SignalProcessingError,
    SizeMismatchError,
    UnsupportedFormatError,
)
from rf_signal.io.factory import (
    from_csv,
    from_iq_bytes,
    new_frequency_domain_signal,
    new_time_domain_signal,
)

__all__ = [
    "Signal",
    "TimeDomainSignal",
    "FrequencyDomainSignal",
    "BinaryIqFormat",
    "ByteOrder",
    "new_time_domain_signal",
    "new_frequency_domain_signal",
    "from_csv",
    "from_iq_bytes",
    "split_iq_data_for_time_interval",
    "power_for_time_interval",
    "subset_frequency_range",
    "filter_replace_with_zero",
    "SignalProcessingError",
    "SizeMismatchError",
    "InvalidRangeError",
    "FormatMismatchError",
    "UnsupportedFormatError",
    "MalformedInputError",
]
