"""
RF Signal - Core Module

Signal data model, sample format types and logging configuration.
"""

from rf_signal.core.signal import FrequencyDomainSignal, Signal, TimeDomainSignal
from rf_signal.core.types import BinaryIqFormat, ByteOrder

__all__ = [
    "Signal",
    "TimeDomainSignal",
    "FrequencyDomainSignal",
    "BinaryIqFormat",
    "ByteOrder",
]
