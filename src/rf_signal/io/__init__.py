"""
RF Signal - IO Module

Signal factories and binary/CSV IQ decoding.
"""

from rf_signal.io.capture_descriptor import CaptureDescriptor
from rf_signal.io.factory import (
    from_csv,
    from_iq_bytes,
    new_frequency_domain_signal,
    new_time_domain_signal,
    read_capture,
)
from rf_signal.io.format_handlers import FORMAT_HANDLERS, decode_iq_bytes, register_format

__all__ = [
    "CaptureDescriptor",
    "new_time_domain_signal",
    "new_frequency_domain_signal",
    "from_csv",
    "from_iq_bytes",
    "read_capture",
    "decode_iq_bytes",
    "register_format",
    "FORMAT_HANDLERS",
]
