"""
RF Signal - Signal Factories

Entry points for building signals from explicit samples, CSV text, raw
binary I/Q buffers and capture files.
"""

from __future__ import annotations

import logging
import numbers
from pathlib import Path

from numpy.typing import ArrayLike

from rf_signal.config.defaults import CSV_SEPARATOR, LEGACY_BYTE_ORDER
from rf_signal.core.signal import FrequencyDomainSignal, TimeDomainSignal
from rf_signal.core.types import BinaryIqFormat, ByteOrder
from rf_signal.exceptions import MalformedInputError
from rf_signal.io.capture_descriptor import CaptureDescriptor
from rf_signal.io.format_handlers import decode_iq_bytes

logger = logging.getLogger(__name__)


def _check_sample_rate(sample_rate) -> int:
    if (
        isinstance(sample_rate, bool)
        or not isinstance(sample_rate, numbers.Integral)
        or sample_rate <= 0
    ):
        raise ValueError(f"sample_rate must be a positive integer, got {sample_rate!r}")
    return int(sample_rate)


def new_time_domain_signal(samples: ArrayLike, sample_rate: int) -> TimeDomainSignal:
    """
    Create a TimeDomainSignal from complex samples.

    Args:
        samples: Complex samples in temporal order (copied).
        sample_rate: Sample rate in Hz.

    Raises:
        ValueError: If ``sample_rate`` is not a positive integer.
    """
    return TimeDomainSignal(samples, _check_sample_rate(sample_rate))


def new_frequency_domain_signal(samples: ArrayLike, sample_rate: int) -> FrequencyDomainSignal:
    """
    Create a FrequencyDomainSignal from centred spectrum bins.

    Raises:
        ValueError: If ``sample_rate`` is not a positive integer.
    """
    return FrequencyDomainSignal(samples, _check_sample_rate(sample_rate))


def from_csv(csv_string: str, sample_rate: int) -> TimeDomainSignal:
    """
    Create a TimeDomainSignal from comma separated ``I,Q,I,Q,...`` values.

    Raises:
        MalformedInputError: If the value count is odd or a value is not a
            decimal number.
    """
    values = csv_string.split(CSV_SEPARATOR)
    if len(values) % 2 != 0:
        raise MalformedInputError("CSV string needs to be in I and Q pairs")

    try:
        parsed = [float(value) for value in values]
    except ValueError as e:
        raise MalformedInputError(f"CSV string contains a non-numeric value: {e}") from e

    samples = [complex(i, q) for i, q in zip(parsed[0::2], parsed[1::2])]
    return new_time_domain_signal(samples, sample_rate)


def from_iq_bytes(
    iq_bytes: bytes,
    fmt: BinaryIqFormat | str,
    sample_rate: int,
    byte_order: ByteOrder | str = LEGACY_BYTE_ORDER,
) -> TimeDomainSignal:
    """
    Create a TimeDomainSignal from an interleaved binary I/Q buffer.

    Args:
        iq_bytes: Buffer of ``[I0, Q0, I1, Q1, ...]`` components.
        fmt: Component encoding (``BinaryIqFormat`` or its value, e.g. ``"float32"``).
        sample_rate: Sample rate in Hz.
        byte_order: ``"big"`` or ``"little"``. Defaults to big-endian, the
            byte order older captures were written in.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not a known format.
        FormatMismatchError: If the buffer does not hold whole I/Q pairs.
    """
    sample_rate = _check_sample_rate(sample_rate)
    samples = decode_iq_bytes(iq_bytes, fmt, byte_order)

    logger.debug(
        "Decoded IQ buffer",
        extra={"num_bytes": len(iq_bytes), "num_samples": samples.size, "format": str(fmt)},
    )
    return TimeDomainSignal(samples, sample_rate)


def read_capture(path: str | Path, descriptor: CaptureDescriptor) -> TimeDomainSignal:
    """
    Read and decode a binary capture file described by ``descriptor``.

    Raises:
        OSError: If the file cannot be read.
        FormatMismatchError: If the file does not hold whole I/Q pairs.
    """
    iq_bytes = Path(path).read_bytes()
    return from_iq_bytes(
        iq_bytes,
        descriptor.format,
        descriptor.sample_rate_hz,
        byte_order=descriptor.byte_order,
    )
