"""
RF Signal - Binary IQ Decoders

Registry of decoders turning interleaved ``[I0, Q0, I1, Q1, ...]`` byte
buffers into complex sample arrays.
"""

from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

from rf_signal.core.types import BinaryIqFormat, ByteOrder
from rf_signal.exceptions import FormatMismatchError, UnsupportedFormatError

Decoder = Callable[[bytes, ByteOrder], NDArray[np.complex128]]

# Registry of format decoders
FORMAT_HANDLERS: dict[BinaryIqFormat, Decoder] = {}


def register_format(fmt: BinaryIqFormat) -> Callable[[Decoder], Decoder]:
    """Decorator to register a decoder for a given sample format."""

    def decorator(func: Decoder) -> Decoder:
        FORMAT_HANDLERS[fmt] = func
        return func

    return decorator


def check_iq_pairs(iq_bytes: bytes, fmt: BinaryIqFormat) -> None:
    """
    Verify that ``iq_bytes`` holds whole I/Q pairs of ``fmt``.

    Raises:
        FormatMismatchError: If the length is not a multiple of the component
            width, or the component count is odd.
    """
    if len(iq_bytes) % fmt.byte_length != 0:
        raise FormatMismatchError(
            "IQ byte array and format does not match. "
            "Please make sure expected format matches byte array"
        )
    if (len(iq_bytes) // fmt.byte_length) % 2 != 0:
        raise FormatMismatchError("IQ byte values need to be in I and Q pairs")


def _decode_float(iq_bytes: bytes, byte_order: ByteOrder, type_code: str) -> NDArray[np.complex128]:
    raw = np.frombuffer(iq_bytes, dtype=f"{byte_order.dtype_prefix}{type_code}")
    iq = raw.astype(np.float64).reshape(-1, 2)
    return iq[:, 0] + 1j * iq[:, 1]


@register_format(BinaryIqFormat.FLOAT_16)
def decode_float16(iq_bytes: bytes, byte_order: ByteOrder) -> NDArray[np.complex128]:
    """Decode IEEE half-precision I/Q pairs."""
    return _decode_float(iq_bytes, byte_order, "f2")


@register_format(BinaryIqFormat.FLOAT_32)
def decode_float32(iq_bytes: bytes, byte_order: ByteOrder) -> NDArray[np.complex128]:
    """Decode IEEE single-precision I/Q pairs."""
    return _decode_float(iq_bytes, byte_order, "f4")


@register_format(BinaryIqFormat.FLOAT_64)
def decode_float64(iq_bytes: bytes, byte_order: ByteOrder) -> NDArray[np.complex128]:
    """Decode IEEE double-precision I/Q pairs."""
    return _decode_float(iq_bytes, byte_order, "f8")


def decode_iq_bytes(
    iq_bytes: bytes,
    fmt: BinaryIqFormat | str,
    byte_order: ByteOrder | str,
) -> NDArray[np.complex128]:
    """
    Decode an interleaved I/Q byte buffer.

    Raises:
        UnsupportedFormatError: If no decoder is registered for ``fmt``.
        FormatMismatchError: If the buffer does not hold whole I/Q pairs.
    """
    fmt = BinaryIqFormat.parse(fmt)
    decoder = FORMAT_HANDLERS.get(fmt)
    if decoder is None:
        raise UnsupportedFormatError(f"{fmt} is currently not supported")

    check_iq_pairs(iq_bytes, fmt)
    return decoder(bytes(iq_bytes), ByteOrder.parse(byte_order))
