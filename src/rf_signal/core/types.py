"""
RF Signal - Core Type Definitions
"""

from __future__ import annotations

from enum import Enum

from rf_signal.exceptions import UnsupportedFormatError

# ==============================================================================
# Sample Format Definitions
# ==============================================================================


class BinaryIqFormat(Enum):
    """Binary encodings of one I or Q component."""

    FLOAT_16 = "float16"  # IEEE 754 half precision
    FLOAT_32 = "float32"  # IEEE 754 single precision
    FLOAT_64 = "float64"  # IEEE 754 double precision

    @property
    def byte_length(self) -> int:
        """Bytes per component (an I/Q pair takes twice this)."""
        return _BYTE_LENGTHS[self]

    @classmethod
    def parse(cls, value: BinaryIqFormat | str) -> BinaryIqFormat:
        """
        Resolve an enum member from a member, its value or its name.

        Raises:
            UnsupportedFormatError: If the format is not recognised.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key.lower() == member.value or key.upper() == member.name:
                    return member
        raise UnsupportedFormatError(f"{value!r} is currently not supported")


_BYTE_LENGTHS = {
    BinaryIqFormat.FLOAT_16: 2,
    BinaryIqFormat.FLOAT_32: 4,
    BinaryIqFormat.FLOAT_64: 8,
}


class ByteOrder(Enum):
    """Byte order of a binary IQ buffer."""

    BIG = "big"
    LITTLE = "little"

    @property
    def dtype_prefix(self) -> str:
        return ">" if self is ByteOrder.BIG else "<"

    @classmethod
    def parse(cls, value: ByteOrder | str) -> ByteOrder:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown byte order: {value!r}") from None
