"""
RF Signal - Exceptions

Error taxonomy for signal construction, decoding and processing. Every error
derives from ValueError as well, so code that already guards numeric input
with ``except ValueError`` keeps working.
"""


class SignalProcessingError(ValueError):
    """Base exception for rf_signal errors."""

    pass


class SizeMismatchError(SignalProcessingError):
    """Raised when paired sample sequences have different lengths."""

    pass


class InvalidRangeError(SignalProcessingError):
    """Raised when a requested frequency span exceeds the sampled bandwidth."""

    pass


class FormatMismatchError(SignalProcessingError):
    """Raised when a byte buffer does not hold whole I/Q pairs of the format."""

    pass


class UnsupportedFormatError(SignalProcessingError):
    """Raised for binary sample formats without a registered decoder."""

    pass


class MalformedInputError(SignalProcessingError):
    """Raised when textual IQ input cannot be parsed into I/Q pairs."""

    pass
