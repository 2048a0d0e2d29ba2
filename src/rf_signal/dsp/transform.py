"""
RF Signal - Domain Transforms

Forward and inverse DFT with the centring shift and normalisation conventions
used by the signal model:

    forward(x)  = fft_shift(fft(x)) / N
    inverse(X)  = ifft(ifft_shift(X)) * N

``scipy.fft.ifft`` already divides by N, so the trailing multiply by N only
undoes the forward normalisation and ``inverse(forward(x)) == x`` up to
floating point error.
"""

from __future__ import annotations

import logging

import numpy as np
import scipy.fft
from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)


def fft_shift(spectrum: ArrayLike) -> NDArray[np.complex128]:
    """
    Move the zero-frequency bin to index ``N // 2``.

    Rotates right by ``N // 2``.
    """
    return np.fft.fftshift(np.asarray(spectrum, dtype=np.complex128))


def ifft_shift(spectrum: ArrayLike) -> NDArray[np.complex128]:
    """
    Undo ``fft_shift``.

    Rotates right by ``(N + 1) // 2``; together with ``fft_shift`` that is a
    full turn for both even and odd N.
    """
    return np.fft.ifftshift(np.asarray(spectrum, dtype=np.complex128))


def normalize_by_size(values: ArrayLike) -> NDArray[np.complex128]:
    """Divide every element by the sequence length."""
    values = np.asarray(values, dtype=np.complex128)
    return values / values.size


def scale_by_size(values: ArrayLike) -> NDArray[np.complex128]:
    """Multiply every element by the sequence length."""
    values = np.asarray(values, dtype=np.complex128)
    return values * values.size


def _check_not_empty(values: np.ndarray) -> None:
    if values.size == 0:
        raise ValueError("Cannot transform an empty sample sequence")


def forward(samples: ArrayLike) -> NDArray[np.complex128]:
    """
    Time-domain samples to a centred, 1/N-normalised spectrum.

    Args:
        samples: Complex time-domain samples (N >= 1).

    Returns:
        New array of N bins in ascending frequency order, zero at ``N // 2``.

    Raises:
        ValueError: If ``samples`` is empty.
    """
    samples = np.asarray(samples, dtype=np.complex128).reshape(-1)
    _check_not_empty(samples)

    spectrum = normalize_by_size(fft_shift(scipy.fft.fft(samples)))

    logger.debug("Forward transform", extra={"num_samples": samples.size})
    return spectrum


def inverse(spectrum: ArrayLike) -> NDArray[np.complex128]:
    """
    Centred, 1/N-normalised spectrum back to time-domain samples.

    Args:
        spectrum: Complex spectrum as produced by ``forward`` (N >= 1).

    Returns:
        New array of N time-domain samples at original amplitude.

    Raises:
        ValueError: If ``spectrum`` is empty.
    """
    spectrum = np.asarray(spectrum, dtype=np.complex128).reshape(-1)
    _check_not_empty(spectrum)

    samples = scale_by_size(scipy.fft.ifft(ifft_shift(spectrum)))

    logger.debug("Inverse transform", extra={"num_samples": spectrum.size})
    return samples
