"""
RF Signal - Sample Statistics

Sum, mean, variance, covariance and Pearson correlation over complex IQ
sequences and over real-valued sequences (e.g. power traces).

Variance and covariance use the sample (N - 1) normalisation. For complex
inputs the covariance conjugates the second operand's deviation, giving the
Hermitian covariance.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rf_signal.exceptions import SizeMismatchError


def _as_complex(values: ArrayLike) -> NDArray[np.complex128]:
    return np.asarray(values, dtype=np.complex128)


def _as_real(values: ArrayLike) -> NDArray[np.float64]:
    return np.asarray(values, dtype=np.float64)


def _check_same_size(a: np.ndarray, b: np.ndarray) -> None:
    if a.shape != b.shape:
        raise SizeMismatchError(
            f"Sequences need to be of equal size (got {a.size} and {b.size})"
        )


# =============================================================================
# Complex sequences
# =============================================================================


def complex_sum(values: ArrayLike) -> complex:
    return complex(np.sum(_as_complex(values)))


def complex_mean(values: ArrayLike) -> complex:
    values = _as_complex(values)
    return complex(np.sum(values) / values.size)


def complex_variance(values: ArrayLike) -> float:
    """Sample variance: sum |x - mean|^2 / (N - 1)."""
    values = _as_complex(values)
    deviation = values - complex_mean(values)
    return float(np.sum(np.abs(deviation) ** 2) / (values.size - 1))


def complex_standard_deviation(values: ArrayLike) -> float:
    return float(np.sqrt(complex_variance(values)))


def complex_dot_product(a: ArrayLike, b: ArrayLike) -> complex:
    """Unconjugated dot product sum a[i] * b[i]."""
    a, b = _as_complex(a), _as_complex(b)
    _check_same_size(a, b)
    return complex(np.sum(a * b))


def complex_covariance(a: ArrayLike, b: ArrayLike) -> complex:
    """Hermitian sample covariance sum (a - ua) * conj(b - ub) / (N - 1)."""
    a, b = _as_complex(a), _as_complex(b)
    _check_same_size(a, b)
    deviation_a = a - complex_mean(a)
    deviation_b = b - complex_mean(b)
    return complex(np.sum(deviation_a * np.conj(deviation_b)) / (a.size - 1))


def complex_pearson_correlation(a: ArrayLike, b: ArrayLike) -> complex:
    """Pearson correlation: covariance / (std(a) * std(b))."""
    covariance = complex_covariance(a, b)
    return covariance / (complex_standard_deviation(a) * complex_standard_deviation(b))


# =============================================================================
# Real sequences
# =============================================================================


def real_sum(values: ArrayLike) -> float:
    return float(np.sum(_as_real(values)))


def real_mean(values: ArrayLike) -> float:
    values = _as_real(values)
    return float(np.sum(values) / values.size)


def real_variance(values: ArrayLike) -> float:
    values = _as_real(values)
    return float(np.sum((values - real_mean(values)) ** 2) / (values.size - 1))


def real_standard_deviation(values: ArrayLike) -> float:
    return float(np.sqrt(real_variance(values)))


def real_dot_product(a: ArrayLike, b: ArrayLike) -> float:
    a, b = _as_real(a), _as_real(b)
    _check_same_size(a, b)
    return float(np.sum(a * b))


def real_covariance(a: ArrayLike, b: ArrayLike) -> float:
    a, b = _as_real(a), _as_real(b)
    _check_same_size(a, b)
    return float(np.sum((a - real_mean(a)) * (b - real_mean(b))) / (a.size - 1))


def real_pearson_correlation(a: ArrayLike, b: ArrayLike) -> float:
    covariance = real_covariance(a, b)
    return covariance / (real_standard_deviation(a) * real_standard_deviation(b))
