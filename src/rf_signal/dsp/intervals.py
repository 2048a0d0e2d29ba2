"""
RF Signal - Time Interval Slicing

Segments a long time-domain capture into fixed-length analysis windows.

Sample arithmetic (seconds to samples):
    offset   -> ceil(sample_rate * offset)
    interval -> floor(sample_rate * interval)
    period   -> floor(sample_rate * period)

Windows start at the offset and repeat every period. Only full windows are
emitted; a trailing partial window is dropped.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass

from rf_signal.core.signal import TimeDomainSignal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntervalWindow:
    """Half-open sample index range ``[start, stop)`` of one window."""

    start: int
    stop: int

    def __len__(self) -> int:
        return self.stop - self.start


def interval_windows(
    total_samples: int,
    sample_rate: int,
    interval: float,
    offset: float = 0.0,
    period: float | None = None,
) -> list[IntervalWindow]:
    """
    Compute the sample windows for a capture of ``total_samples`` samples.

    Args:
        total_samples: Length of the capture in samples.
        sample_rate: Sample rate in Hz.
        interval: Window length in seconds.
        offset: Start of the first window in seconds.
        period: Distance between window starts in seconds (defaults to
            ``interval``, i.e. back-to-back windows).

    Returns:
        Windows in temporal order; empty if not even one full window fits.

    Raises:
        ValueError: If ``interval <= 0``, ``offset < 0``, ``period < interval``
            or the interval is shorter than one sample.
    """
    if period is None:
        period = interval
    if interval <= 0:
        raise ValueError(f"interval must be > 0, got {interval}")
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")
    if period < interval:
        raise ValueError(f"period ({period}) must be >= interval ({interval})")

    offset_samples = math.ceil(sample_rate * offset)
    interval_samples = int(sample_rate * interval)
    period_samples = int(sample_rate * period)

    if interval_samples < 1:
        raise ValueError(
            f"interval of {interval} s is shorter than one sample at {sample_rate} Hz"
        )

    return [
        IntervalWindow(start, start + interval_samples)
        for start in range(
            offset_samples, total_samples - interval_samples + 1, period_samples
        )
    ]


def iter_time_intervals(
    signal: TimeDomainSignal,
    interval: float,
    offset: float = 0.0,
    period: float | None = None,
) -> Iterator[TimeDomainSignal]:
    """Lazily yield each full window of ``signal`` as its own TimeDomainSignal."""
    windows = interval_windows(len(signal), signal.sample_rate, interval, offset, period)
    for window in windows:
        yield TimeDomainSignal(signal.samples[window.start : window.stop], signal.sample_rate)


def split_iq_data_for_time_interval(
    signal: TimeDomainSignal,
    interval: float,
    offset: float = 0.0,
    period: float | None = None,
) -> list[TimeDomainSignal]:
    """
    Split a capture into independent sub-signals of ``interval`` seconds.

    Only full intervals are included; any partial interval is excluded.

    Args:
        signal: Capture to split.
        interval: Window length in seconds.
        offset: Start of the first window in seconds.
        period: Distance between window starts in seconds (defaults to ``interval``).

    Returns:
        Sub-signals with the source sample rate, in temporal order.
    """
    segments = list(iter_time_intervals(signal, interval, offset, period))

    logger.debug(
        "Split capture into intervals",
        extra={
            "num_samples": len(signal),
            "num_windows": len(segments),
            "interval_s": interval,
            "offset_s": offset,
            "period_s": interval if period is None else period,
        },
    )
    return segments


def power_for_time_interval(
    signal: TimeDomainSignal,
    resistance: float,
    interval: float,
    offset: float = 0.0,
    period: float | None = None,
) -> list[float]:
    """
    Average power in dBm of every full interval window.

    Args:
        signal: Capture to split and measure.
        resistance: Reference resistance in ohms.
        interval: Window length in seconds.
        offset: Start of the first window in seconds.
        period: Distance between window starts in seconds (defaults to ``interval``).

    Returns:
        One dBm value per full window.
    """
    return [
        segment.to_average_power_dbm(resistance)
        for segment in iter_time_intervals(signal, interval, offset, period)
    ]
