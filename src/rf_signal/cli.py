#!/usr/bin/env python3
"""
RF Signal - Command Line Interface

Usage:
    rf-signal power capture.iq --sample-rate 122880000 --interval 0.002
    rf-signal spectrum capture.iq --sample-rate 30720000 --frequency-range 18000000
    rf-signal --config analysis.yaml power capture.iq
"""

from __future__ import annotations

import argparse
import logging
import sys

from rf_signal import __version__
from rf_signal.config.schema import PRESETS, SignalAnalysisConfig
from rf_signal.core.logging_config import configure_logging
from rf_signal.dsp.intervals import interval_windows, power_for_time_interval
from rf_signal.dsp.spectral import subset_frequency_range, subset_index_bounds
from rf_signal.exceptions import SignalProcessingError
from rf_signal.io.capture_descriptor import CaptureDescriptor
from rf_signal.io.factory import read_capture

logger = logging.getLogger(__name__)


def _load_config(args: argparse.Namespace) -> SignalAnalysisConfig:
    if args.config:
        config = SignalAnalysisConfig.from_yaml(args.config)
    elif args.preset:
        config = PRESETS[args.preset].model_copy(deep=True)
    else:
        config = SignalAnalysisConfig()

    # Command line flags override file values
    updates = {
        "decode": {
            "format": args.format,
            "byte_order": args.byte_order,
            "sample_rate_hz": args.sample_rate,
            "center_frequency_hz": args.center_frequency,
        },
        "power": {"resistance_ohms": args.resistance},
        "logging": {"level": args.log_level},
    }
    if args.command == "power":
        updates["interval"] = {
            "offset_s": args.offset,
            "interval_s": args.interval,
            "period_s": args.period,
        }
    else:
        updates["spectrum"] = {"frequency_range_hz": args.frequency_range}

    data = config.model_dump()
    for section, values in updates.items():
        data[section].update({k: v for k, v in values.items() if v is not None})
    return SignalAnalysisConfig(**data)


def _descriptor(config: SignalAnalysisConfig) -> CaptureDescriptor:
    if config.decode.sample_rate_hz is None:
        raise SignalProcessingError("A sample rate is required (--sample-rate or config)")
    return CaptureDescriptor(
        format=config.decode.format,
        sample_rate_hz=config.decode.sample_rate_hz,
        byte_order=config.decode.byte_order,
        center_frequency_hz=config.decode.center_frequency_hz,
    )


def run_power(args: argparse.Namespace, config: SignalAnalysisConfig) -> int:
    """Print the average power of every interval window."""
    signal = read_capture(args.file, _descriptor(config))
    interval = config.interval
    windows = interval_windows(
        len(signal),
        signal.sample_rate,
        interval.interval_s,
        offset=interval.offset_s,
        period=interval.period_s,
    )
    powers = power_for_time_interval(
        signal,
        config.power.resistance_ohms,
        interval.interval_s,
        offset=interval.offset_s,
        period=interval.period_s,
    )
    logger.info(f"{len(powers)} full windows in {signal.duration:.6f} s capture")

    for index, (window, power_dbm) in enumerate(zip(windows, powers)):
        start_s = window.start / signal.sample_rate
        print(f"{index}\t{start_s:.6f}\t{power_dbm:.3f}")
    return 0


def run_spectrum(args: argparse.Namespace, config: SignalAnalysisConfig) -> int:
    """
    Print bin frequency and power of the (optionally subset) spectrum.

    Frequencies are baseband offsets, or absolute RF frequencies when the
    capture has a centre frequency.
    """
    descriptor = _descriptor(config)
    spectrum = read_capture(args.file, descriptor).as_frequency_domain_signal()
    span = config.spectrum.frequency_range_hz

    freqs = spectrum.frequencies() + (descriptor.center_frequency_hz or 0)
    if span is not None:
        low, high = subset_index_bounds(len(spectrum), spectrum.sample_rate, span)
        freqs = freqs[low:high]
        spectrum = subset_frequency_range(spectrum, span)

    for freq, power_dbm in zip(freqs, spectrum.to_power_dbm(config.power.resistance_ohms)):
        print(f"{freq:.3f}\t{power_dbm:.3f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rf-signal", description="IQ capture power and spectrum analysis"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--preset", choices=sorted(PRESETS), help="Named configuration preset")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", help="Binary interleaved IQ capture")
    common.add_argument("--sample-rate", type=int, help="Sample rate in Hz")
    common.add_argument("--format", choices=["float16", "float32", "float64"])
    common.add_argument("--byte-order", choices=["big", "little"])
    common.add_argument("--resistance", type=float, help="Reference resistance in ohms")
    common.add_argument(
        "--center-frequency", type=int, help="RF centre frequency of the capture in Hz"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    power = subparsers.add_parser(
        "power", parents=[common], help="Average power (dBm) per time interval"
    )
    power.add_argument("--interval", type=float, help="Window length in seconds")
    power.add_argument("--offset", type=float, help="Start of first window in seconds")
    power.add_argument("--period", type=float, help="Distance between windows in seconds")

    spectrum = subparsers.add_parser(
        "spectrum", parents=[common], help="Power (dBm) per frequency bin"
    )
    spectrum.add_argument(
        "--frequency-range", type=int, help="Span in Hz, centred on DC, to keep"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = _load_config(args)
    except (OSError, ValueError) as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(config.logging)

    handlers = {"power": run_power, "spectrum": run_spectrum}
    try:
        return handlers[args.command](args, config)
    except (OSError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
