"""
RF Signal - Configuration Module
"""

from rf_signal.config.schema import (
    PRESETS,
    DecodeConfig,
    IntervalConfig,
    LoggingConfig,
    PowerConfig,
    SignalAnalysisConfig,
    SpectrumConfig,
)

__all__ = [
    "SignalAnalysisConfig",
    "DecodeConfig",
    "PowerConfig",
    "IntervalConfig",
    "SpectrumConfig",
    "LoggingConfig",
    "PRESETS",
]
