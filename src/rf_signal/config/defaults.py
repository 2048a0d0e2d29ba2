"""
Centralized Configuration Defaults

Default values and physical constants shared across the package.

Usage:
    from rf_signal.config.defaults import DEFAULT_RESISTANCE_OHMS, MILLIWATT
"""

import os

# =========================================================================
# Power Conversion
# =========================================================================
MILLIWATT = 0.001  # dBm reference power in watts
DEFAULT_RESISTANCE_OHMS = 50.0  # Reference impedance for voltage -> power

# =========================================================================
# Binary IQ Decoding
# =========================================================================
DEFAULT_IQ_FORMAT = "float32"
LEGACY_BYTE_ORDER = "big"  # Byte order assumed when none is given
CSV_SEPARATOR = ","

# =========================================================================
# Interval Slicing
# =========================================================================
DEFAULT_INTERVAL_SECONDS = 0.001
DEFAULT_OFFSET_SECONDS = 0.0

# =========================================================================
# Logging
# =========================================================================
DEFAULT_LOG_LEVEL = os.getenv("RF_SIGNAL_LOG_LEVEL", "WARNING")
