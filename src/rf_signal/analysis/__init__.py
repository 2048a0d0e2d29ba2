"""
RF Signal - Analysis Module

Power conversions and sample statistics.
"""

from rf_signal.analysis.power import (
    average_power_dbm,
    dbm_to_watts,
    magnitude,
    magnitude_to_power,
    sum_power,
    sum_power_dbm,
    to_magnitude_list,
    to_power_dbm_list,
    to_power_list,
    watts_to_dbm,
)
from rf_signal.analysis.statistics import (
    complex_covariance,
    complex_pearson_correlation,
    real_covariance,
    real_pearson_correlation,
)

__all__ = [
    "magnitude",
    "magnitude_to_power",
    "watts_to_dbm",
    "dbm_to_watts",
    "to_magnitude_list",
    "to_power_list",
    "to_power_dbm_list",
    "sum_power",
    "sum_power_dbm",
    "average_power_dbm",
    "complex_covariance",
    "complex_pearson_correlation",
    "real_covariance",
    "real_pearson_correlation",
]
