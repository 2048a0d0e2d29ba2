"""
RF Signal - Configuration Schema

Pydantic models for analysis settings with validation rules.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from rf_signal.config.defaults import (
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_IQ_FORMAT,
    DEFAULT_OFFSET_SECONDS,
    DEFAULT_RESISTANCE_OHMS,
    LEGACY_BYTE_ORDER,
)


class DecodeConfig(BaseModel):
    """Binary IQ capture decoding."""

    format: Literal["float16", "float32", "float64"] = DEFAULT_IQ_FORMAT
    byte_order: Literal["big", "little"] = LEGACY_BYTE_ORDER
    sample_rate_hz: int | None = Field(default=None, gt=0)
    center_frequency_hz: int | None = Field(default=None, gt=0)


class PowerConfig(BaseModel):
    """Voltage to power conversion."""

    resistance_ohms: float = Field(default=DEFAULT_RESISTANCE_OHMS, gt=0)


class IntervalConfig(BaseModel):
    """Time-segmented analysis windows (all values in seconds)."""

    offset_s: float = Field(default=DEFAULT_OFFSET_SECONDS, ge=0)
    interval_s: float = Field(default=DEFAULT_INTERVAL_SECONDS, gt=0)
    period_s: float | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def period_gte_interval(self):
        if self.period_s is not None and self.period_s < self.interval_s:
            raise ValueError("period_s must be >= interval_s")
        return self

    @property
    def effective_period_s(self) -> float:
        return self.interval_s if self.period_s is None else self.period_s


class SpectrumConfig(BaseModel):
    """Frequency-domain subsetting and filtering."""

    frequency_range_hz: int | None = Field(default=None, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_file: str | None = None
    structured: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class SignalAnalysisConfig(BaseModel):
    """Root configuration for rf_signal tooling."""

    decode: DecodeConfig = Field(default_factory=DecodeConfig)
    power: PowerConfig = Field(default_factory=PowerConfig)
    interval: IntervalConfig = Field(default_factory=IntervalConfig)
    spectrum: SpectrumConfig = Field(default_factory=SpectrumConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def range_within_sample_rate(self):
        rate = self.decode.sample_rate_hz
        span = self.spectrum.frequency_range_hz
        if rate is not None and span is not None and span > rate:
            raise ValueError("spectrum.frequency_range_hz must be <= decode.sample_rate_hz")
        return self

    @classmethod
    def from_yaml(cls, path: str) -> "SignalAnalysisConfig":
        """Load configuration from YAML file."""
        import yaml

        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str) -> None:
        """Save configuration to YAML file."""
        import yaml

        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)


# Preset configurations
PRESET_LTE_20MHZ_SUBFRAME = SignalAnalysisConfig(
    decode=DecodeConfig(format="float32", byte_order="little", sample_rate_hz=30_720_000),
    interval=IntervalConfig(interval_s=0.001),
    spectrum=SpectrumConfig(frequency_range_hz=18_000_000),
)

PRESET_NR_100MHZ_SLOT = SignalAnalysisConfig(
    decode=DecodeConfig(format="float32", byte_order="little", sample_rate_hz=122_880_000),
    interval=IntervalConfig(interval_s=0.0005),
    spectrum=SpectrumConfig(frequency_range_hz=98_280_000),
)

PRESET_PERIODIC_BURST = SignalAnalysisConfig(
    interval=IntervalConfig(offset_s=0.0, interval_s=0.002, period_s=0.005),
)

PRESETS = {
    "lte_20mhz_subframe": PRESET_LTE_20MHZ_SUBFRAME,
    "nr_100mhz_slot": PRESET_NR_100MHZ_SLOT,
    "periodic_burst": PRESET_PERIODIC_BURST,
}
