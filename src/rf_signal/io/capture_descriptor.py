from typing import Literal

from pydantic import BaseModel, Field

from rf_signal.config.defaults import DEFAULT_IQ_FORMAT, LEGACY_BYTE_ORDER


class CaptureDescriptor(BaseModel):
    """
    Metadata describing an on-disk IQ capture and how to decode it.
    """

    format: Literal["float16", "float32", "float64"] = Field(
        DEFAULT_IQ_FORMAT, description="IQ component encoding"
    )
    sample_rate_hz: int = Field(..., gt=0)
    byte_order: Literal["big", "little"] = LEGACY_BYTE_ORDER
    center_frequency_hz: int | None = Field(None, gt=0)
