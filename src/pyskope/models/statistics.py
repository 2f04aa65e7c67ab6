"""Summary statistics for the selected study area."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SummaryStatistics(BaseModel):
    """Statistics shown next to a time series.

    ``computed`` is ``False`` while the values are the library's fixed
    placeholders; callers must not present those as measurements.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    computed: bool
    number_of_pixels: int
    pixel_area: float
    mean: float
    median: float
    std_dev: float
