"""Pydantic request models built from session state.

A fetch layer serialises :class:`TimeSeriesRequest` with
``model_dump(by_alias=True)`` and posts it to the time-series endpoint.
"""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from pyskope.models._base import SkopeBaseModel


class TimeSeriesRequest(SkopeBaseModel):
    """Request for the time series of one variable over a study area."""

    dataset_id: str
    variable_id: str
    selected_area: dict[str, Any]
    time_range: tuple[int, int]

    @field_validator("time_range")
    @classmethod
    def _ordered(cls, value: tuple[int, int]) -> tuple[int, int]:
        start, end = value
        if start > end:
            raise ValueError(f"time_range start {start} is after end {end}")
        return value
