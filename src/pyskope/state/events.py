"""Mutation names reported to session listeners."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from pyskope.state.store import DatasetSession


class Mutation(StrEnum):
    SET_METADATA = "setMetadata"
    SET_VARIABLE = "setVariable"
    SET_TEMPORAL_RANGE = "setTemporalRange"
    SET_AREA_PER_PIXEL = "setAreaPerPixel"
    SET_GEOJSON = "setGeoJson"
    CLEAR_GEOJSON = "clearGeoJson"
    SET_TIMESERIES = "setTimeSeries"
    CLEAR_TIMESERIES = "clearTimeSeries"
    SET_REQUEST_STATUS = "setTimeSeriesRequestStatus"


SessionListener: TypeAlias = Callable[[Mutation, "DatasetSession"], None]
