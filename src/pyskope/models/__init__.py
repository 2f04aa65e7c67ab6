"""Data models for catalog records, request status and time series."""

from pyskope.models._base import SkopeBaseModel, parse_year
from pyskope.models.metadata import DatasetMetadata, Period, Timespan, Variable
from pyskope.models.requests import TimeSeriesRequest
from pyskope.models.statistics import SummaryStatistics
from pyskope.models.status import (
    SEVERITY_BY_KIND,
    ErrorDetail,
    RequestStatus,
    Severity,
    StatusKind,
    StatusMessage,
)
from pyskope.models.timeseries import TimeSeries

__all__ = [
    "DatasetMetadata",
    "ErrorDetail",
    "Period",
    "RequestStatus",
    "SEVERITY_BY_KIND",
    "Severity",
    "SkopeBaseModel",
    "StatusKind",
    "StatusMessage",
    "SummaryStatistics",
    "TimeSeries",
    "TimeSeriesRequest",
    "Timespan",
    "Variable",
    "parse_year",
]
