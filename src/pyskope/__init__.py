"""pyskope - Session state for geospatial dataset exploration."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyskope")
except PackageNotFoundError:
    __version__ = "0+local"
from pyskope.catalog import DatasetCatalog
from pyskope.config import SkopeConfig
from pyskope.exceptions import (
    SkopeConfigError,
    SkopeError,
    SkopeGeometryError,
    SkopeNotFoundError,
    SkopePreconditionError,
    SkopeValidationError,
)
from pyskope.geometry import geometry_area
from pyskope.models import (
    DatasetMetadata,
    ErrorDetail,
    Period,
    RequestStatus,
    Severity,
    StatusKind,
    StatusMessage,
    SummaryStatistics,
    TimeSeries,
    TimeSeriesRequest,
    Timespan,
    Variable,
)
from pyskope.responses import apply_timeseries_response, apply_timeseries_timeout, start_timeseries_request
from pyskope.state import DatasetSession, Mutation

__all__ = [
    "__version__",
    "DatasetCatalog",
    "DatasetMetadata",
    "DatasetSession",
    "ErrorDetail",
    "Mutation",
    "Period",
    "RequestStatus",
    "Severity",
    "SkopeConfig",
    "SkopeConfigError",
    "SkopeError",
    "SkopeGeometryError",
    "SkopeNotFoundError",
    "SkopePreconditionError",
    "SkopeValidationError",
    "StatusKind",
    "StatusMessage",
    "SummaryStatistics",
    "TimeSeries",
    "TimeSeriesRequest",
    "Timespan",
    "Variable",
    "apply_timeseries_response",
    "apply_timeseries_timeout",
    "geometry_area",
    "start_timeseries_request",
]
