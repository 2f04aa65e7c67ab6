"""In-memory state container for one dataset exploration session.

All mutations are synchronous.  The container performs no I/O; a fetch
layer drives the time-series status through the ``set_timeseries_*``
mutators and hands results to :meth:`DatasetSession.set_timeseries`.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from pyskope._constants import (
    GEOMETRY_KEY_PREFIX,
    PLACEHOLDER_MEAN,
    PLACEHOLDER_MEDIAN,
    PLACEHOLDER_NUMBER_OF_PIXELS,
    PLACEHOLDER_STD_DEV,
    SQUARE_METERS_PER_SQUARE_KM,
)
from pyskope._logsafe import summarize_for_log
from pyskope.catalog import DatasetCatalog
from pyskope.config import SkopeConfig
from pyskope.exceptions import SkopeConfigError, SkopePreconditionError, SkopeValidationError
from pyskope.geometry import geometry_area
from pyskope.models.metadata import DatasetMetadata, Variable
from pyskope.models.requests import TimeSeriesRequest
from pyskope.models.statistics import SummaryStatistics
from pyskope.models.status import ErrorDetail, RequestStatus, StatusKind
from pyskope.models.timeseries import TimeSeries
from pyskope.state.events import Mutation, SessionListener
from pyskope.state.selection import first_variable_index, select_variable, with_visibility

_logger = logging.getLogger(__name__)


def _current_year() -> int:
    return datetime.date.today().year


def _checked_range(temporal_range: Sequence[int]) -> list[int]:
    values = list(temporal_range)
    if len(values) != 2:
        raise SkopeValidationError(f"temporal range must hold exactly two years, got {values!r}")
    if values[0] > values[1]:
        raise SkopeValidationError(f"temporal range starts in {values[0]} after it ends in {values[1]}")
    return values


class DatasetSession:
    """Session state for dataset exploration.

    Usage::

        session = DatasetSession(DatasetCatalog.from_json_file("catalog.json"))
        session.load_default_variable("paleocar_v2")
        session.set_geojson(drawn_polygon)
        if session.can_handle_timeseries_request:
            request = session.build_timeseries_request()
    """

    def __init__(
        self,
        catalog: DatasetCatalog,
        *,
        config: SkopeConfig | None = None,
        area_function: Callable[[Any], float] = geometry_area,
        today_year: Callable[[], int] = _current_year,
    ) -> None:
        self._catalog = catalog
        self._config = config or SkopeConfig()
        self._area_function = area_function
        self._today_year = today_year
        self._listeners: list[SessionListener] = []

        self._metadata: DatasetMetadata | None = None
        self._selected_index: int | None = None
        self._geojson: Any = None
        self._selected_area_in_square_meters: float = 0
        self._temporal_range: list[int] = list(self._config.default_temporal_range)
        self._area_per_pixel: float = self._config.area_per_pixel
        self._timeseries = TimeSeries()
        self._has_data = False
        self._request_status = RequestStatus.loading()

    @classmethod
    def from_config(cls, config: SkopeConfig, **kwargs: Any) -> DatasetSession:
        """Create a session whose catalog is read from ``config.catalog_path``."""
        if config.catalog_path is None:
            raise SkopeConfigError("catalog_path is not configured (set SKOPE_CATALOG_PATH)")
        return cls(DatasetCatalog.from_json_file(config.catalog_path), config=config, **kwargs)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Call *listener* after every mutation.  Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, mutation: Mutation) -> None:
        for listener in list(self._listeners):
            try:
                listener(mutation, self)
            except Exception:
                _logger.exception("Session listener failed after %s", mutation.value)

    # ------------------------------------------------------------------
    # Raw state
    # ------------------------------------------------------------------

    @property
    def catalog(self) -> DatasetCatalog:
        return self._catalog

    @property
    def metadata(self) -> DatasetMetadata | None:
        return self._metadata

    @property
    def variables(self) -> tuple[Variable, ...]:
        """Variables of the loaded dataset with ``visible`` set from the selection."""
        if self._metadata is None:
            return ()
        return with_visibility(self._metadata.variables, self._selected_index)

    @property
    def variable(self) -> Variable | None:
        """The selected variable, or ``None``."""
        if self._metadata is None or self._selected_index is None:
            return None
        selected = self._metadata.variables[self._selected_index]
        return selected.model_copy(update={"visible": True})

    @property
    def geojson(self) -> Any:
        return self._geojson

    @property
    def selected_area_in_square_meters(self) -> float:
        return self._selected_area_in_square_meters

    @property
    def temporal_range(self) -> list[int]:
        """``[start_year, end_year]``.  Always the same list object."""
        return self._temporal_range

    @property
    def area_per_pixel(self) -> float:
        return self._area_per_pixel

    @property
    def timeseries(self) -> TimeSeries:
        return self._timeseries

    @property
    def has_data(self) -> bool:
        """Whether a time-series load completed; the series may still be empty."""
        return self._has_data

    @property
    def timeseries_request_status(self) -> RequestStatus:
        return self._request_status

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def load_metadata(self, dataset_id: str) -> bool:
        """Load the catalog record *dataset_id* and select its first variable.

        Returns ``True`` when the session holds *dataset_id* afterwards.
        Reloading the current id is a no-op.  An unknown id leaves the
        session untouched and returns ``False``; it is not an error at
        this layer.
        """
        if self._metadata is not None and self._metadata.id == dataset_id:
            return True

        metadata = self._catalog.get(dataset_id)
        if metadata is None:
            _logger.warning("No dataset with id %r in catalog; metadata unchanged", dataset_id)
            return False

        self.set_metadata(metadata)
        _logger.debug("Loaded dataset %s with variables %s", metadata.id, [v.id for v in metadata.variables])
        index = first_variable_index(metadata.variables)
        if index is not None:
            self._select(index)
        return True

    def load_default_variable(self, dataset_id: str) -> Variable:
        """Make sure some dataset is loaded and some variable is selected.

        Metadata for *dataset_id* is only loaded when no metadata is
        present at all; an already loaded dataset with another id is kept.

        Raises
        ------
        SkopePreconditionError
            If no metadata could be loaded or the dataset has no variables.
        """
        if self._metadata is None:
            self.load_metadata(dataset_id)
        if self._metadata is None:
            raise SkopePreconditionError(f"cannot select a default variable: dataset {dataset_id!r} is not loaded")
        if self._selected_index is None:
            index = first_variable_index(self._metadata.variables)
            if index is None:
                raise SkopePreconditionError(f"dataset {self._metadata.id!r} has no variables")
            self._select(index)
        variable = self.variable
        assert variable is not None
        return variable

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_metadata(self, metadata: DatasetMetadata | None) -> None:
        """Replace the loaded dataset.  Clears the variable selection."""
        temporal_range = _checked_range(metadata.temporal_range) if metadata is not None else None
        self._metadata = metadata
        self._selected_index = None
        if temporal_range is not None:
            self._temporal_range[:] = temporal_range
        self._notify(Mutation.SET_METADATA)

    def set_temporal_range(self, temporal_range: Sequence[int]) -> None:
        self._temporal_range[:] = _checked_range(temporal_range)
        self._notify(Mutation.SET_TEMPORAL_RANGE)

    def set_area_per_pixel(self, area_per_pixel: float) -> None:
        # FIXME: area per pixel should come from the server with the dataset.
        self._area_per_pixel = area_per_pixel
        self._notify(Mutation.SET_AREA_PER_PIXEL)

    def set_variable(self, variable_id: str) -> None:
        """Select the variable *variable_id* of the loaded dataset.

        An id that matches nothing leaves no variable selected.

        Raises
        ------
        SkopePreconditionError
            If no metadata is loaded.
        """
        if self._metadata is None:
            raise SkopePreconditionError(f"cannot select variable {variable_id!r}: no dataset loaded")
        index = select_variable(self._metadata.variables, variable_id)
        if index is None:
            _logger.warning("Dataset %s has no variable %r; selection cleared", self._metadata.id, variable_id)
        self._select(index)

    def _select(self, index: int | None) -> None:
        self._selected_index = index
        self._notify(Mutation.SET_VARIABLE)

    def set_geojson(self, geojson: Any) -> None:
        """Store the study area and recompute its area.  ``None`` clears it.

        The area is computed before anything is stored, so a geometry the
        area function rejects leaves the session unchanged.
        """
        area = self._area_function(geojson) if geojson is not None else 0
        self._geojson = geojson
        self._selected_area_in_square_meters = area
        _logger.debug("Study area set to %s (%.1f m²)", summarize_for_log(geojson), area)
        self._notify(Mutation.SET_GEOJSON)

    def clear_geojson(self) -> None:
        self._geojson = None
        self._selected_area_in_square_meters = 0
        self._notify(Mutation.CLEAR_GEOJSON)

    def set_timeseries(self, timeseries: TimeSeries | Mapping[str, Any]) -> None:
        """Replace the time series and mark data as loaded."""
        if not isinstance(timeseries, TimeSeries):
            if not isinstance(timeseries, Mapping):
                raise SkopeValidationError(
                    f"time series must be a mapping with x and y, got {type(timeseries).__name__}"
                )
            try:
                timeseries = TimeSeries.model_validate(dict(timeseries))
            except ValidationError as exc:
                raise SkopeValidationError(f"invalid time series payload: {exc}") from exc
        self._has_data = True
        self._timeseries = timeseries
        self._notify(Mutation.SET_TIMESERIES)

    def clear_timeseries(self) -> None:
        self._has_data = False
        self._timeseries = TimeSeries()
        self._notify(Mutation.CLEAR_TIMESERIES)

    def _set_request_status(self, status: RequestStatus) -> None:
        _logger.debug("Time series request status %s -> %s", self._request_status.status, status.status)
        self._request_status = status
        self._notify(Mutation.SET_REQUEST_STATUS)

    def set_timeseries_loading(self) -> None:
        self._set_request_status(RequestStatus.loading())

    def set_timeseries_loaded(self) -> None:
        self._set_request_status(RequestStatus.success())

    def set_timeseries_timeout(self) -> None:
        self._set_request_status(RequestStatus.timeout())

    def set_timeseries_no_area(self) -> None:
        self._set_request_status(RequestStatus.no_area())

    def set_timeseries_bad_request(self, error_details: Iterable[ErrorDetail | Mapping[str, Any]]) -> None:
        self._set_request_status(RequestStatus.bad_request(error_details))

    def set_timeseries_server_error(self, error_details: Iterable[ErrorDetail | Mapping[str, Any]]) -> None:
        self._set_request_status(RequestStatus.server_error(error_details))

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def has_geojson(self) -> bool:
        return self._geojson is not None

    @property
    def geojson_key(self) -> str:
        """Storage key for the drawn geometry of the current dataset."""
        if self._metadata is None:
            return self._config.default_geometry_key
        return f"{GEOMETRY_KEY_PREFIX}{self._metadata.id}"

    @property
    def can_handle_timeseries_request(self) -> bool:
        return self._metadata is not None and self.has_geojson and self._selected_index is not None

    @property
    def selected_area_in_square_km(self) -> str:
        return f"{self._selected_area_in_square_meters / SQUARE_METERS_PER_SQUARE_KM:.2f}"

    @property
    def timespan(self) -> list[int]:
        if self._metadata is not None:
            return self._metadata.temporal_range
        _logger.debug("No selected dataset, returning default year range")
        return [1, self._today_year()]

    @property
    def time_zero(self) -> int:
        if self._metadata is not None:
            return self._metadata.timespan.period.time_zero or 0
        return 0

    @property
    def is_timeseries_loading(self) -> bool:
        return self._request_status.status == StatusKind.LOADING

    @property
    def is_timeseries_loaded(self) -> bool:
        return self._request_status.status == StatusKind.SUCCESS

    @property
    def number_of_pixels(self) -> int:
        return PLACEHOLDER_NUMBER_OF_PIXELS

    @property
    def pixel_area(self) -> float:
        return self._area_per_pixel * self.number_of_pixels

    @property
    def mean(self) -> float:
        return PLACEHOLDER_MEAN

    @property
    def median(self) -> float:
        return PLACEHOLDER_MEDIAN

    @property
    def std_dev(self) -> float:
        return PLACEHOLDER_STD_DEV

    @property
    def statistics(self) -> SummaryStatistics:
        """Summary statistics; ``computed`` is ``False`` for placeholder values."""
        return SummaryStatistics(
            computed=False,
            number_of_pixels=self.number_of_pixels,
            pixel_area=self.pixel_area,
            mean=self.mean,
            median=self.median,
            std_dev=self.std_dev,
        )

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def build_timeseries_request(self) -> TimeSeriesRequest:
        """Build the time-series request for the current selection.

        Raises
        ------
        SkopePreconditionError
            If dataset, variable or study area is missing.
        SkopeValidationError
            If the current selection does not form a valid request.
        """
        if not self.can_handle_timeseries_request:
            raise SkopePreconditionError(
                "time series request needs a dataset, a variable and a study area "
                f"(metadata={self._metadata is not None}, variable={self._selected_index is not None}, "
                f"geometry={self.has_geojson})"
            )
        assert self._metadata is not None and self._selected_index is not None
        variable = self._metadata.variables[self._selected_index]
        geometry = getattr(self._geojson, "__geo_interface__", self._geojson)
        try:
            return TimeSeriesRequest(
                dataset_id=self._metadata.id,
                variable_id=variable.id,
                selected_area=dict(geometry),
                time_range=(self._temporal_range[0], self._temporal_range[1]),
            )
        except ValidationError as exc:
            raise SkopeValidationError(f"invalid time series request: {exc}") from exc
