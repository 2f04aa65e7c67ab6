"""Custom exception hierarchy for pyskope."""

from __future__ import annotations


class SkopeError(Exception):
    """Base exception for all pyskope errors."""


class SkopeConfigError(SkopeError):
    """Invalid or missing configuration."""


class SkopeValidationError(SkopeError, ValueError):
    """A value handed to the session or catalog is malformed."""


class SkopeGeometryError(SkopeValidationError):
    """GeoJSON input could not be interpreted as a geometry."""


class SkopeNotFoundError(SkopeError):
    """No catalog record exists for the requested dataset id."""

    def __init__(self, message: str, *, dataset_id: str = "") -> None:
        self.dataset_id = dataset_id
        super().__init__(message)


class SkopePreconditionError(SkopeError):
    """Operation called before the session holds the state it needs.

    Raised for programmer errors only, e.g. selecting a variable before
    any metadata is loaded or building a time-series request while
    ``can_handle_timeseries_request`` is false.  Failed fetches are
    never raised; they are recorded as request status instead.
    """
