"""Apply time-series fetch outcomes to a session.

A fetch layer (outside this package) sends the request and passes the
HTTP status code and decoded JSON body here.  Failures become request
status, not exceptions, so the rendering layer can display them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from pyskope.models.requests import TimeSeriesRequest
from pyskope.models.status import ErrorDetail
from pyskope.state.store import DatasetSession

_logger = logging.getLogger(__name__)

_BAD_REQUEST_CODES: frozenset[int] = frozenset({HTTPStatus.BAD_REQUEST, HTTPStatus.UNPROCESSABLE_ENTITY})
_TIMEOUT_CODES: frozenset[int] = frozenset({HTTPStatus.REQUEST_TIMEOUT, HTTPStatus.GATEWAY_TIMEOUT})


def error_details(body: Any, *, fallback: str) -> list[ErrorDetail]:
    """Extract error details from an error response body.

    ``{"detail": [{"msg": ...}, ...]}`` yields one detail per entry.  A
    string detail, a bare string body, or a missing detail yields a single
    entry (``fallback`` when there is no text at all).
    """
    detail: Any = body.get("detail") if isinstance(body, Mapping) else body
    if isinstance(detail, list):
        details: list[ErrorDetail] = []
        for item in detail:
            if isinstance(item, Mapping) and "msg" in item:
                details.append(ErrorDetail.model_validate(dict(item)))
            else:
                details.append(ErrorDetail(msg=str(item)))
        return details
    if isinstance(detail, str) and detail:
        return [ErrorDetail(msg=detail)]
    return [ErrorDetail(msg=fallback)]


def start_timeseries_request(session: DatasetSession) -> TimeSeriesRequest | None:
    """Move the session to ``loading`` and return the request to send.

    Without a study area the status becomes ``no-area`` and ``None`` is
    returned.  A missing dataset or variable is a programming error and
    raises :class:`pyskope.exceptions.SkopePreconditionError`.
    """
    if not session.has_geojson:
        session.set_timeseries_no_area()
        return None
    request = session.build_timeseries_request()
    session.set_timeseries_loading()
    return request


def apply_timeseries_response(session: DatasetSession, status_code: int, body: Any) -> None:
    """Record the outcome of a time-series request on *session*."""
    if 200 <= status_code < 300:
        session.set_timeseries(body)
        session.set_timeseries_loaded()
        return

    _logger.info("Time series request failed with HTTP %d", status_code)
    if status_code in _TIMEOUT_CODES:
        session.set_timeseries_timeout()
    elif status_code in _BAD_REQUEST_CODES:
        session.set_timeseries_bad_request(error_details(body, fallback="Invalid time series request."))
    else:
        session.set_timeseries_server_error(
            error_details(body, fallback=f"Server error ({status_code}), please try again later.")
        )


def apply_timeseries_timeout(session: DatasetSession) -> None:
    """Record a client-side timeout (the fetch was aborted)."""
    _logger.info("Time series request timed out")
    session.set_timeseries_timeout()
