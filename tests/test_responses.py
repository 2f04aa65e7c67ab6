from __future__ import annotations

from typing import Any

import pytest

from pyskope.catalog import DatasetCatalog
from pyskope.exceptions import SkopePreconditionError
from pyskope.models.status import StatusKind
from pyskope.responses import (
    apply_timeseries_response,
    apply_timeseries_timeout,
    error_details,
    start_timeseries_request,
)
from pyskope.state import DatasetSession

_RECORD: dict[str, Any] = {
    "id": "lbda_v2",
    "timespan": {"period": {"gte": "0", "lte": "2017"}},
    "variables": [{"id": "pdsi"}],
}
_AREA: dict[str, Any] = {
    "type": "Polygon",
    "coordinates": [[[-110.0, 35.0], [-109.0, 35.0], [-109.0, 36.0], [-110.0, 36.0], [-110.0, 35.0]]],
}


def _make_session(*, with_area: bool = True) -> DatasetSession:
    session = DatasetSession(DatasetCatalog.from_records([_RECORD]))
    session.load_metadata("lbda_v2")
    if with_area:
        session.set_geojson(_AREA)
    return session


def test_start_sets_loading_and_returns_request() -> None:
    session = _make_session()
    session.set_timeseries_timeout()

    request = start_timeseries_request(session)

    assert request is not None
    assert request.variable_id == "pdsi"
    assert session.timeseries_request_status.status == StatusKind.LOADING


def test_start_without_area_sets_no_area() -> None:
    session = _make_session(with_area=False)

    assert start_timeseries_request(session) is None
    assert session.timeseries_request_status.status == StatusKind.NO_AREA


def test_start_without_dataset_raises() -> None:
    session = DatasetSession(DatasetCatalog.from_records([_RECORD]))
    session.set_geojson(_AREA)

    with pytest.raises(SkopePreconditionError):
        start_timeseries_request(session)


def test_success() -> None:
    session = _make_session()

    apply_timeseries_response(session, 200, {"x": [0, 1], "y": [-1.5, 0.25]})

    assert session.is_timeseries_loaded
    assert session.has_data
    assert session.timeseries.y == (-1.5, 0.25)


def test_validation_error_details() -> None:
    session = _make_session()
    body = {
        "detail": [
            {"loc": ["body", "timeRange"], "msg": "start must not exceed end", "type": "value_error"},
            {"loc": ["body", "variableId"], "msg": "unknown variable", "type": "value_error"},
        ]
    }

    apply_timeseries_response(session, 422, body)

    status = session.timeseries_request_status
    assert status.status == StatusKind.BAD_REQUEST
    assert [m.value for m in status.messages] == ["start must not exceed end", "unknown variable"]
    assert session.has_data is False


@pytest.mark.parametrize("status_code", [408, 504])
def test_timeouts(status_code: int) -> None:
    session = _make_session()

    apply_timeseries_response(session, status_code, None)

    assert session.timeseries_request_status.status == StatusKind.TIMEOUT


def test_server_error_with_string_detail() -> None:
    session = _make_session()

    apply_timeseries_response(session, 500, {"detail": "database unavailable"})

    status = session.timeseries_request_status
    assert status.status == StatusKind.SERVER_ERROR
    assert [m.value for m in status.messages] == ["database unavailable"]


def test_server_error_without_body() -> None:
    session = _make_session()

    apply_timeseries_response(session, 502, None)

    assert [m.value for m in session.timeseries_request_status.messages] == [
        "Server error (502), please try again later."
    ]


def test_client_timeout() -> None:
    session = _make_session()

    apply_timeseries_timeout(session)

    assert session.timeseries_request_status.status == StatusKind.TIMEOUT


def test_error_details_non_mapping_items() -> None:
    details = error_details({"detail": ["plain text", {"msg": "structured"}]}, fallback="unused")

    assert [d.msg for d in details] == ["plain text", "structured"]
