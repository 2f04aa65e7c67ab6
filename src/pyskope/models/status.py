"""Time-series request status.

The status is a closed tagged union: :class:`StatusKind` names the
variant, and each kind has exactly one :class:`Severity`.  Consumers read
``status``, ``type`` and ``messages`` to render the state of the latest
fetch without looking at the network layer.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class StatusKind(StrEnum):
    LOADING = "loading"
    SUCCESS = "success"
    TIMEOUT = "timeout"
    NO_AREA = "no-area"
    BAD_REQUEST = "badrequest"
    SERVER_ERROR = "servererror"


class Severity(StrEnum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


SEVERITY_BY_KIND: dict[StatusKind, Severity] = {
    StatusKind.LOADING: Severity.INFO,
    StatusKind.SUCCESS: Severity.INFO,
    StatusKind.TIMEOUT: Severity.WARNING,
    StatusKind.NO_AREA: Severity.WARNING,
    StatusKind.BAD_REQUEST: Severity.ERROR,
    StatusKind.SERVER_ERROR: Severity.ERROR,
}

LOADING_MESSAGE = "Loading time series data."
SUCCESS_MESSAGE = "Success"
TIMEOUT_MESSAGE = "Timeout exceeded, please try again with a smaller study area."
NO_AREA_MESSAGE = "Please enter a study area."


class StatusMessage(BaseModel):
    """One human-readable line attached to a status."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Severity
    value: str


class ErrorDetail(BaseModel):
    """A single error entry from a failed time-series request.

    Matches the ``detail`` items of FastAPI/pydantic validation errors:
    ``{"loc": [...], "msg": "...", "type": "..."}``.  Only ``msg`` is
    required.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    msg: str
    loc: tuple[str | int, ...] = ()
    type: str | None = None


def _to_detail(detail: ErrorDetail | Mapping[str, Any]) -> ErrorDetail:
    if isinstance(detail, ErrorDetail):
        return detail
    return ErrorDetail.model_validate(dict(detail))


class RequestStatus(BaseModel):
    """Lifecycle state of the latest time-series fetch."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: StatusKind
    type: Severity
    messages: tuple[StatusMessage, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _severity_matches_kind(self) -> RequestStatus:
        expected = SEVERITY_BY_KIND[self.status]
        if self.type != expected:
            raise ValueError(
                f"status {self.status.value!r} requires severity {expected.value!r}, got {self.type.value!r}"
            )
        return self

    @classmethod
    def _single(cls, kind: StatusKind, message: str) -> RequestStatus:
        severity = SEVERITY_BY_KIND[kind]
        return cls(status=kind, type=severity, messages=(StatusMessage(type=severity, value=message),))

    @classmethod
    def _from_details(
        cls, kind: StatusKind, details: Iterable[ErrorDetail | Mapping[str, Any]]
    ) -> RequestStatus:
        severity = SEVERITY_BY_KIND[kind]
        messages = tuple(StatusMessage(type=severity, value=_to_detail(d).msg) for d in details)
        return cls(status=kind, type=severity, messages=messages)

    @classmethod
    def loading(cls) -> RequestStatus:
        return cls._single(StatusKind.LOADING, LOADING_MESSAGE)

    @classmethod
    def success(cls) -> RequestStatus:
        return cls._single(StatusKind.SUCCESS, SUCCESS_MESSAGE)

    @classmethod
    def timeout(cls) -> RequestStatus:
        return cls._single(StatusKind.TIMEOUT, TIMEOUT_MESSAGE)

    @classmethod
    def no_area(cls) -> RequestStatus:
        return cls._single(StatusKind.NO_AREA, NO_AREA_MESSAGE)

    @classmethod
    def bad_request(cls, details: Iterable[ErrorDetail | Mapping[str, Any]]) -> RequestStatus:
        """Validation failure; one ``error`` message per detail, in order."""
        return cls._from_details(StatusKind.BAD_REQUEST, details)

    @classmethod
    def server_error(cls, details: Iterable[ErrorDetail | Mapping[str, Any]]) -> RequestStatus:
        """Server-side failure; one ``error`` message per detail, in order."""
        return cls._from_details(StatusKind.SERVER_ERROR, details)

    @property
    def is_error(self) -> bool:
        return self.type == Severity.ERROR
