"""Base model for catalog records and wire payloads.

Every pyskope model that parses external data inherits from
:class:`SkopeBaseModel`, which provides:

* ``alias_generator=to_camel`` so camelCase catalog keys
  (``timeZero``, ``datasetId``) map to snake_case fields.
* ``populate_by_name`` so tests and callers can use either spelling.
* A ``raw`` dict that captures the original record.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from pyskope.exceptions import SkopeValidationError

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_year(value: Any) -> int:
    """Parse the leading integer of *value*, the way catalog periods are read.

    ``"2000"`` -> 2000, ``"0001-01-01"`` -> 1, ``1850`` -> 1850.

    Raises :class:`SkopeValidationError` when no integer prefix exists.
    """
    if isinstance(value, bool):
        raise SkopeValidationError(f"year must be numeric, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = _LEADING_INT.match(str(value))
    if match is None:
        raise SkopeValidationError(f"cannot parse a year from {value!r}")
    return int(match.group(1))


class SkopeBaseModel(BaseModel):
    """Base for frozen models parsed from catalog or server payloads."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)
    """Original record dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        """Keep the original payload unless the caller supplied ``raw``."""
        if not isinstance(values, dict):
            return values
        if "raw" in values:
            return values
        stashed = dict(values)
        stashed["raw"] = dict(values)
        return stashed
