"""Dataset catalog record models."""

from __future__ import annotations

from pydantic import Field, field_validator, model_validator

from pyskope.models._base import SkopeBaseModel, parse_year


class Variable(SkopeBaseModel):
    """One selectable measured quantity within a dataset.

    ``visible`` is the catalog's own flag.  The session never mutates it;
    :attr:`pyskope.state.DatasetSession.variables` reports a copy with
    ``visible`` reflecting the current selection.
    """

    id: str
    name: str | None = None
    units: str | None = None
    description: str | None = None
    visible: bool = False

    @field_validator("id")
    @classmethod
    def _id_non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("variable id must be non-empty")
        return value


class Period(SkopeBaseModel):
    """Inclusive time period of a dataset (``gte`` .. ``lte``)."""

    gte: str
    lte: str
    time_zero: int | None = None

    @field_validator("gte", "lte", mode="before")
    @classmethod
    def _coerce_str(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("gte", "lte")
    @classmethod
    def _has_year(cls, value: str) -> str:
        parse_year(value)
        return value

    @model_validator(mode="after")
    def _ordered(self) -> Period:
        if self.start_year > self.end_year:
            raise ValueError(f"period starts in {self.start_year} after it ends in {self.end_year}")
        return self

    @property
    def start_year(self) -> int:
        return parse_year(self.gte)

    @property
    def end_year(self) -> int:
        return parse_year(self.lte)


class Timespan(SkopeBaseModel):
    period: Period
    resolution: str | None = None


class DatasetMetadata(SkopeBaseModel):
    """Catalog entry describing one dataset.

    Parameters
    ----------
    id : str
        Catalog key, matched exactly by :class:`pyskope.catalog.DatasetCatalog`.
    name : str or None
        Display name.
    description : str or None
        Free-form description.
    timespan : Timespan
        Time period covered by the dataset.
    variables : tuple[Variable, ...]
        Variables in catalog order.  Immutable; selection is tracked by
        index on the session.
    raw : dict
        Original catalog record.
    """

    id: str
    name: str | None = None
    description: str | None = None
    timespan: Timespan
    variables: tuple[Variable, ...] = Field(default_factory=tuple)

    @field_validator("id")
    @classmethod
    def _id_non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("dataset id must be non-empty")
        return value

    @property
    def temporal_range(self) -> list[int]:
        """``[start_year, end_year]`` parsed from the period bounds."""
        period = self.timespan.period
        return [period.start_year, period.end_year]
