"""Time-series payload model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TimeSeries(BaseModel):
    """Ordered ``x``/``y`` sequences returned by the time-series endpoint.

    ``x`` usually holds years but may hold labels.  The two sequences are
    kept as received; no alignment check is made.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    x: tuple[float | int | str, ...] = Field(default_factory=tuple)
    y: tuple[float | None, ...] = Field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.x and not self.y

    def __len__(self) -> int:
        return len(self.y)
