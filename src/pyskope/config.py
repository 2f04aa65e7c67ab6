"""Session configuration for pyskope."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pyskope._constants import DEFAULT_AREA_PER_PIXEL, DEFAULT_GEOMETRY_KEY, DEFAULT_TEMPORAL_RANGE
from pyskope.exceptions import SkopeConfigError


def _env_number(env: Mapping[str, str], key: str, kind: type) -> Any:
    value = env.get(key)
    if value is None:
        return None
    try:
        return kind(value.strip())
    except ValueError as exc:
        raise SkopeConfigError(f"{key} must be a valid {kind.__name__}, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class SkopeConfig:
    """Session configuration.

    Parameters
    ----------
    default_temporal_range : tuple[int, int]
        ``[start_year, end_year]`` used until metadata supplies a period.
    area_per_pixel : float
        Initial area-per-pixel scale factor.
    default_geometry_key : str
        Storage key for the drawn geometry when no dataset is loaded.
    catalog_path : Path or None
        JSON file holding the dataset catalog, if the catalog is file-backed.
    """

    default_temporal_range: tuple[int, int] = DEFAULT_TEMPORAL_RANGE
    area_per_pixel: float = DEFAULT_AREA_PER_PIXEL
    default_geometry_key: str = DEFAULT_GEOMETRY_KEY
    catalog_path: Path | None = None

    def __post_init__(self) -> None:
        if len(self.default_temporal_range) != 2:
            raise SkopeConfigError(
                f"default_temporal_range must hold exactly two years, got {self.default_temporal_range!r}"
            )
        if not self.default_geometry_key:
            raise SkopeConfigError("default_geometry_key must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> SkopeConfig:
        """Create configuration from ``SKOPE_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        SkopeConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "default_temporal_range" not in overrides:
            start = _env_number(env, "SKOPE_DEFAULT_START_YEAR", int)
            end = _env_number(env, "SKOPE_DEFAULT_END_YEAR", int)
            if start is not None or end is not None:
                config_kwargs["default_temporal_range"] = (
                    start if start is not None else DEFAULT_TEMPORAL_RANGE[0],
                    end if end is not None else DEFAULT_TEMPORAL_RANGE[1],
                )

        if "area_per_pixel" not in overrides:
            area_per_pixel = _env_number(env, "SKOPE_AREA_PER_PIXEL", float)
            if area_per_pixel is not None:
                config_kwargs["area_per_pixel"] = area_per_pixel

        geometry_key = env.get("SKOPE_GEOMETRY_KEY")
        if geometry_key is not None:
            config_kwargs["default_geometry_key"] = geometry_key

        catalog_path = env.get("SKOPE_CATALOG_PATH")
        if catalog_path:
            config_kwargs["catalog_path"] = Path(catalog_path)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
