from __future__ import annotations

from pathlib import Path

import pytest

from pyskope.config import SkopeConfig
from pyskope.exceptions import SkopeConfigError

_ENV_KEYS = (
    "SKOPE_DEFAULT_START_YEAR",
    "SKOPE_DEFAULT_END_YEAR",
    "SKOPE_AREA_PER_PIXEL",
    "SKOPE_GEOMETRY_KEY",
    "SKOPE_CATALOG_PATH",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = SkopeConfig.from_env()

    assert config.default_temporal_range == (1, 2000)
    assert config.area_per_pixel == 45.8
    assert config.default_geometry_key == "skope:geometry"
    assert config.catalog_path is None


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKOPE_DEFAULT_START_YEAR", "850")
    monkeypatch.setenv("SKOPE_AREA_PER_PIXEL", "16.5")
    monkeypatch.setenv("SKOPE_GEOMETRY_KEY", "custom:geometry")
    monkeypatch.setenv("SKOPE_CATALOG_PATH", "/srv/skope/catalog.json")

    config = SkopeConfig.from_env()

    assert config.default_temporal_range == (850, 2000)
    assert config.area_per_pixel == 16.5
    assert config.default_geometry_key == "custom:geometry"
    assert config.catalog_path == Path("/srv/skope/catalog.json")


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKOPE_AREA_PER_PIXEL", "16.5")
    monkeypatch.setenv("SKOPE_DEFAULT_END_YEAR", "1950")

    config = SkopeConfig.from_env(area_per_pixel=1.0, default_temporal_range=(1, 3))

    assert config.area_per_pixel == 1.0
    assert config.default_temporal_range == (1, 3)


def test_invalid_number(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKOPE_DEFAULT_END_YEAR", "last year")

    with pytest.raises(SkopeConfigError, match="SKOPE_DEFAULT_END_YEAR"):
        SkopeConfig.from_env()


def test_temporal_range_length_checked() -> None:
    with pytest.raises(SkopeConfigError):
        SkopeConfig(default_temporal_range=(1, 2, 3))  # type: ignore[arg-type]
