"""Internal constants shared across the library."""

DEFAULT_TEMPORAL_RANGE: tuple[int, int] = (1, 2000)
DEFAULT_AREA_PER_PIXEL = 45.8
DEFAULT_GEOMETRY_KEY = "skope:geometry"
GEOMETRY_KEY_PREFIX = "geojson:"

# WGS84 equatorial radius in meters, used for spherical ring area.
EARTH_RADIUS_M = 6378137.0
SQUARE_METERS_PER_SQUARE_KM = 1_000_000.0

# ------------------------------------------------------------------
# Summary statistics placeholders
# ------------------------------------------------------------------

# TODO: replace with statistics computed server-side for the selected
# study area once the time-series endpoint returns them.
PLACEHOLDER_NUMBER_OF_PIXELS = 42
PLACEHOLDER_MEAN = 24.5
PLACEHOLDER_MEDIAN = 13
PLACEHOLDER_STD_DEV = 36.2
