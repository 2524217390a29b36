"""
Constants declarations for utmgrid
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B = (1 - WGS84_F) * WGS84_A

# UTM projection
UTM_SCALE_FACTOR = 0.9996  # k0, on the central meridian
FALSE_EASTING = 500_000.0
FALSE_NORTHING = 10_000_000.0  # Southern hemisphere only
ZONE_WIDTH_DEGREES = 6

# Latitude limits of the UTM grid (beyond these, UPS applies)
UTM_MIN_LATITUDE = -80.
UTM_MAX_LATITUDE = 84.

# MGRS
GRID_SQUARE_METERS = 100_000
ROW_CYCLE_METERS = 2_000_000  # 20 row letters * 100km
OFFSET_DIGITS = 5
