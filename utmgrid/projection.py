"""
Forward and inverse transverse Mercator projection onto UTM zones.

Both directions are truncated power series over a fixed reference ellipsoid; every
series coefficient that depends only on the ellipsoid is derived once by
utmgrid.ellipsoid.Ellipsoid. The series helpers are written against numpy ufuncs so
the same code serves single coordinates and whole arrays.
"""

__all__ = [
    'central_meridian', 'project', 'project_many', 'unproject', 'unproject_many',
    'validate', 'zone_for_longitude',
]

import math
from typing import Tuple

import numpy as np

from utmgrid._const import (
    FALSE_EASTING, FALSE_NORTHING, UTM_MAX_LATITUDE, UTM_MIN_LATITUDE, ZONE_WIDTH_DEGREES
)
from utmgrid.bands import (
    BAND_LETTERS, BAND_LOWER_BOUNDS, band_for_latitude, is_southern
)
from utmgrid.coordinates import Coordinate, UTMCoordinate
from utmgrid.ellipsoid import Ellipsoid, WGS84
from utmgrid.exceptions import DomainError, FormatError, RangeError
from utmgrid.utils.logging import warn_once


_POLAR_WARNING = (
    'Latitudes outside the UTM limits [-80, 84) are projected without polar '
    'stereographic (UPS) support; accuracy degrades toward the poles. '
    '(this warning will not repeat)'
)


def validate(latitude: float, longitude: float) -> None:
    """
    Ensures a latitude/longitude pair is within the projectable domain.

    Raises:
        RangeError: latitude is outside [-90, 90] or longitude outside [-180, 180)
    """
    if not -90 <= latitude <= 90 or not -180 <= longitude < 180:
        raise RangeError(
            f'Legal ranges: latitude [-90, 90], longitude [-180, 180); '
            f'received latitude {latitude}, longitude {longitude}'
        )


def zone_for_longitude(longitude: float) -> int:
    """
    Returns the UTM zone number for a longitude in [-180, 180).

    Eastern and western longitudes are bucketed separately (zone 31 starts at the
    prime meridian).
    """
    if longitude < 0.:
        return int(math.floor((180 + longitude) / ZONE_WIDTH_DEGREES)) + 1

    return int(math.floor(longitude / ZONE_WIDTH_DEGREES)) + 31


def central_meridian(zone: int) -> float:
    """
    Returns the longitude of a zone's central meridian, in degrees.

    Raises:
        FormatError: the zone is outside [1, 60]
    """
    if not 1 <= zone <= 60:
        raise FormatError(f'UTM zones are numbered 1 through 60, received {zone}')

    return 6. * zone - 183.


def _forward(lat_deg, lon_deg, cm_deg, ellipsoid: Ellipsoid):
    """
    The forward series. Accepts scalars or numpy arrays.

    Returns:
        easting, northing (northing includes the southern false northing)
    """
    lat = np.radians(lat_deg)
    sin_lat, cos_lat, tan_lat = np.sin(lat), np.cos(lat), np.tan(lat)
    a, e, e1sq, k0, sin1 = (
        ellipsoid.a, ellipsoid.e, ellipsoid.e1sq, ellipsoid.k0, ellipsoid.sin1
    )

    # Radius of curvature in the prime vertical
    nu = a / np.sqrt(1 - (e * sin_lat) ** 2)

    # Longitude offset from the central meridian, in units of 10^4 arc-seconds
    p = (lon_deg - cm_deg) * 3600 / 10000

    # Meridian arc
    s = (
        ellipsoid.A0 * lat
        - ellipsoid.B0 * np.sin(2 * lat)
        + ellipsoid.C0 * np.sin(4 * lat)
        - ellipsoid.D0 * np.sin(6 * lat)
        + ellipsoid.E0 * np.sin(8 * lat)
    )

    k1 = s * k0
    k2 = nu * sin_lat * cos_lat * sin1 ** 2 * k0 * 1e8 / 2
    k3 = (
        sin1 ** 4 * nu * sin_lat * cos_lat ** 3 / 24
        * (5 - tan_lat ** 2 + 9 * e1sq * cos_lat ** 2 + 4 * e1sq ** 2 * cos_lat ** 4)
        * k0 * 1e16
    )
    k4 = nu * cos_lat * sin1 * k0 * 1e4
    k5 = (sin1 * cos_lat) ** 3 * nu / 6 * (1 - tan_lat ** 2 + e1sq * cos_lat ** 2) * k0 * 1e12

    easting = FALSE_EASTING + k4 * p + k5 * p ** 3
    northing = k1 + k2 * p ** 2 + k3 * p ** 4
    northing = np.where(np.asarray(lat_deg) < 0, northing + FALSE_NORTHING, northing)
    return easting, northing


def _inverse(cm_deg, southern, easting, northing, ellipsoid: Ellipsoid):
    """
    The inverse series. Accepts scalars or numpy arrays.

    Returns:
        latitude, longitude (degrees)
    """
    a, e, e1sq, k0 = ellipsoid.a, ellipsoid.e, ellipsoid.e1sq, ellipsoid.k0
    northing = np.where(southern, FALSE_NORTHING - northing, northing)

    # Footpoint latitude
    mu = northing / k0 / ellipsoid.mu_divisor
    phi1 = (
        mu
        + ellipsoid.ca * np.sin(2 * mu)
        + ellipsoid.cb * np.sin(4 * mu)
        + ellipsoid.cc * np.sin(6 * mu)
        + ellipsoid.cd * np.sin(8 * mu)
    )
    sin_phi1, cos_phi1, tan_phi1 = np.sin(phi1), np.cos(phi1), np.tan(phi1)

    # Radii of curvature at the footpoint
    n0 = a / np.sqrt(1 - (e * sin_phi1) ** 2)
    r0 = a * (1 - e * e) / (1 - (e * sin_phi1) ** 2) ** 1.5

    dd0 = (FALSE_EASTING - easting) / (n0 * k0)
    t0 = tan_phi1 ** 2
    q0 = e1sq * cos_phi1 ** 2

    fact1 = n0 * tan_phi1 / r0
    fact2 = dd0 ** 2 / 2
    fact3 = -(5 + 3 * t0 + 10 * q0 - 4 * q0 ** 2 - 9 * e1sq) * dd0 ** 4 / 24
    fact4 = (61 + 90 * t0 + 298 * q0 + 45 * t0 ** 2 - 252 * e1sq - 3 * q0 ** 2) * dd0 ** 6 / 720

    lof1 = dd0
    lof2 = (1 + 2 * t0 + q0) * dd0 ** 3 / 6
    lof3 = (5 - 2 * q0 + 28 * t0 - 3 * q0 ** 2 + 8 * e1sq + 24 * t0 ** 2) * dd0 ** 5 / 120

    latitude = np.degrees(phi1 - fact1 * (fact2 + fact3 + fact4))
    latitude = np.where(southern, -latitude, latitude)
    longitude = cm_deg - np.degrees((lof1 - lof2 + lof3) / cos_phi1)

    # Zones 1 and 60 border the antimeridian
    longitude = np.where(longitude < -180, longitude + 360, longitude)
    longitude = np.where(longitude >= 180, longitude - 360, longitude)
    return latitude, longitude


def project(
    latitude: float,
    longitude: float,
    ellipsoid: Ellipsoid = WGS84
) -> UTMCoordinate:
    """
    Projects a latitude/longitude pair onto its UTM zone.

    Args:
        latitude:
            Latitude in decimal degrees, [-90, 90]

        longitude:
            Longitude in decimal degrees, [-180, 180)

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        UTMCoordinate, with floating point easting and northing
    """
    validate(latitude, longitude)
    if not UTM_MIN_LATITUDE <= latitude < UTM_MAX_LATITUDE:
        warn_once(_POLAR_WARNING)

    zone = zone_for_longitude(longitude)
    easting, northing = _forward(latitude, longitude, central_meridian(zone), ellipsoid)

    return UTMCoordinate(
        zone,
        band_for_latitude(latitude),
        float(easting),
        float(northing),
    )


def unproject(
    zone: int,
    band: str,
    easting: float,
    northing: float,
    ellipsoid: Ellipsoid = WGS84
) -> Coordinate:
    """
    Converts a UTM coordinate back to latitude/longitude.

    Args:
        zone:
            The UTM zone number, 1 through 60

        band:
            The latitude band letter; only its hemisphere is used

        easting:
            Easting in meters

        northing:
            Northing in meters, hemisphere-relative

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        Coordinate
    """
    if not 0 <= northing <= FALSE_NORTHING:
        raise DomainError(
            f'UTM northing must be within [0, {FALSE_NORTHING:.0f}], received {northing}'
        )

    cm = central_meridian(zone)
    latitude, longitude = _inverse(cm, is_southern(band), easting, northing, ellipsoid)
    if not (-90 <= latitude <= 90 and -180 <= longitude < 180):
        raise DomainError(
            f'UTM coordinate {zone}{band} {easting} {northing} does not fall on the ellipsoid'
        )

    return Coordinate(float(longitude), float(latitude))


def project_many(
    latitudes,
    longitudes,
    ellipsoid: Ellipsoid = WGS84
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Projects arrays of latitudes/longitudes. Equivalent to calling project() for
    each pair.

    Args:
        latitudes:
            An array-like of latitudes, in decimal degrees

        longitudes:
            An array-like of longitudes, in decimal degrees, broadcastable
            against latitudes

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        zones, bands, eastings, northings as numpy arrays
    """
    lats, lons = np.broadcast_arrays(
        np.asarray(latitudes, dtype=float), np.asarray(longitudes, dtype=float)
    )
    if not (np.all((lats >= -90) & (lats <= 90)) and np.all((lons >= -180) & (lons < 180))):
        raise RangeError('Legal ranges: latitude [-90, 90], longitude [-180, 180).')

    if np.any((lats < UTM_MIN_LATITUDE) | (lats >= UTM_MAX_LATITUDE)):
        warn_once(_POLAR_WARNING)

    zones = np.where(
        lons < 0,
        np.floor((180 + lons) / ZONE_WIDTH_DEGREES) + 1,
        np.floor(lons / ZONE_WIDTH_DEGREES) + 31,
    ).astype(int)

    band_index = np.searchsorted(BAND_LOWER_BOUNDS, lats, side='right') - 1
    bands = np.array(list(BAND_LETTERS))[band_index]

    eastings, northings = _forward(lats, lons, 6. * zones - 183., ellipsoid)
    return zones, bands, np.asarray(eastings), np.asarray(northings)


def unproject_many(
    zones,
    bands,
    eastings,
    northings,
    ellipsoid: Ellipsoid = WGS84
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Converts arrays of UTM coordinates back to latitude/longitude. Equivalent to
    calling unproject() for each element.

    Args:
        zones:
            An array-like of zone numbers

        bands:
            An array-like of band letters

        eastings:
            An array-like of eastings, in meters

        northings:
            An array-like of northings, in meters

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        latitudes, longitudes as numpy arrays
    """
    zones = np.asarray(zones)
    if not np.all((zones >= 1) & (zones <= 60)):
        raise FormatError('UTM zones are numbered 1 through 60.')

    northings = np.asarray(northings, dtype=float)
    if not np.all((northings >= 0) & (northings <= FALSE_NORTHING)):
        raise DomainError(f'UTM northings must be within [0, {FALSE_NORTHING:.0f}].')

    southern = np.array([is_southern(band) for band in np.ravel(bands)]).reshape(np.shape(bands))
    latitudes, longitudes = _inverse(
        6. * zones - 183.,
        southern,
        np.asarray(eastings, dtype=float),
        northings,
        ellipsoid
    )
    in_domain = (
        (latitudes >= -90) & (latitudes <= 90) & (longitudes >= -180) & (longitudes < 180)
    )
    if not np.all(in_domain):
        raise DomainError('UTM coordinates do not all fall on the ellipsoid.')

    return np.asarray(latitudes), np.asarray(longitudes)
