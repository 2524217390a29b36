from utmgrid._version import __version__  # noqa: F401
from utmgrid.utils.logging import LOGGER
from utmgrid.coordinates import Coordinate, MGRSCoordinate, UTMCoordinate
from utmgrid.conversion import lat_lon_to_mgrs, lat_lon_to_utm, mgrs_to_lat_lon, utm_to_lat_lon
from utmgrid.ellipsoid import Ellipsoid, WGS84
from utmgrid.exceptions import ConversionError, DomainError, FormatError, RangeError


__all__ = [
    'ConversionError',
    'Coordinate',
    'DomainError',
    'Ellipsoid',
    'FormatError',
    'MGRSCoordinate',
    'RangeError',
    'UTMCoordinate',
    'WGS84',
    'lat_lon_to_mgrs',
    'lat_lon_to_utm',
    'mgrs_to_lat_lon',
    'utm_to_lat_lon',
    'LOGGER',
]
