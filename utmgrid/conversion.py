"""
Module for converting between latitude/longitude, UTM, and MGRS text
"""
__all__ = ['lat_lon_to_mgrs', 'lat_lon_to_utm', 'mgrs_to_lat_lon', 'utm_to_lat_lon']

from typing import Tuple

from utmgrid.coordinates import MGRSCoordinate, UTMCoordinate
from utmgrid.grid import decode, encode
from utmgrid.projection import project, unproject


def lat_lon_to_utm(latitude: float, longitude: float) -> str:
    """
    Converts a latitude/longitude pair to UTM.

    Args:
        latitude (float): Latitude in decimal degrees, [-90, 90]
        longitude (float): Longitude in decimal degrees, [-180, 180)

    Returns:
        str: "<zone> <band> <easting> <northing>", e.g. '31 N 166021 0'
    """
    return project(latitude, longitude).to_str()


def utm_to_lat_lon(utm: str) -> Tuple[float, float]:
    """
    Converts a UTM string to a latitude/longitude pair.

    Args:
        utm (str): "<zone> <band> <easting> <northing>", separated by single spaces

    Returns:
        Tuple[float, float]: latitude, longitude
    """
    _utm = UTMCoordinate.from_str(utm)
    return unproject(_utm.zone, _utm.band, _utm.easting, _utm.northing).to_float(reverse=True)


def lat_lon_to_mgrs(latitude: float, longitude: float) -> str:
    """
    Converts a latitude/longitude pair to a MGRS grid reference.

    Args:
        latitude (float): Latitude in decimal degrees, [-90, 90]
        longitude (float): Longitude in decimal degrees, [-180, 180)

    Returns:
        str: the 15 character grid reference, e.g. '31NAA6602100000'
    """
    return encode(project(latitude, longitude)).to_str()


def mgrs_to_lat_lon(mgrs: str) -> Tuple[float, float]:
    """
    Converts a MGRS grid reference to a latitude/longitude pair. The result is the
    southwest corner of the 1 meter square the reference identifies.

    Args:
        mgrs (str): a 15 character grid reference

    Returns:
        Tuple[float, float]: latitude, longitude
    """
    _utm = decode(MGRSCoordinate.from_str(mgrs))
    return unproject(_utm.zone, _utm.band, _utm.easting, _utm.northing).to_float(reverse=True)
