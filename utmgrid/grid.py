"""
Module for MGRS grid references.

A MGRS reference compresses a UTM coordinate into its zone and band, a two letter
identifier of the 100km grid square it falls in (the digraph), and the easting and
northing offsets within that square. Column letters cycle every three zones, row
letters every two.
"""

__all__ = [
    'COLUMN_LETTERS', 'ROW_LETTERS',
    'column_letter', 'decode', 'encode', 'from_mgrs', 'row_letter', 'to_mgrs',
]

import math
from typing import Tuple

from utmgrid._const import (
    FALSE_NORTHING, GRID_SQUARE_METERS, OFFSET_DIGITS, ROW_CYCLE_METERS
)
from utmgrid.bands import degrees_for_band, is_southern
from utmgrid.coordinates import MGRSCoordinate, UTMCoordinate
from utmgrid.exceptions import DomainError, FormatError
from utmgrid.utils.functions import zero_pad


# A-Z, excluding I and O
COLUMN_LETTERS = 'ABCDEFGHJKLMNPQRSTUVWXYZ'

# A-V, excluding I and O. Position 0 holds V so that the first row of an odd
# zone (northing 0) is A.
ROW_LETTERS = 'VABCDEFGHJKLMNPQRSTU'

# 100km easting index of the first column letter, keyed by zone % 3
_COLUMN_BASE = (16, 0, 8)

# Nominal meters per degree of latitude, used to anchor a row letter to its band
_METERS_PER_DEGREE = 40_000_000 / 360

# The nominal band anchor overestimates the true northing of the band's southern
# edge by up to ~20km; grid squares starting within this distance below it still
# belong to the band.
_ANCHOR_TOLERANCE = 200_000


def _validate_zone(zone: int) -> None:
    if not 1 <= zone <= 60:
        raise FormatError(f'UTM zones are numbered 1 through 60, received {zone}')


def column_letter(zone: int, easting: float) -> str:
    """
    Returns the column (easting) letter of the 100km grid square.

    Args:
        zone:
            The UTM zone number

        easting:
            The full UTM easting, in meters

    Returns:
        str
    """
    _validate_zone(zone)
    index = 8 * ((zone - 1) % 3) + math.floor(easting / GRID_SQUARE_METERS) - 1
    return COLUMN_LETTERS[index % len(COLUMN_LETTERS)]


def row_letter(zone: int, northing: float) -> str:
    """
    Returns the row (northing) letter of the 100km grid square.

    Args:
        zone:
            The UTM zone number

        northing:
            The full UTM northing, in meters

    Returns:
        str
    """
    _validate_zone(zone)
    # Python's modulo wraps negative indexes into the cycle
    index = 1 + 5 * ((zone - 1) % 2) + math.floor(northing / GRID_SQUARE_METERS)
    return ROW_LETTERS[index % len(ROW_LETTERS)]


def encode(utm: UTMCoordinate) -> MGRSCoordinate:
    """
    Compresses a UTM coordinate into a MGRS grid reference. Easting and northing are
    truncated to whole meters.

    Args:
        utm:
            A UTMCoordinate

    Returns:
        MGRSCoordinate
    """
    return MGRSCoordinate(
        utm.zone,
        utm.band,
        column_letter(utm.zone, utm.easting),
        row_letter(utm.zone, utm.northing),
        zero_pad(int(utm.easting) % GRID_SQUARE_METERS, OFFSET_DIGITS),
        zero_pad(int(utm.northing) % GRID_SQUARE_METERS, OFFSET_DIGITS),
    )


def _grid_square_easting(zone: int, column: str) -> int:
    """The easting of the grid square's western edge, in meters"""
    position = COLUMN_LETTERS.find(column)
    if position < 0 or len(column) != 1:
        raise FormatError(f'Unrecognized MGRS column letter: {column!r}')

    index = (position - _COLUMN_BASE[zone % 3]) % len(COLUMN_LETTERS) + 1
    if index > 8:
        raise DomainError(f'Column letter {column!r} is not used by UTM zone {zone}')

    return index * GRID_SQUARE_METERS


def _grid_square_northing(zone: int, band: str, row: str) -> int:
    """The northing of the grid square's southern edge, in meters"""
    position = ROW_LETTERS.find(row)
    if position < 0 or len(row) != 1:
        raise FormatError(f'Unrecognized MGRS row letter: {row!r}')

    start = 1 if zone % 2 else 6
    row_index = (position - start) % len(ROW_LETTERS)

    # Anchor to the band's southern edge, then find the row cycle it falls in
    anchor = degrees_for_band(band) * _METERS_PER_DEGREE
    southern = is_southern(band)
    if southern:
        anchor += FALSE_NORTHING

    northing = ROW_CYCLE_METERS * math.floor(anchor / ROW_CYCLE_METERS)
    northing += row_index * GRID_SQUARE_METERS
    if northing < anchor - _ANCHOR_TOLERANCE:
        northing += ROW_CYCLE_METERS
    elif northing >= anchor - _ANCHOR_TOLERANCE + ROW_CYCLE_METERS:
        northing -= ROW_CYCLE_METERS

    # The southern false northing itself is the equator, reached by band M
    # latitudes that round to zero
    in_range = 0 <= northing <= FALSE_NORTHING if southern else 0 <= northing < FALSE_NORTHING
    if not in_range:
        raise DomainError(f'Row letter {row!r} does not occur in latitude band {band!r}')

    return northing


def decode(mgrs: MGRSCoordinate) -> UTMCoordinate:
    """
    Recovers the full UTM coordinate of a MGRS grid reference.

    Args:
        mgrs:
            A MGRSCoordinate

    Returns:
        UTMCoordinate
    """
    _validate_zone(mgrs.zone)
    easting = _grid_square_easting(mgrs.zone, mgrs.column) + int(mgrs.easting_offset)
    northing = _grid_square_northing(mgrs.zone, mgrs.band, mgrs.row) + int(mgrs.northing_offset)

    return UTMCoordinate(mgrs.zone, mgrs.band, float(easting), float(northing))


def to_mgrs(zone: int, band: str, easting: float, northing: float) -> str:
    """Renders a UTM coordinate as a 15 character MGRS string"""
    return encode(UTMCoordinate(zone, band, easting, northing)).to_str()


def from_mgrs(mgrs_str: str) -> Tuple[int, str, float, float]:
    """
    Parses a MGRS string into its full UTM components.

    Args:
        mgrs_str:
            A MGRS string, e.g. '31NAA6602100000'

    Returns:
        zone, band, easting, northing
    """
    utm = decode(MGRSCoordinate.from_str(mgrs_str))
    return utm.zone, utm.band, utm.easting, utm.northing
