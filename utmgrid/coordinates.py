"""
Representations of a specific point on earth: geographic, UTM, and MGRS
"""

__all__ = ['Coordinate', 'MGRSCoordinate', 'UTMCoordinate']

import math
from typing import Tuple, Union

from utmgrid._const import OFFSET_DIGITS
from utmgrid.exceptions import FormatError, RangeError
from utmgrid.utils.functions import zero_pad


class Coordinate:
    """
    Representation of a geographic coordinate (i.e., a lon/lat pair) in decimal degrees.

    Unlike a general purpose coordinate, values are never wrapped or clamped: latitude
    must fall within [-90, 90] and longitude within [-180, 180).
    """

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
    ):
        lon, lat = float(longitude), float(latitude)
        if not -90 <= lat <= 90 or not -180 <= lon < 180:
            raise RangeError(
                f'Legal ranges: latitude [-90, 90], longitude [-180, 180); '
                f'received latitude {lat}, longitude {lon}'
            )

        self.longitude = lon
        self.latitude = lat

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __repr__(self):
        return f'<Coordinate({self.longitude}, {self.latitude})>'

    @classmethod
    def from_mgrs(cls, mgrs_str: str) -> 'Coordinate':
        """Create a Coordinate object from a MGRS string"""
        return MGRSCoordinate.from_str(mgrs_str).to_coordinate()

    @classmethod
    def from_utm(cls, utm_str: str) -> 'Coordinate':
        """Create a Coordinate object from a UTM string, e.g. '31 N 166021 0'"""
        return UTMCoordinate.from_str(utm_str).to_coordinate()

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude

    def to_mgrs(self) -> str:
        """Convert this coordinate to a MGRS string"""
        return self.to_utm().to_mgrs().to_str()

    def to_utm(self) -> 'UTMCoordinate':
        """Project this coordinate onto its UTM zone"""
        from utmgrid.projection import project

        return project(self.latitude, self.longitude)


class UTMCoordinate:
    """
    A point projected onto a UTM zone.

    Args:
        zone:
            The UTM zone number, 1 through 60

        band:
            The latitude band letter

        easting:
            Meters from the zone's false origin, typically 100,000 to 900,000

        northing:
            Meters from the equator, or from the false northing in the southern hemisphere
    """

    def __init__(self, zone: int, band: str, easting: float, northing: float):
        self.zone = zone
        self.band = band
        self.easting = easting
        self.northing = northing

    def __eq__(self, other):
        if not isinstance(other, UTMCoordinate):
            return False

        return (
            self.zone == other.zone and
            self.band == other.band and
            self.easting == other.easting and
            self.northing == other.northing
        )

    def __hash__(self):
        return hash((self.zone, self.band, self.easting, self.northing))

    def __repr__(self):
        return f'<UTMCoordinate({self.zone}{self.band} {self.easting} {self.northing})>'

    @classmethod
    def from_str(cls, utm_str: str) -> 'UTMCoordinate':
        """
        Parses the canonical "<zone> <band> <easting> <northing>" form. Tokens must be
        separated by exactly one space.

        Args:
            utm_str:
                A UTM string, e.g. '31 N 166021 0'

        Returns:
            UTMCoordinate
        """
        parts = utm_str.split(' ')
        if len(parts) != 4:
            raise FormatError(
                f'Expected 4 space-separated UTM fields, found {len(parts)}: {utm_str!r}'
            )

        zone, band, easting, northing = parts
        if not (zone.isdecimal() and zone.isascii()):
            raise FormatError(f'Invalid UTM zone: {zone!r}')

        if len(band) != 1 or not (band.isalpha() and band.isascii()):
            raise FormatError(f'Invalid UTM latitude band: {band!r}')

        if not (easting.isascii() and northing.isascii()):
            raise FormatError(f'Invalid UTM easting/northing: {easting!r}, {northing!r}')

        try:
            _easting, _northing = float(easting), float(northing)
        except ValueError:
            raise FormatError(f'Invalid UTM easting/northing: {easting!r}, {northing!r}') from None

        if not (math.isfinite(_easting) and math.isfinite(_northing)):
            raise FormatError(f'Invalid UTM easting/northing: {easting!r}, {northing!r}')

        return cls(int(zone), band, _easting, _northing)

    def to_coordinate(self) -> Coordinate:
        """Reverse-project this UTM coordinate to latitude/longitude"""
        from utmgrid.projection import unproject

        return unproject(self.zone, self.band, self.easting, self.northing)

    def to_mgrs(self) -> 'MGRSCoordinate':
        """Compress this UTM coordinate into a MGRS grid reference"""
        from utmgrid.grid import encode

        return encode(self)

    def to_str(self) -> str:
        """
        Renders the canonical text form, with easting and northing truncated
        to whole meters. e.g. '31 N 166021 0'
        """
        return f'{zero_pad(self.zone, 2)} {self.band} {int(self.easting)} {int(self.northing)}'


class MGRSCoordinate:
    """
    A MGRS grid reference: a UTM zone and band, the two letters identifying a 100km
    grid square (the digraph), and 5-digit easting/northing offsets within that square.

    Args:
        zone:
            The UTM zone number, 1 through 60

        band:
            The latitude band letter

        column:
            The easting letter of the digraph

        row:
            The northing letter of the digraph

        easting_offset:
            The 5-digit easting within the grid square, e.g. '66021'

        northing_offset:
            The 5-digit northing within the grid square, e.g. '00000'
    """

    def __init__(
        self,
        zone: int,
        band: str,
        column: str,
        row: str,
        easting_offset: str,
        northing_offset: str,
    ):
        self.zone = zone
        self.band = band
        self.column = column
        self.row = row
        self.easting_offset = easting_offset
        self.northing_offset = northing_offset

    def __eq__(self, other):
        if not isinstance(other, MGRSCoordinate):
            return False

        return self.to_str() == other.to_str()

    def __hash__(self):
        return hash(self.to_str())

    def __repr__(self):
        return f'<MGRSCoordinate({self.to_str()})>'

    @property
    def digraph(self) -> str:
        return self.column + self.row

    @classmethod
    def from_str(cls, mgrs_str: str) -> 'MGRSCoordinate':
        """
        Parses the canonical 15-character form, e.g. '31NAA6602100000'. Spaces are
        removed and letters upper-cased before parsing.

        Args:
            mgrs_str:
                A MGRS string

        Returns:
            MGRSCoordinate
        """
        _mgrs = ''.join(mgrs_str.split()).upper()
        expected_length = 5 + 2 * OFFSET_DIGITS
        if len(_mgrs) != expected_length:
            raise FormatError(
                f'MGRS strings must be {expected_length} characters long, '
                f'found {len(_mgrs)}: {mgrs_str!r}'
            )

        zone, letters = _mgrs[:2], _mgrs[2:5]
        easting_offset, northing_offset = _mgrs[5:5 + OFFSET_DIGITS], _mgrs[5 + OFFSET_DIGITS:]

        if not (zone.isdecimal() and zone.isascii()):
            raise FormatError(f'Invalid MGRS zone: {zone!r}')

        if not (letters.isalpha() and letters.isascii()):
            raise FormatError(f'Invalid MGRS band/grid letters: {letters!r}')

        if not (
            easting_offset.isdecimal() and northing_offset.isdecimal()
            and easting_offset.isascii() and northing_offset.isascii()
        ):
            raise FormatError(
                f'Invalid MGRS offsets: {easting_offset!r}, {northing_offset!r}'
            )

        return cls(int(zone), *letters, easting_offset, northing_offset)

    def to_coordinate(self) -> Coordinate:
        """Decode this grid reference to latitude/longitude"""
        return self.to_utm().to_coordinate()

    def to_str(self) -> str:
        return (
            f'{zero_pad(self.zone, 2)}{self.band}{self.column}{self.row}'
            f'{self.easting_offset}{self.northing_offset}'
        )

    def to_utm(self) -> UTMCoordinate:
        """Recover the full UTM coordinate from this grid reference"""
        from utmgrid.grid import decode

        return decode(self)
