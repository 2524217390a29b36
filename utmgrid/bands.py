"""
Latitude band letters of the UTM/MGRS grid
"""

__all__ = [
    'BAND_LETTERS', 'BAND_LOWER_BOUNDS', 'NORTHERN_BANDS', 'SOUTHERN_BANDS',
    'band_for_latitude', 'degrees_for_band', 'hemisphere_for_band', 'is_southern',
]

from typing import Dict, Tuple

from utmgrid.exceptions import DomainError


# (letter, lower bound in degrees), ordered south to north. A and Z are the polar
# edge bands; X is 12 degrees wide.
_BAND_TABLE: Tuple[Tuple[str, int], ...] = (
    ('A', -90),
    ('C', -80),
    ('D', -72),
    ('E', -64),
    ('F', -56),
    ('G', -48),
    ('H', -40),
    ('J', -32),
    ('K', -24),
    ('L', -16),
    ('M', -8),
    ('N', 0),
    ('P', 8),
    ('Q', 16),
    ('R', 24),
    ('S', 32),
    ('T', 40),
    ('U', 48),
    ('V', 56),
    ('W', 64),
    ('X', 72),
    ('Z', 84),
)

_BAND_DEGREES: Dict[str, int] = dict(_BAND_TABLE)

BAND_LETTERS = ''.join(letter for letter, _ in _BAND_TABLE)
BAND_LOWER_BOUNDS: Tuple[int, ...] = tuple(degrees for _, degrees in _BAND_TABLE)

SOUTHERN_BANDS = 'ACDEFGHJKLM'
NORTHERN_BANDS = 'NPQRSTUVWXZ'


def band_for_latitude(latitude: float) -> str:
    """
    Find the band letter for a latitude, i.e. the band with the greatest lower
    bound that does not exceed the latitude.

    Args:
        latitude:
            A latitude in [-90, 90]

    Returns:
        str, a single band letter
    """
    band = _BAND_TABLE[0][0]
    for letter, lower_bound in _BAND_TABLE:
        if lower_bound > latitude:
            break
        band = letter

    return band


def degrees_for_band(letter: str) -> int:
    """Returns the lower latitude bound of a band letter"""
    try:
        return _BAND_DEGREES[letter]
    except KeyError:
        raise DomainError(f'Unrecognized latitude band: {letter!r}') from None


def hemisphere_for_band(letter: str) -> str:
    """Returns 'S' for southern hemisphere bands, 'N' for northern ones"""
    if len(letter) == 1 and letter in SOUTHERN_BANDS:
        return 'S'

    if len(letter) == 1 and letter in NORTHERN_BANDS:
        return 'N'

    raise DomainError(f'Unrecognized latitude band: {letter!r}')


def is_southern(letter: str) -> bool:
    return hemisphere_for_band(letter) == 'S'
