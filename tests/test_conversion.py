import numpy as np
import pytest

from utmgrid.conversion import *
from utmgrid.exceptions import ConversionError, DomainError, FormatError, RangeError

from tests.functions import assert_lat_lon_equal


_GRID = [
    (lat, lon)
    for lat in np.linspace(-79.95, 83.95, 29)
    for lon in np.linspace(-179.95, 179.95, 25)
]


def test_lat_lon_to_utm():
    assert lat_lon_to_utm(0.0, 0.0) == '31 N 166021 0'
    assert lat_lon_to_utm(0.0, 3.0) == '31 N 500000 0'
    assert lat_lon_to_utm(45.0, 3.0).startswith('31 T 500000 ')

    zone, band, easting, northing = lat_lon_to_utm(-33.9, 151.2).split(' ')
    assert (zone, band) == ('56', 'H')
    assert 100_000 < int(easting) < 900_000
    assert 0 < int(northing) < 10_000_000


def test_lat_lon_to_utm_zone_monotonic():
    assert lat_lon_to_utm(10., 5.999).split(' ')[0] == '31'
    assert lat_lon_to_utm(10., 6.001).split(' ')[0] == '32'

    zones = [int(lat_lon_to_utm(10., lon).split(' ')[0]) for lon in np.arange(-180., 180., 0.5)]
    assert zones == sorted(zones)
    assert zones[0] == 1
    assert zones[-1] == 60


def test_lat_lon_to_utm_rejects():
    with pytest.raises(RangeError):
        _ = lat_lon_to_utm(91.0, 0.0)

    with pytest.raises(RangeError):
        _ = lat_lon_to_utm(0.0, 180.0)

    with pytest.raises(ValueError):
        _ = lat_lon_to_utm(-91.0, 0.0)


def test_utm_to_lat_lon():
    assert_lat_lon_equal(utm_to_lat_lon('31 N 500000 0'), (0., 3.))
    assert_lat_lon_equal(utm_to_lat_lon('31 N 166021 0'), (0., 0.), abs_tol=1e-4)

    with pytest.raises(FormatError):
        _ = utm_to_lat_lon('31 N 166021')

    with pytest.raises(FormatError):
        # The legacy zone 0 fallback is not supported
        _ = utm_to_lat_lon('00 N 500000 0')

    with pytest.raises(FormatError):
        _ = utm_to_lat_lon('61 N 500000 0')

    with pytest.raises(DomainError):
        _ = utm_to_lat_lon('31 I 500000 0')

    with pytest.raises(DomainError):
        # Far outside the zone, the longitude leaves [-180, 180)
        _ = utm_to_lat_lon('31 N -1e9 0')

    with pytest.raises(DomainError):
        _ = utm_to_lat_lon('31 N 500000 -5000000')


def test_utm_round_trip():
    for lat, lon in _GRID:
        assert_lat_lon_equal(utm_to_lat_lon(lat_lon_to_utm(lat, lon)), (lat, lon), abs_tol=1e-4)


def test_utm_round_trip_equator():
    # Either side of the equator the band changes hemisphere
    for lat in (-0.0001, -0.00001, 0., 0.00001, 0.0001):
        assert_lat_lon_equal(utm_to_lat_lon(lat_lon_to_utm(lat, 7.2)), (lat, 7.2), abs_tol=1e-4)

    assert lat_lon_to_utm(-0.00001, 9.).split(' ')[1] == 'M'
    assert lat_lon_to_utm(0., 9.).split(' ')[1] == 'N'

    # Latitudes that round onto the equator from the south keep band M
    assert lat_lon_to_mgrs(-1e-300, 0.0) == '31MAA6602100000'
    assert_lat_lon_equal(mgrs_to_lat_lon(lat_lon_to_mgrs(-1e-300, 0.0)), (0., 0.), abs_tol=1e-4)
    assert_lat_lon_equal(mgrs_to_lat_lon(lat_lon_to_mgrs(-1e-9, 7.2)), (0., 7.2), abs_tol=1e-4)


def test_lat_lon_to_mgrs():
    assert lat_lon_to_mgrs(0.0, 0.0) == '31NAA6602100000'

    mgrs = lat_lon_to_mgrs(-33.9, 151.2)
    assert len(mgrs) == 15
    assert mgrs[:3] == '56H'
    assert mgrs[5:].isdigit()

    # Single digit zones are zero padded
    assert lat_lon_to_mgrs(19.5, -155.5)[:3] == '05Q'

    with pytest.raises(RangeError):
        _ = lat_lon_to_mgrs(0.0, 180.0)


def test_mgrs_to_lat_lon():
    assert_lat_lon_equal(mgrs_to_lat_lon('31NAA6602100000'), (0., 0.), abs_tol=1e-4)

    with pytest.raises(FormatError):
        _ = mgrs_to_lat_lon('bad')

    with pytest.raises(DomainError):
        _ = mgrs_to_lat_lon('31NJA6602100000')

    with pytest.raises(FormatError):
        _ = mgrs_to_lat_lon('31NIA6602100000')

    with pytest.raises(ConversionError):
        _ = mgrs_to_lat_lon('31NAA66021')


def test_mgrs_round_trip():
    for lat, lon in _GRID:
        assert_lat_lon_equal(mgrs_to_lat_lon(lat_lon_to_mgrs(lat, lon)), (lat, lon), abs_tol=1e-3)
