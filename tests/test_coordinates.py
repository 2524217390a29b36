import pytest

from utmgrid import Coordinate, MGRSCoordinate, UTMCoordinate
from utmgrid.exceptions import DomainError, FormatError, RangeError

from tests.functions import assert_coordinates_equal


def test_coordinate_init():
    c = Coordinate(0., 1.)
    assert c.longitude == 0.
    assert c.latitude == 1.

    c = Coordinate('0.0', '1.0')
    assert c.longitude == 0.
    assert c.latitude == 1.

    # Out of range values are rejected, never wrapped
    for lon, lat in ((181., 0.), (180., 0.), (-180.1, 0.), (0., 91.), (0., -90.5)):
        with pytest.raises(RangeError):
            _ = Coordinate(lon, lat)

    assert Coordinate(-180., -90.).to_float() == (-180., -90.)


def test_coordinate_hash():
    coords = [
        Coordinate(0., 0.),
        Coordinate(0., 0.),
        Coordinate(1., 1.)
    ]
    assert len(set(coords)) == 2
    assert Coordinate(0., 0.) in set(coords)
    assert Coordinate(1., 1.) in set(coords)


def test_coordinate_eq():
    assert Coordinate(0., 0.) == Coordinate(0., 0.)
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(0., 0.) != (0., 0.)


def test_coordinate_repr():
    assert repr(Coordinate(0., 1.)) == '<Coordinate(0.0, 1.0)>'


def test_coordinate_to_float():
    assert Coordinate(0., 1.).to_float() == (0.0, 1.0)
    assert Coordinate(0., 1.).to_float(reverse=True) == (1.0, 0.0)


def test_coordinate_to_utm():
    utm = Coordinate(0., 0.).to_utm()
    assert utm.to_str() == '31 N 166021 0'


def test_coordinate_from_utm():
    assert_coordinates_equal(
        Coordinate.from_utm('31 N 166021 0'),
        Coordinate(0., 0.),
        abs_tol=1e-4
    )


def test_coordinate_to_mgrs():
    assert Coordinate(0., 0.).to_mgrs() == '31NAA6602100000'


def test_coordinate_from_mgrs():
    assert [round(x, 5) for x in Coordinate.from_mgrs('31NAA6602100000').to_float()] == [0., 0.]


def test_utm_coordinate_from_str():
    utm = UTMCoordinate.from_str('31 N 166021 0')
    assert utm.zone == 31
    assert utm.band == 'N'
    assert utm.easting == 166021.
    assert utm.northing == 0.

    assert UTMCoordinate.from_str('05 Q 612345 2345678') == UTMCoordinate(5, 'Q', 612345., 2345678.)

    for bad in (
        '31 N 166021',
        '31 N 166021 0 0',
        '31  N 166021 0',
        '31 N 166021 0 ',
        '31\tN 166021 0',
        'x1 N 166021 0',
        '-1 N 166021 0',
        '31 NN 166021 0',
        '31 3 166021 0',
        '31 N east 0',
        '31 N 166021 nan',
        '3\uff11 N 166021 0',
        '31 N 166021 \uff10',
        '',
    ):
        with pytest.raises(FormatError):
            _ = UTMCoordinate.from_str(bad)


def test_utm_coordinate_to_str():
    assert UTMCoordinate(31, 'N', 166021.44, 0.).to_str() == '31 N 166021 0'
    assert UTMCoordinate(5, 'Q', 612345.9, 2345678.9).to_str() == '05 Q 612345 2345678'


def test_utm_coordinate_eq():
    assert UTMCoordinate(31, 'N', 1., 2.) == UTMCoordinate(31, 'N', 1., 2.)
    assert UTMCoordinate(31, 'N', 1., 2.) != UTMCoordinate(32, 'N', 1., 2.)
    assert UTMCoordinate(31, 'N', 1., 2.) != '31 N 1 2'
    assert len({UTMCoordinate(31, 'N', 1., 2.), UTMCoordinate(31, 'N', 1., 2.)}) == 1


def test_utm_coordinate_repr():
    assert repr(UTMCoordinate(31, 'N', 1., 2.)) == '<UTMCoordinate(31N 1.0 2.0)>'


def test_utm_coordinate_conversions():
    utm = UTMCoordinate(31, 'N', 166021., 0.)
    assert utm.to_mgrs() == MGRSCoordinate(31, 'N', 'A', 'A', '66021', '00000')
    assert_coordinates_equal(utm.to_coordinate(), Coordinate(0., 0.), abs_tol=1e-4)

    with pytest.raises(DomainError):
        _ = UTMCoordinate(31, 'O', 166021., 0.).to_coordinate()


def test_mgrs_coordinate_from_str():
    mgrs = MGRSCoordinate.from_str('31NAA6602100000')
    assert mgrs.zone == 31
    assert mgrs.band == 'N'
    assert mgrs.column == 'A'
    assert mgrs.row == 'A'
    assert mgrs.digraph == 'AA'
    assert mgrs.easting_offset == '66021'
    assert mgrs.northing_offset == '00000'

    # Whitespace and case are normalized
    assert MGRSCoordinate.from_str('31N AA 66021 00000') == mgrs
    assert MGRSCoordinate.from_str('31naa6602100000') == mgrs

    for bad in (
        'bad',
        '',
        '31NAA660210000',
        '31NAA66021000000',
        '3XNAA6602100000',
        '31N1A6602100000',
        '31NAA66O2100000',
        '31NAA66021-0000',
        '3\uff11NAA6602100000',
        '31NAA66021\uff100000',
    ):
        with pytest.raises(FormatError):
            _ = MGRSCoordinate.from_str(bad)


def test_mgrs_coordinate_to_str():
    assert MGRSCoordinate(5, 'Q', 'P', 'D', '12345', '45678').to_str() == '05QPD1234545678'


def test_mgrs_coordinate_eq():
    mgrs = MGRSCoordinate(31, 'N', 'A', 'A', '66021', '00000')
    assert mgrs == MGRSCoordinate.from_str('31NAA6602100000')
    assert mgrs != MGRSCoordinate(31, 'N', 'A', 'B', '66021', '00000')
    assert mgrs != '31NAA6602100000'
    assert len({mgrs, MGRSCoordinate.from_str('31NAA6602100000')}) == 1


def test_mgrs_coordinate_repr():
    assert repr(MGRSCoordinate(31, 'N', 'A', 'A', '66021', '00000')) == '<MGRSCoordinate(31NAA6602100000)>'


def test_mgrs_coordinate_conversions():
    mgrs = MGRSCoordinate.from_str('31NAA6602100000')
    assert mgrs.to_utm() == UTMCoordinate(31, 'N', 166021., 0.)
    assert_coordinates_equal(mgrs.to_coordinate(), Coordinate(0., 0.), abs_tol=1e-4)
