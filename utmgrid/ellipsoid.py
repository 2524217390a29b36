"""
Reference ellipsoid and the transverse Mercator series coefficients derived from it
"""

__all__ = ['Ellipsoid', 'WGS84']

import math

from utmgrid._const import UTM_SCALE_FACTOR, WGS84_A, WGS84_B


class Ellipsoid:
    """
    An ellipsoid of revolution, along with every coefficient the UTM series
    expansions need. Coefficients are derived once, at construction.

    Args:
        a:
            The semi-major (equatorial) axis, in meters

        b:
            The semi-minor (polar) axis, in meters

        k0: (Default 0.9996)
            The scale factor along the central meridian
    """

    def __init__(self, a: float, b: float, k0: float = UTM_SCALE_FACTOR):
        if not 0 < b <= a:
            raise ValueError('Ellipsoid axes must satisfy 0 < b <= a.')

        self.a = a
        self.b = b
        self.k0 = k0
        self.f = (a - b) / a

        # First eccentricity and second eccentricity squared
        self.e = math.sqrt(1 - (b / a) ** 2)
        self.e1sq = self.e ** 2 / (1 - self.e ** 2)

        # Sine of one arc-second; longitude offsets are carried in units of 10^4 seconds
        self.sin1 = math.sin(math.pi / 648_000)

        # Meridian arc coefficients (forward)
        n = (a - b) / (a + b)
        self.n = n
        self.A0 = a * (1 - n + 5 / 4 * (n ** 2 - n ** 3) + 81 / 64 * (n ** 4 - n ** 5))
        self.B0 = 3 / 2 * a * n * (1 - n + 7 / 8 * (n ** 2 - n ** 3) + 55 / 64 * (n ** 4 - n ** 5))
        self.C0 = 15 / 16 * a * n ** 2 * (1 - n + 3 / 4 * (n ** 2 - n ** 3))
        self.D0 = 35 / 48 * a * n ** 3 * (1 - n + 11 / 16 * (n ** 2 - n ** 3))
        self.E0 = 315 / 512 * a * n ** 4 * (1 - n)

        # Footpoint latitude coefficients (inverse)
        e2 = self.e ** 2
        self.mu_divisor = a * (1 - e2 / 4 - 3 * e2 ** 2 / 64 - 5 * e2 ** 3 / 256)
        root = math.sqrt(1 - e2)
        ei = (1 - root) / (1 + root)
        self.ei = ei
        self.ca = 3 * ei / 2 - 27 * ei ** 3 / 32
        self.cb = 21 * ei ** 2 / 16 - 55 * ei ** 4 / 32
        self.cc = 151 * ei ** 3 / 96
        self.cd = 1097 * ei ** 4 / 512

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (self.a, self.b, self.k0) == (other.a, other.b, other.k0)

    def __hash__(self):
        return hash((self.a, self.b, self.k0))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, b={self.b}, k0={self.k0})>'


WGS84 = Ellipsoid(WGS84_A, WGS84_B)
