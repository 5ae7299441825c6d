#!/usr/bin/env python3
"""Test suite for the reference ellipsoid model"""

import dataclasses
import unittest
import numpy as np
from pygeocoord.coordinate.ellipsoid import Ellipsoid, WGS84, GRS80
from pygeocoord.core.constants import RE_WGS84, FE_WGS84
from pygeocoord.core.errors import InvalidEllipsoidError


class TestEllipsoidConstruction(unittest.TestCase):

    def test_wgs84_parameters(self):
        self.assertEqual(WGS84.semi_major_axis_m, RE_WGS84)
        self.assertEqual(WGS84.flattening, FE_WGS84)
        self.assertAlmostEqual(WGS84.eccentricity_squared, 0.00669437999014, places=13)

    def test_eccentricity_squared_is_derived(self):
        ell = Ellipsoid(1000.0, 0.1)
        self.assertAlmostEqual(ell.eccentricity_squared, 0.1 * (2 - 0.1), places=15)

    def test_sphere_allowed(self):
        sphere = Ellipsoid(6371000.0, 0.0)
        self.assertEqual(sphere.eccentricity_squared, 0.0)
        self.assertEqual(sphere.semi_minor_axis_m, 6371000.0)
        self.assertEqual(sphere.inverse_flattening, float('inf'))

    def test_rejects_non_positive_axis(self):
        with self.assertRaises(InvalidEllipsoidError):
            Ellipsoid(-1.0, 0.1)
        with self.assertRaises(InvalidEllipsoidError):
            Ellipsoid(0.0, 0.1)

    def test_rejects_flattening_out_of_range(self):
        with self.assertRaises(InvalidEllipsoidError):
            Ellipsoid(1.0, 1.0)
        with self.assertRaises(InvalidEllipsoidError):
            Ellipsoid(1.0, -0.01)

    def test_rejects_non_finite(self):
        for a, f in [(np.nan, 0.1), (np.inf, 0.1), (1.0, np.nan)]:
            with self.assertRaises(InvalidEllipsoidError):
                Ellipsoid(a, f)

    def test_error_carries_values(self):
        with self.assertRaises(InvalidEllipsoidError) as ctx:
            Ellipsoid(1.0, 1.5)
        self.assertEqual(ctx.exception.flattening, 1.5)

    def test_from_inverse_flattening(self):
        ell = Ellipsoid.from_inverse_flattening(6378137.0, 298.257223563)
        self.assertEqual(ell, WGS84)
        sphere = Ellipsoid.from_inverse_flattening(6371000.0, 0)
        self.assertEqual(sphere.flattening, 0.0)

    def test_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            WGS84.flattening = 0.0

    def test_hashable(self):
        table = {WGS84: "wgs84", GRS80: "grs80"}
        self.assertEqual(table[Ellipsoid(RE_WGS84, FE_WGS84)], "wgs84")


class TestDerivedQuantities(unittest.TestCase):

    def test_semi_minor_axis(self):
        self.assertAlmostEqual(WGS84.semi_minor_axis_m, 6356752.314245, delta=1e-6)

    def test_inverse_flattening(self):
        self.assertAlmostEqual(WGS84.inverse_flattening, 298.257223563, places=9)

    def test_radii_at_equator(self):
        M, N = WGS84.radius_of_curvature(0.0)
        a, e2 = WGS84.semi_major_axis_m, WGS84.eccentricity_squared
        self.assertAlmostEqual(N, a, places=6)
        self.assertAlmostEqual(M, a * (1 - e2), places=6)

    def test_radii_equal_at_pole(self):
        M, N = WGS84.radius_of_curvature(np.pi / 2)
        self.assertAlmostEqual(M, N, places=6)
        # a^2 / b at the pole
        self.assertAlmostEqual(N, WGS84.semi_major_axis_m**2 / WGS84.semi_minor_axis_m, places=4)

    def test_radii_vectorized(self):
        lats = np.radians(np.array([0.0, 30.0, 60.0, 90.0]))
        N = WGS84.prime_vertical_radius(lats)
        self.assertEqual(N.shape, (4,))
        self.assertTrue(np.all(np.diff(N) > 0))


if __name__ == '__main__':
    unittest.main()
