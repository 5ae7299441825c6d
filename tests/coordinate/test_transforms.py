import unittest
import numpy as np
from pygeocoord.coordinate.transforms import (
    ecef2llh, llh2ecef, ecef2enu, enu2ecef,
    ecef2ned, ned2ecef, enu2ned, ned2enu,
    compute_rotation_matrix_enu, compute_rotation_matrix_ned,
    to_ecef, to_coordinate
)
from pygeocoord.coordinate.ecef import Ecef
from pygeocoord.coordinate.ellipsoid import Ellipsoid, GRS80, WGS84
from pygeocoord.coordinate.geodetic import Coordinate
from pygeocoord.core.constants import RE_WGS84, FE_WGS84
from pygeocoord.core.errors import (
    DegenerateInputError, LatitudeOutOfRangeError, NonFiniteValueError
)


class TestCoordinateTransforms(unittest.TestCase):

    def setUp(self):
        # Test points
        self.tokyo_llh = np.array([np.radians(35.6762), np.radians(139.6503), 40.0])  # Tokyo Tower
        self.newyork_llh = np.array([np.radians(40.7128), np.radians(-74.0060), 10.0])  # New York
        self.equator_llh = np.array([0.0, 0.0, 0.0])  # Equator, prime meridian
        self.pole_llh = np.array([np.radians(90.0), 0.0, 0.0])  # North pole

    def test_llh2ecef_ecef2llh_round_trip(self):
        test_points = [
            self.tokyo_llh,
            self.newyork_llh,
            self.equator_llh,
            np.array([np.radians(-35.0), np.radians(150.0), 100.0])  # Southern hemisphere
        ]

        for llh in test_points:
            xyz = llh2ecef(llh)
            llh_recovered = ecef2llh(xyz)

            np.testing.assert_allclose(llh_recovered[:2], llh[:2], rtol=1e-10, atol=1e-10,
                                       err_msg=f"Round-trip failed for lat/lon {llh}")
            np.testing.assert_allclose(llh_recovered[2], llh[2], rtol=1e-8, atol=1e-6,
                                       err_msg=f"Round-trip failed for height {llh}")

    def test_llh2ecef_known_values(self):
        # Point at equator, prime meridian, sea level
        xyz = llh2ecef(self.equator_llh)
        self.assertAlmostEqual(xyz[0], RE_WGS84, places=3)
        self.assertAlmostEqual(xyz[1], 0.0, places=3)
        self.assertAlmostEqual(xyz[2], 0.0, places=3)

        # North pole on the Z-axis at the polar radius
        xyz = llh2ecef(self.pole_llh)
        b = RE_WGS84 * np.sqrt(1 - FE_WGS84 * (2 - FE_WGS84))
        self.assertAlmostEqual(xyz[0], 0.0, places=3)
        self.assertAlmostEqual(xyz[1], 0.0, places=3)
        self.assertAlmostEqual(xyz[2], b, places=3)

    def test_ecef2llh_known_values(self):
        llh = ecef2llh(np.array([RE_WGS84, 0.0, 0.0]))
        self.assertAlmostEqual(llh[0], 0.0, places=10)  # Latitude
        self.assertAlmostEqual(llh[1], 0.0, places=10)  # Longitude
        self.assertAlmostEqual(llh[2], 0.0, places=3)   # Height

        llh = ecef2llh(np.array([0.0, RE_WGS84, 0.0]))
        self.assertAlmostEqual(llh[0], 0.0, places=10)
        self.assertAlmostEqual(llh[1], np.pi/2, places=10)
        self.assertAlmostEqual(llh[2], 0.0, places=3)

    def test_validation_applies(self):
        with self.assertRaises(LatitudeOutOfRangeError):
            llh2ecef(np.array([2.0, 0.0, 0.0]))
        with self.assertRaises(NonFiniteValueError):
            llh2ecef(np.array([0.0, 0.0, np.nan]))
        with self.assertRaises(DegenerateInputError):
            ecef2llh(np.zeros(3))
        with self.assertRaises(NonFiniteValueError):
            ecef2llh(np.array([np.inf, 0.0, 0.0]))

    def test_other_ellipsoid(self):
        sphere = Ellipsoid(6371000.0, 0.0)
        xyz = llh2ecef(np.array([np.pi / 2, 0.0, 100.0]), sphere)
        self.assertAlmostEqual(xyz[2], 6371100.0, places=6)
        llh = ecef2llh(xyz, sphere)
        self.assertAlmostEqual(llh[2], 100.0, places=6)

    def test_ecef2enu_enu2ecef_round_trip(self):
        origin = self.tokyo_llh
        test_offsets = [
            np.array([100.0, 200.0, 50.0]),    # Northeast and up
            np.array([-100.0, -200.0, -50.0]),  # Southwest and down
            np.array([0.0, 0.0, 100.0]),        # Directly up
            np.array([1000.0, 0.0, 0.0]),       # East only
        ]

        for enu_offset in test_offsets:
            xyz = enu2ecef(enu_offset, origin)
            enu_recovered = ecef2enu(xyz, origin)
            np.testing.assert_allclose(enu_recovered, enu_offset, rtol=1e-10, atol=1e-8)

    def test_ecef2enu_up_is_ellipsoid_normal(self):
        origin = self.newyork_llh
        above = origin + np.array([0.0, 0.0, 500.0])
        enu = ecef2enu(llh2ecef(above), origin)
        np.testing.assert_allclose(enu, [0.0, 0.0, 500.0], atol=1e-6)

    def test_ecef2ned_ned2ecef_round_trip(self):
        origin = self.newyork_llh
        test_offsets = [
            np.array([100.0, 200.0, -50.0]),    # North, East, Down
            np.array([-100.0, -200.0, 50.0]),   # South, West, Up
            np.array([0.0, 0.0, -100.0]),       # Directly up
        ]

        for ned_offset in test_offsets:
            xyz = ned2ecef(ned_offset, origin)
            ned_recovered = ecef2ned(xyz, origin)
            np.testing.assert_allclose(ned_recovered, ned_offset, rtol=1e-10, atol=1e-8)

    def test_enu2ned_ned2enu(self):
        enu = np.array([100.0, 200.0, 50.0])  # East, North, Up
        ned = enu2ned(enu)
        np.testing.assert_allclose(ned, np.array([200.0, 100.0, -50.0]))
        np.testing.assert_allclose(ned2enu(ned), enu)

    def test_rotation_matrices(self):
        for llh in (self.tokyo_llh, self.newyork_llh):
            for R in (compute_rotation_matrix_enu(llh), compute_rotation_matrix_ned(llh)):
                np.testing.assert_allclose(R @ R.T, np.eye(3), rtol=1e-10, atol=1e-10)
                self.assertAlmostEqual(np.linalg.det(R), 1.0, places=10)

    def test_ecef_transformations_at_poles(self):
        for pole in (np.array([np.pi/2, 0.0, 0.0]), np.array([-np.pi/2, 0.0, 0.0])):
            llh_recovered = ecef2llh(llh2ecef(pole))
            self.assertAlmostEqual(llh_recovered[0], pole[0], places=10)
            self.assertAlmostEqual(llh_recovered[2], pole[2], places=5)
            # Longitude at poles is undefined, so we don't test it

    def test_height_variations(self):
        for h in [0.0, 100.0, 1000.0, 10000.0, 100000.0]:
            llh = self.tokyo_llh.copy()
            llh[2] = h
            llh_recovered = ecef2llh(llh2ecef(llh))
            np.testing.assert_allclose(llh_recovered, llh, rtol=1e-10, atol=1e-6)

    def test_longitude_wrap_around(self):
        for lon_deg, expected_deg in [(179.0, 179.0), (-179.0, -179.0), (181.0, -179.0),
                                      (360.0, 0.0), (-360.0, 0.0), (540.0, 180.0)]:
            llh = np.array([np.radians(10.0), np.radians(lon_deg), 0.0])
            llh_recovered = ecef2llh(llh2ecef(llh))
            diff = (llh_recovered[1] - np.radians(expected_deg) + np.pi) % (2 * np.pi) - np.pi
            self.assertAlmostEqual(diff, 0.0, places=10)


class TestPointHelpers(unittest.TestCase):

    def test_to_ecef(self):
        e = Ecef(1.0, 2.0, 3.0)
        self.assertIs(to_ecef(e), e)
        self.assertEqual(to_ecef(Coordinate(0.0, 0.0, 0.0)), Ecef(RE_WGS84, 0.0, 0.0))

    def test_to_coordinate(self):
        c = Coordinate(0.1, 0.2, 3.0, GRS80)
        self.assertIs(to_coordinate(c), c)
        solved = to_coordinate(Ecef(RE_WGS84, 0.0, 0.0), WGS84)
        self.assertEqual(solved.latitude, 0.0)
        self.assertIs(solved.ellipsoid, WGS84)


if __name__ == '__main__':
    unittest.main()
