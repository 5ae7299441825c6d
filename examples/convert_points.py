#!/usr/bin/env python3
"""
Geodetic <-> ECEF Conversion Example using pygeocoord

This example demonstrates:
1. Building validated geodetic coordinates from degrees
2. Converting them to ECEF and back with the iterative inverse
3. Handling invalid input and degenerate points
4. Watching the solver iterations through TRACE logging
"""

import numpy as np
from pygeocoord import (
    Coordinate, Ecef, Ellipsoid, GeodeticError, WGS84,
    ecef2enu, setup_logger, solve_geodetic
)


def main():
    logger = setup_logger("pygeocoord", level="INFO")

    sites = {
        "Tokyo Tower": (35.6586, 139.7454, 333.0),
        "Mount Fuji": (35.3606, 138.7274, 3776.0),
        "Dead Sea": (31.5590, 35.4732, -430.0),
        "North Pole": (90.0, 0.0, 0.0),
    }

    for name, (lat, lon, alt) in sites.items():
        coord = Coordinate.from_degrees(lat, lon, alt)
        ecef = coord.to_ecef()
        back = ecef.to_coordinate(WGS84)
        logger.info("%-12s %s -> [%.3f, %.3f, %.3f] m -> alt %.6f m",
                    name, coord, ecef.x, ecef.y, ecef.z, back.altitude)

    # Local ENU offset of Mount Fuji seen from Tokyo Tower
    tokyo = Coordinate.from_degrees(*sites["Tokyo Tower"])
    fuji = Coordinate.from_degrees(*sites["Mount Fuji"]).to_ecef()
    enu = ecef2enu(fuji.as_array(), tokyo.as_array())
    logger.info("Fuji from Tokyo: E=%.1f km, N=%.1f km, U=%.1f km", *(enu / 1000.0))

    # A custom ellipsoid
    sphere = Ellipsoid(6371000.0, 0.0)
    logger.info("On a sphere: %s", Coordinate(0.0, np.pi / 2, 0.0, sphere).to_ecef())

    # Invalid input surfaces as an exception
    for bad in (lambda: Coordinate.from_degrees(91.0, 0.0),
                lambda: Ecef(0.0, 0.0, 0.0).to_coordinate(),
                lambda: Ellipsoid(1.0, 1.0)):
        try:
            bad()
        except GeodeticError as err:
            logger.info("%s: %s", type(err).__name__, err)

    # Per-iteration solver output
    setup_logger("pygeocoord", level="TRACE")
    sol = solve_geodetic(fuji.x, fuji.y, fuji.z)
    logger.info("Converged in %d iterations", sol.iterations)


if __name__ == "__main__":
    main()
