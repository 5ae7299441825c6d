# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Geodetic <-> ECEF transform engine

The forward map is closed form. The inverse map has no closed form on an
oblate ellipsoid and is solved by fixed-point iteration on the geodetic
latitude, bounded by an iteration cap.
"""

import logging
from typing import NamedTuple

import numpy as np

from ..core.constants import GEODETIC_MAX_ITERATIONS, GEODETIC_TOLERANCE, POLAR_SWITCH_LATITUDE
from ..core.errors import DegenerateInputError, DidNotConvergeError
from ..logger import LogLevel
from .ecef import Ecef
from .ellipsoid import WGS84, Ellipsoid
from .geodetic import Coordinate

logger = logging.getLogger(__name__)


class GeodeticSolution(NamedTuple):
    """Raw result of the inverse transform, before Coordinate validation"""
    latitude: float    # rad
    longitude: float   # rad
    altitude: float    # m
    iterations: int    # latitude updates performed


def geodetic_to_ecef(coordinate: Coordinate) -> Ecef:
    """Convert a geodetic coordinate to ECEF

    Parameters
    ----------
    coordinate : Coordinate
        Validated geodetic position; its ellipsoid is used for the conversion

    Returns
    -------
    Ecef
        ECEF coordinates [x, y, z] in meters

    Notes
    -----
    Exact algebra, no iteration. At the poles cos(lat) is not exactly zero in
    floating point, so x and y come out at the 1e-10 m level rather than 0.

    Examples
    --------
    >>> geodetic_to_ecef(Coordinate(0.0, 0.0, 0.0)).x
    6378137.0
    """
    ell = coordinate.ellipsoid
    e2 = ell.eccentricity_squared
    lat, lon, h = coordinate.latitude, coordinate.longitude, coordinate.altitude

    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    sin_lon = np.sin(lon)
    cos_lon = np.cos(lon)

    N = ell.semi_major_axis_m / np.sqrt(1.0 - e2 * sin_lat**2)

    x = (N + h) * cos_lat * cos_lon
    y = (N + h) * cos_lat * sin_lon
    z = (N * (1.0 - e2) + h) * sin_lat

    return Ecef(x, y, z)


def solve_geodetic(x: float, y: float, z: float,
                   ellipsoid: Ellipsoid = WGS84,
                   tolerance: float = GEODETIC_TOLERANCE,
                   max_iterations: int = GEODETIC_MAX_ITERATIONS) -> GeodeticSolution:
    """Solve for geodetic latitude, longitude and height of an ECEF point

    Parameters
    ----------
    x, y, z : float
        ECEF coordinates (m)
    ellipsoid : Ellipsoid, optional
        Reference ellipsoid, WGS84 by default
    tolerance : float, optional
        Stop once the latitude changes by less than this between iterations (rad)
    max_iterations : int, optional
        Iteration cap

    Returns
    -------
    GeodeticSolution
        (latitude, longitude, altitude, iterations); latitude and longitude
        in radians, longitude straight from atan2 in [-π, π]

    Raises
    ------
    DegenerateInputError
        If the point is the centre of the ellipsoid
    DidNotConvergeError
        If ``max_iterations`` updates do not bring the latitude change
        below ``tolerance``

    Notes
    -----
    The latitude update ``atan2(z + e2 * N * sin(lat), p)`` has the same
    fixed point as ``atan2(z, p * (1 - e2 * N / (N + h)))`` but its second
    argument is never negative, so every iterate stays in [-π/2, π/2] even
    for points deep inside the ellipsoid. Height uses ``p / cos(lat)`` at
    low latitudes and ``z / sin(lat)`` above 45°, where cos(lat) goes to zero.
    """
    a = ellipsoid.semi_major_axis_m
    e2 = ellipsoid.eccentricity_squared

    p = np.hypot(x, y)
    if p == 0.0 and z == 0.0:
        raise DegenerateInputError(x, y, z)

    lon = np.arctan2(y, x)

    lat = np.arctan2(z, p * (1.0 - e2))
    delta = np.inf
    iterations = 0
    trace = logger.isEnabledFor(LogLevel.TRACE.value)

    while iterations < max_iterations:
        iterations += 1
        sin_lat = np.sin(lat)
        N = a / np.sqrt(1.0 - e2 * sin_lat**2)
        new_lat = np.arctan2(z + e2 * N * sin_lat, p)
        delta = abs(new_lat - lat)
        lat = new_lat
        if trace:
            logger.log(LogLevel.TRACE.value,
                       "iteration %d: lat=%.15f rad, dlat=%.3e", iterations, lat, delta)
        if delta < tolerance:
            break
    else:
        logger.debug("Latitude iteration for (%r, %r, %r) stopped at cap %d, dlat=%.3e",
                     x, y, z, max_iterations, delta)
        raise DidNotConvergeError(iterations, float(delta), tolerance)

    sin_lat = np.sin(lat)
    N = a / np.sqrt(1.0 - e2 * sin_lat**2)
    if abs(lat) < POLAR_SWITCH_LATITUDE:
        h = p / np.cos(lat) - N
    else:
        h = z / sin_lat - N * (1.0 - e2)

    logger.debug("Converged in %d iterations (dlat=%.3e)", iterations, delta)
    return GeodeticSolution(float(lat), float(lon), float(h), iterations)


def ecef_to_geodetic(ecef: Ecef, ellipsoid: Ellipsoid = WGS84,
                     tolerance: float = GEODETIC_TOLERANCE,
                     max_iterations: int = GEODETIC_MAX_ITERATIONS) -> Coordinate:
    """Convert an ECEF position to a geodetic coordinate

    Parameters
    ----------
    ecef : Ecef
        ECEF position (m)
    ellipsoid : Ellipsoid, optional
        Reference ellipsoid for the result, WGS84 by default
    tolerance : float, optional
        Latitude convergence threshold (rad)
    max_iterations : int, optional
        Iteration cap

    Returns
    -------
    Coordinate
        Geodetic coordinate on ``ellipsoid``

    Raises
    ------
    DegenerateInputError
        If ``ecef`` is the centre of the ellipsoid
    DidNotConvergeError
        If the iteration cap is reached
    NonFiniteValueError
        If the solution is not finite

    Examples
    --------
    >>> c = ecef_to_geodetic(Ecef(6378137.0, 0.0, 0.0))
    >>> (c.latitude, c.longitude, c.altitude)
    (0.0, 0.0, 0.0)
    """
    sol = solve_geodetic(ecef.x, ecef.y, ecef.z, ellipsoid, tolerance, max_iterations)
    return Coordinate(sol.latitude, sol.longitude, sol.altitude, ellipsoid)


__all__ = ['GeodeticSolution', 'geodetic_to_ecef', 'solve_geodetic', 'ecef_to_geodetic']
