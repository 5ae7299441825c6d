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

"""Array-level coordinate transformation utilities

Thin numpy front-end over :class:`Coordinate`, :class:`Ecef` and the
transform engine, plus the local East-North-Up / North-East-Down frames.
All inputs pass through the validating constructors, so invalid arrays
raise the same errors as the value types.
"""

from typing import Union

import numpy as np

from .ecef import Ecef
from .ellipsoid import WGS84, Ellipsoid
from .engine import ecef_to_geodetic, geodetic_to_ecef
from .geodetic import Coordinate

Point = Union[Coordinate, Ecef]


def ecef2llh(xyz: np.ndarray, ellipsoid: Ellipsoid = WGS84, **kwargs) -> np.ndarray:
    """Convert ECEF coordinates to geodetic coordinates

    Parameters
    ----------
    xyz : np.ndarray
        ECEF coordinates [x, y, z] in meters
    ellipsoid : Ellipsoid, optional
        Reference ellipsoid, WGS84 by default
    **kwargs
        ``tolerance`` / ``max_iterations`` for the latitude iteration

    Returns
    -------
    np.ndarray
        Geodetic coordinates [lat, lon, height] where:
        - lat: latitude in radians [-π/2, π/2]
        - lon: longitude in radians (-π, π]
        - height: height above the ellipsoid in meters

    Raises
    ------
    DegenerateInputError
        If ``xyz`` is the origin
    DidNotConvergeError
        If the latitude iteration does not converge

    Examples
    --------
    >>> import numpy as np
    >>> ecef = np.array([-3959785.0, 3352986.0, 3697005.0])  # Tokyo approx.
    >>> llh = ecef2llh(ecef)
    >>> lat_deg, lon_deg = np.degrees(llh[0]), np.degrees(llh[1])
    """
    return ecef_to_geodetic(Ecef.from_array(xyz), ellipsoid, **kwargs).as_array()


def llh2ecef(llh: np.ndarray, ellipsoid: Ellipsoid = WGS84) -> np.ndarray:
    """Convert geodetic coordinates to ECEF coordinates

    Parameters
    ----------
    llh : np.ndarray
        Geodetic coordinates [lat, lon, height] (rad, rad, m)
    ellipsoid : Ellipsoid, optional
        Reference ellipsoid, WGS84 by default

    Returns
    -------
    np.ndarray
        ECEF coordinates [x, y, z] in meters

    Raises
    ------
    LatitudeOutOfRangeError
        If |lat| > π/2
    NonFiniteValueError
        If any component is NaN or infinite
    """
    return geodetic_to_ecef(Coordinate(llh[0], llh[1], llh[2], ellipsoid)).as_array()


def to_ecef(point: Point) -> Ecef:
    """Return ``point`` as ECEF, converting a Coordinate on its own ellipsoid"""
    if isinstance(point, Ecef):
        return point
    return point.to_ecef()


def to_coordinate(point: Point, ellipsoid: Ellipsoid = WGS84) -> Coordinate:
    """Return ``point`` as a geodetic coordinate

    An Ecef is solved on ``ellipsoid``; a Coordinate is returned as is,
    whatever its ellipsoid.
    """
    if isinstance(point, Coordinate):
        return point
    return ecef_to_geodetic(point, ellipsoid)


def compute_rotation_matrix_enu(llh: np.ndarray) -> np.ndarray:
    """
    Rotation matrix from ECEF to local ENU at a geodetic origin

    Parameters:
    -----------
    llh : np.ndarray
        Origin geodetic coordinates [lat, lon, height] (rad, rad, m)

    Returns:
    --------
    R : np.ndarray
        3x3 orthonormal matrix, ``enu = R @ (xyz - xyz_origin)``
    """
    lat, lon = llh[0], llh[1]
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    sin_lon = np.sin(lon)
    cos_lon = np.cos(lon)

    return np.array([
        [-sin_lon, cos_lon, 0.0],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat]
    ])


def compute_rotation_matrix_ned(llh: np.ndarray) -> np.ndarray:
    """Rotation matrix from ECEF to local NED at a geodetic origin"""
    R_enu = compute_rotation_matrix_enu(llh)
    return np.array([R_enu[1], R_enu[0], -R_enu[2]])


def ecef2enu(xyz: np.ndarray, org_llh: np.ndarray, ellipsoid: Ellipsoid = WGS84) -> np.ndarray:
    """Convert ECEF to local ENU coordinates

    Parameters
    ----------
    xyz : np.ndarray
        ECEF coordinates [x, y, z] in meters
    org_llh : np.ndarray
        Origin geodetic coordinates [lat, lon, height] (rad, rad, m)
    ellipsoid : Ellipsoid, optional
        Ellipsoid the origin is expressed on

    Returns
    -------
    np.ndarray
        Local ENU coordinates [e, n, u] in meters

    Notes
    -----
    The Up axis is the ellipsoid normal at the origin, not the direction
    away from the Earth's centre.
    """
    org_xyz = llh2ecef(org_llh, ellipsoid)
    return compute_rotation_matrix_enu(org_llh) @ (np.asarray(xyz, dtype=float) - org_xyz)


def enu2ecef(enu: np.ndarray, org_llh: np.ndarray, ellipsoid: Ellipsoid = WGS84) -> np.ndarray:
    """Convert local ENU to ECEF coordinates

    Inverse of :func:`ecef2enu`.
    """
    org_xyz = llh2ecef(org_llh, ellipsoid)
    return org_xyz + compute_rotation_matrix_enu(org_llh).T @ np.asarray(enu, dtype=float)


def ecef2ned(xyz: np.ndarray, org_llh: np.ndarray, ellipsoid: Ellipsoid = WGS84) -> np.ndarray:
    """
    Convert ECEF to local NED coordinates

    Parameters:
    -----------
    xyz : np.ndarray
        ECEF coordinates [x, y, z] (m)
    org_llh : np.ndarray
        Origin geodetic coordinates [lat, lon, height] (rad, rad, m)

    Returns:
    --------
    ned : np.ndarray
        Local NED coordinates [n, e, d] (m)
    """
    return enu2ned(ecef2enu(xyz, org_llh, ellipsoid))


def ned2ecef(ned: np.ndarray, org_llh: np.ndarray, ellipsoid: Ellipsoid = WGS84) -> np.ndarray:
    """Convert local NED to ECEF coordinates"""
    return enu2ecef(ned2enu(ned), org_llh, ellipsoid)


def enu2ned(enu: np.ndarray) -> np.ndarray:
    """Reorder [e, n, u] to [n, e, d]"""
    return np.array([enu[1], enu[0], -enu[2]])


def ned2enu(ned: np.ndarray) -> np.ndarray:
    """Reorder [n, e, d] to [e, n, u]"""
    return np.array([ned[1], ned[0], -ned[2]])


__all__ = [
    'Point', 'ecef2llh', 'llh2ecef', 'to_ecef', 'to_coordinate',
    'compute_rotation_matrix_enu', 'compute_rotation_matrix_ned',
    'ecef2enu', 'enu2ecef', 'ecef2ned', 'ned2ecef', 'enu2ned', 'ned2enu',
]
