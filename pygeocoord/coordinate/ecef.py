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

"""Earth-Centered Earth-Fixed (ECEF) Cartesian position"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..core.errors import NonFiniteValueError
from .ellipsoid import WGS84, Ellipsoid


@dataclass(frozen=True)
class Ecef:
    """Cartesian position with origin at the Earth's centre of mass.

    The X axis points to the prime meridian on the equator, the Y axis to
    90° East on the equator and the Z axis to the North pole. All components
    are in meters.

    Any finite triple is accepted, including the origin; whether the point
    has a geodetic equivalent is decided by :meth:`to_coordinate`.

    Raises
    ------
    NonFiniteValueError
        If any component is NaN or infinite

    Examples
    --------
    >>> a = Ecef(0.0, 0.0, 0.0)
    >>> b = Ecef(3.0, 4.0, 0.0)
    >>> a.distance(b)
    5.0
    """
    x: float
    y: float
    z: float

    def __post_init__(self):
        for name in ('x', 'y', 'z'):
            value = getattr(self, name)
            if not np.isfinite(value):
                raise NonFiniteValueError(name, value)
            object.__setattr__(self, name, float(value))

    @classmethod
    def from_array(cls, xyz: np.ndarray) -> 'Ecef':
        """Create from an ``[x, y, z]`` array (m)"""
        return cls(xyz[0], xyz[1], xyz[2])

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def to_coordinate(self, ellipsoid: Ellipsoid = WGS84, **kwargs):
        """Convert to geodetic coordinates on ``ellipsoid``.

        Keyword arguments (``tolerance``, ``max_iterations``) are forwarded
        to :func:`pygeocoord.coordinate.engine.ecef_to_geodetic`.

        Raises
        ------
        DegenerateInputError
            If the point is the centre of the ellipsoid
        DidNotConvergeError
            If the latitude iteration does not meet its tolerance
        """
        from .engine import ecef_to_geodetic
        return ecef_to_geodetic(self, ellipsoid, **kwargs)

    def norm_squared(self) -> float:
        """Squared distance from the origin (m^2)"""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> float:
        return float(np.sqrt(self.norm_squared()))

    def distance(self, other: 'Ecef') -> float:
        """Straight-line distance to ``other`` (m)"""
        return (self - other).norm()

    def cross(self, other: 'Ecef') -> 'Ecef':
        return Ecef(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def eq_epsilon(self, other: 'Ecef', epsilon: float) -> bool:
        """True if ``other`` lies strictly within ``epsilon`` meters"""
        return self.distance(other) < epsilon

    @staticmethod
    def is_not_collinear(points: Sequence['Ecef'], epsilon: float) -> bool:
        """
        Check that a set of points does not lie on a single straight line

        Parameters:
        -----------
        points : Sequence[Ecef]
            Points to test; fewer than three points are always collinear
        epsilon : float
            Allowed distance from the line (m), e.g. 0.1 for 10 cm

        Returns:
        --------
        bool
            True if at least one point is farther than ``epsilon`` from the
            line through the first point and the first distinct point
        """
        if len(points) < 3:
            return False

        p0 = points[0]
        epsilon_sq = epsilon * epsilon

        # Direction from the first point that is not within epsilon of p0
        base = None
        for p in points[1:]:
            v = p - p0
            if v.norm_squared() > epsilon_sq:
                base = v
                break

        if base is None:
            return False

        base_norm_sq = base.norm_squared()
        for p in points[1:]:
            dist_to_line_sq = base.cross(p - p0).norm_squared() / base_norm_sq
            if dist_to_line_sq > epsilon_sq:
                return True

        return False

    def __sub__(self, other: 'Ecef') -> 'Ecef':
        if not isinstance(other, Ecef):
            return NotImplemented
        return Ecef(self.x - other.x, self.y - other.y, self.z - other.z)


__all__ = ['Ecef']
