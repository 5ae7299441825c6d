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

"""Geodetic coordinate value type"""

from dataclasses import dataclass

import numpy as np

from ..core.constants import HALF_PI
from ..core.errors import LatitudeOutOfRangeError, NonFiniteValueError
from .ellipsoid import WGS84, Ellipsoid
from .wrap import wrap_longitude


@dataclass(frozen=True)
class Coordinate:
    """Geodetic position relative to a reference ellipsoid.

    Angles are stored in radians. The constructor validates its input and
    normalizes longitude; once built, a Coordinate never changes.

    Attributes
    ----------
    latitude : float
        Geodetic latitude (rad), in [-π/2, π/2]
    longitude : float
        Longitude (rad), wrapped into (-π, π]
    altitude : float
        Height above the ellipsoid (m), may be negative
    ellipsoid : Ellipsoid
        Reference ellipsoid, WGS84 by default

    Raises
    ------
    NonFiniteValueError
        If latitude, longitude or altitude is NaN or infinite
    LatitudeOutOfRangeError
        If |latitude| > π/2

    Notes
    -----
    Equality compares every field exactly. Positions obtained through a
    round trip differ in the last bits; compare those with an explicit
    tolerance.

    Examples
    --------
    >>> import numpy as np
    >>> c = Coordinate(0.0, 3 * np.pi, 10.0)
    >>> bool(abs(c.longitude - np.pi) < 1e-12)
    True
    """
    latitude: float
    longitude: float
    altitude: float = 0.0
    ellipsoid: Ellipsoid = WGS84

    def __post_init__(self):
        for name in ('latitude', 'longitude', 'altitude'):
            value = getattr(self, name)
            if not np.isfinite(value):
                raise NonFiniteValueError(name, value)

        if abs(self.latitude) > HALF_PI:
            raise LatitudeOutOfRangeError(self.latitude)

        object.__setattr__(self, 'latitude', float(self.latitude))
        object.__setattr__(self, 'longitude', wrap_longitude(float(self.longitude)))
        object.__setattr__(self, 'altitude', float(self.altitude))

    @classmethod
    def from_degrees(cls, latitude_deg: float, longitude_deg: float,
                     altitude: float = 0.0, ellipsoid: Ellipsoid = WGS84) -> 'Coordinate':
        """Create a coordinate from latitude/longitude in degrees"""
        return cls(np.radians(latitude_deg), np.radians(longitude_deg), altitude, ellipsoid)

    @property
    def latitude_deg(self) -> float:
        return float(np.degrees(self.latitude))

    @property
    def longitude_deg(self) -> float:
        return float(np.degrees(self.longitude))

    def as_array(self) -> np.ndarray:
        """Return ``[lat, lon, height]`` (rad, rad, m)"""
        return np.array([self.latitude, self.longitude, self.altitude])

    def to_ecef(self):
        """Convert to Earth-Centered Earth-Fixed coordinates on this coordinate's ellipsoid.

        Returns
        -------
        Ecef
            Cartesian position (m)
        """
        from .engine import geodetic_to_ecef
        return geodetic_to_ecef(self)

    def __str__(self):
        return (f"Coordinate(lat={self.latitude_deg:.9f}°, "
                f"lon={self.longitude_deg:.9f}°, alt={self.altitude:.4f} m)")


__all__ = ['Coordinate']
