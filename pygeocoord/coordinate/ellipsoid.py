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

"""Reference ellipsoid model"""

from dataclasses import dataclass, field

import numpy as np

from ..core.constants import FE_GRS80, FE_WGS84, RE_GRS80, RE_WGS84
from ..core.errors import InvalidEllipsoidError


@dataclass(frozen=True)
class Ellipsoid:
    """Oblate reference ellipsoid defined by semi-major axis and flattening.

    Instances are immutable and may be shared freely between coordinates and
    threads.

    Attributes
    ----------
    semi_major_axis_m : float
        Equatorial radius a in meters, must be positive and finite
    flattening : float
        Flattening f = (a - b) / a, must satisfy 0 <= f < 1
    eccentricity_squared : float
        First eccentricity squared e2 = f * (2 - f), computed once at construction

    Raises
    ------
    InvalidEllipsoidError
        If the semi-major axis is not positive and finite or the flattening
        lies outside [0, 1)

    Examples
    --------
    >>> ell = Ellipsoid(6378137.0, 1.0 / 298.257223563)
    >>> round(ell.semi_minor_axis_m, 3)
    6356752.314
    """
    semi_major_axis_m: float
    flattening: float
    eccentricity_squared: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        a = float(self.semi_major_axis_m)
        f = float(self.flattening)
        if not (np.isfinite(a) and a > 0.0) or not (0.0 <= f < 1.0):
            raise InvalidEllipsoidError(self.semi_major_axis_m, self.flattening)

        object.__setattr__(self, 'semi_major_axis_m', a)
        object.__setattr__(self, 'flattening', f)
        object.__setattr__(self, 'eccentricity_squared', f * (2.0 - f))

    @classmethod
    def from_inverse_flattening(cls, semi_major_axis_m: float,
                                inverse_flattening: float) -> 'Ellipsoid':
        """Build an ellipsoid from a and 1/f, the way datums are usually published.

        An inverse flattening of 0 denotes a sphere.
        """
        if inverse_flattening == 0:
            return cls(semi_major_axis_m, 0.0)
        return cls(semi_major_axis_m, 1.0 / inverse_flattening)

    @property
    def semi_minor_axis_m(self) -> float:
        """Polar radius b = a * (1 - f) (m)"""
        return self.semi_major_axis_m * (1.0 - self.flattening)

    @property
    def inverse_flattening(self) -> float:
        """1/f, or infinity for a sphere"""
        if self.flattening == 0.0:
            return float('inf')
        return 1.0 / self.flattening

    def prime_vertical_radius(self, lat):
        """
        Prime vertical radius of curvature N at the given latitude

        Parameters:
        -----------
        lat : float or np.ndarray
            Geodetic latitude (rad)

        Returns:
        --------
        N : float or np.ndarray
            Prime vertical radius of curvature (m)
        """
        sin_lat = np.sin(lat)
        return self.semi_major_axis_m / np.sqrt(1.0 - self.eccentricity_squared * sin_lat**2)

    def meridional_radius(self, lat):
        """
        Meridional radius of curvature M at the given latitude

        Parameters:
        -----------
        lat : float or np.ndarray
            Geodetic latitude (rad)

        Returns:
        --------
        M : float or np.ndarray
            Meridional radius of curvature (m)
        """
        sin_lat = np.sin(lat)
        e2 = self.eccentricity_squared
        return self.semi_major_axis_m * (1.0 - e2) / (1.0 - e2 * sin_lat**2)**1.5

    def radius_of_curvature(self, lat):
        """Return (M, N), the meridional and prime vertical radii at ``lat`` (m)"""
        return self.meridional_radius(lat), self.prime_vertical_radius(lat)


WGS84 = Ellipsoid(RE_WGS84, FE_WGS84)
GRS80 = Ellipsoid(RE_GRS80, FE_GRS80)

__all__ = ['Ellipsoid', 'WGS84', 'GRS80']
