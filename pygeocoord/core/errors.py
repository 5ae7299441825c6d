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

"""Exceptions raised by coordinate construction and conversion.

All errors derive from :class:`GeodeticError`, itself a ``ValueError``, so
callers that already guard numeric input with ``except ValueError`` keep
working. Each subclass keeps the offending values as attributes for
diagnostics.
"""

from typing import Optional


class GeodeticError(ValueError):
    """Base class for all coordinate validation and conversion failures"""


class InvalidEllipsoidError(GeodeticError):
    """Semi-major axis not positive/finite or flattening outside [0, 1).

    Attributes
    ----------
    semi_major_axis_m : float
        Requested semi-major axis (m)
    flattening : float
        Requested flattening
    """

    def __init__(self, semi_major_axis_m: float, flattening: float):
        self.semi_major_axis_m = semi_major_axis_m
        self.flattening = flattening
        super().__init__(
            f"Invalid ellipsoid: semi-major axis {semi_major_axis_m!r} m must be "
            f"positive and finite, flattening {flattening!r} must be in [0, 1)"
        )


class LatitudeOutOfRangeError(GeodeticError):
    """Latitude magnitude exceeds pi/2"""

    def __init__(self, latitude: float):
        self.latitude = latitude
        super().__init__(
            f"Latitude {latitude!r} rad is out of range (valid: -pi/2..=pi/2)"
        )


class NonFiniteValueError(GeodeticError):
    """NaN or infinite value passed to a constructor.

    Attributes
    ----------
    name : str
        Name of the offending field (e.g. ``'altitude'``, ``'x'``)
    value : float
        The non-finite value
    """

    def __init__(self, name: str, value: float):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be finite, got {value!r}")


class DegenerateInputError(GeodeticError):
    """ECEF point at the centre of the ellipsoid, where latitude and longitude are undefined"""

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z
        super().__init__(
            f"ECEF point ({x!r}, {y!r}, {z!r}) is at the centre of the ellipsoid; "
            "geodetic latitude and longitude are undefined"
        )


class DidNotConvergeError(GeodeticError):
    """Inverse transform exhausted its iteration cap without meeting tolerance.

    Attributes
    ----------
    iterations : int
        Number of iterations performed
    delta : float
        Last latitude change (rad)
    tolerance : float, optional
        Tolerance that was not met (rad)
    """

    def __init__(self, iterations: int, delta: float, tolerance: Optional[float] = None):
        self.iterations = iterations
        self.delta = delta
        self.tolerance = tolerance
        msg = f"Latitude iteration did not converge after {iterations} iterations (last change {delta!r} rad"
        if tolerance is not None:
            msg += f", tolerance {tolerance!r} rad"
        super().__init__(msg + ")")


__all__ = [
    'GeodeticError',
    'InvalidEllipsoidError',
    'LatitudeOutOfRangeError',
    'NonFiniteValueError',
    'DegenerateInputError',
    'DidNotConvergeError',
]
