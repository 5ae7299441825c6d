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

"""Geodetic coordinate types and transformations

This module provides:
- Reference ellipsoid model (WGS84, GRS80 or user defined)
- Validated geodetic (Coordinate) and Cartesian (Ecef) value types
- Forward and iterative inverse geodetic <-> ECEF transform engine
- Array-level transforms and local ENU/NED frames
"""

# Value types
from .ecef import Ecef
from .ellipsoid import GRS80, WGS84, Ellipsoid
from .geodetic import Coordinate

# Transform engine
from .engine import GeodeticSolution, ecef_to_geodetic, geodetic_to_ecef, solve_geodetic

# Array-level transforms
from .transforms import (
    Point,
    compute_rotation_matrix_enu,
    compute_rotation_matrix_ned,
    ecef2enu,
    ecef2llh,
    ecef2ned,
    enu2ecef,
    enu2ned,
    llh2ecef,
    ned2ecef,
    ned2enu,
    to_coordinate,
    to_ecef,
)
from .wrap import wrap_longitude
