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

"""Geodetic Constants and Numerical Parameters"""

import numpy as np

# ============================================================================
# REFERENCE ELLIPSOIDS
# ============================================================================
# Earth Parameters (WGS84)
RE_WGS84 = 6378137.0           # earth semimajor axis (m)
FE_WGS84 = 1.0 / 298.257223563 # earth flattening

# Earth Parameters (GRS80)
RE_GRS80 = 6378137.0           # earth semimajor axis (m)
FE_GRS80 = 1.0 / 298.257222101 # earth flattening

# ============================================================================
# ANGLES
# ============================================================================
PI = np.pi
TWO_PI = 2.0 * np.pi
HALF_PI = 0.5 * np.pi
D2R = np.pi / 180.0            # degrees to radians
R2D = 180.0 / np.pi            # radians to degrees

# ============================================================================
# ECEF -> GEODETIC ITERATION
# ============================================================================
GEODETIC_TOLERANCE = 1e-12      # latitude convergence threshold (rad)
GEODETIC_MAX_ITERATIONS = 20    # iteration cap for the inverse transform
POLAR_SWITCH_LATITUDE = 0.25 * np.pi  # above this |lat| use z/sin(lat) for height

__all__ = [
    'RE_WGS84', 'FE_WGS84', 'RE_GRS80', 'FE_GRS80',
    'PI', 'TWO_PI', 'HALF_PI', 'D2R', 'R2D',
    'GEODETIC_TOLERANCE', 'GEODETIC_MAX_ITERATIONS', 'POLAR_SWITCH_LATITUDE',
]
