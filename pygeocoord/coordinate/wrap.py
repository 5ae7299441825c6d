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

"""
Longitude wrapping utilities.

Angles that already lie in the target interval are returned bit-for-bit
unchanged; only out-of-range values go through modular reduction.
"""

import numpy as np
from numba import njit

# Constants for angle wrapping
TWO_PI = 2 * np.pi


@njit(cache=True)
def wrapToPi(v1):
    """
    Wrap angles to the half-open (-π, π] range.

    Parameters
    ----------
    v1 : ndarray
        Vector of finite angles in radians

    Returns
    -------
    v2 : ndarray
        Vector of normalized angles in radians (-π, π]
    """
    v2 = v1.copy()
    i = (v1 <= -np.pi) | (np.pi < v1)
    if np.any(i):
        w = np.mod(v1[i] + np.pi, TWO_PI) - np.pi
        # np.mod lands on [0, 2π), so -π is the only value to fold over
        w[w <= -np.pi] = np.pi
        v2[i] = w
    return v2


def wrap_longitude(lon: float) -> float:
    """Wrap a single longitude (rad) into (-π, π]"""
    return float(wrapToPi(np.array([lon], dtype=np.float64))[0])


__all__ = ['wrapToPi', 'wrap_longitude']
