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

"""Core Module.

This module provides the shared foundation for the coordinate package:

- **Constants and Parameters**: reference ellipsoid parameters, angle
  conversion factors and the numerical defaults of the ECEF to geodetic
  iteration (tolerance, iteration cap, polar switch latitude)
- **Errors**: the exception taxonomy raised by validating constructors and
  the inverse transform

Example Usage:
    >>> from pygeocoord.core import *
    >>>
    >>> RE_WGS84
    6378137.0
    >>> issubclass(LatitudeOutOfRangeError, ValueError)
    True
"""

from .constants import *
from .errors import *
