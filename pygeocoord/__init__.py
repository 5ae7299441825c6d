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
pygeocoord - Geodetic Coordinate Conversion Library

Validated geodetic (latitude, longitude, altitude) and Earth-Centered
Earth-Fixed coordinates over a configurable reference ellipsoid, with a
closed-form forward transform and a bounded iterative inverse.
"""

__version__ = "1.0.0"
__author__ = "pygeocoord Development Team"
__title__ = "pygeocoord"
__description__ = "Geodetic <-> ECEF coordinate conversion library"

from .core import *
from .coordinate import *
from .logger import LogLevel, setup_logger, setup_logger_from_config
