# Copyright 2025 DeepMind Technologies Limited.
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


"""Spherical earth config.

The series reduce to the closed-form spherical Transverse Mercator, which is
handy for checking them.
"""

from utmconv.configs import wgs84

EARTH_MEAN_RADIUS_M = 6_371_000.0


def get_config():
  config = wgs84.get_config()
  config.ellipsoid.name = "sphere"
  config.ellipsoid.semi_major_axis = EARTH_MEAN_RADIUS_M
  config.ellipsoid.semi_minor_axis = EARTH_MEAN_RADIUS_M
  return config
