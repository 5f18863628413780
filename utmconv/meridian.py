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

"""Meridian arc length and its series inverse, the footpoint latitude.

Both series follow Hoffmann-Wellenhof, Lichtenegger and Collins, "GPS: Theory
and Practice", 3rd ed., Springer 1994 (Eqs. 10.17 - 10.23). Inputs may be
floats or numpy arrays.
"""

import numpy as np

from utmconv import ellipsoid as ellipsoid_lib

FloatLike = float | np.ndarray


def arc_length_of_meridian(
    phi: FloatLike,
    ellipsoid: ellipsoid_lib.Ellipsoid = ellipsoid_lib.WGS84,
) -> FloatLike:
  """Returns the ellipsoidal distance from the equator to latitude `phi`.

  Args:
    phi: Latitude of the point, in radians.
    ellipsoid: Reference ellipsoid.

  Returns:
    Distance along the meridian, in meters (negative south of the equator).
  """
  n = ellipsoid.n
  alpha = ellipsoid.alpha
  beta = -3.0 * n / 2.0 + 9.0 * n**3 / 16.0 - 3.0 * n**5 / 32.0
  gamma = 15.0 * n**2 / 16.0 - 15.0 * n**4 / 32.0
  delta = -35.0 * n**3 / 48.0 + 105.0 * n**5 / 256.0
  epsilon = 315.0 * n**4 / 512.0
  return alpha * (phi
                  + beta * np.sin(2.0 * phi)
                  + gamma * np.sin(4.0 * phi)
                  + delta * np.sin(6.0 * phi)
                  + epsilon * np.sin(8.0 * phi))


def footpoint_latitude(
    y: FloatLike,
    ellipsoid: ellipsoid_lib.Ellipsoid = ellipsoid_lib.WGS84,
) -> FloatLike:
  """Returns the latitude whose meridian arc length is `y`.

  This is a closed-form series, not an iterative solver, so its cost is fixed
  and its truncation error is below a millimeter for terrestrial latitudes.

  Args:
    y: Transverse Mercator northing (unscaled, no false northing), in meters.
    ellipsoid: Reference ellipsoid.

  Returns:
    Footpoint latitude, in radians.
  """
  n = ellipsoid.n
  y_ = y / ellipsoid.alpha
  beta_ = 3.0 * n / 2.0 - 27.0 * n**3 / 32.0 + 269.0 * n**5 / 512.0
  gamma_ = 21.0 * n**2 / 16.0 - 55.0 * n**4 / 32.0
  delta_ = 151.0 * n**3 / 96.0 - 417.0 * n**5 / 128.0
  epsilon_ = 1097.0 * n**4 / 512.0
  return (y_
          + beta_ * np.sin(2.0 * y_)
          + gamma_ * np.sin(4.0 * y_)
          + delta_ * np.sin(6.0 * y_)
          + epsilon_ * np.sin(8.0 * y_))
