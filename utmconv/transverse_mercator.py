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

"""Transverse Mercator projection as truncated power series.

Transverse Mercator is not UTM: the results here are unscaled and have no
false origin. See `utm_lib` for the UTM adjustments.
"""

import numpy as np

from utmconv import ellipsoid as ellipsoid_lib
from utmconv import meridian

FloatLike = meridian.FloatLike


def map_lat_lon_to_xy(
    phi: FloatLike,
    lam: FloatLike,
    lam0: FloatLike,
    ellipsoid: ellipsoid_lib.Ellipsoid = ellipsoid_lib.WGS84,
) -> tuple[FloatLike, FloatLike]:
  """Projects a latitude/longitude pair onto the Transverse Mercator plane.

  Args:
    phi: Latitude of the point, in radians.
    lam: Longitude of the point, in radians.
    lam0: Longitude of the central meridian, in radians.
    ellipsoid: Reference ellipsoid.

  Returns:
    (x, y) in meters.
  """
  a, b = ellipsoid.semi_major_axis, ellipsoid.semi_minor_axis
  c = np.cos(phi)
  nu2 = ellipsoid.ep2 * c**2
  big_n = a**2 / (b * np.sqrt(1.0 + nu2))
  t = np.tan(phi)
  t2 = t * t
  l = lam - lam0

  # Coefficients of l**n; l**1 and l**2 have coefficient 1.
  l3coef = 1.0 - t2 + nu2
  l4coef = 5.0 - t2 + 9.0 * nu2 + 4.0 * nu2**2
  l5coef = 5.0 - 18.0 * t2 + t2**2 + 14.0 * nu2 - 58.0 * t2 * nu2
  l6coef = 61.0 - 58.0 * t2 + t2**2 + 270.0 * nu2 - 330.0 * t2 * nu2
  l7coef = 61.0 - 479.0 * t2 + 179.0 * t2**2 - t2**3
  l8coef = 1385.0 - 3111.0 * t2 + 543.0 * t2**2 - t2**3

  x = (big_n * c * l
       + big_n / 6.0 * c**3 * l3coef * l**3
       + big_n / 120.0 * c**5 * l5coef * l**5
       + big_n / 5040.0 * c**7 * l7coef * l**7)

  y = (meridian.arc_length_of_meridian(phi, ellipsoid)
       + t / 2.0 * big_n * c**2 * l**2
       + t / 24.0 * big_n * c**4 * l4coef * l**4
       + t / 720.0 * big_n * c**6 * l6coef * l**6
       + t / 40320.0 * big_n * c**8 * l8coef * l**8)
  return x, y


def map_xy_to_lat_lon(
    x: FloatLike,
    y: FloatLike,
    lam0: FloatLike,
    ellipsoid: ellipsoid_lib.Ellipsoid = ellipsoid_lib.WGS84,
) -> tuple[FloatLike, FloatLike]:
  """Inverts `map_lat_lon_to_xy` around the footpoint latitude.

  Nf, nuf2 and tf play the role of N, nu2 and t of the forward series, but are
  evaluated at the footpoint latitude.

  Args:
    x: Easting, in meters.
    y: Northing, in meters.
    lam0: Longitude of the central meridian, in radians.
    ellipsoid: Reference ellipsoid.

  Returns:
    (phi, lam) in radians.
  """
  a, b = ellipsoid.semi_major_axis, ellipsoid.semi_minor_axis
  phif = meridian.footpoint_latitude(y, ellipsoid)
  cf = np.cos(phif)
  nuf2 = ellipsoid.ep2 * cf**2
  nf = a**2 / (b * np.sqrt(1.0 + nuf2))
  tf = np.tan(phif)
  tf2 = tf * tf
  tf4 = tf2 * tf2

  x1frac = 1.0 / (nf * cf)
  x2frac = tf / (2.0 * nf**2)
  x3frac = 1.0 / (6.0 * nf**3 * cf)
  x4frac = tf / (24.0 * nf**4)
  x5frac = 1.0 / (120.0 * nf**5 * cf)
  x6frac = tf / (720.0 * nf**6)
  x7frac = 1.0 / (5040.0 * nf**7 * cf)
  x8frac = tf / (40320.0 * nf**8)

  # x**1 has no polynomial coefficient.
  x2poly = -1.0 - nuf2
  x3poly = -1.0 - 2.0 * tf2 - nuf2
  x4poly = (5.0 + 3.0 * tf2 + 6.0 * nuf2 - 6.0 * tf2 * nuf2
            - 3.0 * nuf2**2 - 9.0 * tf2 * nuf2**2)
  x5poly = 5.0 + 28.0 * tf2 + 24.0 * tf4 + 6.0 * nuf2 + 8.0 * tf2 * nuf2
  x6poly = -61.0 - 90.0 * tf2 - 45.0 * tf4 - 107.0 * nuf2 + 162.0 * tf2 * nuf2
  x7poly = -61.0 - 662.0 * tf2 - 1320.0 * tf4 - 720.0 * tf4 * tf2
  x8poly = 1385.0 + 3633.0 * tf2 + 4095.0 * tf4 + 1575.0 * tf4 * tf2

  phi = (phif
         + x2frac * x2poly * x**2
         + x4frac * x4poly * x**4
         + x6frac * x6poly * x**6
         + x8frac * x8poly * x**8)
  lam = (lam0
         + x1frac * x
         + x3frac * x3poly * x**3
         + x5frac * x5poly * x**5
         + x7frac * x7poly * x**7)
  return phi, lam
