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


"""Tests for the meridian arc-length series."""

import math

from absl.testing import absltest
from absl.testing import parameterized
import numpy as np
from utmconv import ellipsoid
from utmconv import meridian

# Equator to pole along a WGS84 meridian.
WGS84_QUARTER_MERIDIAN_M = 10_001_965.729


class MeridianTest(parameterized.TestCase):

  def test_equator(self):
    self.assertEqual(meridian.arc_length_of_meridian(0.0), 0.0)
    self.assertEqual(meridian.footpoint_latitude(0.0), 0.0)

  def test_quarter_meridian(self):
    self.assertAlmostEqual(meridian.arc_length_of_meridian(math.pi / 2),
                           WGS84_QUARTER_MERIDIAN_M, delta=1e-2)

  def test_one_degree_near_equator_is_shorter_than_near_pole(self):
    deg = math.radians(1)
    at_equator = meridian.arc_length_of_meridian(deg)
    at_pole = (meridian.arc_length_of_meridian(math.pi / 2) -
               meridian.arc_length_of_meridian(math.pi / 2 - deg))
    self.assertAlmostEqual(at_equator, 110_574, delta=1)
    self.assertAlmostEqual(at_pole, 111_694, delta=1)

  @parameterized.parameters(0.1, 0.5, 1.0, 1.5)
  def test_odd_symmetry(self, phi):
    self.assertAlmostEqual(meridian.arc_length_of_meridian(-phi),
                           -meridian.arc_length_of_meridian(phi))
    self.assertAlmostEqual(meridian.footpoint_latitude(-phi * 6e6),
                           -meridian.footpoint_latitude(phi * 6e6))

  def test_footpoint_inverts_arc_length(self):
    phi = np.radians(np.linspace(-85, 85, 35))
    y = meridian.arc_length_of_meridian(phi)
    self.assertEqual(y.shape, phi.shape)
    np.testing.assert_allclose(meridian.footpoint_latitude(y), phi,
                               rtol=0, atol=1e-10)

  def test_sphere(self):
    radius = 6_371_000.0
    s = ellipsoid.sphere(radius)
    for phi in (-1.2, 0.3, 0.7854):
      self.assertAlmostEqual(meridian.arc_length_of_meridian(phi, s),
                             radius * phi, places=6)
      self.assertAlmostEqual(meridian.footpoint_latitude(radius * phi, s),
                             phi, places=12)


if __name__ == "__main__":
  absltest.main()
