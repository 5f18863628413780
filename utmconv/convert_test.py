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


"""Tests for the conversion command line."""

from absl import app
from absl.testing import absltest
from absl.testing import parameterized
from utmconv import convert
from utmconv import coords
from utmconv.configs import sphere
from utmconv.configs import wgs84


class ConvertTest(parameterized.TestCase):

  def test_forward(self):
    out = convert.convert(wgs84.get_config(), lat=-28.234982, lon=79.293801)
    self.assertIsInstance(out, coords.UtmPoint)
    self.assertEqual(out.zone, 44)
    self.assertTrue(out.south_hemisphere)
    self.assertAlmostEqual(out.easting, 332593.76, delta=0.01)
    self.assertAlmostEqual(out.northing, 6875587.59, delta=0.01)

  def test_inverse(self):
    out = convert.convert(wgs84.get_config(), easting=801239, northing=8102939,
                          zone=48, south=True)
    self.assertIsInstance(out, coords.LatLon)
    self.assertAlmostEqual(out.lat, -17.13840803300152, delta=1e-6)
    self.assertAlmostEqual(out.lon, 107.83117176701103, delta=1e-6)

  def test_config_overrides(self):
    config = wgs84.get_config()
    config.utm.scale_factor = 1.0
    out = convert.convert(config, lat=45.0, lon=3.0, zone=31)
    default = convert.convert(wgs84.get_config(), lat=45.0, lon=3.0, zone=31)
    self.assertAlmostEqual(out.northing * 0.9996, default.northing, places=6)

  def test_sphere_config(self):
    out = convert.convert(sphere.get_config(), lat=0.0, lon=3.0)
    self.assertEqual(out.easting, 500000.0)
    self.assertEqual(out.northing, 0.0)

  @parameterized.named_parameters(
      ("nothing", {}),
      ("both_directions", {"lat": 1.0, "lon": 2.0, "easting": 500000.0}),
      ("missing_lon", {"lat": 1.0}),
      ("missing_zone", {"easting": 500000.0, "northing": 1000.0}),
  )
  def test_usage_errors(self, kwargs):
    with self.assertRaises(app.UsageError):
      convert.convert(wgs84.get_config(), **kwargs)


if __name__ == "__main__":
  absltest.main()
