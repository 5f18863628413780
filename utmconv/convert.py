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


r"""Converts a single point between latitude/longitude and UTM.

Example command lines:
python -m utmconv.convert --lat=-28.234982 --lon=79.293801
python -m utmconv.convert --easting=234000 --northing=712398 --zone=24
python -m utmconv.convert --easting=801239 --northing=8102939 --zone=48 \
--south --config=utmconv/configs/wgs84.py
"""

import os

from absl import app
from absl import flags
from absl import logging
import ml_collections
from ml_collections import config_flags
from utmconv import coords
from utmconv import ellipsoid as ellipsoid_lib
from utmconv import utm_lib


_CONFIG = config_flags.DEFINE_config_file(
    "config",
    os.path.join(os.path.dirname(__file__), "configs", "wgs84.py"),
    "Ellipsoid and UTM config.",
    lock_config=True,
)
flags.DEFINE_float("lat", None, "Latitude in degrees (forward conversion).")
flags.DEFINE_float("lon", None, "Longitude in degrees (forward conversion).")
flags.DEFINE_float("easting", None, "Easting in meters (inverse conversion).")
flags.DEFINE_float("northing", None,
                   "Northing in meters (inverse conversion).")
flags.DEFINE_integer("zone", None, "UTM zone. Required for the inverse "
                     "conversion, derived from --lon if not set otherwise.")
flags.DEFINE_bool("south", False,
                  "Inverse conversion: the point is in the southern "
                  "hemisphere.")
FLAGS = flags.FLAGS


def convert(
    config: ml_collections.ConfigDict,
    *,
    lat: float | None = None,
    lon: float | None = None,
    easting: float | None = None,
    northing: float | None = None,
    zone: int | None = None,
    south: bool = False,
) -> coords.UtmPoint | coords.LatLon:
  """Runs the forward or the inverse conversion, whichever inputs are set."""
  forward = lat is not None or lon is not None
  inverse = easting is not None or northing is not None
  if forward == inverse:
    raise app.UsageError(
        "Set either --lat/--lon or --easting/--northing/--zone.")
  ellipsoid = ellipsoid_lib.Ellipsoid.from_config(config.ellipsoid)
  kw = dict(ellipsoid=ellipsoid, scale_factor=config.utm.scale_factor)

  if forward:
    if lat is None or lon is None:
      raise app.UsageError("Both --lat and --lon are required.")
    return utm_lib.lat_lon_to_utm(lat, lon, zone, **kw)
  if easting is None or northing is None or zone is None:
    raise app.UsageError("--easting, --northing and --zone are required.")
  return utm_lib.utm_to_lat_lon(easting, northing, zone, south, **kw)


def main(argv):
  if len(argv) > 1:
    raise app.UsageError("Too many command-line arguments.")
  config = _CONFIG.value
  logging.info("Using ellipsoid %s (a=%f, b=%f).", config.ellipsoid.name,
               config.ellipsoid.semi_major_axis,
               config.ellipsoid.semi_minor_axis)
  result = convert(config, lat=FLAGS.lat, lon=FLAGS.lon,
                   easting=FLAGS.easting, northing=FLAGS.northing,
                   zone=FLAGS.zone, south=FLAGS.south)
  logging.info("Converted to %r", result)
  if isinstance(result, coords.UtmPoint):
    print(f"{result} ({result.epsg})")
  else:
    print(f"{result.lat:.9f} {result.lon:.9f}")


def run():
  app.run(main)


if __name__ == "__main__":
  run()
