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

"""Conversion between latitude/longitude and UTM coordinates."""

import math

from absl import logging
import numpy as np

from utmconv import coords
from utmconv import ellipsoid as ellipsoid_lib
from utmconv import transverse_mercator

SCALE_FACTOR = 0.9996
FALSE_EASTING = 500_000.0
FALSE_NORTHING = 10_000_000.0  # Southern hemisphere only.

MIN_ZONE = 1
MAX_ZONE = 60
ZONE_WIDTH_DEG = 6


class InvalidZoneError(ValueError):
  """UTM zone is not an integer in [1, 60]."""


def zone_number_from_longitude(lon: float) -> int:
  """Returns the zone whose 6 degree strip contains `lon` (no clamping)."""
  if not math.isfinite(lon):
    raise InvalidZoneError(f"Cannot derive a UTM zone from longitude {lon}.")
  return int(math.floor((lon + 180.0) / ZONE_WIDTH_DEG)) + 1


def check_zone(zone: int) -> int:
  if (isinstance(zone, bool) or not isinstance(zone, (int, np.integer))
      or not MIN_ZONE <= zone <= MAX_ZONE):
    raise InvalidZoneError(
        f"UTM zone must be an integer in [{MIN_ZONE}, {MAX_ZONE}], "
        f"got {zone!r}.")
  return int(zone)


def central_meridian(zone: int) -> float:
  """Returns the central meridian of `zone`, in radians."""
  return math.radians(-183.0 + ZONE_WIDTH_DEG * zone)


def lat_lon_to_utm(
    lat: float,
    lon: float,
    zone: int | None = None,
    *,
    ellipsoid: ellipsoid_lib.Ellipsoid = ellipsoid_lib.WGS84,
    scale_factor: float = SCALE_FACTOR,
) -> coords.UtmPoint:
  """Converts a latitude/longitude pair to UTM.

  Latitude and longitude ranges are not validated; `lon` only picks the zone
  when none is given.

  Args:
    lat: Latitude of the point, in degrees.
    lon: Longitude of the point, in degrees.
    zone: UTM zone to project into. Derived from `lon` when None.
    ellipsoid: Reference ellipsoid.
    scale_factor: Scale factor along the central meridian.

  Returns:
    The UTM point. `south_hemisphere` is set when the false northing was added
    to keep the northing positive.

  Raises:
    InvalidZoneError: If the given or derived zone is not in [1, 60].
  """
  if zone is None:
    zone = zone_number_from_longitude(lon)
    logging.debug("Derived UTM zone %d from longitude %f.", zone, lon)
  zone = check_zone(zone)

  x, y = transverse_mercator.map_lat_lon_to_xy(
      math.radians(lat), math.radians(lon), central_meridian(zone), ellipsoid)
  easting = float(x) * scale_factor + FALSE_EASTING
  northing = float(y) * scale_factor
  south_hemisphere = northing < 0.0
  if south_hemisphere:
    northing += FALSE_NORTHING
  return coords.UtmPoint(zone, easting, northing, south_hemisphere)


def utm_to_lat_lon(
    easting: float,
    northing: float,
    zone: int,
    south_hemisphere: bool = False,
    *,
    ellipsoid: ellipsoid_lib.Ellipsoid = ellipsoid_lib.WGS84,
    scale_factor: float = SCALE_FACTOR,
) -> coords.LatLon:
  """Converts UTM coordinates to a latitude/longitude pair.

  The hemisphere is never inferred from the northing and must be given.

  Args:
    easting: Easting of the point, in meters.
    northing: Northing of the point, in meters.
    zone: UTM zone of the point.
    south_hemisphere: Whether the northing carries the southern false
      northing.
    ellipsoid: Reference ellipsoid.
    scale_factor: Scale factor along the central meridian.

  Returns:
    Latitude and longitude, in degrees.

  Raises:
    InvalidZoneError: If `zone` is not in [1, 60].
  """
  zone = check_zone(zone)
  x = (easting - FALSE_EASTING) / scale_factor
  if south_hemisphere:
    northing -= FALSE_NORTHING
  y = northing / scale_factor

  phi, lam = transverse_mercator.map_xy_to_lat_lon(
      x, y, central_meridian(zone), ellipsoid)
  return coords.LatLon(math.degrees(phi), math.degrees(lam))


def to_lat_lon(point: coords.UtmPoint, **kwargs) -> coords.LatLon:
  """Converts a `UtmPoint` back using its own zone and hemisphere."""
  return utm_to_lat_lon(point.easting, point.northing, point.zone,
                        point.south_hemisphere, **kwargs)
