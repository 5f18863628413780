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

"""Coordinate value types."""

import dataclasses

import pyproj


@dataclasses.dataclass(frozen=True)
class LatLon:
  """Geographic point, in degrees."""
  lat: float
  lon: float


@dataclasses.dataclass(frozen=True)
class UtmPoint:
  """Universal Transverse Mercator (UTM) point.

  Attributes:
    zone: UTM zone number, in [1, 60].
    easting: Easting in meters, with a false easting of 500 km.
    northing: Northing in meters. Points south of the equator carry a false
      northing of 10000 km.
    south_hemisphere: Whether the false northing was applied. Needed to
      convert the point back, since easting/northing alone do not encode it.
  """
  zone: int
  easting: float
  northing: float
  south_hemisphere: bool = False

  @property
  def epsg(self) -> str:
    return f"EPSG:32{7 if self.south_hemisphere else 6}{self.zone:02}"

  @property
  def crs(self) -> pyproj.CRS:
    """WGS84 / UTM coordinate reference system of this point."""
    return pyproj.CRS(self.epsg)

  def __str__(self) -> str:
    hemisphere = "S" if self.south_hemisphere else "N"
    return (f"{self.zone}{hemisphere} {self.easting:.3f}mE "
            f"{self.northing:.3f}mN")
