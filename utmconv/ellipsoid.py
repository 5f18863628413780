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

"""Reference ellipsoid used by the projection series."""

import dataclasses
import math

import ml_collections


@dataclasses.dataclass(frozen=True)
class Ellipsoid:
  """Ellipsoid of revolution.

  Attributes:
    semi_major_axis: Equatorial radius `a`, in meters.
    semi_minor_axis: Polar radius `b`, in meters.
    name: Human readable name, only used for display.
  """
  semi_major_axis: float
  semi_minor_axis: float
  name: str = ""

  def __post_init__(self):
    a, b = self.semi_major_axis, self.semi_minor_axis
    if not (math.isfinite(a) and math.isfinite(b)):
      raise ValueError(f"Ellipsoid axes must be finite, got a={a}, b={b}.")
    # a == b is a sphere, which the series handle exactly.
    if not a >= b > 0:
      raise ValueError(f"Ellipsoid axes must satisfy a >= b > 0, got a={a}, "
                       f"b={b}.")

  @classmethod
  def from_config(cls, config: ml_collections.ConfigDict) -> "Ellipsoid":
    return cls(float(config.semi_major_axis), float(config.semi_minor_axis),
               config.get("name", ""))

  @property
  def n(self) -> float:
    """Third flattening, (a - b) / (a + b)."""
    a, b = self.semi_major_axis, self.semi_minor_axis
    return (a - b) / (a + b)

  @property
  def ep2(self) -> float:
    """Second eccentricity squared, (a^2 - b^2) / b^2."""
    a, b = self.semi_major_axis, self.semi_minor_axis
    return (a**2 - b**2) / b**2

  @property
  def alpha(self) -> float:
    """Scale of the meridian arc-length series."""
    n = self.n
    return ((self.semi_major_axis + self.semi_minor_axis) / 2.0 *
            (1.0 + n**2 / 4.0 + n**4 / 64.0))


def sphere(radius: float, name: str = "sphere") -> Ellipsoid:
  return Ellipsoid(radius, radius, name)


# Semi-minor axis is rounded to the millimeter.
WGS84 = Ellipsoid(6378137.0, 6356752.314, "WGS84")
