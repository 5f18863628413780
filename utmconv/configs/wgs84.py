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


"""WGS84 conversion config.

Example command:
python -m utmconv.convert --lat=-28.234982 --lon=79.293801 \
--config=utmconv/configs/wgs84.py
"""

from ml_collections import config_dict as cd


def get_ellipsoid_config():
  c = cd.ConfigDict()
  c.name = "WGS84"
  c.semi_major_axis = 6378137.0  # In meters.
  c.semi_minor_axis = 6356752.314  # In meters.
  return c


def get_utm_config():
  c = cd.ConfigDict()
  c.scale_factor = 0.9996
  return c


def get_config():
  config = cd.ConfigDict()
  config.ellipsoid = get_ellipsoid_config()
  config.utm = get_utm_config()
  return config
