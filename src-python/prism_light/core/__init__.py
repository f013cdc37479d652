"""
Copyright 2026 prism-light authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from .geometry import geometry, Point, Line, Circle, Geometry
from . import constants
from .color import wavelength_to_color
from .medium import (
    DispersionFunction, CauchyDispersion, Substance, Medium,
    AIR, WATER, GLASS, DIAMOND, MYSTERY_A, MYSTERY_B, SUBSTANCES,
)
from .intersection import Intersection, nearest_intersection, all_intersections, crossing_count
from .ray import ColoredRay, LightRaySegment
from .laser import Laser
from .scene import Scene
from .intensity_meter import IntensityMeter, Reading
from .simulator import Simulator, PropagationResult, get_reflected_power, get_transmitted_power

__all__ = [
    'geometry', 'Point', 'Line', 'Circle', 'Geometry',
    'constants',
    'wavelength_to_color',
    'DispersionFunction', 'CauchyDispersion', 'Substance', 'Medium',
    'AIR', 'WATER', 'GLASS', 'DIAMOND', 'MYSTERY_A', 'MYSTERY_B', 'SUBSTANCES',
    'Intersection', 'nearest_intersection', 'all_intersections', 'crossing_count',
    'ColoredRay', 'LightRaySegment',
    'Laser',
    'Scene',
    'IntensityMeter', 'Reading',
    'Simulator', 'PropagationResult', 'get_reflected_power', 'get_transmitted_power',
]
