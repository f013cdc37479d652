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

import math
from dataclasses import dataclass
from typing import Dict, Any

from shapely.geometry import LineString

from .geometry import Point, geometry
from .color import RGBA
from .constants import SPEED_OF_LIGHT, UNIT_VECTOR_TOLERANCE

INTERACTION_TYPES = ('source', 'reflect', 'refract', 'tir')


@dataclass(frozen=True)
class ColoredRay:
    """
    A ray travelling through one medium, as seen by the refraction engine.

    A fresh ColoredRay is built at every recursion step; nothing mutates one
    after construction.

    Attributes:
        tail (Point): Starting point of the ray
        direction_unit_vector (Point): Unit direction of travel
        power (float): Fraction of the source power carried (0.0 to 1.0)
        wavelength (float): Vacuum wavelength in meters
        medium_index_of_refraction (float): Index of the medium the ray travels through
        frequency (float): Frequency in Hz
        interaction_type (str): How this ray was created:
            'source' = emitted by the laser (no parent)
            'reflect' = partial reflection at a boundary
            'refract' = Snell's law refraction
            'tir' = total internal reflection

    Raises:
        ValueError: If the direction is not a unit vector or the medium index
            is not strictly positive.
    """
    tail: Point
    direction_unit_vector: Point
    power: float
    wavelength: float
    medium_index_of_refraction: float
    frequency: float
    interaction_type: str = 'source'

    def __post_init__(self) -> None:
        length = self.direction_unit_vector.magnitude()
        if not abs(length - 1.0) <= UNIT_VECTOR_TOLERANCE:
            raise ValueError(
                f"direction_unit_vector must have unit length, got length {length}"
            )
        if not self.medium_index_of_refraction > 0:
            raise ValueError(
                f"medium_index_of_refraction must be positive, got {self.medium_index_of_refraction}"
            )
        if self.interaction_type not in INTERACTION_TYPES:
            raise ValueError(
                f"Invalid interaction_type '{self.interaction_type}'. "
                f"Valid options: {INTERACTION_TYPES}"
            )

    @classmethod
    def from_wavelength(cls, tail: Point, direction_unit_vector: Point, power: float,
                        wavelength: float, medium_index_of_refraction: float) -> 'ColoredRay':
        """Build a source ray, deriving the frequency from the vacuum wavelength."""
        return cls(tail, direction_unit_vector, power, wavelength,
                   medium_index_of_refraction, SPEED_OF_LIGHT / wavelength)

    @property
    def base_wavelength(self) -> float:
        """Vacuum wavelength implied by the frequency; used for dispersion lookups."""
        return SPEED_OF_LIGHT / self.frequency

    @property
    def wavelength_in_medium(self) -> float:
        return self.wavelength / self.medium_index_of_refraction

    def point_at(self, distance: float) -> Point:
        """Point reached after travelling `distance` along the ray."""
        return self.tail.plus(self.direction_unit_vector.times(distance))

    def __repr__(self) -> str:
        return (f"ColoredRay(tail=({self.tail.x:.4g}, {self.tail.y:.4g}), "
                f"dir=({self.direction_unit_vector.x:.4f}, {self.direction_unit_vector.y:.4f}), "
                f"power={self.power:.6f}, wavelength={self.wavelength * 1e9:.1f}nm, "
                f"n={self.medium_index_of_refraction:.4f}, {self.interaction_type})")


@dataclass(frozen=True)
class LightRaySegment:
    """
    Finalized piece of a light path, consumed by renderers and sensors.

    Attributes:
        tail (Point): Start of the segment
        tip (Point): End of the segment
        medium_index_of_refraction (float): Index of the medium the segment lies in
        wavelength_in_medium (float): Wavelength inside that medium (m)
        wavelength_in_vacuum_nm (float): Vacuum wavelength in nanometers
        power (float): Power fraction carried (used for alpha/intensity weighting)
        color (tuple): RGBA color derived from the vacuum wavelength
        wave_width (float): Beam width used by wave-view renderers (m)
        origin_tag (str): Producer of the segment ('prism')
        interaction_type (str): How the segment's ray was created (see ColoredRay)
        depth (int): Recursion depth at which the segment was produced
    """
    tail: Point
    tip: Point
    medium_index_of_refraction: float
    wavelength_in_medium: float
    wavelength_in_vacuum_nm: float
    power: float
    color: RGBA
    wave_width: float
    origin_tag: str
    interaction_type: str = 'source'
    depth: int = 0

    @property
    def length(self) -> float:
        return geometry.distance(self.tail, self.tip)

    @property
    def angle(self) -> float:
        """Direction of travel in radians."""
        return math.atan2(self.tip.y - self.tail.y, self.tip.x - self.tail.x)

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString([(self.tail.x, self.tail.y), (self.tip.x, self.tip.y)])

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view for renderers."""
        return {
            'tail': self.tail.to_dict(),
            'tip': self.tip.to_dict(),
            'medium_index_of_refraction': self.medium_index_of_refraction,
            'wavelength_in_medium': self.wavelength_in_medium,
            'wavelength_in_vacuum_nm': self.wavelength_in_vacuum_nm,
            'power': self.power,
            'color': self.color,
            'wave_width': self.wave_width,
            'origin_tag': self.origin_tag,
            'interaction_type': self.interaction_type,
            'depth': self.depth,
        }
