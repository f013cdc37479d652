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
from typing import Optional

from .geometry import Point, geometry, as_point, PointLike
from .constants import WAVELENGTH_RED, MIN_WAVELENGTH, MAX_WAVELENGTH, SPEED_OF_LIGHT


class Laser:
    """
    The light source: a beam emitted from `emission_point` toward `pivot`.

    Attributes:
        emission_point (Point): Where the beam leaves the laser
        pivot (Point): Point the laser aims at (and rotates about)
        wavelength (float): Vacuum wavelength in meters, used in 'singleColor' mode
        color_mode (str): 'singleColor' for a monochromatic beam, 'white' for a
            beam decomposed into sampled wavelengths
        on (bool): Whether the laser emits at all
        power (float): Power of every emitted source ray (0.0 to 1.0)
    """

    VALID_COLOR_MODES = ('singleColor', 'white')

    def __init__(self, emission_point: PointLike, pivot: PointLike = (0.0, 0.0),
                 wavelength: float = WAVELENGTH_RED, color_mode: str = 'singleColor',
                 on: bool = True, power: float = 1.0) -> None:
        self.emission_point = as_point(emission_point)
        self.pivot = as_point(pivot)
        if self.emission_point == self.pivot:
            raise ValueError("emission_point and pivot must differ to define a direction")
        self.wavelength = wavelength
        self.color_mode = color_mode
        self.on = on
        self.power = power

    @classmethod
    def from_angle(cls, angle: float, distance_from_pivot: float,
                   pivot: PointLike = (0.0, 0.0), **kwargs) -> 'Laser':
        """
        Place the laser at `distance_from_pivot` from the pivot, at `angle`
        radians measured counter-clockwise from +x, aiming at the pivot.
        """
        p = as_point(pivot)
        emission_point = geometry.point(
            p.x + distance_from_pivot * math.cos(angle),
            p.y + distance_from_pivot * math.sin(angle)
        )
        return cls(emission_point, p, **kwargs)

    @property
    def wavelength(self) -> float:
        return self._wavelength

    @wavelength.setter
    def wavelength(self, value: float) -> None:
        if not MIN_WAVELENGTH <= value <= MAX_WAVELENGTH:
            raise ValueError(
                f"Invalid wavelength {value}. "
                f"Valid range: [{MIN_WAVELENGTH}, {MAX_WAVELENGTH}] m"
            )
        self._wavelength = value

    @property
    def color_mode(self) -> str:
        return self._color_mode

    @color_mode.setter
    def color_mode(self, value: str) -> None:
        if value not in self.VALID_COLOR_MODES:
            raise ValueError(
                f"Invalid color_mode '{value}'. "
                f"Valid options: {self.VALID_COLOR_MODES}"
            )
        self._color_mode = value

    @property
    def power(self) -> float:
        return self._power

    @power.setter
    def power(self, value: float) -> None:
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Invalid power {value}. Valid range: [0, 1]")
        self._power = value

    @property
    def frequency(self) -> float:
        return SPEED_OF_LIGHT / self.wavelength

    @property
    def direction_unit_vector(self) -> Point:
        return geometry.normalize_vec(self.pivot.minus(self.emission_point))

    @property
    def angle(self) -> float:
        """Angle of the emission point about the pivot (radians)."""
        return math.atan2(self.emission_point.y - self.pivot.y, self.emission_point.x - self.pivot.x)

    def translate(self, dx: float, dy: float) -> None:
        """Move emission point and pivot together."""
        self.emission_point = geometry.point(self.emission_point.x + dx, self.emission_point.y + dy)
        self.pivot = geometry.point(self.pivot.x + dx, self.pivot.y + dy)

    def set_angle(self, angle: float, pivot: Optional[PointLike] = None) -> None:
        """Swing the emission point around the pivot, keeping its distance."""
        if pivot is not None:
            self.pivot = as_point(pivot)
        distance = geometry.distance(self.emission_point, self.pivot)
        self.emission_point = geometry.point(
            self.pivot.x + distance * math.cos(angle),
            self.pivot.y + distance * math.sin(angle)
        )

    def __repr__(self) -> str:
        return (f"Laser(emission_point={self.emission_point}, pivot={self.pivot}, "
                f"wavelength={self.wavelength * 1e9:.1f}nm, color_mode='{self.color_mode}', on={self.on})")
