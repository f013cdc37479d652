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

from typing import List, Sequence, TYPE_CHECKING

from ..geometry import Point, Line, geometry, as_point, PointLike
from ..intersection import Intersection
from .base_shape import BaseShape

if TYPE_CHECKING:
    from ..ray import ColoredRay


class Circle(BaseShape):
    """
    Full disk with no straight edges.

    The center is the only stored point, so it doubles as the reference point
    and the centroid.
    """

    type = 'Circle'

    def __init__(self, center: PointLike, radius: float) -> None:
        if radius <= 0:
            raise ValueError(f"{self.type} radius must be positive, got {radius}")
        super().__init__(0, [center], radius)

    @property
    def center(self) -> Point:
        return self.points[0]

    def _compute_centroid(self) -> Point:
        return self.points[0]

    def _with_points(self, points: Sequence[Point]) -> 'Circle':
        return Circle(points[0], self.radius)

    def edges(self) -> List[Line]:
        return []

    def contains_point(self, point: PointLike) -> bool:
        return geometry.distance(as_point(point), self.center) <= self.radius

    def intersections(self, ray: 'ColoredRay') -> List[Intersection]:
        return self._circle_intersections(ray, self.center, self.radius)

    def __repr__(self) -> str:
        return f"Circle(center=({self.center.x:.4g}, {self.center.y:.4g}), radius={self.radius:.4g})"
