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

from typing import Sequence

from ..geometry import Point, geometry, as_point, PointLike
from .base_shape import ArcBoundedShape


class SemiCircle(ArcBoundedShape):
    """
    Half-disk: the flat side joins the two corners, the arc closes the shape.

    Attributes:
        points: The two ends of the diameter.
        radius: Arc radius (half the diameter length for a true half-disk).
    """

    type = 'SemiCircle'

    def __init__(self, reference_point_index: int, points: Sequence[PointLike], radius: float) -> None:
        if len(points) != 2:
            raise ValueError(f"{self.type} needs exactly 2 points, got {len(points)}")
        if radius <= 0:
            raise ValueError(f"{self.type} radius must be positive, got {radius}")
        super().__init__(reference_point_index, points, radius)

    def _compute_centroid(self) -> Point:
        return geometry.midpoint(self.points[0], self.points[1])

    def contains_point(self, point: PointLike) -> bool:
        return self.in_half_disk(as_point(point))
