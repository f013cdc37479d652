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

from typing import Optional, Sequence

from ..geometry import geometry, as_point, PointLike
from .polygon import Polygon


class DivergingLens(Polygon):
    """
    Concave lens: four corners joined by three straight edges, closed by an arc
    between the last and the first corner that bites into the body.

    Corners are expected in clockwise order (e.g. top-left, top-right,
    bottom-right, bottom-left) so the arc sweeps into the rectangle.

    Attributes:
        radius: Arc radius. Defaults to half the distance between the first
            and last corner, so the arc passes through both.
    """

    type = 'DivergingLens'

    def __init__(self, reference_point_index: int, points: Sequence[PointLike],
                 radius: Optional[float] = None) -> None:
        if len(points) != 4:
            raise ValueError(f"{self.type} needs exactly 4 points, got {len(points)}")
        if radius is None:
            radius = geometry.distance(as_point(points[0]), as_point(points[-1])) / 2
        if radius <= 0:
            raise ValueError(f"{self.type} radius must be positive, got {radius}")
        super().__init__(reference_point_index, points, radius)
