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

from shapely.geometry import Polygon as ShapelyPolygon

from ..geometry import Point, Line, geometry, as_point, PointLike
from ..intersection import Intersection
from .base_shape import ArcBoundedShape

if TYPE_CHECKING:
    from ..ray import ColoredRay


class Polygon(ArcBoundedShape):
    """
    Prism with straight edges, optionally with one edge replaced by an arc.

    With radius 0 the corners form a closed polygon (the last corner connects
    back to the first). With a positive radius the closing edge is replaced
    by a half-circle arc centered on the midpoint of the first and last
    corner, which gives lens-like compound shapes.

    Attributes:
        points: Corner points in winding order (at least 3).
        reference_point_index: Corner used as the rotation drag handle.
        radius: Arc radius, 0 for a pure polygon.

    Usage:
        triangle = Polygon(1, [(-1, 0), (1, 0), (0, 1)])
        moved = triangle.translated(0.5, 0.0).rotated(math.pi / 6)
    """

    type = 'Polygon'

    def __init__(self, reference_point_index: int, points: Sequence[PointLike], radius: float = 0.0) -> None:
        if len(points) < 3:
            raise ValueError(f"{self.type} needs at least 3 points, got {len(points)}")
        super().__init__(reference_point_index, points, radius)
        self._region = ShapelyPolygon([(p.x, p.y) for p in self.points])

    def _compute_centroid(self) -> Point:
        return geometry.polygon_centroid(list(self.points))

    @property
    def is_compound(self) -> bool:
        return self.radius > 0

    def edges(self) -> List[Line]:
        """
        Bounding edges. The closing edge is included only for pure polygons;
        compound shapes close with the arc instead.
        """
        lines = super().edges()
        if not self.is_compound:
            lines.append(geometry.line(self.points[-1], self.points[0]))
        return lines

    def contains_point(self, point: PointLike) -> bool:
        """
        Closed-region test.

        For compound shapes the half-disk bounded by the arc is added to the
        polygon when the arc bulges outward and cut from it when the arc bites
        inward; the symmetric difference covers both cases.
        """
        p = as_point(point)
        inside_polygon = self._region.covers(p.to_shapely())
        if not self.is_compound:
            return inside_polygon
        return inside_polygon != self.in_half_disk(p)

    def intersections(self, ray: 'ColoredRay') -> List[Intersection]:
        found = self._edge_intersections(ray, self.edges())
        if self.is_compound:
            found.extend(self.arc_intersections(ray))
        return found

    def to_shapely(self) -> ShapelyPolygon:
        """Shapely polygon of the corner points (arc ignored)."""
        return self._region
