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
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

from ..geometry import Point, Line, geometry, as_point, PointLike
from ..intersection import Intersection

if TYPE_CHECKING:
    from ..ray import ColoredRay


class BaseShape(ABC):
    """
    The base class for the transparent bodies placed in a scene.

    A shape is an ordered sequence of corner points (insertion order is the
    winding order) plus an optional arc radius. A radius of 0 means a pure
    polygon; a positive radius means the boundary between the last and the
    first corner is a half-circle arc instead of a straight edge.

    Shapes are values. `translated()` and `rotated()` build new shapes and
    nothing mutates a shape after construction, so the recursive ray tree and
    any concurrent reader can hold on to the same instance safely.

    Subclasses must implement:
        contains_point(point)
        intersections(ray)
        edges()
        _compute_centroid()

    Attributes:
        points: Corner points (tuple of Point).
        reference_point_index: Index of the corner used as rotation drag handle.
        radius: Arc radius (0 for pure polygons).
        centroid: Default rotation pivot, computed once at construction.
    """

    type = 'BaseShape'

    def __init__(self, reference_point_index: int, points: Sequence[PointLike], radius: float = 0.0) -> None:
        self.points: Tuple[Point, ...] = tuple(as_point(p) for p in points)
        if not self.points:
            raise ValueError(f"{self.type} needs at least one point")
        if not 0 <= reference_point_index < len(self.points):
            raise ValueError(
                f"reference_point_index {reference_point_index} out of range for "
                f"{len(self.points)} points"
            )
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        self.reference_point_index = reference_point_index
        self.radius = float(radius)
        self.centroid: Point = self._compute_centroid()

    # ------------------------------------------------------------------
    # Interface
    # ------------------------------------------------------------------

    @abstractmethod
    def contains_point(self, point: PointLike) -> bool:
        """Whether the point lies in the closed region of the shape."""

    @abstractmethod
    def intersections(self, ray: 'ColoredRay') -> List[Intersection]:
        """
        Every crossing of the ray with the boundary.

        The ray only needs `tail` and `direction_unit_vector`. Each returned
        normal points back toward the incoming ray.
        """

    @abstractmethod
    def edges(self) -> List[Line]:
        """Straight boundary edges."""

    @abstractmethod
    def _compute_centroid(self) -> Point:
        pass

    def _with_points(self, points: Sequence[Point]) -> 'BaseShape':
        """New shape of the same kind with different corners."""
        return type(self)(self.reference_point_index, points, self.radius)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def translated(self, dx: float, dy: float) -> 'BaseShape':
        """
        Create a copy shifted by (dx, dy). The radius is unchanged.
        """
        return self._with_points([geometry.point(p.x + dx, p.y + dy) for p in self.points])

    def rotated(self, angle: float, pivot: Optional[PointLike] = None) -> 'BaseShape':
        """
        Create a copy rotated about a pivot.

        Args:
            angle: Rotation angle in radians (counter-clockwise positive).
            pivot: Center of rotation (defaults to the centroid).
        """
        center = self.centroid if pivot is None else as_point(pivot)
        return self._with_points([geometry.rotate_about(p, angle, center) for p in self.points])

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_point(self, i: int) -> Point:
        return self.points[i]

    @property
    def reference_point(self) -> Point:
        """Corner used for rotation drag handles."""
        return self.points[self.reference_point_index]

    @property
    def rotation_center(self) -> Point:
        return self.centroid

    def signed_area(self) -> float:
        """Signed shoelace area of the corner points (positive = CCW)."""
        return geometry.signed_area(list(self.points))

    # ------------------------------------------------------------------
    # Intersection helpers shared by the variants
    # ------------------------------------------------------------------

    @staticmethod
    def _edge_intersections(ray: 'ColoredRay', edges: List[Line]) -> List[Intersection]:
        """Crossings of the ray with straight edges."""
        tail = ray.tail
        direction = ray.direction_unit_vector
        ray_line = geometry.line(tail, tail.plus(direction))

        found = []
        for edge in edges:
            point = geometry.lines_intersection(ray_line, edge)
            if not (math.isfinite(point.x) and math.isfinite(point.y)):
                # Parallel or zero-length edge
                continue
            if not (geometry.intersection_is_on_segment(point, edge) and
                    geometry.intersection_is_on_ray(point, ray_line)):
                continue

            normal = geometry.normalize_vec(geometry.perpendicular(edge.p2.minus(edge.p1)))
            if geometry.dot(direction, normal) >= 0:
                normal = normal.negated()
            found.append(Intersection(point, normal))
        return found

    @staticmethod
    def _circle_intersections(ray: 'ColoredRay', center: Point, radius: float,
                              arc_direction: Optional[Point] = None) -> List[Intersection]:
        """
        Crossings of the ray with a circle, or with the half of it lying on the
        `arc_direction` side of the center.

        The infinite-line circle test also returns points behind the tail, so
        only points strictly ahead of the ray are kept. A tangent point is not a
        crossing and is dropped.
        """
        tail = ray.tail
        direction = ray.direction_unit_vector
        candidates = geometry.line_circle_intersections(
            geometry.line(tail, tail.plus(direction)),
            geometry.circle(center, radius)
        )

        found = []
        for point in candidates:
            offset = point.minus(center)
            if arc_direction is not None and geometry.dot(offset, arc_direction) < 0:
                continue
            if geometry.dot(point.minus(tail), direction) <= 0:
                continue
            if offset.magnitude() == 0:
                continue
            normal = geometry.normalize_vec(offset)
            facing = geometry.dot(normal, direction)
            if facing == 0:
                # Tangent: the ray grazes the circle without crossing it
                continue
            if facing > 0:
                normal = normal.negated()
            found.append(Intersection(point, normal))
        return found

    def __repr__(self) -> str:
        pts = ', '.join(f"({p.x:.4g}, {p.y:.4g})" for p in self.points)
        return f"{self.type}(reference_point_index={self.reference_point_index}, points=[{pts}], radius={self.radius:.4g})"


class ArcBoundedShape(BaseShape):
    """
    Shape whose boundary between the last and the first corner is a
    half-circle arc.

    The arc is centered on the midpoint of the first and last corner. It
    starts at the direction from the center toward the first corner and
    sweeps pi clockwise, so its bulge points along `arc_direction`.
    """

    type = 'ArcBoundedShape'

    @property
    def center(self) -> Point:
        return geometry.midpoint(self.points[0], self.points[-1])

    @property
    def arc_direction(self) -> Point:
        """Unit vector from the center toward the middle of the arc."""
        start = geometry.normalize_vec(self.points[0].minus(self.center))
        return geometry.point(start.y, -start.x)

    def in_half_disk(self, point: Point) -> bool:
        """Whether the point lies in the closed half-disk bounded by the arc."""
        offset = point.minus(self.center)
        return (offset.magnitude() <= self.radius and
                geometry.dot(offset, self.arc_direction) >= 0)

    def arc_intersections(self, ray: 'ColoredRay') -> List[Intersection]:
        return self._circle_intersections(ray, self.center, self.radius, self.arc_direction)

    def edges(self) -> List[Line]:
        """Edges between consecutive corners, without the closing edge the arc replaces."""
        return [geometry.line(self.points[i], self.points[i + 1]) for i in range(len(self.points) - 1)]

    def intersections(self, ray: 'ColoredRay') -> List[Intersection]:
        return self._edge_intersections(ray, self.edges()) + self.arc_intersections(ray)
