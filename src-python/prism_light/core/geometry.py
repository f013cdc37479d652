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
from typing import Union, List, Dict, Iterator
from shapely.geometry import Point as ShapelyPoint, LineString


class Point:
    """
    A point (or vector) in 2D space.

    Points are values: the arithmetic helpers always return new points and
    nothing in the package mutates a point after construction.
    Can be converted to/from Shapely Point objects.
    """
    __slots__ = ('x', 'y')

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def plus(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def minus(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def times(self, scalar: float) -> 'Point':
        return Point(self.x * scalar, self.y * scalar)

    def negated(self) -> 'Point':
        return Point(-self.x, -self.y)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    __add__ = plus
    __sub__ = minus
    __mul__ = times
    __neg__ = negated

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    @classmethod
    def from_shapely(cls, sp: ShapelyPoint) -> 'Point':
        """Create Point from Shapely Point."""
        return cls(sp.x, sp.y)

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary representation."""
        return {'x': self.x, 'y': self.y}


class Line:
    """
    A line in 2D space, defined by two points.
    Can represent a line, ray, or segment depending on context.
    - As a line: p1 and p2 are two distinct points on the line.
    - As a ray: p1 is the starting point and p2 is another point on the ray.
    - As a segment: p1 and p2 are the two endpoints.
    """
    def __init__(self, p1: Point, p2: Point):
        self.p1 = p1
        self.p2 = p2

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString([(self.p1.x, self.p1.y), (self.p2.x, self.p2.y)])

    @classmethod
    def from_shapely(cls, sl: LineString) -> 'Line':
        """Create Line from Shapely LineString."""
        coords = list(sl.coords)
        return cls(Point(coords[0][0], coords[0][1]), Point(coords[1][0], coords[1][1]))

    def __repr__(self) -> str:
        return f"Line(p1={self.p1}, p2={self.p2})"


class Circle:
    """
    A circle in 2D space, defined by a center point and a radius.
    """
    def __init__(self, c: Point, r: float):
        self.c = c
        self.r = r

    def to_shapely(self):
        """Convert to Shapely polygon (buffered approximation of the disk)."""
        return self.c.to_shapely().buffer(self.r)

    def __repr__(self) -> str:
        return f"Circle(c={self.c}, r={self.r})"


class Geometry:
    """
    The geometry module, which provides basic geometric figures and operations
    on points treated either as positions or as vectors.
    """

    @staticmethod
    def point(x: float, y: float) -> Point:
        """
        Create a point.

        Args:
            x: The x-coordinate of the point.
            y: The y-coordinate of the point.

        Returns:
            Point object
        """
        return Point(x, y)

    @staticmethod
    def line(p1: Point, p2: Point) -> Line:
        """
        Create a line, which also represents a ray or a segment.

        Args:
            p1: First point
            p2: Second point

        Returns:
            Line object
        """
        return Line(p1, p2)

    @staticmethod
    def circle(c: Point, r: float) -> Circle:
        """
        Create a circle.

        Args:
            c: The center point of the circle.
            r: The radius of the circle.

        Returns:
            Circle object
        """
        return Circle(c, r)

    @staticmethod
    def dot(p1: Point, p2: Point) -> float:
        """
        Calculate the dot product, where the two points are treated as vectors.

        Args:
            p1: First point (as vector)
            p2: Second point (as vector)

        Returns:
            Dot product
        """
        return p1.x * p2.x + p1.y * p2.y

    @staticmethod
    def cross(p1: Point, p2: Point) -> float:
        """
        Calculate the cross product, where the two points are treated as vectors.

        Args:
            p1: First point (as vector)
            p2: Second point (as vector)

        Returns:
            Cross product (z-component in 2D)
        """
        return p1.x * p2.y - p1.y * p2.x

    @staticmethod
    def lines_intersection(l1: Line, l2: Line) -> Point:
        """
        Calculate the intersection of two lines.

        Args:
            l1: First line
            l2: Second line

        Returns:
            Intersection point, or a point at infinity when the lines are
            parallel (or one of them is degenerate)
        """
        A = l1.p2.x * l1.p1.y - l1.p1.x * l1.p2.y
        B = l2.p2.x * l2.p1.y - l2.p1.x * l2.p2.y
        xa = l1.p2.x - l1.p1.x
        xb = l2.p2.x - l2.p1.x
        ya = l1.p2.y - l1.p1.y
        yb = l2.p2.y - l2.p1.y

        denominator = xa * yb - xb * ya

        if denominator == 0:
            # Parallel, coincident or zero-length: signal "no intersection"
            return Geometry.point(float('inf'), float('inf'))

        x = (A * xb - B * xa) / denominator
        y = (A * yb - B * ya) / denominator

        return Geometry.point(x, y)

    @staticmethod
    def line_circle_intersections(l1: Line, c1: Circle) -> List[Point]:
        """
        Calculate the intersections of a line and a circle.

        Args:
            l1: Line
            c1: Circle

        Returns:
            List of intersection points (empty, or two points which coincide
            when the line is tangent)
        """
        xa = l1.p2.x - l1.p1.x
        ya = l1.p2.y - l1.p1.y
        cx = c1.c.x
        cy = c1.c.y
        r_sq = c1.r * c1.r

        l = math.sqrt(xa * xa + ya * ya)
        if l == 0:
            return []
        ux = xa / l
        uy = ya / l

        # Project circle center onto line
        cu = (cx - l1.p1.x) * ux + (cy - l1.p1.y) * uy
        px = l1.p1.x + cu * ux
        py = l1.p1.y + cu * uy

        dist_sq = r_sq - (px - cx) * (px - cx) - (py - cy) * (py - cy)

        if dist_sq < 0:
            return []

        d = math.sqrt(dist_sq)

        return [
            Geometry.point(px + ux * d, py + uy * d),
            Geometry.point(px - ux * d, py - uy * d),
        ]

    @staticmethod
    def intersection_is_on_ray(p1: Point, r1: Line) -> bool:
        """
        Test if a point on the extension of a ray is actually on the ray.

        Args:
            p1: Point to test
            r1: Ray (line where p1 is the start)

        Returns:
            True if point is on the ray
        """
        return (p1.x - r1.p1.x) * (r1.p2.x - r1.p1.x) + (p1.y - r1.p1.y) * (r1.p2.y - r1.p1.y) >= 0

    @staticmethod
    def intersection_is_on_segment(p1: Point, s1: Line) -> bool:
        """
        Test if a point on the extension of a segment is actually on the segment.

        Args:
            p1: Point to test
            s1: Segment (line with two endpoints)

        Returns:
            True if point is on the segment
        """
        cond1 = (p1.x - s1.p1.x) * (s1.p2.x - s1.p1.x) + (p1.y - s1.p1.y) * (s1.p2.y - s1.p1.y) >= 0
        cond2 = (p1.x - s1.p2.x) * (s1.p1.x - s1.p2.x) + (p1.y - s1.p2.y) * (s1.p1.y - s1.p2.y) >= 0
        return cond1 and cond2

    @staticmethod
    def distance(p1: Point, p2: Point) -> float:
        """
        Calculate the distance between two points.

        Args:
            p1: First point
            p2: Second point

        Returns:
            Distance between points
        """
        return math.sqrt(Geometry.distance_squared(p1, p2))

    @staticmethod
    def distance_squared(p1: Point, p2: Point) -> float:
        """
        Calculate the squared distance between two points.

        Args:
            p1: First point
            p2: Second point

        Returns:
            Squared distance between points
        """
        dx = p1.x - p2.x
        dy = p1.y - p2.y
        return dx * dx + dy * dy

    @staticmethod
    def midpoint(p1: Point, p2: Point) -> Point:
        """
        Calculate the midpoint between two points.

        Args:
            p1: First point
            p2: Second point

        Returns:
            Midpoint
        """
        nx = (p1.x + p2.x) * 0.5
        ny = (p1.y + p2.y) * 0.5
        return Geometry.point(nx, ny)

    @staticmethod
    def normalize_vec(p1: Point) -> Point:
        """
        Normalize the given point as if it were a vector.

        Args:
            p1: Point (as vector)

        Returns:
            Normalized vector

        Raises:
            ValueError: If the vector has zero length.
        """
        len_val = p1.magnitude()
        if len_val == 0:
            raise ValueError("Cannot normalize a zero-length vector.")
        return Geometry.point(p1.x / len_val, p1.y / len_val)

    @staticmethod
    def rotate_vec(p1: Point, angle: float) -> Point:
        """
        Rotate the given point as if it were a vector by the given angle in radians
        (counter-clockwise positive).

        Args:
            p1: Point (as vector)
            angle: Rotation angle in radians

        Returns:
            Rotated vector
        """
        return Geometry.point(
            p1.x * math.cos(angle) - p1.y * math.sin(angle),
            p1.x * math.sin(angle) + p1.y * math.cos(angle)
        )

    @staticmethod
    def rotate_about(p1: Point, angle: float, pivot: Point) -> Point:
        """
        Rotate a position about a pivot by the given angle in radians.

        Args:
            p1: Point to rotate
            angle: Rotation angle in radians (counter-clockwise positive)
            pivot: Center of rotation

        Returns:
            Rotated point
        """
        return Geometry.rotate_vec(p1.minus(pivot), angle).plus(pivot)

    @staticmethod
    def perpendicular(p1: Point) -> Point:
        """Rotate a vector by +90 degrees."""
        return Geometry.point(-p1.y, p1.x)

    @staticmethod
    def signed_area(points: List[Point]) -> float:
        """
        Signed area of a closed polygon (shoelace formula).

        Positive for counter-clockwise winding.

        Args:
            points: Corner points in winding order

        Returns:
            Signed area
        """
        a = 0.0
        n = len(points)
        for i in range(n):
            j = (i + 1) % n
            a += points[i].x * points[j].y
            a -= points[j].x * points[i].y
        return a * 0.5

    @staticmethod
    def polygon_centroid(points: List[Point]) -> Point:
        """
        Area centroid of a closed polygon.

        Args:
            points: Corner points in winding order

        Returns:
            Centroid

        Raises:
            ValueError: If the polygon has zero area.
        """
        cx = 0.0
        cy = 0.0
        n = len(points)
        for i in range(n):
            j = (i + 1) % n
            k = points[i].x * points[j].y - points[j].x * points[i].y
            cx += (points[i].x + points[j].x) * k
            cy += (points[i].y + points[j].y) * k
        a = Geometry.signed_area(points)
        if a == 0:
            raise ValueError("Cannot compute the centroid of a zero-area polygon.")
        f = 1 / (a * 6)
        return Geometry.point(cx * f, cy * f)


# Create a singleton instance for convenience
geometry = Geometry()

PointLike = Union[Point, tuple]


def as_point(p: PointLike) -> Point:
    """Accept a Point or an (x, y) pair."""
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))
