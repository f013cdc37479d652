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

from dataclasses import dataclass
from typing import Iterable, List, Optional, TYPE_CHECKING

from .geometry import Point, geometry

if TYPE_CHECKING:
    from .ray import ColoredRay
    from .scene_objs.base_shape import BaseShape


@dataclass(frozen=True)
class Intersection:
    """
    A point where a ray meets a shape boundary.

    Attributes:
        point: The intersection point.
        unit_normal: Boundary normal, oriented back toward the incoming ray
            (unit_normal . ray direction < 0).
    """
    point: Point
    unit_normal: Point


def all_intersections(ray: 'ColoredRay', shapes: Iterable['BaseShape']) -> List[Intersection]:
    """
    Intersections of a ray with every shape, nearest first.

    The sort is stable, so hits at exactly equal distance keep the order of
    shape iteration.

    Args:
        ray: The ray to test.
        shapes: Shapes in the scene.

    Returns:
        List of intersections sorted by distance from the ray tail.
    """
    hits: List[Intersection] = []
    for shape in shapes:
        hits.extend(shape.intersections(ray))
    hits.sort(key=lambda hit: geometry.distance(hit.point, ray.tail))
    return hits


def nearest_intersection(ray: 'ColoredRay', shapes: Iterable['BaseShape']) -> Optional[Intersection]:
    """
    Find the intersection the ray meets first.

    Args:
        ray: The ray to test.
        shapes: Shapes in the scene.

    Returns:
        The closest intersection, or None if the ray hits nothing.
    """
    hits = all_intersections(ray, shapes)
    return hits[0] if hits else None


def crossing_count(ray: 'ColoredRay', shape: 'BaseShape') -> int:
    """
    Number of times a ray crosses a shape's boundary.

    An odd count means the ray tail lies inside the shape.
    """
    return len(shape.intersections(ray))
