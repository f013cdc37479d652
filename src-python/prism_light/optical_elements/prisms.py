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

===============================================================================
PRISM PROTOTYPES
===============================================================================
The six prism shapes of the toolbox, centered on the origin:

    triangle        equilateral triangle, centroid at the origin
    trapezoid       isosceles trapezoid (top edge half the base)
    square          axis-aligned square
    circle          full disk of radius size/2
    semicircle      half disk bulging toward +X, flat side on the Y axis
    diverging-lens  rectangle whose left side is a half-circle bite

Vertex layout of the diverging lens (r = size/2):

        V0 (-0.6r, r) ---- V1 (0.6r, r)
           (                 |
            ( <- arc bite    |
           (                 |
        V3 (-0.6r,-r) ---- V2 (0.6r,-r)

Sizes are in meters. The default size is ten characteristic lengths, which
matches the scale the laser and the intensity meter are built for.
===============================================================================
"""

import math
from typing import List, Optional, Tuple

from ..core.geometry import Point, geometry, PointLike
from ..core.constants import CHARACTERISTIC_LENGTH
from ..core.scene_objs import BaseShape, Polygon, Circle, SemiCircle, DivergingLens

# Side length (or diameter) of the default prisms
DEFAULT_PRISM_SIZE = CHARACTERISTIC_LENGTH * 10

PRISM_TYPE_NAMES: Tuple[str, ...] = (
    'triangle', 'trapezoid', 'square', 'circle', 'semicircle', 'diverging-lens'
)


class Prism:
    """
    A shape tagged with the toolbox type it was created from.

    Like the shapes, a prism is a value: `translated()` and `rotated()`
    return new prisms. `Scene.add_shape()` accepts a prism and stores its
    shape.

    Attributes:
        shape (BaseShape): Boundary of the prism
        type_name (str): One of PRISM_TYPE_NAMES
    """

    def __init__(self, shape: BaseShape, type_name: str) -> None:
        if type_name not in PRISM_TYPE_NAMES:
            raise ValueError(
                f"Invalid type_name '{type_name}'. "
                f"Valid options: {PRISM_TYPE_NAMES}"
            )
        self.shape = shape
        self.type_name = type_name

    def translated(self, dx: float, dy: float) -> 'Prism':
        return Prism(self.shape.translated(dx, dy), self.type_name)

    def rotated(self, angle: float, pivot: Optional[PointLike] = None) -> 'Prism':
        return Prism(self.shape.rotated(angle, pivot), self.type_name)

    def contains_point(self, point: PointLike) -> bool:
        return self.shape.contains_point(point)

    @property
    def centroid(self) -> Point:
        return self.shape.centroid

    def __repr__(self) -> str:
        return f"Prism('{self.type_name}', {self.shape!r})"


def triangle_prism(size: float = DEFAULT_PRISM_SIZE) -> Prism:
    """
    Equilateral triangle of side `size` with its centroid at the origin.

    Vertices (CCW): base left, base right, apex. The base right corner is the
    rotation handle.
    """
    _check_size(size)
    a = size
    return Prism(Polygon(1, [
        geometry.point(-a / 2, -a / (2 * math.sqrt(3))),
        geometry.point(a / 2, -a / (2 * math.sqrt(3))),
        geometry.point(0, a / math.sqrt(3)),
    ]), 'triangle')


def trapezoid_prism(size: float = DEFAULT_PRISM_SIZE) -> Prism:
    """
    Isosceles trapezoid with base `size` and top edge `size/2`.
    """
    _check_size(size)
    a = size
    h = a * math.sqrt(3) / 4
    return Prism(Polygon(1, [
        geometry.point(-a / 2, -h),
        geometry.point(a / 2, -h),
        geometry.point(a / 4, h),
        geometry.point(-a / 4, h),
    ]), 'trapezoid')


def square_prism(size: float = DEFAULT_PRISM_SIZE) -> Prism:
    _check_size(size)
    a = size
    return Prism(Polygon(2, [
        geometry.point(-a / 2, a / 2),
        geometry.point(a / 2, a / 2),
        geometry.point(a / 2, -a / 2),
        geometry.point(-a / 2, -a / 2),
    ]), 'square')


def circle_prism(size: float = DEFAULT_PRISM_SIZE) -> Prism:
    """Disk of diameter `size` centered on the origin."""
    _check_size(size)
    return Prism(Circle(geometry.point(0, 0), size / 2), 'circle')


def semicircle_prism(size: float = DEFAULT_PRISM_SIZE) -> Prism:
    """Half disk of diameter `size`, flat side on the Y axis, bulging toward +X."""
    _check_size(size)
    radius = size / 2
    return Prism(SemiCircle(1, [
        geometry.point(0, radius),
        geometry.point(0, -radius),
    ], radius), 'semicircle')


def diverging_lens_prism(size: float = DEFAULT_PRISM_SIZE) -> Prism:
    """Rectangle 1.2r wide and 2r tall whose left side is a concave arc of radius r."""
    _check_size(size)
    radius = size / 2
    return Prism(DivergingLens(2, [
        geometry.point(-0.6 * radius, radius),
        geometry.point(0.6 * radius, radius),
        geometry.point(0.6 * radius, -radius),
        geometry.point(-0.6 * radius, -radius),
    ], radius), 'diverging-lens')


def prism_prototypes(size: float = DEFAULT_PRISM_SIZE) -> List[Prism]:
    """
    One prism of every type, in toolbox order.

    Args:
        size: Side length (or diameter) of the prisms in meters.

    Returns:
        List of prisms ordered as PRISM_TYPE_NAMES.
    """
    return [
        triangle_prism(size),
        trapezoid_prism(size),
        square_prism(size),
        circle_prism(size),
        semicircle_prism(size),
        diverging_lens_prism(size),
    ]


def _check_size(size: float) -> None:
    if size <= 0:
        raise ValueError(f"Prism size must be positive, got {size}")
