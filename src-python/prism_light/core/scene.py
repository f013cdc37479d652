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

import uuid as uuid_module
from typing import List, Optional

from .geometry import PointLike, as_point
from .laser import Laser
from .medium import Medium, AIR, GLASS
from .constants import CHARACTERISTIC_LENGTH
from .scene_objs.base_shape import BaseShape


class Scene:
    """
    Container for the shapes, media, laser and display flags of one simulation.

    The scene is the configuration the refraction engine reads at the start
    of every pass. Shapes are immutable: moving or rotating a shape replaces
    it in `shapes` with a transformed copy, so a pass in progress never sees
    half-edited geometry as long as edits and passes are not interleaved.

    Attributes:
        shapes (list): Boundary shapes made of the prism medium
        laser (Laser): The light source
        environment_medium (Medium): Medium surrounding the shapes
        prism_medium (Medium): Medium every shape is made of
        many_rays (int): Number of parallel source rays (1 = single central ray)
        show_reflections (bool): Whether partial reflections are traced.
            Total internal reflection is traced regardless.
        show_intersections (bool): Whether boundary hits are recorded as markers
        name (str or None): Optional name for the scene
    """

    def __init__(self, laser: Optional[Laser] = None,
                 environment_medium: Optional[Medium] = None,
                 prism_medium: Optional[Medium] = None) -> None:
        """Initialize an empty scene with default settings (air around glass)."""
        self.shapes: List[BaseShape] = []
        self.laser = laser if laser is not None else Laser.from_angle(0.0, CHARACTERISTIC_LENGTH * 15)
        self.environment_medium = environment_medium if environment_medium is not None else Medium(AIR)
        self.prism_medium = prism_medium if prism_medium is not None else Medium(GLASS)
        self._many_rays = 1
        self.show_reflections = False
        self.show_intersections = True
        self.name: Optional[str] = None
        self._uuid: str = str(uuid_module.uuid4())

    @property
    def many_rays(self) -> int:
        """Get the number of parallel source rays."""
        return self._many_rays

    @many_rays.setter
    def many_rays(self, value: int) -> None:
        """Set the number of parallel source rays with validation."""
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise ValueError(f"many_rays must be a positive integer, got {value!r}")
        self._many_rays = value

    @property
    def uuid(self) -> str:
        return self._uuid

    def get_display_name(self) -> str:
        """
        Returns the user-defined name if set, otherwise "Scene" and a short
        UUID suffix.
        """
        if self.name:
            return self.name
        return f"Scene_{self._uuid[:8]}"

    def add_shape(self, shape) -> int:
        """
        Add a shape to the scene.

        Args:
            shape (BaseShape or Prism): The shape to add. A toolbox prism
                contributes its boundary shape.

        Returns:
            int: Index of the new shape
        """
        from ..optical_elements.prisms import Prism

        if isinstance(shape, Prism):
            shape = shape.shape
        if not isinstance(shape, BaseShape):
            raise ValueError(f"Expected a BaseShape, got {type(shape).__name__}")
        self.shapes.append(shape)
        return len(self.shapes) - 1

    def remove_shape(self, shape: BaseShape) -> None:
        """Remove a shape from the scene (no error if absent)."""
        if shape in self.shapes:
            self.shapes.remove(shape)

    def replace_shape(self, index: int, shape: BaseShape) -> None:
        self.shapes[index] = shape

    def translate_shape(self, index: int, dx: float, dy: float) -> BaseShape:
        """Replace a shape by a translated copy and return the copy."""
        moved = self.shapes[index].translated(dx, dy)
        self.shapes[index] = moved
        return moved

    def rotate_shape(self, index: int, angle: float, pivot: Optional[PointLike] = None) -> BaseShape:
        """Replace a shape by a rotated copy (about its centroid by default) and return the copy."""
        rotated = self.shapes[index].rotated(angle, pivot)
        self.shapes[index] = rotated
        return rotated

    def is_in_prism(self, point: PointLike) -> bool:
        """Whether a point lies inside any shape."""
        p = as_point(point)
        return any(shape.contains_point(p) for shape in self.shapes)

    def clear(self) -> None:
        """Remove all shapes from the scene."""
        self.shapes.clear()

    def __repr__(self) -> str:
        return (f"Scene('{self.get_display_name()}', shapes={len(self.shapes)}, "
                f"environment={self.environment_medium.substance.name}, "
                f"prism={self.prism_medium.substance.name}, many_rays={self.many_rays})")
