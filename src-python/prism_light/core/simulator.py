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
from dataclasses import dataclass
from typing import List, Optional, Tuple, TYPE_CHECKING

import numpy as np

from .geometry import Point, geometry
from .ray import ColoredRay, LightRaySegment
from .intersection import Intersection, nearest_intersection, crossing_count
from .intensity_meter import IntensityMeter, Reading
from .color import wavelength_to_color
from .constants import (
    MAX_RAY_DEPTH,
    MIN_RAY_POWER,
    INTERSECTION_EPSILON,
    MAX_RAY_LENGTH,
    MANY_RAYS_SPACING,
    WAVE_WIDTH,
    WHITE_LIGHT_WAVELENGTHS_NM,
    ORIGIN_TAG_PRISM,
    SPEED_OF_LIGHT,
)

if TYPE_CHECKING:
    from .scene import Scene


def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


def get_reflected_power(n1: float, n2: float, cos_theta1: float, cos_theta2: float) -> float:
    """
    Fraction of the power reflected at a boundary.

    Args:
        n1 (float): Index of the incident medium
        n2 (float): Index of the far medium
        cos_theta1 (float): Cosine of the angle of incidence
        cos_theta2 (float): Cosine of the angle of refraction

    Returns:
        float: Reflected fraction, clamped to [0, 1]
    """
    a = n1 * cos_theta1
    b = n2 * cos_theta2
    if a + b == 0:
        # Grazing incidence
        return 1.0
    return _clamp01(((a - b) / (a + b)) ** 2)


def get_transmitted_power(n1: float, n2: float, cos_theta1: float, cos_theta2: float) -> float:
    """
    Fraction of the power transmitted through a boundary.

    Args:
        n1 (float): Index of the incident medium
        n2 (float): Index of the far medium
        cos_theta1 (float): Cosine of the angle of incidence
        cos_theta2 (float): Cosine of the angle of refraction

    Returns:
        float: Transmitted fraction, clamped to [0, 1]
    """
    a = n1 * cos_theta1
    b = n2 * cos_theta2
    if a + b == 0:
        return 0.0
    return _clamp01(4 * n1 * n2 * cos_theta1 * cos_theta2 / ((a + b) * (a + b)))


@dataclass(frozen=True)
class PropagationResult:
    """
    Snapshot of one propagation pass.

    Attributes:
        rays (tuple): Light ray segments, in emission order
        intersections (tuple): Boundary hits recorded as markers
        reading (Reading): Intensity meter readout (Reading.MISS without a meter)
    """
    rays: Tuple[LightRaySegment, ...]
    intersections: Tuple[Intersection, ...]
    reading: Reading


class Simulator:
    """
    Recursive refraction engine.

    Every ray is traced to the nearest boundary, where it splits into a
    reflected and a refracted child following Snell's law and the Fresnel
    power split. Children are traced depth-first (reflected before
    refracted) until the depth limit or the power threshold stops them.

    Attributes:
        scene (Scene): The scene to simulate
        intensity_meter (IntensityMeter or None): Optional sensor fed after each pass
        verbose (int): Verbosity level
        rays (list): Segments produced by the current pass
        intersections (list): Intersection markers produced by the current pass
    """

    def __init__(self, scene: 'Scene', intensity_meter: Optional[IntensityMeter] = None,
                 verbose: int = 0) -> None:
        """
        Initialize the simulator.

        Args:
            scene (Scene): The scene to simulate
            intensity_meter (IntensityMeter): Sensor to feed after each pass (default: None)
            verbose (int): Verbosity level (default: 0)
                0 = silent (no debug output)
                1 = verbose (show per-ray hits and total internal reflection)
                2 = very verbose/debug (show Snell's law values and power split)
        """
        self.scene: 'Scene' = scene
        self.intensity_meter: Optional[IntensityMeter] = intensity_meter
        self.verbose: int = verbose
        self.rays: List[LightRaySegment] = []
        self.intersections: List[Intersection] = []

    def run(self) -> PropagationResult:
        """
        Run one full propagation pass.

        This is the main entry point for simulation. It:
        1. Clears the segments, markers and meter of the previous pass
        2. Propagates the laser beam through the scene
        3. Feeds the intensity meter from every segment touching the sensor
        4. Returns a snapshot of the pass

        Returns:
            PropagationResult: Segments, markers and meter reading
        """
        self.rays = []
        self.intersections = []
        if self.intensity_meter is not None:
            self.intensity_meter.clear_ray_readings()

        self.propagate_rays()

        reading = Reading.MISS
        if self.intensity_meter is not None:
            for segment in self.rays:
                if self.intensity_meter.sensor_intersects(segment):
                    self.intensity_meter.add_ray_reading(Reading(segment.power))
            reading = self.intensity_meter.reading
            if self.verbose >= 1:
                print(f"  Intensity meter reading: {reading.to_string()}")

        if self.verbose >= 1:
            print(f"\n### SIMULATOR pass done: {len(self.rays)} segments, "
                  f"{len(self.intersections)} intersections")

        return PropagationResult(tuple(self.rays), tuple(self.intersections), reading)

    def propagate_rays(self) -> None:
        """
        Emit the source rays of the laser: one central ray, or `many_rays`
        parallel rays spread perpendicular to the beam.
        """
        laser = self.scene.laser
        if not laser.on:
            if self.verbose >= 1:
                print("\n### SIMULATOR laser is off, nothing to propagate")
            return

        tail = laser.emission_point
        direction = laser.direction_unit_vector
        laser_in_prism = self.is_laser_in_prism()
        many_rays = self.scene.many_rays

        if self.verbose >= 1:
            print(f"\n### SIMULATOR propagating {many_rays} source ray(s) from "
                  f"({tail.x:.4g}, {tail.y:.4g}), laser_in_prism={laser_in_prism}")

        if many_rays == 1:
            self.propagate(tail, direction, laser.power, laser_in_prism)
            return

        # Offsets centred on the emission point
        offsets = (np.arange(many_rays) - (many_rays - 1) / 2.0) * MANY_RAYS_SPACING
        side = geometry.perpendicular(direction)
        for offset in offsets:
            start = tail.plus(side.times(float(offset)))
            self.propagate(start, direction, laser.power, laser_in_prism)

    def propagate(self, tail: Point, direction: Point, power: float, laser_in_prism: bool) -> None:
        """
        Propagate one source ray, decomposed into sampled wavelengths in white
        light mode.

        Args:
            tail (Point): Start of the source ray
            direction (Point): Unit direction of the source ray
            power (float): Power of the source ray
            laser_in_prism (bool): Whether the source starts inside a shape
        """
        laser = self.scene.laser
        start_medium = self.scene.prism_medium if laser_in_prism else self.scene.environment_medium

        if laser.color_mode == 'white':
            first = WHITE_LIGHT_WAVELENGTHS_NM[0]
            last = WHITE_LIGHT_WAVELENGTHS_NM[-1]
            for wavelength_nm in WHITE_LIGHT_WAVELENGTHS_NM:
                wavelength = wavelength_nm / 1e9
                ray = ColoredRay(tail, direction, power, wavelength,
                                 start_medium.index_of_refraction(wavelength),
                                 SPEED_OF_LIGHT / wavelength)
                # Only the extreme samples mark intersections
                self.propagate_the_ray(ray, 0, wavelength_nm == first or wavelength_nm == last)
        else:
            ray = ColoredRay(tail, direction, power, laser.wavelength,
                             start_medium.index_of_refraction(laser.wavelength),
                             laser.frequency)
            self.propagate_the_ray(ray, 0, True)

    def propagate_the_ray(self, ray: ColoredRay, depth: int, show_intersection: bool) -> None:
        """
        Trace a ray to the nearest boundary and recurse into its children.

        Args:
            ray (ColoredRay): The ray to trace
            depth (int): Recursion depth (0 for source rays)
            show_intersection (bool): Whether boundary hits of this ray tree are
                recorded as markers
        """
        if depth > MAX_RAY_DEPTH or ray.power < MIN_RAY_POWER:
            return

        hit = nearest_intersection(ray, self.scene.shapes)

        if hit is None:
            # Escapes the scene
            self.add_ray(ray, ray.point_at(MAX_RAY_LENGTH), depth)
            if self.verbose >= 1:
                print(f"  [depth {depth}] {ray.interaction_type} ray escapes, power={ray.power:.4f}")
            return

        point = hit.point
        normal = hit.unit_normal
        direction = ray.direction_unit_vector

        output_inside_prism = self._is_output_inside_prism(ray, point)
        far_medium = self.scene.prism_medium if output_inside_prism else self.scene.environment_medium

        n1 = ray.medium_index_of_refraction
        n2 = far_medium.index_of_refraction(ray.base_wavelength)

        cos_theta1 = geometry.dot(normal, direction.negated())
        ratio = n1 / n2
        radicand = 1 - ratio * ratio * (1 - cos_theta1 * cos_theta1)
        total_internal_reflection = radicand < 0
        cos_theta2 = math.sqrt(abs(radicand))

        reflected_direction = direction.plus(normal.times(2 * cos_theta1))

        if total_internal_reflection:
            reflected_power = 1.0
            transmitted_power = 0.0
        else:
            reflected_power = get_reflected_power(n1, n2, cos_theta1, cos_theta2)
            transmitted_power = get_transmitted_power(n1, n2, cos_theta1, cos_theta2)

        if self.verbose >= 1:
            print(f"  [depth {depth}] hit at ({point.x:.6g}, {point.y:.6g}), "
                  f"{'TIR' if total_internal_reflection else 'refraction'}")
        if self.verbose >= 2:
            print(f"    n1={n1:.6f}, n2={n2:.6f}, cos_theta1={cos_theta1:.6f}, "
                  f"radicand={radicand:.6f}, cos_theta2={cos_theta2:.6f}")
            print(f"    reflected_power={reflected_power:.6f}, transmitted_power={transmitted_power:.6f}")

        if show_intersection and self.scene.show_intersections:
            self.intersections.append(hit)

        offset = direction.times(INTERSECTION_EPSILON)

        if self.scene.show_reflections or total_internal_reflection:
            reflected = ColoredRay(
                point.minus(offset),
                geometry.normalize_vec(reflected_direction),
                ray.power * reflected_power,
                ray.wavelength,
                n1,
                ray.frequency,
                'tir' if total_internal_reflection else 'reflect'
            )
            self.propagate_the_ray(reflected, depth + 1, show_intersection)

        if not total_internal_reflection:
            sign = -1.0 if cos_theta1 > 0 else 1.0
            refracted_direction = direction.times(ratio).plus(
                normal.times(ratio * cos_theta1 + sign * cos_theta2)
            )
            refracted = ColoredRay(
                point.plus(offset),
                geometry.normalize_vec(refracted_direction),
                ray.power * transmitted_power,
                ray.wavelength,
                n2,
                ray.frequency,
                'refract'
            )
            self.propagate_the_ray(refracted, depth + 1, show_intersection)

        self.add_ray(ray, point, depth)

    def is_laser_in_prism(self) -> bool:
        """Whether the laser emission point lies inside any shape."""
        return self.scene.is_in_prism(self.scene.laser.emission_point)

    def _is_output_inside_prism(self, ray: ColoredRay, point: Point) -> bool:
        """
        Whether the medium just past a boundary hit is the prism medium.

        A probe ray starting a hair beyond the hit is cast along the incident
        direction; an odd crossing count against any shape means the probe
        start lies inside that shape.
        """
        direction = ray.direction_unit_vector
        probe = ColoredRay(point.plus(direction.times(INTERSECTION_EPSILON)), direction,
                           ray.power, ray.wavelength, ray.medium_index_of_refraction, ray.frequency)
        return any(crossing_count(probe, shape) % 2 == 1 for shape in self.scene.shapes)

    def add_ray(self, ray: ColoredRay, tip: Point, depth: int) -> None:
        """Store the finished segment of `ray` ending at `tip`."""
        wavelength_nm = ray.wavelength * 1e9
        self.rays.append(LightRaySegment(
            tail=ray.tail,
            tip=tip,
            medium_index_of_refraction=ray.medium_index_of_refraction,
            wavelength_in_medium=ray.wavelength_in_medium,
            wavelength_in_vacuum_nm=wavelength_nm,
            power=ray.power,
            color=wavelength_to_color(wavelength_nm),
            wave_width=WAVE_WIDTH,
            origin_tag=ORIGIN_TAG_PRISM,
            interaction_type=ray.interaction_type,
            depth=depth,
        ))

    def __repr__(self) -> str:
        return f"Simulator(scene={self.scene!r}, verbose={self.verbose})"
