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

from typing import List, Optional, TYPE_CHECKING

from shapely.geometry import Polygon as ShapelyPolygon

from .geometry import geometry, as_point, PointLike
from .constants import SENSOR_RADIUS

if TYPE_CHECKING:
    from .ray import LightRaySegment


class Reading:
    """
    One intensity value, or the miss marker `Reading.MISS`.

    Attributes:
        value (float or None): Power fraction, None for a miss
    """

    MISS: 'Reading'

    def __init__(self, value: Optional[float]) -> None:
        self.value = value

    def is_hit(self) -> bool:
        return self.value is not None

    def is_miss(self) -> bool:
        return self.value is None

    def to_string(self) -> str:
        """Readout text: percentage with two decimals, or a dash for a miss."""
        if self.is_miss():
            return '—'
        return f"{self.value * 100:.2f}%"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reading):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return 'Reading.MISS' if self.is_miss() else f"Reading({self.value})"


Reading.MISS = Reading(None)


class IntensityMeter:
    """
    Sensor that sums the power of every ray segment crossing its catch region.

    Readings accumulate during one propagation pass. `clear_ray_readings()`
    must run before the pass so values from the previous pass do not leak
    into the new sum.

    Attributes:
        sensor_position (Point): Center of the circular catch region
        body_position (Point): Position of the readout body
        sensor_radius (float): Radius of the catch region
        ray_readings (list): Readings accumulated during the current pass
        reading (Reading): Current readout (sum of hits, or Reading.MISS)
    """

    def __init__(self, sensor_position: PointLike, body_position: PointLike,
                 sensor_radius: float = SENSOR_RADIUS) -> None:
        if sensor_radius <= 0:
            raise ValueError(f"sensor_radius must be positive, got {sensor_radius}")
        self.sensor_position = as_point(sensor_position)
        self.body_position = as_point(body_position)
        self.sensor_radius = sensor_radius
        self.ray_readings: List[Reading] = []
        self.reading: Reading = Reading.MISS

    def translate_sensor(self, dx: float, dy: float) -> None:
        self.sensor_position = geometry.point(self.sensor_position.x + dx, self.sensor_position.y + dy)

    def translate_body(self, dx: float, dy: float) -> None:
        self.body_position = geometry.point(self.body_position.x + dx, self.body_position.y + dy)

    def translate_all(self, dx: float, dy: float) -> None:
        self.translate_body(dx, dy)
        self.translate_sensor(dx, dy)

    def sensor_shape(self) -> ShapelyPolygon:
        """Shapely disk approximating the catch region."""
        return self.sensor_position.to_shapely().buffer(self.sensor_radius)

    def sensor_intersects(self, segment: 'LightRaySegment') -> bool:
        """
        Whether a ray segment passes through the catch region.

        Uses the exact distance from the segment to the sensor center rather
        than the buffered polygon.
        """
        return segment.to_shapely().distance(self.sensor_position.to_shapely()) <= self.sensor_radius

    def clear_ray_readings(self) -> None:
        """
        Reset the accumulator and the readout. Call before every pass.
        """
        self.ray_readings = []
        self.reading = Reading.MISS

    def add_ray_reading(self, reading: Reading) -> None:
        """
        Add a reading to the accumulator and update the readout.
        """
        self.ray_readings.append(reading)
        self.update_reading()

    def update_reading(self) -> None:
        """
        Recompute the readout: MISS when nothing hit, otherwise the sum of hits.
        """
        hits = [r for r in self.ray_readings if r.is_hit()]
        if not hits:
            self.reading = Reading.MISS
        else:
            self.reading = Reading(sum(hit.value for hit in hits))

    def __repr__(self) -> str:
        return (f"IntensityMeter(sensor=({self.sensor_position.x:.4g}, {self.sensor_position.y:.4g}), "
                f"reading={self.reading!r})")
