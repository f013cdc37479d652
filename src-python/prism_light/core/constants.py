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
SIMULATION CONSTANTS
===============================================================================
Constants used throughout the prism simulation.

All lengths and wavelengths are in meters unless the name says otherwise.
These values were tuned together; the ray counts and the rendered ray
pattern depend on them, so change them only together with the scenario tests.
===============================================================================
"""

# Speed of light in vacuum (m/s)
SPEED_OF_LIGHT = 299792458.0

# Wavelengths (in meters)
WAVELENGTH_RED = 650e-9
MIN_WAVELENGTH = 380e-9      # Ultraviolet boundary of the visible spectrum
MAX_WAVELENGTH = 780e-9      # Infrared boundary of the visible spectrum

# Length scale of the scene: prisms, sensors and beam offsets are sized from it
CHARACTERISTIC_LENGTH = WAVELENGTH_RED

# Ray tree termination: recursion stops once depth > MAX_RAY_DEPTH
# or power < MIN_RAY_POWER
MAX_RAY_DEPTH = 50
MIN_RAY_POWER = 0.001

# Offset applied along the incident direction when spawning sub-rays and
# when probing the far side of a boundary
INTERSECTION_EPSILON = 1e-12

# Length of a ray segment that escapes the scene.
# Longer segments cause rendering artifacts downstream.
MAX_RAY_LENGTH = 2e-4

# Distance between neighbouring parallel rays in many-rays mode
MANY_RAYS_SPACING = WAVELENGTH_RED / 2

# Wave width reported on every segment (used by wave-view renderers)
WAVE_WIDTH = CHARACTERISTIC_LENGTH * 5

# Wavelengths (nm) sampled for a white beam, ordered from violet to red
WHITE_LIGHT_WAVELENGTHS_NM = tuple(range(380, 781, 20))

# Radius of the intensity meter's circular catch region
SENSOR_RADIUS = 1.215e-6

# Tolerance for the unit-length precondition on ray directions
UNIT_VECTOR_TOLERANCE = 1e-6

# Tag carried by every segment produced by the prism engine
ORIGIN_TAG_PRISM = 'prism'
