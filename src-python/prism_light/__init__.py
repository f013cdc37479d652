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

Prism Light
===========

A Python simulation of light refracting and reflecting through transparent
prisms, using Shapely for computational geometry.

Main modules:
- core: Simulation engine (Scene, Laser, Simulator, shapes, intensity meter)
- optical_elements: Ready-made prism shapes
- analysis: Fresnel and critical angle helpers

Quick start:
    from prism_light.core.scene import Scene
    from prism_light.optical_elements import triangle_prism
    from prism_light.core.simulator import Simulator
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core.scene import Scene
from .core.laser import Laser
from .core.simulator import Simulator, PropagationResult
from .core.intensity_meter import IntensityMeter, Reading

__all__ = [
    'Scene',
    'Laser',
    'Simulator',
    'PropagationResult',
    'IntensityMeter',
    'Reading',
    '__version__',
]
