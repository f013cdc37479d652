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
OPTICAL ELEMENTS MODULE
===============================================================================
Top-level module for convenient optical element constructors.

Sub-modules:
- prisms: The prism shapes offered by the simulation, sized from the
  characteristic length of the scene

The constructors compute corner geometry from a single size parameter, so
users never have to specify raw corner coordinates for the standard shapes.
===============================================================================
"""

from .prisms import (
    # Wrapper class
    Prism,
    # Factory functions
    triangle_prism,
    trapezoid_prism,
    square_prism,
    circle_prism,
    semicircle_prism,
    diverging_lens_prism,
    prism_prototypes,
    PRISM_TYPE_NAMES,
    DEFAULT_PRISM_SIZE,
)

__all__ = [
    # Wrapper class
    'Prism',
    # Factory functions
    'triangle_prism',
    'trapezoid_prism',
    'square_prism',
    'circle_prism',
    'semicircle_prism',
    'diverging_lens_prism',
    'prism_prototypes',
    'PRISM_TYPE_NAMES',
    'DEFAULT_PRISM_SIZE',
]
