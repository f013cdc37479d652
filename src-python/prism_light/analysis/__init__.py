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
Analysis Utilities
===============================================================================
Closed-form helpers that predict what the refraction engine will do at a
single boundary:

- Refraction, critical and Brewster angles
- The reflected/transmitted power split used by the engine
- Angular spread of a white beam caused by dispersion
===============================================================================
"""

from .fresnel_utils import (
    refraction_angle,
    critical_angle,
    brewster_angle,
    expected_power_split,
    dispersion_spread,
)

__all__ = [
    'refraction_angle',
    'critical_angle',
    'brewster_angle',
    'expected_power_split',
    'dispersion_spread',
]
