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
Fresnel Utilities
===============================================================================
Standalone functions that compute the angles and power fractions the
refraction engine produces at one planar boundary. They let a user ask
"what should I expect?" without running a simulation, and the developer
tests use them as independent references.

All functions return values; no print() side effects.
===============================================================================
"""

import math
from typing import Any, Dict, Sequence

from ..core.medium import Medium
from ..core.simulator import get_reflected_power, get_transmitted_power
from ..core.constants import WHITE_LIGHT_WAVELENGTHS_NM


def refraction_angle(n1: float, n2: float, theta_i_deg: float) -> float:
    """
    Angle of the refracted ray from Snell's law.

    Args:
        n1: Refractive index of the incident medium.
        n2: Refractive index of the transmitting medium.
        theta_i_deg: Angle of incidence in degrees (from normal).

    Returns:
        Refraction angle in degrees.

    Raises:
        ValueError: If the angle exceeds the critical angle (TIR).
    """
    sin_t = (n1 / n2) * math.sin(math.radians(theta_i_deg))
    if abs(sin_t) > 1.0:
        raise ValueError(
            f"Total internal reflection: angle {theta_i_deg:.2f}° exceeds "
            f"critical angle {critical_angle(n1, n2):.2f}° for n1={n1}, n2={n2}."
        )
    return math.degrees(math.asin(sin_t))


def critical_angle(n1: float, n2: float) -> float:
    """
    Compute the critical angle for total internal reflection.

    Args:
        n1: Refractive index of the denser medium (must be > n2).
        n2: Refractive index of the rarer medium.

    Returns:
        Critical angle in degrees.

    Raises:
        ValueError: If n1 <= n2 (no TIR possible).
    """
    if n1 <= n2:
        raise ValueError(
            f"No TIR possible: n1={n1} must be greater than n2={n2}."
        )
    return math.degrees(math.asin(n2 / n1))


def brewster_angle(n1: float, n2: float) -> float:
    """Brewster's angle in degrees (exists for any pair of dielectrics)."""
    return math.degrees(math.atan(n2 / n1))


def expected_power_split(n1: float, n2: float, theta_i_deg: float) -> Dict[str, Any]:
    """
    Power split the refraction engine applies at a boundary.

    Uses the same normal-incidence style expressions as the engine, so the
    values match the powers of the simulated child rays exactly.

    Args:
        n1: Refractive index of the incident medium.
        n2: Refractive index of the transmitting medium.
        theta_i_deg: Angle of incidence in degrees (from normal).

    Returns:
        Dict with keys:
        - 'tir': whether total internal reflection occurs
        - 'reflected': reflected power fraction
        - 'transmitted': transmitted power fraction
        - 'theta_t_deg': refraction angle in degrees (None in TIR)
    """
    cos_theta1 = math.cos(math.radians(theta_i_deg))
    ratio = n1 / n2
    radicand = 1 - ratio * ratio * (1 - cos_theta1 * cos_theta1)

    if radicand < 0:
        return {'tir': True, 'reflected': 1.0, 'transmitted': 0.0, 'theta_t_deg': None}

    cos_theta2 = math.sqrt(radicand)
    return {
        'tir': False,
        'reflected': get_reflected_power(n1, n2, cos_theta1, cos_theta2),
        'transmitted': get_transmitted_power(n1, n2, cos_theta1, cos_theta2),
        'theta_t_deg': math.degrees(math.acos(min(1.0, cos_theta2))),
    }


def dispersion_spread(environment: Medium, prism: Medium, theta_i_deg: float,
                      wavelengths_nm: Sequence[float] = WHITE_LIGHT_WAVELENGTHS_NM) -> Dict[str, float]:
    """
    Refraction angles of a white beam entering the prism medium.

    Args:
        environment: Medium the beam comes from.
        prism: Medium the beam enters.
        theta_i_deg: Angle of incidence in degrees.
        wavelengths_nm: Sampled vacuum wavelengths in nanometers.

    Returns:
        Dict with keys 'min_deg', 'max_deg' (refraction angle extremes) and
        'spread_deg' (their difference).
    """
    angles = [
        refraction_angle(environment.index_of_refraction(nm / 1e9),
                         prism.index_of_refraction(nm / 1e9), theta_i_deg)
        for nm in wavelengths_nm
    ]
    return {
        'min_deg': min(angles),
        'max_deg': max(angles),
        'spread_deg': max(angles) - min(angles),
    }
