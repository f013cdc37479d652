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
DISPERSION MODEL
===============================================================================
Substances and the media built from them.

A medium never stores its refractive index; the index is always evaluated
from the substance's dispersion function at the wavelength of interest.
===============================================================================
"""

import math
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .constants import WAVELENGTH_RED

if TYPE_CHECKING:
    from .scene_objs.base_shape import BaseShape


class DispersionFunction:
    """
    Wavelength-dependent refractive index anchored at a reference point.

    The index is a linear combination of the Sellmeier equation for BK7 glass
    and the Ciddor-style equation for air. The mixing factor is chosen so that
    the index at the reference wavelength equals `reference_index_of_refraction`,
    which lets any substance between air and dense glass inherit a realistic
    dispersion curve from a single number.

    Attributes:
        reference_index_of_refraction: Index at the reference wavelength.
        reference_wavelength: Wavelength (m) at which the reference index holds.
    """

    # Sellmeier coefficients for BK7 glass (C terms in um^2)
    B1 = 1.03961212
    B2 = 0.231792344
    B3 = 1.01046945
    C1 = 6.00069867e-3
    C2 = 2.00179144e-2
    C3 = 1.03560653e2

    def __init__(self, reference_index_of_refraction: float,
                 reference_wavelength: float = WAVELENGTH_RED) -> None:
        if reference_index_of_refraction <= 0:
            raise ValueError(
                f"Refractive index must be positive, got {reference_index_of_refraction}"
            )
        if reference_wavelength <= 0:
            raise ValueError(f"Wavelength must be positive, got {reference_wavelength}")
        self.reference_index_of_refraction = reference_index_of_refraction
        self.reference_wavelength = reference_wavelength

    @classmethod
    def sellmeier_value(cls, wavelength: float) -> float:
        """Index of BK7 glass at a wavelength given in meters."""
        l2 = (wavelength * 1e6) ** 2
        return math.sqrt(
            1
            + cls.B1 * l2 / (l2 - cls.C1)
            + cls.B2 * l2 / (l2 - cls.C2)
            + cls.B3 * l2 / (l2 - cls.C3)
        )

    @staticmethod
    def air_index(wavelength: float) -> float:
        """Index of air at a wavelength given in meters."""
        inv_l2 = (wavelength * 1e6) ** -2
        return 1 + 5792105e-8 / (238.0185 - inv_l2) + 167917e-8 / (57.362 - inv_l2)

    def index_of_refraction(self, wavelength: float) -> float:
        """
        Evaluate the refractive index.

        Args:
            wavelength: Vacuum wavelength in meters.

        Returns:
            Refractive index (always positive).
        """
        n_air_reference = self.air_index(self.reference_wavelength)
        n_glass_reference = self.sellmeier_value(self.reference_wavelength)

        # 0 maps to air, 1 maps to BK7
        x = (self.reference_index_of_refraction - n_air_reference) / (n_glass_reference - n_air_reference)
        x = max(x, 0.0)

        return x * self.sellmeier_value(wavelength) + (1 - x) * self.air_index(wavelength)

    def __repr__(self) -> str:
        return (f"DispersionFunction(reference_index_of_refraction={self.reference_index_of_refraction}, "
                f"reference_wavelength={self.reference_wavelength})")


class CauchyDispersion:
    """
    Cauchy's equation n(lambda) = A + B / lambda^2 with lambda in micrometers.

    Attributes:
        A: Cauchy coefficient A (dimensionless, typically ~1.5).
        B: Cauchy coefficient B (in um^2, typically ~0.004).
    """

    def __init__(self, A: float, B: float = 0.004) -> None:
        if A <= 0:
            raise ValueError(f"Cauchy coefficient A must be positive, got {A}")
        self.A = A
        self.B = B

    def index_of_refraction(self, wavelength: float) -> float:
        wavelength_um = wavelength * 1e6
        return self.A + self.B / (wavelength_um ** 2)

    def __repr__(self) -> str:
        return f"CauchyDispersion(A={self.A}, B={self.B})"


class Substance:
    """
    A named material with a dispersion function.

    Attributes:
        name: Display name of the substance.
        index_of_refraction_for_red_light: Index at the red reference wavelength.
        mystery: Whether the index should be hidden from the user.
        custom: Whether the substance was created from a user-chosen index.
        dispersion_function: Object exposing `index_of_refraction(wavelength)`.
    """

    def __init__(self, name: str, index_of_refraction_for_red_light: float,
                 mystery: bool = False, custom: bool = False,
                 dispersion_function=None) -> None:
        self.name = name
        self.index_of_refraction_for_red_light = index_of_refraction_for_red_light
        self.mystery = mystery
        self.custom = custom
        self.dispersion_function = dispersion_function or DispersionFunction(
            index_of_refraction_for_red_light, WAVELENGTH_RED
        )

    @classmethod
    def custom_substance(cls, index_of_refraction: float) -> 'Substance':
        """Substance created from an arbitrary index at the red wavelength."""
        return cls('custom', index_of_refraction, mystery=False, custom=True)

    def index_of_refraction(self, wavelength: float) -> float:
        return self.dispersion_function.index_of_refraction(wavelength)

    def __repr__(self) -> str:
        return f"Substance('{self.name}', n_red={self.index_of_refraction_for_red_light})"


AIR = Substance('air', 1.000293)
WATER = Substance('water', 1.333)
GLASS = Substance('glass', 1.5)
DIAMOND = Substance('diamond', 2.419)
MYSTERY_A = Substance('mysteryA', 2.419, mystery=True)
MYSTERY_B = Substance('mysteryB', 1.4, mystery=True)

SUBSTANCES = (AIR, WATER, GLASS, DIAMOND, MYSTERY_A, MYSTERY_B)


@dataclass(frozen=True)
class Medium:
    """
    A substance occupying a region of the scene.

    Attributes:
        substance: The substance filling the region.
        shape: Region occupied by the medium, or None for the ambient environment.
    """
    substance: Substance
    shape: Optional['BaseShape'] = None

    @property
    def is_mystery(self) -> bool:
        return self.substance.mystery

    def index_of_refraction(self, wavelength: float) -> float:
        """
        Refractive index of the medium at a vacuum wavelength (m).
        """
        n = self.substance.index_of_refraction(wavelength)
        if not n > 0:
            raise ValueError(f"Medium '{self.substance.name}' produced a non-positive index {n}")
        return n
