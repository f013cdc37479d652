"""
===============================================================================
PRISM PROTOTYPES AND FRESNEL UTILITIES TESTS
===============================================================================

Tests for optical_elements.prisms and analysis.fresnel_utils:

1. PROTOTYPES
   - Six shapes in toolbox order
   - Areas, winding and centroids

2. FRESNEL UTILITIES
   - critical_angle(), refraction_angle(), brewster_angle()
   - expected_power_split() including TIR
   - dispersion_spread() of a white beam

3. CROSS-CHECK WITH THE ENGINE
   - Simulated child powers and refraction angle at 30 deg incidence

Run with:
    python developer_tests/test_prisms.py

Or with pytest:
    pytest developer_tests/test_prisms.py -v
===============================================================================
"""

import sys
import math
from pathlib import Path

# Add the src-python directory to the path
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import pytest

from prism_light.core.laser import Laser
from prism_light.core.scene import Scene
from prism_light.core.medium import Medium, Substance, CauchyDispersion, AIR, GLASS
from prism_light.core.simulator import Simulator
from prism_light.core.scene_objs import Polygon, Circle, SemiCircle, DivergingLens
from prism_light.optical_elements.prisms import (
    Prism, prism_prototypes, triangle_prism, square_prism, trapezoid_prism,
    PRISM_TYPE_NAMES, DEFAULT_PRISM_SIZE,
)
from prism_light.analysis.fresnel_utils import (
    critical_angle, refraction_angle, brewster_angle, expected_power_split, dispersion_spread,
)


# =============================================================================
# TEST CONFIGURATION
# =============================================================================

TOLERANCE = 1e-9
ANGLE_TOLERANCE = 0.01  # degrees

A = DEFAULT_PRISM_SIZE


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def assert_angle_close(actual, expected, tol=ANGLE_TOLERANCE, msg=""):
    """Assert that two angles are close within tolerance."""
    assert_close(actual, expected, tol, msg)


# =============================================================================
# PROTOTYPES
# =============================================================================

def test_prototype_list():
    print("\n" + "=" * 60)
    print("TEST: Prototype List")
    print("=" * 60)

    prisms = prism_prototypes()
    assert [p.type_name for p in prisms] == list(PRISM_TYPE_NAMES)
    kinds = [type(p.shape) for p in prisms]
    assert kinds == [Polygon, Polygon, Polygon, Circle, SemiCircle, DivergingLens]
    print(f"  {len(prisms)} prototypes: {', '.join(PRISM_TYPE_NAMES)} - PASS")

    for prism in prisms:
        assert prism.contains_point((0.25 * A, 0.0)), f"{prism.type_name}: interior point"
        assert not prism.contains_point((A, A)), f"{prism.type_name}: exterior point"
    print("  Interior and exterior points classified - PASS")


def test_prototype_geometry():
    """
    Areas, winding and centroid of the polygonal prototypes.
    """
    print("\n" + "=" * 60)
    print("TEST: Prototype Geometry")
    print("=" * 60)

    triangle = triangle_prism().shape
    assert_close(triangle.signed_area(), math.sqrt(3) / 4 * A * A, 1e-6 * A * A, "Triangle area")
    assert_close(triangle.centroid.x, 0.0, 1e-18, "Triangle centroid x")
    assert_close(triangle.centroid.y, 0.0, 1e-18, "Triangle centroid y")
    print("  Triangle: CCW, centroid at the origin - PASS")

    square = square_prism().shape
    assert_close(square.signed_area(), -A * A, 1e-6 * A * A, "Square area (clockwise)")
    trapezoid = trapezoid_prism().shape
    assert_close(trapezoid.signed_area(), 0.75 * A * math.sqrt(3) / 2 * A, 1e-6 * A * A, "Trapezoid area")
    print("  Square and trapezoid areas - PASS")

    moved = triangle_prism().translated(A, 0.0).rotated(math.pi)
    assert moved.type_name == 'triangle'
    assert_close(moved.centroid.x, A, 1e-6 * A, "Rotation about the centroid keeps it")
    print("  Prism transforms keep the type - PASS")

    scene = Scene()
    prism = square_prism()
    index = scene.add_shape(prism)
    assert scene.shapes[index] is prism.shape
    assert scene.is_in_prism((0.0, 0.0))
    with pytest.raises(ValueError):
        scene.add_shape("square")
    print("  Prisms added to a scene contribute their shape - PASS")

    with pytest.raises(ValueError):
        Prism(triangle, 'hexagon')
    with pytest.raises(ValueError):
        triangle_prism(0.0)
    print("  Invalid type and size rejected - PASS")


# =============================================================================
# FRESNEL UTILITIES
# =============================================================================

def test_angles():
    print("\n" + "=" * 60)
    print("TEST: Critical, Refraction and Brewster Angles")
    print("=" * 60)

    assert_angle_close(critical_angle(1.5, 1.0), 41.81, msg="Glass to air")
    with pytest.raises(ValueError):
        critical_angle(1.0, 1.5)
    print("  critical_angle() - PASS")

    assert_angle_close(refraction_angle(1.0, 1.5, 30.0), 19.47, msg="Air to glass")
    assert_angle_close(refraction_angle(1.5, 1.0, 0.0), 0.0, msg="Normal incidence")
    with pytest.raises(ValueError):
        refraction_angle(1.5, 1.0, 60.0)
    print("  refraction_angle() - PASS")

    assert_angle_close(brewster_angle(1.0, 1.5), 56.31, msg="Brewster air to glass")
    print("  brewster_angle() - PASS")


def test_expected_power_split():
    print("\n" + "=" * 60)
    print("TEST: Expected Power Split")
    print("=" * 60)

    normal = expected_power_split(1.0, 1.5, 0.0)
    assert not normal['tir']
    assert_close(normal['reflected'], 0.04, 1e-12, "Reflected")
    assert_close(normal['transmitted'], 0.96, 1e-12, "Transmitted")
    assert_angle_close(normal['theta_t_deg'], 0.0, msg="Undeviated")
    print("  Normal incidence 0.04 / 0.96 - PASS")

    for deg in [42.0, 60.0, 89.0]:
        split = expected_power_split(1.5, 1.0, deg)
        assert split['tir']
        assert split['reflected'] == 1.0 and split['transmitted'] == 0.0
        assert split['theta_t_deg'] is None
    print("  TIR sends all power into the reflection - PASS")

    oblique = expected_power_split(1.0, 1.5, 45.0)
    assert_close(oblique['reflected'] + oblique['transmitted'], 1.0, 1e-12, "Conservation")
    assert_angle_close(oblique['theta_t_deg'], refraction_angle(1.0, 1.5, 45.0), msg="Snell")
    print("  Oblique split conserves power - PASS")


def test_dispersion_spread():
    print("\n" + "=" * 60)
    print("TEST: Dispersion Spread")
    print("=" * 60)

    spread = dispersion_spread(Medium(AIR), Medium(GLASS), 45.0)
    assert spread['min_deg'] < spread['max_deg']
    assert 0.1 < spread['spread_deg'] < 2.0, f"Unexpected spread {spread['spread_deg']}"
    print(f"  Spread at 45 deg: {spread['spread_deg']:.3f} deg - PASS")

    flat = Medium(Substance('flat', 1.5, dispersion_function=CauchyDispersion(1.5, 0.0)))
    vacuum = Medium(Substance('vacuum', 1.0, dispersion_function=CauchyDispersion(1.0, 0.0)))
    assert dispersion_spread(vacuum, flat, 45.0)['spread_deg'] == 0.0
    print("  No spread without dispersion - PASS")


# =============================================================================
# CROSS-CHECK WITH THE ENGINE
# =============================================================================

def test_engine_matches_prediction():
    """
    A ray hitting the left face of a square at 30 deg splits as predicted.
    """
    print("\n" + "=" * 60)
    print("TEST: Engine Matches Prediction")
    print("=" * 60)

    half = A / 2
    incidence = math.radians(30.0)
    emission = (-3 * half, -2 * half * math.tan(incidence))
    scene = Scene(
        laser=Laser(emission, (-half, 0.0)),
        environment_medium=Medium(Substance('vacuum', 1.0, dispersion_function=CauchyDispersion(1.0, 0.0))),
        prism_medium=Medium(Substance('flat', 1.5, dispersion_function=CauchyDispersion(1.5, 0.0))),
    )
    scene.add_shape(square_prism().shape)
    scene.show_reflections = True
    result = Simulator(scene).run()

    children = {r.interaction_type: r for r in result.rays if r.depth == 1}
    prediction = expected_power_split(1.0, 1.5, 30.0)
    assert_close(children['reflect'].power, prediction['reflected'], 1e-9, "Reflected power")
    assert_close(children['refract'].power, prediction['transmitted'], 1e-9, "Transmitted power")
    assert_angle_close(math.degrees(children['refract'].angle), prediction['theta_t_deg'], 1e-6, "Refraction angle")
    assert_angle_close(math.degrees(children['reflect'].angle), 180.0 - 30.0, 1e-6, "Reflection angle")
    print(f"  R={children['reflect'].power:.6f}, T={children['refract'].power:.6f}, "
          f"theta_t={math.degrees(children['refract'].angle):.4f} deg - PASS")


def run_all_tests():
    """Run all tests and report results."""
    print("\n" + "=" * 78)
    print("PRISM PROTOTYPES AND FRESNEL UTILITIES TESTS")
    print("=" * 78)

    tests = [
        # Prototypes
        ("Prototype List", test_prototype_list),
        ("Prototype Geometry", test_prototype_geometry),

        # Fresnel utilities
        ("Critical, Refraction and Brewster Angles", test_angles),
        ("Expected Power Split", test_expected_power_split),
        ("Dispersion Spread", test_dispersion_spread),

        # Engine cross-check
        ("Engine Matches Prediction", test_engine_matches_prediction),
    ]

    passed = 0
    failed = 0
    errors = []

    for name, test_func in tests:
        try:
            test_func()
            passed += 1
        except Exception as e:
            failed += 1
            errors.append((name, str(e)))
            print(f"\n  FAILED: {name}")
            print(f"    Error: {e}")

    print("\n" + "=" * 78)
    print(f"SUMMARY: {passed}/{len(tests)} tests passed")
    print("=" * 78)

    if errors:
        print("\nFailed tests:")
        for name, error in errors:
            print(f"  - {name}: {error}")
        return False

    print("\nAll tests passed!")
    return True


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
