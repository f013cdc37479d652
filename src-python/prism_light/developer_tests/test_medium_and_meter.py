"""
===============================================================================
DISPERSION MODEL AND INTENSITY METER TESTS
===============================================================================

Tests for core.medium, core.intensity_meter and the validated configuration
objects (Scene, Laser, ColoredRay):

1. DISPERSION MODEL
   - Reference index reproduced at the red wavelength
   - Normal dispersion (index decreases with wavelength)
   - Cauchy dispersion and substance presets

2. INTENSITY METER
   - Empty accumulator reads MISS
   - Sum of hits, independent of order
   - Sensor hit test and translations

3. CONFIGURATION
   - ValueError on invalid scene, laser and ray parameters

Run with:
    python developer_tests/test_medium_and_meter.py

Or with pytest:
    pytest developer_tests/test_medium_and_meter.py -v
===============================================================================
"""

import sys
import itertools
from pathlib import Path

# Add the src-python directory to the path
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import pytest

from prism_light.core.geometry import geometry, Point
from prism_light.core.medium import (
    DispersionFunction, CauchyDispersion, Substance, Medium,
    AIR, WATER, GLASS, DIAMOND, MYSTERY_A, SUBSTANCES,
)
from prism_light.core.intensity_meter import IntensityMeter, Reading
from prism_light.core.ray import ColoredRay, LightRaySegment
from prism_light.core.laser import Laser
from prism_light.core.scene import Scene
from prism_light.core.constants import WAVELENGTH_RED, WHITE_LIGHT_WAVELENGTHS_NM, SENSOR_RADIUS
from prism_light.core.color import wavelength_to_color
from prism_light.optical_elements.prisms import square_prism


# =============================================================================
# TEST CONFIGURATION
# =============================================================================

TOLERANCE = 1e-9


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def make_segment(tail, tip, power=1.0):
    return LightRaySegment(
        tail=geometry.point(*tail),
        tip=geometry.point(*tip),
        medium_index_of_refraction=1.0,
        wavelength_in_medium=WAVELENGTH_RED,
        wavelength_in_vacuum_nm=650.0,
        power=power,
        color=wavelength_to_color(650.0),
        wave_width=1e-6,
        origin_tag='prism',
    )


# =============================================================================
# DISPERSION MODEL
# =============================================================================

def test_reference_index():
    """
    Every preset reproduces its nominal index at the red reference wavelength.
    """
    print("\n" + "=" * 60)
    print("TEST: Reference Index")
    print("=" * 60)

    for substance in [WATER, GLASS, DIAMOND, MYSTERY_A]:
        n = Medium(substance).index_of_refraction(WAVELENGTH_RED)
        assert_close(n, substance.index_of_refraction_for_red_light, 1e-12, substance.name)
        print(f"  {substance.name}: n(650 nm) = {n:.6f} - PASS")

    assert_close(AIR.index_of_refraction(WAVELENGTH_RED), 1.000293, 1e-5, "air")
    assert_close(DispersionFunction.sellmeier_value(587.6e-9), 1.5168, 1e-3, "BK7 d-line")
    print("  Air and the BK7 Sellmeier curve - PASS")


def test_normal_dispersion():
    """
    Glass bends violet more than red: the index falls with wavelength.
    """
    print("\n" + "=" * 60)
    print("TEST: Normal Dispersion")
    print("=" * 60)

    for substance in [GLASS, WATER, DIAMOND]:
        indices = [substance.index_of_refraction(nm / 1e9) for nm in WHITE_LIGHT_WAVELENGTHS_NM]
        assert all(a > b for a, b in zip(indices, indices[1:])), f"{substance.name} not decreasing"
        print(f"  {substance.name}: {indices[0]:.4f} (380 nm) > {indices[-1]:.4f} (780 nm) - PASS")

    below_air = Substance.custom_substance(0.9)
    assert below_air.custom
    assert_close(below_air.index_of_refraction(WAVELENGTH_RED),
                 DispersionFunction.air_index(WAVELENGTH_RED), 1e-12, "Clamped to air")
    print("  Indices below air clamp to the air curve - PASS")


def test_cauchy_and_presets():
    print("\n" + "=" * 60)
    print("TEST: Cauchy Dispersion and Presets")
    print("=" * 60)

    cauchy = CauchyDispersion(1.5, 0.004)
    assert_close(cauchy.index_of_refraction(500e-9), 1.5 + 0.004 / 0.25, 1e-12, "Cauchy at 500 nm")
    assert cauchy.index_of_refraction(400e-9) > cauchy.index_of_refraction(700e-9)

    flat = Substance('flat', 1.7, dispersion_function=CauchyDispersion(1.7, 0.0))
    assert flat.index_of_refraction(400e-9) == flat.index_of_refraction(700e-9) == 1.7
    print("  Cauchy equation - PASS")

    assert len(SUBSTANCES) == 6
    assert [s.name for s in SUBSTANCES if s.mystery] == ['mysteryA', 'mysteryB']
    assert Medium(MYSTERY_A).is_mystery and not Medium(GLASS).is_mystery
    print("  Six presets, two mystery substances - PASS")

    with pytest.raises(ValueError):
        DispersionFunction(0.0)
    with pytest.raises(ValueError):
        CauchyDispersion(-1.0)
    print("  Non-positive indices rejected - PASS")


# =============================================================================
# INTENSITY METER
# =============================================================================

def test_empty_meter_is_miss():
    print("\n" + "=" * 60)
    print("TEST: Empty Meter Is MISS")
    print("=" * 60)

    meter = IntensityMeter((0.0, 0.0), (1e-6, 0.0))
    assert meter.reading is Reading.MISS
    meter.add_ray_reading(Reading.MISS)
    meter.add_ray_reading(Reading.MISS)
    assert meter.reading.is_miss(), "Only misses should read MISS"
    assert meter.reading.to_string() == '—'
    print("  MISS with no hits - PASS")


def test_accumulation_commutative():
    """
    The reading is the sum of hits whatever order they arrive in.
    """
    print("\n" + "=" * 60)
    print("TEST: Accumulation Is Commutative")
    print("=" * 60)

    readings = [Reading(0.25), Reading.MISS, Reading(0.5), Reading(0.125), Reading.MISS]
    meter = IntensityMeter((0.0, 0.0), (1e-6, 0.0))
    for order in itertools.permutations(readings):
        meter.clear_ray_readings()
        for reading in order:
            meter.add_ray_reading(reading)
        assert_close(meter.reading.value, 0.875, 1e-15, "Sum of hits")
    print("  Every ordering sums to 0.875 - PASS")

    assert meter.reading.to_string() == "87.50%"
    meter.clear_ray_readings()
    assert meter.reading is Reading.MISS and meter.ray_readings == []
    print("  Formatting and reset - PASS")


def test_sensor_geometry():
    print("\n" + "=" * 60)
    print("TEST: Sensor Geometry")
    print("=" * 60)

    meter = IntensityMeter((0.0, 0.0), (0.0, -5e-6))
    through = make_segment((-1e-5, 0.0), (1e-5, 0.0))
    grazing = make_segment((-1e-5, SENSOR_RADIUS * 0.99), (1e-5, SENSOR_RADIUS * 0.99))
    outside = make_segment((-1e-5, SENSOR_RADIUS * 1.01), (1e-5, SENSOR_RADIUS * 1.01))
    short = make_segment((-1e-5, 0.0), (-5e-6, 0.0))
    assert meter.sensor_intersects(through)
    assert meter.sensor_intersects(grazing)
    assert not meter.sensor_intersects(outside)
    assert not meter.sensor_intersects(short), "Segments ending before the sensor miss"
    print("  Segment hit test - PASS")

    shape = meter.sensor_shape()
    assert_close(shape.area, 3.14159 * SENSOR_RADIUS ** 2, 0.01 * SENSOR_RADIUS ** 2, "Sensor area")
    print("  Shapely sensor disk - PASS")

    meter.translate_all(1e-6, 2e-6)
    assert meter.sensor_position == Point(1e-6, 2e-6)
    assert_close(meter.body_position.x, 1e-6, 1e-20, "Body x")
    assert_close(meter.body_position.y, -3e-6, 1e-20, "Body y")
    meter.translate_body(1e-6, 0.0)
    assert meter.sensor_position == Point(1e-6, 2e-6), "Body moves alone"
    print("  Translations - PASS")

    with pytest.raises(ValueError):
        IntensityMeter((0.0, 0.0), (0.0, 0.0), sensor_radius=0.0)


# =============================================================================
# CONFIGURATION
# =============================================================================

def test_configuration_validation():
    print("\n" + "=" * 60)
    print("TEST: Configuration Validation")
    print("=" * 60)

    scene = Scene()
    for bad in [0, -3, 1.5, True]:
        with pytest.raises(ValueError):
            scene.many_rays = bad
    scene.many_rays = 7
    assert scene.many_rays == 7
    with pytest.raises(ValueError):
        scene.add_shape("not a shape")
    print("  Scene.many_rays and add_shape - PASS")

    laser = Laser((1e-6, 0.0))
    with pytest.raises(ValueError):
        laser.wavelength = 100e-9
    with pytest.raises(ValueError):
        laser.color_mode = 'rainbow'
    with pytest.raises(ValueError):
        laser.power = 1.5
    with pytest.raises(ValueError):
        Laser((0.0, 0.0), (0.0, 0.0))
    print("  Laser setters - PASS")

    tail = geometry.point(0, 0)
    with pytest.raises(ValueError):
        ColoredRay.from_wavelength(tail, geometry.point(2, 0), 1.0, WAVELENGTH_RED, 1.0)
    with pytest.raises(ValueError):
        ColoredRay.from_wavelength(tail, geometry.point(1, 0), 1.0, WAVELENGTH_RED, 0.0)
    with pytest.raises(ValueError):
        ColoredRay(tail, geometry.point(1, 0), 1.0, WAVELENGTH_RED, 1.0, 1.0, 'bounce')
    print("  ColoredRay preconditions - PASS")


def test_scene_editing():
    print("\n" + "=" * 60)
    print("TEST: Scene Editing")
    print("=" * 60)

    scene = Scene()
    index = scene.add_shape(square_prism().shape)
    assert scene.is_in_prism((0.0, 0.0))
    moved = scene.translate_shape(index, 1e-4, 0.0)
    assert scene.shapes[index] is moved
    assert not scene.is_in_prism((0.0, 0.0))
    scene.rotate_shape(index, 0.3)
    assert scene.is_in_prism((1e-4, 0.0))
    scene.remove_shape(scene.shapes[index])
    assert scene.shapes == []
    assert scene.get_display_name().startswith("Scene_")
    scene.name = "bench"
    assert scene.get_display_name() == "bench"
    print("  Add, move, rotate and remove shapes - PASS")

    laser = Laser.from_angle(0.0, 1e-5)
    assert_close(laser.direction_unit_vector.x, -1.0, 1e-12, "Aims at the pivot")
    laser.set_angle(3.14159265358979 / 2)
    assert_close(laser.emission_point.y, 1e-5, 1e-18, "Swung to +Y")
    laser.translate(1e-6, 0.0)
    assert_close(laser.pivot.x, 1e-6, 1e-18, "Pivot moves with the laser")
    print("  Laser placement - PASS")


def run_all_tests():
    """Run all tests and report results."""
    print("\n" + "=" * 78)
    print("DISPERSION MODEL AND INTENSITY METER TESTS")
    print("=" * 78)

    tests = [
        ("Reference Index", test_reference_index),
        ("Normal Dispersion", test_normal_dispersion),
        ("Cauchy Dispersion and Presets", test_cauchy_and_presets),
        ("Empty Meter Is MISS", test_empty_meter_is_miss),
        ("Accumulation Is Commutative", test_accumulation_commutative),
        ("Sensor Geometry", test_sensor_geometry),
        ("Configuration Validation", test_configuration_validation),
        ("Scene Editing", test_scene_editing),
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
