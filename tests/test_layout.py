import dataclasses
import math

import pytest

from habitrings.model.geometry_primitives import Point
from habitrings.model.geometry_utils import GeometryError
from habitrings.model.layout import compute_display_geometry

CENTER = Point(100.0, 100.0)


def make_geometry(**overrides):
    params = dict(
        center=CENTER,
        max_radius=100.0,
        inner_margin=40.0,
        gap_size=5.0,
        num_days=10,
        num_rings=1,
        start_angle=-90.0,
        gap_angle=45.0,
    )
    params.update(overrides)
    return compute_display_geometry(**params)


def test_day_angles_for_ten_days():
    geometry = make_geometry()

    assert geometry.segment_angle == pytest.approx(31.5)
    assert geometry.day_start_angles[0] == pytest.approx(-90.0)
    assert geometry.day_start_angles[1] == pytest.approx(-121.5)
    assert geometry.day_start_angles[-1] == pytest.approx(-90.0 - 9 * 31.5)
    assert len(geometry.day_start_angles) == 10


def test_day_segment_sweeps_backwards():
    day = make_geometry().day(3)

    assert day.sweep_angle == pytest.approx(-31.5)
    assert day.end_angle == pytest.approx(-90.0 - 4 * 31.5)


def test_effective_center_radius():
    geometry = make_geometry()

    expected = 5.0 / (2 * math.sin(math.radians(31.5) / 2))
    assert geometry.effective_center_radius == pytest.approx(expected)
    assert 0 <= geometry.effective_center_radius < geometry.inner_margin


def test_effective_centers_sit_on_offset_circle_at_day_midpoints():
    geometry = make_geometry()

    for day_index, point in enumerate(geometry.effective_centers):
        assert point.distance_to(CENTER) == pytest.approx(geometry.effective_center_radius)
        mid_angle = geometry.day_start_angles[day_index] - geometry.segment_angle / 2
        expected = CENTER.polar(geometry.effective_center_radius, mid_angle)
        assert point.x == pytest.approx(expected.x)
        assert point.y == pytest.approx(expected.y)


def test_hub_corner_radius():
    geometry = make_geometry()

    effective_inner = 40.0 - geometry.effective_center_radius
    r_intermediate = effective_inner / (1 - 2 * math.sin(math.radians(31.5) / 4))
    assert geometry.hub_corner_radius == pytest.approx(r_intermediate - effective_inner)
    assert geometry.hub_corner_radius == pytest.approx(11.62, abs=0.01)


def test_single_thick_ring_is_more_than_two():
    geometry = make_geometry()

    assert geometry.ring_thickness == pytest.approx(60.0)
    assert geometry.more_than_two
    assert geometry.corner_radius == pytest.approx(geometry.hub_corner_radius)


def test_thin_rings_use_half_thickness_as_corner_radius():
    geometry = make_geometry(num_rings=3)

    assert geometry.ring_thickness == pytest.approx(50.0 / 3)
    assert not geometry.more_than_two
    assert geometry.corner_radius == pytest.approx(geometry.half_thickness)


def test_ring_radii_are_packed_from_the_outside():
    geometry = make_geometry(num_rings=2)

    assert geometry.ring_thickness == pytest.approx(27.5)
    assert geometry.ring_outer_radii == pytest.approx((67.5, 100.0))
    assert geometry.ring_inner_radii == pytest.approx((40.0, 72.5))
    assert geometry.ring(0).thickness == pytest.approx(27.5)


def test_geometry_is_deterministic_and_frozen():
    first = make_geometry(num_rings=4, num_days=7)
    second = make_geometry(num_rings=4, num_days=7)

    assert first == second
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.num_days = 3


@pytest.mark.parametrize(
    "overrides",
    [
        {"gap_size": 25.0},  # offset radius beyond the inner margin
        {"num_days": 0},
        {"num_rings": 0},
        {"max_radius": 40.0},
        {"inner_margin": 0.0},
        {"gap_size": -1.0},
        {"gap_angle": 360.0},
        {"num_rings": 13},  # no room left for the rings
        {"num_days": 2},  # wedge too wide for hub rounding
    ],
)
def test_infeasible_configuration_raises(overrides):
    with pytest.raises(GeometryError):
        make_geometry(**overrides)


def test_offset_radius_just_past_inner_margin_raises():
    segment = 31.5
    gap = 2 * 40.0 * math.sin(math.radians(segment) / 2)

    with pytest.raises(GeometryError):
        make_geometry(gap_size=gap * 1.0001)
