import math

import pytest

from habitrings.model.geometry_primitives import Point
from habitrings.model.geometry_utils import GeometryError, cap_angle_offset, safe_asin
from habitrings.render.capsule import draw_simple_rounded, solve_capsule

CENTER = Point(50.0, 50.0)


@pytest.mark.parametrize(
    "inner_radius, corner_radius",
    [(0.0, 5.0), (30.79, 11.62), (40.0, 8.33), (100.0, 2.0), (1.0, 50.0)],
)
def test_cap_centers_lie_on_the_mid_circle(inner_radius, corner_radius):
    capsule = solve_capsule(CENTER, -90.0, -31.5, inner_radius, corner_radius)

    cc_r = inner_radius + corner_radius
    assert capsule.cap_center_1.distance_to(CENTER) == pytest.approx(cc_r)
    assert capsule.cap_center_2.distance_to(CENTER) == pytest.approx(cc_r)
    assert capsule.corner_radius == corner_radius


def test_cap_offset_angle():
    delta = cap_angle_offset(10.0, 40.0)

    assert delta == pytest.approx(2 * math.asin(10.0 / 80.0))


def test_negative_sweep_moves_caps_into_the_span():
    capsule = solve_capsule(CENTER, -90.0, -31.5, 30.0, 10.0)
    delta = math.degrees(cap_angle_offset(10.0, 40.0))

    assert capsule.extended_start_angle == pytest.approx(-90.0 - delta)
    assert capsule.extended_sweep_angle == pytest.approx(-31.5 + 2 * delta)
    expected_2 = CENTER.polar(40.0, -121.5 + delta)
    assert capsule.cap_center_2.x == pytest.approx(expected_2.x)
    assert capsule.cap_center_2.y == pytest.approx(expected_2.y)


def test_positive_sweep_extends_past_both_cuts():
    capsule = solve_capsule(CENTER, 0.0, 40.0, 30.0, 10.0)
    delta = math.degrees(cap_angle_offset(10.0, 40.0))

    assert capsule.extended_start_angle == pytest.approx(-delta)
    assert capsule.extended_sweep_angle == pytest.approx(40.0 + 2 * delta)
    expected_1 = CENTER.polar(40.0, -delta)
    expected_2 = CENTER.polar(40.0, 40.0 + delta)
    assert capsule.cap_center_1.x == pytest.approx(expected_1.x)
    assert capsule.cap_center_1.y == pytest.approx(expected_1.y)
    assert capsule.cap_center_2.x == pytest.approx(expected_2.x)
    assert capsule.cap_center_2.y == pytest.approx(expected_2.y)


def test_cap_discs_touch_both_band_edges():
    inner, r_c = 20.0, 6.0
    capsule = solve_capsule(CENTER, 10.0, 60.0, inner, r_c)

    for cap in (capsule.cap_center_1, capsule.cap_center_2):
        distance = cap.distance_to(CENTER)
        assert distance - r_c == pytest.approx(inner)
        assert distance + r_c == pytest.approx(inner + 2 * r_c)


@pytest.mark.parametrize("inner_radius, corner_radius", [(10.0, 0.0), (10.0, -2.0), (-1.0, 5.0)])
def test_invalid_capsule_inputs_raise(inner_radius, corner_radius):
    with pytest.raises(GeometryError):
        solve_capsule(CENTER, 0.0, 30.0, inner_radius, corner_radius)


def test_asin_domain_violation_raises():
    with pytest.raises(GeometryError):
        safe_asin(1.5)
    with pytest.raises(GeometryError):
        safe_asin(float("nan"))
    with pytest.raises(GeometryError):
        cap_angle_offset(5.0, 1.0)


def test_simple_rounded_draws_arc_then_both_caps(surface):
    arc_center = Point(52.0, 47.0)

    capsule = draw_simple_rounded(surface, CENTER, -90.0, -31.5, 30.0, 10.0, "#111111", arc_center=arc_center)

    assert surface.ops() == ["draw_arc", "draw_circle", "draw_circle"]
    arc, cap_1, cap_2 = surface.calls
    assert arc.args["center"] == arc_center
    assert arc.args["radius"] == pytest.approx(40.0)
    assert arc.args["width"] == pytest.approx(20.0)
    assert arc.args["start_angle"] == pytest.approx(capsule.extended_start_angle)
    assert arc.args["sweep_angle"] == pytest.approx(capsule.extended_sweep_angle)
    assert cap_1.args["center"] == capsule.cap_center_1
    assert cap_2.args["center"] == capsule.cap_center_2
    assert cap_1.args["radius"] == 10.0


def test_simple_rounded_caps_are_masked_by_the_capsule_center(surface):
    draw_simple_rounded(surface, CENTER, -90.0, -31.5, 30.0, 10.0, "#111111", 0.4, "#EEEEEE")

    clips = [c for c in surface.calls if c.op == "clip_circle"]
    assert len(clips) == 2
    assert all(c.args["center"] == CENTER for c in clips)
    assert [c.color for c in surface.draws] == ["#EEEEEE", "#111111"] * 3
