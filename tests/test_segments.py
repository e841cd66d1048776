import pytest

from habitrings.model.geometry_primitives import Point
from habitrings.model.geometry_utils import GeometryError
from habitrings.render.segments import SegmentMode, draw_adaptive_segment, select_mode

CENTER = Point(0.0, 0.0)
FG = "#1565C0"
BG = "#E0E0E0"


@pytest.mark.parametrize(
    "more_than_two, innermost, expected",
    [
        (False, False, SegmentMode.SIMPLE_ROUNDED),
        (False, True, SegmentMode.SIMPLE_ROUNDED),
        (True, True, SegmentMode.TRIANGULAR_ROUNDED),
        (True, False, SegmentMode.RECTANGULAR_ROUNDED),
    ],
)
def test_select_mode(more_than_two, innermost, expected):
    assert select_mode(more_than_two, innermost) is expected


def draw(surface, more_than_two, innermost, **kwargs):
    params = dict(
        center=CENTER,
        start_angle=-90.0,
        sweep_angle=-31.5,
        inner_radius=30.0,
        half_thickness=20.0,
        corner_radius=8.0,
        color=FG,
    )
    params.update(kwargs)
    return draw_adaptive_segment(surface, more_than_two, innermost, **params)


def test_simple_mode_is_one_capsule(surface):
    mode = draw(surface, False, True, half_thickness=8.0)

    assert mode is SegmentMode.SIMPLE_ROUNDED
    assert surface.ops() == ["draw_arc", "draw_circle", "draw_circle"]


def test_rectangular_mode_stacks_band_and_two_capsules(surface):
    mode = draw(surface, True, False)

    assert mode is SegmentMode.RECTANGULAR_ROUNDED
    assert surface.ops() == ["draw_arc"] + ["draw_arc", "draw_circle", "draw_circle"] * 2

    band, outer_capsule = surface.calls[0], surface.calls[1]
    # Plain band covers [inner + r_c, inner + 2h - r_c] with the day's own angles
    assert band.args["radius"] - band.args["width"] / 2 == pytest.approx(38.0)
    assert band.args["radius"] + band.args["width"] / 2 == pytest.approx(62.0)
    assert band.args["start_angle"] == -90.0
    assert band.args["sweep_angle"] == -31.5
    # Outer capsule spans the last 2 * r_c of the ring
    assert outer_capsule.args["radius"] - outer_capsule.args["width"] / 2 == pytest.approx(54.0)
    inner_capsule = surface.calls[4]
    assert inner_capsule.args["radius"] - inner_capsule.args["width"] / 2 == pytest.approx(30.0)


def test_triangular_mode_uses_a_single_hub_cap(surface):
    mode = draw(surface, True, True)

    assert mode is SegmentMode.TRIANGULAR_ROUNDED
    assert surface.ops() == ["draw_arc", "draw_circle", "draw_arc", "draw_circle", "draw_circle"]

    tip = surface.calls[1]
    expected = CENTER.polar(38.0, -90.0 - 31.5 / 2)
    assert tip.args["center"].x == pytest.approx(expected.x)
    assert tip.args["center"].y == pytest.approx(expected.y)
    assert tip.args["radius"] == 8.0


@pytest.mark.parametrize("more_than_two, innermost", [(False, True), (True, True), (True, False)])
def test_every_mode_fills_background_first_then_foreground(surface, more_than_two, innermost):
    half = 8.0 if not more_than_two else 20.0
    draw(surface, more_than_two, innermost, half_thickness=half, fill_fraction=0.5, background_color=BG)

    colors = [c.color for c in surface.draws]
    assert colors == [BG, FG] * (len(colors) // 2)
    for arc_bg, arc_fg in zip(surface.draws[::2], surface.draws[1::2]):
        if arc_bg.op == "draw_arc":
            # Foreground grows outwards from the same inner edge
            bg_inner = arc_bg.args["radius"] - arc_bg.args["width"] / 2
            fg_inner = arc_fg.args["radius"] - arc_fg.args["width"] / 2
            assert fg_inner == pytest.approx(bg_inner)
            assert arc_fg.args["width"] == pytest.approx(arc_bg.args["width"] / 2)


@pytest.mark.parametrize("more_than_two, innermost", [(False, True), (True, True), (True, False)])
def test_empty_cells_show_background_only(surface, more_than_two, innermost):
    half = 8.0 if not more_than_two else 20.0
    draw(surface, more_than_two, innermost, half_thickness=half, fill_fraction=0.0, background_color=BG)

    assert surface.colors() == {BG}


def test_non_positive_half_thickness_raises(surface):
    with pytest.raises(GeometryError):
        draw(surface, True, False, half_thickness=0.0)
