"""Tests for frame evaluation.

Tests cover:
- easing: bezier and spring curves
- transform: affine composition
- evaluator: progress, camera, parallax offsets, draw order, element transforms
"""

import pytest

from pvg.models import CameraConfig, Element, Layer, ParallaxFactor, SceneDocument
from pvg.render import (
    Affine,
    CameraPose,
    cubic_bezier,
    ease_in_out,
    evaluate,
    interpolate,
    iter_frames,
    progress_at,
    spring_position,
    spring_progress,
)


def make_element(element_id="e", **fields):
    values = {"name": element_id, "svg_string": "<svg/>"}
    values.update(fields)
    return Element(id=element_id, **values)


def make_document(layers=(), duration=101, **camera):
    return SceneDocument(
        duration_in_frames=duration,
        camera=CameraConfig(**camera),
        layers=list(layers),
    )


# ---------------------------------------------------------------------------
# easing
# ---------------------------------------------------------------------------

class TestEasing:
    """Interpolation curves."""

    def test_interpolate_endpoints_exact(self):
        assert interpolate(0.1, 0.7, 0) == 0.1
        assert interpolate(0.1, 0.7, 1) == 0.7
        assert interpolate(0, 10, 0.25) == 2.5

    def test_ease_endpoints(self):
        assert ease_in_out(0) == 0.0
        assert ease_in_out(1) == 1.0
        assert ease_in_out(-3) == 0.0
        assert ease_in_out(4) == 1.0

    def test_ease_matches_css_ease(self):
        assert ease_in_out(0.5) == pytest.approx(0.8024, abs=1e-3)

    def test_ease_is_monotonic(self):
        values = [ease_in_out(i / 100) for i in range(101)]
        assert values == sorted(values)

    def test_linear_bezier(self):
        linear = cubic_bezier(0.0, 0.0, 1.0, 1.0)
        for i in range(11):
            assert linear(i / 10) == pytest.approx(i / 10, abs=1e-6)

    def test_spring_starts_at_rest(self):
        assert spring_position(0) == 0.0
        assert spring_progress(0) == 0.0
        assert spring_progress(1) == 1.0

    def test_spring_overshoots_then_settles(self):
        values = [spring_progress(i / 200) for i in range(201)]
        assert max(values) > 1.0
        assert abs(values[-2] - 1.0) < 0.01

    @pytest.mark.parametrize("damping", [20.0, 40.0])
    def test_damped_springs_do_not_overshoot(self, damping):
        values = [spring_position(i / 50, damping=damping) for i in range(200)]
        assert max(values) <= 1.0
        assert values == sorted(values)


# ---------------------------------------------------------------------------
# transform
# ---------------------------------------------------------------------------

class TestAffine:
    """Affine matrices."""

    def test_identity(self):
        assert Affine.identity().apply(3, 4) == (3, 4)

    def test_then_applies_in_order(self):
        m = Affine.translation(1, 0).then(Affine.scaling(2))
        assert m.apply(0, 0) == (2, 0)
        m = Affine.scaling(2).then(Affine.translation(1, 0))
        assert m.apply(0, 0) == (1, 0)

    def test_rotation_is_clockwise_on_y_down_canvas(self):
        x, y = Affine.rotation(90).apply(1, 0)
        assert x == pytest.approx(0, abs=1e-12)
        assert y == pytest.approx(1)

    def test_about_keeps_pivot_fixed(self):
        m = Affine.rotation(33).about(5, 7)
        x, y = m.apply(5, 7)
        assert (x, y) == (pytest.approx(5), pytest.approx(7))

    def test_to_svg(self):
        assert Affine.translation(3, 4).to_svg() == "matrix(1.0, 0.0, 0.0, 1.0, 3, 4)"


# ---------------------------------------------------------------------------
# evaluator
# ---------------------------------------------------------------------------

class TestProgress:
    """Normalized timeline position."""

    def test_linear_progress(self):
        assert progress_at(101, 0) == 0.0
        assert progress_at(101, 50) == 0.5
        assert progress_at(101, 100) == 1.0

    @pytest.mark.parametrize("duration", [1, 0, -10])
    def test_degenerate_duration_is_static(self, duration):
        assert progress_at(duration, 0) == 0.0
        assert progress_at(duration, 5) == 0.0

    def test_clamped(self):
        assert progress_at(10, 50) == 1.0
        assert progress_at(10, -3) == 0.0


class TestCamera:
    """Camera pose."""

    def test_single_frame_document_is_initial_camera(self):
        doc = make_document(
            duration=1,
            initial_x=10, initial_y=20, initial_zoom=1.5,
            final_x=50, final_y=60, final_zoom=3,
        )
        result = evaluate(doc, 0)
        assert result.camera == CameraPose(x=10, y=20, zoom=1.5)
        assert result.draw_list == ()
        assert result.layers == ()

    def test_pan_is_linear(self):
        doc = make_document(final_x=100, final_y=-40)
        camera = evaluate(doc, 50).camera
        assert camera.x == 50.0
        assert camera.y == -20.0

    def test_zoom_is_eased(self):
        doc = make_document(initial_zoom=1, final_zoom=3)
        zoom = evaluate(doc, 50).camera.zoom
        assert zoom == pytest.approx(1 + 2 * ease_in_out(0.5))
        assert zoom != pytest.approx(2.0)
        assert evaluate(doc, 100).camera.zoom == 3.0

    def test_non_positive_zoom_does_not_crash(self):
        doc = make_document(initial_zoom=0, final_zoom=-1, layers=[
            Layer(id="l", name="L", elements=[make_element()]),
        ])
        assert len(evaluate(doc, 30).draw_list) == 1


class TestParallax:
    """Layer offsets."""

    def test_factor_zero_tracks_world(self):
        doc = make_document(
            final_x=100,
            layers=[Layer(id="l", name="L", parallax_factor=ParallaxFactor(x=0, y=0))],
        )
        placement = evaluate(doc, 100).layers[0]
        assert placement.offset_x == -100
        assert placement.offset_y == 0

    def test_factor_one_tracks_screen(self):
        doc = make_document(
            final_x=100,
            layers=[Layer(id="l", name="L", parallax_factor=ParallaxFactor(x=1, y=1))],
        )
        for result in iter_frames(doc):
            placement = result.layers[0]
            assert (placement.offset_x, placement.offset_y) == (0, 0)

    def test_half_factor(self):
        doc = make_document(final_x=100, final_y=50, layers=[Layer(id="l", name="L")])
        placement = evaluate(doc, 100).layers[0]
        assert (placement.offset_x, placement.offset_y) == (-50, -25)


class TestDrawOrder:
    """Layers and elements are drawn by ascending zIndex."""

    def test_layers_sorted_by_z_index(self):
        doc = make_document(layers=[
            Layer(id="front", name="F", z_index=5, elements=[make_element("f")]),
            Layer(id="back", name="B", z_index=1, elements=[make_element("b")]),
        ])
        result = evaluate(doc, 0)
        assert [p.layer_id for p in result.layers] == ["back", "front"]
        assert [item.element_id for item in result.draw_list] == ["b", "f"]

    def test_elements_sorted_within_layer(self):
        doc = make_document(layers=[Layer(id="l", name="L", elements=[
            make_element("top", z_index=3),
            make_element("bottom", z_index=-1),
            make_element("middle-1", z_index=0),
            make_element("middle-2", z_index=0),
        ])])
        ids = [item.element_id for item in evaluate(doc, 0).draw_list]
        assert ids == ["bottom", "middle-1", "middle-2", "top"]

    def test_hidden_layers_skipped(self):
        doc = make_document(layers=[
            Layer(id="shown", name="S", elements=[make_element("a")]),
            Layer(id="hidden", name="H", is_visible=False, elements=[make_element("b")]),
        ])
        result = evaluate(doc, 0)
        assert [p.layer_id for p in result.layers] == ["shown"]
        assert [item.element_id for item in result.draw_list] == ["a"]

    def test_empty_layers_draw_nothing(self):
        doc = make_document(layers=[Layer(id="l", name="L")])
        assert evaluate(doc, 0).draw_list == ()


class TestRotation:
    """Per-element rotation animation."""

    def test_easing_endpoints(self):
        doc = make_document(duration=2, layers=[Layer(id="l", name="L", elements=[
            make_element(initial_rotation=0, final_rotation=90, rotation_animation_type="easing"),
        ])])
        assert evaluate(doc, 0).draw_list[0].rotation == 0
        assert evaluate(doc, 1).draw_list[0].rotation == 90

    def test_spring_overshoots_and_lands(self):
        doc = make_document(duration=61, layers=[Layer(id="l", name="L", elements=[
            make_element(initial_rotation=0, final_rotation=90, rotation_animation_type="spring"),
        ])])
        rotations = [result.draw_list[0].rotation for result in iter_frames(doc)]
        assert rotations[0] == 0
        assert rotations[-1] == 90
        assert max(rotations) > 90


class TestElementTransform:
    """Screen transform composition."""

    def test_box_centred_on_canvas(self):
        doc = make_document(layers=[Layer(id="l", name="L", elements=[
            make_element(width=100, height=50),
        ])])
        m = evaluate(doc, 0).draw_list[0].transform
        assert m.apply(0, 0) == (910.0, 515.0)
        assert m.apply(100, 50) == (1010.0, 565.0)

    def test_rotation_about_top_left_pivot(self):
        doc = make_document(layers=[Layer(id="l", name="L", elements=[
            make_element(
                width=100, height=50, initial_rotation=90, final_rotation=90,
                transform_origin_x=0, transform_origin_y=0,
            ),
        ])])
        m = evaluate(doc, 0).draw_list[0].transform
        assert m.apply(0, 0) == (pytest.approx(910), pytest.approx(515))
        assert m.apply(100, 0) == (pytest.approx(910), pytest.approx(615))

    def test_pivot_outside_box_not_clamped(self):
        doc = make_document(layers=[Layer(id="l", name="L", elements=[
            make_element(
                width=100, height=50, initial_rotation=90, final_rotation=90,
                transform_origin_x=2.0, transform_origin_y=-1,
            ),
        ])])
        m = evaluate(doc, 0).draw_list[0].transform
        assert m.apply(200, -50) == (pytest.approx(1110), pytest.approx(465))
        assert m.apply(0, 0) == (pytest.approx(1060), pytest.approx(265))

    def test_scale_and_zoom(self):
        doc = make_document(initial_zoom=1.5, final_zoom=1.5, layers=[
            Layer(id="l", name="L", elements=[make_element(x=10, width=100, height=50, scale=2)]),
        ])
        m = evaluate(doc, 0).draw_list[0].transform
        assert m.apply(50, 25) == (pytest.approx(975), pytest.approx(540))
        assert m.apply(100, 25) == (pytest.approx(1125), pytest.approx(540))

    def test_layer_offset_applied(self):
        doc = make_document(final_x=100, layers=[
            Layer(id="l", name="L", parallax_factor=ParallaxFactor(x=0, y=0),
                  elements=[make_element(width=100, height=50)]),
        ])
        m = evaluate(doc, 100).draw_list[0].transform
        assert m.apply(50, 25) == (pytest.approx(860), pytest.approx(540))

    def test_out_of_range_values_pass_through(self):
        doc = make_document(layers=[Layer(id="l", name="L", elements=[
            make_element(opacity=-0.5, scale=-1),
        ])])
        item = evaluate(doc, 0).draw_list[0]
        assert item.opacity == -0.5
        assert item.transform.a == pytest.approx(-1)


class TestEvaluate:
    """Whole-frame behaviour."""

    def test_deterministic(self, sample_document):
        assert evaluate(sample_document, 37) == evaluate(sample_document, 37)

    def test_frame_and_progress_reported(self, sample_document):
        result = evaluate(sample_document, 0)
        assert result.frame == 0
        assert result.progress == 0.0

    def test_iter_frames_covers_duration(self, sample_document):
        frames = list(iter_frames(sample_document))
        assert len(frames) == sample_document.duration_in_frames
        assert frames[-1].progress == 1.0

    def test_negative_duration_does_not_crash(self):
        doc = make_document(duration=-5, final_x=100)
        assert evaluate(doc, 0).camera.x == 0
        assert list(iter_frames(doc)) == []

    def test_to_dict(self, sample_document):
        data = evaluate(sample_document, 10).to_dict()
        assert set(data) == {"frame", "progress", "camera", "layers", "drawList"}
        assert set(data["camera"]) == {"x", "y", "zoom"}
        item = data["drawList"][0]
        assert item["elementId"] == "sun"
        assert item["layerId"] == "sky"
        assert item["transform"].startswith("matrix(")
        assert item["opacity"] == 0.8
