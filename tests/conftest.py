"""Shared test fixtures for the pvg test suite."""

import pytest

from pvg.editor import AddElementToLayer, AddLayer, apply_commands
from pvg.models import (
    CameraConfig,
    EditorState,
    Element,
    ElementSpec,
    Layer,
    ParallaxFactor,
    SceneDocument,
)


@pytest.fixture
def element_spec():
    """A small element description without an id."""
    return ElementSpec(
        name="star.svg",
        svg_string='<svg width="40" height="20"></svg>',
        width=40,
        height=20,
    )


@pytest.fixture
def three_layers():
    """Editor state with layers A, B, C added in that order."""
    return apply_commands(
        EditorState(),
        [AddLayer(id="A"), AddLayer(id="B"), AddLayer(id="C")],
    )


@pytest.fixture
def layer_with_element(element_spec):
    """Editor state with one layer holding one selected element."""
    return apply_commands(
        EditorState(),
        [
            AddLayer(id="L1"),
            AddElementToLayer(layer_id="L1", element_id="E1", element=element_spec),
        ],
    )


@pytest.fixture
def sample_document():
    """A document exercising every field."""
    return SceneDocument(
        composition_name="Mountains",
        duration_in_frames=120,
        fps=24,
        width=1280,
        height=720,
        background_color="#102030",
        camera=CameraConfig(
            initial_x=-12.5, initial_y=3.25, initial_zoom=1.0,
            final_x=400.0, final_y=0.1, final_zoom=1.75,
        ),
        layers=[
            Layer(
                id="sky",
                name="Sky",
                parallax_factor=ParallaxFactor(x=0.1, y=0.2),
                z_index=0,
                elements=[
                    Element(
                        id="sun",
                        name="sun.svg",
                        svg_string="<svg/>",
                        x=300.0,
                        y=-200.0,
                        scale=0.5,
                        opacity=0.8,
                        width=64,
                        height=64,
                        initial_rotation=0,
                        final_rotation=360,
                        transform_origin_x=0.25,
                        transform_origin_y=0.75,
                        rotation_animation_type="spring",
                        z_index=2,
                    ),
                ],
            ),
            Layer(id="hills", name="Hills", z_index=1, is_visible=False),
        ],
    )
