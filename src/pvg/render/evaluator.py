"""Frame evaluation: camera pose and per-element screen transforms.

``evaluate`` is a pure function of a scene document and a frame index.
It holds no state, so frames can be evaluated in any order or in
parallel, each call with its own document snapshot.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from ..models.document import CameraConfig, SceneDocument
from ..models.scene import Element, Layer, RotationAnimationType
from .easing import clamp01, ease_in_out, interpolate, spring_progress
from .transform import Affine

ROTATION_CURVES = {
    RotationAnimationType.EASING: ease_in_out,
    RotationAnimationType.SPRING: spring_progress,
}


@dataclass(frozen=True)
class CameraPose:
    """Camera position and zoom at one frame."""

    x: float
    y: float
    zoom: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "zoom": self.zoom}


@dataclass(frozen=True)
class LayerPlacement:
    """Parallax offset of one visible layer at one frame."""

    layer_id: str
    z_index: int
    offset_x: float
    offset_y: float

    def to_dict(self) -> dict:
        return {
            "layerId": self.layer_id,
            "zIndex": self.z_index,
            "offsetX": self.offset_x,
            "offsetY": self.offset_y,
        }


@dataclass(frozen=True)
class DrawItem:
    """One element to draw, in final draw order.

    ``transform`` maps the element's local box ``[0, width] x [0, height]``
    to canvas pixels.
    """

    element_id: str
    layer_id: str
    transform: Affine
    opacity: float
    rotation: float
    width: float
    height: float

    def to_dict(self) -> dict:
        return {
            "elementId": self.element_id,
            "layerId": self.layer_id,
            "transform": self.transform.to_svg(),
            "opacity": self.opacity,
            "rotation": self.rotation,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class FrameResult:
    """Everything the presentation layer needs to draw one frame."""

    frame: int
    progress: float
    camera: CameraPose
    layers: Tuple[LayerPlacement, ...]
    draw_list: Tuple[DrawItem, ...]

    def to_dict(self) -> dict:
        return {
            "frame": self.frame,
            "progress": self.progress,
            "camera": self.camera.to_dict(),
            "layers": [layer.to_dict() for layer in self.layers],
            "drawList": [item.to_dict() for item in self.draw_list],
        }


def progress_at(duration_in_frames: int, frame: int) -> float:
    """Normalized timeline position of a frame, clamped to [0, 1].

    Documents of one frame (or a non-positive duration) are static at 0.
    """
    if duration_in_frames <= 1:
        return 0.0
    return clamp01(frame / (duration_in_frames - 1))


def camera_at(camera: CameraConfig, progress: float) -> CameraPose:
    """Camera pose at a progress value: linear pan, eased zoom."""
    return CameraPose(
        x=interpolate(camera.initial_x, camera.final_x, progress),
        y=interpolate(camera.initial_y, camera.final_y, progress),
        zoom=interpolate(camera.initial_zoom, camera.final_zoom, ease_in_out(progress)),
    )


def layer_offset(camera: CameraPose, layer: Layer) -> Tuple[float, float]:
    """Parallax offset of a layer.

    A factor of 0 shifts the layer by the full negative camera translation,
    a factor of 1 leaves it fixed to the screen.
    """
    factor = layer.parallax_factor
    return (
        0.0 - camera.x * (1 - factor.x),
        0.0 - camera.y * (1 - factor.y),
    )


def element_rotation(element: Element, progress: float) -> float:
    """Rotation of an element in degrees at a progress value."""
    curve = ROTATION_CURVES[element.rotation_animation_type]
    return interpolate(element.initial_rotation, element.final_rotation, curve(progress))


def element_transform(
    element: Element,
    rotation: float,
    zoom: float,
    offset: Tuple[float, float],
    canvas_center: Tuple[float, float],
) -> Affine:
    """Compose an element's screen transform.

    Order: place the box centred on (x, y), rotate and scale about the
    pivot, apply camera zoom about the layer origin, shift by the layer
    offset, then move the origin to the canvas centre.
    """
    left = element.x - element.width / 2
    top = element.y - element.height / 2
    pivot_x = left + element.transform_origin_x * element.width
    pivot_y = top + element.transform_origin_y * element.height

    return (
        Affine.translation(left, top)
        .then(Affine.rotation(rotation).about(pivot_x, pivot_y))
        .then(Affine.scaling(element.scale).about(pivot_x, pivot_y))
        .then(Affine.scaling(zoom))
        .then(Affine.translation(*offset))
        .then(Affine.translation(*canvas_center))
    )


def evaluate(document: SceneDocument, frame: int) -> FrameResult:
    """Evaluate one frame of a document.

    Args:
        document: Scene document (or editor state) to evaluate.
        frame: Frame index; callers keep it within the document duration.

    Returns:
        Camera pose, visible layer offsets and the draw list, with layers
        ordered by ascending zIndex and elements by ascending zIndex
        within their layer.
    """
    progress = progress_at(document.duration_in_frames, frame)
    camera = camera_at(document.camera, progress)
    canvas_center = (document.width / 2, document.height / 2)

    placements = []
    draw_list = []
    visible = sorted(
        (layer for layer in document.layers if layer.is_visible),
        key=lambda layer: layer.z_index,
    )
    for layer in visible:
        offset = layer_offset(camera, layer)
        placements.append(LayerPlacement(layer.id, layer.z_index, offset[0], offset[1]))

        for element in sorted(layer.elements, key=lambda el: el.z_index):
            rotation = element_rotation(element, progress)
            draw_list.append(DrawItem(
                element_id=element.id,
                layer_id=layer.id,
                transform=element_transform(element, rotation, camera.zoom, offset, canvas_center),
                opacity=element.opacity,
                rotation=rotation,
                width=element.width,
                height=element.height,
            ))

    return FrameResult(
        frame=frame,
        progress=progress,
        camera=camera,
        layers=tuple(placements),
        draw_list=tuple(draw_list),
    )


def iter_frames(document: SceneDocument) -> Iterator[FrameResult]:
    """Evaluate every frame of the document in order."""
    for frame in range(max(document.duration_in_frames, 0)):
        yield evaluate(document, frame)
