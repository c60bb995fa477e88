"""Frame evaluation for parallax scene documents."""

from .easing import cubic_bezier, ease_in_out, interpolate, spring_position, spring_progress
from .transform import Affine
from .evaluator import (
    CameraPose,
    DrawItem,
    FrameResult,
    LayerPlacement,
    camera_at,
    element_rotation,
    evaluate,
    iter_frames,
    layer_offset,
    progress_at,
)

__all__ = [
    # Easing
    "cubic_bezier",
    "ease_in_out",
    "interpolate",
    "spring_position",
    "spring_progress",
    # Transforms
    "Affine",
    # Evaluation
    "CameraPose",
    "DrawItem",
    "FrameResult",
    "LayerPlacement",
    "camera_at",
    "element_rotation",
    "evaluate",
    "iter_frames",
    "layer_offset",
    "progress_at",
]
