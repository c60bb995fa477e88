"""Partial updates for scene entities.

A patch names the fields it may change. Only fields that were supplied
(and are not ``None``) are written, one by one, onto a copy of the target.
"""

from typing import Any, Dict, Optional, TypeVar

from pydantic import Field

from ..models.base import SceneModel
from ..models.scene import ParallaxFactor, RotationAnimationType

ModelT = TypeVar("ModelT", bound=SceneModel)


class Patch(SceneModel):
    """Base class for field-by-field overwrites."""

    def changes(self) -> Dict[str, Any]:
        """Return the supplied, non-null fields keyed by attribute name."""
        changes = {}
        for name in self.model_fields_set:
            value = getattr(self, name)
            if value is not None:
                changes[name] = value
        return changes

    def apply(self, target: ModelT) -> ModelT:
        """Return a copy of ``target`` with this patch's fields overwritten."""
        changes = self.changes()
        if not changes:
            return target
        return target.model_copy(update=changes)


class GlobalSettingsPatch(Patch):
    """Composition-wide settings."""

    composition_name: Optional[str] = Field(default=None, alias="compositionName")
    duration_in_frames: Optional[int] = Field(default=None, alias="durationInFrames")
    fps: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    background_color: Optional[str] = Field(default=None, alias="backgroundColor")


class CameraPatch(Patch):
    """Camera keyframe values."""

    initial_x: Optional[float] = Field(default=None, alias="initialX")
    initial_y: Optional[float] = Field(default=None, alias="initialY")
    initial_zoom: Optional[float] = Field(default=None, alias="initialZoom")
    final_x: Optional[float] = Field(default=None, alias="finalX")
    final_y: Optional[float] = Field(default=None, alias="finalY")
    final_zoom: Optional[float] = Field(default=None, alias="finalZoom")


class LayerPatch(Patch):
    """Layer properties; the id and element list are never patched."""

    name: Optional[str] = None
    parallax_factor: Optional[ParallaxFactor] = Field(default=None, alias="parallaxFactor")
    z_index: Optional[int] = Field(default=None, alias="zIndex")
    is_visible: Optional[bool] = Field(default=None, alias="isVisible")


class ElementPatch(Patch):
    """Element properties; the id is never patched."""

    name: Optional[str] = None
    svg_string: Optional[str] = Field(default=None, alias="svgString")
    x: Optional[float] = None
    y: Optional[float] = None
    scale: Optional[float] = None
    opacity: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    initial_rotation: Optional[float] = Field(default=None, alias="initialRotation")
    final_rotation: Optional[float] = Field(default=None, alias="finalRotation")
    transform_origin_x: Optional[float] = Field(default=None, alias="transformOriginX")
    transform_origin_y: Optional[float] = Field(default=None, alias="transformOriginY")
    rotation_animation_type: Optional[RotationAnimationType] = Field(
        default=None, alias="rotationAnimationType"
    )
    z_index: Optional[int] = Field(default=None, alias="zIndex")
