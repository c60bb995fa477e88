"""Layer and element data models."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, model_validator

from .base import SceneModel


class RotationAnimationType(str, Enum):
    """How an element's rotation moves from its initial to final value."""
    EASING = "easing"
    SPRING = "spring"


class ParallaxFactor(SceneModel):
    """Per-axis parallax factor (0 = world anchored, 1 = screen anchored)."""

    x: float = Field(default=0.5, description="Horizontal factor")
    y: float = Field(default=0.5, description="Vertical factor")


class ElementSpec(SceneModel):
    """Everything that describes an element except its id."""

    name: str = Field(..., description="Display name")
    svg_string: str = Field(..., alias="svgString", description="Vector image source")
    x: float = Field(default=0.0, description="X position relative to layer center")
    y: float = Field(default=0.0, description="Y position relative to layer center")
    scale: float = Field(default=1.0, description="Uniform scale factor")
    opacity: float = Field(default=1.0, description="Opacity, nominally 0..1")
    width: float = Field(default=100.0, description="Intrinsic width in pixels")
    height: float = Field(default=100.0, description="Intrinsic height in pixels")
    initial_rotation: float = Field(
        default=0.0, alias="initialRotation", description="Rotation at the first frame, degrees"
    )
    final_rotation: float = Field(
        default=0.0, alias="finalRotation", description="Rotation at the last frame, degrees"
    )
    transform_origin_x: float = Field(
        default=0.5, alias="transformOriginX", description="Normalized rotation pivot X"
    )
    transform_origin_y: float = Field(
        default=0.5, alias="transformOriginY", description="Normalized rotation pivot Y"
    )
    rotation_animation_type: RotationAnimationType = Field(
        default=RotationAnimationType.EASING,
        alias="rotationAnimationType",
        description="Rotation interpolation mode",
    )
    z_index: int = Field(default=0, alias="zIndex", description="Stacking order within the layer")

    @model_validator(mode="before")
    @classmethod
    def _migrate_rotation(cls, data: Any) -> Any:
        """Seed initial/final rotation from the single ``rotation`` key of older documents."""
        if not isinstance(data, dict) or "rotation" not in data:
            return data
        data = dict(data)
        rotation = data.pop("rotation")
        for alias, name in (("initialRotation", "initial_rotation"), ("finalRotation", "final_rotation")):
            if alias not in data and name not in data:
                data[alias] = rotation
        return data

    def with_id(self, element_id: str) -> "Element":
        """Return a full element carrying the given id."""
        return Element.model_construct(id=element_id, **dict(self))


class Element(ElementSpec):
    """A vector image placed on a layer."""

    id: str = Field(..., description="Unique element identifier")


class Layer(SceneModel):
    """An ordered stack of elements sharing one parallax factor."""

    id: str = Field(..., description="Unique layer identifier")
    name: str = Field(..., description="Display name")
    parallax_factor: ParallaxFactor = Field(
        default_factory=ParallaxFactor, alias="parallaxFactor", description="Camera follow factor"
    )
    z_index: int = Field(default=0, alias="zIndex", description="Stacking order among layers")
    elements: List[Element] = Field(default_factory=list, description="Elements on this layer")
    is_visible: bool = Field(default=True, alias="isVisible", description="Whether the layer is drawn")

    def find_element(self, element_id: Optional[str]) -> Optional[Element]:
        """Return the element with the given id, if present."""
        for element in self.elements:
            if element.id == element_id:
                return element
        return None
