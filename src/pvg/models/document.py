"""Scene document model and its interchange format."""

import json
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import Field, ValidationError

from .base import SceneModel
from .scene import Layer

DEFAULT_COMPOSITION_NAME = "MyParallaxVideo"
DEFAULT_EXPORT_NAME = "parallax-config"


class DocumentError(ValueError):
    """Raised when a scene document cannot be parsed or has the wrong shape."""


def _read_text(path: Path) -> str:
    """Read a UTF-8 text file, reporting undecodable bytes as a DocumentError."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            return f.read()
        except UnicodeDecodeError as e:
            raise DocumentError(f"{path} is not valid UTF-8 text: {e}") from e


class CameraConfig(SceneModel):
    """Camera keyframe pair animated across the whole timeline."""

    initial_x: float = Field(default=0.0, alias="initialX", description="X at the first frame")
    initial_y: float = Field(default=0.0, alias="initialY", description="Y at the first frame")
    initial_zoom: float = Field(default=1.0, alias="initialZoom", description="Zoom at the first frame")
    final_x: float = Field(default=0.0, alias="finalX", description="X at the last frame")
    final_y: float = Field(default=0.0, alias="finalY", description="Y at the last frame")
    final_zoom: float = Field(default=1.0, alias="finalZoom", description="Zoom at the last frame")


class SceneDocument(SceneModel):
    """A parallax composition: global settings, camera and layers."""

    composition_name: str = Field(
        default=DEFAULT_COMPOSITION_NAME, alias="compositionName", description="Composition name"
    )
    duration_in_frames: int = Field(default=300, alias="durationInFrames", description="Timeline length")
    fps: int = Field(default=30, description="Frames per second")
    width: int = Field(default=1920, description="Canvas width in pixels")
    height: int = Field(default=1080, description="Canvas height in pixels")
    background_color: str = Field(
        default="#DDDDDD", alias="backgroundColor", description="Canvas background color"
    )
    camera: CameraConfig = Field(default_factory=CameraConfig, description="Camera animation")
    layers: List[Layer] = Field(default_factory=list, description="Layers in collection order")

    def find_layer(self, layer_id: Optional[str]) -> Optional[Layer]:
        """Return the layer with the given id, if present."""
        for layer in self.layers:
            if layer.id == layer_id:
                return layer
        return None

    def export_filename(self) -> str:
        """Suggested file name for exporting this document."""
        return f"{self.composition_name or DEFAULT_EXPORT_NAME}.json"

    def to_data(self) -> dict:
        """Return the document as plain JSON-compatible data."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_data(cls, data: object) -> "SceneDocument":
        """Build a document from already-parsed data.

        Raises:
            DocumentError: If the data does not have the document's shape.
        """
        if not isinstance(data, dict):
            raise DocumentError(f"Expected a document object, got {type(data).__name__}")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DocumentError(f"Invalid scene document: {e}") from e

    @classmethod
    def from_json(cls, path: Path) -> "SceneDocument":
        """Load a document from a JSON file."""
        return deserialize(_read_text(path))

    def to_json(self, path: Path, indent: int = 2) -> None:
        """Save the document to a JSON file."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(serialize(self, indent=indent))

    @classmethod
    def from_yaml(cls, path: Path) -> "SceneDocument":
        """Load a document from a YAML file."""
        text = _read_text(path)
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DocumentError(f"Invalid YAML in {path}: {e}") from e
        return cls.from_data(data)

    def to_yaml(self, path: Path) -> None:
        """Save the document to a YAML file."""
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_data(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_file(cls, path: Path) -> "SceneDocument":
        """Load a document, choosing YAML or JSON by file suffix."""
        if Path(path).suffix.lower() in (".yaml", ".yml"):
            return cls.from_yaml(path)
        return cls.from_json(path)

    def to_file(self, path: Path, indent: int = 2) -> None:
        """Save the document, choosing YAML or JSON by file suffix."""
        if Path(path).suffix.lower() in (".yaml", ".yml"):
            self.to_yaml(path)
        else:
            self.to_json(path, indent=indent)


def serialize(document: SceneDocument, indent: Optional[int] = 2) -> str:
    """Serialize a document to JSON text."""
    return json.dumps(document.to_data(), indent=indent)


def deserialize(text: str) -> SceneDocument:
    """Parse JSON text into a document.

    Missing optional fields take their defaults.

    Raises:
        DocumentError: If the text is not JSON or not a scene document.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentError(f"Invalid JSON: {e}") from e
    return SceneDocument.from_data(data)
