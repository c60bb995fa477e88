"""Editor commands.

Each command is a typed payload tagged by ``type`` so that command
scripts can be read from JSON or YAML.
"""

import json
from pathlib import Path
from typing import Annotated, List, Literal, Optional, Union

import yaml
from pydantic import Field, TypeAdapter, ValidationError

from ..models.base import SceneModel
from ..models.document import SceneDocument
from ..models.scene import ElementSpec
from .ids import new_id
from .patches import CameraPatch, ElementPatch, GlobalSettingsPatch, LayerPatch


class CommandScriptError(ValueError):
    """Raised when a command script cannot be parsed."""


class ReplaceDocument(SceneModel):
    """Replace the whole document and reset the selection."""

    type: Literal["replace_document"] = "replace_document"
    document: SceneDocument


class UpdateGlobalSettings(SceneModel):
    """Merge composition-wide settings."""

    type: Literal["update_global_settings"] = "update_global_settings"
    patch: GlobalSettingsPatch


class UpdateCamera(SceneModel):
    """Merge camera keyframe values."""

    type: Literal["update_camera"] = "update_camera"
    patch: CameraPatch


class AddLayer(SceneModel):
    """Append a new layer and select it."""

    type: Literal["add_layer"] = "add_layer"
    id: str = Field(default_factory=new_id, description="Id the new layer receives")
    overrides: LayerPatch = Field(default_factory=LayerPatch)


class RemoveLayer(SceneModel):
    """Delete a layer and its elements."""

    type: Literal["remove_layer"] = "remove_layer"
    layer_id: str = Field(..., alias="layerId")


class UpdateLayerProperties(SceneModel):
    """Merge layer properties."""

    type: Literal["update_layer"] = "update_layer"
    layer_id: str = Field(..., alias="layerId")
    patch: LayerPatch


class SelectLayer(SceneModel):
    """Select a layer (or nothing); always clears the element selection."""

    type: Literal["select_layer"] = "select_layer"
    layer_id: Optional[str] = Field(default=None, alias="layerId")


class AddElementToLayer(SceneModel):
    """Append an element to a layer and select it."""

    type: Literal["add_element"] = "add_element"
    layer_id: str = Field(..., alias="layerId")
    element_id: str = Field(
        default_factory=new_id, alias="elementId", description="Id the new element receives"
    )
    element: ElementSpec


class RemoveElement(SceneModel):
    """Delete an element from a layer."""

    type: Literal["remove_element"] = "remove_element"
    layer_id: str = Field(..., alias="layerId")
    element_id: str = Field(..., alias="elementId")


class UpdateElementProperties(SceneModel):
    """Merge element properties."""

    type: Literal["update_element"] = "update_element"
    layer_id: str = Field(..., alias="layerId")
    element_id: str = Field(..., alias="elementId")
    patch: ElementPatch


class SelectElement(SceneModel):
    """Select an element (or nothing) without checking its layer."""

    type: Literal["select_element"] = "select_element"
    element_id: Optional[str] = Field(default=None, alias="elementId")


class ReorderLayers(SceneModel):
    """Move a layer to a new position and renumber every layer's zIndex."""

    type: Literal["reorder_layers"] = "reorder_layers"
    old_index: int = Field(..., alias="oldIndex")
    new_index: int = Field(..., alias="newIndex")


Command = Annotated[
    Union[
        ReplaceDocument,
        UpdateGlobalSettings,
        UpdateCamera,
        AddLayer,
        RemoveLayer,
        UpdateLayerProperties,
        SelectLayer,
        AddElementToLayer,
        RemoveElement,
        UpdateElementProperties,
        SelectElement,
        ReorderLayers,
    ],
    Field(discriminator="type"),
]

_command_list = TypeAdapter(List[Command])


def parse_commands(data: object) -> List[Command]:
    """Validate a list of command mappings.

    Raises:
        CommandScriptError: If any entry is not a known, well-formed command.
    """
    try:
        return _command_list.validate_python(data)
    except ValidationError as e:
        raise CommandScriptError(f"Invalid command script: {e}") from e


def load_commands(path: Path) -> List[Command]:
    """Load a command script from a JSON or YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise CommandScriptError(f"{path} is not valid UTF-8 text: {e}") from e
    try:
        if Path(path).suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise CommandScriptError(f"Could not parse {path}: {e}") from e
    return parse_commands(data)
