"""Scene editor: commands, patches and state transitions."""

from .commands import (
    Command,
    CommandScriptError,
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
    parse_commands,
    load_commands,
)
from .patches import (
    Patch,
    GlobalSettingsPatch,
    CameraPatch,
    LayerPatch,
    ElementPatch,
)
from .ids import new_id
from .reducer import apply_command, apply_commands
from .session import Session

__all__ = [
    # Commands
    "Command",
    "CommandScriptError",
    "ReplaceDocument",
    "UpdateGlobalSettings",
    "UpdateCamera",
    "AddLayer",
    "RemoveLayer",
    "UpdateLayerProperties",
    "SelectLayer",
    "AddElementToLayer",
    "RemoveElement",
    "UpdateElementProperties",
    "SelectElement",
    "ReorderLayers",
    "parse_commands",
    "load_commands",
    # Patches
    "Patch",
    "GlobalSettingsPatch",
    "CameraPatch",
    "LayerPatch",
    "ElementPatch",
    # State transitions
    "new_id",
    "apply_command",
    "apply_commands",
    "Session",
]
