"""Scene editor state transitions.

``apply_command`` maps (state, command) to the next state. It never
mutates its input and never raises for a well-formed command: commands
that address ids which no longer exist leave the state unchanged.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from ..models.scene import Layer
from ..models.state import EditorState
from .commands import (
    AddElementToLayer,
    AddLayer,
    Command,
    RemoveElement,
    RemoveLayer,
    ReorderLayers,
    ReplaceDocument,
    SelectElement,
    SelectLayer,
    UpdateCamera,
    UpdateElementProperties,
    UpdateGlobalSettings,
    UpdateLayerProperties,
)

logger = logging.getLogger(__name__)


def _with_layer(
    state: EditorState,
    layer_id: str,
    change: Callable[[Layer], Optional[Layer]],
) -> EditorState:
    """Replace one layer with ``change(layer)``; a ``None`` result means no-op."""
    layers: List[Layer] = []
    changed = False
    for layer in state.layers:
        if layer.id == layer_id and not changed:
            updated = change(layer)
            if updated is None:
                return state
            layers.append(updated)
            changed = True
        else:
            layers.append(layer)
    if not changed:
        logger.debug(f"Layer {layer_id} not found, ignoring")
        return state
    return state.model_copy(update={"layers": layers})


def _replace_document(state: EditorState, command: ReplaceDocument) -> EditorState:
    return EditorState.from_document(command.document)


def _update_global_settings(state: EditorState, command: UpdateGlobalSettings) -> EditorState:
    return command.patch.apply(state)


def _update_camera(state: EditorState, command: UpdateCamera) -> EditorState:
    return state.model_copy(update={"camera": command.patch.apply(state.camera)})


def _add_layer(state: EditorState, command: AddLayer) -> EditorState:
    if state.find_layer(command.id) is not None:
        logger.warning(f"Layer id {command.id} already in use, not adding")
        return state

    count = len(state.layers)
    layer = Layer(id=command.id, name=f"Layer {count + 1}", z_index=count)
    layer = command.overrides.apply(layer)
    return state.model_copy(update={
        "layers": [*state.layers, layer],
        "selected_layer_id": layer.id,
        "selected_element_id": None,
    })


def _remove_layer(state: EditorState, command: RemoveLayer) -> EditorState:
    if state.find_layer(command.layer_id) is None:
        logger.debug(f"Layer {command.layer_id} not found, ignoring")
        return state

    update = {"layers": [layer for layer in state.layers if layer.id != command.layer_id]}
    if state.selected_layer_id == command.layer_id:
        update["selected_layer_id"] = None
        update["selected_element_id"] = None
    return state.model_copy(update=update)


def _update_layer(state: EditorState, command: UpdateLayerProperties) -> EditorState:
    return _with_layer(state, command.layer_id, command.patch.apply)


def _select_layer(state: EditorState, command: SelectLayer) -> EditorState:
    return state.model_copy(update={
        "selected_layer_id": command.layer_id,
        "selected_element_id": None,
    })


def _add_element(state: EditorState, command: AddElementToLayer) -> EditorState:
    def add(layer: Layer) -> Optional[Layer]:
        if layer.find_element(command.element_id) is not None:
            logger.warning(f"Element id {command.element_id} already in use on layer {layer.id}")
            return None
        element = command.element.with_id(command.element_id)
        return layer.model_copy(update={"elements": [*layer.elements, element]})

    updated = _with_layer(state, command.layer_id, add)
    if updated is state:
        return state
    return updated.model_copy(update={
        "selected_layer_id": command.layer_id,
        "selected_element_id": command.element_id,
    })


def _remove_element(state: EditorState, command: RemoveElement) -> EditorState:
    def remove(layer: Layer) -> Optional[Layer]:
        if layer.find_element(command.element_id) is None:
            logger.debug(f"Element {command.element_id} not found on layer {layer.id}, ignoring")
            return None
        elements = [el for el in layer.elements if el.id != command.element_id]
        return layer.model_copy(update={"elements": elements})

    updated = _with_layer(state, command.layer_id, remove)
    if updated is not state and state.selected_element_id == command.element_id:
        updated = updated.model_copy(update={"selected_element_id": None})
    return updated


def _update_element(state: EditorState, command: UpdateElementProperties) -> EditorState:
    def update(layer: Layer) -> Optional[Layer]:
        element = layer.find_element(command.element_id)
        if element is None:
            logger.debug(f"Element {command.element_id} not found on layer {layer.id}, ignoring")
            return None
        elements = [
            command.patch.apply(el) if el is element else el
            for el in layer.elements
        ]
        return layer.model_copy(update={"elements": elements})

    return _with_layer(state, command.layer_id, update)


def _select_element(state: EditorState, command: SelectElement) -> EditorState:
    # Not checked against the selected layer; SelectLayer is the only
    # command that clears element selection.
    return state.model_copy(update={"selected_element_id": command.element_id})


def _reorder_layers(state: EditorState, command: ReorderLayers) -> EditorState:
    count = len(state.layers)
    old_index, new_index = command.old_index, command.new_index
    if (
        old_index == new_index
        or not 0 <= old_index < count
        or not 0 <= new_index < count
    ):
        logger.debug(f"Ignoring reorder {old_index} -> {new_index} of {count} layers")
        return state

    layers = list(state.layers)
    moved = layers.pop(old_index)
    layers.insert(new_index, moved)
    layers = [layer.model_copy(update={"z_index": index}) for index, layer in enumerate(layers)]
    return state.model_copy(update={"layers": layers})


_HANDLERS: Dict[type, Callable[[EditorState, Command], EditorState]] = {
    ReplaceDocument: _replace_document,
    UpdateGlobalSettings: _update_global_settings,
    UpdateCamera: _update_camera,
    AddLayer: _add_layer,
    RemoveLayer: _remove_layer,
    UpdateLayerProperties: _update_layer,
    SelectLayer: _select_layer,
    AddElementToLayer: _add_element,
    RemoveElement: _remove_element,
    UpdateElementProperties: _update_element,
    SelectElement: _select_element,
    ReorderLayers: _reorder_layers,
}


def apply_command(state: EditorState, command: Command) -> EditorState:
    """Apply one command and return the next state.

    Args:
        state: Current editor state. Left untouched.
        command: Command to apply.

    Returns:
        The next editor state (``state`` itself when the command is a no-op).

    Raises:
        TypeError: If ``command`` is not an editor command.
    """
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"Unknown editor command: {type(command).__name__}")
    logger.debug(f"Applying {command.type}")
    return handler(state, command)


def apply_commands(state: EditorState, commands: Iterable[Command]) -> EditorState:
    """Apply commands in order and return the final state."""
    for command in commands:
        state = apply_command(state, command)
    return state
