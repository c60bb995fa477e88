"""Editor state: a scene document plus the current selection."""

from typing import Optional

from pydantic import Field

from .document import SceneDocument


class EditorState(SceneDocument):
    """Scene document together with the editor's selection."""

    selected_layer_id: Optional[str] = Field(
        default=None, alias="selectedLayerId", description="Selected layer id"
    )
    selected_element_id: Optional[str] = Field(
        default=None, alias="selectedElementId", description="Selected element id"
    )

    @classmethod
    def from_document(cls, document: SceneDocument) -> "EditorState":
        """Wrap a document with an empty selection."""
        fields = {name: getattr(document, name) for name in SceneDocument.model_fields}
        return cls.model_construct(**fields)

    def document(self) -> SceneDocument:
        """Return the document part of the state, without selection."""
        fields = {name: getattr(self, name) for name in SceneDocument.model_fields}
        return SceneDocument.model_construct(**fields)
