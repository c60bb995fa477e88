"""Shared base for scene document models."""

from pydantic import BaseModel


class SceneModel(BaseModel):
    """Immutable model serialized with camelCase keys.

    Attributes are addressed by their snake_case names in Python and
    by their aliases in documents.
    """

    class Config:
        """Pydantic config."""
        frozen = True
        populate_by_name = True
