"""Data models for the parallax video generator."""

from .scene import Element, ElementSpec, Layer, ParallaxFactor, RotationAnimationType
from .document import CameraConfig, DocumentError, SceneDocument, deserialize, serialize
from .state import EditorState

__all__ = [
    "Element",
    "ElementSpec",
    "Layer",
    "ParallaxFactor",
    "RotationAnimationType",
    "CameraConfig",
    "DocumentError",
    "SceneDocument",
    "deserialize",
    "serialize",
    "EditorState",
]
