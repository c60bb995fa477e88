"""Parallax video generator: scene documents, editing commands and frame evaluation."""

__version__ = "0.1.0"
