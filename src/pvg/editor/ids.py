"""Unique identifiers for layers and elements."""

import uuid


def new_id() -> str:
    """Return a fresh, collision-resistant identifier (random 128-bit, hex)."""
    return uuid.uuid4().hex
