"""Vector image ingestion."""

import logging
import re
from pathlib import Path
from typing import Optional, Tuple

from .models.scene import ElementSpec

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 100.0

_SVG_ROOT = re.compile(r"<svg\b[^>]*>", re.IGNORECASE | re.DOTALL)
_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class AssetError(ValueError):
    """Raised when a vector image cannot be ingested."""


def _attribute(text: str, name: str) -> Optional[str]:
    pattern = re.compile(rf"(?<![\w:-]){name}\s*=\s*[\"']([^\"']*)[\"']")
    match = pattern.search(text)
    return match.group(1) if match else None


def _dimension(value: Optional[str]) -> float:
    """Leading number of an attribute value (units ignored), or the default."""
    if value is None:
        return DEFAULT_SIZE
    match = _NUMBER.match(value)
    if not match:
        return DEFAULT_SIZE
    number = float(match.group(1))
    if number <= 0:
        return DEFAULT_SIZE
    return number


def parse_svg_size(svg_string: str) -> Tuple[float, float]:
    """Read the nominal width and height of an SVG document.

    The root ``<svg>`` tag is searched when present, otherwise the whole
    text. Missing, unparsable or non-positive values fall back to 100.

    Args:
        svg_string: Raw SVG text.

    Returns:
        (width, height) in pixels.
    """
    root = _SVG_ROOT.search(svg_string)
    scope = root.group(0) if root else svg_string
    width = _dimension(_attribute(scope, "width"))
    height = _dimension(_attribute(scope, "height"))
    return width, height


def element_from_svg(name: str, svg_string: str) -> ElementSpec:
    """Build a new element description for an SVG image at the layer center."""
    width, height = parse_svg_size(svg_string)
    return ElementSpec(name=name, svg_string=svg_string, width=width, height=height)


def load_svg(path: Path) -> ElementSpec:
    """Read an ``.svg`` file into a new element description.

    Raises:
        AssetError: If the file is not an SVG or cannot be read.
    """
    path = Path(path)
    if path.suffix.lower() != ".svg":
        raise AssetError(f"Not an SVG file: {path}")
    try:
        svg_string = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise AssetError(f"Could not read {path}: {e}") from e

    element = element_from_svg(path.name, svg_string)
    logger.debug(f"Loaded {path.name} ({element.width}x{element.height})")
    return element
