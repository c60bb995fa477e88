"""2-D affine transforms in SVG matrix form."""

import math
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Affine:
    """Affine matrix ``[[a, c, e], [b, d, f], [0, 0, 1]]``.

    Maps a point (x, y) to (a*x + c*y + e, b*x + d*y + f), as in SVG's
    ``matrix(a, b, c, d, e, f)``.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> "Affine":
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> "Affine":
        return cls(e=tx, f=ty)

    @classmethod
    def scaling(cls, sx: float, sy: Optional[float] = None) -> "Affine":
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def rotation(cls, degrees: float) -> "Affine":
        """Rotation by ``degrees``; positive is clockwise on a y-down canvas."""
        radians = math.radians(degrees)
        cos, sin = math.cos(radians), math.sin(radians)
        return cls(a=cos, b=sin, c=-sin, d=cos)

    def __matmul__(self, other: "Affine") -> "Affine":
        """Matrix product ``self @ other``: ``other`` is applied first."""
        return Affine(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            e=self.a * other.e + self.c * other.f + self.e,
            f=self.b * other.e + self.d * other.f + self.f,
        )

    def then(self, other: "Affine") -> "Affine":
        """Return the transform that applies ``self`` and then ``other``."""
        return other @ self

    def about(self, px: float, py: float) -> "Affine":
        """Return this transform applied around the point (px, py)."""
        return Affine.translation(px, py) @ self @ Affine.translation(-px, -py)

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        """Transform a point."""
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    def to_tuple(self) -> Tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def to_svg(self) -> str:
        """Format as an SVG/CSS ``matrix()`` transform."""
        return "matrix({}, {}, {}, {}, {}, {})".format(*self.to_tuple())
