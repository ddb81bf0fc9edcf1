"""Coordinate remapping texture.

Applies an offset and then a scale to (u, v) before delegating:

    u' = (u + offset_u) * scale_u
    v' = (v + offset_v) * scale_v

This maps a sub-rectangle of a surface's coordinate space onto a child
texture's native space, e.g. a 4x3 quad onto the [-2, 1] x [-1.5, 1.5]
window of a Mandelbrot texture, or onto the [-1, 1] device coordinates of a
portal camera.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from portaltrace.core.color import Color
from portaltrace.textures.texture import Texture

if TYPE_CHECKING:
    from portaltrace.scene.manager import Scene


class CoordinateTransform(Texture):
    """Offset-then-scale wrapper around another texture.

    Attributes:
        texture: The wrapped texture.
        offset_u: Added to u before scaling.
        offset_v: Added to v before scaling.
        scale_u: Multiplies the offset u.
        scale_v: Multiplies the offset v.
    """

    def __init__(
        self,
        texture: Texture,
        offset_u: float = 0.0,
        offset_v: float = 0.0,
        scale_u: float = 1.0,
        scale_v: float = 1.0,
    ) -> None:
        self.texture = texture
        self.offset_u = float(offset_u)
        self.offset_v = float(offset_v)
        self.scale_u = float(scale_u)
        self.scale_v = float(scale_v)

    @classmethod
    def fit(
        cls,
        texture: Texture,
        source: tuple[float, float, float, float],
        target: tuple[float, float, float, float],
    ) -> CoordinateTransform:
        """Build a transform mapping one rectangle onto another.

        Args:
            texture: The wrapped texture.
            source: (u_min, v_min, u_max, v_max) in the caller's coordinates.
            target: (u_min, v_min, u_max, v_max) in the texture's coordinates.

        Returns:
            A transform sending source corners to the matching target corners.
        """
        src_u0, src_v0, src_u1, src_v1 = source
        dst_u0, dst_v0, dst_u1, dst_v1 = target
        scale_u = (dst_u1 - dst_u0) / (src_u1 - src_u0)
        scale_v = (dst_v1 - dst_v0) / (src_v1 - src_v0)
        return cls(
            texture,
            offset_u=dst_u0 / scale_u - src_u0,
            offset_v=dst_v0 / scale_v - src_v0,
            scale_u=scale_u,
            scale_v=scale_v,
        )

    def transform(self, u: float, v: float) -> tuple[float, float]:
        """Map caller coordinates to the wrapped texture's coordinates."""
        return (u + self.offset_u) * self.scale_u, (v + self.offset_v) * self.scale_v

    def color(self, u: float, v: float, scene: Scene, depth: int) -> Color:
        mapped_u, mapped_v = self.transform(u, v)
        return self.texture.color(mapped_u, mapped_v, scene, depth)

    def __repr__(self) -> str:
        return (
            f"CoordinateTransform({self.texture!r}, offset=({self.offset_u}, {self.offset_v}), "
            f"scale=({self.scale_u}, {self.scale_v}))"
        )
