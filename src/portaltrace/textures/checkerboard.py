"""Checkerboard texture composing two child textures.

The (u, v) plane is divided into squares of side square_size. Squares where
floor(u / size) + floor(v / size) is even show the first texture, odd squares
show the second. Each child is evaluated with the fractional position inside
its square, so a child texture sees coordinates in [0, 1).

Example:
    >>> from portaltrace.core.color import BLACK, WHITE
    >>> from portaltrace.textures import Checkerboard, SolidColor
    >>> board = Checkerboard(SolidColor(WHITE), SolidColor(BLACK), square_size=1.0)
    >>> board.color(0.4, 0.4, scene=None, depth=1) == WHITE
    True
    >>> board.color(1.4, 0.4, scene=None, depth=1) == BLACK
    True
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from portaltrace.core.color import Color
from portaltrace.textures.texture import Texture

if TYPE_CHECKING:
    from portaltrace.scene.manager import Scene


class Checkerboard(Texture):
    """Alternating squares of two textures.

    Attributes:
        first: Texture shown on even squares (including the one at the origin).
        second: Texture shown on odd squares.
        square_size: Side length of one square in (u, v) units.
    """

    def __init__(self, first: Texture, second: Texture, square_size: float = 1.0) -> None:
        if not square_size > 0.0:
            raise ValueError(f"Checker square size = {square_size} must be positive")
        self.first = first
        self.second = second
        self.square_size = float(square_size)

    def color(self, u: float, v: float, scene: Scene, depth: int) -> Color:
        scaled_u = u / self.square_size
        scaled_v = v / self.square_size
        floor_u = math.floor(scaled_u)
        floor_v = math.floor(scaled_v)
        square_u = scaled_u - floor_u
        square_v = scaled_v - floor_v

        # Python's % follows the divisor's sign, so negative squares stay in {0, 1}
        parity = (floor_u + floor_v) % 2
        if parity == 0:
            return self.first.color(square_u, square_v, scene, depth)
        assert parity == 1
        return self.second.color(square_u, square_v, scene, depth)

    def __repr__(self) -> str:
        return f"Checkerboard({self.first!r}, {self.second!r}, square_size={self.square_size})"
