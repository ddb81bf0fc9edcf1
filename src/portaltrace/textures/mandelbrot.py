"""Mandelbrot-set texture with smooth escape-time coloring.

(u, v) is read as the complex number c = u + iv. Points whose orbit under
z <- z^2 + c stays bounded for the full iteration budget are members of the
set and are painted black. Escaping points are colored by sampling a cyclic
color ramp at escape_time * 0.25, where escape_time is the smoothed
(fractional) iteration count, so neighbouring bands blend continuously.

Example:
    >>> from portaltrace.textures import MandelbrotSet
    >>> texture = MandelbrotSet()
    >>> texture.color(0.0, 0.0, scene=None, depth=1)
    Color(red=0.0, green=0.0, blue=0.0)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from portaltrace.config import MANDELBROT_RAMP_SCALE
from portaltrace.core.color import BLACK, Color
from portaltrace.core.numerics import circular_lerp, mandelbrot_escape_time
from portaltrace.textures.texture import Texture

if TYPE_CHECKING:
    from portaltrace.scene.manager import Scene

# Deep blue through white to orange, the classic escape-time palette
DEFAULT_RAMP = (
    Color.from_hex("#000764"),
    Color.from_hex("#206bcb"),
    Color.from_hex("#edffff"),
    Color.from_hex("#ffaa00"),
    Color.from_hex("#000200"),
)


class MandelbrotSet(Texture):
    """Escape-time coloring of the Mandelbrot set.

    Attributes:
        ramp: Cyclic color ramp sampled by escape time.
        inside: Color of points in the set.
    """

    def __init__(self, ramp: Sequence[Color] = DEFAULT_RAMP, inside: Color = BLACK) -> None:
        if not ramp:
            raise ValueError("Mandelbrot color ramp must contain at least one color")
        self.ramp = tuple(ramp)
        self.inside = inside

    def color(self, u: float, v: float, scene: Scene, depth: int) -> Color:
        escape_time = mandelbrot_escape_time(complex(u, v))
        if escape_time is None:
            return self.inside
        return circular_lerp(self.ramp, escape_time * MANDELBROT_RAMP_SCALE)

    def __repr__(self) -> str:
        return f"MandelbrotSet(ramp={len(self.ramp)} colors)"
