"""Textures module: procedural color functions over surface coordinates.

Components:
    texture: Texture interface and SolidColor
    checkerboard: Alternating squares of two child textures
    transform: Offset-and-scale remapping of (u, v) before delegating
    mandelbrot: Smooth escape-time coloring of the Mandelbrot set
    portal: Recursive view of the scene through an embedded camera

Each texture provides:
    - color(u, v, scene, depth): the linear color at (u, v)

The scene and remaining depth are passed explicitly on every call so that a
portal can cast rays without textures holding a reference to the scene.
"""

from .checkerboard import Checkerboard
from .mandelbrot import DEFAULT_RAMP, MandelbrotSet
from .portal import Portal
from .texture import SolidColor, Texture
from .transform import CoordinateTransform

__all__ = [
    "Texture",
    "SolidColor",
    "Checkerboard",
    "CoordinateTransform",
    "MandelbrotSet",
    "DEFAULT_RAMP",
    "Portal",
]
