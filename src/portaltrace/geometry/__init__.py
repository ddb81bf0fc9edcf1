"""Geometry module for shape primitives.

This module provides geometric primitives and their intersection routines:

Components:
    surface: Surface interface and the SurfaceProperties hit record
    sphere: Sphere primitive with ray-sphere intersection
    plane: Infinite plane spanned by two basis vectors
    quad: Plane bounded to a rectangle of its (u, v) coordinates

Every primitive reports a miss as None rather than raising, and only reports
hits strictly in front of the ray origin.

Ray-object intersection follows the pattern:
    t = surface.intersection_with_ray(origin, direction)
    props = surface.at_point(origin + direction * t)
"""

from .plane import Plane
from .quad import Quad
from .sphere import Sphere
from .surface import Surface, SurfaceProperties

__all__ = [
    "Surface",
    "SurfaceProperties",
    "Sphere",
    "Plane",
    "Quad",
]
