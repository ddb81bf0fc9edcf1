"""Sphere primitive with ray-sphere intersection.

The ray-sphere intersection is found by solving:
    |ray_origin + t * ray_direction - center|^2 = radius^2

Expanding and rearranging gives the quadratic equation:
    a*t^2 + b*t + c = 0

where:
    oc = origin - center
    a = dot(direction, direction)
    b = 2 * dot(direction, oc)
    c = dot(oc, oc) - radius^2

Of the two roots, the smallest strictly positive one is the visible hit.
Roots at or behind the ray origin are discarded.

Example:
    >>> from portaltrace.core.vector import Vector3
    >>> from portaltrace.geometry.sphere import Sphere
    >>> sphere = Sphere(center=Vector3(0.0, 0.0, 0.0), radius=1.0)
    >>> sphere.intersection_with_ray(Vector3(-10.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
    9.0
"""

from __future__ import annotations

import math

from portaltrace.core.numerics import solve_quadratic
from portaltrace.core.vector import Vector3
from portaltrace.geometry.surface import Surface, SurfaceProperties


class Sphere(Surface):
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
    """

    def __init__(self, center: Vector3, radius: float) -> None:
        if not radius > 0.0:
            raise ValueError(f"Sphere radius = {radius} must be positive")
        self.center = center
        self.radius = float(radius)

    def intersection_with_ray(self, origin: Vector3, direction: Vector3) -> float | None:
        oc = origin - self.center
        a = direction.dot(direction)
        b = 2.0 * direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius

        roots = solve_quadratic(a, b, c)
        if roots is None:
            return None

        in_front = [t for t in roots if t > 0.0]
        if not in_front:
            return None
        return min(in_front)

    def at_point(self, point: Vector3) -> SurfaceProperties:
        """Outward normal and longitude/latitude coordinates.

        u runs once around the sphere with atan2 of the offset's x and y;
        v runs from the top (+z) at 0 to the bottom at 1.
        """
        offset = (point - self.center).normalize()
        # Rounding can push |z| a hair past 1 on the poles
        z = min(max(offset.z, -1.0), 1.0)
        u = 0.5 + math.atan2(offset.y, offset.x) / (2.0 * math.pi)
        v = 0.5 - math.asin(z) / math.pi
        return SurfaceProperties(normal=offset, u=u, v=v)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"
