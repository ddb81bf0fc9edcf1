"""Surface interface shared by all geometric primitives.

A Surface answers two questions: how far along a ray the primitive is hit
(if at all), and what the local surface looks like at a point on it (unit
normal plus a 2-D (u, v) parameterization used to address a texture).

Intersection follows the pattern:
    distance = surface.intersection_with_ray(origin, direction)
    if distance is not None:
        props = surface.at_point(origin + direction * distance)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from portaltrace.core.vector import Vector3


@dataclass(frozen=True, slots=True)
class SurfaceProperties:
    """Local properties of a surface at a hit point.

    Attributes:
        normal: Unit surface normal at the point.
        u: First texture coordinate.
        v: Second texture coordinate.
    """

    normal: Vector3
    u: float
    v: float


class Surface(ABC):
    """Abstract geometric primitive."""

    @abstractmethod
    def intersection_with_ray(self, origin: Vector3, direction: Vector3) -> float | None:
        """Find the nearest hit in front of the ray origin.

        Args:
            origin: The ray origin.
            direction: The ray direction (need not be normalized; the
                distance is measured in multiples of it).

        Returns:
            The strictly positive ray parameter t of the hit, or None if the
            ray does not hit the surface in front of its origin.
        """

    @abstractmethod
    def at_point(self, point: Vector3) -> SurfaceProperties:
        """Return the surface normal and (u, v) coordinates at a point on it."""
