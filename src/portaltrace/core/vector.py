"""Three-component vector type and vector utilities.

This module provides the Vector3 value type used for points, directions and
surface normals throughout the renderer, plus the reflection formula shared
by the integrator.

Example:
    >>> from portaltrace.core.vector import Vector3, angle_of_reflection
    >>> d = Vector3(1.0, 0.0, -1.0)
    >>> angle_of_reflection(d, Vector3(0.0, 0.0, 1.0))
    Vector3(x=1.0, y=0.0, z=1.0)
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector3:
    """An immutable 3-D vector.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component (world "up" in this renderer).
    """

    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def scale(self, factor: float) -> Vector3:
        """Multiply every component by a scalar."""
        return self * factor

    def dot(self, other: Vector3) -> float:
        """Compute the dot product of two vectors."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Compute the cross product self x other."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Compute the Euclidean length of the vector."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vector3:
        """Return a unit vector in the same direction.

        A zero-length vector has no direction. Its components come out NaN
        instead of raising, and the NaNs propagate through whatever uses the
        result. Callers are responsible for not passing one.
        """
        length = self.length()
        if length == 0.0:
            return self * math.inf
        return self * (1.0 / length)

    @classmethod
    def from_tuple(cls, values: tuple[float, float, float]) -> Vector3:
        """Build a vector from an (x, y, z) tuple."""
        return cls(float(values[0]), float(values[1]), float(values[2]))


# World "up" direction. The camera builds its image-plane basis from this.
UP = Vector3(0.0, 0.0, 1.0)


def angle_of_reflection(incident: Vector3, normal: Vector3) -> Vector3:
    """Reflect an incident direction about a surface normal.

    Computes R = D - 2(D . N)N. The normal should be unit length for the
    result to have the same length as the incident direction.

    Args:
        incident: The incoming direction (pointing toward the surface).
        normal: The surface normal.

    Returns:
        The reflected direction.
    """
    return incident - normal * (2.0 * incident.dot(normal))
