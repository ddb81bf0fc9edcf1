"""Infinite plane primitive with ray-plane intersection.

A plane is defined by:
- position: A point on the plane, the origin of its (u, v) coordinates
- u_basis: First in-plane basis vector
- v_basis: Second in-plane basis vector

The normal is normalize(cross(u_basis, v_basis)), pointing in the direction
determined by the right-hand rule.

Ray-plane intersection uses:
    t = dot(position - origin, normal) / dot(direction, normal)

Rays (nearly) parallel to the plane never hit it, and neither do planes
behind the ray origin.

Example:
    >>> from portaltrace.core.vector import Vector3
    >>> from portaltrace.geometry.plane import Plane
    >>> floor = Plane(
    ...     position=Vector3(0.0, 0.0, 0.0),
    ...     u_basis=Vector3(1.0, 0.0, 0.0),
    ...     v_basis=Vector3(0.0, 1.0, 0.0),
    ... )
    >>> floor.intersection_with_ray(Vector3(0.0, 0.0, 2.0), Vector3(0.0, 0.0, -1.0))
    2.0
"""

from __future__ import annotations

from portaltrace.config import PLANE_PARALLEL_EPSILON
from portaltrace.core.vector import Vector3
from portaltrace.geometry.surface import Surface, SurfaceProperties


class Plane(Surface):
    """An unbounded plane spanned by two basis vectors.

    The (u, v) coordinates of a point are its offset from position projected
    onto u_basis and v_basis. The basis vectors are not required to be unit
    length; their length scales the texture coordinates.

    Attributes:
        position: Point on the plane where (u, v) = (0, 0).
        u_basis: First basis vector.
        v_basis: Second basis vector.
        normal: Unit normal, normalize(u_basis x v_basis).
    """

    def __init__(self, position: Vector3, u_basis: Vector3, v_basis: Vector3) -> None:
        self.position = position
        self.u_basis = u_basis
        self.v_basis = v_basis
        self.normal = u_basis.cross(v_basis).normalize()

    def intersection_with_ray(self, origin: Vector3, direction: Vector3) -> float | None:
        denominator = direction.dot(self.normal)
        if abs(denominator) < PLANE_PARALLEL_EPSILON:
            return None

        t = (self.position - origin).dot(self.normal) / denominator
        if t > 0.0:
            return t
        return None

    def plane_coordinates(self, point: Vector3) -> tuple[float, float]:
        """Project a point's offset from position onto the basis vectors."""
        offset = point - self.position
        return offset.dot(self.u_basis), offset.dot(self.v_basis)

    def at_point(self, point: Vector3) -> SurfaceProperties:
        u, v = self.plane_coordinates(point)
        return SurfaceProperties(normal=self.normal, u=u, v=v)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position!r}, "
            f"u_basis={self.u_basis!r}, v_basis={self.v_basis!r})"
        )
