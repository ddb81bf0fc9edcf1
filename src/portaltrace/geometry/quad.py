"""Quad primitive: a bounded region of a plane.

A quad is a Plane clipped to a rectangle of its own (u, v) coordinates:
hits are kept when 0 <= u < width and 0 <= v <= height. With unit-length
basis vectors, width and height are the quad's size in scene units.

Example:
    >>> from portaltrace.core.vector import Vector3
    >>> from portaltrace.geometry.quad import Quad
    >>> # Upright 4x3 panel in the x=5 plane, facing -x
    >>> panel = Quad(
    ...     position=Vector3(5.0, 2.0, 0.0),
    ...     u_basis=Vector3(0.0, -1.0, 0.0),
    ...     v_basis=Vector3(0.0, 0.0, 1.0),
    ...     width=4.0,
    ...     height=3.0,
    ... )
    >>> panel.intersection_with_ray(Vector3(0.0, 0.0, 1.0), Vector3(1.0, 0.0, 0.0))
    5.0
"""

from __future__ import annotations

from portaltrace.core.vector import Vector3
from portaltrace.geometry.plane import Plane


class Quad(Plane):
    """A plane restricted to [0, width) x [0, height] in (u, v).

    Attributes:
        width: Extent along u_basis, in plane coordinates.
        height: Extent along v_basis, in plane coordinates.
    """

    def __init__(
        self,
        position: Vector3,
        u_basis: Vector3,
        v_basis: Vector3,
        width: float,
        height: float,
    ) -> None:
        super().__init__(position, u_basis, v_basis)
        self.width = float(width)
        self.height = float(height)

    def contains(self, u: float, v: float) -> bool:
        """Whether plane coordinates (u, v) fall inside the quad."""
        return 0.0 <= u < self.width and 0.0 <= v <= self.height

    def intersection_with_ray(self, origin: Vector3, direction: Vector3) -> float | None:
        t = super().intersection_with_ray(origin, direction)
        if t is None:
            return None

        u, v = self.plane_coordinates(origin + direction * t)
        if not self.contains(u, v):
            return None
        return t

    def __repr__(self) -> str:
        return (
            f"Quad(position={self.position!r}, u_basis={self.u_basis!r}, "
            f"v_basis={self.v_basis!r}, width={self.width}, height={self.height})"
        )
