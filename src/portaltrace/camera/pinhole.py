"""Pinhole camera model for perspective projection ray generation.

The camera is defined by a position, a facing direction and a field of view.
It builds two image-plane basis vectors from the facing direction and the
world up vector (+z):

- x_basis = normalize(direction x up) * tan(fov / 2): points right
- y_basis = normalize(direction x x_basis) * tan(fov / 2): points down

A ray through normalized device coordinates (nx, ny) in [-1, 1] has
direction normalize(direction) + nx * x_basis + ny * y_basis. The result is
deliberately not renormalized; every intersection routine accepts
non-unit directions.

A facing direction parallel to +z or -z is not supported. The first cross
product is then the zero vector, both basis vectors come out NaN, and every
ray through the camera is NaN. Such rays compare false against every
intersection test, so the image shows only the background.

Example:
    >>> from portaltrace.camera.pinhole import PinholeCamera
    >>> from portaltrace.core.vector import Vector3
    >>> camera = PinholeCamera(
    ...     position=Vector3(-10.0, 0.0, 0.0),
    ...     direction=Vector3(1.0, 0.0, 0.0),
    ...     fov_degrees=90.0,
    ... )
    >>> camera.ray_direction(0.0, 0.0)
    Vector3(x=1.0, y=0.0, z=0.0)
"""

from __future__ import annotations

import math

from portaltrace.core.vector import UP, Vector3


class PinholeCamera:
    """Immutable perspective camera.

    Attributes:
        position: Camera position; origin of every primary ray.
        direction: Unit facing direction.
        fov_degrees: Horizontal field of view across the [-1, 1] device range.
        x_basis: Image-plane vector for nx = 1 (right).
        y_basis: Image-plane vector for ny = 1 (down).
    """

    def __init__(self, position: Vector3, direction: Vector3, fov_degrees: float = 90.0) -> None:
        half_extent = math.tan(math.radians(fov_degrees) / 2.0)
        x_basis = direction.cross(UP).normalize() * half_extent
        y_basis = direction.cross(x_basis).normalize() * half_extent

        self.position = position
        self.direction = direction.normalize()
        self.fov_degrees = float(fov_degrees)
        self.x_basis = x_basis
        self.y_basis = y_basis

    @classmethod
    def look_at(
        cls, position: Vector3, target: Vector3, fov_degrees: float = 90.0
    ) -> PinholeCamera:
        """Create a camera at position facing toward target."""
        return cls(position, target - position, fov_degrees)

    def ray_direction(self, nx: float, ny: float) -> Vector3:
        """Direction of the ray through normalized device coordinates.

        Args:
            nx: Horizontal device coordinate, -1 (left) to 1 (right).
            ny: Vertical device coordinate, -1 (top) to 1 (bottom).

        Returns:
            The (non-normalized) ray direction.
        """
        return self.direction + self.x_basis * nx + self.y_basis * ny

    @staticmethod
    def ndc(x: float, y: float, width: int, height: int) -> tuple[float, float]:
        """Map a continuous pixel coordinate to device coordinates.

        The larger image dimension spans [-1, 1]; the smaller one spans a
        proportionally shorter range so pixels stay square. Pixel (i, j)
        covers [i, i + 1) x [j, j + 1); its center is (i + 0.5, j + 0.5).

        Args:
            x: Horizontal pixel coordinate, 0 at the left image edge.
            y: Vertical pixel coordinate, 0 at the top image edge.
            width: Image width in pixels.
            height: Image height in pixels.

        Returns:
            (nx, ny) device coordinates.
        """
        scale = 2.0 / max(width, height)
        return (x - width / 2.0) * scale, (y - height / 2.0) * scale

    def ray_for_pixel(self, x: float, y: float, width: int, height: int) -> Vector3:
        """Ray direction through continuous pixel coordinate (x, y)."""
        nx, ny = self.ndc(x, y, width, height)
        return self.ray_direction(nx, ny)

    def __repr__(self) -> str:
        return (
            f"PinholeCamera(position={self.position!r}, direction={self.direction!r}, "
            f"fov_degrees={self.fov_degrees})"
        )
