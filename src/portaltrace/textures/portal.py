"""Portal texture: a view of the scene from another camera.

A portal holds its own camera. Its (u, v) coordinates are read as
image-plane offsets for that camera (normally in [-1, 1], arranged with a
CoordinateTransform), and the color at (u, v) is whatever the scene renders
along the corresponding camera ray.

Each portal lookup recurses into Scene.cast with one less remaining depth,
so chains of portals (including a portal that sees itself) terminate at
depth 0 with the scene background.

Example:
    >>> from portaltrace.camera.pinhole import PinholeCamera
    >>> from portaltrace.core.vector import Vector3
    >>> from portaltrace.textures import CoordinateTransform, Portal
    >>> camera = PinholeCamera(Vector3(0, -8, 2), Vector3(0, 1, 0), fov_degrees=60.0)
    >>> # Map a 4x3 quad onto the portal camera's [-1, 1] x [-0.75, 0.75] window
    >>> window = CoordinateTransform.fit(Portal(camera), (0, 0, 4, 3), (-1, -0.75, 1, 0.75))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from portaltrace.core.color import Color
from portaltrace.textures.texture import Texture

if TYPE_CHECKING:
    from portaltrace.camera.pinhole import PinholeCamera
    from portaltrace.scene.manager import Scene


class Portal(Texture):
    """Texture that re-enters the renderer through an embedded camera.

    Attributes:
        camera: The camera the portal looks through.
    """

    def __init__(self, camera: PinholeCamera) -> None:
        self.camera = camera

    def color(self, u: float, v: float, scene: Scene, depth: int) -> Color:
        direction = self.camera.ray_direction(u, v)
        return scene.cast(self.camera.position, direction, depth - 1)

    def __repr__(self) -> str:
        return f"Portal({self.camera!r})"
