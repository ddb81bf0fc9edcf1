"""Texture interface and the solid-color texture.

A texture maps 2-D surface coordinates (u, v) to a linear color. Textures
compose: a checkerboard dispatches to two child textures, a coordinate
transform remaps (u, v) before delegating, and a portal renders the scene
again through its own camera.

Because a portal needs to cast rays, every color() call receives the scene
being rendered and the remaining recursion depth as explicit arguments.
Textures never store a reference to a scene.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from portaltrace.core.color import Color

if TYPE_CHECKING:
    from portaltrace.scene.manager import Scene


class Texture(ABC):
    """Abstract color-at-coordinate function."""

    @abstractmethod
    def color(self, u: float, v: float, scene: Scene, depth: int) -> Color:
        """Evaluate the texture.

        Args:
            u: First surface coordinate.
            v: Second surface coordinate.
            scene: The scene being rendered, for textures that cast rays.
            depth: Remaining recursion depth of the cast that hit the surface.

        Returns:
            The linear color at (u, v).
        """


class SolidColor(Texture):
    """A texture with the same color everywhere.

    Attributes:
        value: The color returned for every coordinate.
    """

    def __init__(self, value: Color) -> None:
        self.value = value

    def color(self, u: float, v: float, scene: Scene, depth: int) -> Color:
        return self.value

    def __repr__(self) -> str:
        return f"SolidColor({self.value!r})"
