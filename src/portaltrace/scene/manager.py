"""Scene container: renderable objects, lights and the cast entry point.

This module provides the Scene class, which owns everything a render reads:

- RenderableObject records pairing a Surface with a Texture and a
  reflectivity
- directional LightSource records
- the background color returned by rays that escape the scene
- the ambient light intensity added to every lit surface

A scene is built with add_object / add_light before rendering and is only
read while rendering. Render workers and portal textures share one Scene
without locking, so it must not be modified while a render is in flight.

Example:
    >>> from portaltrace.core.color import Color
    >>> from portaltrace.core.vector import Vector3
    >>> from portaltrace.geometry import Sphere
    >>> from portaltrace.scene.manager import Scene
    >>> from portaltrace.textures import SolidColor
    >>> scene = Scene(background=Color(0.0, 0.2, 0.0))
    >>> scene.add_light(direction=Vector3(0.0, 0.0, 1.0), intensity=5.0)
    LightSource(direction=Vector3(x=0.0, y=0.0, z=1.0), intensity=5.0)
    >>> scene.add_object(Sphere(Vector3(0.0, 0.0, 0.0), 1.0), SolidColor(Color(0.1, 0.0, 0.0)))
    0
    >>> color = scene.cast(Vector3(-10.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), depth=10)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from portaltrace.core import integrator
from portaltrace.core.color import BLACK, Color
from portaltrace.core.vector import Vector3
from portaltrace.geometry.surface import Surface
from portaltrace.scene.intersection import NearestHit, trace_to_nearest_object
from portaltrace.textures.texture import Texture


@dataclass(frozen=True)
class LightSource:
    """A directional light.

    Attributes:
        direction: Direction from any surface point toward the light. Need
            not be unit length.
        intensity: Scalar intensity of the light.
    """

    direction: Vector3
    intensity: float


@dataclass(frozen=True)
class RenderableObject:
    """A surface, its texture and its mirror reflectivity.

    Attributes:
        surface: The object's geometry.
        texture: Color function over the surface's (u, v) coordinates.
        reflectivity: Fraction of the mirror-reflected color added on top of
            the textured color, in [0, 1].
    """

    surface: Surface
    texture: Texture
    reflectivity: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.reflectivity <= 1.0:
            raise ValueError(
                f"Reflectivity = {self.reflectivity} is outside [0, 1]. "
                "An object cannot reflect more light than it receives."
            )


@dataclass
class Scene:
    """Objects, lights and environment of a render.

    Attributes:
        background: Color of rays that hit nothing (and of exhausted casts).
        ambient_intensity: Light intensity every surface receives regardless
            of the light sources.
        objects: Renderable objects, in insertion order.
        light_sources: Directional lights, in insertion order.
    """

    background: Color = BLACK
    ambient_intensity: float = 1.0
    objects: list[RenderableObject] = field(default_factory=list)
    light_sources: list[LightSource] = field(default_factory=list)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_object(self, surface: Surface, texture: Texture, reflectivity: float = 0.0) -> int:
        """Add a renderable object.

        Args:
            surface: The object's geometry.
            texture: The object's texture.
            reflectivity: Mirror reflectivity in [0, 1]. Default 0 (matte).

        Returns:
            The index of the added object.

        Raises:
            ValueError: If reflectivity is outside [0, 1].
        """
        self.objects.append(RenderableObject(surface, texture, reflectivity))
        return len(self.objects) - 1

    def add_light(self, direction: Vector3, intensity: float) -> LightSource:
        """Add a directional light pointing from the scene toward direction."""
        light = LightSource(direction, float(intensity))
        self.light_sources.append(light)
        return light

    def get_object_count(self) -> int:
        """Get the number of objects in the scene."""
        return len(self.objects)

    def get_light_count(self) -> int:
        """Get the number of light sources in the scene."""
        return len(self.light_sources)

    def clear(self) -> None:
        """Remove all objects and lights, keeping background and ambient."""
        self.objects.clear()
        self.light_sources.clear()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def trace_to_nearest_object(self, origin: Vector3, direction: Vector3) -> NearestHit | None:
        """Find the closest object hit by a ray, or None."""
        return trace_to_nearest_object(self.objects, origin, direction)

    def light_on_surface(self, point: Vector3, normal: Vector3) -> float:
        """Ambient plus unobstructed Lambertian light at a surface point."""
        return integrator.light_on_surface(self, point, normal)

    def cast(self, origin: Vector3, direction: Vector3, depth: int) -> Color:
        """Trace a ray to a color with the given remaining recursion depth."""
        return integrator.cast(self, origin, direction, depth)

    def __repr__(self) -> str:
        return (
            f"Scene(objects={self.get_object_count()}, lights={self.get_light_count()}, "
            f"background={self.background!r}, ambient_intensity={self.ambient_intensity})"
        )
