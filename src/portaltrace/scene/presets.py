"""Ready-made scenes.

This module provides factory functions for the scenes the example scripts
render. Each factory returns a (Scene, PinholeCamera) pair.

Presets:
    classic: Two spheres under a single overhead light
    showcase: Checkerboard floor, mirror spheres, a Mandelbrot panel and a
        portal panel showing the scene from a second camera
    random: Randomly placed spheres over a checkerboard floor

The coordinate system is z-up: the floor is the z = 0 plane.

Example:
    >>> import numpy as np
    >>> from portaltrace.scene.presets import create_random_scene, create_showcase_scene
    >>> scene, camera = create_showcase_scene()
    >>> scene.get_object_count()
    6
    >>> scene, camera = create_random_scene(np.random.default_rng(7), count=5)
    >>> scene.get_object_count()
    6
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from portaltrace.camera.pinhole import PinholeCamera
from portaltrace.core.color import Color
from portaltrace.core.vector import Vector3
from portaltrace.geometry import Plane, Quad, Sphere
from portaltrace.scene.manager import Scene
from portaltrace.textures import (
    Checkerboard,
    CoordinateTransform,
    MandelbrotSet,
    Portal,
    SolidColor,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Shared Constants
# =============================================================================

FLOOR_LIGHT = Color(0.8, 0.8, 0.8)
FLOOR_DARK = Color(0.05, 0.05, 0.05)
FLOOR_REFLECTIVITY = 0.2

# Panels behind the spheres (width x height in scene units)
PANEL_WIDTH = 4.0
PANEL_HEIGHT = 3.0

# Region of the complex plane shown on the Mandelbrot panel
MANDELBROT_WINDOW = (-2.2, -1.125, 0.8, 1.125)


@dataclass
class ShowcaseParams:
    """Parameters for configuring the showcase scene.

    Attributes:
        background: Color of the sky.
        ambient_intensity: Light every surface receives unconditionally.
        light_direction: Direction toward the single directional light.
        light_intensity: Intensity of that light.
        mirror_reflectivity: Reflectivity of the large center sphere.
        portal_position: Where the portal's camera stands.
        portal_target: What the portal's camera looks at.
    """

    background: Color = Color(0.05, 0.1, 0.2)
    ambient_intensity: float = 0.25
    light_direction: Vector3 = Vector3(-1.0, -2.0, 3.0)
    light_intensity: float = 1.0
    mirror_reflectivity: float = 0.8
    portal_position: Vector3 = Vector3(7.0, -5.0, 4.0)
    portal_target: Vector3 = Vector3(0.0, 0.0, 1.0)


def _checkerboard_floor(scene: Scene, square_size: float = 1.0) -> None:
    scene.add_object(
        Plane(
            position=Vector3(0.0, 0.0, 0.0),
            u_basis=Vector3(1.0, 0.0, 0.0),
            v_basis=Vector3(0.0, 1.0, 0.0),
        ),
        Checkerboard(SolidColor(FLOOR_LIGHT), SolidColor(FLOOR_DARK), square_size),
        reflectivity=FLOOR_REFLECTIVITY,
    )


def _upright_panel(left_x: float, y: float, bottom_z: float) -> Quad:
    """A PANEL_WIDTH x PANEL_HEIGHT quad in a y = const plane, facing -y.

    u grows to the right (+x) and v grows upward (+z).
    """
    return Quad(
        position=Vector3(left_x, y, bottom_z),
        u_basis=Vector3(1.0, 0.0, 0.0),
        v_basis=Vector3(0.0, 0.0, 1.0),
        width=PANEL_WIDTH,
        height=PANEL_HEIGHT,
    )


# =============================================================================
# Scene Factories
# =============================================================================


def create_classic_scene() -> tuple[Scene, PinholeCamera]:
    """Create the two-sphere scene.

    A dark blue sphere rests above a dark red one under a light from
    straight above, seen from above and to the side against a dark green
    background.

    Returns:
        A tuple of (Scene, PinholeCamera).
    """
    scene = Scene(background=Color(0.0, 0.2, 0.0), ambient_intensity=1.0)
    scene.add_light(direction=Vector3(0.0, 0.0, 10.0), intensity=5.0)
    scene.add_object(Sphere(Vector3(0.0, 0.0, 1.5), 1.0), SolidColor(Color(0.0, 0.0, 0.1)))
    scene.add_object(Sphere(Vector3(0.0, 0.5, 0.0), 1.0), SolidColor(Color(0.1, 0.0, 0.0)))

    camera = PinholeCamera(
        position=Vector3(-10.0, 0.0, 10.0),
        direction=Vector3(1.0, 0.0, -1.0),
        fov_degrees=28.0,
    )
    return scene, camera


def create_showcase_scene(
    params: ShowcaseParams | None = None,
) -> tuple[Scene, PinholeCamera]:
    """Create the showcase scene.

    Contents:
    - Reflective checkerboard floor (infinite plane)
    - Large mirror sphere in the center, red and blue matte spheres beside it
    - Mandelbrot panel behind the spheres on the left
    - Portal panel behind the spheres on the right, showing the scene from
      the portal camera (including the portal itself, down to the depth
      limit)

    Args:
        params: Optional ShowcaseParams. If None, uses default ShowcaseParams().

    Returns:
        A tuple of (Scene, PinholeCamera) for the main view.
    """
    if params is None:
        params = ShowcaseParams()

    scene = Scene(background=params.background, ambient_intensity=params.ambient_intensity)
    scene.add_light(direction=params.light_direction, intensity=params.light_intensity)

    _checkerboard_floor(scene)

    scene.add_object(
        Sphere(Vector3(0.0, 0.0, 1.0), 1.0),
        SolidColor(Color(0.05, 0.05, 0.05)),
        reflectivity=params.mirror_reflectivity,
    )
    scene.add_object(
        Sphere(Vector3(2.5, -1.5, 0.75), 0.75),
        SolidColor(Color(0.6, 0.05, 0.05)),
    )
    scene.add_object(
        Sphere(Vector3(-2.0, -1.0, 0.6), 0.6),
        SolidColor(Color(0.05, 0.1, 0.6)),
        reflectivity=0.3,
    )

    panel_extent = (0.0, 0.0, PANEL_WIDTH, PANEL_HEIGHT)

    scene.add_object(
        _upright_panel(left_x=-4.5, y=5.0, bottom_z=0.5),
        CoordinateTransform.fit(MandelbrotSet(), panel_extent, MANDELBROT_WINDOW),
    )

    portal_camera = PinholeCamera.look_at(params.portal_position, params.portal_target, 60.0)
    # Panel v grows upward while device ny grows downward
    half_height = PANEL_HEIGHT / PANEL_WIDTH
    scene.add_object(
        _upright_panel(left_x=0.5, y=5.0, bottom_z=0.5),
        CoordinateTransform.fit(
            Portal(portal_camera), panel_extent, (-1.0, half_height, 1.0, -half_height)
        ),
    )

    camera = PinholeCamera.look_at(
        position=Vector3(0.0, -9.0, 3.5),
        target=Vector3(0.0, 2.0, 1.2),
        fov_degrees=60.0,
    )
    return scene, camera


def create_random_scene(
    rng: np.random.Generator,
    count: int = 12,
) -> tuple[Scene, PinholeCamera]:
    """Create a scene of randomly placed spheres on a checkerboard floor.

    All randomness comes from the generator passed in, so the same seed
    always yields the same scene.

    Args:
        rng: Random number generator, e.g. np.random.default_rng(seed).
        count: Number of spheres.

    Returns:
        A tuple of (Scene, PinholeCamera).

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"Sphere count = {count} must not be negative")

    scene = Scene(background=Color(0.3, 0.45, 0.7), ambient_intensity=0.3)
    scene.add_light(direction=Vector3(1.0, -1.5, 2.0), intensity=0.9)
    _checkerboard_floor(scene)

    for _ in range(count):
        radius = float(rng.uniform(0.3, 1.0))
        center = Vector3(float(rng.uniform(-5.0, 5.0)), float(rng.uniform(-2.0, 8.0)), radius)
        red, green, blue = (float(c) for c in rng.uniform(0.05, 0.9, size=3))
        reflectivity = float(rng.uniform(0.3, 0.9)) if rng.random() < 0.3 else 0.0
        scene.add_object(Sphere(center, radius), SolidColor(Color(red, green, blue)), reflectivity)

    logger.debug("Created random scene with %d spheres", count)

    camera = PinholeCamera.look_at(
        position=Vector3(0.0, -10.0, 4.0),
        target=Vector3(0.0, 3.0, 0.5),
        fov_degrees=60.0,
    )
    return scene, camera


PRESETS: dict[str, Callable[..., tuple[Scene, PinholeCamera]]] = {
    "classic": create_classic_scene,
    "showcase": create_showcase_scene,
    "random": create_random_scene,
}


def create_scene(
    name: str,
    *,
    seed: int | None = None,
    count: int = 12,
) -> tuple[Scene, PinholeCamera]:
    """Create a preset scene by name.

    Args:
        name: One of the keys of PRESETS.
        seed: Seed for the random preset; ignored by the others.
        count: Sphere count for the random preset; ignored by the others.

    Returns:
        A tuple of (Scene, PinholeCamera).

    Raises:
        ValueError: If the preset name is unknown.
    """
    if name not in PRESETS:
        raise ValueError(f"Unknown scene preset {name!r}; expected one of {sorted(PRESETS)}")
    if name == "random":
        return create_random_scene(np.random.default_rng(seed), count=count)
    return PRESETS[name]()
