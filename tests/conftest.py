"""Pytest configuration for portaltrace tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def single_sphere_scene():
    """Unit sphere at the origin, one light along -x, no ambient light.

    The sphere is solid white, so the color of a hit is its illumination.
    """
    from portaltrace.core.color import BLACK, WHITE
    from portaltrace.core.vector import Vector3
    from portaltrace.geometry import Sphere
    from portaltrace.scene.manager import Scene
    from portaltrace.textures import SolidColor

    scene = Scene(background=BLACK, ambient_intensity=0.0)
    scene.add_light(direction=Vector3(-1.0, 0.0, 0.0), intensity=1.0)
    scene.add_object(Sphere(Vector3(0.0, 0.0, 0.0), 1.0), SolidColor(WHITE))
    return scene


@pytest.fixture
def small_camera():
    """Camera at x = -10 looking down +x with a 90 degree field of view."""
    from portaltrace.camera.pinhole import PinholeCamera
    from portaltrace.core.vector import Vector3

    return PinholeCamera(
        position=Vector3(-10.0, 0.0, 0.0),
        direction=Vector3(1.0, 0.0, 0.0),
        fov_degrees=90.0,
    )
