"""Scene module for scene management and ray-scene queries.

This module handles scene representation and ray-scene queries:

Components:
    manager: Scene container holding objects, lights and environment
    intersection: Nearest-hit and occlusion queries over object lists
    presets: Ready-made scenes for the example scripts

The scene module manages:
    - Object storage in insertion order (ties resolve to the earliest)
    - Directional light enumeration for direct lighting
    - The background color and ambient intensity
"""

from .intersection import NearestHit, is_occluded, trace_to_nearest_object
from .manager import LightSource, RenderableObject, Scene
from .presets import (
    PRESETS,
    ShowcaseParams,
    create_classic_scene,
    create_random_scene,
    create_scene,
    create_showcase_scene,
)

__all__ = [
    # Intersection module
    "NearestHit",
    "trace_to_nearest_object",
    "is_occluded",
    # Manager module
    "Scene",
    "RenderableObject",
    "LightSource",
    # Presets module
    "PRESETS",
    "ShowcaseParams",
    "create_classic_scene",
    "create_showcase_scene",
    "create_random_scene",
    "create_scene",
]
