"""Scene-level ray intersection testing.

This module tests a ray against every object of a scene. It offers the two
queries the integrator needs:

- closest hit (trace_to_nearest_object): which object does a camera or
  reflection ray see, and at what distance
- any hit (is_occluded): is anything at all in the way of a shadow ray

Objects are tested in insertion order. When two objects report exactly the
same distance, the one added first wins.

Example:
    >>> from portaltrace.scene.intersection import trace_to_nearest_object
    >>> hit = trace_to_nearest_object(scene.objects, origin, direction)
    >>> if hit is not None:
    ...     point = origin + direction * hit.distance
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, NamedTuple

from portaltrace.core.vector import Vector3

if TYPE_CHECKING:
    from portaltrace.scene.manager import RenderableObject


class NearestHit(NamedTuple):
    """Record of the closest ray-scene intersection.

    Attributes:
        obj: The object that was hit.
        distance: Ray parameter t of the hit (strictly positive).
    """

    obj: RenderableObject
    distance: float


def trace_to_nearest_object(
    objects: Iterable[RenderableObject],
    origin: Vector3,
    direction: Vector3,
) -> NearestHit | None:
    """Find the object with the closest intersection along a ray.

    Args:
        objects: Candidate objects.
        origin: The ray origin.
        direction: The ray direction.

    Returns:
        The closest (object, distance) pair, or None if nothing is hit.
    """
    nearest: NearestHit | None = None
    for obj in objects:
        distance = obj.surface.intersection_with_ray(origin, direction)
        if distance is None:
            continue
        if nearest is None or distance < nearest.distance:
            nearest = NearestHit(obj, distance)
    return nearest


def is_occluded(
    objects: Iterable[RenderableObject],
    origin: Vector3,
    direction: Vector3,
) -> bool:
    """Check whether a ray hits any object at all.

    Stops at the first hit, which is all a shadow ray needs to know.
    """
    return any(
        obj.surface.intersection_with_ray(origin, direction) is not None for obj in objects
    )
