"""Whitted-style integrator: direct lighting, shadows and mirror reflection.

This module implements the recursive cast that turns one ray into one color.

At each hit the integrator:
    1. asks the surface for its normal and (u, v) at the hit point
    2. computes the light arriving there: ambient plus, for each directional
       light not blocked by a shadow ray, intensity * max(0, cos(theta))
    3. asks the object's texture for its base color (a portal texture casts
       further rays from here)
    4. if the object is reflective, casts the mirror-reflected ray and adds
       reflectivity times its color

Every recursive cast, whether from a reflection or from a portal texture,
receives one less remaining depth, and a cast with depth 0 returns the
background immediately. The recursion therefore terminates for any scene.

Shadow and reflection rays start FLOAT_BIAS along the normal from the hit
point so they do not re-detect the surface they leave.

Example:
    >>> from portaltrace.core.integrator import cast
    >>> color = cast(scene, camera.position, camera.ray_direction(0.0, 0.0), 10)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from portaltrace.config import FLOAT_BIAS
from portaltrace.core.color import BLACK, Color
from portaltrace.core.vector import Vector3, angle_of_reflection
from portaltrace.scene.intersection import is_occluded, trace_to_nearest_object

if TYPE_CHECKING:
    from portaltrace.scene.manager import Scene


def light_on_surface(scene: Scene, point: Vector3, normal: Vector3) -> float:
    """Total light intensity arriving at a surface point.

    Args:
        scene: The scene providing lights, occluders and ambient intensity.
        point: The point on the surface.
        normal: Unit surface normal at the point.

    Returns:
        Ambient intensity plus the Lambertian contribution of every light
        with an unobstructed path. The sum is not clamped.
    """
    trace_origin = point + normal * FLOAT_BIAS
    total = scene.ambient_intensity

    for light in scene.light_sources:
        if is_occluded(scene.objects, trace_origin, light.direction):
            continue
        cosine = light.direction.normalize().dot(normal)
        # A zero-length light direction gives a NaN cosine, which max() drops
        total += max(0.0, cosine) * light.intensity

    return total


def cast(scene: Scene, origin: Vector3, direction: Vector3, depth: int) -> Color:
    """Trace a ray through the scene and return its color.

    Args:
        scene: The scene to render.
        origin: The ray origin.
        direction: The ray direction (need not be normalized).
        depth: Remaining recursion depth. At 0 the background is returned
            without tracing.

    Returns:
        The linear color seen along the ray.
    """
    if depth <= 0:
        return scene.background

    hit = trace_to_nearest_object(scene.objects, origin, direction)
    if hit is None:
        return scene.background

    obj = hit.obj
    hit_point = origin + direction * hit.distance
    properties = obj.surface.at_point(hit_point)

    illumination = light_on_surface(scene, hit_point, properties.normal)
    base_color = obj.texture.color(properties.u, properties.v, scene, depth)

    reflected_color = BLACK
    if obj.reflectivity != 0.0:
        reflect_direction = angle_of_reflection(direction, properties.normal)
        reflect_origin = hit_point + properties.normal * FLOAT_BIAS
        reflected_color = cast(scene, reflect_origin, reflect_direction, depth - 1).scale(
            obj.reflectivity
        )

    return base_color.scale(illumination) + reflected_color
