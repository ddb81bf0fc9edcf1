"""Unit tests for the recursive cast and direct lighting.

Tests cover:
- Depth exhaustion and misses returning the background
- Lambertian falloff with the light angle
- Self-shadowing and shadows cast by other objects
- Unclamped accumulation of light
- Mirror reflection and its depth budget
- Depth handed to textures
- Degenerate lights and rays
"""

import pytest


def _floor_with_blocker():
    """White floor under a sphere, lit from straight above."""
    from portaltrace.core.color import BLACK, WHITE
    from portaltrace.core.vector import Vector3
    from portaltrace.geometry import Plane, Sphere
    from portaltrace.scene.manager import Scene
    from portaltrace.textures import SolidColor

    scene = Scene(background=BLACK, ambient_intensity=0.2)
    scene.add_light(direction=Vector3(0.0, 0.0, 1.0), intensity=1.0)
    scene.add_object(
        Plane(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)),
        SolidColor(WHITE),
    )
    scene.add_object(Sphere(Vector3(0.0, 0.0, 2.0), 1.0), SolidColor(WHITE))
    return scene


class TestCastTermination:
    """Tests for background returns."""

    def test_zero_depth_returns_background(self, single_sphere_scene):
        """Test that an exhausted cast does not trace at all."""
        from portaltrace.core.color import Color
        from portaltrace.core.integrator import cast
        from portaltrace.core.vector import Vector3

        single_sphere_scene.background = Color(0.3, 0.3, 0.3)
        color = cast(single_sphere_scene, Vector3(-10.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), 0)
        assert color == Color(0.3, 0.3, 0.3)

    def test_miss_returns_background(self, single_sphere_scene):
        """Test a ray that escapes the scene."""
        from portaltrace.core.color import Color
        from portaltrace.core.integrator import cast
        from portaltrace.core.vector import Vector3

        single_sphere_scene.background = Color(0.0, 0.2, 0.0)
        color = cast(single_sphere_scene, Vector3(-10.0, 0.0, 0.0), Vector3(-1.0, 0.0, 0.0), 10)
        assert color == Color(0.0, 0.2, 0.0)


class TestDirectLighting:
    """Tests for light_on_surface and lit casts."""

    def test_head_on_light(self, single_sphere_scene):
        """Test full intensity where the normal faces the light."""
        from portaltrace.core.vector import Vector3

        color = single_sphere_scene.cast(Vector3(-10.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), 10)
        assert tuple(color) == pytest.approx((1.0, 1.0, 1.0))

    def test_cosine_falloff(self, single_sphere_scene):
        """Test intensity = cos(theta) at a point whose normal is (-0.8, 0, 0.6)."""
        from portaltrace.core.vector import Vector3

        color = single_sphere_scene.cast(Vector3(-10.0, 0.0, 0.6), Vector3(1.0, 0.0, 0.0), 10)
        assert color.red == pytest.approx(0.8)

    def test_unlit_side_gets_only_ambient(self, single_sphere_scene):
        """Test the side facing away from the light."""
        from portaltrace.core.vector import Vector3
        from portaltrace.scene.manager import LightSource

        single_sphere_scene.ambient_intensity = 0.25
        single_sphere_scene.light_sources = [LightSource(Vector3(1.0, 0.0, 0.0), 1.0)]

        color = single_sphere_scene.cast(Vector3(-10.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), 10)
        assert color.red == pytest.approx(0.25)

    def test_light_direction_length_does_not_matter(self, single_sphere_scene):
        """Test that the light direction is normalized before use."""
        from portaltrace.core.vector import Vector3
        from portaltrace.scene.manager import LightSource

        single_sphere_scene.light_sources = [LightSource(Vector3(-10.0, 0.0, 0.0), 1.0)]

        color = single_sphere_scene.cast(Vector3(-10.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), 10)
        assert color.red == pytest.approx(1.0)

    def test_shadow_from_other_object(self):
        """Test that the floor under the sphere is shadowed."""
        from portaltrace.core.vector import Vector3

        scene = _floor_with_blocker()
        color = scene.cast(Vector3(-5.0, 0.0, 0.5), Vector3(1.0, 0.0, -0.1), 10)
        assert color.red == pytest.approx(0.2)

    def test_light_is_not_clamped(self):
        """Test that ambient plus direct light may exceed 1."""
        from portaltrace.core.vector import Vector3

        scene = _floor_with_blocker()
        color = scene.cast(Vector3(-5.0, 0.0, 0.5), Vector3(1.0, 0.0, -0.05), 10)
        assert color.red == pytest.approx(1.2)

    def test_light_on_surface_sums_lights(self, single_sphere_scene):
        """Test two lights plus ambient at one point."""
        from portaltrace.core.integrator import light_on_surface
        from portaltrace.core.vector import Vector3

        single_sphere_scene.ambient_intensity = 0.1
        single_sphere_scene.add_light(Vector3(-1.0, 0.0, 1.0), 2.0)

        point = Vector3(-1.0, 0.0, 0.0)
        normal = Vector3(-1.0, 0.0, 0.0)
        expected = 0.1 + 1.0 + 2.0 * (2.0**-0.5)
        assert light_on_surface(single_sphere_scene, point, normal) == pytest.approx(expected)


class TestDegenerateInput:
    """Tests that degenerate input yields odd values instead of exceptions."""

    def test_zero_light_direction_contributes_nothing(self, single_sphere_scene):
        """Test that a light with no direction adds no light and does not raise."""
        from portaltrace.core.vector import Vector3

        single_sphere_scene.add_light(Vector3(0.0, 0.0, 0.0), 5.0)

        color = single_sphere_scene.cast(Vector3(-10.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), 10)
        assert tuple(color) == pytest.approx((1.0, 1.0, 1.0))

    def test_nan_intensity_propagates_to_color(self, single_sphere_scene):
        """Test that a NaN light intensity reaches the cast result."""
        import math

        from portaltrace.core.vector import Vector3

        single_sphere_scene.add_light(Vector3(-1.0, 0.0, 0.0), math.nan)

        color = single_sphere_scene.cast(Vector3(-10.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), 10)
        assert all(math.isnan(c) for c in color)

    def test_nan_ray_misses_everything(self, single_sphere_scene):
        """Test that a NaN direction hits nothing and returns the background."""
        import math

        from portaltrace.core.color import BLACK
        from portaltrace.core.vector import Vector3

        direction = Vector3(math.nan, math.nan, math.nan)
        color = single_sphere_scene.cast(Vector3(-10.0, 0.0, 0.0), direction, 10)
        assert color == BLACK


class TestReflection:
    """Tests for mirror reflection."""

    def _mirror_scene(self):
        from portaltrace.core.color import BLACK, Color
        from portaltrace.core.vector import Vector3
        from portaltrace.geometry import Sphere
        from portaltrace.scene.manager import Scene
        from portaltrace.textures import SolidColor

        scene = Scene(background=Color(0.0, 0.0, 1.0), ambient_intensity=1.0)
        scene.add_object(Sphere(Vector3(0.0, 0.0, 0.0), 1.0), SolidColor(BLACK), reflectivity=0.5)
        scene.add_object(Sphere(Vector3(-20.0, 0.0, 0.0), 1.0), SolidColor(Color(1.0, 0.0, 0.0)))
        return scene

    def test_mirror_shows_object_behind_camera(self):
        """Test that the reflected ray sees the red sphere."""
        from portaltrace.core.vector import Vector3

        color = self._mirror_scene().cast(Vector3(-5.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), 10)
        assert tuple(color) == pytest.approx((0.5, 0.0, 0.0))

    def test_reflection_uses_one_less_depth(self):
        """Test that at depth 1 the reflection sees only the background."""
        from portaltrace.core.vector import Vector3

        color = self._mirror_scene().cast(Vector3(-5.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), 1)
        assert tuple(color) == pytest.approx((0.0, 0.0, 0.5))

    def test_texture_receives_current_depth(self, single_sphere_scene):
        """Test that the hit object's texture is evaluated at the cast's depth."""
        from portaltrace.core.color import WHITE
        from portaltrace.core.vector import Vector3
        from portaltrace.scene.manager import RenderableObject
        from portaltrace.textures import Texture

        seen = []

        class DepthRecorder(Texture):
            def color(self, u, v, scene, depth):
                seen.append(depth)
                return WHITE

        sphere = single_sphere_scene.objects[0].surface
        single_sphere_scene.objects[0] = RenderableObject(sphere, DepthRecorder())

        single_sphere_scene.cast(Vector3(-10.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), 4)
        assert seen == [4]
