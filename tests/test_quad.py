"""Unit tests for the Quad primitive.

Tests cover:
- Hits inside the rectangle
- Misses outside each edge
- Bounds convention: u in [0, width), v in [0, height]
"""

import pytest


def _panel():
    """Upright 4x3 panel in the x = 5 plane, facing -x."""
    from portaltrace.core.vector import Vector3
    from portaltrace.geometry import Quad

    return Quad(
        position=Vector3(5.0, 2.0, 0.0),
        u_basis=Vector3(0.0, -1.0, 0.0),
        v_basis=Vector3(0.0, 0.0, 1.0),
        width=4.0,
        height=3.0,
    )


class TestQuadIntersection:
    """Tests for ray-quad intersection."""

    def test_hit_inside(self):
        """Test a ray hitting the middle of the panel."""
        from portaltrace.core.vector import Vector3

        t = _panel().intersection_with_ray(Vector3(0.0, 0.0, 1.0), Vector3(1.0, 0.0, 0.0))
        assert t == pytest.approx(5.0)

    @pytest.mark.parametrize(
        "y, z",
        [
            (3.0, 1.0),  # u < 0
            (-2.5, 1.0),  # u > width
            (0.0, -0.5),  # v < 0
            (0.0, 3.5),  # v > height
        ],
    )
    def test_miss_outside_edges(self, y, z):
        """Test rays passing the plane outside the rectangle."""
        from portaltrace.core.vector import Vector3

        assert _panel().intersection_with_ray(Vector3(0.0, y, z), Vector3(1.0, 0.0, 0.0)) is None

    def test_normal_faces_minus_x(self):
        """Test the panel's normal orientation."""
        from portaltrace.core.vector import Vector3

        assert _panel().normal == Vector3(-1.0, 0.0, 0.0)


class TestQuadBounds:
    """Tests for Quad.contains."""

    def test_u_bound_is_half_open(self):
        """Test that u = width is outside but u = 0 is inside."""
        quad = _panel()
        assert quad.contains(0.0, 1.0)
        assert not quad.contains(4.0, 1.0)

    def test_v_bound_is_closed(self):
        """Test that both v = 0 and v = height are inside."""
        quad = _panel()
        assert quad.contains(1.0, 0.0)
        assert quad.contains(1.0, 3.0)
        assert not quad.contains(1.0, 3.0001)
