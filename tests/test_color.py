"""Unit tests for the Color value type.

Tests cover:
- Scaling, addition and component-wise multiplication
- Interpolation
- Display quantization (clamp, gamma 2.2, truncate)
- Hex parsing
"""

import math

import pytest


class TestColorArithmetic:
    """Tests for Color operators."""

    def test_scale(self):
        """Test scalar multiplication of a color."""
        from portaltrace.core.color import Color

        assert Color(1.0, 0.5, 0.0).scale(0.5) == Color(0.5, 0.25, 0.0)

    def test_add(self):
        """Test component-wise addition."""
        from portaltrace.core.color import Color

        total = Color(0.1, 0.2, 0.3).add(Color(0.4, 0.5, 0.6))
        assert math.isclose(total.red, 0.5)
        assert math.isclose(total.green, 0.7)
        assert math.isclose(total.blue, 0.9)

    def test_values_above_one_are_kept(self):
        """Test that linear colors are never clamped while shading."""
        from portaltrace.core.color import Color

        bright = Color(0.8, 0.8, 0.8) + Color(0.8, 0.8, 0.8)
        assert bright.red > 1.0

    def test_multiply_by_color(self):
        """Test component-wise product with another color."""
        from portaltrace.core.color import Color

        assert Color(1.0, 0.5, 0.25) * Color(0.5, 0.5, 4.0) == Color(0.5, 0.25, 1.0)

    def test_lerp_endpoints_and_midpoint(self):
        """Test linear interpolation between two colors."""
        from portaltrace.core.color import BLACK, WHITE

        assert BLACK.lerp(WHITE, 0.0) == BLACK
        assert BLACK.lerp(WHITE, 1.0) == WHITE
        mid = BLACK.lerp(WHITE, 0.5)
        assert mid.red == pytest.approx(0.5)


class TestDisplayBytes:
    """Tests for conversion to 8-bit display values."""

    def test_black_and_white(self):
        """Test the endpoints of the transfer curve."""
        from portaltrace.core.color import BLACK, WHITE

        assert BLACK.to_display_bytes() == (0, 0, 0)
        assert WHITE.to_display_bytes() == (255, 255, 255)

    def test_out_of_range_is_clamped(self):
        """Test that values outside [0, 1] are clamped first."""
        from portaltrace.core.color import Color

        assert Color(2.0, -1.0, 1.0).to_display_bytes() == (255, 0, 255)

    def test_midtone_is_gamma_encoded(self):
        """Test that 0.5 maps to int(0.5 ** (1 / 2.2) * 255)."""
        from portaltrace.core.color import Color

        expected = int(0.5 ** (1.0 / 2.2) * 255.0)
        assert Color(0.5, 0.5, 0.5).to_display_bytes() == (expected, expected, expected)
        assert expected == 186

    def test_from_hex_round_trips_pure_colors(self):
        """Test hex parsing of saturated colors."""
        from portaltrace.core.color import Color

        assert Color.from_hex("#ff0000") == Color(1.0, 0.0, 0.0)
        assert Color.from_hex("00ff00") == Color(0.0, 1.0, 0.0)

    def test_from_hex_rejects_bad_length(self):
        """Test that malformed hex strings raise ValueError."""
        from portaltrace.core.color import Color

        with pytest.raises(ValueError):
            Color.from_hex("#fff")


class TestColorTyping:
    """Tests for Color annotations."""

    def test_iteration_is_annotated(self):
        """Test that iterating a color is typed as yielding floats."""
        import typing
        from collections.abc import Iterator

        from portaltrace.core.color import Color

        hints = typing.get_type_hints(Color.__iter__)
        assert hints["return"] == Iterator[float]
