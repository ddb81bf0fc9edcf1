"""Linear-light RGB color type.

Colors are kept in linear light space and are never clamped while shading;
values above 1.0 are legal and only get clamped when converted to the
gamma-encoded display space for 8-bit output.

Example:
    >>> from portaltrace.core.color import Color
    >>> Color(1.0, 0.5, 0.0).scale(0.5)
    Color(red=0.5, green=0.25, blue=0.0)
    >>> Color(1.0, 0.0, 2.0).to_display_bytes()
    (255, 0, 255)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from portaltrace.config import DEFAULT_GAMMA


def _encode_component(linear_value: float, gamma: float) -> int:
    clamped = min(max(linear_value, 0.0), 1.0)
    return int(clamped ** (1.0 / gamma) * 255.0)


@dataclass(frozen=True, slots=True)
class Color:
    """An immutable RGB triple in linear light space.

    Attributes:
        red: Red component.
        green: Green component.
        blue: Blue component.
    """

    red: float
    green: float
    blue: float

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __mul__(self, other: float | Color) -> Color:
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.red
        yield self.green
        yield self.blue

    def scale(self, factor: float) -> Color:
        """Multiply every component by a scalar."""
        return Color(self.red * factor, self.green * factor, self.blue * factor)

    def add(self, other: Color) -> Color:
        """Component-wise sum of two colors."""
        return self + other

    def lerp(self, other: Color, t: float) -> Color:
        """Linearly interpolate toward other; t=0 gives self, t=1 gives other."""
        return self.scale(1.0 - t) + other.scale(t)

    def to_display_bytes(self, gamma: float = DEFAULT_GAMMA) -> tuple[int, int, int]:
        """Convert to gamma-encoded 8-bit components.

        Each component is clamped to [0, 1], raised to 1/gamma, scaled to 255
        and truncated.

        Args:
            gamma: Display gamma (default 2.2).

        Returns:
            (red, green, blue) as integers in [0, 255].
        """
        return (
            _encode_component(self.red, gamma),
            _encode_component(self.green, gamma),
            _encode_component(self.blue, gamma),
        )

    @classmethod
    def from_display(
        cls, red: float, green: float, blue: float, gamma: float = DEFAULT_GAMMA
    ) -> Color:
        """Build a linear color from gamma-encoded components in [0, 1].

        Args:
            red: Display-space red in [0, 1].
            green: Display-space green in [0, 1].
            blue: Display-space blue in [0, 1].
            gamma: Display gamma (default 2.2).

        Returns:
            The corresponding linear-light color.
        """
        return cls(
            min(max(red, 0.0), 1.0) ** gamma,
            min(max(green, 0.0), 1.0) ** gamma,
            min(max(blue, 0.0), 1.0) ** gamma,
        )

    @classmethod
    def from_hex(cls, value: str, gamma: float = DEFAULT_GAMMA) -> Color:
        """Build a linear color from a display-space "#rrggbb" string."""
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected a #rrggbb color, got {value!r}")
        red, green, blue = (int(digits[i : i + 2], 16) / 255.0 for i in (0, 2, 4))
        return cls.from_display(red, green, blue, gamma=gamma)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
