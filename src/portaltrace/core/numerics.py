"""Scalar numeric helpers: quadratic roots, Mandelbrot escape time, color ramps.

Example:
    >>> from portaltrace.core.numerics import solve_quadratic, mandelbrot_escape_time
    >>> solve_quadratic(1.0, 0.0, -4.0)
    (2.0, -2.0)
    >>> mandelbrot_escape_time(0j) is None
    True
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from portaltrace.config import MANDELBROT_ESCAPE_RADIUS, MANDELBROT_MAX_ITERATIONS
from portaltrace.core.color import Color


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, float] | None:
    """Solve a*x^2 + b*x + c = 0 for two distinct real roots.

    The single-root (tangent) case is degenerate for ray intersection and is
    reported as no solution, as is a negative or NaN discriminant.

    Args:
        a: Quadratic coefficient (must be non-zero).
        b: Linear coefficient.
        c: Constant term.

    Returns:
        (larger_root, smaller_root) when a > 0, or None if there are no two
        distinct real roots.
    """
    discriminant = b * b - 4.0 * a * c
    if not discriminant > 0.0:
        return None

    scale = 1.0 / (2.0 * a)
    midpoint = -b * scale
    delta = math.sqrt(discriminant) * scale
    return midpoint + delta, midpoint - delta


def mandelbrot_escape_time(
    c: complex,
    max_iterations: int = MANDELBROT_MAX_ITERATIONS,
    escape_radius: float = MANDELBROT_ESCAPE_RADIUS,
) -> float | None:
    """Compute the smoothed escape time of c under z <- z^2 + c.

    Iterates from z = 0. When |z| exceeds the escape radius at iteration i,
    returns the continuous iteration count

        i - log(0.5 * ln|z|^2 / ln(R)) / ln(2)

    which removes the banding of the integer count.

    Args:
        c: The point on the complex plane.
        max_iterations: Iteration cap; points that never escape are members.
        escape_radius: Bailout radius R.

    Returns:
        The smoothed escape time, or None if c is considered part of the set.
    """
    z = 0j
    radius_squared = escape_radius * escape_radius
    log_radius = math.log(escape_radius)

    for i in range(max_iterations):
        z = z * z + c
        magnitude_squared = z.real * z.real + z.imag * z.imag
        if magnitude_squared > radius_squared:
            return i - math.log(0.5 * math.log(magnitude_squared) / log_radius) / math.log(2.0)

    return None


def circular_lerp(ramp: Sequence[Color], position: float) -> Color:
    """Sample a cyclic color ramp with linear interpolation.

    The ramp wraps around: position len(ramp) is the same as position 0, and
    positions between the last and first entries blend those two colors.

    Args:
        ramp: Ramp colors, at integer positions 0 .. len(ramp) - 1.
        position: Where to sample; any finite float.

    Returns:
        The interpolated color.

    Raises:
        ValueError: If the ramp is empty.
    """
    if not ramp:
        raise ValueError("Color ramp must contain at least one color")

    wrapped = position % len(ramp)
    index = int(math.floor(wrapped))
    fraction = wrapped - index
    # Rounding in % can land exactly on len(ramp)
    index %= len(ramp)

    return ramp[index].lerp(ramp[(index + 1) % len(ramp)], fraction)
