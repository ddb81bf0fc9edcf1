"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Immutable 3D vectors and mirror reflection
    color: Linear RGB colors and display quantization
    numerics: Quadratic solver, Mandelbrot escape time and color ramps
    integrator: Recursive cast with direct lighting, shadows and reflection
    filtering: Gaussian kernels and strided separable convolution (Taichi)
    render: Parallel oversampled tracing and downsampling

The value types are plain Python; the convolution runs in Taichi kernels.
"""

from .color import BLACK, WHITE, Color
from .numerics import circular_lerp, mandelbrot_escape_time, solve_quadratic
from .vector import UP, Vector3, angle_of_reflection

# Note: integrator and render are NOT imported here to avoid circular imports.
# Import directly from portaltrace.core.integrator or portaltrace.core.render when needed.
#
# For rendering, use:
#   from portaltrace.core.render import Renderer

__all__ = [
    "Vector3",
    "UP",
    "angle_of_reflection",
    "Color",
    "BLACK",
    "WHITE",
    "solve_quadratic",
    "mandelbrot_escape_time",
    "circular_lerp",
]
