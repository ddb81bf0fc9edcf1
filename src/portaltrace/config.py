"""Rendering constants and render configuration.

This module collects the numeric constants shared across the renderer and the
RenderSettings dataclass consumed by the render pipeline.

Example:
    >>> from portaltrace.config import RenderSettings
    >>> settings = RenderSettings(width=320, height=240, oversampling=3)
    >>> settings.oversampled_size(padding=2)
    (964, 724)
"""

from dataclasses import dataclass

# =============================================================================
# Rendering Constants
# =============================================================================

# Offset along the surface normal for shadow and reflection rays, so a ray
# leaving a surface does not re-detect that surface through rounding error
FLOAT_BIAS = 1e-3

# Below this |D.N| a ray is treated as parallel to a plane
PLANE_PARALLEL_EPSILON = 1e-3

# Maximum recursion depth for reflection and portal bounces
DEFAULT_MAX_DEPTH = 10

# Mandelbrot iteration cap and escape radius. The radius is far larger than
# the mathematical minimum of 2 to avoid banding in the smooth-coloring formula.
MANDELBROT_MAX_ITERATIONS = 100
MANDELBROT_ESCAPE_RADIUS = 50.0

# Escape time to color ramp position
MANDELBROT_RAMP_SCALE = 0.25

# Gaussian sigma per unit of oversampling factor
OVERSAMPLING_SIGMA_SCALE = 0.4

# Display transfer exponent (encode with 1/gamma, decode with gamma)
DEFAULT_GAMMA = 2.2


@dataclass(frozen=True)
class RenderSettings:
    """Parameters for one render.

    Attributes:
        width: Output image width in pixels.
        height: Output image height in pixels.
        oversampling: Samples per pixel along each axis (1 disables
            anti-aliasing).
        max_depth: Remaining recursion depth handed to the first cast.
        workers: Number of workers for the trace pass. None lets the
            executor pick its default.
        use_processes: Trace in worker processes instead of threads. Scenes
            must then be picklable.
    """

    width: int = 640
    height: int = 480
    oversampling: int = 1
    max_depth: int = DEFAULT_MAX_DEPTH
    workers: int | None = None
    use_processes: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions ({self.width}x{self.height}) must be positive"
            )
        if self.oversampling < 1:
            raise ValueError(
                f"Oversampling factor = {self.oversampling} must be at least 1"
            )
        if self.max_depth < 0:
            raise ValueError(f"Max depth = {self.max_depth} must not be negative")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"Worker count = {self.workers} must be at least 1")

    def oversampled_size(self, padding: int = 0) -> tuple[int, int]:
        """Size of the traced sample grid.

        Args:
            padding: Extra samples on each side of each axis, needed so the
                reconstruction filter has full support at the image border.

        Returns:
            (width, height) of the oversampled grid.
        """
        return (
            self.width * self.oversampling + 2 * padding,
            self.height * self.oversampling + 2 * padding,
        )
