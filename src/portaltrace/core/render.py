"""Parallel, anti-aliased image generation.

This module turns a scene and a camera into a linear-light image:

1. Trace: one primary ray per sample of an oversampled grid. Rows are split
   into contiguous chunks and handed to a thread pool. Each task writes only
   its own rows of the shared sample buffer, so no locking is needed. The
   scene and camera are read-only and shared by every task. Casting is pure
   Python, so threads hold the GIL while tracing and gain little over one
   thread. RenderSettings.use_processes switches to a process pool: each
   task gets a pickled copy of the scene and camera and returns its block of
   rows, which the parent copies into the buffer.
2. Filter: when oversampling, the grid is low-pass filtered with a Gaussian
   (sigma = 0.4 * oversampling) and decimated back to the requested size by
   the separable strided convolution in portaltrace.core.filtering.

The oversampled grid carries kernel-radius extra samples on every side so
that border pixels get the same full filter support as interior ones, and
sample i sits at (i - radius) / oversampling + 0.5 in output-pixel units,
which centres each output pixel's filter on the pixel's centre.

Example:
    >>> from portaltrace.config import RenderSettings
    >>> from portaltrace.core.filtering import init_backend
    >>> from portaltrace.core.render import Renderer
    >>> from portaltrace.scene.presets import create_showcase_scene
    >>>
    >>> init_backend()
    >>> scene, camera = create_showcase_scene()
    >>> renderer = Renderer(scene, camera, RenderSettings(320, 240, oversampling=2))
    >>> image = renderer.render()
    >>> renderer.save_image("showcase.png")
"""

from __future__ import annotations

import logging
import multiprocessing
import time
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from portaltrace.camera.pinhole import PinholeCamera
from portaltrace.config import OVERSAMPLING_SIGMA_SCALE, RenderSettings
from portaltrace.core.filtering import convolve_2d, gaussian_kernel, kernel_radius
from portaltrace.scene.manager import Scene

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_traced, total_rows) of the oversampled grid
ProgressCallback = Callable[[int, int], None]

# Rows of the oversampled grid traced by one task
DEFAULT_CHUNK_ROWS = 8


@dataclass(frozen=True)
class SampleGrid:
    """Geometry of the oversampled sample grid.

    Attributes:
        width: Output image width in pixels.
        height: Output image height in pixels.
        oversampling: Samples per output pixel along each axis.
        padding: Extra samples on each side of each axis.
    """

    width: int
    height: int
    oversampling: int
    padding: int

    @property
    def columns(self) -> int:
        return self.width * self.oversampling + 2 * self.padding

    @property
    def rows(self) -> int:
        return self.height * self.oversampling + 2 * self.padding

    def coordinate(self, index: int) -> float:
        """Position of sample index along an axis, in output-pixel units."""
        return (index - self.padding) / self.oversampling + 0.5


def trace_rows(
    scene: Scene,
    camera: PinholeCamera,
    grid: SampleGrid,
    samples: npt.NDArray[np.float32],
    row_start: int,
    row_stop: int,
    max_depth: int,
) -> int:
    """Trace rows [row_start, row_stop) of the sample grid into samples.

    Only samples[row_start:row_stop] is written.

    Returns:
        The number of rows traced.
    """
    xs = [grid.coordinate(col) for col in range(grid.columns)]

    for row in range(row_start, row_stop):
        samples[row] = _trace_row(scene, camera, grid, xs, row, max_depth)

    return row_stop - row_start


def trace_chunk(
    scene: Scene,
    camera: PinholeCamera,
    grid: SampleGrid,
    row_start: int,
    row_stop: int,
    max_depth: int,
) -> tuple[int, npt.NDArray[np.float32]]:
    """Trace rows [row_start, row_stop) into a new block.

    Used by worker processes, which cannot write the parent's buffer.

    Returns:
        (row_start, block) with block of shape (row_stop - row_start, grid.columns, 3).
    """
    xs = [grid.coordinate(col) for col in range(grid.columns)]
    block = np.zeros((row_stop - row_start, grid.columns, 3), dtype=np.float32)

    for offset, row in enumerate(range(row_start, row_stop)):
        block[offset] = _trace_row(scene, camera, grid, xs, row, max_depth)

    return row_start, block


def _trace_row(
    scene: Scene,
    camera: PinholeCamera,
    grid: SampleGrid,
    xs: list[float],
    row: int,
    max_depth: int,
) -> list[tuple[float, ...]]:
    origin = camera.position
    y = grid.coordinate(row)
    return [
        tuple(scene.cast(origin, camera.ray_for_pixel(x, y, grid.width, grid.height), max_depth))
        for x in xs
    ]


class Renderer:
    """Renders one scene through one camera at fixed settings.

    The renderer keeps the last rendered image so it can be converted or
    saved after rendering.

    Attributes:
        scene: The scene to render. Must not be modified during render().
        camera: The primary camera.
        settings: Output size, oversampling, depth and worker count.
    """

    def __init__(
        self,
        scene: Scene,
        camera: PinholeCamera,
        settings: RenderSettings,
        chunk_rows: int = DEFAULT_CHUNK_ROWS,
    ) -> None:
        if chunk_rows < 1:
            raise ValueError(f"Chunk rows = {chunk_rows} must be at least 1")
        self.scene = scene
        self.camera = camera
        self.settings = settings
        self._chunk_rows = chunk_rows
        self._image: npt.NDArray[np.float32] | None = None

        if settings.oversampling > 1:
            self._kernel = gaussian_kernel(OVERSAMPLING_SIGMA_SCALE * settings.oversampling)
            padding = kernel_radius(self._kernel)
        else:
            self._kernel = None
            padding = 0

        self._grid = SampleGrid(
            width=settings.width,
            height=settings.height,
            oversampling=settings.oversampling,
            padding=padding,
        )

    @property
    def width(self) -> int:
        """Get the output image width."""
        return self.settings.width

    @property
    def height(self) -> int:
        """Get the output image height."""
        return self.settings.height

    @property
    def grid(self) -> SampleGrid:
        """Get the oversampled grid geometry."""
        return self._grid

    @property
    def image(self) -> npt.NDArray[np.float32]:
        """The last rendered linear image, shape (height, width, 3).

        Raises:
            RuntimeError: If render() has not been called yet.
        """
        if self._image is None:
            raise RuntimeError("Nothing rendered yet; call render() first")
        return self._image

    def trace(self, callback: ProgressCallback | None = None) -> npt.NDArray[np.float32]:
        """Trace every sample of the oversampled grid.

        Args:
            callback: Optional callback called after each finished chunk with
                (rows_traced, total_rows).

        Returns:
            The sample buffer, shape (grid.rows, grid.columns, 3).
        """
        grid = self._grid
        samples = np.zeros((grid.rows, grid.columns, 3), dtype=np.float32)

        chunks = [
            (start, min(start + self._chunk_rows, grid.rows))
            for start in range(0, grid.rows, self._chunk_rows)
        ]
        logger.debug(
            "Tracing %dx%d samples in %d chunks", grid.columns, grid.rows, len(chunks)
        )

        rows_done = 0
        if self.settings.use_processes:
            # Spawned, not forked: the parent may already run Taichi threads
            context = multiprocessing.get_context("spawn")
            with ProcessPoolExecutor(
                max_workers=self.settings.workers, mp_context=context
            ) as executor:
                futures = [
                    executor.submit(
                        trace_chunk,
                        self.scene,
                        self.camera,
                        grid,
                        start,
                        stop,
                        self.settings.max_depth,
                    )
                    for start, stop in chunks
                ]
                for future in as_completed(futures):
                    start, block = future.result()
                    samples[start : start + len(block)] = block
                    rows_done += len(block)
                    if callback is not None:
                        callback(rows_done, grid.rows)
            return samples

        with ThreadPoolExecutor(max_workers=self.settings.workers) as executor:
            futures = [
                executor.submit(
                    trace_rows,
                    self.scene,
                    self.camera,
                    grid,
                    samples,
                    start,
                    stop,
                    self.settings.max_depth,
                )
                for start, stop in chunks
            ]
            for future in as_completed(futures):
                rows_done += future.result()
                if callback is not None:
                    callback(rows_done, grid.rows)

        return samples

    def render(self, callback: ProgressCallback | None = None) -> npt.NDArray[np.float32]:
        """Render the image.

        Args:
            callback: Optional progress callback, see trace().

        Returns:
            Linear float32 image of shape (height, width, 3). Values are not
            clamped.
        """
        settings = self.settings
        logger.info(
            "Rendering %dx%d, oversampling %d, max depth %d",
            settings.width,
            settings.height,
            settings.oversampling,
            settings.max_depth,
        )
        start_time = time.perf_counter()

        samples = self.trace(callback)

        if self._kernel is None:
            image = samples
        else:
            logger.debug(
                "Filtering with %d-tap Gaussian, stride %d",
                len(self._kernel),
                settings.oversampling,
            )
            image = convolve_2d(samples, self._kernel, settings.oversampling)

        self._image = image
        logger.info("Rendered in %.2fs", time.perf_counter() - start_time)
        return image

    def get_image_uint8(self) -> npt.NDArray[np.uint8]:
        """Get the rendered image gamma-encoded as 8-bit RGB."""
        from portaltrace.preview.export import image_to_uint8

        return image_to_uint8(self.image)

    def save_image(self, filepath: str) -> None:
        """Save the rendered image; format chosen from the file suffix."""
        from portaltrace.preview.export import save_image

        save_image(self.image, filepath)

    def __repr__(self) -> str:
        """Return a string representation of the renderer state."""
        return (
            f"Renderer(width={self.width}, height={self.height}, "
            f"oversampling={self.settings.oversampling})"
        )


def render_image(
    scene: Scene,
    camera: PinholeCamera,
    settings: RenderSettings,
    callback: ProgressCallback | None = None,
) -> npt.NDArray[np.float32]:
    """Render a scene and return the linear image, shape (height, width, 3)."""
    return Renderer(scene, camera, settings).render(callback)
