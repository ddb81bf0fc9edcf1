"""Image export utilities for rendered images.

This module converts linear renders to 8-bit display values and writes them
to disk.

Supported formats:
    - PPM (binary P6, written directly)
    - PNG (8-bit via Pillow)

The display transfer clamps each channel to [0, 1], applies the 1/2.2
power law and truncates to 8 bits; it matches Color.to_display_bytes.

Example:
    >>> from portaltrace.preview.export import save_image
    >>> image = renderer.render()
    >>> save_image(image, "output.ppm")
    >>> save_image(image, "output.png")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from types import TracebackType
from typing import BinaryIO

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from portaltrace.config import DEFAULT_GAMMA

logger = logging.getLogger(__name__)

PPM_MAX_VALUE = 255


def image_to_uint8(
    image: npt.NDArray[np.floating],
    *,
    gamma: float = DEFAULT_GAMMA,
) -> npt.NDArray[np.uint8]:
    """Convert a linear float image to gamma-encoded uint8.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Display gamma (default 2.2).

    Returns:
        8-bit image array of shape (H, W, 3).
    """
    clamped = np.clip(np.asarray(image, dtype=np.float64), 0.0, 1.0)
    encoded = np.power(clamped, 1.0 / gamma) * 255.0
    return encoded.astype(np.uint8)


class PPMWriter:
    """Streaming writer for binary PPM (P6) images.

    The header ("P6", width, height, max value) is written on construction;
    pixels follow as raw RGB byte triples, left to right and top to bottom.

    Example:
        >>> with PPMWriter("out.ppm", 2, 1) as writer:
        ...     writer.write_pixel(255, 0, 0)
        ...     writer.write_pixel(0, 0, 255)
    """

    def __init__(self, filepath: str | Path, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions ({width}x{height}) must be positive")
        self.width = width
        self.height = height
        self._pixels_written = 0
        self._file: BinaryIO = open(filepath, "wb")
        # Exactly one whitespace character between header and pixel data
        self._file.write(f"P6\n{width} {height}\n{PPM_MAX_VALUE}\n".encode("ascii"))

    @property
    def pixels_remaining(self) -> int:
        return self.width * self.height - self._pixels_written

    def _reserve(self, count: int) -> None:
        if count > self.pixels_remaining:
            raise ValueError(
                f"Writing {count} pixels exceeds the {self.width}x{self.height} image "
                f"({self.pixels_remaining} remaining)"
            )
        self._pixels_written += count

    def write_pixel(self, red: int, green: int, blue: int) -> None:
        """Append one RGB triple."""
        self._reserve(1)
        self._file.write(bytes((red, green, blue)))

    def write_pixels(self, pixels: Iterable[tuple[int, int, int]]) -> None:
        """Append RGB triples in row-major order."""
        for red, green, blue in pixels:
            self.write_pixel(red, green, blue)

    def write_image(self, image: npt.NDArray[np.uint8]) -> None:
        """Append a whole uint8 array of shape (H, W, 3) in one write."""
        data = np.ascontiguousarray(image, dtype=np.uint8)
        self._reserve(data.shape[0] * data.shape[1])
        self._file.write(data.tobytes())

    def close(self) -> None:
        if self.pixels_remaining:
            logger.warning("Closing PPM with %d pixels unwritten", self.pixels_remaining)
        self._file.close()

    def __enter__(self) -> PPMWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def save_ppm(
    image: npt.NDArray[np.floating],
    filepath: str | Path,
    *,
    gamma: float = DEFAULT_GAMMA,
) -> None:
    """Save a linear image as a binary PPM file.

    Args:
        image: Linear image array of shape (H, W, 3).
        filepath: Output file path.
        gamma: Display gamma (default 2.2).
    """
    image_uint8 = image_to_uint8(image, gamma=gamma)
    height, width = image_uint8.shape[:2]
    with PPMWriter(filepath, width, height) as writer:
        writer.write_image(image_uint8)


def save_png(
    image: npt.NDArray[np.floating],
    filepath: str | Path,
    *,
    gamma: float = DEFAULT_GAMMA,
) -> None:
    """Save a linear image as an 8-bit PNG file.

    Args:
        image: Linear image array of shape (H, W, 3).
        filepath: Output file path.
        gamma: Display gamma (default 2.2).
    """
    image_uint8 = image_to_uint8(image, gamma=gamma)

    # Save using Pillow
    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(filepath)


_SAVERS = {
    ".ppm": save_ppm,
    ".png": save_png,
}


def save_image(
    image: npt.NDArray[np.floating],
    filepath: str | Path,
    *,
    gamma: float = DEFAULT_GAMMA,
) -> None:
    """Save a linear image, choosing the format from the file suffix.

    Raises:
        ValueError: If the suffix is neither .ppm nor .png.
    """
    suffix = Path(filepath).suffix.lower()
    saver = _SAVERS.get(suffix)
    if saver is None:
        raise ValueError(
            f"Unsupported image format {suffix!r}; expected one of {sorted(_SAVERS)}"
        )
    saver(image, filepath, gamma=gamma)
    logger.info("Saved %s", filepath)
