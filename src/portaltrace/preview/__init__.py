"""Preview module for image output.

Components:
    export: Gamma quantization, PPM writer and PNG export

Renders come out of the pipeline in linear light with unclamped values.
The export layer clamps, gamma-encodes (1/2.2) and quantizes them to 8 bits
per channel before writing.

Example:
    >>> from portaltrace.preview import save_image
    >>> save_image(renderer.render(), "output.ppm")
"""

from portaltrace.preview.export import (
    PPMWriter,
    image_to_uint8,
    save_image,
    save_png,
    save_ppm,
)

__all__ = [
    "PPMWriter",
    "image_to_uint8",
    "save_image",
    "save_png",
    "save_ppm",
]
