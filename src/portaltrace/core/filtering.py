"""Gaussian reconstruction filter and separable strided convolution.

This module implements the anti-aliasing stage of the render pipeline. An
oversampled image is low-pass filtered with a normalized Gaussian kernel and
decimated in the same step: the horizontal pass convolves every row and
keeps every stride-th output, then the vertical pass does the same over
columns.

Both passes are Taichi kernels operating directly on NumPy arrays. The
outermost loop of each kernel is parallel: the horizontal pass over rows,
the vertical pass over columns, so every parallel iteration owns a disjoint
row or column of the output.

Taichi must be initialized (see init_backend) before convolve_2d is called.

Example:
    >>> import numpy as np
    >>> from portaltrace.core.filtering import init_backend, gaussian_kernel, convolve_2d
    >>> init_backend()
    >>> kernel = gaussian_kernel(1.2)
    >>> padded = np.ones((8 * 3 + len(kernel) - 1, 8 * 3 + len(kernel) - 1, 3), np.float32)
    >>> convolve_2d(padded, kernel, stride=3).shape
    (8, 8, 3)
"""

import math

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3

# Kernel half-width in standard deviations
KERNEL_RADIUS_SIGMAS = 3.0


def init_backend(cpu_threads: int | None = None) -> None:
    """Initialize the Taichi runtime used by the filter kernels.

    Args:
        cpu_threads: Optional cap on Taichi's CPU worker threads.
    """
    options = {}
    if cpu_threads is not None:
        options["cpu_max_num_threads"] = cpu_threads
    ti.init(arch=ti.cpu, **options)


def gaussian_kernel(sigma: float) -> npt.NDArray[np.float64]:
    """Generate a normalized, symmetric 1-D Gaussian kernel.

    The kernel has odd length 2r + 1 with r = max(1, ceil(3 * sigma)) and its
    weights sum to 1.

    Args:
        sigma: Standard deviation in samples.

    Returns:
        The kernel weights.

    Raises:
        ValueError: If sigma is not positive.
    """
    if not sigma > 0.0:
        raise ValueError(f"Gaussian sigma = {sigma} must be positive")

    radius = max(1, math.ceil(KERNEL_RADIUS_SIGMAS * sigma))
    offsets = np.arange(-radius, radius + 1, dtype=np.float64)
    weights = np.exp(-(offsets**2) / (2.0 * sigma * sigma))
    return weights / weights.sum()


def kernel_radius(kernel: npt.NDArray[np.floating]) -> int:
    """Number of samples on each side of the kernel center."""
    return (len(kernel) - 1) // 2


@ti.kernel
def _convolve_rows(
    source: ti.types.ndarray(dtype=vec3, ndim=2),
    target: ti.types.ndarray(dtype=vec3, ndim=2),
    weights: ti.types.ndarray(dtype=ti.f32, ndim=1),
    stride: ti.i32,
):
    for row in range(target.shape[0]):
        for col in range(target.shape[1]):
            acc = vec3(0.0, 0.0, 0.0)
            for k in range(weights.shape[0]):
                acc += weights[k] * source[row, col * stride + k]
            target[row, col] = acc


@ti.kernel
def _convolve_columns(
    source: ti.types.ndarray(dtype=vec3, ndim=2),
    target: ti.types.ndarray(dtype=vec3, ndim=2),
    weights: ti.types.ndarray(dtype=ti.f32, ndim=1),
    stride: ti.i32,
):
    for col in range(target.shape[1]):
        for row in range(target.shape[0]):
            acc = vec3(0.0, 0.0, 0.0)
            for k in range(weights.shape[0]):
                acc += weights[k] * source[row * stride + k, col]
            target[row, col] = acc


def _strided_length(input_length: int, kernel_length: int, stride: int) -> int:
    return (input_length - kernel_length) // stride + 1


def convolve_2d(
    image: npt.NDArray[np.floating],
    kernel: npt.NDArray[np.floating],
    stride: int,
) -> npt.NDArray[np.float32]:
    """Filter and decimate an image with a separable kernel.

    Output pixel (i, j) is the kernel-weighted sum of the input block whose
    top-left sample is (i * stride, j * stride); only positions where the
    kernel fits entirely inside the input are produced.

    Args:
        image: Input image of shape (H, W, 3).
        kernel: 1-D kernel applied along both axes.
        stride: Decimation factor (1 filters without downsampling).

    Returns:
        Filtered image of shape ((H - K) // stride + 1, (W - K) // stride + 1, 3)
        with K = len(kernel), dtype float32.

    Raises:
        ValueError: If the image is smaller than the kernel, or stride < 1.
    """
    if stride < 1:
        raise ValueError(f"Stride = {stride} must be at least 1")

    height, width = image.shape[0], image.shape[1]
    kernel_length = len(kernel)
    if height < kernel_length or width < kernel_length:
        raise ValueError(
            f"Image ({width}x{height}) is smaller than the filter kernel "
            f"({kernel_length} samples)"
        )

    source = np.ascontiguousarray(image, dtype=np.float32)
    weights = np.ascontiguousarray(kernel, dtype=np.float32)

    out_width = _strided_length(width, kernel_length, stride)
    out_height = _strided_length(height, kernel_length, stride)

    horizontal = np.empty((height, out_width, 3), dtype=np.float32)
    _convolve_rows(source, horizontal, weights, stride)

    result = np.empty((out_height, out_width, 3), dtype=np.float32)
    _convolve_columns(horizontal, result, weights, stride)

    return result
