"""
Mandelbrot computation functions using Numba JIT compilation.

This module contains the performance-critical functions, all compiled
in nopython mode:
- Pixel -> complex plane coordinate mapping
- Escape-time iteration of z² + c for a single point
- Full grid sweep producing iteration counts
- Palette lookup producing packed colors

The grid sweep is deliberately sequential: each render runs to
completion on the calling thread.
"""

import numpy as np
from numba import jit


ESCAPE_RADIUS_SQ = 4.0  # |z|² threshold for divergence


@jit(nopython=True, cache=True)
def pixel_to_complex(px, py, resolution, center_x, center_y, span):
    """
    Convert a pixel coordinate to a point in the complex plane.

    Pixel (0, 0) is the top-left corner of the view. Rows grow downward
    on screen while the imaginary axis grows upward, hence the flip on y.

    Args:
        px, py: Pixel column and row
        resolution: Width (== height) of the square grid in pixels
        center_x, center_y: Center of the view in the complex plane
        span: Side length of the visible square

    Returns:
        (x, y): Real and imaginary parts
    """
    x = (px * span) / resolution - span / 2.0 + center_x
    y = center_y + span / 2.0 - (py * span) / resolution
    return x, y


@jit(nopython=True, cache=True)
def escape_iteration(cx, cy, max_iter):
    """
    Count iterations of z² + c until |z| exceeds 2.

    Starting from z = 0, returns the index k of the first iteration whose
    result lies outside the escape radius, or max_iter if the orbit stays
    bounded for max_iter iterations.
    """
    x = 0.0
    y = 0.0
    for k in range(max_iter):
        t = x * x - y * y + cx
        y = 2.0 * x * y + cy
        x = t
        if x * x + y * y > ESCAPE_RADIUS_SQ:
            return k
    return max_iter


@jit(nopython=True, cache=True)
def compute_iterations(center_x, center_y, span, resolution, max_iter):
    """
    Compute escape iterations for every pixel of a square view.

    Args:
        center_x, center_y: Center of the view in the complex plane
        span: Side length of the visible square
        resolution: Output grid size in pixels (resolution x resolution)
        max_iter: Iteration cap

    Returns:
        2D int32 array indexed [py, px]; values lie in [0, max_iter].
    """
    result = np.empty((resolution, resolution), dtype=np.int32)
    for py in range(resolution):
        for px in range(resolution):
            cx, cy = pixel_to_complex(px, py, resolution, center_x, center_y, span)
            result[py, px] = escape_iteration(cx, cy, max_iter)
    return result


@jit(nopython=True, cache=True)
def apply_palette(iterations, palette, out):
    """
    Color iteration counts by direct palette lookup.

    Args:
        iterations: 2D array of iteration counts from compute_iterations
        palette: 1D uint32 array with at least max_iter + 1 entries
        out: Output uint32 array of the same shape (modified in place)
    """
    height, width = iterations.shape
    for py in range(height):
        for px in range(width):
            out[py, px] = palette[iterations[py, px]]


def warmup_jit(palette):
    """
    Warm up JIT compilation with a tiny dummy grid.

    Call this once at startup so the first real render is not slowed
    down by compilation.

    Args:
        palette: A palette array to use for warming up apply_palette
    """
    max_iter = palette.shape[0] - 1
    data = compute_iterations(0.0, 0.0, 4.0, 4, max_iter)
    out = np.empty((4, 4), dtype=np.uint32)
    apply_palette(data, palette, out)
