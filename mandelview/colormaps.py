"""
Palette definitions for Mandelbrot visualization.

A palette is a numpy array of packed 0xAARRGGBB colors (uint32) with one
entry per iteration count, plus a final sentinel entry for points that
never escaped. The gradient runs hot (red) -> mid (green) -> cold (blue).

Palettes are rebuilt whenever the iteration cap changes, so build_palette
is cheap and returns a fresh array every call.
"""

import numpy as np


OPAQUE = 0xFF000000

HOT_COLOR = 0xFFFF0000        # Red, first gradient entry
MID_COLOR = 0xFF00FF00        # Green, where the two ramps meet
CONVERGED_COLOR = 0xFF0000FF  # Blue, points that never escaped


def pack_argb(red, green, blue):
    """Pack channel arrays (or ints) into opaque 0xAARRGGBB colors."""
    red = np.asarray(red, dtype=np.uint32)
    green = np.asarray(green, dtype=np.uint32)
    blue = np.asarray(blue, dtype=np.uint32)
    return np.uint32(OPAQUE) | (red << 16) | (green << 8) | blue


def build_palette(max_iter):
    """
    Build the iteration-count -> color lookup table.

    The first half of the indices ramps from red to green, the second
    half from green to blue. Both ramps share the slope 510 / max_iter,
    i.e. two full 0-255 ramps spread across the iteration range. For odd
    max_iter the one index left over continues the green -> blue ramp,
    and for max_iter == 1 the only gradient entry is the hot endpoint.

    Args:
        max_iter: Iteration cap (>= 1)

    Returns:
        uint32 array of length max_iter + 1. The last entry is
        CONVERGED_COLOR.

    Raises:
        ValueError if max_iter < 1
    """
    max_iter = int(max_iter)
    if max_iter < 1:
        raise ValueError(f"max_iter must be >= 1, got {max_iter}")

    palette = np.empty(max_iter + 1, dtype=np.uint32)
    half = max(max_iter // 2, 1)  # a single-entry gradient is the hot endpoint
    scale = 510.0 / max_iter

    # Red -> Green
    ramp = (np.arange(half) * scale).astype(np.uint32)
    palette[:half] = pack_argb(255 - ramp, ramp, 0)

    # Green -> Blue, covering the odd leftover slot as well
    ramp = (np.arange(max_iter - half) * scale).astype(np.uint32)
    palette[half:max_iter] = pack_argb(0, 255 - ramp, ramp)

    palette[max_iter] = CONVERGED_COLOR
    return palette


def unpack_rgb(pixels):
    """
    Split packed colors into an (..., 3) uint8 RGB array.

    Used by display adapters; the alpha byte is dropped since every
    palette color is opaque.
    """
    pixels = np.asarray(pixels, dtype=np.uint32)
    rgb = np.empty(pixels.shape + (3,), dtype=np.uint8)
    rgb[..., 0] = (pixels >> 16) & 0xFF  # Red
    rgb[..., 1] = (pixels >> 8) & 0xFF   # Green
    rgb[..., 2] = pixels & 0xFF          # Blue
    return rgb
