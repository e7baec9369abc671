"""
Synchronous Mandelbrot renderer.

The MandelbrotRenderer class handles:
- Building the palette for the current iteration cap
- Sweeping the full pixel grid through the escape-time kernel
- Coloring the result into a packed-color pixel buffer
- Timing each render for the on-screen status message

A render either completes fully or raises; no partial buffer is
ever returned.
"""

import logging
import time
from dataclasses import dataclass

import numpy as np

from .colormaps import build_palette
from .compute import apply_palette, compute_iterations, warmup_jit
from .viewport import DEFAULT_ITERATIONS, Viewport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    """Output of a single render pass."""

    pixels: np.ndarray       # (resolution, resolution) uint32, indexed [py, px]
    iterations: np.ndarray   # (resolution, resolution) int32 escape counts
    palette: np.ndarray
    viewport: Viewport
    max_iter: int
    elapsed_ms: float

    @property
    def message(self):
        """Status line shown in the lower-right corner of the display."""
        return f" done in {int(self.elapsed_ms)}ms."


def _check_args(resolution, max_iter):
    if int(resolution) < 1:
        raise ValueError(f"resolution must be >= 1, got {resolution}")
    if int(max_iter) < 1:
        raise ValueError(f"max_iter must be >= 1, got {max_iter}")


def render(viewport, resolution, max_iter):
    """
    Render the Mandelbrot set for a viewport.

    Args:
        viewport: Viewport to map onto the pixel grid
        resolution: Width (== height) of the output in pixels
        max_iter: Iteration cap

    Returns:
        (resolution, resolution) uint32 array of packed 0xAARRGGBB colors
    """
    return MandelbrotRenderer(resolution).render(viewport, max_iter).pixels


class MandelbrotRenderer:
    """
    Renders square views of the Mandelbrot set at a fixed resolution.

    Usage:
        renderer = MandelbrotRenderer(1024)
        result = renderer.render(Viewport(0.0, 0.0, 4.0), max_iter=50)
        display.show(result.pixels, result.message)

    Attributes:
        resolution: Output width and height in pixels
    """

    def __init__(self, resolution):
        """
        Initialize the renderer.

        Args:
            resolution: Output width and height in pixels (>= 1)
        """
        _check_args(resolution, 1)
        self.resolution = int(resolution)

    def warmup(self):
        """Compile the JIT kernels ahead of the first real render."""
        logger.debug("Compiling render kernels")
        warmup_jit(build_palette(DEFAULT_ITERATIONS))

    def render(self, viewport, max_iter):
        """
        Render one full frame.

        Args:
            viewport: Viewport to map onto the pixel grid
            max_iter: Iteration cap for this frame

        Returns:
            RenderResult with the pixel buffer, raw iterations and timing
        """
        _check_args(self.resolution, max_iter)
        max_iter = int(max_iter)
        logger.debug("Rendering x=[%g, %g] y=[%g, %g] at %dx%d with max_iter=%d",
                     *viewport.bounds, self.resolution, self.resolution, max_iter)

        start = time.perf_counter()
        palette = build_palette(max_iter)
        data = compute_iterations(float(viewport.center_x), float(viewport.center_y),
                                  float(viewport.span), self.resolution, max_iter)
        pixels = np.empty(data.shape, dtype=np.uint32)
        apply_palette(data, palette, pixels)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        logger.debug("Render finished in %.1f ms", elapsed_ms)
        return RenderResult(
            pixels=pixels,
            iterations=data,
            palette=palette,
            viewport=viewport,
            max_iter=max_iter,
            elapsed_ms=elapsed_ms,
        )
