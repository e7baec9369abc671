"""Viewport of the complex plane and the zoom -> viewport/iteration rules."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .compute import pixel_to_complex

BASE_SPAN = 4.0            # zoom level 1.0 shows [-2, 2] on both axes
DEFAULT_ITERATIONS = 50    # iteration cap of the initial view
ITERATION_BASE = 50
ITERATION_GAIN = 10.0
MAX_ITERATIONS = 1_000_000  # upper bound on any derived iteration cap


@dataclass(frozen=True)
class Viewport:
    """Square window of the complex plane mapped onto the pixel grid."""

    center_x: float
    center_y: float
    span: float

    def __post_init__(self):
        if not math.isfinite(self.span) or self.span <= 0:
            raise ValueError(f"span must be a positive finite number, got {self.span!r}")

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        half = self.span / 2.0
        return (self.center_x - half, self.center_x + half,
                self.center_y - half, self.center_y + half)


def default_viewport(span: float = BASE_SPAN) -> Viewport:
    return Viewport(0.0, 0.0, span)


def to_complex(px: int, py: int, resolution: int, viewport: Viewport) -> tuple[float, float]:
    """Map pixel (px, py) of a resolution x resolution grid into the viewport."""
    x, y = pixel_to_complex(px, py, resolution,
                            float(viewport.center_x), float(viewport.center_y), float(viewport.span))
    return float(x), float(y)


def span_for_zoom(zoom: float, base_span: float = BASE_SPAN) -> float:
    """
    Zoom level 1.0 is the initial view; 2.0 halves the visible window.

    Raises ValueError for a non-positive zoom, or one so small that the
    span overflows to infinity.
    """
    if not zoom > 0:
        raise ValueError(f"zoom must be > 0, got {zoom!r}")
    span = base_span / zoom
    if not math.isfinite(span) or span <= 0:
        raise ValueError(f"zoom {zoom!r} gives an unusable span {span!r}")
    return span


def iterations_for_span(span: float, base: int = ITERATION_BASE, gain: float = ITERATION_GAIN) -> int:
    """
    Iteration cap for a given span; narrower views get more iterations.

    The result is clamped to MAX_ITERATIONS, which also keeps it inside
    the int32 iteration grid.
    """
    if not span > 0:
        raise ValueError(f"span must be > 0, got {span!r}")
    iterations = base + gain / span
    if not math.isfinite(iterations) or iterations >= MAX_ITERATIONS:
        return MAX_ITERATIONS
    return max(1, int(iterations))


def viewport_from_zoom(center_x: float, center_y: float, zoom: float,
                       base_span: float = BASE_SPAN) -> Viewport:
    return Viewport(float(center_x), float(center_y), span_for_zoom(zoom, base_span))
