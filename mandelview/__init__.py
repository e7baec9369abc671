"""
Mandelbrot Set Viewer Package

An interactive Mandelbrot set explorer: type a new center and zoom level
on the console and the set is re-rendered into a Pygame window, using
Numba for JIT-compiled computation.

Quick Start:
    from mandelview import run
    run()

Or from command line:
    python -m mandelview

Package Structure:
    - compute.py: JIT-compiled coordinate mapping and escape-time iteration
    - colormaps.py: Red -> green -> blue iteration palette
    - viewport.py: Viewport type and zoom -> span/iteration rules
    - renderer.py: Full-frame rendering with timing
    - config.py: Settings defaults, settings.json and overrides
    - console.py: Console input source
    - display.py: Pygame display surface
    - app.py: Interactive session loop and command-line entry point

Controls:
    - Enter center X, center Y and zoom level (1 = 100%, 2 = 200%, ...)
    - Answer "y" to continue, anything else to quit
    - Closing the window ends the session after the current prompt
"""

from .app import run, main, MandelbrotApp, SessionState
from .renderer import MandelbrotRenderer, RenderResult, render
from .colormaps import build_palette, CONVERGED_COLOR, HOT_COLOR
from .viewport import Viewport, to_complex
from .compute import escape_iteration
from .config import Settings, load_settings

__version__ = "1.0.0"
__all__ = [
    "run",
    "main",
    "MandelbrotApp",
    "SessionState",
    "MandelbrotRenderer",
    "RenderResult",
    "render",
    "build_palette",
    "CONVERGED_COLOR",
    "HOT_COLOR",
    "Viewport",
    "to_complex",
    "escape_iteration",
    "Settings",
    "load_settings",
]
