"""
Main application module for the Mandelbrot visualizer.

Contains the MandelbrotApp class which handles:
- The initial render of the default view
- Reading the next center and zoom level from the input source
- Rendering and presenting each new frame
- Deciding whether the session continues
"""

import argparse
import enum
import logging
import sys

from .config import Settings, apply_overrides, load_settings
from .console import ConsoleInput
from .renderer import MandelbrotRenderer
from .viewport import default_viewport, iterations_for_span, viewport_from_zoom

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    AWAITING_INPUT = "awaiting_input"
    RENDERING = "rendering"
    PRESENTING = "presenting"
    TERMINATED = "terminated"


class MandelbrotApp:
    """
    Interactive session: read a view, render it, show it, repeat.

    The input source must provide read_view() -> (center_x, center_y, zoom)
    and read_continue() -> str. The display must provide show(pixels,
    message), closed() and close().
    """

    def __init__(self, input_source, display, settings=None, renderer=None):
        """
        Initialize the application.

        Args:
            input_source: Supplies view parameters and the continue answer
            display: Presents finished frames
            settings: Settings instance (default: Settings())
            renderer: Renderer to use (default: MandelbrotRenderer at settings.resolution)
        """
        self.settings = settings or Settings()
        self.input_source = input_source
        self.display = display
        self.renderer = renderer or MandelbrotRenderer(self.settings.resolution)

        self.viewport = default_viewport(self.settings.initial_span)
        self.max_iter = self.settings.initial_iterations
        self.last_result = None
        self.frames = 0
        self.state = SessionState.AWAITING_INPUT

    def _set_state(self, state):
        logger.debug("%s -> %s", self.state.name, state.name)
        self.state = state

    def run(self):
        """Run the session until the user stops it. Returns the exit code."""
        try:
            self._render_and_present()
            while True:
                if self.display.closed():
                    break
                self._set_state(SessionState.AWAITING_INPUT)
                try:
                    center_x, center_y, zoom = self.input_source.read_view()
                except EOFError:
                    logger.info("Input exhausted, stopping")
                    break
                self.viewport, self.max_iter = self.next_view(center_x, center_y, zoom)
                self._render_and_present()

                try:
                    answer = self.input_source.read_continue()
                except EOFError:
                    logger.info("Input exhausted, stopping")
                    break
                if not self.wants_to_continue(answer):
                    break
        finally:
            self._terminate()
        return 0

    def next_view(self, center_x, center_y, zoom):
        """Derive the viewport and iteration cap for a requested center and zoom."""
        viewport = viewport_from_zoom(center_x, center_y, zoom, self.settings.initial_span)
        max_iter = iterations_for_span(viewport.span,
                                       self.settings.iteration_base,
                                       self.settings.iteration_gain)
        return viewport, max_iter

    def wants_to_continue(self, answer):
        return answer.strip().lower() == self.settings.affirmative.strip().lower()

    def _render_and_present(self):
        self._set_state(SessionState.RENDERING)
        result = self.renderer.render(self.viewport, self.max_iter)

        self._set_state(SessionState.PRESENTING)
        self.display.show(result.pixels, result.message)
        self.last_result = result
        self.frames += 1
        logger.debug("Frame %d presented: %s", self.frames, result.message.strip())

    def _terminate(self):
        if self.state is SessionState.TERMINATED:
            return
        self._set_state(SessionState.TERMINATED)
        self.display.close()
        logger.info("Session ended after %d frame(s)", self.frames)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="mandelview",
        description="Interactively recenter and zoom into the Mandelbrot set.")
    parser.add_argument('--resolution', type=int, dest='resolution', metavar='PIXELS',
                        help='width and height of the rendered image in pixels')
    parser.add_argument('--settings', type=str, dest='settings_path', metavar='PATH',
                        help='JSON file overriding the default settings')
    parser.add_argument('--yes-token', type=str, dest='affirmative', metavar='TOKEN',
                        help='answer that continues the session (case-insensitive)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable debug logging')
    return parser


def run(settings=None, input_source=None, display=None):
    """
    Run the Mandelbrot visualizer.

    Args:
        settings: Settings instance (default: loaded from settings.json)
        input_source: Input source (default: ConsoleInput on stdin)
        display: Display surface (default: PygameDisplay)

    Returns:
        Process exit code
    """
    settings = settings or load_settings()
    if input_source is None:
        input_source = ConsoleInput(affirmative=settings.affirmative, base_span=settings.initial_span)
    if display is None:
        from .display import PygameDisplay
        display = PygameDisplay(settings.caption)

    app = MandelbrotApp(input_source, display, settings)
    app.renderer.warmup()
    try:
        return app.run()
    except KeyboardInterrupt:
        return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings(args.settings_path)
        settings = apply_overrides(settings, resolution=args.resolution, affirmative=args.affirmative)
    except ValueError as e:
        parser.error(str(e))
    sys.exit(run(settings))
