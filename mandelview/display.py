"""
Pygame display surface for rendered frames.

Shows a packed-color pixel buffer at 1:1 scale and draws a short status
message in the lower-right corner. The window is created on the first
frame and reused for every later one.

Window events are only processed when closed() is called, which the
session does between console prompts. While the console blocks on input
the window neither redraws nor reacts to being closed.
"""

import logging

import pygame

from .colormaps import unpack_rgb

logger = logging.getLogger(__name__)


class PygameDisplay:
    """Window that presents one pixel buffer at a time."""

    TEXT_COLOR = (255, 255, 255)
    TEXT_MARGIN = (8, 20)  # distance of the message from the right and bottom edges

    def __init__(self, caption="Mandelbrot Set"):
        self.caption = caption
        self.screen = None
        self.font = None
        self.current_surface = None
        self.message = ""
        self._closed = False

    def _init_pygame(self, width, height):
        """Initialize pygame and create window."""
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(self.caption)
        pygame.font.init()
        self.font = pygame.font.SysFont('Arial', 14)

    def show(self, pixels, message=""):
        """
        Present a frame, replacing the previous one.

        Args:
            pixels: (height, width) array of packed 0xAARRGGBB colors
            message: Status text drawn near the lower-right corner
        """
        height, width = pixels.shape
        if self.screen is None or self.screen.get_size() != (width, height):
            self._init_pygame(width, height)

        # surfarray expects (width, height, 3)
        rgb = unpack_rgb(pixels)
        self.current_surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))
        self.message = message
        self._draw()

    def _draw(self):
        """Draw the current frame."""
        self.screen.blit(self.current_surface, (0, 0))
        if self.message:
            text = self.font.render(self.message, True, self.TEXT_COLOR)
            rect = text.get_rect()
            width, height = self.screen.get_size()
            rect.bottomright = (width - self.TEXT_MARGIN[0], height - self.TEXT_MARGIN[1])
            self.screen.blit(text, rect)
        pygame.display.flip()

    def closed(self):
        """Process pending window events; True once the user closed the window."""
        if self.screen is None:
            return self._closed
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Display window closed")
                self._closed = True
            elif event.type in (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED):
                self._draw()
        return self._closed

    def close(self):
        """Release the window."""
        if self.screen is not None:
            pygame.quit()
            self.screen = None
